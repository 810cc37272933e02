import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, List, Optional

from pydantic import BaseModel

from hyrule_compendium import logging_setup
from hyrule_compendium.adapters.compendium.client import CompendiumAPIClient
from hyrule_compendium.adapters.compendium.compendium import CompendiumAPI
from hyrule_compendium.domain.inputs import CompendiumCategory, EntryIdentifier
from hyrule_compendium.domain.responses import CategoryResult
from hyrule_compendium.errors import CompendiumError
from hyrule_compendium.io.writers import atomic_write_json
from hyrule_compendium.settings import get_settings

logger = logging.getLogger(__name__)

ENTRY_KINDS = ("any", "monster", "creature", "material", "equipment", "treasure")


def parse_identifier(raw: str) -> EntryIdentifier:
    """Digits are an id, anything else is a name."""
    raw = raw.strip()
    if raw.isdigit():
        return EntryIdentifier.by_id(int(raw))
    return EntryIdentifier.by_name(raw)


def to_jsonable(result: Any) -> Any:
    if isinstance(result, CategoryResult):
        return to_jsonable(result.entries)
    if isinstance(result, BaseModel):
        return result.model_dump(mode="json")
    if isinstance(result, list):
        return [to_jsonable(item) for item in result]
    return result


def fetch(api: CompendiumAPI, a: argparse.Namespace) -> Any:
    if a.command == "entry":
        identifier = parse_identifier(a.identifier)
        if a.master_mode:
            return api.master_mode_monster(identifier)
        if a.kind == "any":
            return api.entry(identifier)
        return getattr(api, a.kind)(identifier)
    if a.command == "category":
        return api.category(CompendiumCategory.from_name(a.name))
    if a.master_mode:
        return api.all_master_mode_entries()
    return api.all_entries()


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Fetch data from the Hyrule Compendium API")
    p.add_argument("--base_url", help="Override the API base url")
    p.add_argument("--out", help="Write the JSON result to this file instead of stdout")
    p.add_argument("--log_level", default=None,
                   help="Logging level (DEBUG, INFO, WARNING, ERROR); defaults to HYRULE_LOG_LEVEL")
    sub = p.add_subparsers(dest="command", required=True)

    entry = sub.add_parser("entry", help="Fetch a single entry by id or name")
    entry.add_argument("identifier", help="Entry id (digits) or name")
    entry.add_argument("--kind", choices=ENTRY_KINDS, default="any", help="Expected entry type")
    entry.add_argument("--master_mode", action="store_true",
                       help="Look the monster up in master mode (only with --kind any or monster)")

    category = sub.add_parser("category", help="Fetch every entry of a category")
    category.add_argument("name", help="Category name, e.g. monsters or treasure")

    everything = sub.add_parser("all", help="Fetch every entry")
    everything.add_argument("--master_mode", action="store_true", help="Fetch master mode entries instead")
    return p


def main(argv: Optional[List[str]] = None) -> int:
    p = build_parser()
    a = p.parse_args(argv)
    if a.command == "entry" and a.master_mode and a.kind not in ("any", "monster"):
        p.error(f"--master_mode only holds monsters, it cannot be combined with --kind {a.kind}")

    try:
        cfg = get_settings()
    except CompendiumError as e:
        logging_setup.setup_logging(a.log_level)
        logger.error(str(e))
        return 1

    # Initialize logging
    logging_setup.setup_logging(a.log_level, settings=cfg)

    try:
        with CompendiumAPI(CompendiumAPIClient(base_url=a.base_url, settings=cfg)) as api:
            result = fetch(api, a)
    except (CompendiumError, ValueError) as e:
        logger.error(str(e))
        return 1

    data = to_jsonable(result)
    if a.out:
        atomic_write_json(data, Path(a.out))
        logger.info(f"Wrote {a.out}")
    else:
        json.dump(data, sys.stdout, ensure_ascii=False, indent=2)
        sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
