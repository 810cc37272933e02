# Typed access to the compendium endpoints
from hyrule_compendium.adapters.compendium.client import CompendiumAPIClient
from hyrule_compendium.domain.inputs import CompendiumCategory, EntryIdentifier, GameMode
from hyrule_compendium.domain.models import (
    CreatureEntry,
    EquipmentEntry,
    MaterialEntry,
    MonsterEntry,
    TreasureEntry,
)
from hyrule_compendium.domain.responses import (
    AllStandardEntries,
    AnyEntry,
    CategoryResult,
    parse_category_entries,
    parse_entry_response,
)
from hyrule_compendium.errors import ResponseParsingError
from pydantic import BaseModel, TypeAdapter, ValidationError
from typing import Any, Callable, List, Optional, Type, TypeVar, Union
import logging


logger = logging.getLogger(__name__)

T = TypeVar("T")
Identifier = Union[EntryIdentifier, int, str]

_MASTER_MODE_ENTRIES: TypeAdapter = TypeAdapter(List[MonsterEntry])


class CompendiumAPI():
    """Wrapper class for Hyrule Compendium API interactions"""
    def __init__(self, client: Optional[CompendiumAPIClient] = None):
        self._client: CompendiumAPIClient = client or CompendiumAPIClient()

    def __enter__(self) -> "CompendiumAPI":
        return self

    def __exit__(self, *exc_info) -> None:
        self._client.close()

    def _fetch_data(self, path: str, parse: Callable[[Any], T]) -> T:
        """Request a path, strip the {"data": ...} envelope and decode the payload."""
        response = self._client.get(path)
        if not isinstance(response, dict) or "data" not in response:
            logger.error(f"Response for '{path}' has no 'data' field: {str(response)[:200]}")
            raise ResponseParsingError(f"Response for '{path}' has no 'data' field")
        try:
            return parse(response["data"])
        except ValidationError as e:
            logger.error(f"Unexpected payload for '{path}': {e.error_count()} validation error(s)")
            raise ResponseParsingError(f"There was an error in parsing the response for '{path}'") from e

    def _fetch_entry(self, identifier: Identifier, model: Type[BaseModel],
                     mode: GameMode = GameMode.STANDARD):
        path = self._client.entry_path(EntryIdentifier.coerce(identifier), mode)
        return self._fetch_data(path, model.model_validate)

    def entry(self, identifier: Identifier) -> AnyEntry:
        """Fetches an entry of any category; the model is chosen from its category tag"""
        path = self._client.entry_path(EntryIdentifier.coerce(identifier))
        return self._fetch_data(path, parse_entry_response)

    def monster(self, identifier: Identifier) -> MonsterEntry:
        return self._fetch_entry(identifier, MonsterEntry)

    def master_mode_monster(self, identifier: Identifier) -> MonsterEntry:
        """Fetches a monster that only exists in master mode"""
        return self._fetch_entry(identifier, MonsterEntry, GameMode.MASTER_MODE)

    def treasure(self, identifier: Identifier) -> TreasureEntry:
        return self._fetch_entry(identifier, TreasureEntry)

    def creature(self, identifier: Identifier) -> CreatureEntry:
        return self._fetch_entry(identifier, CreatureEntry)

    def material(self, identifier: Identifier) -> MaterialEntry:
        return self._fetch_entry(identifier, MaterialEntry)

    def equipment(self, identifier: Identifier) -> EquipmentEntry:
        return self._fetch_entry(identifier, EquipmentEntry)

    def category(self, category: Union[CompendiumCategory, str]) -> CategoryResult:
        """Fetches every entry of a category"""
        if not isinstance(category, CompendiumCategory):
            category = CompendiumCategory.from_name(category)
        path = self._client.category_path(category)
        return self._fetch_data(path, lambda data: parse_category_entries(category, data))

    def all_entries(self) -> AllStandardEntries:
        """Fetches every entry in the compendium (excluding master mode)"""
        return self._fetch_data(self._client.all_entries_path(), AllStandardEntries.model_validate)

    def all_master_mode_entries(self) -> List[MonsterEntry]:
        """Fetches every master mode entry, which are all monsters"""
        return self._fetch_data(
            self._client.all_entries_path(GameMode.MASTER_MODE),
            _MASTER_MODE_ENTRIES.validate_python,
        )
