import logging
import os
from typing import Optional

from hyrule_compendium.settings import CompendiumSettings

def setup_logging(level: Optional[str] = None,
                  settings: Optional[CompendiumSettings] = None) -> None:
    """
    Minimal logging setup.
    - Level precedence: explicit level, then settings.log_level (HYRULE_LOG_LEVEL),
      then the LOG_LEVEL env var, then INFO.
    - Configures a single console handler via logging.basicConfig.
    """
    level_name = (level or (settings.log_level if settings else None)
                  or os.getenv("LOG_LEVEL") or "INFO").upper()
    # Fallback to INFO if user passes something weird
    level_value = getattr(logging, level_name, None)
    if not isinstance(level_value, int):
        level_value = logging.INFO

    logging.basicConfig(
        level=level_value,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
