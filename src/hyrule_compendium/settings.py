from typing import Literal, Tuple

from pydantic import AnyHttpUrl, Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from hyrule_compendium.errors import CompendiumError, InvalidBaseUrlError

DEFAULT_BASE_URL = "https://botw-compendium.herokuapp.com/api/v2/"


class CompendiumSettings(BaseSettings):

    # ---- API ----
    base_url: AnyHttpUrl = Field(default=DEFAULT_BASE_URL, validate_default=True)
    timeout: float = 10.0

    # ---- retries (off unless asked for) ----
    total_retries: int = 0
    backoff_factor: float = 0.5
    status_forcelist: Tuple[int, ...] = (429, 500, 502, 503, 504)

    # ---- app/runtime ----
    verify_ssl: bool = True
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="HYRULE_",   # HYRULE_BASE_URL, HYRULE_TIMEOUT, etc.
        extra="ignore",
    )


def get_settings() -> CompendiumSettings:
    """
    Build settings from the environment and .env on each call.

    Raises:
        InvalidBaseUrlError: if HYRULE_BASE_URL is not an http(s) url
        CompendiumError: for any other invalid setting
    """
    try:
        return CompendiumSettings()
    except ValidationError as e:
        for error in e.errors():
            if error["loc"][:1] == ("base_url",):
                raise InvalidBaseUrlError(str(error.get("input", ""))) from e
        raise CompendiumError(f"Invalid compendium settings: {e}") from e
