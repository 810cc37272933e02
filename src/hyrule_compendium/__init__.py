"""Client library for the Hyrule Compendium API."""

from hyrule_compendium.adapters.compendium.client import CompendiumAPIClient
from hyrule_compendium.adapters.compendium.compendium import CompendiumAPI
from hyrule_compendium.domain.inputs import CompendiumCategory, EntryIdentifier, GameMode
from hyrule_compendium.errors import (
    CompendiumError,
    InvalidBaseUrlError,
    NoDataFoundError,
    RequestError,
    ResourceUrlError,
    ResponseParsingError,
    ServerError,
)

__all__ = [
    "CompendiumAPI",
    "CompendiumAPIClient",
    "CompendiumCategory",
    "EntryIdentifier",
    "GameMode",
    "CompendiumError",
    "InvalidBaseUrlError",
    "NoDataFoundError",
    "RequestError",
    "ResourceUrlError",
    "ResponseParsingError",
    "ServerError",
]
