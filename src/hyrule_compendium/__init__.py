"""Typed client for the Hyrule Compendium API.

Usage:
    from hyrule_compendium import CompendiumClient, EntryIdentifier, MonsterEntry

    with CompendiumClient.default() as client:
        entry = client.entry(EntryIdentifier.by_name("silver moblin"))
        if isinstance(entry, MonsterEntry):
            print(entry.name, entry.drops)
"""

from hyrule_compendium.client import DEFAULT_BASE_URL, CompendiumClient
from hyrule_compendium.exceptions import (
    CompendiumError,
    InvalidBaseUrlError,
    InvalidResourcePathError,
    NoDataFoundError,
    RequestError,
    ResponseParsingError,
    ServerError,
)
from hyrule_compendium.models import (
    AllCreatureEntries,
    AllStandardEntries,
    CategoryResult,
    CommonEntry,
    CompendiumCategory,
    CreatureEntry,
    EntryIdentifier,
    EntryResponse,
    EquipmentEntry,
    GameMode,
    MaterialEntry,
    MonsterEntry,
    TreasureEntry,
    entry_category,
)

__all__ = [
    # Client
    "CompendiumClient",
    "DEFAULT_BASE_URL",
    # Errors
    "CompendiumError",
    "InvalidBaseUrlError",
    "InvalidResourcePathError",
    "RequestError",
    "ServerError",
    "NoDataFoundError",
    "ResponseParsingError",
    # Models
    "EntryIdentifier",
    "CompendiumCategory",
    "GameMode",
    "CommonEntry",
    "MonsterEntry",
    "CreatureEntry",
    "MaterialEntry",
    "EquipmentEntry",
    "TreasureEntry",
    "EntryResponse",
    "AllCreatureEntries",
    "AllStandardEntries",
    "CategoryResult",
    "entry_category",
]
