"""Pydantic models for the compendium client.

This package provides the request inputs, the entry records and the
response shapes returned by the Hyrule Compendium API.

Usage:
    from hyrule_compendium.models import EntryIdentifier, MonsterEntry
    from hyrule_compendium.models import CategoryResult, CompendiumCategory
"""

from hyrule_compendium.models.entries import (
    CommonEntry,
    CreatureEntry,
    EquipmentEntry,
    MaterialEntry,
    MonsterEntry,
    TreasureEntry,
)
from hyrule_compendium.models.inputs import (
    CompendiumCategory,
    EntryIdentifier,
    GameMode,
)
from hyrule_compendium.models.responses import (
    AllCreatureEntries,
    AllStandardEntries,
    ApiResponse,
    CategoryResult,
    EntryResponse,
    entry_category,
)

__all__ = [
    # Inputs
    "EntryIdentifier",
    "CompendiumCategory",
    "GameMode",
    # Entries
    "CommonEntry",
    "MonsterEntry",
    "CreatureEntry",
    "MaterialEntry",
    "EquipmentEntry",
    "TreasureEntry",
    # Responses
    "ApiResponse",
    "EntryResponse",
    "AllCreatureEntries",
    "AllStandardEntries",
    "CategoryResult",
    "entry_category",
]
