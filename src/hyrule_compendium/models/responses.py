"""Response shapes returned by the compendium API.

The API wraps every payload as ``{"data": <payload>}``. The payload is one
of three shapes:

- a single entry, whose concrete type is selected by its ``category`` field
- a category listing, a list of one entry type (creatures are split into
  food and non-food buckets)
- the full standard catalog, one collection per category
"""

from dataclasses import dataclass
from typing import Annotated, Any, Union

from pydantic import BaseModel, ConfigDict, Discriminator, Tag, TypeAdapter

from hyrule_compendium.models.entries import (
    CreatureEntry,
    EquipmentEntry,
    MaterialEntry,
    MonsterEntry,
    TreasureEntry,
    _EntryBase,
)
from hyrule_compendium.models.inputs import CompendiumCategory


class ApiResponse(BaseModel):
    """The ``{"data": ...}`` envelope around every payload.

    ``data`` is decoded in a second step against the target type of the
    request, so the envelope only checks that the key is present.
    """

    data: Any


# =============================================================================
# Single entry
# =============================================================================


def _entry_discriminator(value: Any) -> str | None:
    if isinstance(value, dict):
        category = value.get("category")
        return category if isinstance(category, str) else None
    if isinstance(value, _EntryBase):
        return value.CATEGORY.value
    return None


EntryResponse = Annotated[
    Union[
        Annotated[MonsterEntry, Tag(CompendiumCategory.MONSTER.value)],
        Annotated[CreatureEntry, Tag(CompendiumCategory.CREATURE.value)],
        Annotated[EquipmentEntry, Tag(CompendiumCategory.EQUIPMENT.value)],
        Annotated[TreasureEntry, Tag(CompendiumCategory.TREASURE.value)],
        Annotated[MaterialEntry, Tag(CompendiumCategory.MATERIAL.value)],
    ],
    Discriminator(_entry_discriminator),
]
"""Any single entry, selected by the payload's ``category`` field."""


def entry_category(entry: _EntryBase) -> CompendiumCategory:
    """Return the category a decoded entry belongs to."""
    return entry.CATEGORY


# =============================================================================
# Collections
# =============================================================================


class AllCreatureEntries(BaseModel):
    """All creatures, split into food and non-food buckets.

    Whole buckets can be replaced by assignment; the entries themselves
    stay immutable.
    """

    model_config = ConfigDict(validate_assignment=True)

    food: list[CreatureEntry]
    non_food: list[CreatureEntry]

    def all(self) -> list[CreatureEntry]:
        """Both buckets, food first."""
        return [*self.food, *self.non_food]

    def __len__(self) -> int:
        return len(self.food) + len(self.non_food)


class AllStandardEntries(BaseModel):
    """The full standard (non master mode) catalog in one payload."""

    model_config = ConfigDict(validate_assignment=True)

    creatures: AllCreatureEntries
    equipment: list[EquipmentEntry]
    materials: list[MaterialEntry]
    monsters: list[MonsterEntry]
    treasure: list[TreasureEntry]

    def count(self) -> int:
        """Total number of entries across every category."""
        return (
            len(self.creatures)
            + len(self.equipment)
            + len(self.materials)
            + len(self.monsters)
            + len(self.treasure)
        )


CategoryEntries = Union[
    list[TreasureEntry],
    list[MonsterEntry],
    list[MaterialEntry],
    list[EquipmentEntry],
    AllCreatureEntries,
]


@dataclass(frozen=True)
class CategoryResult:
    """The entries of one category, tagged with the category requested.

    For ``CompendiumCategory.CREATURE`` the entries are an
    ``AllCreatureEntries``; for every other category they are a list of the
    matching entry type.
    """

    category: CompendiumCategory
    entries: CategoryEntries

    def _entries_for(self, category: CompendiumCategory) -> Any:
        if self.category is not category:
            raise ValueError(
                f"Result holds {self.category.value}, not {category.value}"
            )
        return self.entries

    @property
    def treasure(self) -> list[TreasureEntry]:
        return self._entries_for(CompendiumCategory.TREASURE)

    @property
    def monsters(self) -> list[MonsterEntry]:
        return self._entries_for(CompendiumCategory.MONSTER)

    @property
    def materials(self) -> list[MaterialEntry]:
        return self._entries_for(CompendiumCategory.MATERIAL)

    @property
    def equipment(self) -> list[EquipmentEntry]:
        return self._entries_for(CompendiumCategory.EQUIPMENT)

    @property
    def creatures(self) -> AllCreatureEntries:
        return self._entries_for(CompendiumCategory.CREATURE)

    def __len__(self) -> int:
        return len(self.entries)


# =============================================================================
# Decoders
# =============================================================================

ENTRY_RESPONSE_ADAPTER: TypeAdapter[Any] = TypeAdapter(EntryResponse)
MONSTER_ADAPTER = TypeAdapter(MonsterEntry)
CREATURE_ADAPTER = TypeAdapter(CreatureEntry)
MATERIAL_ADAPTER = TypeAdapter(MaterialEntry)
EQUIPMENT_ADAPTER = TypeAdapter(EquipmentEntry)
TREASURE_ADAPTER = TypeAdapter(TreasureEntry)
ALL_STANDARD_ENTRIES_ADAPTER = TypeAdapter(AllStandardEntries)
MONSTER_LIST_ADAPTER = TypeAdapter(list[MonsterEntry])

CATEGORY_ADAPTERS: dict[CompendiumCategory, TypeAdapter[Any]] = {
    CompendiumCategory.TREASURE: TypeAdapter(list[TreasureEntry]),
    CompendiumCategory.MONSTER: MONSTER_LIST_ADAPTER,
    CompendiumCategory.MATERIAL: TypeAdapter(list[MaterialEntry]),
    CompendiumCategory.EQUIPMENT: TypeAdapter(list[EquipmentEntry]),
    CompendiumCategory.CREATURE: TypeAdapter(AllCreatureEntries),
}
