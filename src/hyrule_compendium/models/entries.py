"""Compendium entry models.

Every entry kind embeds a ``CommonEntry`` holding the fields all entries
share, plus its own category-specific optional fields. The API sends these
records flat, so decoding gathers the common keys into the embedded value
and serializing flattens them back out alongside the ``category`` tag.
"""

from typing import Any, ClassVar

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    SerializerFunctionWrapHandler,
    StrictInt,
    model_serializer,
    model_validator,
)

from hyrule_compendium.models.inputs import CompendiumCategory

_COMMON_FIELD_NAMES = ("id", "name", "description", "common_locations", "image")


class CommonEntry(BaseModel):
    """Fields shared by every compendium entry."""

    model_config = ConfigDict(frozen=True)

    id: StrictInt
    name: str
    description: str
    common_locations: list[str] | None = None
    image: str


class _EntryBase(BaseModel):
    """Decoding and accessor plumbing around an embedded ``CommonEntry``."""

    model_config = ConfigDict(frozen=True)

    CATEGORY: ClassVar[CompendiumCategory]

    common_fields: CommonEntry

    @model_validator(mode="before")
    @classmethod
    def _embed_common_fields(cls, data: Any) -> Any:
        if isinstance(data, dict) and "common_fields" not in data:
            data = dict(data)
            data["common_fields"] = {
                key: data.pop(key) for key in _COMMON_FIELD_NAMES if key in data
            }
        return data

    @model_serializer(mode="wrap")
    def _flatten_common_fields(
        self, handler: SerializerFunctionWrapHandler
    ) -> dict[str, Any]:
        data = handler(self)
        common = data.pop("common_fields", None) or {}
        return {"category": self.CATEGORY.value, **common, **data}

    @property
    def id(self) -> int:
        return self.common_fields.id

    @property
    def name(self) -> str:
        return self.common_fields.name

    @property
    def description(self) -> str:
        return self.common_fields.description

    @property
    def common_locations(self) -> list[str] | None:
        return self.common_fields.common_locations

    @property
    def image(self) -> str:
        return self.common_fields.image


class MonsterEntry(_EntryBase):
    """A monster entry, also used for master mode monsters."""

    CATEGORY: ClassVar[CompendiumCategory] = CompendiumCategory.MONSTER

    drops: list[str] | None = None
    category_type: str = Field(default="monsters", min_length=1)


class CreatureEntry(_EntryBase):
    """A creature entry. Food creatures carry hearts and a cooking effect."""

    CATEGORY: ClassVar[CompendiumCategory] = CompendiumCategory.CREATURE

    drops: list[str] | None = None
    hearts_recovered: float | None = None
    cooking_effect: str | None = None
    category_type: str = Field(default="creatures", min_length=1)


class MaterialEntry(_EntryBase):
    """A material entry."""

    CATEGORY: ClassVar[CompendiumCategory] = CompendiumCategory.MATERIAL

    hearts_recovered: float | None = None
    category_type: str = Field(default="materials", min_length=1)


class EquipmentEntry(_EntryBase):
    """An equipment entry (weapons, bows, shields)."""

    CATEGORY: ClassVar[CompendiumCategory] = CompendiumCategory.EQUIPMENT

    attack: StrictInt | None = None
    defense: StrictInt | None = None
    category_type: str = Field(default="equipment", min_length=1)


class TreasureEntry(_EntryBase):
    """A treasure entry."""

    CATEGORY: ClassVar[CompendiumCategory] = CompendiumCategory.TREASURE

    drops: list[str] | None = None
    category_type: str = Field(default="treasure", min_length=1)
