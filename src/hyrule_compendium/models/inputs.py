"""Request inputs for compendium lookups.

This module contains the value types a caller passes to the client: how an
entry is identified, which category is requested, and which game mode the
lookup targets.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class EntryIdentifier:
    """Identifies a single compendium entry by id or by name.

    Example:
        EntryIdentifier.by_id(1)              # horse
        EntryIdentifier.by_name("silver moblin")
    """

    value: int | str

    @classmethod
    def by_id(cls, entry_id: int) -> EntryIdentifier:
        """Identify an entry by its numeric compendium id."""
        if isinstance(entry_id, bool) or not isinstance(entry_id, int):
            raise TypeError(f"Entry id must be an integer, got {entry_id!r}")
        return cls(entry_id)

    @classmethod
    def by_name(cls, name: str) -> EntryIdentifier:
        """Identify an entry by its compendium name."""
        if not isinstance(name, str):
            raise TypeError(f"Entry name must be a string, got {name!r}")
        return cls(name)

    @classmethod
    def coerce(cls, value: EntryIdentifier | int | str) -> EntryIdentifier:
        """Accept an identifier, a bare id or a bare name."""
        if isinstance(value, EntryIdentifier):
            return value
        if isinstance(value, str):
            return cls.by_name(value)
        return cls.by_id(value)

    @property
    def is_id(self) -> bool:
        return isinstance(self.value, int)


class CompendiumCategory(str, Enum):
    """All compendium categories."""

    TREASURE = "treasure"
    CREATURE = "creatures"
    MONSTER = "monsters"
    MATERIAL = "materials"
    EQUIPMENT = "equipment"

    @property
    def path_segment(self) -> str:
        """The pluralized path word used by the category endpoint."""
        return self.value

    @classmethod
    def parse(cls, value: str) -> CompendiumCategory:
        """Parse a category from its path word or its singular name.

        Raises:
            ValueError: If the value names no category.
        """
        normalized = value.strip().lower()
        for category in cls:
            if normalized in (category.value, category.name.lower()):
                return category
        allowed = ", ".join(category.value for category in cls)
        raise ValueError(f"Unknown category '{value}'. Allowed values: {allowed}")


class GameMode(Enum):
    """The two game modes, standard and master mode."""

    STANDARD = "standard"
    MASTER_MODE = "master_mode"
