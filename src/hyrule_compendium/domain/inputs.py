"""The inputs accepted when requesting compendium data."""
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union
from urllib.parse import quote


@dataclass(frozen=True)
class EntryIdentifier:
    """
    Selects a single entry either by its numeric id (e.g. 1 for horse)
    or by its name (e.g. "silver moblin").

    Exactly one of ``id`` and ``name`` is set.
    """
    id: Optional[int] = None
    name: Optional[str] = None

    def __post_init__(self):
        if (self.id is None) == (self.name is None):
            raise ValueError("EntryIdentifier needs exactly one of id or name")
        if self.id is not None:
            if isinstance(self.id, bool) or not isinstance(self.id, int):
                raise TypeError(f"Entry id must be an int, got {type(self.id).__name__}")
            if self.id < 0:
                raise ValueError(f"Entry id must not be negative, got {self.id}")
        else:
            if not isinstance(self.name, str):
                raise TypeError(f"Entry name must be a str, got {type(self.name).__name__}")
            if not self.name.strip():
                raise ValueError("Entry name must not be blank")

    @classmethod
    def by_id(cls, entry_id: int) -> "EntryIdentifier":
        return cls(id=entry_id)

    @classmethod
    def by_name(cls, name: str) -> "EntryIdentifier":
        return cls(name=name)

    @classmethod
    def coerce(cls, value: Union["EntryIdentifier", int, str]) -> "EntryIdentifier":
        """Accept an identifier, an int id or a str name."""
        if isinstance(value, EntryIdentifier):
            return value
        # bool is an int subclass but never a valid id
        if isinstance(value, bool):
            raise TypeError("Entry identifier cannot be a bool")
        if isinstance(value, int):
            return cls.by_id(value)
        if isinstance(value, str):
            return cls.by_name(value)
        raise TypeError(f"Unsupported entry identifier type: {type(value).__name__}")

    @property
    def path_segment(self) -> str:
        """The identifier as it appears in an entry URL."""
        if self.id is not None:
            return str(self.id)
        # The API uses underscores where names have spaces
        return quote(self.name.strip().replace(" ", "_"), safe="")

    def __str__(self) -> str:
        return str(self.id) if self.id is not None else self.name


class CompendiumCategory(Enum):
    TREASURE = "treasure"
    CREATURE = "creatures"
    MONSTER = "monsters"
    MATERIAL = "materials"
    EQUIPMENT = "equipment"

    @property
    def path_segment(self) -> str:
        return self.value

    @classmethod
    def from_name(cls, name: str) -> "CompendiumCategory":
        """Look a category up by member name or path segment, ignoring case."""
        key = name.strip().lower()
        for category in cls:
            if key in (category.name.lower(), category.value):
                return category
        valid = ", ".join(c.value for c in cls)
        raise ValueError(f"Unknown compendium category '{name}' (expected one of: {valid})")


class GameMode(Enum):
    STANDARD = "standard"
    MASTER_MODE = "master_mode"

    @property
    def path_prefix(self) -> str:
        return "master_mode/" if self is GameMode.MASTER_MODE else ""
