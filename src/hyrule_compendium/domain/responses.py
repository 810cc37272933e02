"""Response shapes returned by the compendium endpoints."""
from dataclasses import dataclass
from typing import Annotated, Any, Dict, Iterator, List, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from hyrule_compendium.domain.inputs import CompendiumCategory
from hyrule_compendium.domain.models import (
    CreatureEntry,
    EquipmentEntry,
    MaterialEntry,
    MonsterEntry,
    TreasureEntry,
)

# A single entry of any category, dispatched on the "category" tag
EntryResponse = Annotated[
    Union[MonsterEntry, CreatureEntry, EquipmentEntry, TreasureEntry, MaterialEntry],
    Field(discriminator="category"),
]

AnyEntry = Union[MonsterEntry, CreatureEntry, EquipmentEntry, TreasureEntry, MaterialEntry]


class AllCreatureEntries(BaseModel):
    """Creatures are split by whether they can be eaten."""

    model_config = ConfigDict(frozen=True)

    food: List[CreatureEntry] = Field(default_factory=list)
    non_food: List[CreatureEntry] = Field(default_factory=list)

    def all(self) -> List[CreatureEntry]:
        return [*self.food, *self.non_food]


class AllStandardEntries(BaseModel):
    """Every entry in the compendium, excluding master mode."""

    model_config = ConfigDict(frozen=True)

    creatures: AllCreatureEntries
    equipment: List[EquipmentEntry]
    materials: List[MaterialEntry]
    monsters: List[MonsterEntry]
    treasure: List[TreasureEntry]

    def iter_entries(self) -> Iterator[AnyEntry]:
        yield from self.creatures.all()
        yield from self.equipment
        yield from self.materials
        yield from self.monsters
        yield from self.treasure


CategoryEntries = Union[
    AllCreatureEntries,
    List[MonsterEntry],
    List[EquipmentEntry],
    List[TreasureEntry],
    List[MaterialEntry],
]


@dataclass(frozen=True)
class CategoryResult:
    """
    All entries of one category.

    ``entries`` is an AllCreatureEntries for CompendiumCategory.CREATURE and a
    list of the category's entry type for every other category.
    """
    category: CompendiumCategory
    entries: CategoryEntries

    # entries hold lists, so results compare by value but are not hashable
    __hash__ = None


_ENTRY_ADAPTER: TypeAdapter = TypeAdapter(EntryResponse)

_CATEGORY_ADAPTERS: Dict[CompendiumCategory, TypeAdapter] = {
    CompendiumCategory.TREASURE: TypeAdapter(List[TreasureEntry]),
    CompendiumCategory.CREATURE: TypeAdapter(AllCreatureEntries),
    CompendiumCategory.MONSTER: TypeAdapter(List[MonsterEntry]),
    CompendiumCategory.MATERIAL: TypeAdapter(List[MaterialEntry]),
    CompendiumCategory.EQUIPMENT: TypeAdapter(List[EquipmentEntry]),
}


def parse_entry_response(data: Any) -> AnyEntry:
    """Decode one entry, picking the model from its category tag.

    Raises pydantic.ValidationError for a missing or unknown tag.
    """
    return _ENTRY_ADAPTER.validate_python(data)


def parse_category_entries(category: CompendiumCategory, data: Any) -> CategoryResult:
    entries = _CATEGORY_ADAPTERS[category].validate_python(data)
    return CategoryResult(category=category, entries=entries)
