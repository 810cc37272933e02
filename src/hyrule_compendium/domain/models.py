"""
Compendium entry models

Field names and types follow the JSON returned by the compendium API (v2).
Entries are frozen once parsed; unknown fields in the payload are ignored.
"""

from typing import List, Literal, Optional
from pydantic import BaseModel, ConfigDict, Field


class CommonEntry(BaseModel):
    """Fields shared by every entry in the compendium."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: int = Field(..., description="Compendium id")
    name: str = Field(..., description="Entry name, lower case")
    description: str = Field(..., description="In-game description")
    common_locations: Optional[List[str]] = Field(None, description="Regions the entry is usually found in")
    image: str = Field(..., description="URL of the entry image")


class MonsterEntry(CommonEntry):
    category: Literal["monsters"] = "monsters"
    drops: Optional[List[str]] = Field(None, description="Items dropped when defeated")


class TreasureEntry(CommonEntry):
    category: Literal["treasure"] = "treasure"
    drops: Optional[List[str]] = Field(None, description="Items found inside")


class CreatureEntry(CommonEntry):
    category: Literal["creatures"] = "creatures"
    drops: Optional[List[str]] = Field(None, description="Items dropped (non-food creatures)")
    hearts_recovered: Optional[float] = Field(None, description="Hearts recovered when eaten")
    cooking_effect: Optional[str] = Field(None, description="Effect when used in cooking")

    @property
    def is_food(self) -> bool:
        return self.hearts_recovered is not None or self.cooking_effect is not None


class MaterialEntry(CommonEntry):
    category: Literal["materials"] = "materials"
    hearts_recovered: Optional[float] = Field(None, description="Hearts recovered when eaten")
    cooking_effect: Optional[str] = Field(None, description="Effect when used in cooking")


class EquipmentEntry(CommonEntry):
    category: Literal["equipment"] = "equipment"
    attack: Optional[int] = Field(None, description="Attack power")
    defense: Optional[int] = Field(None, description="Defense rating")
