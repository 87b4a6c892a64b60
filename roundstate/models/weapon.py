"""Weapon models."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class WeaponCategory(str, Enum):
    """Weapon categories. A player holds at most one weapon per category."""

    HEAVY = "heavy"
    SIDEARM = "sidearm"
    KNIFE = "knife"

    @property
    def purchasable(self) -> bool:
        """Knives are handed out, never sold."""
        return self is not WeaponCategory.KNIFE


class Weapon(BaseModel):
    """Immutable weapon definition shared between players."""

    model_config = ConfigDict(frozen=True)  # Immutable model

    name: str = Field(min_length=1, description="Unique weapon name")
    category: WeaponCategory = Field(description="Weapon category")
    price: int = Field(ge=0, default=0, description="Purchase price")
    damage: int = Field(ge=0, default=0, description="Damage dealt per hit")
    kill_reward: int = Field(ge=0, default=0, description="Money credited for a kill with this weapon")
