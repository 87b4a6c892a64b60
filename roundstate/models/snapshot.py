"""Read-only player snapshot model."""

from datetime import timedelta

from pydantic import BaseModel, ConfigDict, Field

from roundstate.config import MAX_HEALTH
from roundstate.models.weapon import Weapon, WeaponCategory


class PlayerSnapshot(BaseModel):
    """Point-in-time view of a player, for display and hosts."""

    model_config = ConfigDict(frozen=True)  # Immutable model

    health: int = Field(ge=0, le=MAX_HEALTH, description="Current health")
    money: int = Field(ge=0, description="Current balance")
    kills: int = Field(ge=0, description="Kill count")
    deaths: int = Field(ge=0, description="Times eliminated")
    elapsed_time: timedelta = Field(description="Match elapsed time")
    weapons: dict[WeaponCategory, Weapon] = Field(
        default_factory=dict, description="Held weapons by category"
    )

    @property
    def is_alive(self) -> bool:
        return self.health > 0
