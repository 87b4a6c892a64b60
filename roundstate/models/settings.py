"""Game settings configuration."""

from pydantic import BaseModel, ConfigDict, Field, model_validator

from roundstate.config import (
    DEFAULT_LOST_MONEY,
    DEFAULT_MAX_MONEY,
    DEFAULT_STARTING_MONEY,
    DEFAULT_STARTING_WEAPON_DAMAGE,
    DEFAULT_STARTING_WEAPON_KILL_REWARD,
    DEFAULT_STARTING_WEAPON_NAME,
    DEFAULT_WON_MONEY,
)
from roundstate.models.weapon import Weapon, WeaponCategory


def default_starting_weapon() -> Weapon:
    """Build the configured default starting weapon (a knife)."""
    return Weapon(
        name=DEFAULT_STARTING_WEAPON_NAME,
        category=WeaponCategory.KNIFE,
        price=0,
        damage=DEFAULT_STARTING_WEAPON_DAMAGE,
        kill_reward=DEFAULT_STARTING_WEAPON_KILL_REWARD,
    )


class GameSettings(BaseModel):
    """Economy and loadout settings read by every player."""

    model_config = ConfigDict(frozen=True)  # Immutable for the duration of a round

    starting_weapon: Weapon = Field(
        default_factory=default_starting_weapon, description="Weapon granted on every reset"
    )
    won_money: int = Field(default=DEFAULT_WON_MONEY, description="Money credited for a won round")
    lost_money: int = Field(default=DEFAULT_LOST_MONEY, description="Money credited for a lost round")
    max_money: int = Field(default=DEFAULT_MAX_MONEY, ge=0, description="Money cap")
    starting_money: int = Field(
        default=DEFAULT_STARTING_MONEY, ge=0, description="Balance of a newly created player"
    )

    @model_validator(mode="after")
    def check_starting_money(self) -> "GameSettings":
        """Starting money must fit under the cap."""
        if self.starting_money > self.max_money:
            raise ValueError(
                f"starting_money ({self.starting_money}) exceeds max_money ({self.max_money})"
            )
        return self
