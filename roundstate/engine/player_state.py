"""Player economy and combat state."""

import logging
from datetime import timedelta
from typing import Optional

from roundstate.config import MAX_HEALTH, MIN_HEALTH
from roundstate.exceptions import (
    DuplicateCategoryError,
    InsufficientFundsError,
    InvalidStateError,
    NoSuchWeaponError,
)
from roundstate.helpers.debug import log_call
from roundstate.models.settings import GameSettings
from roundstate.models.snapshot import PlayerSnapshot
from roundstate.models.weapon import Weapon, WeaponCategory

logger = logging.getLogger(__name__)


class PlayerState:
    """
    Health, money, weapons and score of a single player.

    Elimination is a state (health 0), not the end of the object:
    reset() revives the player for the next round.
    """

    def __init__(
        self,
        settings: GameSettings,
        money: Optional[int] = None,
        elapsed_time: timedelta = timedelta(0),
    ) -> None:
        """
        Initialize player state.

        Args:
            settings: Economy and loadout settings
            money: Starting balance, defaults to settings.starting_money
            elapsed_time: Match time already elapsed for this player
        """
        self._settings = settings
        self._health = MAX_HEALTH
        self._money = 0
        self._kills = 0
        self._deaths = 0
        self._elapsed_time = elapsed_time
        self._weapons: dict[WeaponCategory, Weapon] = {}
        self._set_money(settings.starting_money if money is None else money)

    @property
    def settings(self) -> GameSettings:
        return self._settings

    @property
    def health(self) -> int:
        return self._health

    @property
    def money(self) -> int:
        return self._money

    @property
    def kills(self) -> int:
        return self._kills

    @property
    def deaths(self) -> int:
        return self._deaths

    @property
    def elapsed_time(self) -> timedelta:
        return self._elapsed_time

    @property
    def is_alive(self) -> bool:
        return self._health > MIN_HEALTH

    @property
    def weapons(self) -> dict[WeaponCategory, Weapon]:
        """Copy of held weapons by category."""
        return dict(self._weapons)

    def has_weapon(self, category: WeaponCategory) -> bool:
        return category in self._weapons

    def weapon_for(self, category: WeaponCategory) -> Optional[Weapon]:
        """Held weapon of a category, or None."""
        return self._weapons.get(category)

    @log_call
    def reset(self) -> None:
        """Revive at full health and grant the starting weapon."""
        starting_weapon = self._settings.starting_weapon
        was_alive = self.is_alive
        self._health = MAX_HEALTH
        self._weapons[starting_weapon.category] = starting_weapon
        if not was_alive:
            logger.info(f"Player revived with {starting_weapon.name}")

    @log_call
    def apply_damage(self, amount: int) -> bool:
        """
        Apply damage to the player.

        A negative amount heals, capped at full health.

        Args:
            amount: Health to subtract

        Returns:
            True if this call eliminated the player, False otherwise
        """
        if not self.is_alive:
            raise InvalidStateError("apply damage", self._health)

        health = self._health - amount
        if health <= MIN_HEALTH:
            self._deaths += 1
            self._health = MIN_HEALTH
            self._weapons.clear()
            logger.info(f"Player eliminated (deaths={self._deaths})")
            return True

        self._health = min(health, MAX_HEALTH)
        return False

    def can_purchase(self, weapon: Weapon) -> None:
        """
        Check that a weapon may be bought.

        Raises:
            InvalidStateError: The player is eliminated
            DuplicateCategoryError: A weapon of the same category is held
            InsufficientFundsError: The price exceeds current money
        """
        if not self.is_alive:
            raise InvalidStateError("purchase", self._health)
        held = self._weapons.get(weapon.category)
        if held is not None:
            raise DuplicateCategoryError(weapon.category, held.name)
        if weapon.price > self._money:
            raise InsufficientFundsError(weapon.price, self._money)

    @log_call
    def purchase(self, weapon: Weapon) -> None:
        """Buy a weapon and equip it in its category."""
        self.can_purchase(weapon)
        self._money -= weapon.price
        self._weapons[weapon.category] = weapon
        logger.debug(f"Purchased {weapon.name} for {weapon.price}, money left {self._money}")

    @log_call
    def register_kill(self, category: WeaponCategory) -> None:
        """Count a kill made with the held weapon of a category and pay its reward."""
        weapon = self._weapons.get(category)
        if weapon is None:
            raise NoSuchWeaponError(category)
        self._kills += 1
        self.credit_money(weapon.kill_reward)

    def credit_money(self, amount: int) -> None:
        """Add money, clamped to [0, max_money]."""
        self._set_money(self._money + amount)
        logger.debug(f"Credited {amount}, money now {self._money}")

    def on_round_won(self) -> None:
        logger.info(f"Round won, crediting {self._settings.won_money}")
        self.credit_money(self._settings.won_money)

    def on_round_lost(self) -> None:
        logger.info(f"Round lost, crediting {self._settings.lost_money}")
        self.credit_money(self._settings.lost_money)

    def snapshot(self) -> PlayerSnapshot:
        """Frozen view of the current state."""
        return PlayerSnapshot(
            health=self._health,
            money=self._money,
            kills=self._kills,
            deaths=self._deaths,
            elapsed_time=self._elapsed_time,
            weapons=dict(self._weapons),
        )

    def _set_money(self, money: int) -> None:
        max_money = self._settings.max_money
        if money > max_money:
            logger.debug(f"Money {money} exceeds cap, clamped to {max_money}")
            money = max_money
        elif money < 0:
            logger.warning(f"Money {money} below zero, clamped to 0")
            money = 0
        self._money = money

    def __repr__(self) -> str:
        return (
            f"PlayerState(health={self._health}, money={self._money}, "
            f"kills={self._kills}, deaths={self._deaths}, "
            f"weapons={[w.name for w in self._weapons.values()]})"
        )
