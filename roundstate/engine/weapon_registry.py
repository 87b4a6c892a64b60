"""Weapon registry: owner of the weapon definitions players borrow."""

import logging
from typing import Iterator, Optional

from roundstate.exceptions import DuplicateWeaponError, UnknownWeaponError
from roundstate.models.weapon import Weapon, WeaponCategory

logger = logging.getLogger(__name__)


class WeaponRegistry:
    """Stores weapon definitions by name, in registration order."""

    def __init__(self) -> None:
        """Initialize empty registry."""
        self._weapons: dict[str, Weapon] = {}

    def add_weapon(
        self,
        name: str,
        price: int,
        damage: int,
        kill_reward: int,
        category: WeaponCategory,
    ) -> Weapon:
        """
        Register a new weapon definition.

        Args:
            name: Unique weapon name
            price: Purchase price
            damage: Damage per hit
            kill_reward: Money credited for a kill
            category: Weapon category

        Returns:
            The registered Weapon

        Raises:
            DuplicateWeaponError: Name already taken, or a second knife
        """
        if name in self._weapons:
            raise DuplicateWeaponError(name)
        if category is WeaponCategory.KNIFE and self._find_knife() is not None:
            raise DuplicateWeaponError(name, "a knife is already registered")

        weapon = Weapon(
            name=name,
            category=category,
            price=price,
            damage=damage,
            kill_reward=kill_reward,
        )
        self._weapons[name] = weapon
        logger.debug(f"Registered weapon {name} ({category.value}, price={price})")
        return weapon

    def get(self, name: str) -> Weapon:
        """Get weapon by name."""
        try:
            return self._weapons[name]
        except KeyError:
            raise UnknownWeaponError(name) from None

    def knife(self) -> Weapon:
        """Get the registered knife."""
        knife = self._find_knife()
        if knife is None:
            raise UnknownWeaponError(WeaponCategory.KNIFE.value)
        return knife

    def with_category(self, category: WeaponCategory) -> list[Weapon]:
        """
        List purchasable weapons of a category.

        Raises:
            ValueError: The category is not for sale
        """
        if not category.purchasable:
            raise ValueError(f"{category!r} is not purchasable")
        return [weapon for weapon in self._weapons.values() if weapon.category is category]

    def _find_knife(self) -> Optional[Weapon]:
        return next(
            (w for w in self._weapons.values() if w.category is WeaponCategory.KNIFE), None
        )

    def __len__(self) -> int:
        return len(self._weapons)

    def __contains__(self, name: object) -> bool:
        return name in self._weapons

    def __iter__(self) -> Iterator[Weapon]:
        return iter(list(self._weapons.values()))
