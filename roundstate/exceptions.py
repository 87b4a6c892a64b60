"""
Typed error hierarchy for player state and weapon rules.

Every error is caller-recoverable and carries the structured context a
reporting layer needs to render a message.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from roundstate.models.weapon import WeaponCategory


class RoundStateError(Exception):
    """Base exception for all player state rule violations."""


class InvalidStateError(RoundStateError):
    """Operation requires a living player but the player is eliminated."""

    def __init__(self, operation: str, health: int):
        self.operation = operation
        self.health = health
        super().__init__(f"cannot {operation}: player is eliminated (health={health})")


class DuplicateCategoryError(RoundStateError):
    """Player already holds a weapon of the requested category."""

    def __init__(self, category: "WeaponCategory", held: str):
        self.category = category
        self.held = held
        super().__init__(f"category={category!r}, held={held!r}")


class InsufficientFundsError(RoundStateError):
    """Weapon price exceeds the player's balance."""

    def __init__(self, required: int, available: int):
        self.required = required
        self.available = available
        super().__init__(f"price {required} exceeds available money {available}")

    @property
    def shortfall(self) -> int:
        return self.required - self.available


class NoSuchWeaponError(RoundStateError):
    """Player holds no weapon of the given category."""

    def __init__(self, category: "WeaponCategory"):
        self.category = category
        super().__init__(f"category={category!r}")


class DuplicateWeaponError(RoundStateError):
    """Weapon registry already contains a conflicting definition."""

    def __init__(self, name: str, reason: str = "name already registered"):
        self.name = name
        self.reason = reason
        super().__init__(f"cannot register {name!r}: {reason}")


class UnknownWeaponError(RoundStateError):
    """Weapon registry has no matching definition."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"unknown weapon {name!r}")
