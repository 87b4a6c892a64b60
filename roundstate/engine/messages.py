"""Player-facing messages for rule violations."""

from roundstate.exceptions import (
    DuplicateCategoryError,
    DuplicateWeaponError,
    InsufficientFundsError,
    InvalidStateError,
    NoSuchWeaponError,
    RoundStateError,
    UnknownWeaponError,
)
from roundstate.models.weapon import WeaponCategory

CATEGORY_LABELS = {
    WeaponCategory.HEAVY: "heavy weapon",
    WeaponCategory.SIDEARM: "pistol",
    WeaponCategory.KNIFE: "knife",
}


def category_label(category: WeaponCategory) -> str:
    """Human label for a weapon category."""
    return CATEGORY_LABELS.get(category, category.value)


def describe_error(error: RoundStateError) -> str:
    """
    Render a rule violation as a message for the player.

    Args:
        error: Error raised by player or registry operations

    Returns:
        One-line message
    """
    if isinstance(error, InvalidStateError):
        return f"You are dead and cannot {error.operation}."
    if isinstance(error, DuplicateCategoryError):
        return f"You already have a {category_label(error.category)} ({error.held})."
    if isinstance(error, InsufficientFundsError):
        return (
            f"Not enough money: costs ${error.required}, you have ${error.available} "
            f"(${error.shortfall} short)."
        )
    if isinstance(error, NoSuchWeaponError):
        return f"You have no {category_label(error.category)}."
    if isinstance(error, DuplicateWeaponError):
        return f"Weapon {error.name} cannot be added: {error.reason}."
    if isinstance(error, UnknownWeaponError):
        return f"There is no weapon named {error.name}."
    return str(error)
