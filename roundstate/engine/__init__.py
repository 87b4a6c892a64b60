"""Player state engine package."""

from roundstate.engine.messages import category_label, describe_error
from roundstate.engine.player_state import PlayerState
from roundstate.engine.weapon_registry import WeaponRegistry

__all__ = [
    "PlayerState",
    "WeaponRegistry",
    "category_label",
    "describe_error",
]
