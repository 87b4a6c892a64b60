"""Data models module for roundstate."""

# Weapons
from roundstate.models.weapon import Weapon, WeaponCategory

# Settings
from roundstate.models.settings import GameSettings, default_starting_weapon

# Snapshots
from roundstate.models.snapshot import PlayerSnapshot

__all__ = [
    # Weapons
    "Weapon",
    "WeaponCategory",
    # Settings
    "GameSettings",
    "default_starting_weapon",
    # Snapshots
    "PlayerSnapshot",
]
