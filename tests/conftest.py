"""Pytest configuration and fixtures."""

import pytest

from roundstate.engine.player_state import PlayerState
from roundstate.engine.weapon_registry import WeaponRegistry
from roundstate.models.settings import GameSettings
from roundstate.models.weapon import Weapon, WeaponCategory


@pytest.fixture
def knife():
    """Default melee starting weapon."""
    return Weapon(name="knife", category=WeaponCategory.KNIFE, damage=35, kill_reward=1500)


@pytest.fixture
def heavy_gun():
    """Affordable rifle."""
    return Weapon(name="ak47", category=WeaponCategory.HEAVY, price=300, damage=36, kill_reward=300)


@pytest.fixture
def pistol():
    """Cheap sidearm."""
    return Weapon(name="glock", category=WeaponCategory.SIDEARM, price=200, damage=28, kill_reward=600)


@pytest.fixture
def settings(knife):
    """Small economy with a 1000 money cap."""
    return GameSettings(
        starting_weapon=knife,
        won_money=400,
        lost_money=150,
        max_money=1000,
        starting_money=500,
    )


@pytest.fixture
def player(settings):
    """Player at the start of a round."""
    player = PlayerState(settings)
    player.reset()
    return player


@pytest.fixture
def registry():
    """Registry with one weapon of each category."""
    registry = WeaponRegistry()
    registry.add_weapon("knife", 0, 35, 1500, WeaponCategory.KNIFE)
    registry.add_weapon("ak47", 2700, 36, 300, WeaponCategory.HEAVY)
    registry.add_weapon("glock", 200, 28, 600, WeaponCategory.SIDEARM)
    return registry
