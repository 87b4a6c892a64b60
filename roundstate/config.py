"""Central configuration defaults and constants for roundstate."""

import logging
import os

# Health bounds
MAX_HEALTH = 100
MIN_HEALTH = 0

# Economy Defaults
DEFAULT_MAX_MONEY = int(os.getenv("ROUNDSTATE_MAX_MONEY", "16000"))
DEFAULT_STARTING_MONEY = int(os.getenv("ROUNDSTATE_STARTING_MONEY", "800"))
DEFAULT_WON_MONEY = int(os.getenv("ROUNDSTATE_WON_MONEY", "3250"))
DEFAULT_LOST_MONEY = int(os.getenv("ROUNDSTATE_LOST_MONEY", "1400"))  # Consolation for the losing side

# Default starting weapon (melee, not for sale)
DEFAULT_STARTING_WEAPON_NAME = os.getenv("ROUNDSTATE_STARTING_WEAPON_NAME", "knife")
DEFAULT_STARTING_WEAPON_DAMAGE = int(os.getenv("ROUNDSTATE_STARTING_WEAPON_DAMAGE", "35"))
DEFAULT_STARTING_WEAPON_KILL_REWARD = int(os.getenv("ROUNDSTATE_STARTING_WEAPON_KILL_REWARD", "1500"))

# Logging
DEFAULT_LOG_LEVEL = os.getenv("ROUNDSTATE_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "[%(name)-19s - %(levelname)5s] %(message)s"


def configure_logging(level: str = DEFAULT_LOG_LEVEL) -> None:
    """Configure root logging for a host application."""
    logging.basicConfig(level=getattr(logging, level.upper(), logging.INFO), format=LOG_FORMAT)
