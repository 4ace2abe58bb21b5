"""Configuration constants for the dice roller."""

import os

_TRUE_WORDS = {"on", "true", "yes", "1"}
_FALSE_WORDS = {"off", "false", "no", "0"}


def parse_flag(value: str) -> bool:
    """Convert an on/off style setting into a bool.

    Args:
        value: Raw setting, e.g. "on", "False", " yes ".

    Returns:
        The boolean the setting spells.

    Raises:
        ValueError: If the value is not a recognised on/off word.
    """
    word = value.strip().lower()
    if word in _TRUE_WORDS:
        return True
    if word in _FALSE_WORDS:
        return False
    raise ValueError(f"Not an on/off value: {value!r}")


DEFAULT_DICE = os.environ.get("DICE_DEFAULT", "2d10%")  # Used when no dice are given
DICE_ENABLED = parse_flag(os.environ.get("DICE_ENABLED", "on"))
MAX_THROWS = 100            # Dice per roll
MAX_SIDES = 1_000_000       # Faces per die
DEFAULT_COUNT = 1
DEFAULT_SIDES = 100
PERCENT_SHAPES = {(2, 10), (1, 100)}  # (count, sides) read as a percentage
LOG_LEVEL = os.environ.get("DICE_LOG_LEVEL", "WARNING").upper()
