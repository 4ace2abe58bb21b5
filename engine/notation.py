"""Dice notation parser.

Supports #d#[+-#|%]: 3d6, d20, 2d10+1, 4d8-2, 2d10%, d%.
Either number may be left out; missing values stay unset until the
expression is evaluated.
"""

from __future__ import annotations

import re

import config
from engine.errors import MalformedDiceError
from models.roll import Add, Percent, RollExpression, Subtract

# Searched, not anchored: text around the first die set is ignored.
_NOTATION_RE = re.compile(
    r"(?P<count>\d*)d(?P<sides>\d*)"
    r"(?:(?P<op>[+-])(?P<amount>\d+)|(?P<percent>%))?",
    re.IGNORECASE | re.ASCII,
)

# Longest modifier amount accepted; keeps totals within int()/str() digit limits.
_MAX_AMOUNT_DIGITS = 1000


def _capped(digits: str, limit: int) -> int:
    """Convert a digit run, reading anything longer than limit as limit + 1.

    Keeps huge runs out of int(), which refuses very long strings.
    """
    digits = digits.lstrip("0") or "0"
    if len(digits) > len(str(limit)):
        return limit + 1
    return int(digits)


def parse(text: str) -> RollExpression:
    """Parse the first die set found in text.

    Args:
        text: Raw input, e.g. "3d6+2" or "roll 2d10% please".

    Returns:
        RollExpression with only the parts that were written. A count or
        sides too long to be within limits is stored as one past the limit.

    Raises:
        MalformedDiceError: If the text holds no "d" at all (including "")
            or the modifier amount is too long to convert.
    """
    m = _NOTATION_RE.search(text)
    if not m:
        raise MalformedDiceError(text)

    count = _capped(m.group("count"), config.MAX_THROWS) if m.group("count") else None
    sides = _capped(m.group("sides"), config.MAX_SIDES) if m.group("sides") else None

    if m.group("percent"):
        modifier = Percent()
    elif m.group("op"):
        digits = m.group("amount").lstrip("0") or "0"
        if len(digits) > _MAX_AMOUNT_DIGITS:
            raise MalformedDiceError(text)
        amount = int(digits)
        modifier = Add(amount=amount) if m.group("op") == "+" else Subtract(amount=amount)
    else:
        modifier = None

    return RollExpression(count=count, sides=sides, modifier=modifier)
