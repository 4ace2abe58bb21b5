"""Dice rolling engine: resolves a parsed die set and formats the result."""

from __future__ import annotations

import logging
import random

import config
from engine.errors import DiceError, TooManySidesError, TooManyThrowsError
from engine.notation import parse
from models.roll import Add, Percent, RollExpression, RollOutcome, Subtract

logger = logging.getLogger(__name__)


def resolve_shape(expr: RollExpression) -> tuple[int, int]:
    """Apply defaults and limits to an expression's dice.

    Args:
        expr: Parsed expression; count and sides may be unset or zero.

    Returns:
        (count, sides) to roll.

    Raises:
        TooManyThrowsError: If more than MAX_THROWS dice are requested.
        TooManySidesError: If the dice have more than MAX_SIDES faces.
    """
    count = expr.count or 0
    if count <= 0:
        count = config.DEFAULT_COUNT
    if count > config.MAX_THROWS:
        raise TooManyThrowsError(expr.notation)

    sides = expr.sides or 0
    if sides <= 0:
        sides = config.DEFAULT_SIDES
    if sides > config.MAX_SIDES:
        raise TooManySidesError(expr.notation)

    return count, sides


def evaluate(expr: RollExpression, rng: random.Random | None = None) -> RollOutcome:
    """Roll the dice described by expr.

    A percent modifier on 2d10 reads the first die as tens and the second
    as ones; on 1d100 the die is the percentage. Any other shape ignores
    the percent and sums the dice.

    Args:
        expr: Parsed die set.
        rng: Optional Random instance for seeded/testing rolls.

    Returns:
        RollOutcome with the rolls, total, and display line.

    Raises:
        TooManyThrowsError: If the count is over the limit.
        TooManySidesError: If the sides are over the limit.
    """
    rng = rng or random.Random()
    count, sides = resolve_shape(expr)
    modifier = expr.modifier

    logger.info("Rolling %i of d%i %s", count, sides, modifier or "")

    rolls = [rng.randint(1, sides) for _ in range(count)]

    if isinstance(modifier, Percent) and (count, sides) in config.PERCENT_SHAPES:
        if count == 2:
            total = rolls[0] * 10 + rolls[1]
            display = f"{rolls[0]}+{rolls[1]}= {total}%"
        else:
            # Single d100 reads "42%", not "= 42%"
            total = rolls[0]
            display = f"{total}%"
        return RollOutcome(
            count=count,
            sides=sides,
            individual_rolls=rolls,
            total=total,
            percent=True,
            display=display,
        )

    total = sum(rolls)
    running = "+".join(str(r) for r in rolls)

    if isinstance(modifier, Add):
        total += modifier.amount
        running = f"({running}){modifier}"
    elif isinstance(modifier, Subtract):
        total -= modifier.amount
        running = f"({running}){modifier}"

    return RollOutcome(
        count=count,
        sides=sides,
        individual_rolls=rolls,
        total=total,
        display=f"{running}= {total}",
    )


def roll(
    text: str,
    default: str | None = None,
    rng: random.Random | None = None,
) -> RollOutcome:
    """Parse and roll a die set, falling back to a default when text is empty.

    Args:
        text: Raw input, e.g. "3d6+2". Blank input uses the default.
        default: Die set for blank input (config.DEFAULT_DICE if None).
        rng: Optional Random instance for seeded/testing rolls.

    Returns:
        RollOutcome for the parsed expression.

    Raises:
        DiceError: If the input is malformed or out of range.
    """
    text = text.strip()
    if not text:
        text = default if default is not None else config.DEFAULT_DICE
    return evaluate(parse(text), rng=rng)


def roll_message(
    text: str,
    default: str | None = None,
    rng: random.Random | None = None,
) -> str:
    """Roll and return the line to show, or the error message on rejection."""
    try:
        return roll(text, default=default, rng=rng).display
    except DiceError as err:
        logger.warning("Rejected die set %r: %s", err.text, err)
        return str(err)
