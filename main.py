"""Command-line dice roller.

Rolls the die set given on the command line and prints the result.

Usage:
    python main.py 3d6+2
    python main.py 2d10%
    python main.py                  # rolls the default set
    python main.py --seed 42 d20

Environment variables:
    DICE_DEFAULT    Die set used when none is given (default: 2d10%)
    DICE_ENABLED    on/off toggle (default: on)
    DICE_LOG_LEVEL  Logging level (default: WARNING)
"""

import argparse
import logging
import random
import sys

import config
from engine.dice import roll
from engine.errors import DiceError

SYNTAX_HELP = """\
dice syntax: #d#[+-#|%]

  The first # is the number of dice, followed by a literal 'd'
  (1 is presumed when left out).
  The next # is the sides of each die (100 when left out),
  followed by an optional modifier:
  - a + or - and an integer, added or subtracted after the roll
  - a literal '%' for a percentage roll (only valid for 2d10 or d100)
"""


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Roll a set of dice and print the result",
        epilog=SYNTAX_HELP,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("dice", nargs="*", help="Die set to roll, e.g. 3d6+2")
    parser.add_argument(
        "--default",
        default=config.DEFAULT_DICE,
        help="Die set for an empty roll (default: %(default)s, or set DICE_DEFAULT)",
    )
    parser.add_argument("--seed", type=int, help="Seed the dice for a repeatable roll")
    parser.add_argument("-v", "--verbose", action="store_true", help="Show what is being rolled")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else config.LOG_LEVEL,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if not config.DICE_ENABLED:
        print("Dice rolling is disabled", file=sys.stderr)
        return 1

    rng = random.Random(args.seed) if args.seed is not None else None
    try:
        outcome = roll(" ".join(args.dice), default=args.default, rng=rng)
    except DiceError as err:
        print(err, file=sys.stderr)
        return 1

    print(outcome.display)
    return 0


if __name__ == "__main__":
    sys.exit(main())
