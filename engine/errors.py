"""Errors raised while parsing or rolling dice."""

from enum import Enum

import config


class ErrorKind(str, Enum):
    """Why a die set was rejected."""
    MALFORMED = "malformed"                 # No usable die set in the input
    TOO_MANY_THROWS = "too_many_throws"
    TOO_MANY_SIDES = "too_many_sides"


class DiceError(ValueError):
    """Base class for rejected die sets.

    ``str(err)`` is the message to show the user. ``text`` is the input
    or notation that was rejected.
    """
    kind: ErrorKind

    def __init__(self, message: str, text: str) -> None:
        super().__init__(message)
        self.text = text


class MalformedDiceError(DiceError):
    """The input contains no dice expression."""
    kind = ErrorKind.MALFORMED

    def __init__(self, text: str) -> None:
        super().__init__(f"Invalid dice set received: {text}", text)


class TooManyThrowsError(DiceError):
    """More dice were requested than a single roll allows."""
    kind = ErrorKind.TOO_MANY_THROWS

    def __init__(self, text: str) -> None:
        super().__init__(
            f"Too many throws, try a number between 1 and {config.MAX_THROWS}", text
        )


class TooManySidesError(DiceError):
    """The dice have more faces than a single roll allows."""
    kind = ErrorKind.TOO_MANY_SIDES

    def __init__(self, text: str) -> None:
        super().__init__("You're crazy, I'm not going to do that.", text)
