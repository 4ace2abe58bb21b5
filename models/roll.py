"""Roll expression and outcome models for the dice roller."""

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field


class Percent(BaseModel):
    """Read the dice as a percentage (2d10 or 1d100 only)."""
    model_config = ConfigDict(frozen=True)

    kind: Literal["percent"] = "percent"

    def __str__(self) -> str:
        return "%"


class Add(BaseModel):
    """Add a flat amount to the sum of the dice."""
    model_config = ConfigDict(frozen=True)

    kind: Literal["add"] = "add"
    amount: int = Field(ge=0)

    def __str__(self) -> str:
        return f"+{self.amount}"


class Subtract(BaseModel):
    """Subtract a flat amount from the sum of the dice."""
    model_config = ConfigDict(frozen=True)

    kind: Literal["subtract"] = "subtract"
    amount: int = Field(ge=0)

    def __str__(self) -> str:
        return f"-{self.amount}"


Modifier = Annotated[Percent | Add | Subtract, Field(discriminator="kind")]


class RollExpression(BaseModel):
    """A parsed die set, holding only what was written.

    ``count`` and ``sides`` are None when the text left them out; defaults
    are resolved when the expression is evaluated.
    """
    model_config = ConfigDict(frozen=True)

    count: int | None = None
    sides: int | None = None
    modifier: Modifier | None = None

    @property
    def notation(self) -> str:
        """The expression written back as dice notation, e.g. "3d6+2"."""
        count = "" if self.count is None else str(self.count)
        sides = "" if self.sides is None else str(self.sides)
        modifier = "" if self.modifier is None else str(self.modifier)
        return f"{count}d{sides}{modifier}"


class RollOutcome(BaseModel):
    """The result of evaluating a RollExpression."""
    model_config = ConfigDict(frozen=True)

    count: int                      # Resolved number of dice
    sides: int                      # Resolved faces per die
    individual_rolls: list[int]     # In throw order
    total: int
    percent: bool = False           # Percentage reading applied
    display: str                    # e.g. "(1+2+3)+2= 8"
