"""Tests for the dice notation parser."""

import pytest
from pydantic import ValidationError

from engine.errors import ErrorKind, MalformedDiceError
from engine.notation import parse
from models.roll import Add, Percent, RollExpression, Subtract


class TestParse:
    """Tests for parse()."""

    def test_simple_notation(self):
        assert parse("2d6") == RollExpression(count=2, sides=6)

    def test_missing_count_stays_unset(self):
        """"d20" leaves count unset rather than filling in 1."""
        expr = parse("d20")
        assert expr.count is None
        assert expr.sides == 20

    def test_missing_sides_stays_unset(self):
        expr = parse("3d")
        assert expr.count == 3
        assert expr.sides is None

    def test_bare_d(self):
        assert parse("d") == RollExpression()

    def test_explicit_zero_kept(self):
        """An explicit 0 is distinct from a missing number."""
        assert parse("0d0") == RollExpression(count=0, sides=0)

    def test_add_modifier(self):
        assert parse("3d6+2").modifier == Add(amount=2)

    def test_subtract_modifier(self):
        assert parse("4d8-12").modifier == Subtract(amount=12)

    def test_percent_modifier(self):
        expr = parse("2d10%")
        assert expr == RollExpression(count=2, sides=10, modifier=Percent())

    def test_percent_without_sides(self):
        assert parse("d%") == RollExpression(modifier=Percent())

    def test_case_insensitive(self):
        assert parse("2D6+1") == parse("2d6+1")

    def test_leading_and_trailing_text(self):
        """Text around the die set is ignored."""
        assert parse("roll 3d6+2 please") == parse("3d6+2")

    def test_first_die_set_wins(self):
        assert parse("1d4 2d6") == RollExpression(count=1, sides=4)

    def test_only_one_modifier(self):
        assert parse("1d6+2+3").modifier == Add(amount=2)

    def test_dangling_operator_ignored(self):
        """A sign with no digits after it is not a modifier."""
        assert parse("2d6+").modifier is None

    def test_modifier_must_follow_sides(self):
        assert parse("2d6 +3").modifier is None

    def test_large_numbers_parse(self):
        """Limits are enforced when rolling, not when parsing."""
        assert parse("500d9999999") == RollExpression(count=500, sides=9_999_999)

    def test_idempotent(self):
        assert parse("2d10%") == parse("2d10%")

    def test_malformed(self):
        """Input with no "d" is rejected and echoed back."""
        with pytest.raises(MalformedDiceError) as exc:
            parse("banana")
        assert exc.value.kind == ErrorKind.MALFORMED
        assert exc.value.text == "banana"
        assert "banana" in str(exc.value)

    def test_empty_is_malformed(self):
        """Empty input never becomes the default die set."""
        with pytest.raises(MalformedDiceError):
            parse("")

    def test_numbers_only_is_malformed(self):
        with pytest.raises(MalformedDiceError):
            parse("3+6")

    def test_non_ascii_digits_ignored(self):
        """Only ASCII digits count, so "٣d6" is a single d6."""
        assert parse("٣d6") == RollExpression(sides=6)

    def test_leading_zeros_dropped(self):
        assert parse("007d0006") == RollExpression(count=7, sides=6)

    def test_overlong_count_capped(self):
        """A count too long to be in range reads as one past the limit."""
        assert parse("1" * 5000 + "d6") == RollExpression(count=101, sides=6)

    def test_overlong_sides_capped(self):
        assert parse("d" + "9" * 5000).sides == 1_000_001

    def test_longest_amount_accepted(self):
        assert parse("1d6+" + "9" * 1000).modifier == Add(amount=int("9" * 1000))

    def test_overlong_amount_malformed(self):
        with pytest.raises(MalformedDiceError):
            parse("1d6+" + "9" * 5000)


class TestRollExpression:
    """Tests for the RollExpression model."""

    def test_notation_round_trips_text(self):
        for text in ["3d6+2", "d20", "4d-1", "2d10%", "d", "0d0"]:
            assert parse(text).notation == text

    def test_frozen(self):
        expr = parse("2d6")
        with pytest.raises(ValidationError):
            expr.count = 3

    def test_negative_amount_rejected(self):
        with pytest.raises(ValueError):
            Add(amount=-1)

    def test_modifier_from_dict(self):
        """The modifier union is discriminated on its kind."""
        expr = RollExpression.model_validate(
            {"count": 1, "sides": 6, "modifier": {"kind": "subtract", "amount": 2}}
        )
        assert expr.modifier == Subtract(amount=2)
