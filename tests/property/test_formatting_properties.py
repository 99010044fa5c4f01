"""
Property-based tests for display formatting.

Uses Hypothesis to check rounding bounds, number trimming and the
direction marker of change values over arbitrary inputs.
"""

from hypothesis import given
from hypothesis import strategies as st

from rugplay_cli.utilities.formatters import (
    ChangeDirection,
    classify_change,
    floor_currency,
    format_change,
    format_number,
    round_currency,
)

amounts = st.floats(min_value=-1e6, max_value=1e6, allow_nan=False, allow_infinity=False)
finite = st.floats(allow_nan=False, allow_infinity=False)


class TestRoundingProperties:
    """Rounding and flooring stay within one unit of the third decimal."""

    @given(amounts)
    def test_round_is_within_half_unit(self, value):
        assert abs(round_currency(value) - value) <= 0.0005 + 1e-6

    @given(amounts)
    def test_round_is_idempotent(self, value):
        once = round_currency(value)
        assert round_currency(once) == once

    @given(amounts)
    def test_floor_never_rounds_up(self, value):
        floored = floor_currency(value)
        assert floored <= value + 1e-6
        assert value - floored < 0.001 + 1e-6


class TestNumberFormatProperties:
    """Formatted numbers carry no trailing zeros."""

    @given(amounts)
    def test_no_trailing_zeros(self, value):
        text = format_number(value)
        if "." in text:
            assert not text.endswith("0")
        assert not text.endswith(".")

    @given(st.integers())
    def test_integers_pass_through(self, value):
        assert format_number(value) == str(value)

    @given(amounts)
    def test_value_survives_formatting(self, value):
        assert abs(float(format_number(value)) - value) < 1e-8


class TestChangeProperties:
    """The change marker follows the sign of the value."""

    @given(finite)
    def test_classification_follows_sign(self, value):
        direction = classify_change(value)
        if value > 0:
            assert direction == ChangeDirection.POSITIVE
        elif value < 0:
            assert direction == ChangeDirection.NEGATIVE
        else:
            assert direction == ChangeDirection.ZERO

    @given(amounts)
    def test_marker_matches_classification(self, value):
        marker = {"^": ChangeDirection.POSITIVE, "-": ChangeDirection.ZERO, "v": ChangeDirection.NEGATIVE}
        text = format_change(value)
        symbol = text.split("]", 1)[1][0]
        assert marker[symbol] == classify_change(value)
