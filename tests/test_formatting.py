"""Tests for countdown and tomato display helpers."""

import pytest

from pomodoro.timer.formatting import (
    DIM_OPACITY, FILLED_OPACITY,
    format_number, format_time, minutes_and_seconds, tomato_opacities,
)


class TestTimeFormatting:

    @pytest.mark.parametrize("seconds,expected", [
        (0, (0, 0)), (59, (0, 59)), (60, (1, 0)), (309, (5, 9)), (1500, (25, 0)),
    ])
    def test_minutes_and_seconds(self, seconds, expected):
        assert minutes_and_seconds(seconds) == expected

    def test_negative_clamps_to_zero(self):
        assert minutes_and_seconds(-5) == (0, 0)

    def test_format_number_pads(self):
        assert format_number(5) == "05"
        assert format_number(42) == "42"

    @pytest.mark.parametrize("seconds,expected", [
        (309, "05:09"), (1500, "25:00"), (0, "00:00"), (10, "00:10"),
    ])
    def test_format_time(self, seconds, expected):
        assert format_time(seconds) == expected


class TestTomatoOpacities:

    def test_one_filled(self):
        assert tomato_opacities(1) == [FILLED_OPACITY, DIM_OPACITY, DIM_OPACITY, DIM_OPACITY]

    def test_all_filled(self):
        assert tomato_opacities(4) == [FILLED_OPACITY] * 4

    def test_none_filled(self):
        assert tomato_opacities(0) == [DIM_OPACITY] * 4

    def test_custom_total(self):
        assert len(tomato_opacities(2, total=6)) == 6
        assert tomato_opacities(2, total=6).count(FILLED_OPACITY) == 2

    def test_dim_value(self):
        assert DIM_OPACITY == pytest.approx(0.2)
