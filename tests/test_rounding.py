"""Tests for half-up rounding of displayed figures."""

import pytest

from activate_roi.engine.rounding import round_half_up


class TestRoundHalfUp:
    @pytest.mark.parametrize("value, expected", [(0.5, 1), (1.5, 2), (2.5, 3), (99.5, 100)])
    def test_whole_halves_go_up(self, value, expected):
        assert round_half_up(value) == expected

    def test_whole_result_is_int(self):
        assert isinstance(round_half_up(2.4), int)

    def test_one_decimal(self):
        assert round_half_up(3.25, 1) == 3.3
        assert round_half_up(1.25, 1) == 1.3
        assert round_half_up(3.694, 1) == 3.7

    def test_below_half_goes_down(self):
        assert round_half_up(2.49) == 2
        assert round_half_up(3.24, 1) == 3.2
