"""Tests for formulas module."""

import math
import re

import pytest

from helpers import formulas


class TestRound1:
    def test_halves_round_away_from_zero(self):
        assert formulas.round1(2.25) == 2.3
        assert formulas.round1(-2.25) == -2.3

    def test_plain(self):
        assert formulas.round1(33.333) == 33.3
        assert formulas.round1(66.666) == 66.7


class TestVotePercentages:
    def test_split(self):
        assert formulas.vote_percentages(3, 7) == (30.0, 70.0)

    def test_even(self):
        assert formulas.vote_percentages(1, 1) == (50.0, 50.0)

    def test_no_votes(self):
        assert formulas.vote_percentages(0, 0) == (50, 50)

    def test_thirds_round_independently(self):
        assert formulas.vote_percentages(1, 2) == (33.3, 66.7)

    def test_sums_to_hundred(self):
        for a, b in [(3, 7), (1, 1), (9, 1), (5, 15)]:
            pa, pb = formulas.vote_percentages(a, b)
            assert pa + pb == pytest.approx(100)


class TestControversy:
    def test_even(self):
        assert formulas.controversy(10, 10) == 0

    def test_skewed(self):
        assert formulas.controversy(3, 7) == pytest.approx(40)

    def test_no_votes(self):
        assert formulas.controversy(0, 0) is None


class TestParticipants:
    def test_floor(self):
        assert formulas.estimated_participants(48000) == 16000
        assert formulas.estimated_participants(10) == 3
        assert formulas.estimated_participants(0) == 0


class TestStringHash:
    def test_empty(self):
        assert formulas.string_hash("") == 0

    def test_single_char(self):
        assert formulas.string_hash("a") == 97

    def test_rolling(self):
        assert formulas.string_hash("ab") == 97 * 31 + 98

    def test_known_values(self):
        assert formulas.string_hash("hello") == 99162322
        assert formulas.string_hash("Hello World") == -862545276

    def test_wraps_to_signed_32bit(self):
        assert formulas.string_hash("polygenelubricants") == -(2**31)

    def test_utf16_code_units(self):
        # U+1F600 is the surrogate pair D83D DE00
        assert formulas.string_hash("😀") == 0xD83D * 31 + 0xDE00

    def test_deterministic(self):
        title = "Luke, I am your father"
        assert formulas.string_hash(title) == formulas.string_hash(title)
        assert -(2**31) <= formulas.string_hash(title) < 2**31


def _points(path: str) -> list[tuple[float, float]]:
    return [(float(x), float(y)) for x, y in re.findall(r"[ML] (\S+),(\S+)", path)]


class TestPolar:
    def test_zero_degrees_points_up(self):
        x, y = formulas.polar_to_cartesian(100, 100, 50, 0)
        assert x == pytest.approx(100)
        assert y == pytest.approx(50)

    def test_ninety_degrees_points_right(self):
        x, y = formulas.polar_to_cartesian(100, 100, 50, 90)
        assert x == pytest.approx(150)
        assert y == pytest.approx(100)


class TestRadarPath:
    def test_shape(self):
        path = formulas.radar_path([10, 20, 30], 200, 200, 10)
        assert path.startswith("M ")
        assert path.endswith(" Z")
        assert path.count(" L ") == 2

    def test_points_on_scaled_circle(self):
        values = [100, 50, 25, 0, 80]
        width, height, padding = 300, 200, 20
        radius = min(width, height) / 2 - padding

        points = _points(formulas.radar_path(values, width, height, padding))

        assert len(points) == len(values)
        for (x, y), value in zip(points, values):
            dist = math.hypot(x - width / 2, y - height / 2)
            assert dist == pytest.approx(value / 100 * radius, abs=1e-9)

    def test_clamps_above_hundred(self):
        assert formulas.radar_path([150, 40], 200, 200, 0) == formulas.radar_path([100, 40], 200, 200, 0)

    def test_clamps_below_zero(self):
        assert formulas.radar_path([-5, 40], 200, 200, 0) == formulas.radar_path([0, 40], 200, 200, 0)

    def test_distortion_is_deterministic(self):
        a = formulas.radar_path([50, 50, 50], 200, 200, 10, distortion=20, seed=3)
        b = formulas.radar_path([50, 50, 50], 200, 200, 10, distortion=20, seed=3)
        assert a == b
        assert a != formulas.radar_path([50, 50, 50], 200, 200, 10)

    def test_empty(self):
        assert formulas.radar_path([], 200, 200, 10) == ""
