"""Tests for coordinate position types and rounding helpers."""
import math

import pytest

from graph_canvas.canvas import ViewportPosition, ViewportSize, WorldPosition
from graph_canvas.canvas.numeric import is_positive_finite, lattice_index, round_half_up, round_to


class TestPositions:
    """Arithmetic and finiteness of world and viewport points."""

    def test_world_arithmetic(self):
        a = WorldPosition(1.0, 2.0)
        b = WorldPosition(0.5, -1.0)
        assert a + b == WorldPosition(1.5, 1.0)
        assert a - b == WorldPosition(0.5, 3.0)

    def test_viewport_arithmetic(self):
        a = ViewportPosition(10.0, 20.0)
        b = ViewportPosition(5.0, 5.0)
        assert a - b == ViewportPosition(5.0, 15.0)

    def test_mixing_spaces_raises(self):
        with pytest.raises(TypeError):
            WorldPosition(1.0, 1.0) + ViewportPosition(1.0, 1.0)
        with pytest.raises(TypeError):
            ViewportPosition(1.0, 1.0) - WorldPosition(1.0, 1.0)

    def test_spaces_never_compare_equal(self):
        assert WorldPosition(1.0, 1.0) != ViewportPosition(1.0, 1.0)

    def test_is_finite(self):
        assert WorldPosition.origin().is_finite()
        assert not WorldPosition(math.inf, 0.0).is_finite()
        assert not ViewportPosition(0.0, math.nan).is_finite()

    def test_positions_are_immutable(self):
        point = WorldPosition(1.0, 2.0)
        with pytest.raises(AttributeError):
            point.x = 3.0  # type: ignore[misc]

    def test_viewport_size_center(self):
        assert ViewportSize(800.0, 600.0).center == ViewportPosition(400.0, 300.0)


class TestNumeric:
    """JS-style rounding helpers."""

    @pytest.mark.parametrize(
        "value, expected",
        [(0.5, 1.0), (-0.5, 0.0), (-1.5, -1.0), (2.4, 2.0), (-2.6, -3.0)],
    )
    def test_round_half_up(self, value, expected):
        assert round_half_up(value) == expected

    def test_round_to_keeps_decimals(self):
        assert round_to(1.23456, 1, 1000) == pytest.approx(1.235)
        assert round_to(1.005, 1, 100) == pytest.approx(1.01)

    def test_round_half_up_passes_non_finite_through(self):
        assert round_half_up(math.inf) == math.inf
        assert math.isnan(round_half_up(math.nan))

    def test_round_to_huge_value(self):
        assert round_to(8.99e307, 1, 10000) == 8.99e307
        assert round_to(-math.inf, 1, 1000) == -math.inf

    def test_lattice_index(self):
        assert lattice_index(7.4, 2.0) == 4.0
        assert lattice_index(-3.0, 2.0) == -1.0
        assert lattice_index(0.26, 0.5) == 1.0
        assert lattice_index(1e4, 1e-320) is None
        assert lattice_index(2.0**41, 1.0) is None

    def test_is_positive_finite(self):
        assert is_positive_finite(1.0, 2.0)
        assert not is_positive_finite(1.0, 0.0)
        assert not is_positive_finite(math.inf)
        assert not is_positive_finite(math.nan)
