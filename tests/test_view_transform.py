"""
Tests for ViewTransform.

Covers:
- World/viewport round trips
- Zoom anchored at the cursor
- Grid step staying inside its band (renormalization)
- Pan correctness
- Rejection of degenerate updates and invalid parameters
- Reset and copy
"""
import math

import pytest

from graph_canvas.canvas import (
    InvalidTransformError,
    ViewTransform,
    ViewportPosition,
    ViewportSize,
    WorldPosition,
)


class TestConversions:
    """World <-> viewport conversions."""

    def test_origin_maps_to_viewport_center(self, transform, size):
        assert transform.world_to_viewport(WorldPosition(0.0, 0.0), size) == ViewportPosition(400.0, 300.0)

    def test_one_world_unit_is_one_step(self, transform, size):
        point = transform.world_to_viewport(WorldPosition(1.0, -1.0), size)
        assert point == ViewportPosition(550.0, 150.0)

    @pytest.mark.parametrize(
        "center, scale, step",
        [
            (WorldPosition(0.0, 0.0), 1.0, 150.0),
            (WorldPosition(12.5, -3.25), 0.01, 120.0),
            (WorldPosition(-1e6, 4e5), 1e4, 199.0),
        ],
    )
    def test_round_trip(self, center, scale, step, size):
        transform = ViewTransform(center=center, scale=scale, step=step)
        for point in (
            ViewportPosition(0.0, 0.0),
            ViewportPosition(123.4, 567.8),
            ViewportPosition(800.0, 600.0),
        ):
            back = transform.world_to_viewport(transform.viewport_to_world(point, size), size)
            assert back.x == pytest.approx(point.x, abs=1e-6)
            assert back.y == pytest.approx(point.y, abs=1e-6)

    def test_density(self):
        assert ViewTransform(scale=2.0, step=150.0).density == 75.0


class TestZoom:
    """Zoom anchored at the cursor."""

    def test_zoom_in_at_center(self, transform, size):
        assert transform.zoom_at(ViewportPosition(400.0, 300.0), -1, size)
        assert transform.center == WorldPosition(0.0, 0.0)
        assert transform.step == pytest.approx(165.0)
        assert transform.scale == 1.0

    def test_ten_zooms_at_center_keep_center(self, transform, size):
        for _ in range(10):
            transform.zoom_at(ViewportPosition(400.0, 300.0), -1, size)
        assert transform.center == WorldPosition(0.0, 0.0)

    def test_zoom_out_divides_step(self, transform, size):
        transform.zoom_at(size.center, 1, size)
        assert transform.step == pytest.approx(150.0 / 1.1)

    def test_only_sign_of_delta_matters(self, size):
        small = ViewTransform()
        large = ViewTransform()
        small.zoom_at(ViewportPosition(100.0, 50.0), -1, size)
        large.zoom_at(ViewportPosition(100.0, 50.0), -120, size)
        assert small == large

    @pytest.mark.parametrize("delta", [-1, 1])
    def test_world_point_under_cursor_is_fixed(self, transform, size, delta):
        cursor = ViewportPosition(123.0, 456.0)
        for _ in range(25):
            before = transform.viewport_to_world(cursor, size)
            transform.zoom_at(cursor, delta, size)
            after = transform.viewport_to_world(cursor, size)
            assert after.x == pytest.approx(before.x, rel=1e-9, abs=1e-9)
            assert after.y == pytest.approx(before.y, rel=1e-9, abs=1e-9)

    def test_step_stays_in_band(self, transform, size):
        cursor = ViewportPosition(10.0, 20.0)
        for delta in [-1] * 40 + [1] * 80:
            transform.zoom_at(cursor, delta, size)
            assert transform.min_grid_size <= transform.step <= transform.max_grid_size

    def test_renormalization_preserves_density(self, transform, size):
        for _ in range(3):
            transform.zoom_in(size)
        density = transform.density
        transform.zoom_in(size)
        # 199.65 * 1.1 leaves the band, step and scale both halve
        assert transform.step == pytest.approx(199.65 * 1.1 / 2)
        assert transform.scale == 0.5
        assert transform.density == pytest.approx(density * 1.1)

    def test_large_zoom_ratio_converges_into_band(self, size):
        transform = ViewTransform(zoom_ratio=10.0)
        transform.zoom_in(size)
        assert 100.0 <= transform.step <= 200.0
        assert transform.density == pytest.approx(1500.0)
        transform.zoom_out(size)
        transform.zoom_out(size)
        assert 100.0 <= transform.step <= 200.0
        assert transform.density == pytest.approx(15.0)

    @pytest.mark.parametrize("delta", [0, math.nan, math.inf])
    def test_directionless_delta_is_ignored(self, transform, size, delta):
        snapshot = transform.copy()
        assert not transform.zoom_at(size.center, delta, size)
        assert transform == snapshot

    def test_degenerate_zoom_is_rejected(self, transform, size):
        # step / scale overflows to infinity
        transform.scale = 1e-320
        assert not transform.zoom_at(ViewportPosition(0.0, 0.0), -1, size)
        assert transform.step == 150.0
        assert transform.scale == 1e-320
        assert transform.center == WorldPosition(0.0, 0.0)


def zoom_until_rejected(transform, cursor, delta, size, limit=20000):
    """Apply wheel ticks until the transform refuses one; return the tick count."""
    for ticks in range(limit):
        if not transform.zoom_at(cursor, delta, size):
            return ticks
    raise AssertionError(f"zoom still accepted after {limit} ticks")


class TestZoomLimits:
    """Zooming stops before derived values overflow."""

    def test_zoom_out_limit_keeps_corners_finite(self, transform, size):
        zoom_until_rejected(transform, size.center, 1, size)
        assert math.isfinite(transform.scale)

        for corner in (ViewportPosition(0.0, 0.0), ViewportPosition(800.0, 600.0)):
            world = transform.viewport_to_world(corner, size)
            assert world.is_finite()
            back = transform.world_to_viewport(world, size)
            assert back.x == pytest.approx(corner.x, abs=1e-6)
            assert back.y == pytest.approx(corner.y, abs=1e-6)

    def test_zoom_in_far_from_origin_stops(self, size):
        transform = ViewTransform(center=WorldPosition(1e4, 1e4))
        ticks = zoom_until_rejected(transform, size.center, -1, size)
        assert ticks > 0
        assert math.isfinite(transform.center.x / transform.scale)
        assert abs(transform.center.x / transform.scale) <= 2.0**40

    def test_rejected_zoom_keeps_state(self, size):
        transform = ViewTransform(center=WorldPosition(1e4, 1e4))
        zoom_until_rejected(transform, size.center, -1, size)
        snapshot = transform.copy()
        assert not transform.zoom_in(size)
        assert transform == snapshot

    def test_pan_beyond_lattice_range_is_rejected(self, size):
        transform = ViewTransform(center=WorldPosition(1e4, 0.0))
        zoom_until_rejected(transform, size.center, -1, size)
        center = transform.center
        # Dragging left moves the view towards larger x
        far = ViewportPosition(-1e16, 300.0)
        assert not transform.pan(ViewportPosition(400.0, 300.0), far, size)
        assert transform.center == center


class TestPan:
    """Dragging moves the world with the pointer."""

    def test_pan_right_moves_center_left(self, transform, size):
        assert transform.pan(ViewportPosition(400.0, 300.0), ViewportPosition(450.0, 300.0), size)
        assert transform.center.x == pytest.approx(-1 / 3)
        assert transform.center.y == 0.0

    def test_world_point_follows_pointer(self, size):
        transform = ViewTransform(center=WorldPosition(3.0, 4.0), scale=0.5, step=180.0)
        grabbed = transform.viewport_to_world(ViewportPosition(100.0, 100.0), size)
        transform.pan(ViewportPosition(100.0, 100.0), ViewportPosition(260.0, -40.0), size)
        moved = transform.world_to_viewport(grabbed, size)
        assert moved.x == pytest.approx(260.0)
        assert moved.y == pytest.approx(-40.0)

    def test_zero_pan_reports_no_change(self, transform, size):
        point = ViewportPosition(10.0, 10.0)
        assert not transform.pan(point, point, size)

    def test_non_finite_pan_is_rejected(self, transform, size):
        assert not transform.pan(ViewportPosition(0.0, 0.0), ViewportPosition(math.inf, 0.0), size)
        assert transform.center == WorldPosition(0.0, 0.0)


class TestConstruction:
    """Parameter validation, reset and copy."""

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"scale": 0.0},
            {"scale": -1.0},
            {"step": math.nan},
            {"zoom_ratio": 1.0},
            {"zoom_ratio": 0.5},
            {"min_grid_size": 200.0, "max_grid_size": 100.0},
            {"min_grid_size": 0.0},
            {"step": 250.0},
            {"center": WorldPosition(math.inf, 0.0)},
            {"scale": 1e-320},
        ],
    )
    def test_invalid_parameters_raise(self, kwargs):
        with pytest.raises(InvalidTransformError):
            ViewTransform(**kwargs)

    def test_invalid_transform_error_is_value_error(self):
        with pytest.raises(ValueError):
            ViewTransform(zoom_ratio=1.0)

    def test_reset_restores_initial_state(self, size):
        transform = ViewTransform(center=WorldPosition(5.0, 5.0))
        transform.zoom_at(ViewportPosition(1.0, 2.0), -1, size)
        transform.pan(ViewportPosition(0.0, 0.0), ViewportPosition(30.0, 30.0), size)
        transform.reset()
        assert transform.center == WorldPosition(5.0, 5.0)
        assert transform.scale == 1.0
        assert transform.step == 150.0

    def test_copy_is_independent(self, transform, size):
        clone = transform.copy()
        transform.zoom_in(size)
        assert clone.step == 150.0
        assert transform.step != clone.step

    def test_copy_keeps_reset_target(self, transform, size):
        transform.zoom_in(size)
        clone = transform.copy()
        clone.reset()
        assert clone.step == 150.0


def test_viewport_size_is_not_stored(transform):
    """Conversions always use the size passed in."""
    small = transform.world_to_viewport(WorldPosition(0.0, 0.0), ViewportSize(100.0, 100.0))
    large = transform.world_to_viewport(WorldPosition(0.0, 0.0), ViewportSize(1000.0, 1000.0))
    assert small == ViewportPosition(50.0, 50.0)
    assert large == ViewportPosition(500.0, 500.0)
