import math
from dataclasses import replace

import pytest
from numpy.testing import assert_allclose

from fpvsetup.application.calculator import (
    DimensionsSource,
    InputSnapshot,
    build_dimensions,
    recompute_outputs,
    snap_aspect,
)
from fpvsetup.domain.conversions import to_degrees
from fpvsetup.domain.models.monitor import DiagonalAndAspect, WidthAndHeight
from fpvsetup.domain.models.units import Length, Meters, Unit


@pytest.fixture
def width_height_snapshot():
    """A 60 x 33.75 cm monitor viewed from 60 cm."""
    return InputSnapshot(
        source=DimensionsSource.WIDTH_HEIGHT,
        width=60.0,
        height=33.75,
        width_unit=Unit.CENTIMETERS,
        height_unit=Unit.CENTIMETERS,
        diagonal_unit=Unit.INCHES,
        distance=60.0,
        distance_unit=Unit.CENTIMETERS,
        app_per_real=1.0,
        app_per_real_unit=Unit.METERS,
        real_per_app_unit=Unit.CENTIMETERS,
        move_unit=Unit.METERS,
        accurate_distance=2.0,
        accurate_distance_unit=Unit.METERS,
    )


class TestBuildDimensions:
    def test_width_height(self, width_height_snapshot):
        dims = build_dimensions(width_height_snapshot)
        assert isinstance(dims, WidthAndHeight)
        assert_allclose([dims.width, dims.height], [0.6, 0.3375])

    def test_diagonal_aspect(self):
        snapshot = InputSnapshot(
            source=DimensionsSource.DIAGONAL_ASPECT,
            diagonal=27.0,
            diagonal_unit=Unit.INCHES,
            aspect=16 / 9,
        )
        dims = build_dimensions(snapshot)
        assert isinstance(dims, DiagonalAndAspect)
        assert_allclose(dims.diagonal, 27 * 0.0254)

    def test_incomplete(self):
        assert build_dimensions(InputSnapshot(width=60.0)) is None
        assert (
            build_dimensions(
                InputSnapshot(source=DimensionsSource.DIAGONAL_ASPECT, diagonal=27.0)
            )
            is None
        )


class TestSnapAspect:
    def test_common(self):
        assert snap_aspect(1.7777) == (16.0, 9.0)

    def test_uncommon_falls_back_to_ratio_over_one(self):
        assert snap_aspect(2.9) == (2.9, 1.0)


class TestRecomputeOutputs:
    def test_width_height_outputs(self, width_height_snapshot):
        outputs = recompute_outputs(width_height_snapshot)

        assert outputs.aspect_pair == (16.0, 9.0)
        assert_allclose(outputs.width, 60.0)
        assert_allclose(outputs.height, 33.75)
        expected_diagonal_in = math.hypot(60.0, 33.75) / 2.54
        assert_allclose(outputs.diagonal, expected_diagonal_in)
        assert_allclose(to_degrees(outputs.portal_fov), math.degrees(2 * math.atan(30 / 60)))
        assert outputs.missing == ()

    def test_move_back(self, width_height_snapshot):
        """Test that the camera moves back by the viewing distance."""
        outputs = recompute_outputs(width_height_snapshot)
        assert_allclose(outputs.move_back, 0.6)
        assert_allclose(outputs.move_back_app_units, 0.6)

    def test_move_back_in_app_units_uses_scale_unit(self, width_height_snapshot):
        """Test 100 app units per foot with the move shown in meters."""
        snapshot = replace(width_height_snapshot, app_per_real=100.0, app_per_real_unit=Unit.FEET)
        outputs = recompute_outputs(snapshot)
        assert_allclose(outputs.move_back, 0.6)
        assert_allclose(outputs.move_back_app_units, 0.6 / 0.3048 * 100.0)

    def test_real_per_app(self, width_height_snapshot):
        outputs = recompute_outputs(width_height_snapshot)
        assert_allclose(outputs.real_per_app, 100.0)

    def test_focused_fov(self, width_height_snapshot):
        outputs = recompute_outputs(width_height_snapshot)
        # half width 0.3 m at 0.6 m, projected to 2.6 m from the eye, seen from 2 m
        expected = 2 * math.atan(0.3 / 0.6 * 2.6 / 2.0)
        assert_allclose(outputs.focused_fov, expected)
        assert outputs.focused_fov > outputs.portal_fov

    def test_diagonal_aspect_outputs(self):
        snapshot = InputSnapshot(
            source=DimensionsSource.DIAGONAL_ASPECT,
            diagonal=27.0,
            diagonal_unit=Unit.INCHES,
            aspect=16 / 9,
            width_unit=Unit.INCHES,
            height_unit=Unit.INCHES,
            distance=24.0,
            distance_unit=Unit.INCHES,
        )
        outputs = recompute_outputs(snapshot)
        assert_allclose(outputs.width, 23.53, atol=0.01)
        assert_allclose(outputs.height, 13.24, atol=0.01)
        assert_allclose(outputs.diagonal, 27.0)
        assert outputs.aspect_pair == (16.0, 9.0)
        assert_allclose(to_degrees(outputs.portal_fov), 52.2, atol=0.1)
        assert outputs.focused_fov is None
        assert outputs.missing == ("accurate_distance",)

    def test_missing_dimensions(self):
        outputs = recompute_outputs(InputSnapshot(width=60.0, distance=70.0))
        assert outputs.dimensions is None
        assert outputs.portal_fov is None
        assert outputs.focused_fov is None
        assert outputs.real_per_app is not None
        assert "height" in outputs.missing

    def test_missing_distance(self):
        outputs = recompute_outputs(InputSnapshot(width=60.0, height=34.0))
        assert outputs.aspect_pair is not None
        assert outputs.portal_fov is None
        assert outputs.move_back is None

    def test_missing_app_scale(self, width_height_snapshot):
        outputs = recompute_outputs(replace(width_height_snapshot, app_per_real=None))
        assert outputs.real_per_app is None
        assert outputs.move_back_app_units is None
        assert outputs.portal_fov is not None

    def test_aspect_rounding_parameter(self, width_height_snapshot):
        """Test that a tight tolerance keeps the raw ratio."""
        snapshot = replace(width_height_snapshot, height=34.0)
        assert recompute_outputs(snapshot).aspect_pair == (16.0, 9.0)
        raw = recompute_outputs(snapshot, aspect_rounding=0.001).aspect_pair
        assert raw[1] == 1.0
        assert_allclose(raw[0], 60.0 / 34.0)

    def test_degenerate_monitor_propagates_nan(self):
        outputs = recompute_outputs(InputSnapshot(width=0.0, height=0.0, distance=60.0))
        assert math.isnan(outputs.aspect_pair[0])
        assert outputs.portal_fov == 0.0

    def test_pure(self, width_height_snapshot):
        """Test that recomputing the same snapshot gives equal outputs."""
        assert recompute_outputs(width_height_snapshot) == recompute_outputs(
            width_height_snapshot
        )


class TestWithDimensions:
    def test_seed_width_height(self):
        snapshot = InputSnapshot(width_unit=Unit.CENTIMETERS, height_unit=Unit.CENTIMETERS)
        seeded = snapshot.with_dimensions(
            WidthAndHeight(width=Length(Meters(0.6)), height=Length(Meters(0.34)))
        )
        assert seeded.source is DimensionsSource.WIDTH_HEIGHT
        assert_allclose([seeded.width, seeded.height], [60.0, 34.0])
        assert snapshot.width is None

    def test_seed_diagonal_aspect(self):
        snapshot = InputSnapshot(diagonal_unit=Unit.INCHES)
        seeded = snapshot.with_dimensions(
            DiagonalAndAspect(diagonal=Length(Meters(27 * 0.0254)), aspect=1.6)
        )
        assert seeded.source is DimensionsSource.DIAGONAL_ASPECT
        assert_allclose(seeded.diagonal, 27.0)
        assert seeded.aspect == 1.6
