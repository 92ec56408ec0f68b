import dataclasses
import math

import pytest
from numpy.testing import assert_allclose

from fpvsetup.domain.conversions import convert_units, length_from_unit, to_degrees
from fpvsetup.domain.models.monitor import (
    DiagonalAndAspect,
    MonitorConfiguration,
    WidthAndHeight,
    as_diagonal_and_aspect,
    as_width_and_height,
    aspect,
    describe,
    diagonal,
    width_and_height,
)
from fpvsetup.domain.models.units import Length, Meters, Unit


def inches(value: float) -> Length:
    return length_from_unit(value, Unit.INCHES)


@pytest.fixture
def monitor_27_inch():
    """A 27 inch 16:9 monitor stored as diagonal and aspect."""
    return DiagonalAndAspect(diagonal=inches(27.0), aspect=16.0 / 9.0)


class TestMonitorDimensions:
    def test_width_and_height_stored(self):
        dims = WidthAndHeight(width=Length(Meters(0.6)), height=Length(Meters(0.34)))
        assert width_and_height(dims) == (0.6, 0.34)

    def test_width_and_height_derived(self, monitor_27_inch):
        width, height = width_and_height(monitor_27_inch)
        assert_allclose(convert_units(width, Unit.INCHES), 23.53, atol=0.01)
        assert_allclose(convert_units(height, Unit.INCHES), 13.24, atol=0.01)

    def test_aspect_stored_and_derived(self, monitor_27_inch):
        assert aspect(monitor_27_inch) == 16.0 / 9.0
        dims = WidthAndHeight(width=Length(Meters(0.64)), height=Length(Meters(0.4)))
        assert_allclose(aspect(dims), 1.6)

    def test_aspect_independent_of_input_unit(self):
        """Test that width and height given in different units still compare."""
        dims = WidthAndHeight(
            width=length_from_unit(160.0, Unit.CENTIMETERS),
            height=length_from_unit(0.9, Unit.METERS),
        )
        assert_allclose(aspect(dims), 16.0 / 9.0)

    def test_diagonal_stored_and_derived(self, monitor_27_inch):
        assert diagonal(monitor_27_inch) == inches(27.0)
        dims = WidthAndHeight(width=Length(Meters(0.3)), height=Length(Meters(0.4)))
        assert_allclose(diagonal(dims), 0.5)

    @pytest.mark.parametrize(
        "width, height",
        [(0.6, 0.34), (1.2, 0.3), (0.01, 0.02), (1.0, 1.0), (123.4, 56.7)],
    )
    def test_round_trip(self, width, height):
        """Test WidthAndHeight -> DiagonalAndAspect -> WidthAndHeight."""
        original = WidthAndHeight(width=Length(Meters(width)), height=Length(Meters(height)))
        restored = as_width_and_height(as_diagonal_and_aspect(original))
        assert_allclose(
            [restored.width, restored.height], [width, height], rtol=1e-9
        )

    @pytest.mark.parametrize("width, height", [(0.6, 0.34), (2.0, 0.5), (0.3, 0.4)])
    def test_pythagorean_invariant(self, width, height):
        dims = WidthAndHeight(width=Length(Meters(width)), height=Length(Meters(height)))
        assert_allclose(diagonal(dims) ** 2, width**2 + height**2)

    def test_conversion_does_not_mutate(self, monitor_27_inch):
        converted = as_width_and_height(monitor_27_inch)
        assert isinstance(converted, WidthAndHeight)
        assert monitor_27_inch == DiagonalAndAspect(diagonal=inches(27.0), aspect=16.0 / 9.0)

    def test_frozen(self, monitor_27_inch):
        with pytest.raises(dataclasses.FrozenInstanceError):
            monitor_27_inch.aspect = 1.0

    def test_zero_height_aspect_is_infinite(self):
        """Test that degenerate input propagates instead of raising."""
        dims = WidthAndHeight(width=Length(Meters(0.6)), height=Length(Meters(0.0)))
        assert aspect(dims) == math.inf

    def test_describe(self, monitor_27_inch):
        description = describe(monitor_27_inch)
        assert description["stored_as"] == "DiagonalAndAspect"
        assert description["aspect"] == 16.0 / 9.0
        assert_allclose(description["diagonal"], inches(27.0))
        assert set(description) == {"width", "height", "aspect", "diagonal", "stored_as"}

    def test_unknown_variant_raises(self):
        with pytest.raises(TypeError, match="Expected MonitorDimensions"):
            width_and_height((0.6, 0.34))


class TestMonitorConfiguration:
    def test_fov_27_inch_at_24_inches(self, monitor_27_inch):
        """Test the eye-to-screen FOV of a 27 inch monitor seen from 24 inches."""
        config = MonitorConfiguration(dimensions=monitor_27_inch, distance=inches(24.0))
        half_width = 27.0 * 16.0 / math.sqrt(16.0**2 + 9.0**2) / 2
        expected = math.degrees(2 * math.atan(half_width / 24.0))
        assert_allclose(to_degrees(config.fov()), expected)
        assert_allclose(to_degrees(config.fov()), 52.2, atol=0.1)

    def test_fov_same_for_both_representations(self, monitor_27_inch):
        distance = inches(30.0)
        a = MonitorConfiguration(dimensions=monitor_27_inch, distance=distance)
        b = MonitorConfiguration(
            dimensions=as_width_and_height(monitor_27_inch), distance=distance
        )
        assert_allclose(a.fov(), b.fov())

    def test_fov_monotonic(self):
        dims = WidthAndHeight(width=Length(Meters(0.6)), height=Length(Meters(0.34)))
        fovs = [
            MonitorConfiguration(dimensions=dims, distance=Length(Meters(d))).fov()
            for d in (0.3, 0.5, 0.8, 1.5)
        ]
        assert fovs == sorted(fovs, reverse=True)

        fovs = [
            MonitorConfiguration(
                dimensions=WidthAndHeight(width=Length(Meters(w)), height=Length(Meters(0.34))),
                distance=Length(Meters(0.7)),
            ).fov()
            for w in (0.3, 0.5, 0.8, 1.5)
        ]
        assert fovs == sorted(fovs)

    def test_fov_in_open_interval(self):
        dims = WidthAndHeight(width=Length(Meters(5.0)), height=Length(Meters(3.0)))
        fov = MonitorConfiguration(dimensions=dims, distance=Length(Meters(0.01))).fov()
        assert 0 < fov < math.pi

    def test_fov_for_viewing_distance_from_eye_matches_fov(self, monitor_27_inch):
        """Test that the viewing distance measured from the eye reproduces fov()."""
        config = MonitorConfiguration(dimensions=monitor_27_inch, distance=inches(24.0))
        assert_allclose(
            config.monitor_fov_for_distance(inches(24.0), relative_to_monitor=False),
            config.fov(),
        )

    def test_focused_fov_relative_to_monitor(self, monitor_27_inch):
        config = MonitorConfiguration(dimensions=monitor_27_inch, distance=inches(24.0))
        reference = length_from_unit(2.0, Unit.METERS)
        width, _ = width_and_height(monitor_27_inch)
        half_width = width / 2 / config.distance * (reference + config.distance)
        expected = 2 * math.atan(half_width / reference)
        result = config.monitor_fov_for_distance(reference, relative_to_monitor=True)
        assert_allclose(result, expected)
        # Objects behind the monitor need a wider camera to keep their scale
        assert result > config.fov()

    def test_focused_fov_approaches_portal_fov_far_away(self, monitor_27_inch):
        config = MonitorConfiguration(dimensions=monitor_27_inch, distance=inches(24.0))
        far = config.monitor_fov_for_distance(Length(Meters(1e9)), relative_to_monitor=True)
        assert_allclose(far, config.fov(), rtol=1e-6)

    def test_zero_distance_propagates(self):
        dims = WidthAndHeight(width=Length(Meters(0.6)), height=Length(Meters(0.34)))
        config = MonitorConfiguration(dimensions=dims, distance=Length(Meters(0.0)))
        assert_allclose(config.fov(), math.pi)
