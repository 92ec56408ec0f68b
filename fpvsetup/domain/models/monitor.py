"""Domain models for monitor geometry and viewing configuration

Monitor dimensions are a sum type of two interchangeable representations,
`WidthAndHeight` and `DiagonalAndAspect`. The accessors below work on either
variant and derive whatever the stored one does not hold.
"""

from dataclasses import dataclass
from typing import Any

from fpvsetup.domain.geometry import (
    diagonal_and_aspect_to_width_and_height,
    eye_to_screen_fov,
    fov_for_reference_distance,
    hypotenuse,
    ratio,
)
from .units import Angle, Length, Meters, Radians


@dataclass(frozen=True, slots=True)
class WidthAndHeight:
    """Dimensions expressed directly as the width and the height."""

    width: Length
    height: Length


@dataclass(frozen=True, slots=True)
class DiagonalAndAspect:
    """Dimensions expressed indirectly as the diagonal and the aspect ratio."""

    diagonal: Length  # between two opposite corners of the screen
    aspect: float  # width / height


MonitorDimensions = WidthAndHeight | DiagonalAndAspect


def _length(value: Any) -> Length:
    return Length(Meters(float(value)))


def _angle(value: Any) -> Angle:
    return Angle(Radians(float(value)))


def _unknown_variant(dimensions: Any) -> TypeError:
    return TypeError(f"Expected MonitorDimensions, got {type(dimensions)}")


def width_and_height(dimensions: MonitorDimensions) -> tuple[Length, Length]:
    """Return the width and height, calculating them if necessary."""
    if isinstance(dimensions, WidthAndHeight):
        return dimensions.width, dimensions.height
    if isinstance(dimensions, DiagonalAndAspect):
        width, height = diagonal_and_aspect_to_width_and_height(
            dimensions.diagonal, dimensions.aspect
        )
        return _length(width), _length(height)
    raise _unknown_variant(dimensions)


def aspect(dimensions: MonitorDimensions) -> float:
    """Return the aspect ratio (width / height), calculating it if necessary."""
    if isinstance(dimensions, WidthAndHeight):
        return float(ratio(dimensions.width, dimensions.height))
    if isinstance(dimensions, DiagonalAndAspect):
        return dimensions.aspect
    raise _unknown_variant(dimensions)


def diagonal(dimensions: MonitorDimensions) -> Length:
    """Return the diagonal length, calculating it if necessary."""
    if isinstance(dimensions, WidthAndHeight):
        # Width and height are the legs, the diagonal is the hypotenuse
        return _length(hypotenuse(dimensions.width, dimensions.height))
    if isinstance(dimensions, DiagonalAndAspect):
        return dimensions.diagonal
    raise _unknown_variant(dimensions)


def as_width_and_height(dimensions: MonitorDimensions) -> WidthAndHeight:
    width, height = width_and_height(dimensions)
    return WidthAndHeight(width=width, height=height)


def as_diagonal_and_aspect(dimensions: MonitorDimensions) -> DiagonalAndAspect:
    return DiagonalAndAspect(diagonal=diagonal(dimensions), aspect=aspect(dimensions))


def describe(dimensions: MonitorDimensions) -> dict[str, Any]:
    """All derived measurements (meters) plus the name of the stored variant."""
    width, height = width_and_height(dimensions)
    return {
        "width": width,
        "height": height,
        "aspect": aspect(dimensions),
        "diagonal": diagonal(dimensions),
        "stored_as": type(dimensions).__name__,
    }


@dataclass(frozen=True, slots=True)
class MonitorConfiguration:
    """
    Measurements of the monitor dimensions and the viewer position.

    `distance` is how far the viewer's eye is from the monitor surface. The
    viewer is assumed to be centred in front of the screen.
    """

    dimensions: MonitorDimensions
    distance: Length

    def fov(self) -> Angle:
        """Horizontal angle at the eye subtended by the screen width."""
        width, _ = width_and_height(self.dimensions)
        return _angle(eye_to_screen_fov(width, self.distance))

    def monitor_fov_for_distance(
        self, distance: Length, relative_to_monitor: bool
    ) -> Angle:
        """
        Camera FOV that shows objects at `distance` with accurate scale.

        Args:
            distance: Reference distance, measured from the eye or, when
                `relative_to_monitor` is True, from the monitor surface.
            relative_to_monitor: Whether `distance` starts at the monitor.

        Returns:
            The field of view for a virtual camera whose viewpoint is the
            reference distance, such that the plane filling the screen there
            keeps its real-world size.
        """
        distance_from_eye = distance + self.distance if relative_to_monitor else distance
        return _angle(
            fov_for_reference_distance(self.fov(), distance_from_eye, distance)
        )
