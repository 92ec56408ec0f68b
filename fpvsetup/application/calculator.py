"""Recompute every output field from a snapshot of every input field.

This replaces widget-to-widget callbacks: whoever owns the inputs (the CLI, or
any UI event layer) builds an InputSnapshot after a change and renders the
returned OutputSnapshot. Nothing here holds state between calls.
"""

from dataclasses import dataclass, replace
from enum import Enum

from fpvsetup.domain.aspect import find_common_aspect_ratio
from fpvsetup.domain.constants import DEFAULT_ASPECT_ROUNDING
from fpvsetup.domain.conversions import (
    convert_units,
    length_from_unit,
    real_per_app_from,
)
from fpvsetup.domain.models.monitor import (
    DiagonalAndAspect,
    MonitorConfiguration,
    MonitorDimensions,
    WidthAndHeight,
    aspect,
    describe,
    diagonal,
    width_and_height,
)
from fpvsetup.domain.models.units import Angle, Unit
from fpvsetup.logging_config import get_logger

logger = get_logger(__name__)


class DimensionsSource(str, Enum):
    """Which monitor representation the user entered last."""

    WIDTH_HEIGHT = "width_height"
    DIAGONAL_ASPECT = "diagonal_aspect"


@dataclass(frozen=True, slots=True)
class InputSnapshot:
    """
    Values of all input fields at one moment.

    Numbers are already parsed; None marks a field that is still empty.
    `app_per_real` is the length of one `app_per_real_unit` expressed in
    application (engine) units.
    """

    source: DimensionsSource = DimensionsSource.WIDTH_HEIGHT
    width: float | None = None
    width_unit: Unit = Unit.CENTIMETERS
    height: float | None = None
    height_unit: Unit = Unit.CENTIMETERS
    diagonal: float | None = None
    diagonal_unit: Unit = Unit.INCHES
    aspect: float | None = None
    distance: float | None = None
    distance_unit: Unit = Unit.CENTIMETERS
    app_per_real: float | None = 1.0
    app_per_real_unit: Unit = Unit.METERS
    real_per_app_unit: Unit = Unit.METERS
    move_unit: Unit = Unit.METERS
    accurate_distance: float | None = None
    accurate_distance_unit: Unit = Unit.METERS

    def with_dimensions(self, dimensions: MonitorDimensions) -> "InputSnapshot":
        """Seed the monitor fields from known dimensions (e.g. a probe result)."""
        if isinstance(dimensions, DiagonalAndAspect):
            return replace(
                self,
                source=DimensionsSource.DIAGONAL_ASPECT,
                diagonal=convert_units(dimensions.diagonal, self.diagonal_unit),
                aspect=dimensions.aspect,
            )
        width, height = width_and_height(dimensions)
        return replace(
            self,
            source=DimensionsSource.WIDTH_HEIGHT,
            width=convert_units(width, self.width_unit),
            height=convert_units(height, self.height_unit),
        )


@dataclass(frozen=True, slots=True)
class OutputSnapshot:
    """
    Values of all derived fields. None means "not computed yet" because an
    input the value depends on is empty.
    """

    inputs: InputSnapshot
    dimensions: MonitorDimensions | None = None
    width: float | None = None
    height: float | None = None
    diagonal: float | None = None
    aspect_pair: tuple[float, float] | None = None
    real_per_app: float | None = None
    portal_fov: Angle | None = None
    move_back: float | None = None
    move_back_app_units: float | None = None
    focused_fov: Angle | None = None
    missing: tuple[str, ...] = ()


def build_dimensions(snapshot: InputSnapshot) -> MonitorDimensions | None:
    """Build monitor dimensions from whichever representation was entered."""
    if snapshot.source is DimensionsSource.DIAGONAL_ASPECT:
        if snapshot.diagonal is None or snapshot.aspect is None:
            return None
        return DiagonalAndAspect(
            diagonal=length_from_unit(snapshot.diagonal, snapshot.diagonal_unit),
            aspect=snapshot.aspect,
        )

    if snapshot.width is None or snapshot.height is None:
        return None
    return WidthAndHeight(
        width=length_from_unit(snapshot.width, snapshot.width_unit),
        height=length_from_unit(snapshot.height, snapshot.height_unit),
    )


def snap_aspect(ratio: float, rounding: float = DEFAULT_ASPECT_ROUNDING) -> tuple[float, float]:
    """Display pair for a ratio: a common N:D if one is close, else ratio:1."""
    return find_common_aspect_ratio(ratio, rounding) or (ratio, 1.0)


def _missing_fields(snapshot: InputSnapshot) -> tuple[str, ...]:
    if snapshot.source is DimensionsSource.DIAGONAL_ASPECT:
        required = ("diagonal", "aspect", "distance", "app_per_real", "accurate_distance")
    else:
        required = ("width", "height", "distance", "app_per_real", "accurate_distance")
    return tuple(name for name in required if getattr(snapshot, name) is None)


def recompute_outputs(
    snapshot: InputSnapshot, aspect_rounding: float = DEFAULT_ASPECT_ROUNDING
) -> OutputSnapshot:
    """
    Compute every output field from the input snapshot.

    Args:
        snapshot: Current values of all input fields.
        aspect_rounding: Tolerance for snapping the aspect ratio to a common one.

    Returns:
        An OutputSnapshot; groups whose inputs are incomplete are left as None.
    """
    results: dict = {"missing": _missing_fields(snapshot)}

    if snapshot.app_per_real is not None:
        results["real_per_app"] = real_per_app_from(
            snapshot.app_per_real, snapshot.app_per_real_unit, snapshot.real_per_app_unit
        )

    dimensions = build_dimensions(snapshot)
    if dimensions is None:
        logger.debug(f"Monitor dimensions incomplete, missing: {results['missing']}")
        return OutputSnapshot(inputs=snapshot, **results)

    logger.debug(f"Monitor dimensions: {describe(dimensions)}")
    width, height = width_and_height(dimensions)
    results.update(
        dimensions=dimensions,
        width=convert_units(width, snapshot.width_unit),
        height=convert_units(height, snapshot.height_unit),
        diagonal=convert_units(diagonal(dimensions), snapshot.diagonal_unit),
        aspect_pair=snap_aspect(aspect(dimensions), aspect_rounding),
    )

    if snapshot.distance is None:
        return OutputSnapshot(inputs=snapshot, **results)

    distance = length_from_unit(snapshot.distance, snapshot.distance_unit)
    configuration = MonitorConfiguration(dimensions=dimensions, distance=distance)

    # Portal-like: moving the camera back by the viewing distance puts the
    # virtual screen plane where the monitor is
    results["portal_fov"] = configuration.fov()
    results["move_back"] = convert_units(distance, snapshot.move_unit)
    if snapshot.app_per_real is not None:
        results["move_back_app_units"] = (
            convert_units(distance, snapshot.app_per_real_unit) * snapshot.app_per_real
        )

    if snapshot.accurate_distance is not None:
        accurate_distance = length_from_unit(
            snapshot.accurate_distance, snapshot.accurate_distance_unit
        )
        results["focused_fov"] = configuration.monitor_fov_for_distance(
            accurate_distance, relative_to_monitor=True
        )

    logger.debug(
        f"Recomputed outputs: portal_fov={results['portal_fov']:.6f} rad, "
        f"focused_fov={results.get('focused_fov')}"
    )
    return OutputSnapshot(inputs=snapshot, **results)
