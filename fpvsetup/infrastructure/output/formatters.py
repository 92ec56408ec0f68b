"""Output formatting services for console display."""

import json
import math
from typing import Any, Protocol

from fpvsetup.application.calculator import DimensionsSource, OutputSnapshot
from fpvsetup.domain.constants import (
    DEGREE_SIGN,
    FRACTION_DIGITS,
    INFINITY_SENTINEL,
    NAN_SENTINEL,
)
from fpvsetup.domain.conversions import to_degrees
from fpvsetup.domain.models.units import Angle, Unit


def friendly_format(value: float) -> str:
    """
    Format a float as trimmed fixed-point text.

    Up to three fraction digits are kept, trailing zeros and a bare decimal
    point are stripped. NaN and infinities render as sentinels.
    """
    if math.isnan(value):
        return NAN_SENTINEL
    if math.isinf(value):
        return f"-{INFINITY_SENTINEL}" if value < 0 else INFINITY_SENTINEL

    formatted = f"{value:.{FRACTION_DIGITS}f}"
    if "." in formatted:
        formatted = formatted.rstrip("0").rstrip(".")
    # Tiny negative values round to "-0"
    return "0" if formatted == "-0" else formatted


def format_angle(angle: Angle) -> str:
    """Format an angle in degrees with the degree sign."""
    return f"{friendly_format(to_degrees(angle))}{DEGREE_SIGN}"


def format_optional(value: float | None, suffix: str = "") -> str:
    return "—" if value is None else f"{friendly_format(value)}{suffix}"


def _json_number(value: float | None) -> float | str | None:
    if value is None:
        return None
    if not math.isfinite(value):
        return friendly_format(value)
    return round(value, FRACTION_DIGITS)


def _json_angle(angle: Angle | None) -> float | str | None:
    return None if angle is None else _json_number(to_degrees(angle))


def _build_output_dict(outputs: OutputSnapshot) -> dict[str, Any]:
    inputs = outputs.inputs
    output_dict: dict[str, Any] = {
        "monitor": {
            "source": inputs.source.value,
            "width": _json_number(outputs.width),
            "width_unit": inputs.width_unit.label(plural=True),
            "height": _json_number(outputs.height),
            "height_unit": inputs.height_unit.label(plural=True),
            "diagonal": _json_number(outputs.diagonal),
            "diagonal_unit": inputs.diagonal_unit.label(plural=True),
            "aspect": (
                [_json_number(part) for part in outputs.aspect_pair]
                if outputs.aspect_pair
                else None
            ),
        },
        "unit_setup": {
            "app_per_real": _json_number(inputs.app_per_real),
            "app_per_real_unit": inputs.app_per_real_unit.label(),
            "real_per_app": _json_number(outputs.real_per_app),
            "real_per_app_unit": inputs.real_per_app_unit.label(plural=True),
        },
        "portal_like": {
            "fov_deg": _json_angle(outputs.portal_fov),
            "move_back": _json_number(outputs.move_back),
            "move_back_unit": inputs.move_unit.label(plural=True),
            "move_back_app_units": _json_number(outputs.move_back_app_units),
        },
        "focused": {
            "accurate_distance": _json_number(inputs.accurate_distance),
            "accurate_distance_unit": inputs.accurate_distance_unit.label(plural=True),
            "fov_deg": _json_angle(outputs.focused_fov),
        },
    }
    if outputs.missing:
        output_dict["missing_inputs"] = list(outputs.missing)
    return output_dict


class OutputFormatter(Protocol):
    """Protocol for output formatting strategies"""

    def format_result(self, outputs: OutputSnapshot) -> None:
        """Format and display recomputed outputs"""
        ...


class ConsoleOutputFormatter:
    """Format recomputed outputs for console output"""

    def _unit(self, unit: Unit) -> str:
        return unit.label(plural=True)

    def format_result(self, outputs: OutputSnapshot) -> None:
        inputs = outputs.inputs

        print(f"\n{'=' * 60}")
        print("FPV Setup")
        print(f"{'=' * 60}")

        print("\n🖥  Monitor:")
        if outputs.dimensions is None:
            print("  Enter width and height, or diagonal and aspect ratio.")
        else:
            stored = (
                "width × height"
                if inputs.source is DimensionsSource.WIDTH_HEIGHT
                else "diagonal / aspect"
            )
            numerator, denominator = outputs.aspect_pair
            print(f"  Entered as:              {stored}")
            print(
                f"  Width:                   {format_optional(outputs.width)} "
                f"{self._unit(inputs.width_unit)}"
            )
            print(
                f"  Height:                  {format_optional(outputs.height)} "
                f"{self._unit(inputs.height_unit)}"
            )
            print(
                f"  Diagonal:                {format_optional(outputs.diagonal)} "
                f"{self._unit(inputs.diagonal_unit)}"
            )
            print(
                f"  Aspect ratio:            {friendly_format(numerator)}:"
                f"{friendly_format(denominator)}"
            )

        print("\n📏 Unit Setup:")
        print(
            f"  One {inputs.app_per_real_unit.label()} in application units: "
            f"{format_optional(inputs.app_per_real)}"
        )
        print(
            f"  One application unit in {self._unit(inputs.real_per_app_unit)}: "
            f"{format_optional(outputs.real_per_app)}"
        )

        print("\n🪟 Portal-like:")
        if outputs.portal_fov is None:
            print("  Not computed yet (monitor size and viewing distance required).")
        else:
            print(f"  Field of view:           {format_angle(outputs.portal_fov)}")
            print(
                f"  Move the camera back     {format_optional(outputs.move_back)} "
                f"{self._unit(inputs.move_unit)} "
                f"({format_optional(outputs.move_back_app_units)} units)"
            )

        print("\n🎯 Focused:")
        if outputs.focused_fov is None:
            print("  Not computed yet (accurate distance required).")
        else:
            print(
                f"  Accurate at:             {format_optional(inputs.accurate_distance)} "
                f"{self._unit(inputs.accurate_distance_unit)} behind the monitor"
            )
            print(f"  Field of view:           {format_angle(outputs.focused_fov)}")

        if outputs.missing:
            print(f"\nMissing inputs: {', '.join(outputs.missing)}")


class JSONOutputFormatter:
    """Format recomputed outputs as JSON"""

    def format_result(self, outputs: OutputSnapshot) -> None:
        output_dict = _build_output_dict(outputs)
        print(json.dumps(output_dict, indent=2, ensure_ascii=False))
