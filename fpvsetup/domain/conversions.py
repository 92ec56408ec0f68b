"""Conversion between user-facing length units and normalised Length values."""

import numpy as np

from fpvsetup.domain.constants import UNITS_PER_METER
from fpvsetup.domain.exceptions import UnknownUnitError
from fpvsetup.domain.geometry import ratio
from fpvsetup.domain.models.units import Angle, Degrees, Length, Meters, Unit

_UNIT_ALIASES: dict[str, Unit] = {
    "m": Unit.METERS,
    "meter": Unit.METERS,
    "meters": Unit.METERS,
    "metre": Unit.METERS,
    "metres": Unit.METERS,
    "cm": Unit.CENTIMETERS,
    "centimeter": Unit.CENTIMETERS,
    "centimeters": Unit.CENTIMETERS,
    "centimetre": Unit.CENTIMETERS,
    "centimetres": Unit.CENTIMETERS,
    "ft": Unit.FEET,
    "foot": Unit.FEET,
    "feet": Unit.FEET,
    "in": Unit.INCHES,
    "inch": Unit.INCHES,
    "inches": Unit.INCHES,
    '"': Unit.INCHES,
}


def unit_coefficient(unit: Unit) -> float:
    """Number of `unit` in one meter.

    Raises:
        UnknownUnitError: If `unit` is not one of the supported units.
    """
    if not isinstance(unit, Unit):
        raise UnknownUnitError(f"Unknown unit tag: {unit!r}")
    return UNITS_PER_METER[unit]


def unit_from_index(index: int) -> Unit:
    """Map a unit selector index (0-3) to a Unit.

    Raises:
        UnknownUnitError: If the index is outside the selector range.
    """
    # bool is an int subclass, Unit(True) would be CENTIMETERS
    if isinstance(index, bool) or not isinstance(index, int):
        raise UnknownUnitError(f"Unit index must be an integer, got {index!r}")
    try:
        return Unit(index)
    except ValueError:
        raise UnknownUnitError(
            f"Unit index {index!r} outside range 0-{len(Unit) - 1}"
        ) from None


def parse_unit(text: str) -> Unit:
    """Parse a unit name, abbreviation or selector index ('cm', 'Inches', '2')."""
    text = text.strip()
    if text.isdecimal():
        return unit_from_index(int(text))
    try:
        return _UNIT_ALIASES[text.lower()]
    except KeyError:
        raise UnknownUnitError(
            f"Unknown unit '{text}'. Expected one of: m, cm, ft, in"
        ) from None


def length_from_unit(value: float, unit: Unit) -> Length:
    """Interpret a raw number as a length in the given unit."""
    return Length(Meters(value / unit_coefficient(unit)))


def convert_units(length: Length, unit: Unit) -> float:
    """Express a Length as a raw number in the given unit."""
    return length * unit_coefficient(unit)


def conversion_rate(a: Unit, b: Unit) -> float:
    """By what number a value in unit `a` needs to be multiplied to yield unit `b`."""
    return unit_coefficient(b) / unit_coefficient(a)


def real_per_app_from(app_per_real: float, app_per_real_unit: Unit, real_unit: Unit) -> float:
    """
    Length of one application unit in `real_unit`.

    Args:
        app_per_real: How many application units one `app_per_real_unit` spans.
        app_per_real_unit: Real unit `app_per_real` is given for.
        real_unit: Unit to express the result in.
    """
    one_app_unit = length_from_unit(float(ratio(1.0, app_per_real)), app_per_real_unit)
    return convert_units(one_app_unit, real_unit)


def app_per_real_from(real_per_app: float, real_unit: Unit, app_per_real_unit: Unit) -> float:
    """Inverse of real_per_app_from: application units in one `app_per_real_unit`."""
    one_app_unit = length_from_unit(real_per_app, real_unit)
    return float(ratio(1.0, convert_units(one_app_unit, app_per_real_unit)))


def to_degrees(angle: Angle) -> Degrees:
    return Degrees(float(np.degrees(angle)))
