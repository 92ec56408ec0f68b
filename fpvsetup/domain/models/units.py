# fpvsetup/domain/models/units.py
"""
Type-safe unit definitions for monitor geometry calculations.

This module uses NewType to create distinct types for different units,
helping catch unit conversion errors at type-checking time. Every length
handled by the domain is normalised to meters and every angle to radians;
conversion to and from user-facing units happens at the edges only.

Usage:
    from fpvsetup.domain.models.units import Length, Meters, Unit
    from fpvsetup.domain.conversions import length_from_unit

    width: Length = length_from_unit(60.0, Unit.CENTIMETERS)  # 0.6 m
"""

from enum import IntEnum
from typing import NewType

# Base physical units
Meters = NewType("Meters", float)  # Length in meters
Radians = NewType("Radians", float)  # Angle in radians
Degrees = NewType("Degrees", float)  # Angle in degrees, display only

# Semantic types (domain-specific meanings)
Length = NewType("Length", Meters)  # Physical length, normalised to meters
Angle = NewType("Angle", Radians)  # Physical angle, normalised to radians


class Unit(IntEnum):
    """Closed set of length units a user can pick from a unit selector.

    The integer values are the selector indices.
    """

    METERS = 0
    CENTIMETERS = 1
    FEET = 2
    INCHES = 3

    def label(self, plural: bool = False) -> str:
        singular_name, plural_name = _UNIT_LABELS[self]
        return plural_name if plural else singular_name


_UNIT_LABELS: dict[Unit, tuple[str, str]] = {
    Unit.METERS: ("meter", "meters"),
    Unit.CENTIMETERS: ("centimeter", "centimeters"),
    Unit.FEET: ("foot", "feet"),
    Unit.INCHES: ("inch", "inches"),
}
