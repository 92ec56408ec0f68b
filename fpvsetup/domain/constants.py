"""Constants used across the application."""

from fpvsetup.domain.models.units import Unit

# Number of each unit in one meter (the base unit of Length)
UNITS_PER_METER: dict[Unit, float] = {
    Unit.METERS: 1.0,
    Unit.CENTIMETERS: 100.0,
    Unit.FEET: 1.0 / 0.3048,  # international foot
    Unit.INCHES: 1.0 / 0.0254,  # international inch
}

# Maximum difference for a measured ratio to be snapped to a common one.
# Overridable via FPVSETUP_ASPECT_ROUNDING (read in main)
DEFAULT_ASPECT_ROUNDING = 0.1

# Text rendering
DEGREE_SIGN = "°"
NAN_SENTINEL = "<error>"
INFINITY_SENTINEL = "∞"
FRACTION_DIGITS = 3
