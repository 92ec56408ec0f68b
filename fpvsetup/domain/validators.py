"""Input validation utilities for user-entered monitor measurements.

The geometry core never validates: these checks belong to the layer that
turns user text into numbers.
"""

import math


class ValidationError(ValueError):
    """Raised when validation fails."""

    pass


def validate_number(value: float, name: str = "value") -> None:
    """Validate that a parsed value is a finite real number.

    Args:
        value: Parsed input value
        name: Field name for error messages

    Raises:
        ValidationError: If the value is not a finite number
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError(f"{name} must be numeric, got {type(value)}")

    if not math.isfinite(value):
        raise ValidationError(f"{name} must be finite, got {value}")


def validate_positive(value: float, name: str = "value") -> None:
    """Validate a length, distance or ratio that must be strictly positive.

    Args:
        value: Parsed input value
        name: Field name for error messages

    Raises:
        ValidationError: If the value is not a finite positive number
    """
    validate_number(value, name)

    if value <= 0:
        raise ValidationError(f"{name} must be positive, got {value}")
