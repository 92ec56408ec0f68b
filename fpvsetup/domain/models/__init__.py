# fpvsetup/domain/models/__init__.py
from .units import Angle, Degrees, Length, Meters, Radians, Unit
from .monitor import (
    DiagonalAndAspect,
    MonitorConfiguration,
    MonitorDimensions,
    WidthAndHeight,
    as_diagonal_and_aspect,
    as_width_and_height,
    aspect,
    describe,
    diagonal,
    width_and_height,
)

__all__ = [
    "Angle",
    "Degrees",
    "Length",
    "Meters",
    "Radians",
    "Unit",
    "DiagonalAndAspect",
    "MonitorConfiguration",
    "MonitorDimensions",
    "WidthAndHeight",
    "as_diagonal_and_aspect",
    "as_width_and_height",
    "aspect",
    "describe",
    "diagonal",
    "width_and_height",
]
