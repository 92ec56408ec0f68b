"""First-person camera field of view from monitor size and viewing distance."""

from fpvsetup.domain.aspect import COMMON_ASPECT_RATIOS, find_common_aspect_ratio
from fpvsetup.domain.conversions import (
    conversion_rate,
    convert_units,
    length_from_unit,
)
from fpvsetup.domain.models import (
    DiagonalAndAspect,
    MonitorConfiguration,
    MonitorDimensions,
    Unit,
    WidthAndHeight,
)

__all__ = [
    "COMMON_ASPECT_RATIOS",
    "find_common_aspect_ratio",
    "conversion_rate",
    "convert_units",
    "length_from_unit",
    "DiagonalAndAspect",
    "MonitorConfiguration",
    "MonitorDimensions",
    "Unit",
    "WidthAndHeight",
]
