"""Catalog of common monitor aspect ratios."""

from fpvsetup.domain.constants import DEFAULT_ASPECT_ROUNDING


def _entry(numerator: int, denominator: int) -> tuple[float, tuple[float, float]]:
    return numerator / denominator, (float(numerator), float(denominator))


# (ratio, (numerator, denominator)); order is lookup priority
COMMON_ASPECT_RATIOS: tuple[tuple[float, tuple[float, float]], ...] = (
    # Common
    _entry(16, 9),
    # Not very common
    _entry(16, 10),
    _entry(4, 3),
    # Considerably less common
    _entry(5, 4),
    _entry(3, 2),
    # Ultrawide gamer ratios
    _entry(17, 9),
    _entry(21, 9),
    _entry(32, 9),
    # Honestly not common at all
    _entry(1, 1),
    _entry(4, 1),
)


def find_common_aspect_ratio(
    ratio: float, rounding: float = DEFAULT_ASPECT_ROUNDING
) -> tuple[float, float] | None:
    """
    Find a common aspect ratio close enough to a single-number ratio.

    Entries are checked in catalog order and the first one differing from
    `ratio` by strictly less than `rounding` wins, even if a later entry is
    numerically closer.

    Args:
        ratio: Width divided by height.
        rounding: Maximum (exclusive) difference for a match.

    Returns:
        A (numerator, denominator) pair, or None if nothing matches.
    """
    return next(
        (
            pair
            for common_ratio, pair in COMMON_ASPECT_RATIOS
            if abs(ratio - common_ratio) < rounding
        ),
        None,
    )
