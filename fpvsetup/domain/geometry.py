"""Planar trigonometry for monitor dimensions and viewing angles.

All functions accept scalars or numpy arrays and follow IEEE-754 semantics:
degenerate inputs (zero or negative lengths) produce NaN or infinity instead
of raising, so callers can render them as sentinels.
"""

import numpy as np
from numpy.typing import ArrayLike, NDArray


def hypotenuse(a: ArrayLike, b: ArrayLike) -> NDArray[np.float64]:
    """
    Length of the hypotenuse of a right triangle with legs `a` and `b`.

    Args:
        a: First leg (e.g. monitor width).
        b: Second leg (e.g. monitor height).

    Returns:
        sqrt(a² + b²), in the unit of the legs.
    """
    a = np.asarray(a, dtype=np.float64)
    b = np.asarray(b, dtype=np.float64)
    return np.sqrt(a**2 + b**2)


def ratio(numerator: ArrayLike, denominator: ArrayLike) -> NDArray[np.float64]:
    """Divide without raising on zero denominators (yields ±inf or NaN)."""
    with np.errstate(divide="ignore", invalid="ignore"):
        return np.divide(
            np.asarray(numerator, dtype=np.float64),
            np.asarray(denominator, dtype=np.float64),
        )


def diagonal_and_aspect_to_width_and_height(
    diagonal: ArrayLike, aspect: ArrayLike
) -> tuple[NDArray[np.float64], NDArray[np.float64]]:
    """
    Recover width and height from the diagonal and the width/height ratio.

    With width = aspect * height, the Pythagorean theorem gives
    diagonal² = height² * (aspect² + 1).

    Args:
        diagonal: Length of the diagonal.
        aspect: Width divided by height.

    Returns:
        A tuple (width, height) in the unit of the diagonal.
    """
    aspect = np.asarray(aspect, dtype=np.float64)
    height = ratio(diagonal, np.sqrt(aspect**2 + 1.0))
    width = height * aspect
    return width, height


def eye_to_screen_fov(width: ArrayLike, distance: ArrayLike) -> NDArray[np.float64]:
    """
    Angle at the viewpoint subtended by a screen of the given width.

    The viewer is assumed centred and facing the screen perpendicularly, so
    the viewer-to-screen triangle splits into two right triangles whose
    opposite leg is half the width and whose adjacent leg is the distance.

    Args:
        width: Screen width.
        distance: Distance from the eye to the screen surface, same unit.

    Returns:
        The full horizontal field of view in radians.
    """
    half_width = np.asarray(width, dtype=np.float64) / 2.0
    return 2.0 * np.arctan(ratio(half_width, distance))


def fov_for_reference_distance(
    base_fov: ArrayLike,
    distance_from_eye: ArrayLike,
    reference_distance: ArrayLike,
) -> NDArray[np.float64]:
    """
    Re-project a field of view onto a plane and view it from another distance.

    The base half-angle is projected out to `distance_from_eye` to find the
    half-width of the plane that exactly fills the screen there, and the angle
    that half-width subtends at `reference_distance` is returned.

    Args:
        base_fov: Eye-to-screen field of view in radians.
        distance_from_eye: Distance from the eye to the reference plane.
        reference_distance: Distance the resulting angle is measured from.

    Returns:
        The full field of view in radians.
    """
    base_half_angle = np.asarray(base_fov, dtype=np.float64) / 2.0
    half_width = np.tan(base_half_angle) * np.asarray(distance_from_eye, dtype=np.float64)
    final_half_angle = np.arctan(ratio(half_width, reference_distance))
    return final_half_angle * 2.0
