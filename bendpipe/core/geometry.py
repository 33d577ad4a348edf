"""3D vector math and geometry utilities."""

from __future__ import annotations

import math

from ..models.types import Vector3D, Point3D
from .tolerances import MATCH_TOLERANCE, ZERO_MAGNITUDE


class ZeroVectorError(ValueError):
    """Raised when a zero-length vector is used in calculations requiring non-zero vectors."""

    pass


def dot_product(v1: Vector3D, v2: Vector3D) -> float:
    """Dot product of two 3D vectors."""
    return v1[0] * v2[0] + v1[1] * v2[1] + v1[2] * v2[2]


def magnitude(v: Vector3D) -> float:
    """Calculate the magnitude (length) of a 3D vector."""
    return math.sqrt(v[0]**2 + v[1]**2 + v[2]**2)


def _safe_magnitude_product(v1: Vector3D, v2: Vector3D) -> float:
    """
    Calculate the product of magnitudes, raising if either vector has zero length.

    Raises:
        ZeroVectorError: If either vector has zero or near-zero length
    """
    mag1 = magnitude(v1)
    mag2 = magnitude(v2)

    if mag1 < ZERO_MAGNITUDE:
        raise ZeroVectorError(
            f"First vector has zero length (magnitude={mag1}): {v1}"
        )
    if mag2 < ZERO_MAGNITUDE:
        raise ZeroVectorError(
            f"Second vector has zero length (magnitude={mag2}): {v2}"
        )

    return mag1 * mag2


def angle_between_vectors(v1: Vector3D, v2: Vector3D) -> float:
    """
    Calculate the angle between two vectors in degrees.

    Args:
        v1: First vector
        v2: Second vector

    Returns:
        Angle in degrees (0-180)

    Raises:
        ZeroVectorError: If either vector has zero length
    """
    mag_product = _safe_magnitude_product(v1, v2)
    cos_angle: float = dot_product(v1, v2) / mag_product
    cos_angle = max(-1.0, min(1.0, cos_angle))  # Clamp for floating point errors
    return math.degrees(math.acos(cos_angle))


def distance_between_points(p1: Point3D, p2: Point3D) -> float:
    """
    Euclidean distance between two 3D points.

    Used both for feed lengths and for testing whether a circle center
    lies on a toroid's pivot circle.
    """
    dx = p2[0] - p1[0]
    dy = p2[1] - p1[1]
    dz = p2[2] - p1[2]
    return math.sqrt(dx * dx + dy * dy + dz * dz)


def distance_matches(distance: float, expected: float,
                     tolerance: float = MATCH_TOLERANCE) -> bool:
    """
    Check if a measured distance equals an expected one within tolerance.

    Args:
        distance: Measured distance
        expected: Expected distance (e.g. a toroid's major radius)
        tolerance: Strict upper bound on the absolute difference

    Returns:
        True if ``|distance - expected| < tolerance``
    """
    return abs(distance - expected) < tolerance
