"""Cross-section and bend-surface profiles extracted from a STEP model."""

from __future__ import annotations

from dataclasses import dataclass

from .types import Vector3D, Point3D


@dataclass(frozen=True, slots=True)
class CircleProfile:
    """One circular cross-section ring of the tube wall."""

    id: int
    radius: float
    direction: Vector3D  # Ring axis, parallel to the centerline
    direction_ref: Vector3D
    center_point: Point3D

    def __repr__(self) -> str:
        return f"CircleProfile(#{self.id}, r={self.radius}, center={self.center_point})"


@dataclass(frozen=True, slots=True)
class ToroidalProfile:
    """One candidate bend surface.

    The centerline of a bent tube wraps the pivot circle of radius
    ``major_radius`` around ``center_point``; ``minor_radius`` is the
    tube wall radius.
    """

    id: int
    minor_radius: float
    major_radius: float
    direction: Vector3D  # Bend axis (normal of the bend plane)
    direction_ref: Vector3D
    center_point: Point3D

    def __repr__(self) -> str:
        return (
            f"ToroidalProfile(#{self.id}, minor={self.minor_radius}, "
            f"major={self.major_radius}, center={self.center_point})"
        )
