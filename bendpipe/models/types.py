"""Shared type aliases for geometry values."""

from __future__ import annotations

from typing import TypeAlias

Vector3D: TypeAlias = tuple[float, float, float]
Point3D: TypeAlias = tuple[float, float, float]

ZERO_VECTOR: Vector3D = (0.0, 0.0, 0.0)
