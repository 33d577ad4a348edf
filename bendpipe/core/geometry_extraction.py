"""Geometry extraction from the STEP entity table.

Each circle and toroidal surface points at an AXIS2_PLACEMENT_3D, which
in turn points at the axis direction, the reference direction and the
origin point. Every hop is a lookup that may come back empty; a missing
hop leaves that component at zero rather than failing the extraction.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any

from ..models.profiles import CircleProfile, ToroidalProfile
from ..models.types import ZERO_VECTOR, Vector3D, Point3D
from .step_table import Axis2Placement3DEntity, StepTable


def chase(start: Any, *hops: Callable[[Any], Any]) -> Any:
    """
    Follow a chain of lookups, stopping at the first one that returns None.

    Args:
        start: Initial value (None short-circuits immediately)
        hops: Lookups applied in order to the previous result

    Returns:
        Result of the last hop, or None if any hop came back empty
    """
    value = start
    for hop in hops:
        if value is None:
            return None
        value = hop(value)
    return value


def to_triple(values: Sequence[float] | None) -> tuple[float, float, float]:
    """Pad or cut a coordinate list to (x, y, z); None gives the zero triple."""
    if values is None:
        return ZERO_VECTOR
    padded = list(values[:3]) + [0.0] * (3 - min(len(values), 3))
    return (padded[0], padded[1], padded[2])


def _placement_vector(
    table: StepTable,
    position: int | None,
    attr: Callable[[Axis2Placement3DEntity], int | None],
    collection: dict[int, tuple[float, ...]],
) -> tuple[float, float, float]:
    return to_triple(chase(position, table.axis2_placement_3d.get, attr, collection.get))


def resolve_placement(
    table: StepTable,
    position: int | None,
) -> tuple[Vector3D, Vector3D, Point3D]:
    """
    Resolve a placement reference into its axis, reference direction and origin.

    Args:
        table: Entity table
        position: AXIS2_PLACEMENT_3D id, or None

    Returns:
        Tuple of (direction, direction_ref, center_point); unresolved
        components are (0, 0, 0)
    """
    direction = _placement_vector(table, position, lambda ax: ax.axis, table.direction)
    direction_ref = _placement_vector(table, position, lambda ax: ax.ref_direction, table.direction)
    center_point = _placement_vector(table, position, lambda ax: ax.location, table.cartesian_point)
    return direction, direction_ref, center_point


def extract_circle_profiles(table: StepTable) -> list[CircleProfile]:
    """Build one CircleProfile per CIRCLE entity, in table order."""
    profiles: list[CircleProfile] = []
    for key, circle in table.circle.items():
        direction, direction_ref, center_point = resolve_placement(table, circle.position)
        profiles.append(CircleProfile(
            id=key,
            radius=circle.radius,
            direction=direction,
            direction_ref=direction_ref,
            center_point=center_point,
        ))
    return profiles


def extract_toroidal_profiles(table: StepTable) -> list[ToroidalProfile]:
    """Build one ToroidalProfile per TOROIDAL_SURFACE entity, in table order."""
    profiles: list[ToroidalProfile] = []
    for key, surface in table.toroidal_surface.items():
        direction, direction_ref, center_point = resolve_placement(table, surface.position)
        profiles.append(ToroidalProfile(
            id=key,
            minor_radius=surface.minor_radius,
            major_radius=surface.major_radius,
            direction=direction,
            direction_ref=direction_ref,
            center_point=center_point,
        ))
    return profiles
