"""Keyed entity table built from a parsed STEP document.

The ISO-10303-21 text itself is parsed by ``steputils.p21``. This module
only picks out the entity kinds the tube extractor needs and stores them
as small typed records, addressed by integer entity id. References to
other entities are kept as ids; anything that is not a plain reference
(``$``, ``*``, an inline value) is stored as None.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from typing import Any

from steputils import p21

from ..lib.log_utils import log


class StepDocumentError(ValueError):
    """Raised when a document cannot be parsed as ISO-10303-21."""

    pass


@dataclass(frozen=True, slots=True)
class CircleEntity:
    """CIRCLE(name, position, radius)"""
    position: int | None
    radius: float


@dataclass(frozen=True, slots=True)
class ToroidalSurfaceEntity:
    """TOROIDAL_SURFACE(name, position, major_radius, minor_radius)"""
    position: int | None
    major_radius: float
    minor_radius: float


@dataclass(frozen=True, slots=True)
class Axis2Placement3DEntity:
    """AXIS2_PLACEMENT_3D(name, location, axis, ref_direction)"""
    location: int | None
    axis: int | None
    ref_direction: int | None


@dataclass(slots=True)
class StepTable:
    """Entity collections keyed by entity id.

    ``direction`` holds direction ratios and ``cartesian_point`` holds
    coordinates, both as tuples of floats exactly as listed in the file.
    """

    circle: dict[int, CircleEntity] = field(default_factory=dict)
    toroidal_surface: dict[int, ToroidalSurfaceEntity] = field(default_factory=dict)
    axis2_placement_3d: dict[int, Axis2Placement3DEntity] = field(default_factory=dict)
    direction: dict[int, tuple[float, ...]] = field(default_factory=dict)
    cartesian_point: dict[int, tuple[float, ...]] = field(default_factory=dict)


def entity_id(ref: str) -> int:
    """Convert an instance name like ``'#87'`` into the integer id 87."""
    return int(ref.lstrip('#'))


def reference_id(param: Any) -> int | None:
    """Return the entity id a parameter refers to, or None if it is not a reference."""
    if isinstance(param, p21.Reference):
        return entity_id(param)
    return None


def as_float(param: Any) -> float:
    """
    Convert a numeric STEP parameter to float.

    Raises:
        ValueError: If the parameter is not an integer or real value
    """
    # bool is an int subclass; STEP logicals must not pass as numbers
    if isinstance(param, bool) or not isinstance(param, (int, float)):
        raise ValueError(f"expected a number, got {param!r}")
    return float(param)


def as_float_tuple(param: Any) -> tuple[float, ...]:
    """
    Convert a STEP aggregate of numbers to a tuple of floats.

    Raises:
        ValueError: If the parameter is not a list or holds non-numbers
    """
    if isinstance(param, str) or not isinstance(param, Sequence):
        raise ValueError(f"expected a list of numbers, got {param!r}")
    return tuple(as_float(p) for p in param)


def _require_params(params: Sequence[Any], count: int) -> None:
    if len(params) < count:
        raise ValueError(f"expected {count} parameters, got {len(params)}")


def _add_circle(table: StepTable, key: int, params: Sequence[Any]) -> None:
    _require_params(params, 3)
    table.circle[key] = CircleEntity(
        position=reference_id(params[1]),
        radius=as_float(params[2]),
    )


def _add_toroidal_surface(table: StepTable, key: int, params: Sequence[Any]) -> None:
    _require_params(params, 4)
    table.toroidal_surface[key] = ToroidalSurfaceEntity(
        position=reference_id(params[1]),
        major_radius=as_float(params[2]),
        minor_radius=as_float(params[3]),
    )


def _add_axis2_placement_3d(table: StepTable, key: int, params: Sequence[Any]) -> None:
    _require_params(params, 2)
    table.axis2_placement_3d[key] = Axis2Placement3DEntity(
        location=reference_id(params[1]),
        axis=reference_id(params[2]) if len(params) > 2 else None,
        ref_direction=reference_id(params[3]) if len(params) > 3 else None,
    )


def _add_direction(table: StepTable, key: int, params: Sequence[Any]) -> None:
    _require_params(params, 2)
    table.direction[key] = as_float_tuple(params[1])


def _add_cartesian_point(table: StepTable, key: int, params: Sequence[Any]) -> None:
    _require_params(params, 2)
    table.cartesian_point[key] = as_float_tuple(params[1])


_BUILDERS = {
    'CIRCLE': _add_circle,
    'TOROIDAL_SURFACE': _add_toroidal_surface,
    'AXIS2_PLACEMENT_3D': _add_axis2_placement_3d,
    'DIRECTION': _add_direction,
    'CARTESIAN_POINT': _add_cartesian_point,
}


def build_table(instances: Iterable[Any]) -> StepTable:
    """
    Build a StepTable from ``steputils`` entity instances.

    Complex instances and entity kinds the extractor does not use are
    ignored. An instance of a known kind whose parameters cannot be
    converted is skipped with a warning.

    Args:
        instances: Entity instances from one or more data sections

    Returns:
        Populated StepTable
    """
    table = StepTable()
    for instance in instances:
        if not isinstance(instance, p21.SimpleEntityInstance):
            continue
        name = instance.entity.name.upper()
        builder = _BUILDERS.get(name)
        if builder is None:
            continue
        try:
            builder(table, entity_id(instance.ref), instance.entity.params)
        except (ValueError, TypeError) as e:
            log(f"Skipping {instance.ref} {name}: {e}", logging.WARNING)
    return table


def parse_step(text: str) -> StepTable:
    """
    Parse STEP text and build the entity table from all of its data sections.

    Args:
        text: ISO-10303-21 document

    Returns:
        Populated StepTable

    Raises:
        StepDocumentError: If the parser rejects the document
    """
    try:
        step_file = p21.loads(text)
    except (p21.ParseError, ValueError, IndexError, TypeError) as e:
        raise StepDocumentError(f"Cannot parse STEP document: {e}") from e

    instances: list[Any] = []
    for section in step_file.data:
        instances.extend(section.instances.values())
    return build_table(instances)
