"""CNC command calculation.

The bending machine needs, for every bend, the rotation of the tube
about its own axis since the previous bend plane, the bend radius and
the bend angle; every other segment is a straight feed. The rotation is
measured against a running reference vector: the bend axis of the last
bend performed.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable, Sequence

from .. import config
from ..lib.log_utils import log
from ..models.bend_data import BendOperation, Command, Opcode
from ..models.types import Vector3D
from .geometry import ZeroVectorError, angle_between_vectors, distance_between_points


def initial_reference_vector(
    operations: Iterable[BendOperation],
    default: Vector3D = config.DEFAULT_REFERENCE_VECTOR,
) -> Vector3D:
    """
    Pick the reference vector the first rotation is measured against.

    Args:
        operations: Bend operations in id order
        default: Vector used when no operation is a Bend

    Returns:
        Bend axis of the first Bend-classified operation, else ``default``
    """
    for op in operations:
        if op.bend_state.is_bend and op.bend_state.toroid is not None:
            return op.bend_state.toroid.direction
    return default


def _angle_or_nan(v1: Vector3D, v2: Vector3D, label: str, op_id: int) -> float:
    try:
        return angle_between_vectors(v1, v2)
    except ZeroVectorError as e:
        log(f"Operation {op_id}: {label} is undefined ({e})", logging.WARNING)
        return math.nan


def feed_distance(op: BendOperation) -> float:
    """Centerline distance between the two ends of a segment."""
    return distance_between_points(op.start_position.center_point, op.end_position.center_point)


def step_commands(reference: Vector3D, op: BendOperation) -> tuple[Vector3D, list[Command]]:
    """
    Emit the commands for one operation.

    A Bend whose axis or end directions could not be resolved (zero
    vectors) emits NaN for the affected angle and logs a warning.

    Args:
        reference: Bend axis of the previous bend
        op: Operation to emit

    Returns:
        Tuple of (next_reference, commands). A Bend emits ROTATE, RADIUS,
        ANGLE and moves the reference to its own bend axis; anything else
        emits a single MOVE and keeps the reference.
    """
    toroid = op.bend_state.toroid
    if op.bend_state.is_bend and toroid is not None:
        rotation = _angle_or_nan(reference, toroid.direction, "rotation", op.id)
        bend_angle = _angle_or_nan(
            op.start_position.direction, op.end_position.direction, "bend angle", op.id,
        )
        commands = [
            Command(Opcode.ROTATE, rotation),
            Command(Opcode.RADIUS, toroid.major_radius),
            Command(Opcode.ANGLE, bend_angle),
        ]
        return toroid.direction, commands

    return reference, [Command(Opcode.MOVE, feed_distance(op))]


def fold_commands(
    operations: Sequence[BendOperation],
    reference: Vector3D,
) -> tuple[Vector3D, list[Command]]:
    """
    Fold the ordered operations into one command stream.

    Args:
        operations: Bend operations in id order
        reference: Starting reference vector

    Returns:
        Tuple of (final_reference, commands)
    """
    commands: list[Command] = []
    for op in operations:
        reference, emitted = step_commands(reference, op)
        commands.extend(emitted)
    return reference, commands


def generate_commands(operations: Sequence[BendOperation]) -> list[Command]:
    """Generate the full command stream, starting from the initial reference vector."""
    _reference, commands = fold_commands(operations, initial_reference_vector(operations))
    return commands
