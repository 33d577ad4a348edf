"""Bend program rows built from the CNC command stream.

A row is one machine cycle: feed the straight length L, rotate the tube
by R, then bend by A around a die of centerline radius CLR. The tube end
after the last bend becomes a final feed-only row.
"""

from __future__ import annotations

import dataclasses
import math
from collections.abc import Sequence

from .. import config
from ..models.bend_data import BendStep, Opcode

# Order in which a Bend is emitted by the command generator
_BEND_SEQUENCE: tuple[Opcode, ...] = (Opcode.ROTATE, Opcode.RADIUS, Opcode.ANGLE)


def build_bend_program(
    opcodes: Sequence[int],
    values: Sequence[float],
    pipe_radius: float,
) -> list[BendStep]:
    """
    Group an opcode/value stream into bend program rows.

    Consecutive MOVE values add up into the feed of the next row. A
    ROTATE, RADIUS, ANGLE triple closes the row.

    Args:
        opcodes: Opcode sequence (0-3)
        values: Values parallel to ``opcodes``
        pipe_radius: Tube radius recorded on every row

    Returns:
        List of BendStep rows with ``id1 = 2*i`` and ``id2 = 2*i + 1``

    Raises:
        ValueError: If the sequences differ in length, hold an unknown
                    opcode, or contain an incomplete or out-of-order bend
    """
    if len(opcodes) != len(values):
        raise ValueError(
            f"Opcode and value sequences differ in length ({len(opcodes)} != {len(values)})"
        )

    steps: list[BendStep] = []
    feed = 0.0
    pending: list[float] = []

    def close_row(rotation: float, clr: float, angle: float) -> None:
        index = len(steps)
        steps.append(BendStep(
            id1=index * 2,
            id2=index * 2 + 1,
            feed=feed,
            arc_length=clr * math.radians(angle),
            rotation=rotation,
            angle=angle,
            clr=clr,
            pipe_radius=pipe_radius,
        ))

    for position, (raw_opcode, value) in enumerate(zip(opcodes, values)):
        opcode = Opcode(raw_opcode)
        if opcode is Opcode.MOVE:
            if pending:
                raise ValueError(f"Incomplete bend before MOVE at position {position}")
            feed += value
            continue

        expected = _BEND_SEQUENCE[len(pending)]
        if opcode is not expected:
            raise ValueError(
                f"Expected {expected.name} at position {position}, got {opcode.name}"
            )
        pending.append(value)
        if len(pending) == len(_BEND_SEQUENCE):
            rotation, clr, angle = pending
            close_row(rotation, clr, angle)
            feed = 0.0
            pending = []

    if pending:
        raise ValueError("Command stream ends inside a bend")

    if feed > 0:
        close_row(0.0, 0.0, 0.0)

    return steps


def normalize_rotation(rotation: float) -> float:
    """
    Reduce a rotation to the range [-180, 180] degrees.

    Full turns are dropped keeping the sign, then anything past half a
    turn is taken the short way round.
    """
    sign = math.copysign(1.0, rotation)
    if abs(rotation) >= 360.0:
        rounds = int(abs(rotation) // 360.0)
        rotation = (abs(rotation) - 360.0 * rounds) * sign
    if abs(rotation) > 180.0:
        rotation = -((360.0 - abs(rotation)) * sign)
    return rotation


def normalize_rotations(steps: Sequence[BendStep]) -> list[BendStep]:
    """Return copies of ``steps`` with every rotation normalized."""
    return [dataclasses.replace(s, rotation=normalize_rotation(s.rotation)) for s in steps]


def total_length(steps: Sequence[BendStep]) -> float:
    """Total centerline length of the tube: every feed plus every bend arc."""
    return sum(s.feed + s.arc_length for s in steps)


def round_by_decimals(value: float, decimals: int) -> float:
    """
    Round to ``decimals`` places, halves away from zero.

    Unlike the built-in ``round()``, 2.5 goes to 3 and -2.5 to -3.
    """
    scale = 10 ** decimals
    scaled = abs(value * scale)
    whole = math.floor(scaled)
    if scaled - whole >= 0.5:
        whole += 1
    return math.copysign(whole, value) / scale


def _encode(value: float) -> int:
    # An undefined angle encodes as 0
    if math.isnan(value):
        return 0
    return int(round_by_decimals(value, config.PROGRAM_DECIMALS) * config.PROGRAM_SCALE)


def program_to_array(steps: Sequence[BendStep]) -> list[int]:
    """
    Encode rows as a flat integer array.

    Each row contributes ``id1, id2`` followed by feed, arc length,
    rotation, angle, CLR and pipe radius, each rounded to three decimals
    (halves away from zero) and scaled by 1000. NaN encodes as 0.
    """
    encoded: list[int] = []
    for s in steps:
        encoded.extend((s.id1, s.id2))
        encoded.extend(_encode(v) for v in (
            s.feed, s.arc_length, s.rotation, s.angle, s.clr, s.pipe_radius,
        ))
    return encoded
