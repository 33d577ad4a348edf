"""Bend operation and machine command data models."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum

from .profiles import CircleProfile, ToroidalProfile


class BendKind(Enum):
    """Role of a tube segment relative to the bend surfaces."""

    STRAIGHT = 'straight'
    PRE_BEND = 'pre_bend'
    BEND = 'bend'
    POST_BEND = 'post_bend'


@dataclass(frozen=True, slots=True)
class BendState:
    """Classification of a segment, with the toroid it was matched against.

    ``toroid`` is None only for STRAIGHT segments.
    """

    kind: BendKind
    toroid: ToroidalProfile | None = None

    @classmethod
    def straight(cls) -> BendState:
        return cls(BendKind.STRAIGHT)

    @classmethod
    def pre_bend(cls, toroid: ToroidalProfile) -> BendState:
        return cls(BendKind.PRE_BEND, toroid)

    @classmethod
    def bend(cls, toroid: ToroidalProfile) -> BendState:
        return cls(BendKind.BEND, toroid)

    @classmethod
    def post_bend(cls, toroid: ToroidalProfile) -> BendState:
        return cls(BendKind.POST_BEND, toroid)

    @property
    def is_bend(self) -> bool:
        return self.kind is BendKind.BEND


@dataclass(frozen=True, slots=True)
class BendOperation:
    """The tube segment between two centerline-adjacent circle profiles."""

    id: int
    start_position: CircleProfile
    end_position: CircleProfile
    bend_state: BendState = BendState(BendKind.STRAIGHT)

    def __repr__(self) -> str:
        return (
            f"BendOperation(#{self.id}, {self.bend_state.kind.value}, "
            f"#{self.start_position.id} -> #{self.end_position.id})"
        )


class Opcode(IntEnum):
    """Machine instruction codes emitted by the command generator."""

    ROTATE = 0  # Rotate angle, degrees
    RADIUS = 1  # Bend radius
    ANGLE = 2  # Bend angle, degrees
    MOVE = 3  # Linear feed distance


@dataclass(frozen=True, slots=True)
class Command:
    """One emitted (opcode, value) pair."""
    opcode: Opcode
    value: float


@dataclass(slots=True)
class BendStep:
    """One row of the bend program: feed, rotate, then bend.

    Rows with ``clr == 0`` carry only a trailing feed.
    """

    id1: int
    id2: int
    feed: float  # Straight length fed before the bend
    arc_length: float  # Centerline length consumed by the bend
    rotation: float  # Degrees
    angle: float  # Degrees
    clr: float  # Centerline radius of the bend
    pipe_radius: float

    def __repr__(self) -> str:
        return f"BendStep(L={self.feed:.3f}, R={self.rotation:.3f}, A={self.angle:.3f}, CLR={self.clr:.3f})"
