"""Data models for tube profiles, bend operations and machine commands."""

from .types import Vector3D, Point3D, ZERO_VECTOR
from .profiles import CircleProfile, ToroidalProfile
from .bend_data import (
    BendKind,
    BendState,
    BendOperation,
    Opcode,
    Command,
    BendStep,
)

__all__ = [
    # Types
    'Vector3D',
    'Point3D',
    'ZERO_VECTOR',
    # Profiles
    'CircleProfile',
    'ToroidalProfile',
    # Bend data
    'BendKind',
    'BendState',
    'BendOperation',
    'Opcode',
    'Command',
    'BendStep',
]
