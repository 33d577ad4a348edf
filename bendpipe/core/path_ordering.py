"""Profile filtering and centerline ordering for tube geometry.

The tube is assumed to have one dominant cross-section radius, and the
entity ids of its profiles are assumed to follow the centerline. Smaller
circles (inner wall, chamfers, holes) are dropped, and what is left is
paired up in id order into bend operations.
"""

from __future__ import annotations

import math
from collections.abc import Callable, Sequence

from ..models.bend_data import BendOperation, BendState
from ..models.profiles import CircleProfile, ToroidalProfile


def calculate_pipe_radius(circles: Sequence[CircleProfile]) -> float:
    """
    Find the dominant tube radius.

    Args:
        circles: All circle profiles of the model

    Returns:
        The largest circle radius, or -inf when there are no circles
    """
    return max((c.radius for c in circles), default=-math.inf)


def filter_circles(circles: Sequence[CircleProfile], radius: float) -> list[CircleProfile]:
    """Keep circles whose radius equals ``radius`` exactly, sorted by id."""
    return sorted((c for c in circles if c.radius == radius), key=lambda c: c.id)


def filter_toroids(toroids: Sequence[ToroidalProfile], radius: float) -> list[ToroidalProfile]:
    """Keep toroids whose minor radius equals ``radius`` exactly, sorted by id."""
    return sorted((t for t in toroids if t.minor_radius == radius), key=lambda t: t.id)


def pair_circles(circles: Sequence[CircleProfile]) -> list[tuple[int, CircleProfile, CircleProfile]]:
    """
    Pair each circle with its successor.

    Args:
        circles: Filtered circles in centerline order

    Returns:
        List of (index, start, end); one shorter than ``circles``, empty
        for fewer than two circles
    """
    return [(i, circles[i], circles[i + 1]) for i in range(len(circles) - 1)]


def build_bend_operations(
    circles: Sequence[CircleProfile],
    classify: Callable[[CircleProfile, CircleProfile], BendState] | None = None,
) -> list[BendOperation]:
    """
    Build the ordered bend operations for a filtered circle list.

    Args:
        circles: Filtered circles in centerline order
        classify: Computes the bend state of a (start, end) pair; every
                  operation is Straight when omitted

    Returns:
        BendOperations with ids 0..N-2
    """
    operations: list[BendOperation] = []
    for i, start, end in pair_circles(circles):
        state = classify(start, end) if classify else BendState.straight()
        operations.append(BendOperation(
            id=i,
            start_position=start,
            end_position=end,
            bend_state=state,
        ))
    return operations
