"""Bend-state classification of tube segments.

A segment end that sits on a toroid's pivot circle (its center is
``major_radius`` away from the toroid center) touches that bend surface.
"""

from __future__ import annotations

from collections.abc import Sequence

from ..models.bend_data import BendState
from ..models.profiles import CircleProfile, ToroidalProfile
from .geometry import distance_between_points, distance_matches
from .tolerances import MATCH_TOLERANCE


def state_from_matches(start_matches: bool, end_matches: bool,
                       toroid: ToroidalProfile) -> BendState:
    """
    Map the (start, end) match flags for a toroid onto a bend state.

    (F, F) Straight, (T, T) Bend, (F, T) PreBend, (T, F) PostBend.
    """
    if start_matches and end_matches:
        return BendState.bend(toroid)
    if end_matches:
        return BendState.pre_bend(toroid)
    if start_matches:
        return BendState.post_bend(toroid)
    return BendState.straight()


def classify_segment(
    start: CircleProfile,
    end: CircleProfile,
    toroids: Sequence[ToroidalProfile],
    tolerance: float = MATCH_TOLERANCE,
) -> BendState:
    """
    Classify the segment between two circles against the bend surfaces.

    Toroids are scanned in order and the first one touching either end
    wins, even if a later toroid would match both ends.

    Args:
        start: Segment start circle
        end: Segment end circle
        toroids: Filtered toroids, sorted by id
        tolerance: Pivot circle matching tolerance

    Returns:
        The segment's BendState; Straight if no toroid matches
    """
    for toroid in toroids:
        a_dist = distance_between_points(toroid.center_point, start.center_point)
        b_dist = distance_between_points(toroid.center_point, end.center_point)
        a = distance_matches(a_dist, toroid.major_radius, tolerance)
        b = distance_matches(b_dist, toroid.major_radius, tolerance)
        if a or b:
            return state_from_matches(a, b, toroid)
    return BendState.straight()
