"""
Tests for bend program module - command stream to machine rows.

Run with: pytest tests/ -v
"""
import math

import pytest

from core.bend_program import (
    build_bend_program,
    normalize_rotation,
    normalize_rotations,
    program_to_array,
    round_by_decimals,
    total_length,
)
from models import BendStep


def _step(feed: float = 0.0, rotation: float = 0.0, angle: float = 0.0,
          clr: float = 0.0, arc_length: float = 0.0) -> BendStep:
    return BendStep(id1=0, id2=1, feed=feed, arc_length=arc_length, rotation=rotation,
                    angle=angle, clr=clr, pipe_radius=8.0)


class TestBuildBendProgram:
    """Test grouping of opcode/value streams."""

    def test_move_bend_move(self) -> None:
        steps = build_bend_program([3, 0, 1, 2, 3], [100.0, 30.0, 50.0, 90.0, 25.0], 5.0)

        assert len(steps) == 2
        bend, tail = steps
        assert (bend.id1, bend.id2) == (0, 1)
        assert bend.feed == 100.0
        assert bend.rotation == 30.0
        assert bend.clr == 50.0
        assert bend.angle == 90.0
        assert bend.arc_length == pytest.approx(50.0 * math.pi / 2)
        assert bend.pipe_radius == 5.0
        assert (tail.id1, tail.id2) == (2, 3)
        assert tail.feed == 25.0
        assert (tail.rotation, tail.angle, tail.clr, tail.arc_length) == (0.0, 0.0, 0.0, 0.0)

    def test_consecutive_moves_accumulate(self) -> None:
        steps = build_bend_program([3, 3, 0, 1, 2], [10.0, 15.0, 0.0, 40.0, 45.0], 5.0)
        assert len(steps) == 1
        assert steps[0].feed == 25.0

    def test_back_to_back_bends_have_zero_feed(self) -> None:
        steps = build_bend_program([0, 1, 2, 0, 1, 2], [0.0, 40.0, 45.0, 90.0, 40.0, 45.0], 5.0)
        assert [s.feed for s in steps] == [0.0, 0.0]
        assert steps[1].rotation == 90.0

    def test_straight_only(self) -> None:
        steps = build_bend_program([3], [120.0], 5.0)
        assert len(steps) == 1
        assert steps[0].feed == 120.0
        assert steps[0].clr == 0.0

    def test_empty(self) -> None:
        assert build_bend_program([], [], 5.0) == []

    def test_length_mismatch_raises(self) -> None:
        with pytest.raises(ValueError, match="differ in length"):
            build_bend_program([3, 3], [1.0], 5.0)

    def test_unknown_opcode_raises(self) -> None:
        with pytest.raises(ValueError):
            build_bend_program([7], [1.0], 5.0)

    def test_incomplete_bend_raises(self) -> None:
        with pytest.raises(ValueError):
            build_bend_program([0, 1], [0.0, 40.0], 5.0)

    def test_move_inside_bend_raises(self) -> None:
        with pytest.raises(ValueError):
            build_bend_program([0, 3, 1, 2], [0.0, 1.0, 40.0, 45.0], 5.0)

    def test_out_of_order_bend_raises(self) -> None:
        with pytest.raises(ValueError, match="Expected ROTATE"):
            build_bend_program([1, 0, 2], [40.0, 0.0, 45.0], 5.0)


class TestNormalizeRotation:
    """Test rotation normalization to [-180, 180]."""

    def test_in_range_unchanged(self) -> None:
        assert normalize_rotation(90.0) == 90.0
        assert normalize_rotation(-180.0) == -180.0
        assert normalize_rotation(180.0) == 180.0

    def test_past_half_turn(self) -> None:
        assert normalize_rotation(270.0) == -90.0
        assert normalize_rotation(-270.0) == 90.0

    def test_full_turns_removed(self) -> None:
        assert normalize_rotation(360.0) == 0.0
        assert normalize_rotation(450.0) == 90.0
        assert normalize_rotation(-800.0) == -80.0

    def test_full_turns_then_half_turn(self) -> None:
        assert normalize_rotation(630.0) == -90.0

    def test_normalize_rotations_copies(self) -> None:
        steps = [_step(rotation=270.0), _step(rotation=10.0)]
        normalized = normalize_rotations(steps)
        assert [s.rotation for s in normalized] == [-90.0, 10.0]
        assert steps[0].rotation == 270.0


class TestTotalsAndEncoding:
    """Test total_length() and program_to_array()."""

    def test_total_length(self) -> None:
        steps = [_step(feed=100.0, arc_length=78.5), _step(feed=20.0)]
        assert total_length(steps) == pytest.approx(198.5)

    def test_total_length_empty(self) -> None:
        assert total_length([]) == 0

    def test_program_to_array(self) -> None:
        step = BendStep(id1=0, id2=1, feed=100.0, arc_length=78.53981633974483, rotation=-30.0,
                        angle=90.0, clr=50.0, pipe_radius=8.0)
        assert program_to_array([step]) == [0, 1, 100000, 78540, -30000, 90000, 50000, 8000]

    def test_program_to_array_row_width(self) -> None:
        steps = build_bend_program([3, 0, 1, 2, 3], [100.0, 30.0, 50.0, 90.0, 25.0], 5.0)
        encoded = program_to_array(steps)
        assert len(encoded) == 16
        assert encoded[8:10] == [2, 3]


class TestRoundByDecimals:
    """Test half-away-from-zero rounding used by the encoder."""

    @pytest.mark.parametrize("value,expected", [
        (2.5, 3.0),
        (-2.5, -3.0),
        (0.5, 1.0),
        (1.5, 2.0),
        (2.4, 2.0),
        (-2.6, -3.0),
    ])
    def test_whole_numbers(self, value: float, expected: float) -> None:
        assert round_by_decimals(value, 0) == expected

    def test_three_places(self) -> None:
        assert round_by_decimals(78.53981633974483, 3) == pytest.approx(78.54)
        assert round_by_decimals(-30.0004, 3) == pytest.approx(-30.0)

    def test_nan_angle_encodes_as_zero(self) -> None:
        step = BendStep(id1=0, id2=1, feed=10.0, arc_length=math.nan, rotation=0.0,
                        angle=math.nan, clr=50.0, pipe_radius=5.0)
        assert program_to_array([step]) == [0, 1, 10000, 0, 0, 0, 50000, 5000]
