"""
Tests for geometry extraction module - entity table to profiles.

Run with: pytest tests/ -v
"""
from __future__ import annotations

from core.geometry_extraction import (
    chase,
    extract_circle_profiles,
    extract_toroidal_profiles,
    resolve_placement,
    to_triple,
)
from core.step_table import (
    Axis2Placement3DEntity,
    CircleEntity,
    StepTable,
    ToroidalSurfaceEntity,
)


def _table() -> StepTable:
    """Table with one fully resolvable placement (#10) and one broken one (#11)."""
    table = StepTable()
    table.axis2_placement_3d[10] = Axis2Placement3DEntity(location=20, axis=30, ref_direction=31)
    table.axis2_placement_3d[11] = Axis2Placement3DEntity(location=99, axis=None, ref_direction=31)
    table.cartesian_point[20] = (1.0, 2.0, 3.0)
    table.direction[30] = (0.0, 0.0, 1.0)
    table.direction[31] = (1.0, 0.0, 0.0)
    return table


class TestChase:
    """Test the short-circuiting lookup chain."""

    def test_all_hops_present(self) -> None:
        assert chase(1, {1: 2}.get, {2: 'x'}.get) == 'x'

    def test_missing_hop_short_circuits(self) -> None:
        calls: list[object] = []

        def record(value: object) -> object:
            calls.append(value)
            return value

        assert chase(1, {}.get, record) is None
        assert calls == []

    def test_none_start(self) -> None:
        assert chase(None, {None: 1}.get) is None

    def test_no_hops(self) -> None:
        assert chase(5) == 5


class TestToTriple:
    """Test coordinate list padding."""

    def test_none(self) -> None:
        assert to_triple(None) == (0.0, 0.0, 0.0)

    def test_exact(self) -> None:
        assert to_triple((1.0, 2.0, 3.0)) == (1.0, 2.0, 3.0)

    def test_short_list_padded(self) -> None:
        assert to_triple((1.0, 2.0)) == (1.0, 2.0, 0.0)

    def test_long_list_cut(self) -> None:
        assert to_triple((1.0, 2.0, 3.0, 4.0)) == (1.0, 2.0, 3.0)


class TestResolvePlacement:
    """Test resolve_placement() fail-soft behavior."""

    def test_fully_resolved(self) -> None:
        direction, direction_ref, center = resolve_placement(_table(), 10)
        assert direction == (0.0, 0.0, 1.0)
        assert direction_ref == (1.0, 0.0, 0.0)
        assert center == (1.0, 2.0, 3.0)

    def test_broken_hops_default_to_zero(self) -> None:
        """Unset axis and dangling location give zeros; ref direction still resolves."""
        direction, direction_ref, center = resolve_placement(_table(), 11)
        assert direction == (0.0, 0.0, 0.0)
        assert direction_ref == (1.0, 0.0, 0.0)
        assert center == (0.0, 0.0, 0.0)

    def test_missing_placement(self) -> None:
        assert resolve_placement(_table(), 404) == (
            (0.0, 0.0, 0.0), (0.0, 0.0, 0.0), (0.0, 0.0, 0.0),
        )

    def test_no_position(self) -> None:
        direction, _ref, center = resolve_placement(_table(), None)
        assert direction == (0.0, 0.0, 0.0)
        assert center == (0.0, 0.0, 0.0)


class TestExtractProfiles:
    """Test profile extraction from a table."""

    def test_circle_profiles(self) -> None:
        table = _table()
        table.circle[1] = CircleEntity(position=10, radius=8.0)
        table.circle[2] = CircleEntity(position=404, radius=6.5)

        profiles = extract_circle_profiles(table)

        assert [p.id for p in profiles] == [1, 2]
        assert profiles[0].radius == 8.0
        assert profiles[0].center_point == (1.0, 2.0, 3.0)
        assert profiles[0].direction == (0.0, 0.0, 1.0)
        assert profiles[0].direction_ref == (1.0, 0.0, 0.0)
        # A broken entity still yields a profile
        assert profiles[1].radius == 6.5
        assert profiles[1].center_point == (0.0, 0.0, 0.0)

    def test_toroidal_profiles(self) -> None:
        table = _table()
        table.toroidal_surface[5] = ToroidalSurfaceEntity(position=10, major_radius=78.0, minor_radius=8.0)

        profiles = extract_toroidal_profiles(table)

        assert len(profiles) == 1
        toroid = profiles[0]
        assert toroid.id == 5
        assert toroid.major_radius == 78.0
        assert toroid.minor_radius == 8.0
        assert toroid.center_point == (1.0, 2.0, 3.0)
        assert toroid.direction == (0.0, 0.0, 1.0)

    def test_empty_table(self) -> None:
        assert extract_circle_profiles(StepTable()) == []
        assert extract_toroidal_profiles(StepTable()) == []
