"""Tests for orthogonal path planning."""

from __future__ import annotations

import random

import pytest

from orthoflow.routing.planner import (
    DIRECT_THRESHOLD,
    bend_between,
    compute_path,
    default_route,
    horizontal_first,
)
from orthoflow.routing.segments import is_orthogonal
from orthoflow.types import Orientation, Path, Point
from orthoflow.validation import InvalidWaypointError, ValidationError


def _pts(*coords: tuple[float, float]) -> tuple[Point, ...]:
    return tuple(Point(x, y) for x, y in coords)


# ---------------------------------------------------------------------------
# horizontal_first / bend_between
# ---------------------------------------------------------------------------


class TestLeadingAxis:
    def test_wider_than_tall(self) -> None:
        assert horizontal_first(100, 20)

    def test_taller_than_wide(self) -> None:
        assert not horizontal_first(20, -100)

    def test_tie_is_horizontal(self) -> None:
        assert horizontal_first(-50, 50)

    def test_no_bend_for_shared_coordinate(self) -> None:
        assert bend_between(Point(0, 0), Point(0, 80)) is None
        assert bend_between(Point(0, 0), Point(80, 0)) is None

    def test_no_bend_for_identical_points(self) -> None:
        assert bend_between(Point(5, 5), Point(5, 5)) is None

    def test_horizontal_bend(self) -> None:
        assert bend_between(Point(0, 0), Point(100, 30)) == Point(100, 0)

    def test_vertical_bend(self) -> None:
        assert bend_between(Point(0, 0), Point(30, 100)) == Point(0, 100)


# ---------------------------------------------------------------------------
# Default routing (no waypoints)
# ---------------------------------------------------------------------------


class TestDefaultRoute:
    def test_horizontal_tie_scenario(self) -> None:
        path = compute_path(0, 0, 200, 0)
        assert path.points == _pts((0, 0), (100, 0), (100, 0), (200, 0))
        assert len(path.segments) == 3

        middle = path.segments[1]
        assert middle.orientation == Orientation.VERTICAL
        assert middle.fixed == pytest.approx(100)
        assert middle.draggable

    def test_vertical_scenario(self) -> None:
        path = compute_path(0, 0, 0, 200)
        assert path.points == _pts((0, 0), (0, 100), (0, 100), (0, 200))

        middle = path.segments[1]
        assert middle.orientation == Orientation.HORIZONTAL
        assert middle.fixed == pytest.approx(100)
        assert middle.draggable

    def test_close_anchors_connect_directly(self) -> None:
        path = compute_path(0, 0, 5, 5)
        assert path.points == _pts((0, 0), (5, 5))
        assert path.segments == ()
        assert path.is_direct

    def test_threshold_is_exclusive(self) -> None:
        path = compute_path(0, 0, DIRECT_THRESHOLD, 0)
        assert len(path.points) == 4
        assert len(path.segments) == 3

    def test_custom_threshold(self) -> None:
        path = compute_path(0, 0, 30, 30, threshold=50)
        assert len(path.points) == 2

    def test_diagonal_tie_goes_horizontal_first(self) -> None:
        path = compute_path(0, 0, 100, 100)
        assert path.points == _pts((0, 0), (50, 0), (50, 100), (100, 100))

    def test_tall_route_goes_vertical_first(self) -> None:
        path = compute_path(0, 0, 50, 200)
        assert path.points == _pts((0, 0), (0, 100), (50, 100), (50, 200))

    def test_negative_direction(self) -> None:
        path = compute_path(200, 100, 0, 0)
        assert path.points == _pts((200, 100), (100, 100), (100, 0), (0, 0))

    def test_only_middle_segment_draggable(self) -> None:
        path = compute_path(10, 20, 310, 140)
        assert [s.draggable for s in path.segments] == [False, True, False]

    def test_default_route_helper_matches(self) -> None:
        points = default_route(Point(0, 0), Point(300, 40))
        assert tuple(points) == compute_path(0, 0, 300, 40).points

    def test_no_waypoints_recorded(self) -> None:
        path = compute_path(0, 0, 200, 100)
        assert path.waypoints == ()
        assert path.waypoint_slots == (None, None, None, None)


# ---------------------------------------------------------------------------
# Waypoint routing
# ---------------------------------------------------------------------------


class TestWaypointRoute:
    def test_bends_follow_local_dominant_axis(self) -> None:
        path = compute_path(0, 0, 200, 100, [(120, 50)])
        assert path.points == _pts((0, 0), (120, 0), (120, 50), (200, 50), (200, 100))
        assert path.waypoint_slots == (None, None, 0, None, None)

    def test_vertical_first_hops(self) -> None:
        path = compute_path(0, 0, 100, 300, [(20, 200)])
        assert path.points == _pts((0, 0), (0, 200), (20, 200), (20, 300), (100, 300))

    def test_aligned_hop_needs_no_bend(self) -> None:
        path = compute_path(0, 0, 100, 100, [(0, 50)])
        assert path.points == _pts((0, 0), (0, 50), (100, 50), (100, 100))
        assert len(path.segments) == 3

    def test_waypoint_overrides_threshold(self) -> None:
        path = compute_path(0, 0, 5, 5, [(5, 0)])
        assert path.points == _pts((0, 0), (5, 0), (5, 5))
        assert len(path.segments) == 2
        assert not any(s.draggable for s in path.segments)

    def test_identical_waypoints_give_zero_length_segment(self) -> None:
        path = compute_path(0, 0, 100, 0, [(50, 0), (50, 0)])
        assert path.points == _pts((0, 0), (50, 0), (50, 0), (100, 0))
        assert path.segments[1].length == 0
        assert path.segments[1].draggable

    def test_waypoint_on_anchor(self) -> None:
        path = compute_path(0, 0, 100, 50, [(0, 0)])
        assert is_orthogonal(path.points)
        assert len(path.segments) == len(path.points) - 1

    def test_accepts_points_pairs_and_mappings(self) -> None:
        a = compute_path(0, 0, 300, 200, [Point(100, 50), (200, 150)])
        b = compute_path(0, 0, 300, 200, [{"x": 100, "y": 50}, {"x": 200, "y": 150}])
        assert a == b

    def test_input_list_untouched(self) -> None:
        waypoints = [(120, 50)]
        path = compute_path(0, 0, 200, 100, waypoints)
        assert waypoints == [(120, 50)]
        assert path.waypoints == (Point(120, 50),)

    def test_malformed_waypoint_raises(self) -> None:
        with pytest.raises(InvalidWaypointError, match="Waypoint 1"):
            compute_path(0, 0, 100, 100, [(10, 10), "corner"])

    def test_interior_segments_draggable(self) -> None:
        path = compute_path(0, 0, 200, 100, [(120, 50)])
        assert [s.draggable for s in path.segments] == [False, True, True, False]


# ---------------------------------------------------------------------------
# Properties
# ---------------------------------------------------------------------------


def _random_cases(count: int) -> list[tuple[float, float, float, float, list[tuple[float, float]]]]:
    rng = random.Random(7)
    cases = []
    for _ in range(count):
        sx, sy, tx, ty = (rng.choice([rng.uniform(-300, 300), 0.0, 20.0]) for _ in range(4))
        n = rng.randint(0, 4)
        wps = [(float(rng.randint(-5, 5) * 20), float(rng.randint(-5, 5) * 20)) for _ in range(n)]
        cases.append((sx, sy, tx, ty, wps))
    return cases


class TestPathProperties:
    @pytest.mark.parametrize("case", _random_cases(60))
    def test_orthogonal(self, case) -> None:
        path = compute_path(*case)
        assert is_orthogonal(path.points)

    @pytest.mark.parametrize("case", _random_cases(60))
    def test_segment_count_law(self, case) -> None:
        path = compute_path(*case)
        if len(path.points) <= 2:
            assert len(path.segments) == 0
        else:
            assert len(path.segments) == len(path.points) - 1

    @pytest.mark.parametrize("case", _random_cases(60))
    def test_endpoints_pinned(self, case) -> None:
        path = compute_path(*case)
        if path.segments:
            assert not path.segments[0].draggable
            assert not path.segments[-1].draggable

    @pytest.mark.parametrize("case", _random_cases(30))
    def test_deterministic(self, case) -> None:
        assert compute_path(*case) == compute_path(*case)

    @pytest.mark.parametrize("case", _random_cases(30))
    def test_path_runs_anchor_to_anchor(self, case) -> None:
        sx, sy, tx, ty, _ = case
        path = compute_path(*case)
        assert path.points[0] == Point(sx, sy)
        assert path.points[-1] == Point(tx, ty)


class TestPathMetrics:
    def test_bend_count_default_route(self) -> None:
        assert compute_path(0, 0, 200, 100).bend_count == 2

    def test_length_is_manhattan(self) -> None:
        assert compute_path(0, 0, 200, 100).length == pytest.approx(300)

    def test_direct_path_has_no_bends(self) -> None:
        assert compute_path(0, 0, 3, 3).bend_count == 0


class TestPathConstruction:
    def test_waypoints_without_slots_rejected(self) -> None:
        planned = compute_path(0, 0, 200, 100, [(120, 50)])
        with pytest.raises(ValidationError, match="waypoint_slots"):
            Path(planned.points, planned.segments, planned.waypoints)

    def test_short_slots_rejected(self) -> None:
        planned = compute_path(0, 0, 200, 100, [(120, 50)])
        with pytest.raises(ValidationError, match="waypoint_slots"):
            Path(
                planned.points,
                planned.segments,
                planned.waypoints,
                planned.waypoint_slots[:-1],
            )

    def test_plain_points_need_no_slots(self) -> None:
        path = Path(_pts((0, 0), (100, 0)))
        assert path.waypoint_slots == ()
        assert path.is_direct

    def test_planned_paths_pass(self) -> None:
        planned = compute_path(0, 0, 200, 100, [(120, 50)])
        rebuilt = Path(
            planned.points, planned.segments, planned.waypoints, planned.waypoint_slots
        )
        assert rebuilt == planned
