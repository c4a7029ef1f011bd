"""Orthogonal path planning between two anchors.

Provides the routing used by step edges:
- Direct connection for anchors that nearly coincide
- Default three-segment route along the dominant axis
- Waypoint routes with one synthesised bend per diagonal hop

Every function here is pure: the same inputs always give the same path.
"""

from __future__ import annotations

from typing import Any, Iterable, Optional

from ..types import Path, Point
from ..validation import coerce_waypoints
from .segments import classify_segments

# Anchors closer than this on both axes are joined directly.
DIRECT_THRESHOLD = 10.0


def horizontal_first(dx: float, dy: float) -> bool:
    """Pick the leading axis for a hop; ties favour horizontal."""
    return abs(dx) >= abs(dy)


def bend_between(current: Point, nxt: Point) -> Optional[Point]:
    """
    Get the bend needed to join two points with axis-aligned segments.

    Args:
        current: Start of the hop
        nxt: End of the hop

    Returns:
        None when the points already share a coordinate, otherwise the
        single corner point, leading along the dominant axis
    """
    if current.x == nxt.x or current.y == nxt.y:
        return None
    if horizontal_first(nxt.x - current.x, nxt.y - current.y):
        return Point(nxt.x, current.y)
    return Point(current.x, nxt.y)


def default_route(source: Point, target: Point) -> list[Point]:
    """
    Route without waypoints: out along the dominant axis, across at the
    midpoint, and in along the same axis.
    """
    dx = target.x - source.x
    dy = target.y - source.y

    if horizontal_first(dx, dy):
        mid_x = source.x + dx * 0.5
        return [source, Point(mid_x, source.y), Point(mid_x, target.y), target]

    mid_y = source.y + dy * 0.5
    return [source, Point(source.x, mid_y), Point(target.x, mid_y), target]


def waypoint_route(
    source: Point,
    target: Point,
    waypoints: tuple[Point, ...],
) -> tuple[list[Point], list[Optional[int]]]:
    """
    Route through every waypoint in order.

    Returns:
        (points, slots) where ``slots[i]`` is the waypoint index of
        ``points[i]`` or None for anchors and synthesised bends
    """
    chain = [source, *waypoints, target]
    chain_slots: list[Optional[int]] = [None, *range(len(waypoints)), None]

    points = [chain[0]]
    slots: list[Optional[int]] = [chain_slots[0]]
    for i in range(len(chain) - 1):
        bend = bend_between(chain[i], chain[i + 1])
        if bend is not None:
            points.append(bend)
            slots.append(None)
        points.append(chain[i + 1])
        slots.append(chain_slots[i + 1])
    return points, slots


def compute_path(
    source_x: float,
    source_y: float,
    target_x: float,
    target_y: float,
    waypoints: Optional[Iterable[Any]] = None,
    *,
    threshold: float = DIRECT_THRESHOLD,
) -> Path:
    """
    Compute the orthogonal path between two anchors.

    Args:
        source_x: Source anchor x
        source_y: Source anchor y
        target_x: Target anchor x
        target_y: Target anchor y
        waypoints: Optional ordered waypoints (Points, (x, y) pairs or
            x/y mappings) that override the default route
        threshold: Without waypoints, anchors closer than this on both axes
            get a direct two-point connection

    Returns:
        A new Path. Without waypoints it has either 2 points and no
        segments or 4 points and 3 segments; with waypoints every hop that
        is not axis-aligned gains exactly one bend.

    Raises:
        InvalidWaypointError: If a waypoint is malformed
    """
    source = Point(float(source_x), float(source_y))
    target = Point(float(target_x), float(target_y))
    wps = coerce_waypoints(waypoints)

    if not wps:
        dx = target.x - source.x
        dy = target.y - source.y
        if abs(dx) < threshold and abs(dy) < threshold:
            return Path(points=(source, target), waypoint_slots=(None, None))

        points = default_route(source, target)
        return Path(
            points=tuple(points),
            segments=classify_segments(points),
            waypoint_slots=(None,) * len(points),
        )

    points, slots = waypoint_route(source, target, wps)
    return Path(
        points=tuple(points),
        segments=classify_segments(points),
        waypoints=wps,
        waypoint_slots=tuple(slots),
    )


__all__ = [
    "DIRECT_THRESHOLD",
    "horizontal_first",
    "bend_between",
    "default_route",
    "waypoint_route",
    "compute_path",
]
