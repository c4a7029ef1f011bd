"""Drag-to-reshape for routed paths.

Maps a pointer drag on one segment of a path into a new waypoint list.
The segment slides perpendicular to its own axis: horizontal segments move
vertically, vertical segments horizontally. Motion along the segment's own
axis is ignored.

Raw pointer deltas are scaled by ``DAMPING`` before use so the segment
moves at half the pointer speed and does not overshoot. All drag paths in
the package use this one constant unless a caller passes its own.

Governing waypoints
-------------------
Each interior segment is governed by one waypoint: the first endpoint of
the segment, in emission order, that is a waypoint. Both endpoints of an
axis-aligned segment carry its fixed coordinate, so rewriting that
coordinate on the governing waypoint moves the whole segment when the path
is replanned. If the other endpoint is a waypoint as well it follows on the
same axis, keeping the segment straight.

A segment with no waypoint endpoint (the middle of the default
three-segment route) gets a new waypoint at its midpoint, inserted after
the waypoints that precede it in the path.
"""

from __future__ import annotations

from typing import Optional

from ..types import Path, Point, Segment

DAMPING = 0.5


def governing_waypoint(path: Path, segment_index: int) -> Optional[int]:
    """
    Get the index of the waypoint that a drag on a segment rewrites.

    Returns:
        Index into ``path.waypoints``, or None when the segment has no
        waypoint endpoint
    """
    if not path.waypoint_slots:
        return None
    for point_index in (segment_index, segment_index + 1):
        slot = path.waypoint_slots[point_index]
        if slot is not None:
            return slot
    return None


def _insertion_index(path: Path, segment_index: int) -> int:
    """Number of waypoints emitted up to and including the segment's start."""
    slots = path.waypoint_slots[: segment_index + 1]
    return sum(1 for slot in slots if slot is not None)


def _move(point: Point, segment: Segment, value: float) -> Point:
    """Set the coordinate a drag on ``segment`` controls."""
    if segment.is_horizontal:
        return point.with_y(value)
    return point.with_x(value)


def on_segment_drag(
    path: Path,
    segment_index: int,
    raw_dx: float,
    raw_dy: float,
    *,
    damping: float = DAMPING,
) -> list[Point]:
    """
    Turn a drag on one segment into an updated waypoint list.

    Args:
        path: The path as currently drawn
        segment_index: Index of the dragged segment
        raw_dx: Pointer movement on x since the previous drag step
        raw_dy: Pointer movement on y since the previous drag step
        damping: Scale applied to the raw delta

    Returns:
        A new waypoint list. Equal in content to ``path.waypoints`` when
        the index is out of range or the segment is pinned to an anchor.
    """
    waypoints = list(path.waypoints)
    if not 0 <= segment_index < len(path.segments):
        return waypoints

    segment = path.segments[segment_index]
    if not segment.draggable:
        return waypoints

    delta = raw_dy if segment.is_horizontal else raw_dx
    value = segment.fixed + delta * damping

    slot = governing_waypoint(path, segment_index)
    if slot is None:
        waypoint = _move(segment.midpoint, segment, value)
        waypoints.insert(_insertion_index(path, segment_index), waypoint)
        return waypoints

    waypoints[slot] = _move(waypoints[slot], segment, value)

    follower = path.waypoint_slots[segment_index + 1]
    if follower is not None and follower != slot:
        waypoints[follower] = _move(waypoints[follower], segment, value)

    return waypoints


__all__ = [
    "DAMPING",
    "governing_waypoint",
    "on_segment_drag",
]
