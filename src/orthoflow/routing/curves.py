"""Non-orthogonal edge shapes: straight lines and cubic bezier curves.

Used by the ``straight`` and ``default`` edge types. Neither shape has
draggable segments.
"""

from __future__ import annotations

import math

from ..types import Path, Point, Side

BEZIER_CURVATURE = 0.25


def straight_path(source_x: float, source_y: float, target_x: float, target_y: float) -> Path:
    """Direct two-point path between anchors."""
    return Path(
        points=(Point(float(source_x), float(source_y)), Point(float(target_x), float(target_y))),
        waypoint_slots=(None, None),
    )


def _control_offset(distance: float, curvature: float) -> float:
    if distance >= 0:
        return 0.5 * distance
    return curvature * 25 * math.sqrt(-distance)


def _control_point(anchor: Point, side: Side, other: Point, curvature: float) -> Point:
    """Pull a control point out of ``side``, towards ``other``."""
    if side == Side.NORTH:
        return Point(anchor.x, anchor.y - _control_offset(anchor.y - other.y, curvature))
    elif side == Side.SOUTH:
        return Point(anchor.x, anchor.y + _control_offset(other.y - anchor.y, curvature))
    elif side == Side.WEST:
        return Point(anchor.x - _control_offset(anchor.x - other.x, curvature), anchor.y)
    else:  # EAST
        return Point(anchor.x + _control_offset(other.x - anchor.x, curvature), anchor.y)


def bezier_controls(
    source_x: float,
    source_y: float,
    source_side: Side,
    target_x: float,
    target_y: float,
    target_side: Side,
    curvature: float = BEZIER_CURVATURE,
) -> tuple[Point, Point]:
    """
    Compute the two control points of a cubic bezier between anchors.

    Each curve end leaves its anchor perpendicular to the node side. When
    the other anchor lies ahead of the side the control point sits halfway
    to it; when it lies behind, the offset grows with the square root of
    the distance so the curve loops out instead of cutting through the node.

    Args:
        source_x: Source anchor x
        source_y: Source anchor y
        source_side: Node side the source anchor is on
        target_x: Target anchor x
        target_y: Target anchor y
        target_side: Node side the target anchor is on
        curvature: Scale of the loop for anchors facing away from each other

    Returns:
        (source control point, target control point)
    """
    source = Point(float(source_x), float(source_y))
    target = Point(float(target_x), float(target_y))
    return (
        _control_point(source, source_side, target, curvature),
        _control_point(target, target_side, source, curvature),
    )


__all__ = [
    "BEZIER_CURVATURE",
    "straight_path",
    "bezier_controls",
]
