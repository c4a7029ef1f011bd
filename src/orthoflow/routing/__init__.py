"""
Connector routing engine.

Routes edges between node anchors using only horizontal and vertical
segments, the style used for process-flow and piping diagrams:

- compute_path: Plan an orthogonal path from anchors and waypoints
- classify_segments: Describe each segment (axis, span, draggability)
- on_segment_drag: Turn a drag on a segment into new waypoints
- straight_path / bezier_controls: Shapes for non-orthogonal edge types
"""

from .curves import BEZIER_CURVATURE, bezier_controls, straight_path
from .planner import (
    DIRECT_THRESHOLD,
    bend_between,
    compute_path,
    default_route,
    horizontal_first,
    waypoint_route,
)
from .reshape import DAMPING, governing_waypoint, on_segment_drag
from .segments import classify_segment, classify_segments, drag_handles, is_orthogonal

__all__ = [
    # Planning
    "DIRECT_THRESHOLD",
    "compute_path",
    "default_route",
    "waypoint_route",
    "bend_between",
    "horizontal_first",
    # Classification
    "classify_segment",
    "classify_segments",
    "drag_handles",
    "is_orthogonal",
    # Reshaping
    "DAMPING",
    "governing_waypoint",
    "on_segment_drag",
    # Curves
    "BEZIER_CURVATURE",
    "bezier_controls",
    "straight_path",
]
