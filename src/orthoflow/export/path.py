"""
Path command strings for drawing routed edges.

Points are emitted exactly in the order given: a move-to for the first and
a line-to for each one after it. Nothing is merged or dropped, so what is
drawn is the path the user is editing.
"""

from __future__ import annotations

from typing import Optional, Sequence

from ..routing.curves import BEZIER_CURVATURE, bezier_controls
from ..types import Point, Side


def format_number(value: float, precision: Optional[int] = None) -> str:
    """
    Format a coordinate for a path command.

    Integral values print without a decimal part. With ``precision`` the
    value is rounded to that many decimals and trailing zeros are dropped.
    """
    if precision is not None:
        text = f"{value:.{precision}f}"
        if "." in text:
            text = text.rstrip("0").rstrip(".")
        return "0" if text in ("-0", "") else text
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def _pair(point: Point, precision: Optional[int]) -> str:
    return f"{format_number(point.x, precision)},{format_number(point.y, precision)}"


def to_path_string(points: Sequence[Point], *, precision: Optional[int] = None) -> str:
    """
    Render points as a move-to/line-to command sequence.

    Args:
        points: Ordered path points
        precision: Optional number of decimals to print

    Returns:
        "M x,y L x,y ..." string, or "" for no points

    Example:
        >>> to_path_string([Point(0, 0), Point(100, 0), Point(100, 50)])
        'M 0,0 L 100,0 L 100,50'
    """
    parts = []
    for i, point in enumerate(points):
        command = "M" if i == 0 else "L"
        parts.append(f"{command} {_pair(point, precision)}")
    return " ".join(parts)


def to_bezier_path_string(
    source_x: float,
    source_y: float,
    source_side: Side,
    target_x: float,
    target_y: float,
    target_side: Side,
    *,
    curvature: float = BEZIER_CURVATURE,
    precision: Optional[int] = None,
) -> str:
    """Render a cubic bezier between two anchors as "M s C c1 c2 t"."""
    c1, c2 = bezier_controls(
        source_x, source_y, source_side, target_x, target_y, target_side, curvature
    )
    source = Point(float(source_x), float(source_y))
    target = Point(float(target_x), float(target_y))
    return (
        f"M {_pair(source, precision)} "
        f"C {_pair(c1, precision)} {_pair(c2, precision)} {_pair(target, precision)}"
    )


__all__ = [
    "format_number",
    "to_path_string",
    "to_bezier_path_string",
]
