"""Segment classification for routed paths.

Derives axis, span and draggability for each stretch of a point list, and
the drag handles a canvas should offer for a path.
"""

from __future__ import annotations

from typing import Optional, Sequence

from ..types import DragHandle, Orientation, Path, Point, Segment
from ..validation import NonOrthogonalPathError


def is_orthogonal(points: Sequence[Point]) -> bool:
    """Check that every consecutive pair shares at least one coordinate."""
    return all(a.x == b.x or a.y == b.y for a, b in zip(points, points[1:]))


def classify_segment(
    a: Point,
    b: Point,
    index: int,
    count: int,
    previous: Optional[Orientation] = None,
) -> Segment:
    """
    Describe the segment running from ``a`` to ``b``.

    A zero-length segment between identical points has no axis of its own.
    It turns relative to the segment before it (the bend of a collapsed
    step), and is vertical when it is the first segment.

    Args:
        a: Start point
        b: End point
        index: Emission order of the segment in its path
        count: Total number of segments in the path
        previous: Orientation of the preceding segment, if any

    Returns:
        Segment; draggable unless it is the first or last one

    Raises:
        NonOrthogonalPathError: If the points differ on both axes
    """
    draggable = 0 < index < count - 1
    if a == b and previous is Orientation.VERTICAL:
        return Segment(
            orientation=Orientation.HORIZONTAL,
            fixed=a.y,
            span_start=a.x,
            span_end=a.x,
            index=index,
            draggable=draggable,
        )
    if a.x == b.x:
        return Segment(
            orientation=Orientation.VERTICAL,
            fixed=a.x,
            span_start=min(a.y, b.y),
            span_end=max(a.y, b.y),
            index=index,
            draggable=draggable,
        )
    if a.y == b.y:
        return Segment(
            orientation=Orientation.HORIZONTAL,
            fixed=a.y,
            span_start=min(a.x, b.x),
            span_end=max(a.x, b.x),
            index=index,
            draggable=draggable,
        )
    raise NonOrthogonalPathError(
        f"Segment {index}: ({a.x:g}, {a.y:g}) -> ({b.x:g}, {b.y:g}) is diagonal"
    )


def classify_segments(points: Sequence[Point]) -> tuple[Segment, ...]:
    """
    Classify every segment of an orthogonal point list.

    A list of two or fewer points is a direct connection and yields no
    segments, so it never offers drag handles.
    """
    if len(points) <= 2:
        return ()
    count = len(points) - 1
    segments: list[Segment] = []
    previous: Optional[Orientation] = None
    for i in range(count):
        segment = classify_segment(points[i], points[i + 1], i, count, previous)
        segments.append(segment)
        previous = segment.orientation
    return tuple(segments)


def drag_handles(path: Path) -> list[DragHandle]:
    """
    Build one handle per draggable segment, centred on the segment.

    Horizontal segments get a vertical-drag handle and vertical segments a
    horizontal-drag handle.
    """
    handles = []
    for segment in path.segments:
        if not segment.draggable:
            continue
        mid = segment.midpoint
        handles.append(
            DragHandle(
                segment_index=segment.index,
                x=mid.x,
                y=mid.y,
                axis=segment.orientation.perpendicular(),
            )
        )
    return handles


__all__ = [
    "is_orthogonal",
    "classify_segment",
    "classify_segments",
    "drag_handles",
]
