"""
Common types for the connector routing engine and its canvas model.

This module provides the fundamental types shared across orthoflow:
- Point: A location in canvas coordinates
- Orientation, Segment, Path: Routed connector geometry
- DragHandle: Interactive handle for a draggable segment
- Side, Anchor: Where an edge attaches to a node
- NodeKind, EdgeType, Node, Edge: The canvas graph model
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

DEFAULT_NODE_WIDTH = 120.0
DEFAULT_NODE_HEIGHT = 80.0


@dataclass(frozen=True)
class Point:
    """A location in canvas coordinate space."""

    x: float
    y: float

    def with_x(self, x: float) -> Point:
        """Return a copy with the x coordinate replaced."""
        return Point(x, self.y)

    def with_y(self, y: float) -> Point:
        """Return a copy with the y coordinate replaced."""
        return Point(self.x, y)

    def __repr__(self) -> str:
        return f"Point({self.x:g}, {self.y:g})"


class Orientation(Enum):
    """Axis a path segment runs along."""

    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"

    def perpendicular(self) -> Orientation:
        """Get the axis a segment of this orientation slides along when dragged."""
        if self is Orientation.HORIZONTAL:
            return Orientation.VERTICAL
        return Orientation.HORIZONTAL


@dataclass(frozen=True)
class Segment:
    """
    One axis-aligned stretch of a routed path.

    A horizontal segment sits at ``y == fixed`` and spans x from
    ``span_start`` to ``span_end``; a vertical segment sits at ``x == fixed``
    and spans y. Spans are normalised so ``span_start <= span_end``.
    """

    orientation: Orientation
    fixed: float  # Shared coordinate of both endpoints
    span_start: float
    span_end: float
    index: int  # Emission order within the path
    draggable: bool = False

    @property
    def is_horizontal(self) -> bool:
        return self.orientation is Orientation.HORIZONTAL

    @property
    def length(self) -> float:
        """Get segment length."""
        return self.span_end - self.span_start

    @property
    def midpoint(self) -> Point:
        """Midpoint of the segment, where its drag handle sits."""
        mid = (self.span_start + self.span_end) / 2
        if self.is_horizontal:
            return Point(mid, self.fixed)
        return Point(self.fixed, mid)

    @property
    def start(self) -> Point:
        if self.is_horizontal:
            return Point(self.span_start, self.fixed)
        return Point(self.fixed, self.span_start)

    @property
    def end(self) -> Point:
        if self.is_horizontal:
            return Point(self.span_end, self.fixed)
        return Point(self.fixed, self.span_end)


@dataclass(frozen=True)
class Path:
    """
    A routed connector: ordered points plus their classified segments.

    Paths are derived values. They are recomputed on every query and carry
    the waypoints they were planned from, so a drag on one of their segments
    can be turned back into a new waypoint list.

    Attributes:
        points: Ordered points from source anchor to target anchor
        segments: One segment per consecutive point pair (none for a
            direct two-point connection)
        waypoints: The waypoints the path was planned from
        waypoint_slots: For each point, its index in ``waypoints``, or None
            for anchors and synthesised bends
    """

    points: tuple[Point, ...]
    segments: tuple[Segment, ...] = ()
    waypoints: tuple[Point, ...] = ()
    waypoint_slots: tuple[Optional[int], ...] = ()

    def __post_init__(self) -> None:
        """Reject waypoints that cannot be traced back to points."""
        if self.waypoints and len(self.waypoint_slots) != len(self.points):
            from .validation import ValidationError

            raise ValidationError(
                f"waypoint_slots must map every point: got {len(self.waypoint_slots)} "
                f"slots for {len(self.points)} points"
            )

    @property
    def is_direct(self) -> bool:
        """True for the two-point connection with no routed segments."""
        return not self.segments

    @property
    def draggable_segments(self) -> list[Segment]:
        return [s for s in self.segments if s.draggable]

    @property
    def bend_count(self) -> int:
        """Number of interior points where the path changes direction."""
        bends = 0
        for prev, nxt in zip(self.segments, self.segments[1:]):
            if prev.orientation is not nxt.orientation:
                bends += 1
        return bends

    @property
    def length(self) -> float:
        """Total Manhattan length along the points."""
        return sum(
            abs(b.x - a.x) + abs(b.y - a.y) for a, b in zip(self.points, self.points[1:])
        )


@dataclass(frozen=True)
class DragHandle:
    """
    Interactive handle for one draggable segment.

    ``axis`` is the direction the handle moves in: a horizontal segment
    offers a vertical drag and a vertical segment a horizontal one.
    """

    segment_index: int
    x: float
    y: float
    axis: Orientation


class Side(Enum):
    """Side of a node where edges can connect."""

    NORTH = "north"
    SOUTH = "south"
    EAST = "east"
    WEST = "west"


class NodeKind(Enum):
    """Equipment a node stands for on the canvas."""

    TANK = "tank"
    VALVE = "valve"
    PUMP = "pump"

    @property
    def title(self) -> str:
        titles = {
            NodeKind.TANK: "Storage Tank",
            NodeKind.VALVE: "Control Valve",
            NodeKind.PUMP: "Pump",
        }
        return titles[self]


class EdgeType(Enum):
    """How an edge is drawn between its anchors."""

    BEZIER = "default"
    STRAIGHT = "straight"
    STEP = "step"

    @property
    def label(self) -> str:
        """Label shown on new edges of this type."""
        return self.value.capitalize()


@dataclass
class Anchor:
    """
    The fixed point where an edge attaches to a node.

    Anchors are owned by the node: their coordinates follow the node's
    current position and are never stored on the edge.
    """

    node: str  # Node id
    side: Side
    position: float = 0.5  # Position along side (0.0 to 1.0)


@dataclass
class Node:
    """
    A node placed on the canvas.

    Nodes are boxes centred on ``(x, y)``; edges attach to their sides.
    """

    id: str
    kind: NodeKind
    x: float  # Center x
    y: float  # Center y
    width: float = DEFAULT_NODE_WIDTH
    height: float = DEFAULT_NODE_HEIGHT
    label: str = ""

    @property
    def left(self) -> float:
        """Left edge x coordinate."""
        return self.x - self.width / 2

    @property
    def right(self) -> float:
        """Right edge x coordinate."""
        return self.x + self.width / 2

    @property
    def top(self) -> float:
        """Top edge y coordinate."""
        return self.y - self.height / 2

    @property
    def bottom(self) -> float:
        """Bottom edge y coordinate."""
        return self.y + self.height / 2

    def anchor_point(self, side: Side, offset: float = 0.5) -> Point:
        """
        Get the position of an anchor on this node.

        Args:
            side: Which side of the node
            offset: Position along the side (0.0 to 1.0)

        Returns:
            Anchor location in canvas coordinates
        """
        if side == Side.NORTH:
            return Point(self.left + self.width * offset, self.top)
        elif side == Side.SOUTH:
            return Point(self.left + self.width * offset, self.bottom)
        elif side == Side.WEST:
            return Point(self.left, self.top + self.height * offset)
        else:  # EAST
            return Point(self.right, self.top + self.height * offset)


@dataclass
class Edge:
    """
    A connection between two node anchors.

    ``waypoints`` is the only routing state an edge owns; it is replaced
    wholesale on every commit and discarded with the edge.
    """

    id: str
    source: Anchor
    target: Anchor
    edge_type: EdgeType = EdgeType.STEP
    waypoints: tuple[Point, ...] = field(default_factory=tuple)
    selected: bool = False
    label: str = ""


__all__ = [
    "DEFAULT_NODE_WIDTH",
    "DEFAULT_NODE_HEIGHT",
    "Point",
    "Orientation",
    "Segment",
    "Path",
    "DragHandle",
    "Side",
    "NodeKind",
    "EdgeType",
    "Anchor",
    "Node",
    "Edge",
]
