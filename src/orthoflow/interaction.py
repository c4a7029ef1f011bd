"""
Pointer drag sessions for reshaping edges.

A drag runs from pointer-down on a handle to pointer-up or pointer-leave:

1. ``DragController.begin`` captures the pointer position and the segment
   index in a ``DragSession`` and attaches move/up/leave listeners to the
   canvas-wide ``PointerHub``.
2. Every move measures the delta against the previous pointer position,
   reshapes a freshly computed path and commits the new waypoints to the
   edge.
3. ``DragController.end`` drops the session and detaches every listener it
   attached. This always happens, even if a callback raised.

The session is a frozen value passed along explicitly; nothing about the
drag lives in closures or module state.
"""

from __future__ import annotations

import warnings
from dataclasses import dataclass, replace
from enum import Enum
from typing import Callable, Optional

from .graph import ConnectionGraph
from .routing.reshape import on_segment_drag
from .types import EdgeType, Point
from .validation import RoutingWarning


class PointerEventType(Enum):
    """Pointer events a drag listens for."""

    MOVE = "pointermove"
    UP = "pointerup"
    LEAVE = "pointerleave"


PointerListener = Callable[[float, float], None]


class PointerHub:
    """
    Canvas-wide pointer event target.

    Stands for the document-level event target the canvas collaborator
    exposes; listeners registered here receive every pointer event until
    removed.
    """

    def __init__(self) -> None:
        self._listeners: dict[PointerEventType, list[PointerListener]] = {
            kind: [] for kind in PointerEventType
        }

    def add_listener(self, kind: PointerEventType, listener: PointerListener) -> None:
        self._listeners[kind].append(listener)

    def remove_listener(self, kind: PointerEventType, listener: PointerListener) -> None:
        """Remove a listener; removing one that is not attached does nothing."""
        try:
            self._listeners[kind].remove(listener)
        except ValueError:
            pass

    def dispatch(self, kind: PointerEventType, x: float, y: float) -> None:
        """Deliver a pointer event to every listener attached for ``kind``."""
        for listener in list(self._listeners[kind]):
            listener(x, y)

    def listener_count(self, kind: Optional[PointerEventType] = None) -> int:
        if kind is not None:
            return len(self._listeners[kind])
        return sum(len(listeners) for listeners in self._listeners.values())


@dataclass(frozen=True)
class DragSession:
    """
    State of one drag gesture.

    Attributes:
        edge_id: Edge being reshaped
        segment_index: Segment grabbed on pointer-down
        last_x: Pointer x at the previous step
        last_y: Pointer y at the previous step
    """

    edge_id: str
    segment_index: int
    last_x: float
    last_y: float

    def advance(self, x: float, y: float) -> tuple[float, float, DragSession]:
        """
        Step the session to a new pointer position.

        Returns:
            (dx, dy, next_session) with the delta measured from the
            previous position, not from where the drag started
        """
        return x - self.last_x, y - self.last_y, replace(self, last_x=x, last_y=y)


class DragController:
    """
    Runs drag sessions for one graph.

    At most one session is active; one pointer device means one drag.

    Args:
        graph: Graph whose edges are reshaped
        hub: Pointer event target to listen on during a drag
    """

    def __init__(self, graph: ConnectionGraph, hub: PointerHub) -> None:
        self.graph = graph
        self.hub = hub
        self._session: Optional[DragSession] = None
        self._attached: list[tuple[PointerEventType, PointerListener]] = []

    @property
    def session(self) -> Optional[DragSession]:
        return self._session

    @property
    def active(self) -> bool:
        return self._session is not None

    def begin(self, edge_id: str, segment_index: int, x: float, y: float) -> Optional[DragSession]:
        """
        Start dragging a segment (pointer-down on its handle).

        Args:
            edge_id: Edge owning the handle
            segment_index: Index of the segment under the handle
            x: Pointer x
            y: Pointer y

        Returns:
            The new session, or None if the segment cannot be dragged

        Raises:
            UnknownEdgeError: If the edge id is unknown
        """
        if self._session is not None:
            self.end()

        edge = self.graph.edge(edge_id)
        if edge.edge_type is not EdgeType.STEP:
            warnings.warn(
                f"Edge {edge_id!r} is a {edge.edge_type.value!r} edge; "
                "only step edges can be reshaped.",
                RoutingWarning,
                stacklevel=2,
            )
            return None

        segments = self.graph.route(edge_id).segments
        if not 0 <= segment_index < len(segments) or not segments[segment_index].draggable:
            return None

        self._session = DragSession(edge_id, segment_index, float(x), float(y))
        self._attach(PointerEventType.MOVE, self.move)
        self._attach(PointerEventType.UP, self._release)
        self._attach(PointerEventType.LEAVE, self._release)
        return self._session

    def move(self, x: float, y: float) -> Optional[list[Point]]:
        """
        Apply one pointer-move step.

        Returns:
            The waypoints after this step, or None when no drag is active.
            Unchanged waypoints are not committed again.
        """
        if self._session is None:
            return None

        dx, dy, session = self._session.advance(float(x), float(y))
        try:
            path = self.graph.route(session.edge_id)
            waypoints = on_segment_drag(
                path, session.segment_index, dx, dy, damping=self.graph.damping
            )
            self._session = session
            if waypoints != list(path.waypoints):
                self.graph.set_waypoints(session.edge_id, waypoints)
        except Exception:
            # The edge may have been deleted mid-drag.
            self.end()
            raise
        return waypoints

    def end(self) -> None:
        """End the drag and detach all of its listeners."""
        self._session = None
        attached, self._attached = self._attached, []
        for kind, listener in attached:
            self.hub.remove_listener(kind, listener)

    def _release(self, x: float, y: float) -> None:
        self.end()

    def _attach(self, kind: PointerEventType, listener: PointerListener) -> None:
        self.hub.add_listener(kind, listener)
        self._attached.append((kind, listener))


__all__ = [
    "PointerEventType",
    "PointerListener",
    "PointerHub",
    "DragSession",
    "DragController",
]
