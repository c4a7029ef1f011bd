"""
Canvas graph model.

ConnectionGraph owns node and edge identity, the active edge type, the
exclusive edge selection and deletion. It holds each edge's waypoints and
asks the routing engine for paths, but does no routing itself.

Example:
    graph = ConnectionGraph()
    tank = graph.add_node(NodeKind.TANK, 100, 100)
    pump = graph.add_node(NodeKind.PUMP, 400, 300)
    edge = graph.connect(tank.id, pump.id)

    path = graph.route(edge.id)
    print(graph.path_string(edge.id))
"""

from __future__ import annotations

import uuid
import warnings
from enum import IntEnum
from typing import TYPE_CHECKING, Any, Callable, Iterable, Optional, Protocol, TypedDict

if TYPE_CHECKING:
    from typing_extensions import Self

from .export.path import to_bezier_path_string, to_path_string
from .routing.curves import straight_path
from .routing.planner import DIRECT_THRESHOLD, compute_path
from .routing.reshape import DAMPING
from .routing.segments import drag_handles
from .types import (
    DEFAULT_NODE_HEIGHT,
    DEFAULT_NODE_WIDTH,
    Anchor,
    DragHandle,
    Edge,
    EdgeType,
    Node,
    NodeKind,
    Path,
    Point,
    Side,
)
from .validation import (
    RoutingWarning,
    UnknownEdgeError,
    UnknownNodeError,
    coerce_edge_type,
    coerce_node_kind,
    coerce_waypoints,
)


class IdSource(Protocol):
    """Protocol for id generators injected into a graph."""

    def next_id(self, prefix: str) -> str:
        """Return a new id for an entity of the given kind."""
        ...


class SequentialIds:
    """
    Counter-based ids: ``node_0``, ``node_1``, ``edge_0``, ...

    Each prefix has its own counter. Counters belong to this instance, so
    two graphs never share or race on ids.
    """

    def __init__(self, start: int = 0) -> None:
        self._start = start
        self._counters: dict[str, int] = {}

    def next_id(self, prefix: str) -> str:
        value = self._counters.get(prefix, self._start)
        self._counters[prefix] = value + 1
        return f"{prefix}_{value}"


class UuidIds:
    """Random ids: ``node_<hex>``."""

    def next_id(self, prefix: str) -> str:
        return f"{prefix}_{uuid.uuid4().hex}"


class GraphEventType(IntEnum):
    """
    Graph change events.

    - node_added / node_removed: Node set changed
    - edge_added / edge_removed: Edge set changed
    - selection_changed: Selected edge changed (possibly to none)
    - waypoints_changed: An edge's routing must be recomputed
    """

    node_added = 0
    node_removed = 1
    edge_added = 2
    edge_removed = 3
    selection_changed = 4
    waypoints_changed = 5


class GraphEvent(TypedDict, total=False):
    """Event payload passed to event listeners."""

    type: GraphEventType
    node_id: Optional[str]
    edge_id: Optional[str]


class ConnectionGraph:
    """
    Nodes, edges and selection for one canvas.

    Args:
        id_source: Id generator; defaults to a fresh SequentialIds
        edge_type: Edge type attached to new connections
        damping: Drag damping used by controllers working on this graph
        threshold: Direct-connection threshold for step routing
    """

    def __init__(
        self,
        *,
        id_source: Optional[IdSource] = None,
        edge_type: EdgeType | str = EdgeType.STEP,
        damping: float = DAMPING,
        threshold: float = DIRECT_THRESHOLD,
    ) -> None:
        self._ids: IdSource = id_source if id_source is not None else SequentialIds()
        self._nodes: dict[str, Node] = {}
        self._edges: dict[str, Edge] = {}
        self._edge_type = coerce_edge_type(edge_type)
        self._selected_edge_id: Optional[str] = None
        self._nodes_created = 0
        self._events: dict[GraphEventType, Callable[[Optional[GraphEvent]], None]] = {}
        self.damping = damping
        self.threshold = threshold

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def nodes(self) -> list[Node]:
        """Nodes in creation order."""
        return list(self._nodes.values())

    @property
    def edges(self) -> list[Edge]:
        """Edges in creation order."""
        return list(self._edges.values())

    @property
    def edge_type(self) -> EdgeType:
        """Edge type attached to the next connection."""
        return self._edge_type

    @edge_type.setter
    def edge_type(self, value: EdgeType | str) -> None:
        self._edge_type = coerce_edge_type(value)

    @property
    def selected_edge_id(self) -> Optional[str]:
        return self._selected_edge_id

    @property
    def selected_edge(self) -> Optional[Edge]:
        if self._selected_edge_id is None:
            return None
        return self._edges[self._selected_edge_id]

    def node(self, node_id: str) -> Node:
        """
        Look up a node.

        Raises:
            UnknownNodeError: If no node has this id
        """
        try:
            return self._nodes[node_id]
        except KeyError:
            raise UnknownNodeError(f"No node with id {node_id!r}") from None

    def edge(self, edge_id: str) -> Edge:
        """
        Look up an edge.

        Raises:
            UnknownEdgeError: If no edge has this id
        """
        try:
            return self._edges[edge_id]
        except KeyError:
            raise UnknownEdgeError(f"No edge with id {edge_id!r}") from None

    # -------------------------------------------------------------------------
    # Event System
    # -------------------------------------------------------------------------

    def on(
        self, event: GraphEventType | str, callback: Callable[[Optional[GraphEvent]], None]
    ) -> Self:
        """
        Subscribe to a graph event.

        Args:
            event: Event type (GraphEventType enum or string name)
            callback: Function to call when event fires

        Returns:
            self (for chaining)
        """
        if isinstance(event, str):
            event = GraphEventType[event]
        self._events[event] = callback
        return self

    def trigger(self, event: GraphEvent) -> None:
        """
        Trigger an event, calling the registered callback.

        Args:
            event: Event payload with type and optional data
        """
        event_type = event.get("type")
        if event_type is not None and event_type in self._events:
            self._events[event_type](event)

    # -------------------------------------------------------------------------
    # Nodes and edges
    # -------------------------------------------------------------------------

    def add_node(
        self,
        kind: NodeKind | str,
        x: float,
        y: float,
        *,
        width: float = DEFAULT_NODE_WIDTH,
        height: float = DEFAULT_NODE_HEIGHT,
        label: Optional[str] = None,
    ) -> Node:
        """
        Place a new node centred on ``(x, y)``.

        Args:
            kind: Node kind (NodeKind or its value, e.g. "tank")
            x: Center x
            y: Center y
            width: Node width
            height: Node height
            label: Display label; defaults to "<Kind> <n>" where n counts
                the nodes created on this graph so far

        Returns:
            The new node
        """
        kind = coerce_node_kind(kind)
        self._nodes_created += 1
        if label is None:
            label = f"{kind.value.capitalize()} {self._nodes_created}"
        node = Node(
            id=self._ids.next_id("node"),
            kind=kind,
            x=float(x),
            y=float(y),
            width=width,
            height=height,
            label=label,
        )
        self._nodes[node.id] = node
        self.trigger({"type": GraphEventType.node_added, "node_id": node.id})
        return node

    def move_node(self, node_id: str, x: float, y: float) -> Node:
        """Move a node; its anchors, and so its edges' paths, follow."""
        node = self.node(node_id)
        node.x = float(x)
        node.y = float(y)
        return node

    def set_edge_type(self, edge_type: EdgeType | str) -> Self:
        """Set the edge type for new connections (for chaining)."""
        self.edge_type = edge_type
        return self

    def connect(
        self,
        source_id: str,
        target_id: str,
        *,
        source_side: Side = Side.SOUTH,
        target_side: Side = Side.NORTH,
    ) -> Edge:
        """
        Connect two nodes with the currently active edge type.

        Args:
            source_id: Id of the source node
            target_id: Id of the target node
            source_side: Side of the source node to leave from
            target_side: Side of the target node to arrive at

        Returns:
            The new edge, with no waypoints

        Raises:
            UnknownNodeError: If either node id is unknown
        """
        self.node(source_id)
        self.node(target_id)
        if source_id == target_id:
            warnings.warn(
                f"Edge connects node {source_id!r} to itself; "
                "its route will run between two anchors of the same node.",
                RoutingWarning,
                stacklevel=2,
            )

        edge = Edge(
            id=self._ids.next_id("edge"),
            source=Anchor(source_id, source_side),
            target=Anchor(target_id, target_side),
            edge_type=self._edge_type,
            label=self._edge_type.label,
        )
        self._edges[edge.id] = edge
        self.trigger({"type": GraphEventType.edge_added, "edge_id": edge.id})
        return edge

    # -------------------------------------------------------------------------
    # Selection
    # -------------------------------------------------------------------------

    def select_edge(self, edge_id: Optional[str]) -> Optional[Edge]:
        """
        Make ``edge_id`` the only selected edge.

        Passing None clears the selection, as a click on empty canvas does.

        Raises:
            UnknownEdgeError: If the edge id is unknown
        """
        new = self.edge(edge_id) if edge_id is not None else None
        if self._selected_edge_id == edge_id:
            return new

        if self._selected_edge_id is not None:
            self._edges[self._selected_edge_id].selected = False
        if new is not None:
            new.selected = True
        self._selected_edge_id = edge_id
        self.trigger({"type": GraphEventType.selection_changed, "edge_id": edge_id})
        return new

    def clear_selection(self) -> None:
        """Deselect everything."""
        self.select_edge(None)

    # -------------------------------------------------------------------------
    # Deletion
    # -------------------------------------------------------------------------

    def delete_edge(self, edge_id: str) -> bool:
        """
        Remove one edge, discarding its waypoints.

        Returns:
            True if an edge was removed
        """
        if edge_id not in self._edges:
            return False
        if self._selected_edge_id == edge_id:
            self.clear_selection()
        del self._edges[edge_id]
        self.trigger({"type": GraphEventType.edge_removed, "edge_id": edge_id})
        return True

    def delete_node(self, node_id: str) -> bool:
        """
        Remove one node together with the edges attached to it.

        Returns:
            True if a node was removed
        """
        if node_id not in self._nodes:
            return False
        attached = [
            e.id for e in self._edges.values() if node_id in (e.source.node, e.target.node)
        ]
        for edge_id in attached:
            self.delete_edge(edge_id)
        del self._nodes[node_id]
        self.trigger({"type": GraphEventType.node_removed, "node_id": node_id})
        return True

    def delete_selected(self) -> bool:
        """Delete the selected edge (keyboard delete)."""
        if self._selected_edge_id is None:
            return False
        return self.delete_edge(self._selected_edge_id)

    # -------------------------------------------------------------------------
    # Routing
    # -------------------------------------------------------------------------

    def anchor_points(self, edge_id: str) -> tuple[Point, Point]:
        """Current (source, target) anchor locations from live node positions."""
        edge = self.edge(edge_id)
        source = self.node(edge.source.node).anchor_point(edge.source.side, edge.source.position)
        target = self.node(edge.target.node).anchor_point(edge.target.side, edge.target.position)
        return source, target

    def route(self, edge_id: str) -> Path:
        """
        Compute a fresh path for an edge.

        Step edges are routed orthogonally through their waypoints; straight
        and bezier edges are a direct two-point path.
        """
        edge = self.edge(edge_id)
        source, target = self.anchor_points(edge_id)
        if edge.edge_type is EdgeType.STEP:
            return compute_path(
                source.x,
                source.y,
                target.x,
                target.y,
                edge.waypoints,
                threshold=self.threshold,
            )
        return straight_path(source.x, source.y, target.x, target.y)

    def path_string(self, edge_id: str, *, precision: Optional[int] = None) -> str:
        """Drawable path commands for an edge."""
        edge = self.edge(edge_id)
        if edge.edge_type is EdgeType.BEZIER:
            source, target = self.anchor_points(edge_id)
            return to_bezier_path_string(
                source.x,
                source.y,
                edge.source.side,
                target.x,
                target.y,
                edge.target.side,
                precision=precision,
            )
        return to_path_string(self.route(edge_id).points, precision=precision)

    def handles(self, edge_id: str) -> list[DragHandle]:
        """Drag handles for an edge's draggable segments."""
        return drag_handles(self.route(edge_id))

    def label_position(self, edge_id: str) -> Point:
        """Midpoint between the anchors, where the delete button is placed."""
        source, target = self.anchor_points(edge_id)
        return Point((source.x + target.x) / 2, (source.y + target.y) / 2)

    def set_waypoints(self, edge_id: str, waypoints: Optional[Iterable[Any]]) -> Edge:
        """
        Commit a new waypoint list to an edge.

        The list is copied; later changes to ``waypoints`` do not reach the
        edge.

        Raises:
            UnknownEdgeError: If the edge id is unknown
            InvalidWaypointError: If a waypoint is malformed
        """
        edge = self.edge(edge_id)
        edge.waypoints = coerce_waypoints(waypoints)
        self.trigger({"type": GraphEventType.waypoints_changed, "edge_id": edge_id})
        return edge

    def reset_waypoints(self, edge_id: str) -> Edge:
        """Drop an edge's waypoints, restoring the default route."""
        return self.set_waypoints(edge_id, ())

    def __repr__(self) -> str:
        return f"ConnectionGraph(nodes={len(self._nodes)}, edges={len(self._edges)})"


__all__ = [
    "IdSource",
    "SequentialIds",
    "UuidIds",
    "GraphEventType",
    "GraphEvent",
    "ConnectionGraph",
]
