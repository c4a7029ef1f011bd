"""
orthoflow: Orthogonal connector routing for node-and-edge canvases.

This package routes edges between nodes on an interactive canvas using only
horizontal and vertical segments, and lets users reshape those routes by
dragging segments.

Available modules:
- routing: Path planning, segment classification and drag-to-reshape
- export: Path command strings and SVG snapshots
- graph: Canvas model with node/edge identity, selection and deletion
- interaction: Pointer drag sessions that feed the routing engine
"""

__version__ = "0.1.0"

# Canvas model
from .graph import (
    ConnectionGraph,
    GraphEvent,
    GraphEventType,
    IdSource,
    SequentialIds,
    UuidIds,
)

# Drag sessions
from .interaction import DragController, DragSession, PointerEventType, PointerHub

# Path strings
from .export import to_bezier_path_string, to_path_string, to_svg

# Routing engine
from .routing import (
    DAMPING,
    DIRECT_THRESHOLD,
    classify_segments,
    compute_path,
    drag_handles,
    is_orthogonal,
    on_segment_drag,
)
from .types import (
    Anchor,
    DragHandle,
    Edge,
    EdgeType,
    Node,
    NodeKind,
    Orientation,
    Path,
    Point,
    Segment,
    Side,
)

# Validation utilities
from .validation import (
    InvalidEdgeTypeError,
    InvalidNodeKindError,
    InvalidWaypointError,
    NonOrthogonalPathError,
    RoutingWarning,
    UnknownEdgeError,
    UnknownNodeError,
    ValidationError,
)

__all__ = [
    # Version
    "__version__",
    # Shared types
    "Point",
    "Orientation",
    "Segment",
    "Path",
    "DragHandle",
    "Side",
    "Anchor",
    "NodeKind",
    "EdgeType",
    "Node",
    "Edge",
    # Routing engine
    "DIRECT_THRESHOLD",
    "DAMPING",
    "compute_path",
    "classify_segments",
    "drag_handles",
    "is_orthogonal",
    "on_segment_drag",
    # Export
    "to_path_string",
    "to_bezier_path_string",
    "to_svg",
    # Canvas model
    "ConnectionGraph",
    "GraphEvent",
    "GraphEventType",
    "IdSource",
    "SequentialIds",
    "UuidIds",
    # Drag sessions
    "DragController",
    "DragSession",
    "PointerEventType",
    "PointerHub",
    # Validation
    "ValidationError",
    "InvalidWaypointError",
    "NonOrthogonalPathError",
    "UnknownNodeError",
    "UnknownEdgeError",
    "InvalidEdgeTypeError",
    "InvalidNodeKindError",
    "RoutingWarning",
]
