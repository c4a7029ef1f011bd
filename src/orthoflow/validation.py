"""
Input validation utilities for the routing engine and canvas model.

Provides the package exception hierarchy, the warning category used for
recoverable conditions, and normalisation of loosely-typed waypoint input.
Raises descriptive exceptions on invalid input.
"""

from __future__ import annotations

import math
from typing import Any, Iterable

from .types import EdgeType, NodeKind, Point


class ValidationError(ValueError):
    """Base exception for orthoflow validation errors."""

    pass


class InvalidWaypointError(ValidationError):
    """Raised when a waypoint cannot be read as an (x, y) location."""

    pass


class NonOrthogonalPathError(ValidationError):
    """Raised when consecutive path points share neither coordinate."""

    pass


class UnknownNodeError(ValidationError):
    """Raised when a node id is not present in the graph."""

    pass


class UnknownEdgeError(ValidationError):
    """Raised when an edge id is not present in the graph."""

    pass


class InvalidEdgeTypeError(ValidationError):
    """Raised when an edge type name is not recognised."""

    pass


class InvalidNodeKindError(ValidationError):
    """Raised when a node kind name is not recognised."""

    pass


class RoutingWarning(UserWarning):
    """Warning for routing requests that are honoured but probably unintended."""

    pass


def coerce_point(value: Any, index: int = 0) -> Point:
    """
    Read a single waypoint as a Point.

    Args:
        value: A Point, an (x, y) pair, a mapping with "x"/"y" keys, or an
            object with x/y attributes
        index: Position of the value in its list, used in error messages

    Returns:
        The value as a Point with float coordinates

    Raises:
        InvalidWaypointError: If no numeric x/y can be extracted
    """
    if isinstance(value, Point):
        return value

    if isinstance(value, dict):
        x, y = value.get("x"), value.get("y")
    elif hasattr(value, "x") and hasattr(value, "y"):
        x, y = value.x, value.y
    else:
        try:
            x, y = value
        except (TypeError, ValueError):
            raise InvalidWaypointError(
                f"Waypoint {index}: expected (x, y), got {value!r}"
            ) from None

    try:
        fx, fy = float(x), float(y)
    except (TypeError, ValueError):
        raise InvalidWaypointError(
            f"Waypoint {index}: coordinates must be numeric, got ({x!r}, {y!r})"
        ) from None

    if not (math.isfinite(fx) and math.isfinite(fy)):
        raise InvalidWaypointError(f"Waypoint {index}: coordinates must be finite")
    return Point(fx, fy)


def coerce_waypoints(waypoints: Iterable[Any] | None) -> tuple[Point, ...]:
    """
    Normalise a waypoint sequence into a tuple of Points.

    Args:
        waypoints: Sequence of Points, pairs, or x/y mappings (None for none)

    Returns:
        New tuple of Points; the input is never modified

    Raises:
        InvalidWaypointError: If any entry is malformed
    """
    if waypoints is None:
        return ()
    return tuple(coerce_point(wp, i) for i, wp in enumerate(waypoints))


def coerce_edge_type(value: EdgeType | str) -> EdgeType:
    """
    Resolve an edge type from an EdgeType or its name/value.

    Raises:
        InvalidEdgeTypeError: If the name matches no edge type
    """
    if isinstance(value, EdgeType):
        return value
    key = str(value).strip().lower()
    for edge_type in EdgeType:
        if key in (edge_type.value, edge_type.name.lower()):
            return edge_type
    valid = ", ".join(repr(e.value) for e in EdgeType)
    raise InvalidEdgeTypeError(f"Unknown edge type {value!r}; expected one of {valid}")


def coerce_node_kind(value: NodeKind | str) -> NodeKind:
    """
    Resolve a node kind from a NodeKind or its name.

    Raises:
        InvalidNodeKindError: If the name matches no node kind
    """
    if isinstance(value, NodeKind):
        return value
    key = str(value).strip().lower()
    for kind in NodeKind:
        if key == kind.value:
            return kind
    valid = ", ".join(repr(k.value) for k in NodeKind)
    raise InvalidNodeKindError(f"Unknown node kind {value!r}; expected one of {valid}")


__all__ = [
    "ValidationError",
    "InvalidWaypointError",
    "NonOrthogonalPathError",
    "UnknownNodeError",
    "UnknownEdgeError",
    "InvalidEdgeTypeError",
    "InvalidNodeKindError",
    "RoutingWarning",
    "coerce_point",
    "coerce_waypoints",
    "coerce_edge_type",
    "coerce_node_kind",
]
