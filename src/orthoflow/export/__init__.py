"""
Export functionality for routed edges.

This module provides:
- Path strings: move-to/line-to command sequences for drawing an edge
- SVG: A standalone snapshot of a whole connection graph

Example usage:
    from orthoflow import ConnectionGraph, NodeKind
    from orthoflow.export import to_path_string, to_svg

    graph = ConnectionGraph()
    a = graph.add_node(NodeKind.TANK, 100, 100)
    b = graph.add_node(NodeKind.VALVE, 400, 250)
    edge = graph.connect(a.id, b.id)

    d = to_path_string(graph.route(edge.id).points)

    with open("graph.svg", "w") as f:
        f.write(to_svg(graph))
"""

from .path import format_number, to_bezier_path_string, to_path_string
from .svg import to_svg

__all__ = [
    # Path strings
    "format_number",
    "to_path_string",
    "to_bezier_path_string",
    # SVG export
    "to_svg",
]
