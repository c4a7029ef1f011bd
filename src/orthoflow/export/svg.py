"""
SVG snapshot of a connection graph.

Draws node boxes, their labels and every edge using the same path strings a
live canvas would draw, so a snapshot shows exactly what the routing engine
produced. Intended for previews and debugging, not as a storage format.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional
from xml.sax.saxutils import escape

from ..routing.curves import bezier_controls
from ..types import EdgeType
from .path import format_number

if TYPE_CHECKING:
    from ..graph import ConnectionGraph
    from ..types import Edge, Node, Point


def to_svg(
    graph: ConnectionGraph,
    *,
    node_color: str = "#ffffff",
    node_stroke: str = "#93c5fd",
    node_stroke_width: float = 2.0,
    edge_color: str = "#b1b1b7",
    edge_width: float = 2.0,
    selected_color: str = "#ef4444",
    selected_width: float = 3.0,
    show_labels: bool = True,
    label_color: str = "#374151",
    font_size: float = 12.0,
    font_family: str = "sans-serif",
    padding: float = 40.0,
    background: Optional[str] = None,
) -> str:
    """
    Export a connection graph to SVG format.

    Args:
        graph: Graph to draw
        node_color: Fill color for nodes
        node_stroke: Stroke color for nodes
        node_stroke_width: Stroke width for nodes
        edge_color: Color for edges
        edge_width: Width for edges
        selected_color: Color for the selected edge
        selected_width: Width for the selected edge
        show_labels: Whether to show node labels
        label_color: Color for labels
        font_size: Font size for labels
        font_family: Font family for labels
        padding: Padding around the graph
        background: Background color (None for transparent)

    Returns:
        SVG string representation of the graph
    """
    nodes = graph.nodes
    edges = graph.edges

    if not nodes:
        return _empty_svg(100, 100, background)

    # Calculate bounding box from boxes
    min_x = min(node.left for node in nodes)
    max_x = max(node.right for node in nodes)
    min_y = min(node.top for node in nodes)
    max_y = max(node.bottom for node in nodes)

    # Include routed points in bounds, and control points for curves
    for edge in edges:
        for point in _bounding_points(graph, edge):
            min_x = min(min_x, point.x)
            max_x = max(max_x, point.x)
            min_y = min(min_y, point.y)
            max_y = max(max_y, point.y)

    width = max_x - min_x + 2 * padding
    height = max_y - min_y + 2 * padding
    offset_x = padding - min_x
    offset_y = padding - min_y

    svg_parts = [
        f'<svg xmlns="http://www.w3.org/2000/svg" '
        f'width="{width:.1f}" height="{height:.1f}" '
        f'viewBox="0 0 {width:.1f} {height:.1f}">'
    ]

    if background:
        svg_parts.append(f'  <rect width="100%" height="100%" fill="{escape(background)}"/>')

    # Paths keep canvas coordinates; the group applies the offset
    svg_parts.append(
        f'  <g transform="translate({format_number(offset_x, 1)},{format_number(offset_y, 1)})">'
    )

    svg_parts.append('  <g class="edges">')
    for edge in edges:
        color, stroke_width = edge_color, edge_width
        if edge.selected:
            color, stroke_width = selected_color, selected_width
        svg_parts.append(_render_edge(graph, edge, color, stroke_width))
    svg_parts.append("  </g>")

    svg_parts.append('  <g class="nodes">')
    for node in nodes:
        svg_parts.append(_render_node(node, node_color, node_stroke, node_stroke_width))
    svg_parts.append("  </g>")

    if show_labels:
        svg_parts.append('  <g class="labels">')
        for node in nodes:
            svg_parts.append(_render_label(node, label_color, font_size, font_family))
        svg_parts.append("  </g>")

    svg_parts.append("  </g>")
    svg_parts.append("</svg>")

    return "\n".join(svg_parts)


def _empty_svg(width: float, height: float, background: Optional[str]) -> str:
    """Create an empty SVG."""
    bg = ""
    if background:
        bg = f'\n  <rect width="100%" height="100%" fill="{escape(background)}"/>'
    return (
        f'<svg xmlns="http://www.w3.org/2000/svg" '
        f'width="{width:.1f}" height="{height:.1f}" '
        f'viewBox="0 0 {width:.1f} {height:.1f}">{bg}\n</svg>'
    )


def _bounding_points(graph: ConnectionGraph, edge: Edge) -> list[Point]:
    """Points the drawn edge can reach: its route plus any bezier control points."""
    points = list(graph.route(edge.id).points)
    if edge.edge_type is EdgeType.BEZIER:
        source, target = graph.anchor_points(edge.id)
        points.extend(
            bezier_controls(
                source.x,
                source.y,
                edge.source.side,
                target.x,
                target.y,
                edge.target.side,
            )
        )
    return points


def _render_edge(graph: ConnectionGraph, edge: Edge, color: str, width: float) -> str:
    """Render an edge from its path string."""
    path_data = graph.path_string(edge.id, precision=1)
    return (
        f'    <path id="{escape(edge.id)}" d="{path_data}" '
        f'fill="none" stroke="{escape(color)}" stroke-width="{width}"/>'
    )


def _render_node(node: Node, fill: str, stroke: str, stroke_width: float) -> str:
    """Render a node box."""
    return (
        f'    <rect id="{escape(node.id)}" x="{node.left:.1f}" y="{node.top:.1f}" '
        f'width="{node.width:.1f}" height="{node.height:.1f}" '
        f'fill="{escape(fill)}" stroke="{escape(stroke)}" '
        f'stroke-width="{stroke_width}" rx="8"/>'
    )


def _render_label(node: Node, color: str, font_size: float, font_family: str) -> str:
    """Render a node label."""
    return (
        f'    <text x="{node.x:.1f}" y="{node.y:.1f}" '
        f'fill="{escape(color)}" font-size="{font_size}" '
        f'font-family="{escape(font_family)}" '
        f'text-anchor="middle" dominant-baseline="central">'
        f"{escape(node.label)}</text>"
    )


__all__ = [
    "to_svg",
]
