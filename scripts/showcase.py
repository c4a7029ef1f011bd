#!/usr/bin/env python3
"""
SVG showcase of orthogonal connector routing.

Builds a small process-flow graph (tank, valve, pump), connects it with
step, straight and bezier edges, replays a scripted drag on one step edge
and writes before/after snapshots.

Usage:
    uv run python scripts/showcase.py [--output DIR] [--drag PIXELS]

Output:
    build/showcase_before.svg
    build/showcase_after.svg
"""

from __future__ import annotations

import argparse
from pathlib import Path

from orthoflow import (
    ConnectionGraph,
    DragController,
    EdgeType,
    NodeKind,
    PointerEventType,
    PointerHub,
    Side,
    to_svg,
)

# Output directory
BUILD_DIR = Path(__file__).parent.parent / "build"


def build_graph() -> tuple[ConnectionGraph, str]:
    """Create the sample plant; returns the graph and the edge to drag."""
    graph = ConnectionGraph()
    tank = graph.add_node(NodeKind.TANK, 120, 100)
    valve = graph.add_node(NodeKind.VALVE, 420, 260)
    pump = graph.add_node(NodeKind.PUMP, 160, 460)
    drain = graph.add_node(NodeKind.TANK, 620, 520, label="Drain")

    feed = graph.connect(tank.id, valve.id)
    graph.connect(valve.id, pump.id, source_side=Side.WEST, target_side=Side.EAST)

    graph.set_edge_type(EdgeType.STRAIGHT)
    graph.connect(pump.id, drain.id, source_side=Side.EAST, target_side=Side.WEST)

    graph.set_edge_type(EdgeType.BEZIER)
    graph.connect(valve.id, drain.id)

    return graph, feed.id


def replay_drag(graph: ConnectionGraph, edge_id: str, distance: float) -> None:
    """Drag the first handle of an edge as a pointer would, in small steps."""
    handles = graph.handles(edge_id)
    if not handles:
        print(f"{edge_id}: no draggable segments")
        return

    handle = handles[0]
    hub = PointerHub()
    controller = DragController(graph, hub)
    controller.begin(edge_id, handle.segment_index, handle.x, handle.y)

    steps = 10
    for i in range(1, steps + 1):
        offset = distance * i / steps
        hub.dispatch(PointerEventType.MOVE, handle.x + offset, handle.y + offset)
    hub.dispatch(PointerEventType.UP, handle.x + distance, handle.y + distance)

    print(f"{edge_id}: waypoints {list(graph.edge(edge_id).waypoints)}")
    print(f"{edge_id}: {graph.path_string(edge_id)}")


def main():
    parser = argparse.ArgumentParser(description="Render routed edges before/after a drag")
    parser.add_argument("--output", type=Path, default=BUILD_DIR, help="Output directory")
    parser.add_argument("--drag", type=float, default=80.0, help="Pointer travel in pixels")
    args = parser.parse_args()

    args.output.mkdir(parents=True, exist_ok=True)
    graph, edge_id = build_graph()
    graph.select_edge(edge_id)

    before = args.output / "showcase_before.svg"
    before.write_text(to_svg(graph, background="#f3f4f6"))

    replay_drag(graph, edge_id, args.drag)

    after = args.output / "showcase_after.svg"
    after.write_text(to_svg(graph, background="#f3f4f6"))
    print(f"Wrote {before} and {after}")


if __name__ == "__main__":
    main()
