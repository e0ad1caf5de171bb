"""Regular-polygon graph generation.

``polygon_graph`` places ``sides`` nodes on a circle and connects consecutive
nodes, closing the ring. Node ids are ``"0"`` .. ``"<sides-1>"``. Optional
"spike" nodes ``"<id>a"`` and ``"<id>b"`` hang off every polygon node and are
connected to it only, adding dead-end branches to the ring.
"""

from __future__ import annotations

import math
from typing import Dict, List, Optional, Tuple

from routegraph.config import POLYGON_CONFIG, PolygonConfig
from routegraph.logging import get_logger
from routegraph.model.graph import Edge, Graph, Node
from routegraph.types.base import NodeID

LOGGER = get_logger(__name__)


def is_edge(edge: Edge, na: NodeID, nb: NodeID) -> bool:
    """Return True if ``edge`` connects ``na`` and ``nb`` in either order."""
    return edge.connects(na, nb)


def spike_nodes(
    key: NodeID, theta: float, x: float, y: float, length: float, delta: float = 0.0
) -> Tuple[Node, Node]:
    """Create the two spike nodes of polygon node ``key``.

    Args:
        key: Id of the polygon node the spikes attach to.
        theta: Polygon slice angle of the node.
        x: X-coordinate of the polygon node.
        y: Y-coordinate of the polygon node.
        length: Spike length scale.
        delta: Extra angle added to ``theta``.

    Returns:
        The ``(<key>a, <key>b)`` nodes, mirrored around the polygon node.
    """
    dx = length + length * math.cos(theta + delta)
    dy = length + length * math.sin(theta + delta)
    return Node(f"{key}a", x + dx, y + dy), Node(f"{key}b", x - dx, y - dy)


def polygon_graph(
    sides: int,
    radius: Optional[float] = None,
    spikes: bool = False,
    config: Optional[PolygonConfig] = None,
) -> Graph:
    """Generate a graph shaped as a regular polygon.

    The last node is pushed slightly outward (see
    ``PolygonConfig.closing_offset_ratio``) so that on even polygons the two
    routes to the opposite node are not of equal length.

    Args:
        sides: Number of polygon nodes (and ring edges).
        radius: Circle radius; defaults to ``config.radius``.
        spikes: Whether to add two spike nodes per polygon node.
        config: Geometry settings; defaults to ``POLYGON_CONFIG``.

    Returns:
        The generated Graph.

    Raises:
        ValueError: If ``sides`` is less than 1.
    """
    if sides < 1:
        raise ValueError(f"Polygon must have at least one side, got {sides}.")
    cfg = config or POLYGON_CONFIG
    r = cfg.radius if radius is None else radius

    slice_angle = (2 * math.pi) / sides
    nodes: Dict[NodeID, Node] = {}
    edges: List[Edge] = []

    for n in range(sides):
        theta = slice_angle * n
        offset = cfg.closing_offset(r) if n == sides - 1 else 0.0
        x = r + (r + offset) * math.cos(theta)
        y = r + (r + offset) * math.sin(theta)
        key = str(n)
        nodes[key] = Node(key, x, y)

        if spikes:
            na, nb = spike_nodes(key, theta, x, y, cfg.spike_length, cfg.spike_delta)
            nodes[na.id] = na
            nodes[nb.id] = nb
            edges.append(Edge(key, na.id))
            edges.append(Edge(key, nb.id))

        if n > 0:
            edges.append(Edge(str(n - 1), key))
        else:
            edges.append(Edge(str(sides - 1), "0"))

    LOGGER.debug(
        "Generated %d-sided polygon graph (spikes=%s): %d nodes, %d edges",
        sides,
        spikes,
        len(nodes),
        len(edges),
    )
    return Graph(nodes, tuple(edges))
