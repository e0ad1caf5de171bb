"""Iterative shortest-path-first (SPF) computation.

Classic Dijkstra relaxation over a working set of unsettled nodes. Every query
allocates its own distance, predecessor and working-set state, so concurrent
queries against one ``Graph`` do not interfere.

Notes:
    The minimum-distance node is chosen with a strict ``<`` comparison in the
    graph's node order, so among equal tentative distances the node inserted
    first into ``Graph.nodes`` is settled first. The same graph and query
    therefore always produce the same route.
"""

from __future__ import annotations

from typing import Dict, Optional

from routegraph.algorithms.paths import (
    checked_weight,
    reconstruct_route,
    traversed_distance,
)
from routegraph.logging import get_logger
from routegraph.model.graph import Graph
from routegraph.types.base import INFINITE, Cost, NodeID
from routegraph.types.dto import (
    Found,
    InternalError,
    InvalidEndpoints,
    NotFound,
    PathResult,
)

LOGGER = get_logger(__name__)


def _min_distance_id(
    distance: Dict[NodeID, Cost], working: Dict[NodeID, None]
) -> Optional[NodeID]:
    """Return the working node with the least finite distance, if any."""
    best: Cost = INFINITE
    best_id: Optional[NodeID] = None
    for node_id in working:
        if distance[node_id] < best:
            best = distance[node_id]
            best_id = node_id
    return best_id


def shortest_path(graph: Graph, source: NodeID, target: NodeID) -> PathResult:
    """Compute the shortest route between two nodes of ``graph``.

    Args:
        graph: Graph to search.
        source: Starting node id.
        target: Ending node id.

    Returns:
        ``Found`` with the route and its distance; ``InvalidEndpoints`` if either
        id is not in the graph; ``NotFound`` if the nodes are disconnected;
        ``InternalError`` if the computation failed.
    """
    missing = tuple(nid for nid in (source, target) if nid not in graph.nodes)
    if missing:
        return InvalidEndpoints(source, target, missing)
    if source == target:
        return Found((source,), 0.0)

    try:
        return _dijkstra(graph, source, target)
    except (KeyError, TypeError, ValueError, ArithmeticError) as exc:
        LOGGER.error(
            "Shortest route %s -> %s failed: %s: %s",
            source,
            target,
            type(exc).__name__,
            exc,
        )
        return InternalError(f"{type(exc).__name__}: {exc}")


def _dijkstra(graph: Graph, source: NodeID, target: NodeID) -> PathResult:
    distance: Dict[NodeID, Cost] = {}
    previous: Dict[NodeID, Optional[NodeID]] = {}
    # Insertion-ordered set of unsettled node ids
    working: Dict[NodeID, None] = {}
    for node_id in graph.nodes:
        distance[node_id] = INFINITE
        previous[node_id] = None
        working[node_id] = None
    distance[source] = 0.0

    closest: Optional[NodeID] = None
    while working:
        mid = _min_distance_id(distance, working)
        if mid is None:
            LOGGER.debug("No other nodes are reachable from %s", source)
            break
        closest = mid
        del working[closest]

        try:
            neighbors = graph.neighbors(closest)
        except KeyError:
            return InternalError(f"Error determining neighbors for {closest}")

        for neighbor, weight in neighbors.items():
            alternate = distance[closest] + checked_weight(closest, neighbor, weight)
            if alternate < distance[neighbor]:
                distance[neighbor] = alternate
                previous[neighbor] = closest

    if closest is None or distance[closest] == INFINITE:
        return NotFound(source, target)

    route = reconstruct_route(previous, source, target)
    if not route:
        return NotFound(source, target)
    return Found(tuple(route), traversed_distance(graph, route))
