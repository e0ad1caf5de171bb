"""Frontier-based shortest-path computation over a net mapping.

This variant works on the adjacency view alone (node id -> neighbor id ->
distance) and is intended for repeated queries once a net is materialized. It
keeps a priority frontier keyed by tentative distance, where each key holds the
set of ``(node, predecessor)`` pairs awaiting settlement. The globally minimal
entry is committed to the predecessor map and its unsettled neighbors are
inserted or moved to a smaller key.

Both variants return identical costs for any query. When several routes share
the minimal cost the chosen route may differ from ``spf.shortest_path``: here
the lexicographically smallest ``(node, predecessor)`` pair of the minimal key
is settled first.
"""

from __future__ import annotations

from heapq import heappop, heappush
from typing import Dict, List, Optional, Set, Tuple

from routegraph.algorithms.paths import (
    checked_weight,
    reconstruct_route,
    traversed_distance,
)
from routegraph.logging import get_logger
from routegraph.model.graph import Graph, Net
from routegraph.types.base import Cost, NodeID
from routegraph.types.dto import (
    Found,
    InternalError,
    InvalidEndpoints,
    NotFound,
    PathResult,
)

LOGGER = get_logger(__name__)

FrontierEntry = Tuple[NodeID, Optional[NodeID]]


def _entry_order(entry: FrontierEntry) -> Tuple[NodeID, NodeID]:
    node, pred = entry
    return node, "" if pred is None else pred


class _Frontier:
    """Distance-keyed buckets of pending entries with a heap of keys."""

    def __init__(self) -> None:
        self._buckets: Dict[Cost, Set[FrontierEntry]] = {}
        # May hold keys of already emptied buckets; skipped on pop
        self._keys: List[Cost] = []

    def __bool__(self) -> bool:
        return bool(self._buckets)

    def push(self, dist: Cost, node: NodeID, pred: Optional[NodeID]) -> None:
        bucket = self._buckets.get(dist)
        if bucket is None:
            bucket = self._buckets[dist] = set()
            heappush(self._keys, dist)
        bucket.add((node, pred))

    def discard(self, dist: Cost, node: NodeID, pred: Optional[NodeID]) -> None:
        bucket = self._buckets.get(dist)
        if bucket is None:
            return
        bucket.discard((node, pred))
        if not bucket:
            del self._buckets[dist]

    def pop_min(self) -> Tuple[Cost, NodeID, Optional[NodeID]]:
        while self._keys[0] not in self._buckets:
            heappop(self._keys)
        dist = self._keys[0]
        bucket = self._buckets[dist]
        entry = min(bucket, key=_entry_order)
        bucket.remove(entry)
        if not bucket:
            del self._buckets[dist]
            heappop(self._keys)
        return dist, entry[0], entry[1]


def _settle(net: Net, source: NodeID) -> Dict[NodeID, Optional[NodeID]]:
    """Return the committed predecessor of every node reachable from source."""
    committed: Dict[NodeID, Optional[NodeID]] = {}
    tentative: Dict[NodeID, Tuple[Cost, Optional[NodeID]]] = {source: (0.0, None)}
    frontier = _Frontier()
    frontier.push(0.0, source, None)

    while frontier:
        dist, node, pred = frontier.pop_min()
        if node in committed:
            continue
        committed[node] = pred

        for neighbor, weight in net[node].items():
            if neighbor in committed:
                continue
            alternate = dist + checked_weight(node, neighbor, weight)
            best = tentative.get(neighbor)
            if best is None or alternate < best[0]:
                if best is not None:
                    frontier.discard(best[0], neighbor, best[1])
                tentative[neighbor] = (alternate, node)
                frontier.push(alternate, neighbor, node)

    return committed


def shortest_path_net(net: Net, source: NodeID, target: NodeID) -> PathResult:
    """Compute the shortest route between two nodes of a net mapping.

    Args:
        net: Adjacency view, e.g. ``Graph.net``.
        source: Starting node id.
        target: Ending node id.

    Returns:
        ``Found``, ``InvalidEndpoints``, ``NotFound`` or ``InternalError`` with
        the same semantics as ``spf.shortest_path``.
    """
    missing = tuple(nid for nid in (source, target) if nid not in net)
    if missing:
        return InvalidEndpoints(source, target, missing)
    if source == target:
        return Found((target,), 0.0)

    try:
        committed = _settle(net, source)
        if target not in committed:
            return NotFound(source, target)
        route = reconstruct_route(committed, source, target)
        if not route:
            return NotFound(source, target)
        return Found(tuple(route), traversed_distance(net, route))
    except (KeyError, TypeError, ValueError, ArithmeticError) as exc:
        LOGGER.error(
            "Shortest route %s -> %s failed: %s: %s",
            source,
            target,
            type(exc).__name__,
            exc,
        )
        return InternalError(f"{type(exc).__name__}: {exc}")


def shortest_path_graph(graph: Graph, source: NodeID, target: NodeID) -> PathResult:
    """Run ``shortest_path_net`` over ``graph.net``."""
    return shortest_path_net(graph.net, source, target)
