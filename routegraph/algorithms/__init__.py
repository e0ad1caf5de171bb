"""Shortest-path algorithms.

``spf.shortest_path`` is the iterative working-set variant over a ``Graph``;
``frontier.shortest_path_net`` is the priority-frontier variant over a net
mapping. Both return a ``PathResult``.
"""

from __future__ import annotations

from typing import Callable, Dict

from routegraph.algorithms.frontier import shortest_path_graph, shortest_path_net
from routegraph.algorithms.paths import reconstruct_route, traversed_distance
from routegraph.algorithms.spf import shortest_path
from routegraph.model.graph import Graph
from routegraph.types.base import Algorithm, NodeID
from routegraph.types.dto import PathResult

_SOLVERS: Dict[Algorithm, Callable[[Graph, NodeID, NodeID], PathResult]] = {
    Algorithm.ITERATIVE: shortest_path,
    Algorithm.FRONTIER: shortest_path_graph,
}


def solve(
    graph: Graph,
    source: NodeID,
    target: NodeID,
    algorithm: Algorithm = Algorithm.ITERATIVE,
) -> PathResult:
    """Run the selected shortest-path variant on ``graph``."""
    return _SOLVERS[algorithm](graph, source, target)


__all__ = [
    "solve",
    "shortest_path",
    "shortest_path_net",
    "shortest_path_graph",
    "traversed_distance",
    "reconstruct_route",
]
