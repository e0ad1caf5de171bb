"""routegraph: shortest routes on undirected Euclidean graphs.

routegraph computes least-cost routes between two nodes with Dijkstra's
algorithm, in two interchangeable implementations, and exports graphs with
highlighted routes as raster images.

Primary API:
    Graph, Node, Edge - Graph model with validated edges
    shortest_path() - Iterative Dijkstra over a Graph
    shortest_path_net() - Frontier-based Dijkstra over a net mapping
    traversed_distance() - Distance along an ordered list of node ids
    polygon_graph() - Regular-polygon test graphs
    export_graph_image() - Raster export with route highlighting

Example:
    from routegraph import Edge, Graph, Node, shortest_path

    graph = Graph.from_nodes(
        [Node("a", 0.0, 0.0), Node("b", 100.0, 100.0), Node("c", 100.0, 0.0)],
        [Edge("a", "b"), Edge("b", "c"), Edge("c", "a")],
    )
    result = shortest_path(graph, "a", "c")
    # Found(route=('a', 'c'), distance=100.0)
"""

from __future__ import annotations

from routegraph import cli, logging
from routegraph._version import __version__
from routegraph.algorithms import (
    shortest_path,
    shortest_path_graph,
    shortest_path_net,
    solve,
    traversed_distance,
)
from routegraph.generate import polygon_graph
from routegraph.lib.nx import from_networkx, to_networkx
from routegraph.model.graph import Edge, Graph, GraphConstructionError, Net, Node
from routegraph.render import export_graph_image
from routegraph.types.base import Algorithm, RouteStatus
from routegraph.types.dto import (
    Found,
    InternalError,
    InvalidEndpoints,
    NotFound,
    PathResult,
)

__all__ = [
    # Version
    "__version__",
    # Model
    "Graph",
    "Node",
    "Edge",
    "Net",
    "GraphConstructionError",
    # Algorithms
    "shortest_path",
    "shortest_path_net",
    "shortest_path_graph",
    "solve",
    "traversed_distance",
    # Types
    "Algorithm",
    "RouteStatus",
    "PathResult",
    "Found",
    "NotFound",
    "InvalidEndpoints",
    "InternalError",
    # Generation and rendering
    "polygon_graph",
    "export_graph_image",
    # Library integrations (NetworkX)
    "from_networkx",
    "to_networkx",
    # Utilities
    "cli",
    "logging",
]
