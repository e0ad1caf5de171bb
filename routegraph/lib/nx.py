"""NetworkX graph conversion utilities.

This module converts between ``routegraph.Graph`` and ``networkx.Graph`` so
that graphs can be analysed with the NetworkX toolbox or cross-checked
against its shortest-path implementations.

Example:
    >>> import networkx as nx
    >>> from routegraph.generate import polygon_graph
    >>> from routegraph.lib.nx import to_networkx
    >>>
    >>> G = to_networkx(polygon_graph(10))
    >>> nx.dijkstra_path(G, "0", "4")
    ['0', '1', '2', '3', '4']
"""

from __future__ import annotations

from typing import Any, Dict, List

import networkx as nx

from routegraph.model.graph import Edge, Graph, Node
from routegraph.types.base import NodeID


def to_networkx(graph: Graph, weight_attr: str = "weight") -> nx.Graph:
    """Convert a Graph to an undirected ``networkx.Graph``.

    Node attributes ``x`` and ``y`` hold coordinates; each edge carries its
    Euclidean length under ``weight_attr``.

    Args:
        graph: Graph to convert.
        weight_attr: Edge attribute name for the distance.

    Returns:
        A new networkx.Graph.
    """
    G = nx.Graph()
    for node in graph.nodes.values():
        G.add_node(node.id, x=node.x, y=node.y)
    for edge in graph.edges:
        G.add_edge(
            edge.node_a,
            edge.node_b,
            **{weight_attr: graph.distance_between(edge.node_a, edge.node_b)},
        )
    return G


def from_networkx(G: Any, *, x_attr: str = "x", y_attr: str = "y") -> Graph:
    """Convert a NetworkX graph with node coordinates to a Graph.

    Node names are converted to ``str``. Edge direction and edge attributes
    are ignored; weights are recomputed from coordinates.

    Args:
        G: NetworkX graph (any of Graph, DiGraph, MultiGraph, MultiDiGraph).
        x_attr: Node attribute holding the x-coordinate.
        y_attr: Node attribute holding the y-coordinate.

    Returns:
        A validated Graph.

    Raises:
        ValueError: If a node is missing a coordinate attribute.
    """
    nodes: Dict[NodeID, Node] = {}
    for name, data in G.nodes(data=True):
        if x_attr not in data or y_attr not in data:
            raise ValueError(
                f"Node '{name}' is missing coordinate attributes "
                f"'{x_attr}'/'{y_attr}'."
            )
        nid = str(name)
        nodes[nid] = Node(nid, float(data[x_attr]), float(data[y_attr]))

    edges: List[Edge] = []
    seen = set()
    for u, v in G.edges():
        key = frozenset((str(u), str(v)))
        if key in seen:
            continue
        seen.add(key)
        edges.append(Edge(str(u), str(v)))
    return Graph(nodes, tuple(edges))


def connected_components(graph: Graph) -> List[List[NodeID]]:
    """Return the connected components of ``graph``, largest first.

    Node ids within a component follow the graph's node order.
    """
    order = {nid: i for i, nid in enumerate(graph.nodes)}
    components = [
        sorted(component, key=order.__getitem__)
        for component in nx.connected_components(to_networkx(graph))
    ]
    components.sort(key=lambda c: (-len(c), order[c[0]]))
    return components
