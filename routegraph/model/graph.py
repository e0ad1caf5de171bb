"""Graph data model: Node, Edge and the validated Graph container.

A ``Graph`` owns a node mapping and a sequence of undirected edges. Edge
weights are not stored; they are the Euclidean distances between the edge's
endpoints. The derived adjacency view (the "net") maps every node to its
neighbors and the distance to each, and is computed once when the graph is
constructed.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Sequence, Tuple, Union

from routegraph.logging import get_logger
from routegraph.types.base import Cost, NodeID

LOGGER = get_logger(__name__)

#: Adjacency view: node id -> (neighbor id -> distance).
Net = Mapping[NodeID, Mapping[NodeID, Cost]]


class GraphConstructionError(ValueError):
    """Raised when edges reference node ids that are not in the graph.

    Attributes:
        invalid_ids: Every offending id, in edge order, without duplicates.
    """

    def __init__(self, invalid_ids: Sequence[NodeID]) -> None:
        self.invalid_ids: Tuple[NodeID, ...] = tuple(invalid_ids)
        super().__init__(f"invalid node ids in edges: {list(self.invalid_ids)}")


@dataclass(frozen=True)
class Node:
    """A labeled point in the plane.

    Attributes:
        id (str): Unique identifier, used as key in ``Graph.nodes``.
        x (float): X-coordinate.
        y (float): Y-coordinate.
    """

    id: NodeID
    x: float
    y: float

    def distance_to(self, other: Node) -> float:
        """Return the Euclidean distance to ``other``."""
        return math.hypot(self.x - other.x, self.y - other.y)

    def __str__(self) -> str:
        return f"{self.id}: x={self.x}; y={self.y}"


@dataclass(frozen=True)
class Edge:
    """An undirected connection between two node ids.

    Attributes:
        node_a (str): Id of one endpoint.
        node_b (str): Id of the other endpoint.
    """

    node_a: NodeID
    node_b: NodeID

    def connects(self, a: NodeID, b: NodeID) -> bool:
        """Return True if this edge joins ``a`` and ``b`` in either order."""
        return (self.node_a == a and self.node_b == b) or (
            self.node_a == b and self.node_b == a
        )

    def other(self, node_id: NodeID) -> NodeID:
        """Return the endpoint opposite to ``node_id``.

        Raises:
            ValueError: If ``node_id`` is not an endpoint of this edge.
        """
        if node_id == self.node_a:
            return self.node_b
        if node_id == self.node_b:
            return self.node_a
        raise ValueError(f"Node '{node_id}' is not an endpoint of edge {self}.")

    def __str__(self) -> str:
        return f"{self.node_a} <-> {self.node_b}"


def _index_nodes(
    nodes: Union[Mapping[NodeID, Node], Iterable[Node]],
) -> Dict[NodeID, Node]:
    """Return ``nodes`` as a fresh id -> Node dict, validating ids."""
    node_map: Dict[NodeID, Node] = {}
    if isinstance(nodes, Mapping):
        for node_id, node in nodes.items():
            if node_id != node.id:
                raise ValueError(
                    f"Node key '{node_id}' does not match node id '{node.id}'."
                )
            node_map[node_id] = node
    else:
        for node in nodes:
            if node.id in node_map:
                raise ValueError(f"Node '{node.id}' already exists in this graph.")
            node_map[node.id] = node
    for node in node_map.values():
        if not (math.isfinite(node.x) and math.isfinite(node.y)):
            raise ValueError(f"Node '{node.id}' has non-finite coordinates.")
    return node_map


@dataclass(frozen=True)
class Graph:
    """A validated, immutable undirected graph with Euclidean edge weights.

    ``nodes`` may be a mapping of id -> Node or an iterable of Node. Construction
    fails with ``GraphConstructionError`` if any edge references an id missing
    from ``nodes``, and with ``ValueError`` on duplicate ids or non-finite
    coordinates. The net view is built eagerly and nothing can be reassigned
    afterwards, so a constructed graph can be queried from several threads
    without locking.

    Attributes:
        nodes (Mapping[str, Node]): Read-only mapping from node id -> Node.
        edges (Tuple[Edge, ...]): Undirected edges; order only affects display.
    """

    nodes: Mapping[NodeID, Node]
    edges: Tuple[Edge, ...] = ()
    _net: Net = field(
        default_factory=dict, init=False, repr=False, compare=False, hash=False
    )

    def __post_init__(self) -> None:
        node_map = _index_nodes(self.nodes)
        edges = tuple(self.edges)

        invalid: List[NodeID] = []
        for edge in edges:
            for endpoint in (edge.node_a, edge.node_b):
                if endpoint not in node_map and endpoint not in invalid:
                    invalid.append(endpoint)
        if invalid:
            raise GraphConstructionError(invalid)

        object.__setattr__(self, "nodes", MappingProxyType(node_map))
        object.__setattr__(self, "edges", edges)
        object.__setattr__(self, "_net", self._build_net())
        LOGGER.debug(
            "Built graph with %d nodes and %d edges", len(self.nodes), len(self.edges)
        )

    @classmethod
    def from_nodes(cls, nodes: Iterable[Node], edges: Iterable[Edge] = ()) -> Graph:
        """Create a graph from an iterable of nodes keyed by their ids.

        Raises:
            ValueError: If two nodes share an id.
            GraphConstructionError: If an edge references an unknown id.
        """
        return cls(list(nodes), tuple(edges))

    def _build_net(self) -> Net:
        net: Dict[NodeID, Dict[NodeID, Cost]] = {node_id: {} for node_id in self.nodes}
        for edge in self.edges:
            dist = self.nodes[edge.node_a].distance_to(self.nodes[edge.node_b])
            net[edge.node_a][edge.node_b] = dist
            net[edge.node_b][edge.node_a] = dist
        return MappingProxyType(
            {nid: MappingProxyType(nbrs) for nid, nbrs in net.items()}
        )

    @property
    def net(self) -> Net:
        """Read-only adjacency view: node id -> (neighbor id -> distance)."""
        return self._net

    def neighbors(self, node_id: NodeID) -> Mapping[NodeID, Cost]:
        """Return the neighbors of ``node_id`` with their distances.

        Raises:
            KeyError: If ``node_id`` is not in the graph.
        """
        return self._net[node_id]

    def distance_between(self, a: NodeID, b: NodeID) -> Cost:
        """Return the straight-line distance between two nodes of this graph."""
        return self.nodes[a].distance_to(self.nodes[b])

    def without_edges(self, pairs: Iterable[Tuple[NodeID, NodeID]]) -> Graph:
        """Return a new graph with the given unordered edges removed.

        Args:
            pairs: ``(a, b)`` id pairs; an edge is dropped if it connects any pair.

        Returns:
            A new Graph sharing this graph's nodes.
        """
        drop = list(pairs)
        kept = [
            edge
            for edge in self.edges
            if not any(edge.connects(a, b) for a, b in drop)
        ]
        return Graph(self.nodes, tuple(kept))

    def __contains__(self, node_id: object) -> bool:
        return node_id in self.nodes

    def __str__(self) -> str:
        lines = ["nodes: "]
        lines.extend(str(node) for node in self.nodes.values())
        lines.append("edges: ")
        lines.extend(str(edge) for edge in self.edges)
        return "\n".join(lines)
