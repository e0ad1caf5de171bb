"""Route post-processing helpers shared by the shortest-path variants."""

from __future__ import annotations

from typing import List, Mapping, Optional, Sequence, Set, Union

from routegraph.model.graph import Graph, Net
from routegraph.types.base import INFINITE, Cost, NodeID


def traversed_distance(graph: Union[Graph, Net], route: Sequence[NodeID]) -> Cost:
    """Return the distance travelled along ``route``.

    Sums the net distances between consecutive ids; the first id contributes
    zero, so an empty or single-node route has distance 0.0.

    Args:
        graph: A Graph, or a net mapping (node id -> neighbor id -> distance).
        route: Ordered node ids.

    Returns:
        Total distance along the route.

    Raises:
        ValueError: If two consecutive ids are not connected.
    """
    net: Net = graph.net if isinstance(graph, Graph) else graph
    total = 0.0
    for prev, nid in zip(route, route[1:]):
        try:
            total += net[nid][prev]
        except KeyError:
            raise ValueError(
                f"Route is not a path: '{prev}' and '{nid}' are not connected."
            ) from None
    return total


def reconstruct_route(
    previous: Mapping[NodeID, Optional[NodeID]], source: NodeID, target: NodeID
) -> List[NodeID]:
    """Walk predecessors back from ``target`` to ``source``.

    Args:
        previous: Predecessor of each reached node (None or absent if unreached).
        source: Route origin.
        target: Route destination.

    Returns:
        The route from source to target, or an empty list if the predecessor
        chain from ``target`` does not lead to ``source``.

    Raises:
        ValueError: If the predecessor chain loops.
    """
    route: List[NodeID] = []
    seen: Set[NodeID] = set()
    location = target
    while previous.get(location) is not None:
        if location in seen:
            raise ValueError(f"Predecessor cycle through '{location}'.")
        seen.add(location)
        location = previous[location]  # type: ignore[assignment]
        route.append(location)
    if not route or route[-1] != source:
        return []
    route.reverse()
    route.append(target)
    return route


def checked_weight(node: NodeID, neighbor: NodeID, weight: Cost) -> Cost:
    """Return ``weight`` if it is a usable edge length.

    Raises:
        ValueError: If the weight is negative, NaN or infinite.
    """
    if not 0.0 <= weight < INFINITE:
        raise ValueError(
            f"Invalid distance {weight!r} between '{node}' and '{neighbor}'."
        )
    return weight
