"""Graph model package.

Defines the immutable ``Node`` and ``Edge`` value types and the validated
``Graph`` container with its derived neighbor-distance view.
"""

from routegraph.model.graph import (
    Edge,
    Graph,
    GraphConstructionError,
    Net,
    Node,
)

__all__ = [
    "Graph",
    "Node",
    "Edge",
    "Net",
    "GraphConstructionError",
]
