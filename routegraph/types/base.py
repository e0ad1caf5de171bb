"""Base aliases and enums for shortest-path computations."""

from __future__ import annotations

import math
from enum import IntEnum
from typing import Union

#: Node identifier used by graphs, edges and all algorithm state.
NodeID = str

#: Represents numeric cost in the graph (Euclidean distance between nodes).
Cost = Union[int, float]

#: Tentative distance of a node not yet reached by relaxation.
INFINITE: float = math.inf


class RouteStatus(IntEnum):
    """Outcome tag of a shortest-path query."""

    #: A route exists; the result carries it with its distance.
    FOUND = 1
    #: Both endpoints exist but are not connected.
    NOT_FOUND = 2
    #: Source and/or target id is not a node of the graph.
    INVALID_ENDPOINTS = 3
    #: The engine hit an inconsistency while computing the route.
    INTERNAL_ERROR = 4


class Algorithm(IntEnum):
    """Shortest-path implementation selector."""

    ITERATIVE = 1
    FRONTIER = 2

    @classmethod
    def from_string(cls, value: str) -> "Algorithm":
        """Parse a string into an Algorithm enum value.

        Args:
            value: Case-insensitive string name (e.g., "iterative", "FRONTIER").

        Returns:
            The corresponding Algorithm enum member.

        Raises:
            ValueError: If the string doesn't match any enum member.
        """
        try:
            return cls[value.upper()]
        except KeyError:
            valid = ", ".join(e.name.lower() for e in cls)
            raise ValueError(
                f"Invalid algorithm '{value}'. Valid values are: {valid}"
            ) from None
