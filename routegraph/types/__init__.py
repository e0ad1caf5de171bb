"""Shared typing constructs for routegraph.

This package defines the node and cost aliases, enums, and the tagged result
types returned by shortest-path queries. It contains no algorithm logic.
"""

from routegraph.types.base import INFINITE, Algorithm, Cost, NodeID, RouteStatus
from routegraph.types.dto import (
    Found,
    InternalError,
    InvalidEndpoints,
    NotFound,
    PathResult,
)

__all__ = [
    "INFINITE",
    "Algorithm",
    "Cost",
    "NodeID",
    "RouteStatus",
    "Found",
    "InternalError",
    "InvalidEndpoints",
    "NotFound",
    "PathResult",
]
