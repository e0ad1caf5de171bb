"""Result types returned by shortest-path queries.

A query yields exactly one of ``Found``, ``NotFound``, ``InvalidEndpoints`` or
``InternalError``. Every variant is an immutable dataclass with a class-level
``status`` tag, so callers may branch on ``result.status`` or use ``match``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Tuple, Union

from routegraph.types.base import Cost, NodeID, RouteStatus


@dataclass(frozen=True)
class Found:
    """A shortest route and its total traversed distance.

    Attributes:
        route: Node ids from source to target, both included.
        distance: Sum of edge lengths along ``route``.
    """

    status: ClassVar[RouteStatus] = RouteStatus.FOUND

    route: Tuple[NodeID, ...]
    distance: Cost

    @property
    def source(self) -> NodeID:
        """Return the first node of the route."""
        return self.route[0]

    @property
    def target(self) -> NodeID:
        """Return the last node of the route."""
        return self.route[-1]

    def describe(self, separator: str = " -> ") -> str:
        """Return the route as a single arrow-joined string."""
        return separator.join(self.route)


@dataclass(frozen=True)
class NotFound:
    """Both endpoints exist but no route connects them."""

    status: ClassVar[RouteStatus] = RouteStatus.NOT_FOUND

    source: NodeID
    target: NodeID


@dataclass(frozen=True)
class InvalidEndpoints:
    """Source and/or target is not a node of the graph.

    Attributes:
        source: Requested source id.
        target: Requested target id.
        missing: The requested ids that are absent, in (source, target) order.
    """

    status: ClassVar[RouteStatus] = RouteStatus.INVALID_ENDPOINTS

    source: NodeID
    target: NodeID
    missing: Tuple[NodeID, ...]


@dataclass(frozen=True)
class InternalError:
    """The engine failed while computing a route."""

    status: ClassVar[RouteStatus] = RouteStatus.INTERNAL_ERROR

    message: str


PathResult = Union[Found, NotFound, InvalidEndpoints, InternalError]
