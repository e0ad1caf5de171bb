"""Global pytest configuration and shared graph fixtures.

Fixtures mirror the graphs used throughout the test-suite: a right triangle,
regular polygons with and without spike nodes, and a five-sided polygon split
into two disconnected arcs.
"""

from __future__ import annotations

import pytest

from routegraph.generate import polygon_graph
from routegraph.logging import reset_logging
from routegraph.model.graph import Edge, Graph, Node


@pytest.fixture
def tri_nodes():
    #   b (100,100)
    #   |  \
    #   |    \
    #   c ---- a      a=(0,0), c=(100,0)
    return {
        "a": Node("a", 0.0, 0.0),
        "b": Node("b", 100.0, 100.0),
        "c": Node("c", 100.0, 0.0),
    }


@pytest.fixture
def tri_edges():
    return [Edge("a", "b"), Edge("b", "c"), Edge("c", "a")]


@pytest.fixture
def tri_graph(tri_nodes, tri_edges):
    return Graph(tri_nodes, tri_edges)


@pytest.fixture
def poly5_graph():
    return polygon_graph(5, 100.0, spikes=False)


@pytest.fixture
def disjoint5_graph(poly5_graph):
    # Ring 0-1-2-3-4-0 without 0-4 and 2-3: arcs {0,1,2} and {3,4}
    return poly5_graph.without_edges([("0", "4"), ("2", "3")])


@pytest.fixture
def poly10_graph():
    return polygon_graph(10, 100.0, spikes=True)


@pytest.fixture
def clean_logging():
    """Reset package logging before and after a test."""
    reset_logging()
    yield
    reset_logging()
