import math

import pytest

from routegraph.config import PolygonConfig
from routegraph.generate import is_edge, polygon_graph, spike_nodes
from routegraph.model.graph import Edge


@pytest.mark.parametrize("n", range(3, 41))
def test_polygon_ring_structure(n):
    g = polygon_graph(n, 100.0, spikes=False)
    assert len(g.nodes) == n
    assert len(g.edges) == n
    for nid, nbrs in g.net.items():
        index = int(nid)
        prev = n - 1 if index == 0 else index - 1
        nxt = 0 if index + 1 >= n else index + 1
        assert set(nbrs) == {str(prev), str(nxt)}


def test_node_positions_on_circle():
    g = polygon_graph(4, 100.0)
    assert g.nodes["0"].x == pytest.approx(200.0)
    assert g.nodes["0"].y == pytest.approx(100.0)
    assert g.nodes["1"].x == pytest.approx(100.0)
    assert g.nodes["1"].y == pytest.approx(200.0)
    assert g.nodes["2"].x == pytest.approx(0.0)


def test_last_node_is_pushed_outward():
    g = polygon_graph(4, 100.0)
    last = g.nodes["3"]
    center_dist = math.hypot(last.x - 100.0, last.y - 100.0)
    assert center_dist == pytest.approx(105.0)
    first = g.nodes["0"]
    assert math.hypot(first.x - 100.0, first.y - 100.0) == pytest.approx(100.0)


def test_closing_offset_configurable():
    cfg = PolygonConfig(closing_offset_ratio=0.0)
    g = polygon_graph(4, 100.0, config=cfg)
    last = g.nodes["3"]
    assert math.hypot(last.x - 100.0, last.y - 100.0) == pytest.approx(100.0)


def test_radius_defaults_to_config():
    g = polygon_graph(4, config=PolygonConfig(radius=10.0))
    assert g.nodes["0"].x == pytest.approx(20.0)


@pytest.mark.parametrize("n", [3, 6, 10])
def test_spikes(n):
    g = polygon_graph(n, 100.0, spikes=True)
    assert len(g.nodes) == 3 * n
    assert len(g.edges) == 3 * n
    for i in range(n):
        key = str(i)
        assert dict(g.net[f"{key}a"]).keys() == {key}
        assert dict(g.net[f"{key}b"]).keys() == {key}
        assert f"{key}b" not in g.net[f"{key}a"]
        assert {f"{key}a", f"{key}b"} <= set(g.net[key])


def test_spike_nodes_geometry():
    na, nb = spike_nodes("7", 0.0, 50.0, 60.0, 12.0)
    assert (na.id, nb.id) == ("7a", "7b")
    # theta=0: dx = 12 + 12, dy = 12 + 0
    assert (na.x, na.y) == pytest.approx((74.0, 72.0))
    assert (nb.x, nb.y) == pytest.approx((26.0, 48.0))


def test_single_side_is_self_loop():
    g = polygon_graph(1)
    assert list(g.nodes) == ["0"]
    assert g.edges == (Edge("0", "0"),)
    assert dict(g.net["0"]) == {"0": 0.0}


@pytest.mark.parametrize("sides", [0, -3])
def test_invalid_sides(sides):
    with pytest.raises(ValueError, match="at least one side"):
        polygon_graph(sides)


def test_is_edge():
    edge = Edge("0", "4")
    assert is_edge(edge, "0", "4")
    assert is_edge(edge, "4", "0")
    assert not is_edge(edge, "0", "3")
