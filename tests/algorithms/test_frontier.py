from types import MappingProxyType

from routegraph.algorithms.frontier import (
    _Frontier,
    shortest_path_graph,
    shortest_path_net,
)
from routegraph.types.dto import Found, InternalError, InvalidEndpoints, NotFound


class TestFrontier:
    def test_pops_in_distance_order(self):
        f = _Frontier()
        f.push(3.0, "c", "a")
        f.push(1.0, "b", "a")
        f.push(2.0, "d", "b")
        assert f.pop_min() == (1.0, "b", "a")
        assert f.pop_min() == (2.0, "d", "b")
        assert f.pop_min() == (3.0, "c", "a")
        assert not f

    def test_ties_pop_smallest_entry_first(self):
        f = _Frontier()
        f.push(1.0, "z", "a")
        f.push(1.0, "m", "a")
        f.push(0.0, "a", None)
        assert f.pop_min() == (0.0, "a", None)
        assert f.pop_min() == (1.0, "m", "a")
        assert f.pop_min() == (1.0, "z", "a")

    def test_discard_moves_entry(self):
        f = _Frontier()
        f.push(5.0, "x", "a")
        f.discard(5.0, "x", "a")
        f.push(2.0, "x", "b")
        assert f.pop_min() == (2.0, "x", "b")
        assert not f

    def test_discard_unknown_is_noop(self):
        f = _Frontier()
        f.discard(1.0, "x", None)
        assert not f


class TestShortestPathNet:
    def test_invalid_endpoints(self, tri_graph):
        net = tri_graph.net
        assert shortest_path_net(net, "a", "zzz") == InvalidEndpoints(
            "a", "zzz", ("zzz",)
        )
        assert shortest_path_net(net, "zzz", "a") == InvalidEndpoints(
            "zzz", "a", ("zzz",)
        )
        result = shortest_path_net(net, "yyy", "zzz")
        assert isinstance(result, InvalidEndpoints)
        assert result.missing == ("yyy", "zzz")

    def test_source_equals_target(self, poly10_graph):
        assert shortest_path_net(poly10_graph.net, "0", "0") == Found(("0",), 0.0)

    def test_triangle(self, tri_graph):
        assert shortest_path_net(tri_graph.net, "a", "c") == Found(("a", "c"), 100.0)

    def test_poly10_routes(self, poly10_graph):
        net = poly10_graph.net
        r4 = shortest_path_net(net, "0", "4")
        r6 = shortest_path_net(net, "0", "6")
        assert isinstance(r4, Found) and isinstance(r6, Found)
        assert r4.route == ("0", "1", "2", "3", "4")
        assert r6.route == ("0", "9", "8", "7", "6")

    def test_disjoint5(self, disjoint5_graph):
        net = disjoint5_graph.net
        result = shortest_path_net(net, "0", "2")
        assert isinstance(result, Found)
        assert result.route == ("0", "1", "2")
        assert shortest_path_net(net, "0", "3") == NotFound("0", "3")

    def test_plain_dict_net(self):
        net = {
            "a": {"b": 1.0, "c": 5.0},
            "b": {"a": 1.0, "c": 1.0},
            "c": {"a": 5.0, "b": 1.0},
        }
        assert shortest_path_net(net, "a", "c") == Found(("a", "b", "c"), 2.0)

    def test_graph_wrapper(self, disjoint5_graph):
        assert shortest_path_graph(disjoint5_graph, "0", "2") == shortest_path_net(
            disjoint5_graph.net, "0", "2"
        )

    def test_malformed_net_is_internal_error(self):
        # "b" is listed as a neighbor but has no entry of its own
        net = MappingProxyType({"a": {"b": 1.0}, "c": {}})
        result = shortest_path_net(net, "a", "c")
        assert isinstance(result, InternalError)
        assert "KeyError" in result.message

    def test_large_ring_does_not_recurse(self):
        n = 3000
        net = {
            str(i): {str((i - 1) % n): 1.0, str((i + 1) % n): 1.0} for i in range(n)
        }
        result = shortest_path_net(net, "0", str(n // 2 - 1))
        assert isinstance(result, Found)
        assert len(result.route) == n // 2
