import pytest

from routegraph.algorithms.paths import reconstruct_route, traversed_distance


class TestTraversedDistance:
    def test_empty_and_single(self, tri_graph):
        assert traversed_distance(tri_graph, []) == 0.0
        assert traversed_distance(tri_graph, ["a"]) == 0.0

    def test_sums_consecutive_pairs(self, tri_graph):
        assert traversed_distance(tri_graph, ["b", "c", "a"]) == 200.0
        assert traversed_distance(tri_graph, ("a", "c")) == 100.0

    def test_accepts_net_mapping(self, tri_graph):
        assert traversed_distance(tri_graph.net, ["a", "c", "b"]) == 200.0

    def test_not_a_path(self, disjoint5_graph):
        with pytest.raises(ValueError, match="'2' and '3' are not connected"):
            traversed_distance(disjoint5_graph, ["1", "2", "3"])


class TestReconstructRoute:
    def test_walks_back_to_source(self):
        previous = {"a": None, "b": "a", "c": "b", "d": None}
        assert reconstruct_route(previous, "a", "c") == ["a", "b", "c"]

    def test_unreached_target(self):
        previous = {"a": None, "b": "a", "d": None}
        assert reconstruct_route(previous, "a", "d") == []
        assert reconstruct_route(previous, "a", "missing") == []

    def test_chain_not_ending_at_source(self):
        previous = {"x": None, "y": "x"}
        assert reconstruct_route(previous, "a", "y") == []

    def test_cycle_raises(self):
        previous = {"a": "b", "b": "a"}
        with pytest.raises(ValueError, match="cycle"):
            reconstruct_route(previous, "s", "a")
