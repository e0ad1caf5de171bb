"""Queries sharing one Graph from several threads."""

from concurrent.futures import ThreadPoolExecutor

from routegraph.algorithms import solve
from routegraph.generate import polygon_graph
from routegraph.types.base import Algorithm


def test_threaded_queries_match_sequential_runs():
    g = polygon_graph(31, 100.0, spikes=True)
    queries = [
        (src, tgt, algorithm)
        for src in ("0", "7a", "15b")
        for tgt in ("3", "16", "29b", "30a")
        for algorithm in Algorithm
    ]
    expected = [solve(g, src, tgt, algorithm) for src, tgt, algorithm in queries]

    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(
            pool.map(lambda q: solve(g, q[0], q[1], q[2]), queries * 4)
        )

    assert results == expected * 4
