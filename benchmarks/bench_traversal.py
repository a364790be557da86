"""Benchmark graph parsing and traversal."""

import time
from typing import Dict

import numpy as np

from nodesandedges import BreadthFirstPaths, DepthFirstSearch, EdgeWeightedGraph, Graph


def _random_graph_text(n_vertices: int, n_edges: int, seed: int = 0) -> str:
    rng = np.random.default_rng(seed)
    endpoints = rng.integers(n_vertices, size=(n_edges, 2))
    lines = [str(n_vertices), str(n_edges)]
    lines.extend(f"{v} {w}" for v, w in endpoints)
    return "\n".join(lines) + "\n"


def benchmark_parse(n_vertices: int, n_edges: int) -> Dict[str, float]:
    """Benchmark reading an undirected graph from the text format.

    Args:
        n_vertices: Number of vertices.
        n_edges: Number of edges.

    Returns:
        Dictionary with timing results.
    """
    text = _random_graph_text(n_vertices, n_edges)

    start = time.perf_counter()
    Graph.from_string(text)
    end = time.perf_counter()

    total_time = end - start
    return {
        "n_vertices": n_vertices,
        "n_edges": n_edges,
        "total_time_sec": total_time,
        "edges_per_sec": n_edges / total_time,
    }


def benchmark_search(n_vertices: int, n_edges: int, repeats: int = 10) -> Dict[str, float]:
    """Benchmark BreadthFirstPaths and DepthFirstSearch from vertex 0.

    Args:
        n_vertices: Number of vertices.
        n_edges: Number of edges.
        repeats: Number of searches of each kind to time.

    Returns:
        Dictionary with timing results.
    """
    graph = EdgeWeightedGraph.from_random(n_vertices, n_edges, rng=0)

    # Warmup
    BreadthFirstPaths(graph, 0)
    DepthFirstSearch(graph, 0)

    start = time.perf_counter()
    for _ in range(repeats):
        BreadthFirstPaths(graph, 0)
    bfs_time = (time.perf_counter() - start) / repeats

    start = time.perf_counter()
    for _ in range(repeats):
        DepthFirstSearch(graph, 0)
    dfs_time = (time.perf_counter() - start) / repeats

    return {
        "n_vertices": n_vertices,
        "n_edges": n_edges,
        "bfs_time_sec": bfs_time,
        "dfs_time_sec": dfs_time,
    }


if __name__ == "__main__":
    print("Benchmarking parsing...")
    results = benchmark_parse(n_vertices=10_000, n_edges=100_000)
    print("Parse (10k vertices, 100k edges):")
    print(f"  Total time: {results['total_time_sec']*1e3:.1f} ms")
    print(f"  Edges per second: {results['edges_per_sec']:.0f}")

    print("Benchmarking search...")
    results = benchmark_search(n_vertices=10_000, n_edges=50_000)
    print("Search (10k vertices, 50k edges):")
    print(f"  BFS: {results['bfs_time_sec']*1e3:.1f} ms")
    print(f"  DFS: {results['dfs_time_sec']*1e3:.1f} ms")
