"""
Utility functions for graph algorithms.

Provides the unreachable sentinel, path reconstruction from parent arrays and
recovery of an edge insertion order from undirected adjacency lists.
"""

import heapq
from collections import defaultdict, deque
from typing import Any, Callable, Deque, Dict, Hashable, List, Sequence, Tuple

# Distance / parent value of a vertex that was not reached
UNREACHABLE = -1


def reconstruct_path(parent: Sequence[int], target: int) -> List[int]:
    """
    Reconstruct the path that ends at ``target`` using a parent array.

    ``parent[v]`` is the previous vertex on the path to ``v``, or UNREACHABLE
    for the root of the search (and for unreached vertices). The caller must
    check that ``target`` was reached: for an unreached vertex the result is
    just ``[target]``.

    Args:
        parent: Parent array from a search (e.g. BFS).
        target: Vertex the path should end at.

    Returns:
        List of vertices from the root to ``target`` (inclusive).

    Raises:
        ValueError: If the parent array contains a cycle.

    Example:
        >>> reconstruct_path([-1, 0, 1], 2)
        [0, 1, 2]
    """
    path = []
    current = target
    while current != UNREACHABLE:
        if len(path) > len(parent):
            raise ValueError("parent array contains a cycle")
        path.append(int(current))
        current = parent[current]

    path.reverse()
    return path


def insertion_order(
    adjacency: Sequence[Sequence[Any]],
    far_end: Callable[[int, Any], int],
    label: Callable[[Any], Hashable] = lambda entry: None,
) -> List[Tuple[int, int, int]]:
    """
    Recover an edge insertion order that reproduces undirected adjacency lists.

    Adding the edge v-w appends one entry to the list of v and one to the list
    of w (two consecutive entries to the same list for a self-loop). This
    function pairs up the entries of ``adjacency`` into edges and orders the
    edges so that adding them one at a time rebuilds every list exactly as
    given.

    The k-th entry of vertex v pointing at w is paired with the k-th entry of
    w pointing at v. A self-loop pairs two consecutive entries of its vertex.

    Args:
        adjacency: One list of entries per vertex.
        far_end: ``far_end(v, entry)`` returns the endpoint of ``entry`` that
            is not ``v`` (or ``v`` for a self-loop).
        label: Extra key two paired entries must share, e.g. the weight.

    Returns:
        One ``(v, i, j)`` triple per edge in insertion order: the edge sits at
        ``adjacency[v][i]`` and at position ``j`` of the other endpoint's list.

    Raises:
        ValueError: If some entry has no partner at the other endpoint, or no
            insertion order produces the lists.

    Example:
        >>> insertion_order([[1], [2, 0], [1]], lambda v, w: w)
        [(1, 0, 0), (0, 0, 1)]
    """
    unmatched: Dict[Hashable, Deque[Tuple[int, int]]] = defaultdict(deque)
    edges: List[Tuple[int, int, int]] = []
    slot_edge: List[List[int]] = [[-1] * len(entries) for entries in adjacency]

    for v, entries in enumerate(adjacency):
        open_loops: Dict[Hashable, int] = {}
        for i, entry in enumerate(entries):
            w = far_end(v, entry)
            key = (min(v, w), max(v, w), label(entry))
            if w == v:
                if key not in open_loops:
                    open_loops[key] = i
                    continue
                first = open_loops.pop(key)
                if first != i - 1:
                    raise ValueError(
                        f"self-loop at vertex {v} must occupy two consecutive entries"
                    )
                slot_edge[v][first] = slot_edge[v][i] = len(edges)
                edges.append((v, first, i))
            elif v < w:
                unmatched[key].append((v, i))
            else:
                if not unmatched[key]:
                    raise ValueError(
                        f"entry {w} of vertex {v} has no matching entry {v} at vertex {w}"
                    )
                u, j = unmatched[key].popleft()
                slot_edge[u][j] = slot_edge[v][i] = len(edges)
                edges.append((u, j, i))
        if open_loops:
            raise ValueError(f"self-loop at vertex {v} is listed only once")

    for (low, high, _), pending in unmatched.items():
        if pending:
            raise ValueError(
                f"entry {high} of vertex {low} has no matching entry {low} at vertex {high}"
            )

    # each list fixes the relative order of the edges it holds
    successors: List[List[int]] = [[] for _ in edges]
    indegree = [0] * len(edges)
    for ids in slot_edge:
        for before, after in zip(ids, ids[1:]):
            if before != after:
                successors[before].append(after)
                indegree[after] += 1

    ready = [k for k in range(len(edges)) if indegree[k] == 0]
    heapq.heapify(ready)
    order: List[Tuple[int, int, int]] = []
    while ready:
        k = heapq.heappop(ready)
        order.append(edges[k])
        for nxt in successors[k]:
            indegree[nxt] -= 1
            if indegree[nxt] == 0:
                heapq.heappush(ready, nxt)

    if len(order) != len(edges):
        raise ValueError("no order of edge insertions produces these adjacency lists")
    return order
