"""K shortest paths with Yen's algorithm."""

from __future__ import annotations

import heapq
from collections.abc import Callable, Hashable, Iterable, Sequence
from itertools import count
from typing import Any, TypeVar

N = TypeVar("N", bound=Hashable)


def _dijkstra(
    start: N,
    successors: Callable[[N], Iterable[tuple[N, Any]]],
    success: Callable[[N], bool],
) -> tuple[list[N], Any] | None:
    """Shortest path from ``start`` to a node accepted by ``success``."""
    best: dict[N, Any] = {start: 0}
    parents: dict[N, N | None] = {start: None}
    done: set[N] = set()
    tie = count()
    heap: list[tuple[Any, int, N]] = [(0, next(tie), start)]
    while heap:
        cost, _, node = heapq.heappop(heap)
        if node in done:
            continue
        done.add(node)
        if success(node):
            path = [node]
            while (parent := parents[path[-1]]) is not None:
                path.append(parent)
            path.reverse()
            return path, cost
        for succ, step in successors(node):
            new_cost = cost + step
            if succ not in done and (succ not in best or new_cost < best[succ]):
                best[succ] = new_cost
                parents[succ] = node
                heapq.heappush(heap, (new_cost, next(tie), succ))
    return None


def _path_cost(
    nodes: Sequence[N], successors: Callable[[N], Iterable[tuple[N, Any]]]
) -> Any:
    cost: Any = 0
    for a, b in zip(nodes, nodes[1:]):
        for n, c in successors(a):
            if n == b:
                cost = cost + c
    return cost


def yen(
    start: N,
    successors: Callable[[N], Iterable[tuple[N, Any]]],
    success: Callable[[N], bool],
    k: int,
) -> list[tuple[list[N], Any]]:
    """Find up to ``k`` shortest paths from ``start`` to nodes accepted by
    ``success``.

    ``successors`` yields ``(node, cost)`` pairs with positive costs. Paths,
    start and end nodes included, come with their costs, cheapest first.
    """
    if k < 1:
        raise ValueError("k must be at least 1")
    first = _dijkstra(start, successors, success)
    if first is None:
        return []

    routes: list[tuple[list[N], Any]] = [first]
    visited: set[tuple[N, ...]] = set()
    tie = count()
    candidates: list[tuple[Any, int, int, list[N]]] = []

    for ki in range(k - 1):
        if len(routes) <= ki or len(routes) == k:
            break
        previous = routes[ki][0]
        for i, spur_node in enumerate(previous[:-1]):
            root_path = previous[:i]
            filtered_edges = {
                (nodes[i], nodes[i + 1])
                for nodes, _ in routes
                if len(nodes) > i + 1
                and nodes[:i] == root_path
                and nodes[i] == spur_node
            }
            filtered_nodes = set(root_path)

            def filtered_successors(
                n: N,
                filtered_nodes: set[N] = filtered_nodes,
                filtered_edges: set[tuple[N, N]] = filtered_edges,
            ) -> list[tuple[N, Any]]:
                return [
                    (n2, c)
                    for n2, c in successors(n)
                    if n2 not in filtered_nodes and (n, n2) not in filtered_edges
                ]

            spur = _dijkstra(spur_node, filtered_successors, success)
            if spur is None:
                continue
            nodes = root_path + spur[0]
            key = tuple(nodes)
            if key in visited:
                continue
            visited.add(key)
            cost = _path_cost(nodes, successors)
            heapq.heappush(candidates, (cost, len(nodes), next(tie), nodes))

        if candidates:
            cost, _, _, nodes = heapq.heappop(candidates)
            routes.append((nodes, cost))
            # Equal-cost candidates cannot be beaten, so take them right away.
            while len(routes) < k and candidates and candidates[0][0] == cost:
                _, _, _, nodes = heapq.heappop(candidates)
                routes.append((nodes, cost))

    routes.sort(key=lambda route: (route[1], len(route[0])))
    return routes