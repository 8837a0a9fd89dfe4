"""Shortest path search with the IDA* algorithm."""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterable
from typing import Any, TypeVar

N = TypeVar("N", bound=Hashable)


class _Found(Exception):
    def __init__(self, path: list, cost: Any) -> None:
        super().__init__()
        self.path = path
        self.cost = cost


def idastar(
    start: N,
    successors: Callable[[N], Iterable[tuple[N, Any]]],
    heuristic: Callable[[N], Any],
    success: Callable[[N], bool],
) -> tuple[list[N], Any] | None:
    """Find a shortest path from ``start`` to a node accepted by ``success``.

    ``successors`` yields ``(node, cost)`` pairs with non-negative costs and
    ``heuristic`` must never overestimate the remaining cost. Return the path,
    start and end nodes included, with its total cost, or None if no path
    exists. A node never appears twice in the path.
    """
    path: list[N] = [start]
    on_path: set[N] = {start}

    def search(cost: Any, bound: Any) -> Any:
        current = path[-1]
        f = cost + heuristic(current)
        if f > bound:
            return f
        if success(current):
            raise _Found(list(path), f)
        neighbours = [
            (n, c, c + heuristic(n))
            for n, c in successors(current)
            if n not in on_path
        ]
        neighbours.sort(key=lambda item: item[2])
        smallest = None
        for node, extra, _ in neighbours:
            if node in on_path:
                continue
            path.append(node)
            on_path.add(node)
            try:
                m = search(cost + extra, bound)
            finally:
                path.pop()
                on_path.discard(node)
            if m is not None and (smallest is None or smallest >= m):
                smallest = m
        return smallest

    bound = heuristic(start)
    while True:
        try:
            next_bound = search(0, bound)
        except _Found as found:
            return found.path, found.cost
        if next_bound is None:
            return None
        bound = next_bound