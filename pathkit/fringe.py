"""Shortest path search with the Fringe search algorithm."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Hashable, Iterable
from typing import Any, TypeVar

N = TypeVar("N", bound=Hashable)


def _reverse_path(nodes: list[N], parents: list[int | None], start: int) -> list[N]:
    """Follow parent indices from ``start`` back to the root, root first."""
    path: list[N] = []
    index: int | None = start
    while index is not None:
        path.append(nodes[index])
        index = parents[index]
    path.reverse()
    return path


def _remove(queue: deque[int], item: int) -> bool:
    try:
        queue.remove(item)
    except ValueError:
        return False
    return True


def fringe(
    start: N,
    successors: Callable[[N], Iterable[tuple[N, Any]]],
    heuristic: Callable[[N], Any],
    success: Callable[[N], bool],
) -> tuple[list[N], Any] | None:
    """Find a shortest path from ``start`` to a node accepted by ``success``.

    ``successors`` yields ``(node, cost)`` pairs with non-negative costs and
    ``heuristic`` must never overestimate the remaining cost. Return the path,
    start and end nodes included, with its total cost, or None if no path
    exists.
    """
    nodes: list[N] = [start]
    index: dict[N, int] = {start: 0}
    parents: list[int | None] = [None]
    costs: list[Any] = [0]

    now: deque[int] = deque([0])
    later: deque[int] = deque()
    flimit = heuristic(start)

    while now:
        fmin = None
        while now:
            i = now.popleft()
            node = nodes[i]
            g = costs[i]
            f = g + heuristic(node)
            if f > flimit:
                if fmin is None or f < fmin:
                    fmin = f
                later.append(i)
                continue
            if success(node):
                return _reverse_path(nodes, parents, i), g
            for successor, cost in successors(node):
                g_successor = g + cost
                n = index.get(successor)
                if n is None:
                    n = len(nodes)
                    nodes.append(successor)
                    index[successor] = n
                    parents.append(i)
                    costs.append(g_successor)
                elif costs[n] > g_successor:
                    parents[n] = i
                    costs[n] = g_successor
                else:
                    continue
                if not _remove(later, n):
                    _remove(now, n)
                now.appendleft(n)
        now, later = later, now
        flimit = fmin
    return None