"""Shortest path search with iterative deepening depth-first search."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from enum import Enum, auto
from typing import TypeVar

N = TypeVar("N")


class _Outcome(Enum):
    FOUND = auto()
    IMPOSSIBLE = auto()
    NONE_AT_THIS_DEPTH = auto()


def iddfs(
    start: N,
    successors: Callable[[N], Iterable[N]],
    success: Callable[[N], bool],
) -> list[N] | None:
    """Find a shortest path from ``start`` to a node accepted by ``success``.

    Return the path, start and end nodes included, or None if no path exists.
    A node never appears twice in the path.
    """
    path: list[N] = [start]

    def step(depth: int) -> _Outcome:
        if depth == 0:
            return _Outcome.NONE_AT_THIS_DEPTH
        if success(path[-1]):
            return _Outcome.FOUND
        best = _Outcome.IMPOSSIBLE
        for n in successors(path[-1]):
            if n in path:
                continue
            path.append(n)
            outcome = step(depth - 1)
            if outcome is _Outcome.FOUND:
                return outcome
            if outcome is _Outcome.NONE_AT_THIS_DEPTH:
                best = outcome
            path.pop()
        return best

    max_depth = 1
    while True:
        outcome = step(max_depth)
        if outcome is _Outcome.FOUND:
            return path
        if outcome is _Outcome.IMPOSSIBLE:
            return None
        max_depth += 1