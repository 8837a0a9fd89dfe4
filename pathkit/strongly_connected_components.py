"""Separate the nodes of a directed graph into strongly connected components.

A path-based strong component algorithm is used.
"""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterable
from typing import Generic, TypeVar

N = TypeVar("N", bound=Hashable)


class _PathBased(Generic[N]):
    """State of one run of the path-based strong component algorithm."""

    def __init__(
        self, nodes: Iterable[N], successors: Callable[[N], Iterable[N]]
    ) -> None:
        self.preorders: dict[N, int | None] = dict.fromkeys(nodes)
        self.counter = 0
        self.successors = successors
        self.path: list[N] = []
        self.stack: list[N] = []
        self.components: list[list[N]] = []
        self.assigned: set[N] = set()

    def visit(self, v: N) -> None:
        self.preorders[v] = self.counter
        self.counter += 1
        self.stack.append(v)
        self.path.append(v)
        for w in self.successors(v):
            if w in self.assigned:
                continue
            pw = self.preorders.get(w)
            if pw is not None:
                while self.preorders[self.path[-1]] > pw:
                    self.path.pop()
            else:
                self.visit(w)
        if self.path[-1] == v:
            self.path.pop()
            component: list[N] = []
            while self.stack:
                node = self.stack.pop()
                component.append(node)
                self.assigned.add(node)
                self.preorders.pop(node, None)
                if node == v:
                    break
            self.components.append(component)


def strongly_connected_components_from(
    start: N, successors: Callable[[N], Iterable[N]]
) -> list[list[N]]:
    """Partition the nodes reachable from ``start`` into strongly connected
    components. The component holding ``start`` comes last."""
    state = _PathBased((), successors)
    state.visit(start)
    return state.components


def strongly_connected_component(
    node: N, successors: Callable[[N], Iterable[N]]
) -> list[N]:
    """Return the strongly connected component holding ``node``."""
    return strongly_connected_components_from(node, successors)[-1]


def strongly_connected_components(
    nodes: Iterable[N], successors: Callable[[N], Iterable[N]]
) -> list[list[N]]:
    """Partition all the given nodes, and those reachable from them, into
    strongly connected components."""
    state = _PathBased(nodes, successors)
    while state.preorders:
        state.visit(next(iter(state.preorders)))
    return state.components