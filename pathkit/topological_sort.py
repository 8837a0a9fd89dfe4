"""Topological ordering of directed graphs."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Hashable, Iterable
from typing import Any, TypeVar

N = TypeVar("N", bound=Hashable)


class CycleError(ValueError):
    """A cycle prevents a topological order; ``node`` lies on a cycle."""

    def __init__(self, node: Any) -> None:
        super().__init__(f"cycle detected involving {node!r}")
        self.node = node


class CyclicGroupsError(ValueError):
    """Cycles prevent grouping; holds the groups found so far and the nodes
    that could not be grouped."""

    def __init__(self, groups: list[list[Any]], remaining: list[Any]) -> None:
        super().__init__(f"{len(remaining)} nodes are involved in cycles")
        self.groups = groups
        self.remaining = remaining


def topological_sort(
    roots: Iterable[N], successors: Callable[[N], Iterable[N]]
) -> list[N]:
    """Return a topological order of the roots and the nodes reachable from
    them. Raise CycleError, naming a node on a cycle, if there is none."""
    marked: set[N] = set()
    unmarked: dict[N, None] = dict.fromkeys(roots)
    ordered: deque[N] = deque()

    def visit(node: N, temp: set[N]) -> None:
        unmarked.pop(node, None)
        if node in marked:
            return
        if node in temp:
            raise CycleError(node)
        temp.add(node)
        for n in successors(node):
            visit(n, temp)
        marked.add(node)
        ordered.appendleft(node)

    while unmarked:
        visit(next(iter(unmarked)), set())
    return list(ordered)


def topological_sort_into_groups(
    nodes: Iterable[N], successors: Callable[[N], Iterable[N]]
) -> list[list[N]]:
    """Partition the nodes into groups of independent nodes.

    The first group holds nodes without predecessors, each later group the
    nodes whose predecessors all lie in earlier groups. ``nodes`` must be
    exhaustive. Raise CyclicGroupsError if cycles prevent a full grouping.
    """
    nodes = list(nodes)
    if not nodes:
        return []
    succs_map: dict[N, dict[N, None]] = {}
    preds_map: dict[N, int] = {}
    for node in nodes:
        succs_map[node] = dict.fromkeys(successors(node))
        preds_map[node] = 0
    for succs in succs_map.values():
        for succ in succs:
            if succ not in preds_map:
                raise ValueError(f"successor {succ!r} is not among the nodes")
            preds_map[succ] += 1
    prev_group = [node for node, count in preds_map.items() if count == 0]
    if not prev_group:
        raise CyclicGroupsError([], list(preds_map))
    for node in prev_group:
        del preds_map[node]
    groups: list[list[N]] = []
    while preds_map:
        next_group: list[N] = []
        for node in prev_group:
            for succ in succs_map[node]:
                preds_map[succ] -= 1
                if preds_map[succ] > 0:
                    continue
                del preds_map[succ]
                next_group.append(succ)
        groups.append(prev_group)
        prev_group = next_group
        if not prev_group:
            raise CyclicGroupsError(groups, list(preds_map))
    groups.append(prev_group)
    return groups