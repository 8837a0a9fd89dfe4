"""Maximum flow and minimum cut of a directed graph with the Edmonds-Karp
algorithm.

Besides the one-shot helper functions, the capacity structures can be
modified after a flow has been computed; recomputing the flow then reuses
the work already done on unchanged or augmented edges.
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from collections import deque
from collections.abc import Hashable, Iterable, Sequence
from typing import Any, NamedTuple

Edge = tuple[tuple[Any, Any], Any]


class EKFlows(NamedTuple):
    """Result of a maximum-flow computation."""

    flows: list[Edge]
    total: Any
    cut: list[Edge]


class EdmondsKarp(ABC):
    """Capacity and flow data over nodes numbered ``0..size``."""

    def __init__(self, size: int, source: int, sink: int) -> None:
        if not 0 <= source < size:
            raise ValueError("source is greater or equal than size")
        if not 0 <= sink < size:
            raise ValueError("sink is greater or equal than size")
        self.size = size
        self.source = source
        self.sink = sink
        self.total_capacity: Any = 0
        self.details = True

    @classmethod
    def from_matrix(
        cls, source: int, sink: int, capacities: Iterable[Iterable[Any]]
    ) -> EdmondsKarp:
        """Build a structure from a square matrix of capacities, given as rows."""
        rows = [list(row) for row in capacities]
        size = len(rows)
        if any(len(row) != size for row in rows):
            raise ValueError("capacities matrix is not a square one")
        if not 0 <= source < size:
            raise ValueError("source is greater or equal than matrix side")
        if not 0 <= sink < size:
            raise ValueError("sink is greater or equal than matrix side")
        result = cls(size, source, sink)
        result._load(rows)
        return result

    @classmethod
    def from_vec(
        cls, source: int, sink: int, capacities: Sequence[Any]
    ) -> EdmondsKarp:
        """Build a structure from a flat, row-major square matrix of capacities."""
        values = list(capacities)
        side = math.isqrt(len(values))
        if side * side != len(values):
            raise ValueError(
                "provided data does not correspond to the expected length"
            )
        rows = [values[i * side:(i + 1) * side] for i in range(side)]
        return cls.from_matrix(source, sink, rows)

    def _load(self, rows: list[list[Any]]) -> None:
        for from_node, row in enumerate(rows):
            for to_node, capacity in enumerate(row):
                if capacity > 0:
                    self.set_capacity(from_node, to_node, capacity)

    @abstractmethod
    def residual_successors(self, from_node: int) -> list[tuple[int, Any]]:
        """Successors with a positive residual capacity, and that capacity."""

    @abstractmethod
    def residual_capacity(self, from_node: int, to_node: int) -> Any:
        """Residual capacity between two nodes."""

    @abstractmethod
    def flow(self, from_node: int, to_node: int) -> Any:
        """Flow between two nodes."""

    @abstractmethod
    def flows_from(self, from_node: int) -> list[int]:
        """Nodes receiving a positive flow from a node."""

    @abstractmethod
    def flows(self) -> list[Edge]:
        """All positive flows between nodes."""

    @abstractmethod
    def add_flow(self, from_node: int, to_node: int, capacity: Any) -> None:
        """Add flow between two nodes, updating residuals accordingly."""

    @abstractmethod
    def add_residual_capacity(
        self, from_node: int, to_node: int, capacity: Any
    ) -> None:
        """Add some residual capacity between two nodes."""

    def set_capacity(self, from_node: int, to_node: int, capacity: Any) -> None:
        """Set the capacity between two nodes, cancelling excess flow."""
        flow = self.flow(from_node, to_node)
        delta = capacity - (self.residual_capacity(from_node, to_node) + flow)
        if capacity < flow:
            to_cancel = flow - capacity
            self.add_flow(to_node, from_node, to_cancel)
            self._cancel_flow(self.source, from_node, to_cancel)
            self._cancel_flow(to_node, self.sink, to_cancel)
            self.total_capacity -= to_cancel
        self.add_residual_capacity(from_node, to_node, delta)

    def omit_details(self) -> None:
        """Make ``augment`` return empty flow and cut lists."""
        self.details = False

    def augment(self) -> EKFlows:
        """Compute the maximum flow and a minimum cut."""
        source_nodes = self._update_flows()
        if not self.details:
            return EKFlows([], self.total_capacity, [])
        flows = self.flows()
        cut = [
            edge
            for edge in flows
            if edge[0][0] in source_nodes and edge[0][1] not in source_nodes
        ]
        return EKFlows(flows, self.total_capacity, cut)

    def _update_flows(self) -> set[int]:
        source, sink = self.source, self.sink
        parents: list[int | None] = [None] * self.size
        path_capacity: list[Any] = [math.inf] * self.size
        while True:
            seen: set[int] = set()
            to_see = deque([source])
            augmented = False
            while to_see and not augmented:
                node = to_see.popleft()
                seen.add(node)
                capacity_so_far = path_capacity[node]
                for successor, residual in self.residual_successors(node):
                    if successor == source or parents[successor] is not None:
                        continue
                    parents[successor] = node
                    path_capacity[successor] = min(capacity_so_far, residual)
                    if successor == sink:
                        amount = path_capacity[sink]
                        n = sink
                        while n != source:
                            p = parents[n]
                            self.add_flow(p, n, amount)
                            n = p
                        self.total_capacity += amount
                        parents = [None] * self.size
                        path_capacity = [math.inf] * self.size
                        augmented = True
                        break
                    to_see.append(successor)
            if not augmented:
                return seen

    def _flow_path(self, start: int, goal: int) -> list[int] | None:
        parents: dict[int, int | None] = {start: None}
        queue = deque([start])
        while queue:
            node = queue.popleft()
            for n in self.flows_from(node):
                if n in parents:
                    continue
                parents[n] = node
                if n == goal:
                    path = [n]
                    while parents[path[-1]] is not None:
                        path.append(parents[path[-1]])
                    path.reverse()
                    return path
                queue.append(n)
        return None

    def _cancel_flow(self, from_node: int, to_node: int, capacity: Any) -> None:
        if from_node == to_node:
            return
        while capacity > 0:
            path = self._flow_path(from_node, to_node)
            if path is None:
                raise RuntimeError("no flow to cancel")
            steps = list(zip(path, path[1:]))
            cancelable = min(min(self.flow(s, d) for s, d in steps), capacity)
            for src, dst in steps:
                self.add_flow(dst, src, cancelable)
            capacity -= cancelable


class SparseCapacity(EdmondsKarp):
    """Capacity and flow data stored in nested maps, for sparse graphs."""

    def __init__(self, size: int, source: int, sink: int) -> None:
        super().__init__(size, source, sink)
        self._flows: dict[int, dict[int, Any]] = {}
        self._residuals: dict[int, dict[int, Any]] = {}

    @staticmethod
    def _set_value(
        data: dict[int, dict[int, Any]], from_node: int, to_node: int, value: Any
    ) -> None:
        sub = data.setdefault(from_node, {})
        if value == 0:
            sub.pop(to_node, None)
        else:
            sub[to_node] = value
        if not sub:
            del data[from_node]

    @staticmethod
    def _get_value(
        data: dict[int, dict[int, Any]], from_node: int, to_node: int
    ) -> Any:
        return data.get(from_node, {}).get(to_node, 0)

    def residual_successors(self, from_node: int) -> list[tuple[int, Any]]:
        sub = self._residuals.get(from_node, {})
        return [(n, c) for n, c in sorted(sub.items()) if c > 0]

    def residual_capacity(self, from_node: int, to_node: int) -> Any:
        return self._get_value(self._residuals, from_node, to_node)

    def flow(self, from_node: int, to_node: int) -> Any:
        return self._get_value(self._flows, from_node, to_node)

    def flows(self) -> list[Edge]:
        return [
            ((k, v), c)
            for k, sub in sorted(self._flows.items())
            for v, c in sorted(sub.items())
            if c > 0
        ]

    def add_flow(self, from_node: int, to_node: int, capacity: Any) -> None:
        direct = self.flow(from_node, to_node) + capacity
        self._set_value(self._flows, from_node, to_node, direct)
        self._set_value(self._flows, to_node, from_node, -direct)
        self.add_residual_capacity(from_node, to_node, -capacity)
        self.add_residual_capacity(to_node, from_node, capacity)

    def add_residual_capacity(
        self, from_node: int, to_node: int, capacity: Any
    ) -> None:
        value = self.residual_capacity(from_node, to_node) + capacity
        self._set_value(self._residuals, from_node, to_node, value)

    def flows_from(self, from_node: int) -> list[int]:
        sub = self._flows.get(from_node, {})
        return [n for n, c in sorted(sub.items()) if c > 0]


class DenseCapacity(EdmondsKarp):
    """Capacity and flow data stored in adjacency matrices, for dense graphs."""

    def __init__(self, size: int, source: int, sink: int) -> None:
        super().__init__(size, source, sink)
        self._residuals: list[list[Any]] = [[0] * size for _ in range(size)]
        self._flows: list[list[Any]] = [[0] * size for _ in range(size)]

    def _load(self, rows: list[list[Any]]) -> None:
        self._residuals = [list(row) for row in rows]

    def residual_successors(self, from_node: int) -> list[tuple[int, Any]]:
        return [(n, r) for n, r in enumerate(self._residuals[from_node]) if r > 0]

    def residual_capacity(self, from_node: int, to_node: int) -> Any:
        return self._residuals[from_node][to_node]

    def flow(self, from_node: int, to_node: int) -> Any:
        return self._flows[from_node][to_node]

    def flows(self) -> list[Edge]:
        return [
            ((f, t), value)
            for f, row in enumerate(self._flows)
            for t, value in enumerate(row)
            if value > 0
        ]

    def add_flow(self, from_node: int, to_node: int, capacity: Any) -> None:
        self._flows[from_node][to_node] += capacity
        self._flows[to_node][from_node] -= capacity
        self._residuals[from_node][to_node] -= capacity
        self._residuals[to_node][from_node] += capacity

    def add_residual_capacity(
        self, from_node: int, to_node: int, capacity: Any
    ) -> None:
        self._residuals[from_node][to_node] += capacity

    def flows_from(self, from_node: int) -> list[int]:
        return [t for t, value in enumerate(self._flows[from_node]) if value > 0]


def edmonds_karp(
    vertices: Sequence[Hashable],
    source: Hashable,
    sink: Hashable,
    caps: Iterable[Edge],
    backend: type[EdmondsKarp] = DenseCapacity,
) -> EKFlows:
    """Compute the maximum flow from ``source`` to ``sink`` and a minimum cut.

    ``caps`` yields ``((from, to), capacity)`` items over ``vertices``.
    The result holds the positive flows, the total and the cut edges.
    """
    vertices = list(vertices)
    index: dict[Hashable, int] = {}
    for vertex in vertices:
        index.setdefault(vertex, len(index))
    if source not in index:
        raise ValueError("source not found in vertices")
    if sink not in index:
        raise ValueError("sink not found in vertices")
    capacities = backend(len(vertices), index[source], index[sink])
    for (from_node, to_node), capacity in caps:
        try:
            a, b = index[from_node], index[to_node]
        except KeyError as exc:
            raise ValueError(f"unknown vertex {exc.args[0]!r} in capacities") from None
        capacities.set_capacity(a, b, capacity)
    flows, total, cut = capacities.augment()
    return EKFlows(
        [((vertices[a], vertices[b]), c) for (a, b), c in flows],
        total,
        [((vertices[a], vertices[b]), c) for (a, b), c in cut],
    )


def edmonds_karp_dense(
    vertices: Sequence[Hashable],
    source: Hashable,
    sink: Hashable,
    caps: Iterable[Edge],
) -> EKFlows:
    """``edmonds_karp`` using adjacency matrices."""
    return edmonds_karp(vertices, source, sink, caps, DenseCapacity)


def edmonds_karp_sparse(
    vertices: Sequence[Hashable],
    source: Hashable,
    sink: Hashable,
    caps: Iterable[Edge],
) -> EKFlows:
    """``edmonds_karp`` using adjacency maps."""
    return edmonds_karp(vertices, source, sink, caps, SparseCapacity)