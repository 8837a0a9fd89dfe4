"""Rectangular grid in which vertices can be added or removed, with or
without diagonal links."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Hashable, Iterable, Iterator
from typing import Generic, TypeVar

Vertex = tuple[int, int]
_T = TypeVar("_T", bound=Hashable)


class _IndexSet(Generic[_T]):
    """Insertion-ordered set whose removal moves the last item into the gap."""

    def __init__(self, items: Iterable[_T] = ()) -> None:
        self._items: list[_T] = []
        self._pos: dict[_T, int] = {}
        for item in items:
            self.add(item)

    def __contains__(self, item: object) -> bool:
        return item in self._pos

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[_T]:
        return iter(list(self._items))

    def add(self, item: _T) -> bool:
        if item in self._pos:
            return False
        self._pos[item] = len(self._items)
        self._items.append(item)
        return True

    def swap_remove(self, item: _T) -> bool:
        idx = self._pos.pop(item, None)
        if idx is None:
            return False
        last = self._items.pop()
        if idx < len(self._items):
            self._items[idx] = last
            self._pos[last] = idx
        return True

    def retain(self, keep: Callable[[_T], bool]) -> None:
        self._items = [item for item in self._items if keep(item)]
        self._pos = {item: i for i, item in enumerate(self._items)}

    def clear(self) -> None:
        self._items.clear()
        self._pos.clear()


class Grid:
    """A rectangular grid of present or absent vertices.

    Coordinates are ``(x, y)``: ``x`` is the column, ``y`` the row, and
    ``(0, 0)`` the top-left corner. Edges link adjacent present vertices,
    horizontally and vertically, and diagonally when diagonal mode is on.

    Internally the grid stores either its present vertices or its absent
    ones, whichever is smaller; the switch happens automatically.
    """

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, width: int, height: int) -> None:
        if width < 0 or height < 0:
            raise ValueError("grid dimensions must not be negative")
        self.width = width
        self.height = height
        self._diagonal_mode = False
        # When dense, the grid is full by default and _exclusions holds the
        # absent vertices; otherwise it holds the present ones.
        self._dense = False
        self._exclusions: _IndexSet[Vertex] = _IndexSet()

    # Construction helpers

    @classmethod
    def from_vertices(cls, vertices: Iterable[Vertex]) -> Grid:
        """Build the smallest grid holding the given ``(x, y)`` vertices."""
        exclusions: _IndexSet[Vertex] = _IndexSet()
        width = height = 0
        for x, y in vertices:
            if x < 0 or y < 0:
                raise ValueError(f"negative coordinate in vertex {(x, y)}")
            exclusions.add((x, y))
            width = max(width, x + 1)
            height = max(height, y + 1)
        grid = cls(width, height)
        grid._exclusions = exclusions
        grid._rebalance()
        return grid

    @classmethod
    def from_coordinates(cls, points: Iterable[tuple]) -> Grid | None:
        """Build a grid from arbitrary coordinates, shifting them so that the
        smallest x and y become 0. Return None if a shifted coordinate cannot
        be expressed as a non-negative integer."""
        points = list(points)
        min_x = min((x for x, _ in points), default=0)
        min_y = min((y for _, y in points), default=0)
        shifted = []
        for x, y in points:
            dx, dy = x - min_x, y - min_y
            if dx < 0 or dy < 0:
                return None
            try:
                shifted.append((int(dx), int(dy)))
            except (TypeError, ValueError, OverflowError):
                return None
        return cls.from_vertices(shifted)

    @classmethod
    def from_bool_rows(cls, rows: Iterable[Iterable[bool]]) -> Grid:
        """Build a grid from rows of booleans; true cells become vertices."""
        rows = [list(row) for row in rows]
        width = len(rows[0]) if rows else 0
        if rows and width == 0:
            raise ValueError("unable to create a grid with empty rows")
        if any(len(row) != width for row in rows):
            raise ValueError("all rows must have the same width")
        grid = cls(width, len(rows))
        for y, row in enumerate(rows):
            for x, value in enumerate(row):
                if value:
                    grid.add_vertex((x, y))
        return grid

    # Dimensions and modes

    def is_inside(self, vertex: Vertex) -> bool:
        """Tell whether a position lies within the grid bounds."""
        x, y = vertex
        return 0 <= x < self.width and 0 <= y < self.height

    def enable_diagonal_mode(self) -> None:
        """Create diagonal edges between adjacent vertices."""
        self._diagonal_mode = True

    def disable_diagonal_mode(self) -> None:
        """Create only horizontal and vertical edges."""
        self._diagonal_mode = False

    def resize(self, width: int, height: int) -> bool:
        """Resize the grid. Return True if any existing vertex was discarded."""
        if width < 0 or height < 0:
            raise ValueError("grid dimensions must not be negative")
        truncated = False
        if width < self.width:
            truncated |= any(
                self.has_vertex((c, r))
                for c in range(width, self.width)
                for r in range(self.height)
            )
        if height < self.height:
            truncated |= any(
                self.has_vertex((c, r))
                for c in range(self.width)
                for r in range(height, self.height)
            )
        self._exclusions.retain(lambda v: v[0] < width and v[1] < height)
        if self._dense:
            for c in range(self.width, width):
                for r in range(height):
                    self._exclusions.add((c, r))
            for c in range(min(self.width, width)):
                for r in range(self.height, height):
                    self._exclusions.add((c, r))
        self.width = width
        self.height = height
        self._rebalance()
        return truncated

    def size(self) -> int:
        """Return the number of positions in the grid."""
        return self.width * self.height

    def vertices_len(self) -> int:
        """Return the number of present vertices."""
        if self._dense:
            return self.size() - len(self._exclusions)
        return len(self._exclusions)

    # Vertex manipulation

    def add_vertex(self, vertex: Vertex) -> bool:
        """Add a vertex. Return True if it was absent and inside the grid."""
        if not self.is_inside(vertex):
            return False
        vertex = tuple(vertex)
        if self._dense:
            added = self._exclusions.swap_remove(vertex)
        else:
            added = self._exclusions.add(vertex)
        self._rebalance()
        return added

    def remove_vertex(self, vertex: Vertex) -> bool:
        """Remove a vertex. Return True if it was present."""
        if not self.is_inside(vertex):
            return False
        vertex = tuple(vertex)
        if self._dense:
            removed = self._exclusions.add(vertex)
        else:
            removed = self._exclusions.swap_remove(vertex)
        self._rebalance()
        return removed

    def _borders(self) -> Iterator[Vertex]:
        width, height = self.width, self.height
        for x in range(width):
            yield (x, 0)
            yield (x, height - 1)
        for y in range(1, height - 1):
            yield (0, y)
            yield (width - 1, y)

    def add_borders(self) -> int:
        """Add the border vertices. Return how many were added."""
        if self.width == 0 or self.height == 0:
            return 0
        op = self._exclusions.swap_remove if self._dense else self._exclusions.add
        count = sum(1 for v in self._borders() if op(v))
        self._rebalance()
        return count

    def remove_borders(self) -> int:
        """Remove the border vertices. Return how many were removed."""
        if self.width == 0 or self.height == 0:
            return 0
        op = self._exclusions.add if self._dense else self._exclusions.swap_remove
        count = sum(1 for v in self._borders() if op(v))
        self._rebalance()
        return count

    def _rebalance(self) -> None:
        if len(self._exclusions) > self.width * self.height // 2:
            old = self._exclusions
            self._exclusions = _IndexSet(
                (c, r)
                for c in range(self.width)
                for r in range(self.height)
                if (c, r) not in old
            )
            self._dense = not self._dense

    def clear(self) -> bool:
        """Remove every vertex. Return True if the grid held any."""
        had_vertices = not self.is_empty()
        self._dense = False
        self._exclusions.clear()
        return had_vertices

    def fill(self) -> bool:
        """Add every possible vertex. Return True if any was added."""
        was_not_full = not self.is_full()
        self.clear()
        self.invert()
        return was_not_full

    def is_empty(self) -> bool:
        """Tell whether the grid holds no vertex."""
        if self._dense:
            return len(self._exclusions) == self.size()
        return len(self._exclusions) == 0

    def is_full(self) -> bool:
        """Tell whether every position holds a vertex."""
        if self._dense:
            return len(self._exclusions) == 0
        return len(self._exclusions) == self.size()

    def invert(self) -> None:
        """Swap present and absent vertices."""
        self._dense = not self._dense

    # Queries

    def has_vertex(self, vertex: Vertex) -> bool:
        """Tell whether a vertex is present."""
        return self.is_inside(vertex) and ((tuple(vertex) in self._exclusions) != self._dense)

    def has_edge(self, v1: Vertex, v2: Vertex) -> bool:
        """Tell whether an edge links two vertices."""
        if not self.has_vertex(v1) or not self.has_vertex(v2):
            return False
        dx = abs(v1[0] - v2[0])
        dy = abs(v1[1] - v2[1])
        return dx + dy == 1 or (dx == 1 and dy == 1 and self._diagonal_mode)

    def edges(self) -> Iterator[tuple[Vertex, Vertex]]:
        """Yield every edge once, row by row."""
        for y in range(self.height):
            for x in range(self.width):
                others = [(x + 1, y), (x, y + 1), (x + 1, y + 1)]
                if x > 0:
                    others.append((x - 1, y + 1))
                for other in others:
                    if self.has_edge((x, y), other):
                        yield ((x, y), other)

    def neighbours(self, vertex: Vertex) -> list[Vertex]:
        """Return the present neighbours of a present vertex."""
        if not self.has_vertex(vertex):
            return []
        x, y = vertex
        diagonal = self._diagonal_mode
        candidates: list[Vertex] = []
        if x > 0:
            candidates.append((x - 1, y))
            if diagonal:
                if y > 0:
                    candidates.append((x - 1, y - 1))
                if y + 1 < self.height:
                    candidates.append((x - 1, y + 1))
        if x + 1 < self.width:
            candidates.append((x + 1, y))
            if diagonal:
                if y > 0:
                    candidates.append((x + 1, y - 1))
                if y + 1 < self.height:
                    candidates.append((x + 1, y + 1))
        if y > 0:
            candidates.append((x, y - 1))
        if y + 1 < self.height:
            candidates.append((x, y + 1))
        return [v for v in candidates if self.has_vertex(v)]

    def bfs_reachable(
        self, start: Vertex, predicate: Callable[[Vertex], bool]
    ) -> set[Vertex]:
        """Return the vertices reachable from ``start`` through neighbours
        accepted by ``predicate``, using a breadth-first search."""
        start = tuple(start)
        seen = {start}
        queue = deque([start])
        while queue:
            node = queue.popleft()
            for n in [n for n in self.neighbours(node) if predicate(n)]:
                if n not in seen:
                    seen.add(n)
                    queue.append(n)
        return seen

    def dfs_reachable(
        self, start: Vertex, predicate: Callable[[Vertex], bool]
    ) -> set[Vertex]:
        """Return the vertices reachable from ``start`` through neighbours
        accepted by ``predicate``, using a depth-first search."""
        start = tuple(start)
        seen: set[Vertex] = set()
        stack = [start]
        while stack:
            node = stack.pop()
            if node in seen:
                continue
            seen.add(node)
            accepted = [n for n in self.neighbours(node) if predicate(n)]
            stack.extend(n for n in reversed(accepted) if n not in seen)
        return seen

    def distance(self, a: Vertex, b: Vertex) -> int:
        """Chebyshev distance in diagonal mode, Manhattan distance otherwise."""
        dx = abs(a[0] - b[0])
        dy = abs(a[1] - b[1])
        return max(dx, dy) if self._diagonal_mode else dx + dy

    def constrain(self, vertex: tuple[int, int]) -> Vertex:
        """Wrap a possibly out-of-range position back inside the grid."""
        return (vertex[0] % self.width, vertex[1] % self.height)

    # Rendering and protocols

    def render(self, alternate: bool = False, reverse: bool = False) -> str:
        """Draw the grid with ``#``/``.`` (or block characters when
        ``alternate``), last row first when ``reverse``."""
        present, absent = ("▓", "░") if alternate else ("#", ".")
        rows = range(self.height - 1, -1, -1) if reverse else range(self.height)
        return "\n".join(
            "".join(
                present if self.has_vertex((x, y)) else absent
                for x in range(self.width)
            )
            for y in rows
        )

    def __iter__(self) -> Iterator[Vertex]:
        if self._dense:
            for y in range(self.height):
                for x in range(self.width):
                    if self.has_vertex((x, y)):
                        yield (x, y)
        else:
            yield from self._exclusions

    def __contains__(self, vertex: object) -> bool:
        return (
            isinstance(vertex, tuple)
            and len(vertex) == 2
            and self.has_vertex(vertex)
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self.vertices_len() == other.vertices_len() and all(
            a == b for a, b in zip(self, other)
        )

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return (
            f"Grid(width={self.width}, height={self.height}, "
            f"vertices={self.vertices_len()})"
        )