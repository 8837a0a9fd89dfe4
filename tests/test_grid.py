import itertools

import pytest

from pathkit.grid import Grid


def _full(width, height):
    g = Grid(width, height)
    g.fill()
    return g


def test_borders_render():
    g = Grid(3, 4)
    added = g.add_borders()
    assert added == g.vertices_len()
    assert str(g) == "###\n#.#\n#.#\n###"
    assert g.render(alternate=True) == "▓▓▓\n▓░▓\n▓░▓\n▓▓▓"


def test_remove_borders_round_trip():
    g = Grid(5, 4)
    added = g.add_borders()
    assert g.remove_borders() == added
    assert g.is_empty()
    assert g.remove_borders() == 0


def test_borders_zero_dimension():
    g = Grid(0, 3)
    assert g.add_borders() == 0
    assert g.is_empty()


def test_from_vertices_render():
    g = Grid.from_vertices([(0, 0), (2, 2), (3, 2)])
    assert (g.width, g.height) == (4, 3)
    assert str(g) == "#...\n....\n..##"


def test_from_vertices_negative_rejected():
    with pytest.raises(ValueError):
        Grid.from_vertices([(0, -1)])


def test_from_coordinates_render():
    g = Grid.from_coordinates([(-16, -15), (-16, -16), (-15, -16)])
    assert g.render(alternate=True) == "▓▓\n▓░"
    assert g.render(alternate=True, reverse=True) == "▓░\n▓▓"


def test_from_coordinates_iteration_order():
    g = Grid.from_coordinates([(2, 2), (3, 4)])
    assert list(g) == [(0, 0), (1, 2)]


def test_from_coordinates_empty():
    g = Grid.from_coordinates([])
    assert g.is_empty()
    assert g.size() == 0


def test_constrain():
    g = Grid(3, 5)
    assert g.constrain((1, 2)) == (1, 2)
    assert g.constrain((10, -53)) == (1, 2)


def test_add_and_remove_vertex():
    g = Grid(3, 3)
    assert g.add_vertex((1, 1))
    assert not g.add_vertex((1, 1))
    assert not g.add_vertex((3, 0))
    assert (1, 1) in g
    assert g.remove_vertex((1, 1))
    assert not g.remove_vertex((1, 1))
    assert not g.remove_vertex((0, 3))
    assert g.is_empty()


def test_density_switch_keeps_content():
    g = Grid(4, 4)
    positions = [(x, y) for y in range(4) for x in range(4)]
    for p in positions:
        assert g.add_vertex(p)
    assert g.is_full()
    assert g.vertices_len() == g.size()
    assert list(g) == positions
    for p in positions[::2]:
        assert g.remove_vertex(p)
    assert set(g) == set(positions[1::2])
    assert g.vertices_len() == len(positions[1::2])


def test_invert_is_complement():
    g = Grid.from_vertices([(0, 0), (2, 1), (1, 2)])
    before = set(g)
    g.invert()
    all_positions = {(x, y) for x in range(g.width) for y in range(g.height)}
    assert set(g) == all_positions - before
    g.invert()
    assert set(g) == before


def test_fill_and_clear():
    g = Grid(3, 2)
    assert g.fill()
    assert g.is_full()
    assert not g.fill()
    assert g.clear()
    assert g.is_empty()
    assert not g.clear()


def test_resize_truncates():
    g = Grid(4, 4)
    g.add_vertex((3, 3))
    g.add_vertex((0, 0))
    assert not g.resize(5, 5)
    assert g.resize(2, 2)
    assert not g.has_vertex((3, 3))
    assert g.has_vertex((0, 0))
    g.resize(4, 4)
    assert set(g) == {(0, 0)}


def test_resize_dense_grid_new_cells_absent():
    g = _full(2, 2)
    assert not g.resize(3, 3)
    assert g.vertices_len() == 4
    assert not g.has_vertex((2, 2))
    assert not g.has_vertex((0, 2))
    assert set(g) == {(0, 0), (1, 0), (0, 1), (1, 1)}


def test_has_edge_and_diagonal():
    g = _full(3, 3)
    assert g.has_edge((0, 0), (1, 0))
    assert not g.has_edge((0, 0), (1, 1))
    g.enable_diagonal_mode()
    assert g.has_edge((0, 0), (1, 1))
    g.remove_vertex((1, 1))
    assert not g.has_edge((0, 0), (1, 1))
    g.disable_diagonal_mode()
    assert not g.has_edge((0, 0), (2, 0))


@pytest.mark.parametrize("diagonal", [False, True])
def test_neighbours_match_edges(diagonal):
    g = _full(4, 3)
    g.remove_vertex((1, 1))
    if diagonal:
        g.enable_diagonal_mode()
    for v in g:
        expected = {w for w in g if g.has_edge(v, w)}
        got = g.neighbours(v)
        assert len(got) == len(set(got))
        assert set(got) == expected
        assert all(g.distance(v, w) == 1 for w in got)


def test_neighbours_of_absent_vertex():
    g = Grid(3, 3)
    assert g.neighbours((1, 1)) == []


@pytest.mark.parametrize("diagonal", [False, True])
def test_edges_cover_all_pairs(diagonal):
    g = _full(4, 4)
    g.remove_vertex((2, 1))
    if diagonal:
        g.enable_diagonal_mode()
    edges = list(g.edges())
    assert all(g.has_edge(a, b) for a, b in edges)
    unordered = {frozenset(e) for e in edges}
    assert len(unordered) == len(edges)
    expected = {
        frozenset((a, b))
        for a, b in itertools.combinations(list(g), 2)
        if g.has_edge(a, b)
    }
    assert unordered == expected


def test_distance():
    g = Grid(5, 5)
    assert g.distance((0, 0), (3, 4)) == 7
    g.enable_diagonal_mode()
    assert g.distance((0, 0), (3, 4)) == 4


def test_flood_fill_stops_at_wall():
    g = _full(5, 5)
    for y in range(5):
        g.remove_vertex((2, y))
    left = {(x, y) for x in range(2) for y in range(5)}
    assert g.bfs_reachable((0, 0), lambda v: True) == left
    assert g.dfs_reachable((0, 0), lambda v: True) == left


def test_reachable_with_predicate():
    g = _full(4, 4)
    allowed = lambda v: v[1] == 0
    expected = {(x, 0) for x in range(4)}
    assert g.bfs_reachable((0, 0), allowed) == expected
    assert g.dfs_reachable((0, 0), allowed) == expected


def test_reachable_counts_predicate_calls_equally():
    g = _full(3, 3)
    calls = {"bfs": 0, "dfs": 0}

    def counting(key):
        def pred(v):
            calls[key] += 1
            return True
        return pred

    bfs = g.bfs_reachable((0, 0), counting("bfs"))
    dfs = g.dfs_reachable((0, 0), counting("dfs"))
    assert bfs == dfs == set(g)
    total_degree = sum(len(g.neighbours(v)) for v in g)
    assert calls["bfs"] == total_degree
    assert calls["dfs"] == total_degree


def test_equality():
    a = Grid.from_vertices([(0, 0), (1, 1)])
    b = Grid.from_vertices([(0, 0), (1, 1)])
    c = Grid.from_vertices([(0, 0), (1, 0)])
    assert a == b
    assert not (a == c)


def test_from_bool_rows():
    g = Grid.from_bool_rows([[True, False], [False, True]])
    assert (g.width, g.height) == (2, 2)
    assert str(g) == "#.\n.#"
    assert g.has_vertex((1, 1))
    assert not g.has_vertex((1, 0))


def test_from_bool_rows_inconsistent():
    with pytest.raises(ValueError):
        Grid.from_bool_rows([[True, False], [True]])


def test_contains_rejects_outside():
    g = _full(2, 2)
    assert (1, 1) in g
    assert (2, 1) not in g
    assert (-1, 0) not in g


def test_negative_dimensions_rejected():
    with pytest.raises(ValueError):
        Grid(-1, 2)