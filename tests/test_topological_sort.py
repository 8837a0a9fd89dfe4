import pytest

from pathkit.topological_sort import (
    CycleError,
    CyclicGroupsError,
    topological_sort,
    topological_sort_into_groups,
)


def acyclic(node):
    if node <= 7:
        return [node + 1, node + 2]
    if node == 8:
        return [9]
    return []


def looped(node):
    if node <= 6:
        return [node + 1, node + 2, 7]
    if node == 7:
        return [8, 9]
    if node == 8:
        return [7, 9]
    return [7]


DAG = {
    "shirt": ["tie", "belt"],
    "tie": ["jacket"],
    "pants": ["shoes", "belt"],
    "belt": ["jacket"],
    "socks": ["shoes"],
    "shoes": [],
    "jacket": [],
    "watch": [],
}


def test_documented_sort():
    assert topological_sort([5, 1], acyclic) == [1, 2, 3, 4, 5, 6, 7, 8, 9]


def test_cycle_reports_node_on_cycle():
    with pytest.raises(CycleError) as info:
        topological_sort([5, 1], looped)
    assert info.value.node in {7, 8, 9}


def test_sort_respects_edges():
    order = topological_sort(list(DAG), DAG.__getitem__)
    assert sorted(order) == sorted(DAG)
    position = {n: i for i, n in enumerate(order)}
    for node, succs in DAG.items():
        for succ in succs:
            assert position[node] < position[succ]


def test_sort_empty_roots():
    assert topological_sort([], acyclic) == []


def test_groups_respect_edges():
    groups = topological_sort_into_groups(list(DAG), DAG.__getitem__)
    flat = [n for g in groups for n in g]
    assert sorted(flat) == sorted(DAG)
    level = {n: i for i, g in enumerate(groups) for n in g}
    for node, succs in DAG.items():
        for succ in succs:
            assert level[node] < level[succ]


def test_groups_first_group_has_no_predecessors():
    groups = topological_sort_into_groups(list(DAG), DAG.__getitem__)
    assert set(groups[0]) == {"shirt", "pants", "socks", "watch"}


def test_groups_empty():
    assert topological_sort_into_groups([], acyclic) == []


def test_groups_full_cycle():
    graph = {1: [2], 2: [3], 3: [1]}
    with pytest.raises(CyclicGroupsError) as info:
        topological_sort_into_groups(list(graph), graph.__getitem__)
    assert info.value.groups == []
    assert sorted(info.value.remaining) == [1, 2, 3]


def test_groups_partial_cycle():
    graph = {0: [1], 1: [2], 2: [3], 3: [2]}
    with pytest.raises(CyclicGroupsError) as info:
        topological_sort_into_groups(list(graph), graph.__getitem__)
    assert info.value.groups == [[0], [1]]
    assert sorted(info.value.remaining) == [2, 3]


def test_groups_unknown_successor():
    graph = {1: [2]}
    with pytest.raises(ValueError):
        topological_sort_into_groups([1], graph.__getitem__)