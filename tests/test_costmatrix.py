import pytest

from hullcut.costmatrix import INF, edge_neighbors, find_minimum_element


def test_minimum_basic():
    assert find_minimum_element([3.0, 1.0, 2.0]) == (1, 1.0)


def test_minimum_first_of_ties():
    assert find_minimum_element([2.0, 0.5, 0.5, 4.0]) == (1, 0.5)


def test_minimum_range():
    data = [0.1, 5.0, 3.0, 0.2]
    assert find_minimum_element(data, 1, 3) == (2, 3.0)
    assert find_minimum_element(data, 1) == (3, 0.2)


def test_minimum_empty_and_all_inf():
    assert find_minimum_element([]) == (-1, INF)
    assert find_minimum_element([INF, INF]) == (-1, INF)


@pytest.mark.parametrize("values", [[7.0, -1.0, 2.0], [0.0], [1.5, 1.5]])
def test_minimum_is_min(values):
    idx, value = find_minimum_element(values)
    assert value == min(values)
    assert values[idx] == value


def test_edge_neighbors_excludes_self():
    edge_map = {(1, 2): (4, 9)}
    assert edge_neighbors(edge_map, (1, 2), 4) == [9]
    assert edge_neighbors(edge_map, (1, 2), 9) == [4]
    assert edge_neighbors(edge_map, (1, 2), 0) == [4, 9]


def test_edge_neighbors_skips_unset():
    edge_map = {(1, 2): (4, -1)}
    assert edge_neighbors(edge_map, (1, 2), 4) == []


def test_edge_neighbors_missing_edge_is_inserted():
    edge_map = {}
    assert edge_neighbors(edge_map, (3, 5), 2) == [0, 0]
    assert edge_map[(3, 5)] == (0, 0)