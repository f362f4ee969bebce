import random

import pytest

from treequeries.ancestry import AncestorTable
from treequeries.distances import (
    diameter,
    distance_sums,
    farthest_from,
    max_distances,
)
from treequeries.tree import Tree


def _sample_tree() -> Tree:
    # Edges 1-2, 1-3, 3-4, 3-5 renumbered from zero.
    return Tree.from_edges(5, [(0, 1), (0, 2), (2, 3), (2, 4)])


def _random_tree(size: int, seed: int) -> Tree:
    rng = random.Random(seed)
    tree = Tree(size)
    for node in range(1, size):
        tree.add_edge(rng.randrange(node), node)
    return tree


def _all_distances(tree: Tree) -> list[list[int]]:
    table = AncestorTable(tree, 0)
    return [[table.distance(a, b) for b in range(len(tree))] for a in range(len(tree))]


def test_diameter_of_sample():
    assert diameter(_sample_tree()) == 3


def test_max_distances_of_sample():
    assert max_distances(_sample_tree()) == [2, 3, 2, 3, 3]


def test_distance_sums_of_sample():
    assert distance_sums(_sample_tree()) == [6, 9, 5, 8, 8]


def test_single_node():
    tree = Tree(1)
    assert diameter(tree) == 0
    assert max_distances(tree) == [0]
    assert distance_sums(tree) == [0]
    assert farthest_from(tree, 0) == (0, 0)


def test_empty_tree():
    tree = Tree(0)
    assert max_distances(tree) == []
    assert distance_sums(tree) == []
    with pytest.raises(ValueError):
        diameter(tree)


def test_path_diameter_is_size_minus_one():
    size = 8
    tree = Tree.from_edges(size, [(i, i + 1) for i in range(size - 1)])
    assert diameter(tree) == size - 1
    assert farthest_from(tree, 0) == (size - 1, size - 1)


def test_farthest_prefers_first_in_preorder():
    tree = Tree.from_edges(4, [(0, 2), (0, 1), (0, 3)])
    assert farthest_from(tree, 0) == (2, 1)


@pytest.mark.parametrize("seed", range(6))
def test_farthest_from_matches_brute_force(seed):
    tree = _random_tree(25, seed)
    dist = _all_distances(tree)
    for start in range(len(tree)):
        node, length = farthest_from(tree, start)
        assert length == max(dist[start])
        assert dist[start][node] == length


@pytest.mark.parametrize("seed", range(6))
def test_diameter_matches_brute_force(seed):
    tree = _random_tree(30, seed)
    dist = _all_distances(tree)
    assert diameter(tree) == max(max(row) for row in dist)


@pytest.mark.parametrize("seed", range(6))
def test_max_distances_match_brute_force(seed):
    tree = _random_tree(30, seed)
    dist = _all_distances(tree)
    assert max_distances(tree) == [max(row) for row in dist]


@pytest.mark.parametrize("seed", range(6))
def test_distance_sums_match_brute_force(seed):
    tree = _random_tree(30, seed)
    dist = _all_distances(tree)
    assert distance_sums(tree) == [sum(row) for row in dist]


def test_max_distance_bounded_by_diameter():
    tree = _random_tree(40, 99)
    values = max_distances(tree)
    assert max(values) == diameter(tree)
    assert min(values) * 2 >= diameter(tree)


def test_disconnected_tree_rejected():
    tree = Tree.from_edges(3, [(0, 1)])
    with pytest.raises(ValueError):
        diameter(tree)
    with pytest.raises(ValueError):
        max_distances(tree)
    with pytest.raises(ValueError):
        distance_sums(tree)


def test_farthest_from_out_of_range():
    with pytest.raises(IndexError):
        farthest_from(_sample_tree(), 5)