"""Counting how many given paths pass through each node of a tree."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from treequeries.ancestry import AncestorTable
from treequeries.tree import Tree


def count_paths(tree: Tree, paths: Iterable[Sequence[int]]) -> list[int]:
    """For every node, the number of ``(a, b)`` paths that pass through it.

    Both endpoints of a path count as lying on it, and a path from a node to
    itself passes through that node alone.
    """
    paths = list(paths)
    if not len(tree):
        if paths:
            raise IndexError("an empty tree has no nodes to join")
        return []

    table = AncestorTable(tree, 0)
    diff = [0] * len(tree)
    for a, b in paths:
        common = table.lca(a, b)
        above = table.kth_ancestor(common, 1)
        diff[a] += 1
        diff[b] += 1
        diff[common] -= 1
        if above is not None:
            diff[above] -= 1

    parents = tree.parents(0)
    counts = diff[:]
    for node in reversed(list(tree.preorder(0))):
        parent = parents[node]
        if parent is not None:
            counts[parent] += counts[node]
    return counts