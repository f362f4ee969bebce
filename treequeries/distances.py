"""Diameter, eccentricity and distance-sum computations on trees."""

from __future__ import annotations

from treequeries.tree import Tree


def _connected_depths(tree: Tree, root: int) -> list[int]:
    depths = tree.depths(root)
    if any(depth is None for depth in depths):
        raise ValueError("tree is not connected")
    return depths  # type: ignore[return-value]


def farthest_from(tree: Tree, start: int) -> tuple[int, int]:
    """The node farthest from ``start`` and its distance in edges.

    Among equally distant nodes the one met first in a depth-first preorder
    from ``start`` is chosen.
    """
    depths = _connected_depths(tree, start)
    best = start
    for node in tree.preorder(start):
        if depths[node] > depths[best]:
            best = node
    return best, depths[best]


def diameter(tree: Tree) -> int:
    """Number of edges on the longest path in the tree."""
    if not len(tree):
        raise ValueError("an empty tree has no diameter")
    end, _ = farthest_from(tree, 0)
    _, length = farthest_from(tree, end)
    return length


def max_distances(tree: Tree) -> list[int]:
    """For every node, the distance to the node farthest from it."""
    if not len(tree):
        return []
    first, _ = farthest_from(tree, 0)
    second, _ = farthest_from(tree, first)
    from_first = _connected_depths(tree, first)
    from_second = _connected_depths(tree, second)
    return [max(a, b) for a, b in zip(from_first, from_second)]


def distance_sums(tree: Tree) -> list[int]:
    """For every node, the sum of its distances to all other nodes."""
    size = len(tree)
    if not size:
        return []
    depths = _connected_depths(tree, 0)
    parents = tree.parents(0)
    order = list(tree.preorder(0))

    subtree = [1] * size
    for node in reversed(order):
        parent = parents[node]
        if parent is not None:
            subtree[parent] += subtree[node]

    sums = [0] * size
    sums[0] = sum(depths)
    for node in order:
        parent = parents[node]
        if parent is not None:
            sums[node] = sums[parent] + size - 2 * subtree[node]
    return sums