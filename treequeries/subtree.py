"""Per-node summaries of the subtrees of a tree rooted at node 0."""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Sequence

from treequeries.tree import Tree


def _rooted_order(tree: Tree) -> tuple[list[int], list[int | None]]:
    order = list(tree.preorder(0))
    if len(order) != len(tree):
        raise ValueError("tree is not connected")
    return order, tree.parents(0)


def subordinate_counts(bosses: Iterable[int]) -> list[int]:
    """Number of direct and indirect subordinates of every employee.

    ``bosses[i]`` is the boss of employee ``i + 1``; employee 0 is at the top.
    """
    tree = Tree.from_bosses(bosses)
    order, parents = _rooted_order(tree)
    counts = [0] * len(tree)
    for node in reversed(order):
        parent = parents[node]
        if parent is not None:
            counts[parent] += counts[node] + 1
    return counts


def distinct_color_counts(tree: Tree, colors: Sequence[Hashable]) -> list[int]:
    """Number of distinct colours in the subtree of every node, rooted at 0."""
    if len(colors) != len(tree):
        raise ValueError(
            f"expected {len(tree)} colours, one per node, got {len(colors)}"
        )
    if not len(tree):
        return []
    order, parents = _rooted_order(tree)
    seen: list[set[Hashable] | None] = [{color} for color in colors]
    result = [0] * len(tree)
    for node in reversed(order):
        own = seen[node]
        assert own is not None
        result[node] = len(own)
        parent = parents[node]
        if parent is None:
            continue
        target = seen[parent]
        assert target is not None
        if len(target) < len(own):
            target, own = own, target
        target.update(own)
        seen[parent] = target
        seen[node] = None
    return result