"""Ancestor, lowest-common-ancestor and distance queries by binary lifting."""

from __future__ import annotations

from treequeries.tree import Tree


class AncestorTable:
    """Jump tables over a tree rooted at ``root``.

    Level ``j`` of the table holds each node's ancestor ``2**j`` edges up,
    or ``None`` where that climbs past the root.
    """

    def __init__(self, tree: Tree, root: int = 0) -> None:
        parents = tree.parents(root)
        depths = tree.depths(root)
        if any(depth is None for depth in depths):
            raise ValueError("tree is not connected")
        self.root = root
        self._depths: list[int] = depths  # type: ignore[assignment]
        levels = max(1, (len(tree) - 1).bit_length())
        jumps: list[list[int | None]] = [parents]
        for _ in range(1, levels):
            previous = jumps[-1]
            jumps.append([None if p is None else previous[p] for p in previous])
        self._jumps = jumps

    def __len__(self) -> int:
        return len(self._depths)

    def _check(self, node: int) -> None:
        if not 0 <= node < len(self._depths):
            raise IndexError(
                f"node {node} is out of range for a tree of size {len(self)}"
            )

    def depth(self, node: int) -> int:
        """Number of edges between ``node`` and the root."""
        self._check(node)
        return self._depths[node]

    def kth_ancestor(self, node: int, k: int) -> int | None:
        """The node ``k`` edges above ``node``, or ``None`` past the root."""
        self._check(node)
        if k < 0:
            raise ValueError(f"k must not be negative, got {k}")
        if k > self._depths[node]:
            return None
        for level, table in enumerate(self._jumps):
            if k >> level & 1:
                node = table[node]  # type: ignore[assignment]
        return node

    def lca(self, a: int, b: int) -> int:
        """The deepest node that is an ancestor of both ``a`` and ``b``."""
        self._check(a)
        self._check(b)
        if self._depths[a] < self._depths[b]:
            a, b = b, a
        a = self.kth_ancestor(a, self._depths[a] - self._depths[b])  # type: ignore[assignment]
        if a == b:
            return a
        for table in reversed(self._jumps):
            if table[a] != table[b]:
                a, b = table[a], table[b]  # type: ignore[assignment]
        return self._jumps[0][a]  # type: ignore[return-value]

    def distance(self, a: int, b: int) -> int:
        """Number of edges on the path between ``a`` and ``b``."""
        common = self.lca(a, b)
        return self._depths[a] + self._depths[b] - 2 * self._depths[common]