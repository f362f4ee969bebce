"""Undirected trees on numbered nodes, stored as adjacency lists."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence


class Tree:
    """An undirected graph on the nodes ``0 .. size - 1``, meant to be a tree.

    Neighbours are kept in the order their edges were added, and every walk
    visits them in that order.
    """

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError(f"tree size must not be negative, got {size}")
        self._adjacency: list[list[int]] = [[] for _ in range(size)]

    def __len__(self) -> int:
        return len(self._adjacency)

    def __repr__(self) -> str:
        edges = sum(len(nbrs) for nbrs in self._adjacency) // 2
        return f"Tree(size={len(self)}, edges={edges})"

    def _check(self, node: int) -> None:
        if not 0 <= node < len(self._adjacency):
            raise IndexError(
                f"node {node} is out of range for a tree of size {len(self)}"
            )

    def add_edge(self, u: int, v: int) -> None:
        """Join nodes ``u`` and ``v``."""
        self._check(u)
        self._check(v)
        if u == v:
            raise ValueError(f"a tree cannot have a loop on node {u}")
        self._adjacency[u].append(v)
        self._adjacency[v].append(u)

    @classmethod
    def from_edges(cls, size: int, edges: Iterable[Sequence[int]]) -> Tree:
        """Build a tree of ``size`` nodes from ``(u, v)`` pairs."""
        tree = cls(size)
        for u, v in edges:
            tree.add_edge(u, v)
        return tree

    @classmethod
    def from_bosses(cls, bosses: Iterable[int]) -> Tree:
        """Build a tree where ``bosses[i]`` is the parent of node ``i + 1``.

        Node 0 has no boss; the tree has ``len(bosses) + 1`` nodes.
        """
        bosses = list(bosses)
        tree = cls(len(bosses) + 1)
        for employee, boss in enumerate(bosses, start=1):
            tree.add_edge(boss, employee)
        return tree

    def neighbours(self, node: int) -> tuple[int, ...]:
        """The nodes joined to ``node``, in the order they were added."""
        self._check(node)
        return tuple(self._adjacency[node])

    def _walk(self, root: int) -> Iterator[tuple[int, int | None]]:
        seen = {root}
        stack: list[tuple[int, int | None]] = [(root, None)]
        while stack:
            node, parent = stack.pop()
            yield node, parent
            for neighbour in reversed(self._adjacency[node]):
                if neighbour not in seen:
                    seen.add(neighbour)
                    stack.append((neighbour, node))

    def preorder(self, root: int) -> Iterator[int]:
        """Yield the nodes reachable from ``root`` in depth-first preorder."""
        self._check(root)
        return (node for node, _ in self._walk(root))

    def parents(self, root: int) -> list[int | None]:
        """Parent of every node when the tree hangs from ``root``.

        The root and any node not reachable from it have ``None``.
        """
        self._check(root)
        result: list[int | None] = [None] * len(self)
        for node, parent in self._walk(root):
            result[node] = parent
        return result

    def depths(self, root: int) -> list[int | None]:
        """Number of edges from ``root`` to every node, ``None`` if unreachable."""
        self._check(root)
        result: list[int | None] = [None] * len(self)
        for node, parent in self._walk(root):
            result[node] = 0 if parent is None else result[parent] + 1
        return result