"""Command-line front end that answers tree problems read from text input."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterator, Sequence

from treequeries.ancestry import AncestorTable
from treequeries.distances import diameter
from treequeries.subtree import subordinate_counts
from treequeries.tree import Tree


class _Tokens:
    """Whitespace-separated integers read one at a time."""

    def __init__(self, text: str) -> None:
        self._words: Iterator[str] = iter(text.split())

    def int(self) -> int:
        try:
            word = next(self._words)
        except StopIteration:
            raise ValueError("input ended before all expected values were read") from None
        try:
            return int(word)
        except ValueError:
            raise ValueError(f"expected an integer, got {word!r}") from None

    def count(self) -> int:
        value = self.int()
        if value < 0:
            raise ValueError(f"a count must not be negative, got {value}")
        return value

    def node(self) -> int:
        """A 1-based node number, returned 0-based."""
        return self.int() - 1

    def nodes(self, how_many: int) -> list[int]:
        return [self.node() for _ in range(how_many)]


def _tree_size(tokens: _Tokens) -> int:
    size = tokens.count()
    if size < 1:
        raise ValueError("a tree needs at least one node")
    return size


def _read_edges(tokens: _Tokens, size: int) -> Tree:
    return Tree.from_edges(size, ((tokens.node(), tokens.node()) for _ in range(size - 1)))


def _lines(values: Sequence[int]) -> str:
    return "".join(f"{value}\n" for value in values)


def _company_queries_1(tokens: _Tokens) -> str:
    size = _tree_size(tokens)
    queries = tokens.count()
    table = AncestorTable(Tree.from_bosses(tokens.nodes(size - 1)), 0)
    answers = []
    for _ in range(queries):
        node = tokens.node()
        k = tokens.int()
        ancestor = table.kth_ancestor(node, k)
        answers.append(-1 if ancestor is None else ancestor + 1)
    return _lines(answers)


def _company_queries_2(tokens: _Tokens) -> str:
    size = _tree_size(tokens)
    queries = tokens.count()
    table = AncestorTable(Tree.from_bosses(tokens.nodes(size - 1)), 0)
    return _lines([table.lca(tokens.node(), tokens.node()) + 1 for _ in range(queries)])


def _distance_queries(tokens: _Tokens) -> str:
    size = _tree_size(tokens)
    queries = tokens.count()
    table = AncestorTable(_read_edges(tokens, size), 0)
    return _lines([table.distance(tokens.node(), tokens.node()) for _ in range(queries)])


def _subordinates(tokens: _Tokens) -> str:
    size = _tree_size(tokens)
    counts = subordinate_counts(tokens.nodes(size - 1))
    return " ".join(map(str, counts)) + "\n"


def _tree_diameter(tokens: _Tokens) -> str:
    size = _tree_size(tokens)
    return f"{diameter(_read_edges(tokens, size))}\n"


_PROBLEMS: dict[str, Callable[[_Tokens], str]] = {
    "company-queries-1": _company_queries_1,
    "company-queries-2": _company_queries_2,
    "distance-queries": _distance_queries,
    "subordinates": _subordinates,
    "tree-diameter": _tree_diameter,
}


def run(problem: str, text: str) -> str:
    """Solve ``problem`` on the whitespace-separated input ``text``.

    Nodes in the input and output are numbered from 1.
    """
    try:
        solver = _PROBLEMS[problem]
    except KeyError:
        known = ", ".join(sorted(_PROBLEMS))
        raise ValueError(f"unknown problem {problem!r}; choose one of {known}") from None
    return solver(_Tokens(text))


def main(argv: Sequence[str] | None = None) -> int:
    """Read a problem's input from a file or standard input and print the answer."""
    parser = argparse.ArgumentParser(
        prog="treequeries", description="Answer queries on a tree read from input."
    )
    parser.add_argument("problem", choices=sorted(_PROBLEMS))
    parser.add_argument(
        "input", nargs="?", default="-", help="input file, or - for standard input"
    )
    args = parser.parse_args(argv)

    try:
        if args.input == "-":
            text = sys.stdin.read()
        else:
            with open(args.input, encoding="utf-8") as handle:
                text = handle.read()
        output = run(args.problem, text)
    except (OSError, ValueError, IndexError) as error:
        print(f"treequeries: {error}", file=sys.stderr)
        return 1
    sys.stdout.write(output)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())