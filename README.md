# treequeries

A small library with no dependencies for answering questions about trees:

- ancestor lookups and lowest common ancestors by binary lifting,
- distances between nodes,
- the diameter of a tree and, for every node, the distance to the farthest node,
- the sum of distances from every node to all others,
- how many given paths pass through each node,
- subordinate counts and the number of distinct colours in each subtree.

In the library, nodes are numbered from `0` to `len(tree) - 1`.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Building a tree

```python
from treequeries.tree import Tree

tree = Tree.from_edges(5, [(0, 1), (0, 2), (1, 3), (1, 4)])
len(tree)            # 5
tree.neighbours(1)   # (0, 3, 4)
```

A tree can also be built edge by edge with `Tree(size)` and `add_edge(u, v)`
(loops and out-of-range nodes are rejected), or with
`Tree.from_bosses(bosses)`, where `bosses[i]` is the parent of node `i + 1`
and node `0` has no parent.

Seen from a chosen root, `preorder(root)` yields the nodes in depth-first
preorder, `parents(root)` gives each node's parent and `depths(root)` its
number of edges from the root; the root, and nodes that cannot be reached,
have `None`.

## Ancestors, LCA and distances

```python
from treequeries.ancestry import AncestorTable

table = AncestorTable(tree, 0)
table.depth(3)              # 2
table.kth_ancestor(3, 1)    # 1
table.kth_ancestor(3, 5)    # None: past the root
table.lca(3, 4)             # 1
table.distance(3, 2)        # 3
```

`AncestorTable` raises `ValueError` if the tree is not connected.

## Whole-tree distances

```python
from treequeries.distances import diameter, farthest_from, max_distances, distance_sums

farthest_from(tree, 0)  # (3, 2): a farthest node and its distance
diameter(tree)          # 3
max_distances(tree)     # [2, 2, 3, 3, 3]
distance_sums(tree)     # [6, 5, 9, 8, 8]
```

## Paths and subtrees

```python
from treequeries.paths import count_paths
from treequeries.subtree import subordinate_counts, distinct_color_counts

count_paths(tree, [(3, 2), (4, 4)])           # [1, 1, 1, 1, 1]
distinct_color_counts(tree, [1, 2, 1, 3, 3])  # [3, 2, 1, 1, 1]
subordinate_counts([0, 0, 1])                 # [3, 1, 0, 0]
```

`count_paths` counts both endpoints as lying on a path. Subtree functions
root the tree at node `0`; `subordinate_counts` takes the same boss list as
`Tree.from_bosses`.

## Command line

The `treequeries` command reads whitespace-separated integers from a file, or
from standard input when the file is omitted or given as `-`, and writes the
answers to standard output. On the command line, nodes are numbered from `1`.

```
treequeries PROBLEM [INPUT]
```

| Problem             | Input                                              | Output                                    |
|---------------------|----------------------------------------------------|-------------------------------------------|
| `company-queries-1` | `n q`, the `n - 1` bosses of nodes 2..n, then `q` pairs `x k` | the `k`-th ancestor of `x`, or `-1`, one per line |
| `company-queries-2` | `n q`, the `n - 1` bosses, then `q` pairs `a b`    | the lowest common ancestor, one per line  |
| `distance-queries`  | `n q`, `n - 1` edges `u v`, then `q` pairs `a b`   | the distance, one per line                |
| `subordinates`      | `n`, then the `n - 1` bosses of nodes 2..n         | subordinate counts on one line            |
| `tree-diameter`     | `n`, then `n - 1` edges `u v`                      | the diameter                              |

For example:

```
printf '5 3\n1 1 3 3\n4 1\n4 2\n4 3\n' | treequeries company-queries-1
```

prints `3`, `1` and `-1`. Malformed input or out-of-range nodes are reported
on standard error with exit status 1.

## What it does not do

The command covers only the five problems above. Path counts, distinct
colours, farthest distances and distance sums are available from the library
alone, not from the command line.