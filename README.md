# dslab

A small collection of classic data-structure exercises, usable as a library
and from the command line. It has no dependencies beyond the standard library.

## What is in it

- `dslab.bst_map.BSTMap`: an ordered mapping kept in an unbalanced binary
  search tree with parent links. It takes an optional strict ordering `less`
  and an optional `default_factory` (a missing key looked up with `[]` is then
  inserted with `default_factory()`). It supports `len`, `in`, `[]`, `del`,
  iteration in key order and `reversed`, `items()`, `get()`, `insert()`
  (returns the stored pair and whether it was new), `erase()` (returns 0 or 1),
  `clear()`, `copy()`, `split(key)` (keys below `key` stay, the rest move to
  the returned map), `check_parent()`, `check_inorder()`, `preorder()`,
  `inorder()`, `postorder()` and `render()` (a sideways drawing).
- Measurements over a `BSTMap`:
  - `dslab.imbalance.most_imbalanced_key(tree)`: the key whose subtree heights
    differ most (ties go to the smaller key; `ValueError` on an empty tree).
  - `dslab.leaves.leaves_count(tree)`: number of leaves.
  - `dslab.unary.count_unary(tree)`: number of nodes with exactly one child.
  - `dslab.diameter.furthest_distance(tree)`: longest path in edges, `-1` for
    an empty tree.
  - `dslab.leaf_depth.sum_leaves_depth(tree)`: sum of leaf depths, root at 0.
  - `dslab.subtree.split_root(tree)`: cuts the tree down to its root and
    returns `(root pair, left map, right map)`; `render_inline(tree)` prints a
    tree as `(right)key:value[left]`.
- `dslab.optimal`: `build_balanced(n)` builds the perfectly balanced tree over
  `1..n`; `traversal_lines(k)` gives its pre-, in- and post-order key lines for
  `n = (2 << k) - 1`.
- `dslab.same_tree.IntTree`: an integer search tree (duplicates ignored) with
  `same_shape(other)`.
- `dslab.circular_queue.CircularQueue`: a ring-buffer queue with `push`,
  `pop`, `front`, `back`, `remove_many(positions)` and `render()`. Empty-queue
  access and out-of-range positions raise `IndexError`.
- `dslab.change_data`: replacing one integer by another in a stack of vectors
  of queues, a map of heaps and a set of (list, map) pairs, with readers and
  formatters for each.
- `dslab.backtracking`: `barcodes`, `map_walks`, `consecutive_ones` and
  `constrained_permutations`, all generators.
- `dslab.queries`: `LineMonopoly` (merging touching or overlapping integer
  segments), `huge_array_lookup`, `larger_before` and `non_descendants`.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Library use

```python
from dslab.bst_map import BSTMap
from dslab.backtracking import barcodes

tree = BSTMap()
for key in (30, 70, 40, 20, 10):
    tree[key] = -key

upper = tree.split(30)        # keys >= 30 move to the returned map
print(list(tree), list(upper))

print(list(barcodes(3, 1)))   # every length-3 string with exactly one "1"
```

## Commands

Input is whitespace-separated integers. Unless noted, a command takes its
input from its arguments when given any, otherwise from standard input.

| Command              | Input                                            | Output                                      |
|----------------------|--------------------------------------------------|---------------------------------------------|
| `dslab-optimal`      | `k`                                              | pre-, in- and post-order key lines          |
| `dslab-imbalance`    | keys as arguments (a built-in sample if none)    | the drawn tree, then the most imbalanced key |
| `dslab-leaves`       | `n`, then `n` keys                               | `Leaves = ...` after each insertion         |
| `dslab-unary`        | `n`, then `n` keys                               | `Size = ... unary_count = ...` each time    |
| `dslab-diameter`     | `n`, then `n` keys                               | the longest path in edges                   |
| `dslab-subtree`      | an unused number, `n`, then `n` keys             | the root pair and the three trees           |
| `dslab-leaf-depth`   | `n`, then `n` keys                               | the sum of leaf depths                      |
| `dslab-same-tree`    | `n` keys counted, then `m` keys counted          | `True` or `False`                           |
| `dslab-change-data`  | kind (1, 2 or 3), old value, new value, data     | the changed structure                       |
| `dslab-queue`        | `N`, `K`, `N` items, `K` positions               | `Size N: items...`                          |

`dslab-backtracking` and `dslab-queries` take the name of a problem as their
argument and always read its input from standard input:

- `dslab-backtracking barcode` (ones, length), `walk` (rows, columns, grid;
  prints the paths then `DONE`), `consecutive` (n, k), `permutation` (n, m,
  then m pairs `a b` meaning `a` comes before `b`).
- `dslab-queries huge` (n, q, n value/count pairs, q ranks), `insertion`
  (n, m, n values, m queries), `line` (count, then `1 start stop` to add a
  segment or `2` to print the number of segments), `heap` (n, start).

For example:

```
echo 1 | dslab-optimal
echo "1 4" | dslab-backtracking barcode
```