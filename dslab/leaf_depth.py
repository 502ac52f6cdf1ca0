"""Sum of the depths of the leaves of a search tree."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from dslab.bst_map import BSTMap


def sum_leaves_depth(tree: BSTMap) -> int:
    """Return the total depth of all leaves, the root being at depth 0."""
    total = 0
    stack = [(tree.root, 0)] if tree.root is not None else []
    while stack:
        node, depth = stack.pop()
        children = [c for c in (node.left, node.right) if c is not None]
        if not children:
            total += depth
        stack.extend((child, depth + 1) for child in children)
    return total


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Read ``n`` then ``n`` keys, build the tree and print its leaf depth sum."""
    args = list(sys.argv[1:] if argv is None else argv)
    text = " ".join(args) if args else sys.stdin.read()
    tokens = text.split()
    if not tokens:
        raise ValueError("expected a count")
    n = int(tokens[0])
    keys = tokens[1 : n + 1]
    if len(keys) < n:
        raise ValueError(f"expected {n} keys, got {len(keys)}")
    tree: BSTMap[int, int] = BSTMap()
    for token in keys:
        tree[int(token)] = 0
    print(sum_leaves_depth(tree))
    return 0


if __name__ == "__main__":
    sys.exit(main())