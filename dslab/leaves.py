"""Count the leaves of a search tree as keys are added."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from dslab.bst_map import BSTMap


def leaves_count(tree: BSTMap) -> int:
    """Return the number of nodes that have no children."""
    count = 0
    stack = [tree.root] if tree.root is not None else []
    while stack:
        node = stack.pop()
        children = [c for c in (node.left, node.right) if c is not None]
        if not children:
            count += 1
        stack.extend(children)
    return count


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Read ``n`` then ``n`` keys; after each insertion print the leaf count."""
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
        key = int(token)
        tree[key] = key
        print(f"Leaves = {leaves_count(tree)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())