"""Longest path, counted in edges, between any two nodes of a search tree."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from dslab.bst_map import BSTMap, Node


def furthest_distance(tree: BSTMap) -> int:
    """Return the tree's diameter in edges, or -1 for an empty tree."""
    if tree.root is None:
        return -1
    best = 0
    heights: dict[int, int] = {}
    stack: list[tuple[Node, bool]] = [(tree.root, False)]
    while stack:
        node, children_done = stack.pop()
        if not children_done:
            stack.append((node, True))
            for child in (node.right, node.left):
                if child is not None:
                    stack.append((child, False))
            continue
        left = heights.pop(id(node.left)) if node.left is not None else -1
        right = heights.pop(id(node.right)) if node.right is not None else -1
        best = max(best, left + right + 2)
        heights[id(node)] = max(left, right) + 1
    return best


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Read ``n`` then ``n`` keys, build the tree and print its diameter."""
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
        tree.insert(int(token), 0)
    print(furthest_distance(tree))
    return 0


if __name__ == "__main__":
    sys.exit(main())