"""Build a perfectly balanced search tree over 1..n and print its traversals."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from dslab.bst_map import BSTMap


def build_balanced(n: int) -> BSTMap[int, int]:
    """Insert 1..n so that every subtree is rooted at its middle key."""
    tree: BSTMap[int, int] = BSTMap()
    pending = [(1, n)]
    while pending:
        low, high = pending.pop()
        if low > high:
            continue
        mid = (low + high) // 2
        tree[mid] = mid
        pending.append((mid + 1, high))
        pending.append((low, mid - 1))
    return tree


def traversal_lines(k: int) -> list[str]:
    """Pre-, in- and post-order key lines for the tree of ``(2 << k) - 1`` keys."""
    if k < 0:
        raise ValueError("k must not be negative")
    tree = build_balanced((2 << k) - 1)
    return [
        "".join(f"{key} " for key in order)
        for order in (tree.preorder(), tree.inorder(), tree.postorder())
    ]


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Read ``k`` (from the arguments, else standard input) and print the traversals."""
    args = list(sys.argv[1:] if argv is None else argv)
    text = args[0] if args else sys.stdin.read()
    tokens = text.split()
    if not tokens:
        raise ValueError("expected an integer k")
    for line in traversal_lines(int(tokens[0])):
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())