"""Find the key of the most height-imbalanced node of a search tree."""

from __future__ import annotations

import sys
from typing import Any, Optional, Sequence

from dslab.bst_map import BSTMap, Node

SAMPLE_KEYS = (50, 17, 76, 9, 23, 54, 14, 19, 72, 12, 67)


def most_imbalanced_key(tree: BSTMap) -> Any:
    """Return the key whose subtrees differ most in height.

    An empty subtree has height -1.  Ties go to the key that orders first
    under the tree's ordering.  Raises ``ValueError`` for an empty tree.
    """
    if tree.root is None:
        raise ValueError("tree is empty")
    best_key = tree.root.key
    best_imbalance = -1
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
        left = heights.pop(id(node.left), -1) if node.left is not None else -1
        right = heights.pop(id(node.right), -1) if node.right is not None else -1
        imbalance = abs(left - right)
        if imbalance > best_imbalance or (
            imbalance == best_imbalance and tree.less(node.key, best_key)
        ):
            best_imbalance = imbalance
            best_key = node.key
        heights[id(node)] = max(left, right) + 1
    return best_key


def _render(tree: BSTMap) -> str:
    lines = [f" ======== size = {len(tree)} ========= "]
    stack: list[tuple[bool, Node, int]] = []
    if tree.root is not None:
        stack.append((False, tree.root, 0))
    while stack:
        emit, node, depth = stack.pop()
        if emit:
            lines.append("--" * depth + f" {node.key}:{node.value}")
            continue
        for child in (node.right, node.left):
            if child is not None and child.parent is not node:
                lines.append(f"parent of {child.key}")
        if node.left is not None:
            stack.append((False, node.left, depth + 1))
        stack.append((True, node, depth))
        if node.right is not None:
            stack.append((False, node.right, depth + 1))
    return "\n".join(lines) + "\n"


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Build a tree from the given keys (or a sample set), draw it, print the answer."""
    args = list(sys.argv[1:] if argv is None else argv)
    keys = [int(arg) for arg in args] if args else list(SAMPLE_KEYS)
    tree: BSTMap[int, int] = BSTMap()
    for key in keys:
        tree[key] = 1
    sys.stdout.write(_render(tree))
    print(most_imbalanced_key(tree))
    return 0


if __name__ == "__main__":
    sys.exit(main())