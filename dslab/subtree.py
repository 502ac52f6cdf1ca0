"""Detach the two subtrees of a search tree's root into maps of their own."""

from __future__ import annotations

import sys
from typing import Any, Iterator, Optional, Sequence, Union

from dslab.bst_map import BSTMap, Node


def _preorder_items(node: Optional[Node]) -> Iterator[tuple[Any, Any]]:
    stack = [node] if node is not None else []
    while stack:
        current = stack.pop()
        yield current.key, current.value
        if current.right is not None:
            stack.append(current.right)
        if current.left is not None:
            stack.append(current.left)


def _map_from(tree: BSTMap, node: Optional[Node]) -> BSTMap:
    # Inserting keys in preorder rebuilds exactly the same shape.
    result: BSTMap = BSTMap(tree.less, tree.default_factory)
    for key, value in _preorder_items(node):
        result[key] = value
    return result


def split_root(tree: BSTMap) -> tuple[tuple[Any, Any], BSTMap, BSTMap]:
    """Cut ``tree`` down to its root and return ``(root pair, left map, right map)``.

    The returned maps keep the shape the subtrees had.  Raises ``ValueError``
    when the tree is empty.
    """
    root = tree.root
    if root is None:
        raise ValueError("tree is empty")
    pair = (root.key, root.value)
    left = _map_from(tree, root.left)
    right = _map_from(tree, root.right)
    tree.clear()
    tree[pair[0]] = pair[1]
    return pair, left, right


def render_inline(tree: BSTMap) -> str:
    """Render as a size header then ``(right)key:value[left]`` on one line."""
    parts = [f" ======== size = {len(tree)} ========= \n"]
    stack: list[Union[str, Node]] = [tree.root] if tree.root is not None else []
    while stack:
        item = stack.pop()
        if isinstance(item, str):
            parts.append(item)
            continue
        pieces: list[Union[str, Node, None]] = [
            "(",
            item.right,
            ")",
            f"{item.key}:{item.value}",
            "[",
            item.left,
            "]",
        ]
        stack.extend(piece for piece in reversed(pieces) if piece is not None)
    parts.append("\n")
    return "".join(parts)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Read an unused leading number, ``n`` and ``n`` keys; split and print the parts."""
    args = list(sys.argv[1:] if argv is None else argv)
    text = " ".join(args) if args else sys.stdin.read()
    tokens = text.split()
    if len(tokens) < 2:
        raise ValueError("expected a leading number and a count")
    n = int(tokens[1])
    keys = tokens[2 : n + 2]
    if len(keys) < n:
        raise ValueError(f"expected {n} keys, got {len(keys)}")
    tree: BSTMap[int, int] = BSTMap()
    for index, token in enumerate(keys):
        tree[int(token)] = index
    (key, value), left, right = split_root(tree)
    sys.stdout.write(f"return: {key}:{value}\n")
    sys.stdout.write("main tree:  " + render_inline(tree))
    sys.stdout.write("left tree:  " + render_inline(left))
    sys.stdout.write("right tree: " + render_inline(right))
    return 0


if __name__ == "__main__":
    sys.exit(main())