"""Integer search trees compared by shape and contents."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Iterable, Optional, Sequence


@dataclass(eq=False)
class _Node:
    data: int
    left: Optional["_Node"] = None
    right: Optional["_Node"] = None


class IntTree:
    """A search tree of distinct integers; duplicates are ignored."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._root: Optional[_Node] = None
        self._size = 0
        for value in values:
            self.insert(value)

    def __len__(self) -> int:
        return self._size

    def insert(self, value: int) -> None:
        if self._root is None:
            self._root = _Node(value)
            self._size += 1
            return
        node = self._root
        while True:
            if node.data == value:
                return
            side = "left" if value < node.data else "right"
            child = getattr(node, side)
            if child is None:
                setattr(node, side, _Node(value))
                self._size += 1
                return
            node = child

    def same_shape(self, other: "IntTree") -> bool:
        """True when both trees hold the same keys in the same structure."""
        if self._size != other._size:
            return False
        stack = [(self._root, other._root)]
        while stack:
            a, b = stack.pop()
            if a is None and b is None:
                continue
            if a is None or b is None or a.data != b.data:
                return False
            stack.append((a.left, b.left))
            stack.append((a.right, b.right))
        return True


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Read two counted key lists from standard input and print whether the trees match."""
    args = list(sys.argv[1:] if argv is None else argv)
    text = " ".join(args) if args else sys.stdin.read()
    tokens = iter(text.split())
    try:
        n = int(next(tokens))
        first = IntTree(int(next(tokens)) for _ in range(n))
        m = int(next(tokens))
        second = IntTree(int(next(tokens)) for _ in range(m))
    except StopIteration:
        raise ValueError("input ended early") from None
    print("True" if first.same_shape(second) else "False")
    return 0


if __name__ == "__main__":
    sys.exit(main())