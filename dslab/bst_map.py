"""An ordered map backed by an unbalanced binary search tree with parent links."""

from __future__ import annotations

import operator
from dataclasses import dataclass, field
from typing import Any, Callable, Generic, Iterator, Optional, TypeVar

K = TypeVar("K")
V = TypeVar("V")

SEPARATOR = "-" * 53


@dataclass(eq=False)
class Node(Generic[K, V]):
    """A tree node holding one key/value pair and links to its neighbours."""

    key: K
    value: V
    left: Optional["Node[K, V]"] = field(default=None, repr=False)
    right: Optional["Node[K, V]"] = field(default=None, repr=False)
    parent: Optional["Node[K, V]"] = field(default=None, repr=False)


def _min_node(node: Node) -> Node:
    while node.left is not None:
        node = node.left
    return node


def _max_node(node: Node) -> Node:
    while node.right is not None:
        node = node.right
    return node


def _successor(node: Node) -> Optional[Node]:
    if node.right is not None:
        return _min_node(node.right)
    parent = node.parent
    while parent is not None and parent.right is node:
        node, parent = parent, parent.parent
    return parent


def _predecessor(node: Node) -> Optional[Node]:
    if node.left is not None:
        return _max_node(node.left)
    parent = node.parent
    while parent is not None and parent.left is node:
        node, parent = parent, parent.parent
    return parent


class BSTMap(Generic[K, V]):
    """Ordered mapping kept in a plain binary search tree.

    ``less`` is a strict ordering ``less(a, b) -> bool``; two keys are equal
    when neither is less than the other.  When ``default_factory`` is given,
    looking up a missing key inserts ``default_factory()`` under it.
    """

    def __init__(
        self,
        less: Optional[Callable[[Any, Any], bool]] = None,
        default_factory: Optional[Callable[[], V]] = None,
    ) -> None:
        self.less: Callable[[Any, Any], bool] = less if less is not None else operator.lt
        self.default_factory = default_factory
        self.root: Optional[Node[K, V]] = None
        self._size = 0

    # ------------------------------------------------------------ helpers
    def _compare(self, a: K, b: K) -> int:
        if self.less(a, b):
            return -1
        if self.less(b, a):
            return 1
        return 0

    def _find(self, key: K) -> tuple[Optional[Node[K, V]], Optional[Node[K, V]]]:
        parent = None
        node = self.root
        while node is not None:
            cmp = self._compare(key, node.key)
            if cmp == 0:
                return node, parent
            parent = node
            node = node.left if cmp < 0 else node.right
        return None, parent

    def _attach(self, parent: Optional[Node[K, V]], node: Node[K, V]) -> None:
        node.parent = parent
        if parent is None:
            self.root = node
        elif self.less(node.key, parent.key):
            parent.left = node
        else:
            parent.right = node
        self._size += 1

    def _replace_child(
        self, parent: Optional[Node[K, V]], old: Node[K, V], new: Optional[Node[K, V]]
    ) -> None:
        if parent is None:
            self.root = new
        elif parent.left is old:
            parent.left = new
        else:
            parent.right = new
        if new is not None:
            new.parent = parent

    def _nodes(self) -> Iterator[Node[K, V]]:
        node = _min_node(self.root) if self.root is not None else None
        while node is not None:
            yield node
            node = _successor(node)

    def _count(self, node: Optional[Node[K, V]]) -> int:
        count = 0
        stack = [node] if node is not None else []
        while stack:
            current = stack.pop()
            count += 1
            stack.extend(c for c in (current.left, current.right) if c is not None)
        return count

    # --------------------------------------------------------- container
    def __len__(self) -> int:
        return self._size

    def __contains__(self, key: object) -> bool:
        return self._find(key)[0] is not None  # type: ignore[arg-type]

    def __getitem__(self, key: K) -> V:
        node, parent = self._find(key)
        if node is not None:
            return node.value
        if self.default_factory is None:
            raise KeyError(key)
        node = Node(key, self.default_factory())
        self._attach(parent, node)
        return node.value

    def __setitem__(self, key: K, value: V) -> None:
        node, parent = self._find(key)
        if node is None:
            self._attach(parent, Node(key, value))
        else:
            node.value = value

    def __delitem__(self, key: K) -> None:
        if not self.erase(key):
            raise KeyError(key)

    def __iter__(self) -> Iterator[K]:
        for node in self._nodes():
            yield node.key

    def __reversed__(self) -> Iterator[K]:
        node = _max_node(self.root) if self.root is not None else None
        while node is not None:
            yield node.key
            node = _predecessor(node)

    def __repr__(self) -> str:
        body = ", ".join(f"{k!r}: {v!r}" for k, v in self.items())
        return f"BSTMap({{{body}}})"

    def items(self) -> Iterator[tuple[K, V]]:
        """Yield ``(key, value)`` pairs in key order."""
        for node in self._nodes():
            yield node.key, node.value

    def get(self, key: K, default: Optional[V] = None) -> Optional[V]:
        node, _ = self._find(key)
        return default if node is None else node.value

    # --------------------------------------------------------- modifiers
    def insert(self, key: K, value: V) -> tuple[tuple[K, V], bool]:
        """Insert unless present; return the stored pair and whether it was new."""
        node, parent = self._find(key)
        if node is not None:
            return (node.key, node.value), False
        node = Node(key, value)
        self._attach(parent, node)
        return (node.key, node.value), True

    def erase(self, key: K) -> int:
        """Remove ``key``; return the number of entries removed (0 or 1)."""
        node, _ = self._find(key)
        if node is None:
            return 0
        if node.left is not None and node.right is not None:
            successor = _min_node(node.right)
            child = successor.right if successor.left is None else successor.left
            self._replace_child(successor.parent, successor, child)
            node.key, successor.key = successor.key, node.key
            node.value, successor.value = successor.value, node.value
        else:
            child = node.right if node.left is None else node.left
            self._replace_child(node.parent, node, child)
        self._size -= 1
        return 1

    def clear(self) -> None:
        self.root = None
        self._size = 0

    def copy(self) -> "BSTMap[K, V]":
        """Return a structurally identical, independent tree."""
        result: BSTMap[K, V] = BSTMap(self.less, self.default_factory)
        result._size = self._size
        if self.root is None:
            return result
        result.root = Node(self.root.key, self.root.value)
        stack = [(self.root, result.root)]
        while stack:
            src, dst = stack.pop()
            if src.left is not None:
                dst.left = Node(src.left.key, src.left.value, parent=dst)
                stack.append((src.left, dst.left))
            if src.right is not None:
                dst.right = Node(src.right.key, src.right.value, parent=dst)
                stack.append((src.right, dst.right))
        return result

    def split(self, key: K) -> "BSTMap[K, V]":
        """Keep keys less than ``key`` here; move the rest into a new map."""
        left_root = right_root = None
        left_tail: Optional[Node[K, V]] = None
        right_tail: Optional[Node[K, V]] = None
        node = self.root
        while node is not None:
            if self.less(node.key, key):
                if left_tail is None:
                    left_root = node
                    node.parent = None
                else:
                    left_tail.right = node
                    node.parent = left_tail
                left_tail = node
                node = node.right
            else:
                if right_tail is None:
                    right_root = node
                    node.parent = None
                else:
                    right_tail.left = node
                    node.parent = right_tail
                right_tail = node
                node = node.left
        if left_tail is not None:
            left_tail.right = None
        if right_tail is not None:
            right_tail.left = None

        result: BSTMap[K, V] = BSTMap(self.less, self.default_factory)
        result.root = right_root
        result._size = self._count(right_root)
        self.root = left_root
        self._size -= result._size
        return result

    # ------------------------------------------------------------ checks
    def check_parent(self) -> bool:
        """True when every child's parent link points back at its parent."""
        stack = [self.root] if self.root is not None else []
        while stack:
            node = stack.pop()
            for child in (node.left, node.right):
                if child is not None:
                    if child.parent is not node:
                        return False
                    stack.append(child)
        return True

    def check_inorder(self) -> bool:
        """True when every node orders correctly against its direct children."""
        stack = [self.root] if self.root is not None else []
        while stack:
            node = stack.pop()
            if node.left is not None:
                if not self.less(node.left.key, node.key):
                    return False
                stack.append(node.left)
            if node.right is not None:
                if not self.less(node.key, node.right.key):
                    return False
                stack.append(node.right)
        return True

    # -------------------------------------------------------- traversals
    def preorder(self) -> list[K]:
        keys = []
        stack = [self.root] if self.root is not None else []
        while stack:
            node = stack.pop()
            keys.append(node.key)
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)
        return keys

    def inorder(self) -> list[K]:
        return list(self)

    def postorder(self) -> list[K]:
        keys = []
        stack = [self.root] if self.root is not None else []
        while stack:
            node = stack.pop()
            keys.append(node.key)
            if node.left is not None:
                stack.append(node.left)
            if node.right is not None:
                stack.append(node.right)
        keys.reverse()
        return keys

    def render(self) -> str:
        """Draw the tree sideways: right subtree above, indented by depth."""
        lines = [SEPARATOR]
        stack: list[tuple[bool, Node[K, V], int]] = []
        if self.root is not None:
            stack.append((False, self.root, 0))
        while stack:
            emit, node, depth = stack.pop()
            if emit:
                lines.append("  " * depth + f" {node.key}:{node.value}")
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