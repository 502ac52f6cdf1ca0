"""A FIFO queue stored in a growable ring buffer."""

from __future__ import annotations

import sys
from typing import Any, Generic, Iterable, Iterator, Optional, Sequence, TypeVar

T = TypeVar("T")


class CircularQueue(Generic[T]):
    """Queue over a ring buffer whose capacity doubles when full."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._data: list[Any] = [None]
        self._front = 0
        self._size = 0
        for item in items:
            self.push(item)

    def _slot(self, offset: int) -> int:
        return (self._front + offset) % len(self._data)

    def _ensure(self, capacity: int) -> None:
        cap = len(self._data)
        if capacity > cap:
            new_cap = max(capacity, 2 * cap)
            items = list(self)
            self._data = items + [None] * (new_cap - len(items))
            self._front = 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        for offset in range(self._size):
            yield self._data[self._slot(offset)]

    def push(self, item: T) -> None:
        self._ensure(self._size + 1)
        self._data[self._slot(self._size)] = item
        self._size += 1

    def pop(self) -> T:
        """Remove and return the front item."""
        if not self._size:
            raise IndexError("queue is empty")
        item = self._data[self._front]
        self._front = self._slot(1)
        self._size -= 1
        return item

    def front(self) -> T:
        if not self._size:
            raise IndexError("queue is empty")
        return self._data[self._front]

    def back(self) -> T:
        if not self._size:
            raise IndexError("queue is empty")
        return self._data[self._slot(self._size - 1)]

    def remove_many(self, positions: Iterable[int]) -> None:
        """Remove the items at the given positions counted from the front."""
        doomed = set()
        for pos in positions:
            if not 0 <= pos < self._size:
                raise IndexError(f"position {pos} out of range")
            doomed.add(pos)
        write = 0
        for read in range(self._size):
            if read in doomed:
                continue
            if read != write:
                self._data[self._slot(write)] = self._data[self._slot(read)]
            write += 1
        self._size = write

    def render(self) -> str:
        return f"Size {self._size}: " + "".join(f"{item} " for item in self)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Read N, K, N items and K positions; remove them and print the queue."""
    args = list(sys.argv[1:] if argv is None else argv)
    text = " ".join(args) if args else sys.stdin.read()
    tokens = iter(text.split())
    try:
        n, k = int(next(tokens)), int(next(tokens))
        queue = CircularQueue(int(next(tokens)) for _ in range(n))
        positions = [int(next(tokens)) for _ in range(k)]
    except StopIteration:
        raise ValueError("input ended early") from None
    queue.remove_many(positions)
    print(queue.render())
    return 0


if __name__ == "__main__":
    sys.exit(main())