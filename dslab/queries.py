"""Query problems over arrays, intervals and heap-shaped trees."""

from __future__ import annotations

import bisect
import sys
from collections import deque
from itertools import accumulate
from typing import Iterable, Optional, Sequence


class LineMonopoly:
    """Union of integer segments; touching or overlapping segments merge."""

    def __init__(self) -> None:
        self._segments: list[tuple[int, int]] = []

    def __len__(self) -> int:
        return len(self._segments)

    def add(self, start: int, stop: int) -> None:
        segments = self._segments
        i = bisect.bisect_left(segments, (start, 0))
        if i > 0:
            i -= 1
        if i < len(segments) and segments[i][1] < start - 1:
            i += 1
        j, low, high = i, start, stop
        while j < len(segments) and segments[j][0] <= high + 1:
            low = min(low, segments[j][0])
            high = max(high, segments[j][1])
            j += 1
        del segments[i:j]
        bisect.insort(segments, (low, high))


def huge_array_lookup(pairs: Iterable[tuple[int, int]], ranks: Iterable[int]) -> list[int]:
    """For each 1-based rank, the value at that place in the sorted expanded array.

    ``pairs`` holds ``(value, count)``.  Raises ``IndexError`` past the end.
    """
    ordered = sorted(pairs)
    prefix = list(accumulate(count for _, count in ordered))
    result = []
    for rank in ranks:
        index = bisect.bisect_left(prefix, rank)
        if index >= len(ordered):
            raise IndexError(f"rank {rank} is past the end")
        result.append(ordered[index][0])
    return result


def larger_before(values: Sequence[int], queries: Iterable[int]) -> list[int]:
    """For each query, count values larger than it before its first occurrence."""
    result = []
    for query in queries:
        count = 0
        for value in values:
            if value == query:
                break
            if value > query:
                count += 1
        result.append(count)
    return result


def non_descendants(n: int, start: int) -> list[int]:
    """Indices of an ``n``-node array heap outside the subtree rooted at ``start``."""
    inside = {start}
    pending = deque([start])
    while pending:
        k = pending.popleft()
        for child in (2 * k + 1, 2 * k + 2):
            if child < n:
                inside.add(child)
                pending.append(child)
    return [i for i in range(n) if i not in inside]


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run one problem (huge, insertion, line, heap) on standard input."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        raise ValueError("expected one of: huge, insertion, line, heap")
    command = args[0]
    tokens = iter(sys.stdin.read().split())
    try:
        if command == "huge":
            n, q = int(next(tokens)), int(next(tokens))
            pairs = [(int(next(tokens)), int(next(tokens))) for _ in range(n)]
            for value in huge_array_lookup(pairs, [int(next(tokens)) for _ in range(q)]):
                print(value)
        elif command == "insertion":
            n, m = int(next(tokens)), int(next(tokens))
            values = [int(next(tokens)) for _ in range(n)]
            for count in larger_before(values, [int(next(tokens)) for _ in range(m)]):
                print(count)
        elif command == "line":
            line = LineMonopoly()
            for _ in range(int(next(tokens))):
                kind = int(next(tokens))
                if kind == 1:
                    line.add(int(next(tokens)), int(next(tokens)))
                elif kind == 2:
                    print(len(line))
        elif command == "heap":
            n, start = int(next(tokens)), int(next(tokens))
            if start == 0:
                sys.stdout.write("0")
            else:
                rest = non_descendants(n, start)
                print(len(rest))
                sys.stdout.write("".join(f"{i} " for i in rest))
        else:
            raise ValueError(f"unknown command {command!r}")
    except StopIteration:
        raise ValueError("input ended early") from None
    return 0


if __name__ == "__main__":
    sys.exit(main())