"""Enumeration puzzles solved by backtracking."""

from __future__ import annotations

import sys
from typing import Iterable, Iterator, Optional, Sequence

_MOVES = (("A", 0, 1), ("B", 1, 0), ("C", -1, 0))


def barcodes(length: int, ones: int) -> Iterator[str]:
    """Yield every binary string of ``length`` with ``ones`` ones, in lexicographic order."""
    if ones < 0 or ones > length:
        raise ValueError("ones must lie between 0 and length")

    def walk(prefix: str, zeros_left: int, ones_left: int) -> Iterator[str]:
        if not zeros_left and not ones_left:
            yield prefix
            return
        if zeros_left:
            yield from walk(prefix + "0", zeros_left - 1, ones_left)
        if ones_left:
            yield from walk(prefix + "1", zeros_left, ones_left - 1)

    yield from walk("", length - ones, ones)


def map_walks(grid: Sequence[Sequence[int]]) -> Iterator[str]:
    """Yield non-empty simple paths from the top-left to the bottom-right cell.

    Cells holding 1 are walls.  Moves are A (right), B (down) and C (up),
    tried in that order.
    """
    rows = len(grid)
    if not rows:
        return
    cols = len(grid[0])

    def open_cell(x: int, y: int) -> bool:
        return 0 <= x < rows and 0 <= y < cols and grid[x][y] != 1

    target = (rows - 1, cols - 1)
    if not open_cell(0, 0) or target == (0, 0):
        return
    path: list[str] = []
    visited = {(0, 0)}
    stack = [((0, 0), iter(_MOVES))]
    while stack:
        (x, y), moves = stack[-1]
        for letter, dx, dy in moves:
            nxt = (x + dx, y + dy)
            if not open_cell(*nxt) or nxt in visited:
                continue
            if nxt == target:
                yield "".join(path) + letter
                continue
            visited.add(nxt)
            path.append(letter)
            stack.append((nxt, iter(_MOVES)))
            break
        else:
            stack.pop()
            visited.discard((x, y))
            if path:
                path.pop()


def consecutive_ones(n: int, k: int) -> Iterator[str]:
    """Yield binary strings of length ``n`` holding a run of at least ``k`` ones."""

    def walk(prefix: str, run: int, ok: bool) -> Iterator[str]:
        if len(prefix) == n:
            if ok:
                yield prefix
            return
        if not ok and run + n - len(prefix) < k:
            return
        yield from walk(prefix + "0", 0, ok)
        yield from walk(prefix + "1", run + 1, ok or run + 1 >= k)

    yield from walk("", 0, False)


def constrained_permutations(
    n: int, constraints: Iterable[tuple[int, int]]
) -> Iterator[tuple[int, ...]]:
    """Yield permutations of 0..n-1 where, for each ``(a, b)``, ``a`` precedes ``b``."""
    rules = list(constraints)
    used: set[int] = set()
    current: list[int] = []

    def walk() -> Iterator[tuple[int, ...]]:
        if len(current) == n:
            yield tuple(current)
            return
        for value in range(n):
            if value in used or any(b == value and a not in used for a, b in rules):
                continue
            used.add(value)
            current.append(value)
            yield from walk()
            current.pop()
            used.discard(value)

    yield from walk()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run one puzzle (barcode, walk, consecutive, permutation) on standard input."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        raise ValueError("expected one of: barcode, walk, consecutive, permutation")
    command = args[0]
    tokens = iter(sys.stdin.read().split())
    try:
        if command == "barcode":
            ones, length = int(next(tokens)), int(next(tokens))
            for code in barcodes(length, ones):
                print(code)
        elif command == "walk":
            rows, cols = int(next(tokens)), int(next(tokens))
            grid = [[int(next(tokens)) for _ in range(cols)] for _ in range(rows)]
            for path in map_walks(grid):
                print(path)
            sys.stdout.write("DONE")
        elif command == "consecutive":
            n, k = int(next(tokens)), int(next(tokens))
            for line in consecutive_ones(n, k):
                print(line)
        elif command == "permutation":
            n, m = int(next(tokens)), int(next(tokens))
            rules = [(int(next(tokens)), int(next(tokens))) for _ in range(m)]
            for perm in constrained_permutations(n, rules):
                print("".join(f"{v} " for v in perm))
        else:
            raise ValueError(f"unknown command {command!r}")
    except StopIteration:
        raise ValueError("input ended early") from None
    return 0


if __name__ == "__main__":
    sys.exit(main())