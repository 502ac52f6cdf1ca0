"""Replace one integer by another throughout nested container structures.

Structures used here:

* stack: a list (bottom first) of vectors, each a list of queues (lists).
* heap map: a dict from name to ``(heap values, number)``; heaps print largest first.
* pair set: a set of ``(tuple of ints, tuple of (key, (number, text)) sorted by key)``.
"""

from __future__ import annotations

import sys
from typing import Iterable, Iterator, Optional, Sequence

Stack = list[list[list[int]]]
HeapMap = dict[str, tuple[list[int], int]]
PairItem = tuple[tuple[int, ...], tuple[tuple[int, tuple[int, str]], ...]]


def _swap(value: int, old: int, new: int) -> int:
    return new if value == old else value


def replace_in_stack(stack: Stack, old: int, new: int) -> Stack:
    """Return a copy of ``stack`` with every ``old`` turned into ``new``."""
    return [[[_swap(v, old, new) for v in queue] for queue in vector] for vector in stack]


def replace_in_heap_map(mapping: HeapMap, old: int, new: int) -> HeapMap:
    """Return a copy with heap values and paired numbers equal to ``old`` replaced."""
    return {
        name: ([_swap(v, old, new) for v in heap], _swap(number, old, new))
        for name, (heap, number) in mapping.items()
    }


def replace_in_pair_set(items: Iterable[PairItem], old: int, new: int) -> set[PairItem]:
    """Replace ``old`` in lists, map values and map keys.

    A key ``old`` moves to ``new`` unless ``new`` is already a key, in which
    case the entry under ``old`` is dropped.
    """
    result: set[PairItem] = set()
    for values, entries in items:
        mapping = {k: (_swap(n, old, new), text) for k, (n, text) in entries}
        if old in mapping:
            moved = mapping.pop(old)
            mapping.setdefault(new, moved)
        result.add((tuple(_swap(v, old, new) for v in values), tuple(sorted(mapping.items()))))
    return result


def _ints(tokens: Iterator[str], count: int) -> list[int]:
    return [int(next(tokens)) for _ in range(count)]


def read_stack(tokens: Iterable[str]) -> Stack:
    it = iter(tokens)
    stack: Stack = []
    for _ in range(int(next(it))):
        stack.append([_ints(it, int(next(it))) for _ in range(int(next(it)))])
    return stack


def read_heap_map(tokens: Iterable[str]) -> HeapMap:
    it = iter(tokens)
    mapping: HeapMap = {}
    for _ in range(int(next(it))):
        name = next(it)
        heap = _ints(it, int(next(it)))
        mapping[name] = (heap, int(next(it)))
    return mapping


def read_pair_set(tokens: Iterable[str]) -> set[PairItem]:
    it = iter(tokens)
    items: set[PairItem] = set()
    for _ in range(int(next(it))):
        values = tuple(_ints(it, int(next(it))))
        mapping: dict[int, tuple[int, str]] = {}
        for _ in range(int(next(it))):
            key = int(next(it))
            number = int(next(it))
            mapping[key] = (number, next(it))
        items.add((values, tuple(sorted(mapping.items()))))
    return items


def format_stack(stack: Stack) -> str:
    """One line per vector, top of the stack first."""
    return "".join(
        "".join("".join(f"{v}," for v in queue) + " " for queue in vector) + "\n"
        for vector in reversed(stack)
    )


def format_heap_map(mapping: HeapMap) -> str:
    return "".join(
        f"{name}:" + "".join(f"{v} " for v in sorted(heap, reverse=True)) + f",{number}\n"
        for name, (heap, number) in sorted(mapping.items())
    )


def format_pair_set(items: Iterable[PairItem]) -> str:
    return "".join(
        "".join(f"{v} " for v in values)
        + " | "
        + "".join(f"{k}:{n},{text} " for k, (n, text) in entries)
        + "\n"
        for values, entries in sorted(set(items))
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Read the kind, the old and new value and the structure; print the result."""
    args = list(sys.argv[1:] if argv is None else argv)
    text = " ".join(args) if args else sys.stdin.read()
    tokens = iter(text.split())
    try:
        kind, old, new = int(next(tokens)), int(next(tokens)), int(next(tokens))
        if kind == 1:
            out = format_stack(replace_in_stack(read_stack(tokens), old, new))
        elif kind == 2:
            out = format_heap_map(replace_in_heap_map(read_heap_map(tokens), old, new))
        elif kind == 3:
            out = format_pair_set(replace_in_pair_set(read_pair_set(tokens), old, new))
        else:
            out = ""
    except StopIteration:
        raise ValueError("input ended early") from None
    sys.stdout.write(out)
    return 0


if __name__ == "__main__":
    sys.exit(main())