import io
from itertools import permutations, product
from math import comb

import pytest
from hypothesis import given, strategies as st

from dslab.backtracking import (
    barcodes,
    constrained_permutations,
    consecutive_ones,
    main,
    map_walks,
)


@given(st.integers(0, 7), st.data())
def test_barcodes_are_sorted_and_complete(length, data):
    ones = data.draw(st.integers(0, length))
    codes = list(barcodes(length, ones))
    assert codes == sorted(set(codes))
    assert len(codes) == comb(length, ones)
    assert all(code.count("1") == ones and len(code) == length for code in codes)


def test_barcodes_rejects_too_many_ones():
    with pytest.raises(ValueError):
        list(barcodes(2, 3))


@given(st.integers(0, 8), st.integers(1, 8))
def test_consecutive_matches_brute_force(n, k):
    expected = ["".join(p) for p in product("01", repeat=n) if "1" * k in "".join(p)]
    assert list(consecutive_ones(n, k)) == expected


def test_map_walks_open_square():
    assert list(map_walks([[0, 0], [0, 0]])) == ["AB", "BA"]


def test_map_walks_blocked_start():
    assert list(map_walks([[1, 0], [0, 0]])) == []


def test_map_walks_reach_target():
    grid = [[0, 0, 0], [0, 1, 0], [0, 0, 0]]
    for path in map_walks(grid):
        x = y = 0
        seen = {(0, 0)}
        for letter in path:
            dx, dy = {"A": (0, 1), "B": (1, 0), "C": (-1, 0)}[letter]
            x, y = x + dx, y + dy
            assert grid[x][y] == 0
            assert (x, y) not in seen
            seen.add((x, y))
        assert (x, y) == (2, 2)


@given(st.integers(0, 5), st.lists(st.tuples(st.integers(0, 4), st.integers(0, 4)), max_size=3))
def test_permutations_respect_constraints(n, rules):
    expected = [
        p
        for p in permutations(range(n))
        if all(not (a in p and b in p) or p.index(a) < p.index(b) for a, b in rules if a != b)
        and all(a in p for a, b in rules if b in p)
        and all(a != b for a, b in rules if b in p)
    ]
    assert list(constrained_permutations(n, rules)) == expected


def test_main_walk(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1 2\n0 0\n"))
    main(["walk"])
    assert capsys.readouterr().out == "A\nDONE"