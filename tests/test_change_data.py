import io

import pytest

from dslab.change_data import (
    format_heap_map,
    format_pair_set,
    format_stack,
    main,
    read_heap_map,
    read_pair_set,
    read_stack,
    replace_in_heap_map,
    replace_in_pair_set,
    replace_in_stack,
)


def test_read_and_replace_stack():
    stack = read_stack("1 2 2 1 2 1 3".split())
    assert stack == [[[1, 2], [3]]]
    assert replace_in_stack(stack, 1, 9) == [[[9, 2], [3]]]
    assert stack == [[[1, 2], [3]]]


def test_format_stack_top_first():
    stack = [[[1]], [[2]]]
    assert format_stack(stack).splitlines() == ["2, ", "1, "]


def test_heap_map_replace():
    mapping = read_heap_map("1 a 3 1 5 1 1".split())
    result = replace_in_heap_map(mapping, 1, 7)
    assert sorted(result["a"][0]) == [5, 7, 7]
    assert result["a"][1] == 7


def test_format_heap_map_descending():
    assert format_heap_map({"b": ([1, 3], 0), "a": ([2], 4)}) == "a:2 ,4\nb:3 1 ,0\n"


def test_pair_set_key_moves():
    items = read_pair_set("1 2 1 2 1 1 5 x".split())
    result = replace_in_pair_set(items, 1, 8)
    assert result == {((8, 2), ((8, (5, "x")),))}


def test_pair_set_key_collision_drops_old():
    items = {((), ((1, (0, "a")), (2, (0, "b"))))}
    result = replace_in_pair_set(items, 1, 2)
    assert result == {((), ((2, (0, "b")),))}


def test_format_pair_set():
    out = format_pair_set({((3,), ((1, (2, "z")),))})
    assert out == "3  | 1:2,z \n"


def test_read_stack_short_input():
    with pytest.raises(StopIteration):
        read_stack(["1", "2"])


def test_main_kind_one(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1 1 9\n1 1 2 1 4\n"))
    main([])
    assert capsys.readouterr().out == format_stack([[[9, 4]]])