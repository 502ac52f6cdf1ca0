import pytest
from hypothesis import given
from hypothesis import strategies as st

from dslab.bst_map import BSTMap
from dslab.diameter import furthest_distance, main
from dslab.optimal import build_balanced


def _tree(keys):
    tree = BSTMap()
    for key in keys:
        tree.insert(key, 0)
    return tree


def test_empty_tree_is_minus_one():
    assert furthest_distance(BSTMap()) == -1


def test_single_node_is_zero():
    assert furthest_distance(_tree([7])) == 0


def test_chain_spans_all_nodes():
    keys = list(range(40, 0, -1))
    assert furthest_distance(_tree(keys)) == len(keys) - 1


def test_perfect_tree_of_seven():
    assert furthest_distance(build_balanced(7)) == 4


@given(st.lists(st.integers(-100, 100), min_size=1, unique=True))
def test_diameter_bounds(keys):
    result = furthest_distance(_tree(keys))
    assert 0 <= result <= len(keys) - 1


@given(st.lists(st.integers(-100, 100), min_size=1, unique=True))
def test_diameter_unchanged_by_copy(keys):
    tree = _tree(keys)
    assert furthest_distance(tree.copy()) == furthest_distance(tree)


@given(st.lists(st.integers(-100, 100), min_size=1, unique=True), st.integers(101, 200))
def test_adding_a_key_never_shrinks_diameter(keys, extra):
    tree = _tree(keys)
    before = furthest_distance(tree)
    tree.insert(extra, 0)
    assert furthest_distance(tree) >= before


def test_main_prints_diameter(capsys):
    keys = [5, 3, 8, 1, 4, 9]
    assert main([str(len(keys))] + [str(k) for k in keys]) == 0
    assert capsys.readouterr().out.strip() == str(furthest_distance(_tree(keys)))


def test_main_with_duplicates_ignores_repeats(capsys):
    main(["4", "2", "2", "2", "2"])
    assert capsys.readouterr().out.strip() == "0"


def test_main_rejects_short_input():
    with pytest.raises(ValueError):
        main(["5", "1", "2"])