import operator

import pytest
from hypothesis import given, strategies as st

from dslab.bst_map import BSTMap
from dslab.imbalance import SAMPLE_KEYS, main, most_imbalanced_key


def _tree(keys, less=None):
    tree = BSTMap(less) if less is not None else BSTMap()
    for key in keys:
        tree[key] = 1
    return tree


def test_sample_tree():
    assert most_imbalanced_key(_tree(SAMPLE_KEYS)) == 76


def test_single_node():
    assert most_imbalanced_key(_tree([42])) == 42


def test_empty_tree_raises():
    with pytest.raises(ValueError):
        most_imbalanced_key(BSTMap())


def test_ascending_chain_root_wins():
    assert most_imbalanced_key(_tree([1, 2, 3])) == 1


def test_tie_goes_to_smallest_key():
    assert most_imbalanced_key(_tree([2, 1, 3])) == 1


def test_tie_follows_custom_ordering():
    assert most_imbalanced_key(_tree([2, 1, 3], operator.gt)) == 3


@given(st.lists(st.integers(-50, 50), min_size=1, max_size=40))
def test_result_is_a_key(keys):
    tree = _tree(keys)
    assert most_imbalanced_key(tree) in tree


def test_main_prints_tree_and_answer(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == " ======== size = 11 ========= "
    assert lines[-1] == "76"
    assert len(lines) == 1 + 11 + 1


def test_main_with_keys(capsys):
    main(["5", "4", "3"])
    lines = capsys.readouterr().out.splitlines()
    assert lines[-1] == "5"
    assert lines[1] == " 5:1"