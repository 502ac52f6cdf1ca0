import pytest
from hypothesis import given, strategies as st

from dslab.bst_map import BSTMap
from dslab.subtree import main, render_inline, split_root


def _tree(keys):
    tree = BSTMap()
    for index, key in enumerate(keys):
        tree[key] = index
    return tree


def test_split_root_returns_root_pair():
    tree = _tree([50, 30, 70, 20, 40, 60, 80])
    pair, _, _ = split_root(tree)
    assert pair == (50, 0)


def test_split_root_leaves_single_node():
    tree = _tree([50, 30, 70, 20])
    split_root(tree)
    assert len(tree) == 1
    assert list(tree.items()) == [(50, 0)]


def test_split_root_parts_keep_shape():
    keys = [50, 30, 70, 20, 40, 60, 80, 65]
    tree = _tree(keys)
    original = tree.preorder()
    _, left, right = split_root(tree)
    assert [50] + left.preorder() + right.preorder() == original
    assert left.inorder() == [20, 30, 40]
    assert right.inorder() == [60, 65, 70, 80]
    assert left.get(30) == 1
    assert right.get(65) == 7


def test_split_root_empty_raises():
    with pytest.raises(ValueError):
        split_root(BSTMap())


def test_split_root_without_children():
    tree = _tree([5])
    pair, left, right = split_root(tree)
    assert pair == (5, 0)
    assert len(left) == 0 and len(right) == 0


@given(st.lists(st.integers(-100, 100), min_size=1, unique=True))
def test_split_root_invariants(keys):
    tree = _tree(keys)
    (root_key, _), left, right = split_root(tree)
    assert root_key == keys[0]
    assert all(k < root_key for k in left)
    assert all(k > root_key for k in right)
    assert sorted(list(left) + [root_key] + list(right)) == sorted(keys)
    assert len(left) + len(right) + 1 == len(keys)
    assert left.check_parent() and right.check_parent()
    assert left.check_inorder() and right.check_inorder()


def test_render_inline_single_node():
    assert render_inline(_tree([5])) == " ======== size = 1 ========= \n()5:0[]\n"


def test_render_inline_three_nodes():
    text = render_inline(_tree([2, 1, 3]))
    assert text == " ======== size = 3 ========= \n(()3:2[])2:0[()1:1[]]\n"


def test_render_inline_empty():
    assert render_inline(BSTMap()) == " ======== size = 0 ========= \n\n"


def test_main_output(capsys):
    assert main(["9", "3", "2", "1", "3"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "return: 2:0"
    assert lines[1] == "main tree:   ======== size = 1 ========= "
    assert lines[2] == "()2:0[]"
    assert lines[4] == "()1:1[]"
    assert lines[6] == "()3:2[]"


def test_main_missing_keys():
    with pytest.raises(ValueError):
        main(["0", "3", "1"])