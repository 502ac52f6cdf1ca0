import io

from hypothesis import given, strategies as st

from dslab.same_tree import IntTree, main


def test_same_insert_order_variants_with_same_shape():
    assert IntTree([2, 1, 3]).same_shape(IntTree([2, 3, 1]))


def test_different_shape_is_not_same():
    assert not IntTree([1, 2, 3]).same_shape(IntTree([2, 1, 3]))


def test_different_sizes_differ():
    assert not IntTree([1, 2]).same_shape(IntTree([1]))


@given(st.lists(st.integers(-50, 50)))
def test_len_counts_distinct(values):
    tree = IntTree(values)
    assert len(tree) == len(set(values))
    assert tree.same_shape(IntTree(values))


def test_main_prints_result(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3 2 1 3\n3 2 3 1\n"))
    assert main([]) == 0
    assert capsys.readouterr().out == "True\n"


def test_main_false(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2 1 2\n2 2 1\n"))
    main([])
    assert capsys.readouterr().out == "False\n"