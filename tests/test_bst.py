import operator

import pytest

from algoworks.bst import (
    BinarySearchTree,
    LeftDuplicateTree,
    solve_all_equal,
    solve_min_depth,
    solve_preorder,
)


def _tree(values, less=operator.lt):
    tree = BinarySearchTree(less)
    for value in values:
        tree.add(value)
    return tree


def test_preorder_balanced():
    assert _tree([5, 3, 7, 2, 4, 6, 8]).preorder_string() == "5 3 2 4 7 6 8 "


def test_preorder_empty():
    assert BinarySearchTree().preorder_string() == ""


def test_preorder_single():
    assert _tree([42]).preorder_string() == "42 "


def test_preorder_reversed_order():
    tree = _tree([5, 3, 7, 2, 4, 6, 8], operator.gt)
    assert tree.preorder_string() == "5 7 8 6 3 4 2 "


def test_preorder_duplicates():
    assert _tree([1, 1, 1]).preorder_string() == "1 1 1 "


def test_preorder_is_permutation_and_len():
    values = [9, 1, 8, 2, 7, 3, 6, 4, 5, 5]
    tree = _tree(values)
    assert sorted(tree.preorder()) == sorted(values)
    assert len(tree) == len(values)


def test_preorder_root_first():
    assert next(_tree([10, 20, 5]).preorder()) == 10


def test_deep_tree_has_no_recursion_limit():
    tree = _tree(range(5000))
    assert list(tree.preorder()) == list(range(5000))


def test_solve_preorder():
    assert solve_preorder("7\n5 3 7 2 4 6 8\n") == "5 3 2 4 7 6 8 "


@pytest.mark.parametrize("text", ["0", "", "3 1 2"])
def test_solve_preorder_bad_input(text):
    with pytest.raises(ValueError):
        solve_preorder(text)


def test_all_equal_true():
    tree = LeftDuplicateTree()
    for value in [2, 2, 2, 2]:
        tree.insert(value)
    assert tree.all_values_equal() is True


def test_all_equal_false():
    tree = LeftDuplicateTree()
    for value in [2, 2, 3]:
        tree.insert(value)
    assert tree.all_values_equal() is False


def test_all_equal_empty():
    assert LeftDuplicateTree().all_values_equal() is True


def test_min_depth_empty():
    assert LeftDuplicateTree().min_depth() == 0


def test_min_depth_chain_equals_length():
    tree = LeftDuplicateTree()
    for value in range(6):
        tree.insert(value)
    assert tree.min_depth() == 6


def test_min_depth_balanced():
    tree = LeftDuplicateTree()
    for value in [4, 2, 6, 1, 3, 5, 7]:
        tree.insert(value)
    assert tree.min_depth() == 3


def test_min_depth_uneven():
    tree = LeftDuplicateTree()
    for value in [4, 2, 6, 1, 0]:
        tree.insert(value)
    assert tree.min_depth() == 2


def test_solve_all_equal():
    assert solve_all_equal("2 2 2 2\n") == "1\n"
    assert solve_all_equal("2 2 3\n") == "0\n"


def test_solve_min_depth():
    assert solve_min_depth("4 2 6 1 3 5 7") == "3\n"
    assert solve_min_depth("") == "0\n"


def test_solve_stops_at_non_number():
    assert solve_all_equal("5 5 x 6") == "1\n"