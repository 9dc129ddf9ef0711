import operator
import random

import pytest

from algoworks.avl import AvlTree, solve_soldiers


def test_iteration_is_sorted():
    values = [5, 3, 8, 1, 9, 2, 7, 3]
    tree = AvlTree(values)
    assert list(tree) == sorted(values)
    assert len(tree) == len(values)


def test_custom_order_descending():
    values = [5, 3, 8, 1, 9]
    tree = AvlTree(values, less=operator.gt)
    assert list(tree) == sorted(values, reverse=True)
    assert tree.at(0) == 9


def test_contains():
    tree = AvlTree([10, 20, 30])
    assert 20 in tree
    assert 25 not in tree


def test_remove_value():
    tree = AvlTree([4, 2, 6, 2])
    tree.remove(2)
    assert list(tree) == [2, 4, 6]
    tree.remove(2)
    assert 2 not in tree


def test_remove_missing_raises():
    tree = AvlTree([1, 2])
    with pytest.raises(KeyError):
        tree.remove(3)


def test_position_and_at_are_inverse():
    values = list(range(0, 100, 3))
    tree = AvlTree(reversed(values))
    for index, value in enumerate(values):
        assert tree.position(value) == index
        assert tree.at(index) == value


def test_position_of_absent_value_counts_smaller():
    tree = AvlTree([10, 20, 30])
    assert tree.position(25) == tree.position(30)
    assert tree.position(0) == 0


def test_at_out_of_range():
    tree = AvlTree([1])
    with pytest.raises(IndexError):
        tree.at(1)
    with pytest.raises(IndexError):
        tree.at(-1)


def test_remove_at_out_of_range():
    with pytest.raises(IndexError):
        AvlTree().remove_at(0)


def test_random_operations_match_sorted_list():
    rng = random.Random(7)
    tree = AvlTree()
    model: list[int] = []
    for _ in range(2000):
        if model and rng.random() < 0.4:
            index = rng.randrange(len(model))
            tree.remove_at(index)
            del model[index]
        else:
            value = rng.randrange(500)
            tree.add(value)
            model.append(value)
            model.sort()
        assert len(tree) == len(model)
    assert list(tree) == model


def test_sequential_inserts_stay_usable():
    tree = AvlTree(range(5000))
    assert tree.at(4999) == 4999
    assert tree.position(2500) == 2500


def test_solve_soldiers_example():
    text = "5\n1 100\n1 200\n1 50\n2 1\n1 150\n"
    assert solve_soldiers(text) == "0\n0\n2\n1\n"


def test_solve_soldiers_ignores_bad_position():
    assert solve_soldiers("2\n2 5\n1 10\n") == "0\n"


def test_solve_soldiers_short_input():
    with pytest.raises(ValueError):
        solve_soldiers("3\n1 10\n")