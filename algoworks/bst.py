"""Unbalanced binary search trees and traversals over them."""

from __future__ import annotations

import operator
from collections import deque
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Any

Less = Callable[[Any, Any], bool]

MAX_PREORDER_COUNT = 1_000_000


@dataclass
class _Node:
    value: Any
    left: _Node | None = None
    right: _Node | None = None


class BinarySearchTree:
    """Search tree where items ranked below a node by ``less`` go left."""

    def __init__(self, less: Less = operator.lt):
        self._root: _Node | None = None
        self._less = less
        self._size = 0

    def add(self, value: Any) -> None:
        """Insert ``value``; equal values go to the right."""
        self._size += 1
        if self._root is None:
            self._root = _Node(value)
            return
        node = self._root
        while True:
            if self._less(value, node.value):
                if node.left is None:
                    node.left = _Node(value)
                    return
                node = node.left
            else:
                if node.right is None:
                    node.right = _Node(value)
                    return
                node = node.right

    def preorder(self) -> Iterator[Any]:
        """Values in pre-order: node, then left subtree, then right subtree."""
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            yield node.value
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)

    def preorder_string(self) -> str:
        """Pre-order values, each followed by a space."""
        return "".join(f"{value} " for value in self.preorder())

    def __len__(self) -> int:
        return self._size


class LeftDuplicateTree:
    """Search tree of integers where values not above a node go left."""

    def __init__(self) -> None:
        self._root: _Node | None = None

    def insert(self, value: int) -> None:
        """Insert ``value``; equal values go to the left."""
        if self._root is None:
            self._root = _Node(value)
            return
        node = self._root
        while True:
            if value <= node.value:
                if node.left is None:
                    node.left = _Node(value)
                    return
                node = node.left
            else:
                if node.right is None:
                    node.right = _Node(value)
                    return
                node = node.right

    def _nodes(self) -> Iterator[_Node]:
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            yield node
            stack.extend(child for child in (node.right, node.left) if child is not None)

    def all_values_equal(self) -> bool:
        """Whether every node holds the same value; true for an empty tree."""
        if self._root is None:
            return True
        first = self._root.value
        return all(node.value == first for node in self._nodes())

    def min_depth(self) -> int:
        """Number of nodes on the shortest path from the root to a leaf."""
        if self._root is None:
            return 0
        queue = deque([(self._root, 1)])
        while queue:
            node, depth = queue.popleft()
            if node.left is None and node.right is None:
                return depth
            queue.extend(
                (child, depth + 1) for child in (node.left, node.right) if child is not None
            )
        raise AssertionError("a non-empty tree always has a leaf")


def _leading_ints(text: str) -> list[int]:
    values = []
    for token in text.split():
        try:
            values.append(int(token))
        except ValueError:
            break
    return values


def solve_preorder(text: str) -> str:
    """Read ``N`` and ``N`` numbers into a search tree; print it in pre-order."""
    numbers = [int(token) for token in text.split()]
    if not numbers:
        raise ValueError("input is empty")
    count = numbers[0]
    if not 0 < count < MAX_PREORDER_COUNT:
        raise ValueError("count is out of range")
    if len(numbers) < count + 1:
        raise ValueError("not enough numbers in input")
    tree = BinarySearchTree()
    for value in numbers[1 : count + 1]:
        tree.add(value)
    return tree.preorder_string()


def _build_left_tree(text: str) -> LeftDuplicateTree:
    tree = LeftDuplicateTree()
    for value in _leading_ints(text):
        tree.insert(value)
    return tree


def solve_all_equal(text: str) -> str:
    """Print 1 if all numbers read are equal, otherwise 0."""
    return f"{1 if _build_left_tree(text).all_values_equal() else 0}\n"


def solve_min_depth(text: str) -> str:
    """Print the minimum depth of the search tree built from the numbers read."""
    return f"{_build_left_tree(text).min_depth()}\n"