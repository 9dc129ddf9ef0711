"""An AVL tree with order statistics: positions of values and values at positions."""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any

Less = Callable[[Any, Any], bool]


@dataclass
class _Node:
    value: Any
    left: _Node | None = None
    right: _Node | None = None
    height: int = 1
    count: int = 1


def _height(node: _Node | None) -> int:
    return node.height if node is not None else 0


def _count(node: _Node | None) -> int:
    return node.count if node is not None else 0


def _fix(node: _Node) -> None:
    node.height = max(_height(node.left), _height(node.right)) + 1
    node.count = _count(node.left) + _count(node.right) + 1


def _balance(node: _Node | None) -> int:
    return _height(node.right) - _height(node.left) if node is not None else 0


def _rotate_left(node: _Node) -> _Node:
    pivot = node.right
    assert pivot is not None
    node.right = pivot.left
    pivot.left = node
    _fix(node)
    _fix(pivot)
    return pivot


def _rotate_right(node: _Node) -> _Node:
    pivot = node.left
    assert pivot is not None
    node.left = pivot.right
    pivot.right = node
    _fix(node)
    _fix(pivot)
    return pivot


def _rebalance(node: _Node) -> _Node:
    _fix(node)
    balance = _balance(node)
    if balance == 2:
        if _balance(node.right) < 0:
            node.right = _rotate_right(node.right)  # type: ignore[arg-type]
        return _rotate_left(node)
    if balance == -2:
        if _balance(node.left) > 0:
            node.left = _rotate_left(node.left)  # type: ignore[arg-type]
        return _rotate_right(node)
    return node


def _find_min(node: _Node) -> _Node:
    while node.left is not None:
        node = node.left
    return node


def _remove_min(node: _Node) -> _Node | None:
    if node.left is None:
        return node.right
    node.left = _remove_min(node.left)
    return _rebalance(node)


def _join(left: _Node | None, right: _Node | None) -> _Node | None:
    """Join the children of a removed node into one subtree."""
    if right is None:
        return left
    smallest = _find_min(right)
    smallest.right = _remove_min(right)
    smallest.left = left
    return _rebalance(smallest)


class AvlTree:
    """Balanced search tree ordered by ``less`` that keeps subtree sizes."""

    def __init__(self, items: Iterable[Any] = (), less: Less = operator.lt):
        self._root: _Node | None = None
        self._less = less
        for item in items:
            self.add(item)

    def add(self, value: Any) -> None:
        """Insert ``value``; equal values may repeat."""
        self._root = self._add(self._root, value)

    def _add(self, node: _Node | None, value: Any) -> _Node:
        if node is None:
            return _Node(value)
        if self._less(node.value, value):
            node.right = self._add(node.right, value)
        else:
            node.left = self._add(node.left, value)
        return _rebalance(node)

    def __contains__(self, value: object) -> bool:
        node = self._root
        while node is not None:
            if self._less(node.value, value):
                node = node.right
            elif self._less(value, node.value):
                node = node.left
            else:
                return True
        return False

    def remove(self, value: Any) -> None:
        """Remove one occurrence of ``value``; raise KeyError if it is absent."""
        if value not in self:
            raise KeyError(value)
        self._root = self._remove(self._root, value)

    def _remove(self, node: _Node | None, value: Any) -> _Node | None:
        if node is None:
            return None
        if self._less(node.value, value):
            node.right = self._remove(node.right, value)
        elif self._less(value, node.value):
            node.left = self._remove(node.left, value)
        else:
            return _join(node.left, node.right)
        return _rebalance(node)

    def position(self, value: Any) -> int:
        """Number of stored values ranked strictly before ``value``."""
        result = 0
        node = self._root
        while node is not None:
            if self._less(value, node.value):
                node = node.left
            elif self._less(node.value, value):
                result += _count(node.left) + 1
                node = node.right
            else:
                return result + _count(node.left)
        return result

    def at(self, position: int) -> Any:
        """The value at ``position`` in sorted order."""
        if not 0 <= position < len(self):
            raise IndexError("position is out of range")
        node = self._root
        while node is not None:
            left_count = _count(node.left)
            if position < left_count:
                node = node.left
            elif position == left_count:
                return node.value
            else:
                position -= left_count + 1
                node = node.right
        raise AssertionError("subtree sizes are inconsistent")

    def remove_at(self, position: int) -> None:
        """Remove the value at ``position`` in sorted order."""
        if not 0 <= position < len(self):
            raise IndexError("position is out of range")
        self._root = self._remove_at(self._root, position)

    def _remove_at(self, node: _Node | None, position: int) -> _Node | None:
        if node is None:
            return None
        left_count = _count(node.left)
        if position < left_count:
            node.left = self._remove_at(node.left, position)
        elif position > left_count:
            node.right = self._remove_at(node.right, position - left_count - 1)
        else:
            return _join(node.left, node.right)
        return _rebalance(node)

    def __len__(self) -> int:
        return _count(self._root)

    def __iter__(self) -> Iterator[Any]:
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.value
            node = node.right

    def __repr__(self) -> str:
        return f"AvlTree({list(self)!r})"


def solve_soldiers(text: str) -> str:
    """Run commands on a line ordered from tallest to shortest.

    ``1 h`` adds height ``h`` and prints its position; ``2 p`` removes the
    soldier at position ``p``. A position outside the line is ignored.
    """
    numbers = [int(token) for token in text.split()]
    if not numbers:
        raise ValueError("input is empty")
    count = numbers[0]
    pairs = numbers[1 : 1 + 2 * count]
    if count < 0 or len(pairs) < 2 * count:
        raise ValueError("not enough commands in input")
    tree = AvlTree(less=operator.gt)
    lines = []
    for command, value in zip(pairs[::2], pairs[1::2]):
        if command == 1:
            tree.add(value)
            lines.append(f"{tree.position(value)}\n")
        elif command == 2 and 0 <= value < len(tree):
            tree.remove_at(value)
    return "".join(lines)