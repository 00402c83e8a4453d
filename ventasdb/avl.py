"""Self-balancing AVL tree of comparable values."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any


class DuplicateValueError(ValueError):
    """Raised when a value equal to one already stored is inserted."""


class _Node:
    __slots__ = ("value", "left", "right", "height")

    def __init__(self, value: Any) -> None:
        self.value = value
        self.left: _Node | None = None
        self.right: _Node | None = None
        self.height = 1

    def render(self, is_right: bool, indent: str, lines: list[str]) -> None:
        if self.right is not None:
            self.right.render(True, indent + ("     " if is_right else "|    "), lines)
        lines.append(f"{indent}{' /' if is_right else ' ' + chr(92)}-- {self.value}")
        if self.left is not None:
            self.left.render(False, indent + ("|    " if is_right else "     "), lines)


def _height(node: _Node | None) -> int:
    return 0 if node is None else node.height


def _balance(node: _Node | None) -> int:
    if node is None:
        return 0
    return _height(node.left) - _height(node.right)


def _update_height(node: _Node) -> None:
    node.height = max(_height(node.left), _height(node.right)) + 1


def _rotate_right(y: _Node) -> _Node:
    x = y.left
    y.left = x.right
    x.right = y
    _update_height(y)
    _update_height(x)
    return x


def _rotate_left(x: _Node) -> _Node:
    y = x.right
    x.right = y.left
    y.left = x
    _update_height(x)
    _update_height(y)
    return y


def _min_node(node: _Node) -> _Node:
    while node.left is not None:
        node = node.left
    return node


class AVLTree:
    """AVL tree ordered by the values' own ``<``, ``>`` and ``==`` operators."""

    def __init__(self) -> None:
        self._root: _Node | None = None

    def put(self, value: Any) -> None:
        """Insert ``value``; raise DuplicateValueError if an equal value is stored."""
        self._root = self._put(value, self._root)

    def _put(self, value: Any, node: _Node | None) -> _Node:
        if node is None:
            return _Node(value)
        if node.value == value:
            raise DuplicateValueError(value)
        if node.value > value:
            node.left = self._put(value, node.left)
        else:
            node.right = self._put(value, node.right)

        _update_height(node)
        balance = _balance(node)

        if balance > 1 and value < node.left.value:
            return _rotate_right(node)
        if balance > 1 and value > node.left.value:
            node.left = _rotate_left(node.left)
            return _rotate_right(node)
        if balance < -1 and value > node.right.value:
            return _rotate_left(node)
        if balance < -1 and value < node.right.value:
            node.right = _rotate_right(node.right)
            return _rotate_left(node)
        return node

    def search(self, value: Any) -> Any:
        """Return the stored value equal to ``value``; raise KeyError if absent."""
        node = self._root
        while node is not None:
            if node.value == value:
                return node.value
            node = node.left if node.value > value else node.right
        raise KeyError(value)

    def remove(self, value: Any) -> None:
        """Remove the value matching ``value``; do nothing if there is none."""
        self._root = self._remove(value, self._root)

    def _remove(self, value: Any, node: _Node | None) -> _Node | None:
        if node is None:
            return None
        if value < node.value:
            node.left = self._remove(value, node.left)
        elif value > node.value:
            node.right = self._remove(value, node.right)
        elif node.left is None or node.right is None:
            node = node.left if node.left is not None else node.right
        else:
            successor = _min_node(node.right)
            node.value = successor.value
            node.right = self._remove(successor.value, node.right)

        if node is None:
            return None

        _update_height(node)
        balance = _balance(node)

        if balance > 1 and _balance(node.left) >= 0:
            return _rotate_right(node)
        if balance > 1 and _balance(node.left) < 0:
            node.left = _rotate_left(node.left)
            return _rotate_right(node)
        if balance < -1 and _balance(node.right) <= 0:
            return _rotate_left(node)
        if balance < -1 and _balance(node.right) > 0:
            node.right = _rotate_right(node.right)
            return _rotate_left(node)
        return node

    def preorder(self) -> Iterator[Any]:
        """Yield values node first, then left subtree, then right subtree."""
        yield from self._preorder(self._root)

    def _preorder(self, node: _Node | None) -> Iterator[Any]:
        if node is None:
            return
        yield node.value
        yield from self._preorder(node.left)
        yield from self._preorder(node.right)

    def inorder(self) -> Iterator[Any]:
        """Yield values in ascending order."""
        yield from self._inorder(self._root)

    def _inorder(self, node: _Node | None) -> Iterator[Any]:
        if node is None:
            return
        yield from self._inorder(node.left)
        yield node.value
        yield from self._inorder(node.right)

    def postorder(self) -> Iterator[Any]:
        """Yield values left subtree, right subtree, then node."""
        yield from self._postorder(self._root)

    def _postorder(self, node: _Node | None) -> Iterator[Any]:
        if node is None:
            return
        yield from self._postorder(node.left)
        yield from self._postorder(node.right)
        yield node.value

    def is_empty(self) -> bool:
        """Return True when the tree holds no values."""
        return self._root is None

    def balance(self) -> int:
        """Return the balance factor of the root (left height minus right)."""
        return _balance(self._root)

    def height(self) -> int:
        """Return the height of the tree; 0 when empty."""
        return _height(self._root)

    def render(self) -> str:
        """Draw the tree sideways, right subtree on top."""
        if self._root is None:
            return ""
        lines: list[str] = []
        self._root.render(False, "", lines)
        return "\n".join(lines)