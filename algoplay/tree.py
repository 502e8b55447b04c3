"""Binary tree nodes, depth-first traversals and a binary search tree."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any


@dataclass
class Node:
    """A binary tree node."""

    value: Any
    left: Node | None = None
    right: Node | None = None


def pre_order(root: Node | None) -> Iterator[Any]:
    """Yield values node, left subtree, right subtree."""
    if root is None:
        return
    yield root.value
    yield from pre_order(root.left)
    yield from pre_order(root.right)


def in_order(root: Node | None) -> Iterator[Any]:
    """Yield values left subtree, node, right subtree."""
    if root is None:
        return
    yield from in_order(root.left)
    yield root.value
    yield from in_order(root.right)


def post_order(root: Node | None) -> Iterator[Any]:
    """Yield values left subtree, right subtree, node."""
    if root is None:
        return
    yield from post_order(root.left)
    yield from post_order(root.right)
    yield root.value


def _insert(node: Node | None, value: Any) -> Node:
    if node is None:
        return Node(value)
    if value < node.value:
        node.left = _insert(node.left, value)
    elif value > node.value:
        node.right = _insert(node.right, value)
    return node


def _find_max(node: Node) -> Node:
    while node.right is not None:
        node = node.right
    return node


def _delete(node: Node | None, target: Any) -> Node | None:
    if node is None:
        return None
    if target < node.value:
        node.left = _delete(node.left, target)
    elif target > node.value:
        node.right = _delete(node.right, target)
    elif node.left is None or node.right is None:
        return node.left if node.left is not None else node.right
    else:
        # Two children: take the in-order predecessor's value.
        predecessor = _find_max(node.left)
        node.value = predecessor.value
        node.left = _delete(node.left, predecessor.value)
    return node


class BST:
    """A binary search tree that ignores duplicate values."""

    def __init__(self) -> None:
        self.root: Node | None = None

    def insert(self, value: Any) -> None:
        """Add ``value`` unless it is already present."""
        self.root = _insert(self.root, value)

    def delete(self, value: Any) -> None:
        """Remove ``value`` if present; a missing value is ignored."""
        self.root = _delete(self.root, value)

    def in_order(self) -> list[Any]:
        """Return the stored values in ascending order."""
        return list(in_order(self.root))

    def __contains__(self, value: Any) -> bool:
        node = self.root
        while node is not None:
            if value == node.value:
                return True
            node = node.left if value < node.value else node.right
        return False

    def __iter__(self) -> Iterator[Any]:
        return in_order(self.root)