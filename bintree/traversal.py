"""Depth-first traversals of a binary tree yielding node values."""

from __future__ import annotations

from typing import Iterator, Optional

from bintree.node import Node


def preorder(tree: Optional[Node]) -> Iterator[int]:
    """Yield values root first, then the left subtree, then the right."""
    stack = [tree] if tree is not None else []
    while stack:
        node = stack.pop()
        yield node.value
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)


def inorder(tree: Optional[Node]) -> Iterator[int]:
    """Yield values of the left subtree, then the root, then the right."""
    stack: list[Node] = []
    node = tree
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node.value
        node = node.right


def postorder(tree: Optional[Node]) -> Iterator[int]:
    """Yield values of the left subtree, then the right, then the root."""
    stack = [tree] if tree is not None else []
    reversed_order: list[int] = []
    while stack:
        node = stack.pop()
        reversed_order.append(node.value)
        if node.left is not None:
            stack.append(node.left)
        if node.right is not None:
            stack.append(node.right)
    yield from reversed(reversed_order)