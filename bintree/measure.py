"""Measurements and shape checks on binary trees."""

from __future__ import annotations

from typing import Iterator, Optional

from bintree.node import Node


def _walk(tree: Optional[Node]) -> Iterator[Node]:
    stack = [tree] if tree is not None else []
    while stack:
        node = stack.pop()
        yield node
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)


def _edge_height(tree: Optional[Node]) -> int:
    """Height in edges, with an empty tree counting as -1."""
    if tree is None:
        return -1
    return max(_edge_height(tree.left), _edge_height(tree.right)) + 1


def height(tree: Optional[Node]) -> int:
    """Return the height of the tree in edges; 0 for an empty tree or a leaf."""
    if tree is None:
        return 0
    return _edge_height(tree)


def size(tree: Optional[Node]) -> int:
    """Return the number of nodes in the tree."""
    return sum(1 for _ in _walk(tree))


def leaves(tree: Optional[Node]) -> int:
    """Return the number of nodes without children."""
    return sum(1 for node in _walk(tree) if node.is_leaf())


def internal_nodes(tree: Optional[Node]) -> int:
    """Return the number of nodes with at least one child."""
    return sum(1 for node in _walk(tree) if not node.is_leaf())


def balance(tree: Optional[Node]) -> int:
    """Return the left subtree height minus the right subtree height; 0 if empty."""
    if tree is None:
        return 0
    return _edge_height(tree.left) - _edge_height(tree.right)


def is_full(tree: Optional[Node]) -> bool:
    """Return True if every node has zero or two children; False if empty."""
    if tree is None:
        return False
    return all((node.left is None) == (node.right is None) for node in _walk(tree))


def is_perfect(tree: Optional[Node]) -> bool:
    """Return True if all levels are completely filled; False if empty."""
    if tree is None:
        return False
    return size(tree) == (1 << (height(tree) + 1)) - 1