"""Binary tree nodes linked to their parent and children."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass(eq=False)
class Node:
    """A binary tree node holding an integer value.

    Creating a node with a parent only records the parent link; the parent's
    child slots are left untouched. Use :meth:`insert_left` or
    :meth:`insert_right` to attach a new child.
    """

    value: int
    parent: Optional[Node] = field(default=None, repr=False)
    left: Optional[Node] = None
    right: Optional[Node] = None

    def insert_left(self, value: int) -> Node:
        """Insert a new left child; any existing left child becomes its left child."""
        child = Node(value, parent=self)
        if self.left is not None:
            child.left = self.left
            self.left.parent = child
        self.left = child
        return child

    def insert_right(self, value: int) -> Node:
        """Insert a new right child; any existing right child becomes its right child."""
        child = Node(value, parent=self)
        if self.right is not None:
            child.right = self.right
            self.right.parent = child
        self.right = child
        return child

    def is_leaf(self) -> bool:
        """Return True if the node has no children."""
        return self.left is None and self.right is None

    def is_root(self) -> bool:
        """Return True if the node has no parent."""
        return self.parent is None

    def depth(self) -> int:
        """Return the number of edges between the node and the root."""
        depth = 0
        node = self
        while node.parent is not None:
            node = node.parent
            depth += 1
        return depth

    def sibling(self) -> Optional[Node]:
        """Return the other child of this node's parent, or None."""
        parent = self.parent
        if parent is None:
            return None
        return parent.right if parent.left is self else parent.left

    def uncle(self) -> Optional[Node]:
        """Return the sibling of this node's parent, or None."""
        if self.parent is None:
            return None
        return self.parent.sibling()

    def delete(self) -> None:
        """Detach this subtree from its parent and unlink every node in it."""
        parent = self.parent
        if parent is not None:
            if parent.left is self:
                parent.left = None
            if parent.right is self:
                parent.right = None
        stack = [self]
        while stack:
            node = stack.pop()
            for child in (node.left, node.right):
                if child is not None:
                    stack.append(child)
            node.parent = node.left = node.right = None