# bintree

`bintree` is a small binary tree library. Each node holds an integer value and links to its parent and its two children. The library builds trees, walks them in the three classic orders and measures their shape.

## Installation

```
pip install bintree
```

## Building a tree

```python
from bintree.node import Node

root = Node(98)
left = root.insert_left(12)
right = root.insert_right(402)
left.insert_right(54)
right.insert_left(128)
```

`Node.insert_left` and `Node.insert_right` add a new child and return it. If the parent already has a child on that side, the old child moves down and becomes a child of the new node on the same side.

`Node(value, parent=some_node)` only records the parent link on the new node. It does not place the node in either of the parent's child slots. Use the insert methods to attach children.

## Node relations

```python
leaf = left.right
leaf.is_leaf()    # True
root.is_root()    # True
leaf.depth()      # 2, the number of edges up to the root
leaf.sibling()    # None, since left has no left child
leaf.uncle()      # right
```

`sibling()` returns the parent's other child, or `None` when the node has no parent. `uncle()` returns the sibling of the parent, or `None` when there is no grandparent.

`node.delete()` detaches the subtree rooted at `node` from its parent and clears the parent and child links of every node in it.

## Traversals

```python
from bintree.traversal import preorder, inorder, postorder

list(preorder(root))   # [98, 12, 54, 402, 128]
list(inorder(root))    # [12, 54, 98, 128, 402]
list(postorder(root))  # [54, 12, 128, 402, 98]
```

Each traversal is a generator of node values. For `None` it yields nothing.

## Measures

```python
from bintree.measure import (
    height, size, leaves, internal_nodes, balance, is_full, is_perfect,
)

height(root)          # 2 (counted in edges)
size(root)            # 5
leaves(root)          # 2
internal_nodes(root)  # 3
balance(root)         # 0
is_full(root)         # False
is_perfect(root)      # False
```

- `height` counts edges on the longest path down from the node; a single leaf has height 0.
- `balance` is the height of the left subtree minus the height of the right subtree, where a missing subtree counts as -1.
- `is_full` is true when every node has either no children or two.
- `is_perfect` is true when the tree holds exactly `2 ** (height + 1) - 1` nodes.

An empty tree (`None`) has height, size, leaf count, internal node count and balance of 0. It is neither full nor perfect.

## What it does not do

The package has no function that prints or draws a tree. Inspect a tree through the traversals, the measures and the node attributes `value`, `parent`, `left` and `right`.

## Running the tests

```
pip install -e ".[test]"
pytest
```