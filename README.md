# bintree

bintree is a small library of binary tree nodes. Each node holds an integer and links to its parent and to its children. The library also gives you traversals, size and shape measures, family lookups and an ASCII drawing of a tree.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Building a tree

```python
from bintree.node import Node

root = Node(98)            # the parent defaults to None
left = root.insert_left(12)
right = root.insert_right(402)
left.insert_right(54)
right.insert_right(128)
```

A `Node` has four attributes: `value`, `parent`, `left` and `right`.

`insert_left(value)` and `insert_right(value)` create a new node and return it. The new node goes between the parent and any child already on that side. The old child moves down and becomes the new node's child on the same side.

- `is_leaf()` is true when the node has no children.
- `is_root()` is true when the node has no parent.
- `delete()` removes the node from its parent. It also clears the parent and child links of every node in its subtree.

## Printing

```python
from bintree.printer import render, print_tree

print_tree(root)           # writes to standard output
print_tree(root, some_file)
text = render(root)        # the same drawing, as a string
```

Every value is drawn zero-padded to three digits in parentheses, such as `(098)`. A line of dashes links each parent to its children, and a dot marks the point where the line joins a child. `render` returns one line for each level of the tree, and each line ends with a newline. It returns an empty string for `None`.

## Traversals

`bintree.traversal` has three generators. Each one yields node values:

- `preorder(tree)`: the node, then its left subtree, then its right subtree.
- `inorder(tree)`: the left subtree, then the node, then the right subtree.
- `postorder(tree)`: the left subtree, then the right subtree, then the node.

Each one yields nothing when the tree is `None`.

## Metrics

`bintree.metrics` has these functions:

- `height(tree)`: the number of edges on the longest downward path. It is 0 for a leaf and 0 for `None`.
- `depth(node)`: the number of edges from the node up to its root. It is 0 for `None`.
- `size(tree)`: the number of nodes.
- `leaves(tree)`: the number of nodes that have no children.
- `internal_nodes(tree)`: the number of nodes that have at least one child.
- `balance(tree)`: the number of levels in the left subtree minus the number of levels in the right subtree. It is 0 for `None`.
- `is_full(tree)`: true when every node has either no children or two children.
- `is_perfect(tree)`: true when the tree is full and all of its leaves are at the same depth.

`is_full` and `is_perfect` both return `False` for `None`.

## Relations

`bintree.relations` has these functions:

- `sibling(node)`: the other child of the node's parent.
- `uncle(node)`: the sibling of the node's parent.
- `lowest_common_ancestor(first, second)`: the deepest node that is an ancestor of both nodes. A node counts as its own ancestor.

Each of these returns `None` when there is no such node.

## What it does not do

bintree is a library only. It has no command-line tool. Trees exist only in memory: the package does not save them to disk or load them from disk. It does not keep values ordered the way a search tree does, and it does not rebalance trees.