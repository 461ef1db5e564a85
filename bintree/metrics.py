"""Measurements and shape checks for binary trees."""

from __future__ import annotations

from typing import Optional

from bintree.node import Node


def height(tree: Optional[Node]) -> int:
    """Return the number of edges on the longest downward path; 0 for None or a leaf."""
    if tree is None:
        return 0
    left = 1 + height(tree.left) if tree.left is not None else 0
    right = 1 + height(tree.right) if tree.right is not None else 0
    return max(left, right)


def depth(node: Optional[Node]) -> int:
    """Return the number of edges from the node up to its root; 0 for None."""
    count = 0
    while node is not None and node.parent is not None:
        count += 1
        node = node.parent
    return count


def size(tree: Optional[Node]) -> int:
    """Return the number of nodes in the tree."""
    if tree is None:
        return 0
    return size(tree.left) + 1 + size(tree.right)


def leaves(tree: Optional[Node]) -> int:
    """Return the number of nodes without children."""
    if tree is None:
        return 0
    if tree.is_leaf():
        return 1
    return leaves(tree.left) + leaves(tree.right)


def internal_nodes(tree: Optional[Node]) -> int:
    """Return the number of nodes with at least one child."""
    if tree is None or tree.is_leaf():
        return 0
    return internal_nodes(tree.left) + internal_nodes(tree.right) + 1


def _levels(tree: Optional[Node]) -> int:
    if tree is None:
        return 0
    return max(_levels(tree.left), _levels(tree.right)) + 1


def balance(tree: Optional[Node]) -> int:
    """Return the left subtree's height minus the right subtree's; 0 for None."""
    if tree is None:
        return 0
    return _levels(tree.left) - _levels(tree.right)


def is_full(tree: Optional[Node]) -> bool:
    """Return True if every node has either zero or two children."""
    if tree is None:
        return False
    if tree.is_leaf():
        return True
    if tree.left is not None and tree.right is not None:
        return is_full(tree.left) and is_full(tree.right)
    return False


def _perfect_levels(tree: Node) -> int:
    """Return the level count of a perfect subtree, or 0 when it is not perfect."""
    if tree.is_leaf():
        return 1
    if tree.left is None or tree.right is None:
        return 0
    left = 1 + _perfect_levels(tree.left)
    right = 1 + _perfect_levels(tree.right)
    return right if left == right else 0


def is_perfect(tree: Optional[Node]) -> bool:
    """Return True if the tree is perfect; False for None."""
    if tree is None:
        return False
    return _perfect_levels(tree) != 0