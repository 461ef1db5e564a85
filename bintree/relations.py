"""Family relations between nodes of a binary tree."""

from __future__ import annotations

from typing import Optional

from bintree.node import Node


def sibling(node: Optional[Node]) -> Optional[Node]:
    """Return the other child of the node's parent, or None."""
    if node is None or node.parent is None:
        return None
    parent = node.parent
    if parent.left is node:
        return parent.right
    if parent.right is node:
        return parent.left
    return None


def uncle(node: Optional[Node]) -> Optional[Node]:
    """Return the sibling of the node's parent, or None."""
    if node is None or node.parent is None or node.parent.parent is None:
        return None
    return sibling(node.parent)


def _ancestry(node: Optional[Node]):
    while node is not None:
        yield node
        node = node.parent


def lowest_common_ancestor(first: Optional[Node], second: Optional[Node]) -> Optional[Node]:
    """Return the deepest node that is an ancestor of both (a node counts as its own)."""
    if first is None or second is None:
        return None
    seen = {id(node) for node in _ancestry(second)}
    return next((node for node in _ancestry(first) if id(node) in seen), None)