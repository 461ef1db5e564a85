"""Text rendering of binary trees."""

from __future__ import annotations

import sys
from typing import Iterator, Optional, TextIO

from bintree.node import Node


def _label(value: int) -> str:
    return f"({value:03d})"


def _nodes(tree: Node) -> Iterator[Node]:
    stack = [tree]
    while stack:
        node = stack.pop()
        yield node
        stack.extend(child for child in (node.left, node.right) if child is not None)


def _height(tree: Node) -> int:
    left = 1 + _height(tree.left) if tree.left is not None else 0
    right = 1 + _height(tree.right) if tree.right is not None else 0
    return max(left, right)


def _place(node: Optional[Node], offset: int, depth: int, rows: list[list[str]]) -> int:
    """Draw the subtree into rows; return the width it occupies."""
    if node is None:
        return 0
    label = _label(node.value)
    width = len(label)
    is_left = node.parent is not None and node.parent.left is node
    left = _place(node.left, offset, depth + 1, rows)
    right = _place(node.right, offset + left + width, depth + 1, rows)
    start = offset + left
    rows[depth][start:start + width] = label
    if depth:
        above = rows[depth - 1]
        if is_left:
            begin, length = offset + left + width // 2, width + right
        else:
            begin, length = max(0, offset - width // 2), left + width
        above[begin:begin + length] = "-" * length
        above[offset + left + width // 2] = "."
    return left + width + right


def render(tree: Optional[Node]) -> str:
    """Return the tree drawn as text, one newline-terminated line per level."""
    if tree is None:
        return ""
    labels = [len(_label(node.value)) for node in _nodes(tree)]
    line_width = sum(labels) + max(labels) + 2
    rows = [[" "] * line_width for _ in range(_height(tree) + 1)]
    _place(tree, 0, 0, rows)
    lines = []
    for row in rows:
        text = "".join(row)
        lines.append(text[:2] + text[2:].rstrip(" ") + "\n")
    return "".join(lines)


def print_tree(tree: Optional[Node], file: Optional[TextIO] = None) -> None:
    """Write the rendered tree to file, or to standard output."""
    (file if file is not None else sys.stdout).write(render(tree))