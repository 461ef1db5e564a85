"""Parent-linked binary trees: nodes, traversals, metrics, relations and printing."""

__version__ = "0.1.0"
__all__ = ["node", "printer", "relations", "traversal", "metrics"]