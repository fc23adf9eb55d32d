"""Binary trees with parent links, traversals and shape measures."""

__version__ = "0.1.0"
__all__ = ["measure", "node", "traversal"]