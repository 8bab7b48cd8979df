"""Linked binary tree nodes with traversals and shape measurements."""

__version__ = "0.1.0"
__all__ = ["__version__"]