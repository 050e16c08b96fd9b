"""Small utilities for text layout, paths, linked lists, terminal messages and processes."""

__version__ = "0.1.0"