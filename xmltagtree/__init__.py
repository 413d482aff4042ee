"""Check XML tag nesting, and build, edit, search and write small XML trees."""

__version__ = "0.1.0"
__all__ = ["tagstack", "validation", "tree", "writer", "cli"]