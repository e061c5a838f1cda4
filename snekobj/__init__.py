"""Dynamic runtime objects with manual reference counting, and a growable LIFO stack."""

__version__ = "0.1.0"
__all__ = ["objects", "stack"]