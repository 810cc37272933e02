"""I/O utilities for writing fetched data to disk."""

from . import writers

__all__ = ["writers"]
