"""Dining philosophers table setup with text, number, formatting and line-reading helpers."""

__version__ = "0.1.0"
__all__ = ["config", "linereader", "numbers", "printf", "simulation", "textutils"]