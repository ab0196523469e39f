"""Runnable demonstrations of parallel programming patterns with threads."""

__version__ = "0.1.0"