"""Interactive menu-driven task tracker with an in-memory task store."""

__version__ = "0.1.0"
