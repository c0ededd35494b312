"""Shortest-time planning over states and timed actions described in JSON."""

__version__ = "0.1.0"
__all__ = ["__version__"]