"""Contest problem solvers and number theory helpers."""

__version__ = "0.1.0"