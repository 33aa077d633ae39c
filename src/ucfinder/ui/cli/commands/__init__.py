"""Command implementations for the ucfinder CLI."""

from .browse import block, blocks, chart
from .lookup import info, step
from .search import regex, search


__all__ = ["block", "blocks", "chart", "info", "regex", "search", "step"]
