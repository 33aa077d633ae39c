"""Programmatic entry points: load character data, then query it."""

from ucfinder.api.finder import CharacterFinder
from ucfinder.api.loader import DataLoader, load_finder_sync


__all__ = ["CharacterFinder", "DataLoader", "load_finder_sync"]
