"""Primary public API for ucfinder."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version as _pkg_version

from ucfinder.api import CharacterFinder, DataLoader, load_finder_sync
from ucfinder.core import (
    Block,
    CharacterDetails,
    CharacterRecord,
    ChartCell,
    ChartPage,
    ConfigError,
    EntityMapping,
    FinderError,
    InvalidPatternError,
    LoadError,
    Match,
    NavigationEngine,
    ParseError,
    SearchEngine,
    SearchTimeoutError,
    UnicodeIndex,
    codepoint_to_text,
    codepoint_to_utf8_hex,
    codepoint_to_utf16_hex,
    decimal_to_hex,
    hex_to_decimal,
    load_index,
    text_to_codepoint,
)
from ucfinder.core.config import FinderConfig, load_config
from ucfinder.version import get_version


try:
    __version__ = _pkg_version("ucfinder")
except PackageNotFoundError:
    __version__ = "0.0.0"


__all__ = [
    "Block",
    "CharacterDetails",
    "CharacterFinder",
    "CharacterRecord",
    "ChartCell",
    "ChartPage",
    "ConfigError",
    "DataLoader",
    "EntityMapping",
    "FinderConfig",
    "FinderError",
    "InvalidPatternError",
    "LoadError",
    "Match",
    "NavigationEngine",
    "ParseError",
    "SearchEngine",
    "SearchTimeoutError",
    "UnicodeIndex",
    "__version__",
    "codepoint_to_text",
    "codepoint_to_utf16_hex",
    "codepoint_to_utf8_hex",
    "decimal_to_hex",
    "get_version",
    "hex_to_decimal",
    "load_config",
    "load_finder_sync",
    "load_index",
    "text_to_codepoint",
]
