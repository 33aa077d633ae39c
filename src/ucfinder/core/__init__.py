"""Indexing, encoding, search and navigation engine.

Architecture
: `DataParser` turns the delta-encoded data file into an immutable
  `UnicodeIndex` in a single pass.
: `SearchEngine` and `NavigationEngine` only read that index, so one index can
  serve any number of concurrent callers.
: The `encoding` helpers convert codepoints to hex, UTF-8 and UTF-16 forms
  without touching the index.
"""

from ucfinder.core.details import CharacterDetails, describe
from ucfinder.core.encoding import (
    codepoint_to_text,
    codepoint_to_utf8_hex,
    codepoint_to_utf16_hex,
    decimal_to_hex,
    hex_to_decimal,
    surrogate_pair,
    text_to_codepoint,
)
from ucfinder.core.exceptions import (
    ConfigError,
    FinderError,
    InvalidPatternError,
    LoadError,
    ParseError,
    SearchTimeoutError,
)
from ucfinder.core.index import UnicodeIndex
from ucfinder.core.models import Block, CharacterRecord, EntityMapping
from ucfinder.core.navigation import ChartCell, ChartPage, NavigationEngine
from ucfinder.core.parser import DataParser, load_index
from ucfinder.core.search import Match, SearchEngine


__all__ = [
    "Block",
    "CharacterDetails",
    "CharacterRecord",
    "ChartCell",
    "ChartPage",
    "ConfigError",
    "DataParser",
    "EntityMapping",
    "FinderError",
    "InvalidPatternError",
    "LoadError",
    "Match",
    "NavigationEngine",
    "ParseError",
    "SearchEngine",
    "SearchTimeoutError",
    "UnicodeIndex",
    "codepoint_to_text",
    "codepoint_to_utf16_hex",
    "codepoint_to_utf8_hex",
    "decimal_to_hex",
    "describe",
    "hex_to_decimal",
    "load_index",
    "surrogate_pair",
    "text_to_codepoint",
]
