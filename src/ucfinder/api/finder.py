"""Ready-to-query facade bundling one index with its engines."""

from __future__ import annotations

from ucfinder.core.config import FinderConfig
from ucfinder.core.details import CharacterDetails, describe
from ucfinder.core.encoding import decimal_to_hex
from ucfinder.core.index import UnicodeIndex
from ucfinder.core.models import Block, CharacterRecord
from ucfinder.core.navigation import ChartPage, NavigationEngine
from ucfinder.core.parser import load_index
from ucfinder.core.search import Match, SearchEngine


REGEX_DELIMITER = "/"


class CharacterFinder:
    """Answer lookups, searches and navigation requests for a loaded index."""

    def __init__(self, index: UnicodeIndex, *, config: FinderConfig | None = None) -> None:
        self.index = index
        self.config = config or FinderConfig()
        self.search_engine = SearchEngine(
            index,
            regex_timeout=self.config.regex_timeout,
            regex_match_alias=self.config.regex_match_alias,
        )
        self.navigation = NavigationEngine(index)

    @classmethod
    def from_text(cls, raw_text: str, *, config: FinderConfig | None = None) -> CharacterFinder:
        return cls(load_index(raw_text), config=config)

    def lookup(self, hex_code: str) -> CharacterRecord | None:
        return self.index.lookup(hex_code)

    def lookup_codepoint(self, codepoint: int) -> CharacterRecord | None:
        return self.index.lookup(decimal_to_hex(codepoint, 4))

    def search(self, text: str) -> list[Match]:
        return self.search_engine.search(text)

    def regex_search(self, pattern: str) -> list[Match]:
        return self.search_engine.regex_search(pattern)

    def query(self, text: str) -> list[Match]:
        """Dispatch ``/pattern/`` to regex search and anything else to search.

        An unterminated ``/...`` query is treated as still being typed and
        yields no results.
        """
        if not text:
            return []
        if text.startswith(REGEX_DELIMITER):
            if len(text) < 3 or not text.endswith(REGEX_DELIMITER):
                return []
            return self.regex_search(text[1:-1])
        return self.search(text)

    def describe(self, codepoint: int) -> CharacterDetails:
        return describe(self.index, codepoint, navigation=self.navigation)

    def block_for_codepoint(self, codepoint: int) -> Block | None:
        return self.navigation.block_for_codepoint(codepoint)

    def next_assigned_codepoint(self, codepoint: int, direction: int) -> int | None:
        return self.navigation.next_assigned_codepoint(codepoint, direction)

    def block_relative_jump(self, codepoint: int, direction: int) -> Block | None:
        return self.navigation.block_relative_jump(codepoint, direction)

    def chart_page(self, base: int, current: int | None = None) -> ChartPage:
        return self.navigation.chart_page(base, current=current)

    def turn_chart_page(
        self, base: int, increment: int, current: int | None = None
    ) -> ChartPage:
        return self.navigation.turn_chart_page(base, increment, current=current)


__all__ = ["CharacterFinder"]
