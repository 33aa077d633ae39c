"""Exact-match, substring and regular expression search over the index."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
import re
import time

import regex

from ucfinder.core.encoding import decimal_to_hex, hex_to_decimal, printable_text
from ucfinder.core.exceptions import InvalidPatternError, SearchTimeoutError
from ucfinder.core.index import UnicodeIndex
from ucfinder.core.models import CharacterRecord


# Scanning stops once the result list grows past this many entries.
RESULT_LIMIT = 10

DECIMAL_REFERENCE = re.compile(r"&#([0-9]+);?")
DECIMAL_NUMBER = re.compile(r"([0-9]+)")
HEX_REFERENCE = re.compile(r"&#x([0-9a-f]+);?", re.IGNORECASE)
HEX_NUMBER = re.compile(r"(?:U\+)?([0-9a-f]+)", re.IGNORECASE)
ENTITY_REFERENCE = re.compile(r"(?:&#?)?(\w+);?", re.ASCII)


@dataclass(frozen=True, slots=True)
class Match:
    """A single search hit, ready for display."""

    hex_code: str
    character: str
    display_label: str
    description: str
    alias: str | None = None
    context: str | None = None

    @property
    def code_point(self) -> str:
        return f"U+{self.hex_code}"


class _Results:
    """Ordered, deduplicated accumulator shared by the search phases."""

    def __init__(self) -> None:
        self.matches: list[Match] = []
        self.seen: set[str] = set()

    @property
    def full(self) -> bool:
        return len(self.matches) > RESULT_LIMIT

    def add(self, record: CharacterRecord, context: str | None = None) -> None:
        if record.hex_code in self.seen:
            return
        label = f"{context} {record.description}" if context else record.description
        self.matches.append(
            Match(
                hex_code=record.hex_code,
                character=printable_text(record.codepoint),
                display_label=label,
                description=record.description,
                alias=record.alias,
                context=context,
            )
        )
        self.seen.add(record.hex_code)


class SearchEngine:
    """Answer search queries against one immutable :class:`UnicodeIndex`."""

    def __init__(
        self,
        index: UnicodeIndex,
        *,
        regex_timeout: float | None = 1.0,
        regex_match_alias: bool = False,
    ) -> None:
        self.index = index
        self.regex_timeout = regex_timeout
        self.regex_match_alias = regex_match_alias

    def _records(self) -> Iterator[CharacterRecord]:
        records = self.index.records
        for code in self.index.code_list:
            yield records[code]

    def search(self, text: str) -> list[Match]:
        """Resolve exact references first, then scan descriptions and aliases."""
        results = _Results()
        if not text:
            return results.matches
        self._add_exact_matches(results, text)

        target = text.upper()
        for record in self._records():
            if results.full:
                break
            if target in record.description.upper() or (
                record.alias and target in record.alias.upper()
            ):
                results.add(record)
        return results.matches

    def exact_matches(self, text: str) -> list[Match]:
        """Return only the numeric-reference and entity-name hits for ``text``."""
        results = _Results()
        if text:
            self._add_exact_matches(results, text)
        return results.matches

    def _add_exact_matches(self, results: _Results, text: str) -> None:
        index = self.index
        match = DECIMAL_REFERENCE.fullmatch(text) or DECIMAL_NUMBER.fullmatch(text)
        if match:
            value = int(match.group(1), 10)
            record = index.lookup(decimal_to_hex(value, 4))
            if record is not None:
                results.add(record, f"[Decimal: {value}]")

        match = HEX_REFERENCE.fullmatch(text) or HEX_NUMBER.fullmatch(text)
        if match:
            record = index.lookup(decimal_to_hex(hex_to_decimal(match.group(1)), 4))
            if record is not None:
                results.add(record)

        match = ENTITY_REFERENCE.fullmatch(text)
        name = match.group(1) if match else text
        entities = index.entities
        for candidate in (name, name.lower()):
            code = entities.code_for(candidate)
            if code is None:
                continue
            record = index.lookup(code)
            if record is not None:
                results.add(record, f"[&{candidate};]")
            break

    def regex_search(self, pattern: str) -> list[Match]:
        """Match a case-insensitive regular expression against descriptions.

        Aliases are only consulted when ``regex_match_alias`` is enabled.
        """
        try:
            compiled = regex.compile(pattern, regex.IGNORECASE)
        except regex.error as exc:
            raise InvalidPatternError(pattern, str(exc)) from exc

        deadline = None
        if self.regex_timeout is not None:
            deadline = time.monotonic() + self.regex_timeout

        results = _Results()
        for record in self._records():
            if results.full:
                break
            texts = [record.description]
            if self.regex_match_alias and record.alias:
                texts.append(record.alias)
            if any(self._test(compiled, value, deadline) for value in texts):
                results.add(record)
        return results.matches

    def _test(self, compiled: regex.Pattern, value: str, deadline: float | None) -> bool:
        if deadline is None:
            return compiled.search(value) is not None
        remaining = deadline - time.monotonic()
        if remaining <= 0:
            raise SearchTimeoutError(
                f"Pattern {compiled.pattern!r} exceeded the {self.regex_timeout}s search budget."
            )
        try:
            return compiled.search(value, timeout=remaining) is not None
        except TimeoutError as exc:
            raise SearchTimeoutError(
                f"Pattern {compiled.pattern!r} exceeded the {self.regex_timeout}s search budget."
            ) from exc


__all__ = ["Match", "RESULT_LIMIT", "SearchEngine"]
