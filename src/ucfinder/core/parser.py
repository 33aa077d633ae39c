"""Parser for the tab-separated, delta-encoded character data file.

Line shapes

`[START\tEND\tTITLE\tFILENAME\tPDF_URL`
: Block definition. Bounds are bare hex digits.

`&NAME\tHEX`
: HTML entity name and the hex code it refers to.

`OFFSET\tDESCRIPTION[\tALIAS]`
: Character record. ``OFFSET`` is the decimal distance from the previous
  record's codepoint; an empty offset means 1. The running codepoint starts
  at 0, so an empty offset on the first record yields U+0001.
"""

from __future__ import annotations

from collections.abc import Iterator
import logging

from ucfinder.core.encoding import MAX_CODEPOINT, decimal_to_hex, hex_to_decimal
from ucfinder.core.exceptions import ParseError
from ucfinder.core.index import UnicodeIndex
from ucfinder.core.models import Block, CharacterRecord, EntityMapping


logger = logging.getLogger(__name__)

BLOCK_MARKER = "["
ENTITY_MARKER = "&"
BLOCK_FIELDS = 5
ENTITY_FIELDS = 2
CHARACTER_FIELDS = 2


def iter_lines(raw_text: str) -> Iterator[tuple[int, str]]:
    """Yield ``(line_number, line)`` for every newline-terminated line.

    Text following the final newline is an incomplete line and is dropped.
    """
    start = 0
    line_number = 0
    while True:
        end = raw_text.find("\n", start)
        if end < 0:
            break
        line_number += 1
        line = raw_text[start:end]
        if line.endswith("\r"):
            line = line[:-1]
        yield line_number, line
        start = end + 1
    if start < len(raw_text):
        logger.debug("Ignoring unterminated trailing line %r", raw_text[start : start + 40])


class DataParser:
    """Build a :class:`UnicodeIndex` from raw data file text in a single pass."""

    def __init__(self) -> None:
        self._reset()

    def _reset(self) -> None:
        self._records: dict[str, CharacterRecord] = {}
        self._code_list: list[str] = []
        self._blocks: list[Block] = []
        self._name_to_code: dict[str, str] = {}
        self._code_to_name: dict[str, str] = {}
        self._current = 0

    def parse(self, raw_text: str) -> UnicodeIndex:
        self._reset()
        for line_number, line in iter_lines(raw_text):
            fields = line.split("\t")
            if line.startswith(BLOCK_MARKER):
                fields[0] = fields[0][len(BLOCK_MARKER) :]
                self._add_block(fields, line_number, line)
            elif line.startswith(ENTITY_MARKER):
                fields[0] = fields[0][len(ENTITY_MARKER) :]
                self._add_entity(fields, line_number, line)
            else:
                self._add_character(fields, line_number, line)

        index = UnicodeIndex(
            records=self._records,
            code_list=self._code_list,
            blocks=self._blocks,
            entities=EntityMapping(
                name_to_code=self._name_to_code,
                code_to_name=self._code_to_name,
            ),
        )
        logger.debug(
            "Parsed %d characters, %d blocks and %d entities.",
            len(self._code_list),
            len(self._blocks),
            len(self._name_to_code),
        )
        return index

    @staticmethod
    def _require(fields: list[str], count: int, kind: str, line_number: int, line: str) -> None:
        if len(fields) < count:
            raise ParseError(
                f"{kind} line needs {count} tab-separated fields, found {len(fields)}",
                line_number=line_number,
                line=line,
            )

    @staticmethod
    def _hex(value: str, line_number: int, line: str) -> int:
        try:
            return hex_to_decimal(value)
        except ParseError as exc:
            raise ParseError(str(exc), line_number=line_number, line=line) from exc

    def _add_block(self, fields: list[str], line_number: int, line: str) -> None:
        self._require(fields, BLOCK_FIELDS, "block", line_number, line)
        start_hex, end_hex, title, filename, pdf_url = fields[:BLOCK_FIELDS]
        start = self._hex(start_hex, line_number, line)
        end = self._hex(end_hex, line_number, line)
        if start > end:
            raise ParseError(
                f"block starts after it ends ({start_hex} > {end_hex})",
                line_number=line_number,
                line=line,
            )
        if self._blocks and start <= self._blocks[-1].end:
            raise ParseError(
                f"block overlaps or precedes {self._blocks[-1].title!r}",
                line_number=line_number,
                line=line,
            )
        self._blocks.append(
            Block(
                start=start,
                end=end,
                title=title,
                filename=filename,
                pdf_url=pdf_url,
                ordinal=len(self._blocks),
                start_hex=start_hex,
                end_hex=end_hex,
            )
        )

    def _add_entity(self, fields: list[str], line_number: int, line: str) -> None:
        self._require(fields, ENTITY_FIELDS, "entity", line_number, line)
        name, code = fields[0], fields[1]
        self._name_to_code[name] = code
        self._code_to_name[code] = name

    def _add_character(self, fields: list[str], line_number: int, line: str) -> None:
        self._require(fields, CHARACTER_FIELDS, "character", line_number, line)
        offset_text = fields[0]
        if offset_text == "":
            offset = 1
        elif offset_text.isascii() and offset_text.isdigit():
            offset = int(offset_text, 10)
        else:
            raise ParseError(
                f"offset is not a decimal number: {offset_text!r}",
                line_number=line_number,
                line=line,
            )

        self._current += offset
        if self._current > MAX_CODEPOINT:
            raise ParseError(
                f"codepoint {self._current:#X} is beyond U+10FFFF",
                line_number=line_number,
                line=line,
            )
        code = decimal_to_hex(self._current, 4)
        if code in self._records:
            raise ParseError(
                f"duplicate record for U+{code}",
                line_number=line_number,
                line=line,
            )

        alias = fields[2] if len(fields) > 2 and fields[2] else None
        self._records[code] = CharacterRecord(
            codepoint=self._current,
            hex_code=code,
            description=fields[1],
            alias=alias,
        )
        self._code_list.append(code)


def load_index(raw_text: str) -> UnicodeIndex:
    """Parse ``raw_text`` into a fresh index."""
    return DataParser().parse(raw_text)


__all__ = ["DataParser", "iter_lines", "load_index"]
