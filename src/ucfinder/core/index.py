"""The in-memory character index shared by the search and navigation engines."""

from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence
from dataclasses import dataclass, field
from types import MappingProxyType

from ucfinder.core.encoding import decimal_to_hex
from ucfinder.core.models import Block, CharacterRecord, EntityMapping


@dataclass(frozen=True, slots=True)
class UnicodeIndex:
    """Read-only view over every record, block and entity of one data file.

    ``code_list`` holds the record keys in ascending codepoint order; search
    engines scan it to return deterministic, ordered results.
    """

    records: Mapping[str, CharacterRecord] = field(default_factory=dict)
    code_list: Sequence[str] = ()
    blocks: Sequence[Block] = ()
    entities: EntityMapping = field(default_factory=EntityMapping)

    def __post_init__(self) -> None:
        object.__setattr__(self, "records", MappingProxyType(dict(self.records)))
        object.__setattr__(self, "code_list", tuple(self.code_list))
        object.__setattr__(self, "blocks", tuple(self.blocks))

    def lookup(self, hex_code: str) -> CharacterRecord | None:
        """Return the record stored under ``hex_code`` or ``None``."""
        return self.records.get(hex_code)

    def record_for(self, codepoint: int) -> CharacterRecord | None:
        if codepoint < 0:
            return None
        return self.records.get(decimal_to_hex(codepoint, 4))

    def __contains__(self, codepoint: object) -> bool:
        return isinstance(codepoint, int) and self.record_for(codepoint) is not None

    def __len__(self) -> int:
        return len(self.code_list)

    def __iter__(self) -> Iterator[CharacterRecord]:
        for code in self.code_list:
            yield self.records[code]

    @property
    def last_codepoint(self) -> int | None:
        if not self.code_list:
            return None
        return self.records[self.code_list[-1]].codepoint


__all__ = ["UnicodeIndex"]
