"""Immutable records produced by the character data parser."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType


@dataclass(frozen=True, slots=True)
class CharacterRecord:
    """One assigned codepoint and its names."""

    codepoint: int
    hex_code: str
    description: str
    alias: str | None = None

    @property
    def code_point(self) -> str:
        return f"U+{self.hex_code}"


@dataclass(frozen=True, slots=True)
class Block:
    """A named, inclusive codepoint range such as ``Basic Latin``."""

    start: int
    end: int
    title: str
    filename: str
    pdf_url: str
    ordinal: int
    start_hex: str = ""
    end_hex: str = ""

    def __contains__(self, codepoint: object) -> bool:
        return isinstance(codepoint, int) and self.start <= codepoint <= self.end

    @property
    def menu_label(self) -> str:
        """Label used by block selectors: start code followed by the title."""
        return f"{self.start_hex or f'{self.start:04X}'} {self.title}"


@dataclass(frozen=True, slots=True)
class EntityMapping:
    """Bidirectional association between HTML entity names and hex codes."""

    name_to_code: Mapping[str, str] = field(default_factory=dict)
    code_to_name: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "name_to_code", MappingProxyType(dict(self.name_to_code)))
        object.__setattr__(self, "code_to_name", MappingProxyType(dict(self.code_to_name)))

    def code_for(self, name: str) -> str | None:
        return self.name_to_code.get(name)

    def name_for(self, hex_code: str) -> str | None:
        return self.code_to_name.get(hex_code)

    def __len__(self) -> int:
        return len(self.name_to_code)


__all__ = ["Block", "CharacterRecord", "EntityMapping"]
