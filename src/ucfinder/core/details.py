"""Property sheet for a single codepoint."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ucfinder.core.encoding import (
    codepoint_to_utf8_hex,
    codepoint_to_utf16_hex,
    decimal_to_hex,
    printable_text,
)
from ucfinder.core.index import UnicodeIndex
from ucfinder.core.models import Block
from ucfinder.core.navigation import NavigationEngine


@dataclass(frozen=True, slots=True)
class CharacterDetails:
    codepoint: int
    hex_code: str
    character: str
    description: str | None
    alias: str | None
    html_entity: str
    utf8: str
    utf16: str
    block: Block | None = None

    @property
    def code_point(self) -> str:
        return f"U+{self.hex_code}"

    @property
    def assigned(self) -> bool:
        return self.description is not None

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "code_point": self.code_point,
            "character": self.character,
            "html_entity": self.html_entity,
            "utf8": self.utf8,
            "utf16": self.utf16,
        }
        if self.description:
            payload["description"] = self.description
        if self.alias:
            payload["alias"] = self.alias
        if self.block is not None:
            payload["block"] = {
                "title": self.block.title,
                "filename": self.block.filename,
                "pdf_url": self.block.pdf_url,
            }
        return payload


def html_entity_text(index: UnicodeIndex, codepoint: int) -> str:
    """Return ``&#N;`` plus the named entity when the index knows one."""
    entity = f"&#{codepoint};"
    name = index.entities.name_for(decimal_to_hex(codepoint, 4))
    if name:
        entity = f"{entity} or &{name};"
    return entity


def describe(
    index: UnicodeIndex,
    codepoint: int,
    *,
    navigation: NavigationEngine | None = None,
) -> CharacterDetails:
    """Collect everything worth showing about ``codepoint``."""
    navigation = navigation or NavigationEngine(index)
    hex_code = decimal_to_hex(codepoint, 4)
    record = index.lookup(hex_code)
    description = record.description if record and record.description else None
    return CharacterDetails(
        codepoint=codepoint,
        hex_code=hex_code,
        character=printable_text(codepoint),
        description=description,
        alias=record.alias if record else None,
        html_entity=html_entity_text(index, codepoint),
        utf8=codepoint_to_utf8_hex(codepoint),
        utf16=codepoint_to_utf16_hex(codepoint),
        block=navigation.block_for_codepoint(codepoint),
    )


__all__ = ["CharacterDetails", "describe", "html_entity_text"]
