"""Codepoint stepping, block lookup and code chart paging."""

from __future__ import annotations

from dataclasses import dataclass

from ucfinder.core.encoding import MAX_CODEPOINT, decimal_to_hex, printable_text
from ucfinder.core.index import UnicodeIndex
from ucfinder.core.models import Block


CHART_ROWS = 8
CHART_COLUMNS = 16
CHART_PAGE_SIZE = CHART_ROWS * CHART_COLUMNS
LAST_CHART_PAGE = MAX_CODEPOINT - (MAX_CODEPOINT % CHART_PAGE_SIZE)


def chart_base(codepoint: int) -> int:
    """Round ``codepoint`` down to the start of its 128-codepoint chart page."""
    return max(0, codepoint - (codepoint % CHART_PAGE_SIZE))


@dataclass(frozen=True, slots=True)
class ChartCell:
    codepoint: int
    hex_code: str
    character: str | None
    current: bool = False

    @property
    def reserved(self) -> bool:
        return self.character is None


@dataclass(frozen=True, slots=True)
class ChartPage:
    """An 8×16 window of consecutive codepoints."""

    base: int
    rows: tuple[tuple[ChartCell, ...], ...]
    block: Block | None = None

    @property
    def end(self) -> int:
        return self.base + CHART_PAGE_SIZE - 1

    @property
    def title(self) -> str:
        return f"{decimal_to_hex(self.base, 4)} - {decimal_to_hex(self.end, 4)}"

    def cells(self) -> list[ChartCell]:
        return [cell for row in self.rows for cell in row]

    def cell_at(self, row: int, column: int) -> ChartCell:
        return self.rows[row][column]


def _check_direction(direction: int) -> None:
    if direction not in (-1, 1):
        raise ValueError(f"direction must be 1 or -1, got {direction!r}")


class NavigationEngine:
    """Walk the index by codepoint, by block and by chart page."""

    def __init__(self, index: UnicodeIndex) -> None:
        self.index = index

    def block_for_codepoint(self, codepoint: int) -> Block | None:
        """Return the block containing ``codepoint``, or ``None`` inside a gap."""
        for block in self.index.blocks:
            if codepoint > block.end:
                continue
            if codepoint < block.start:
                return None
            return block
        return None

    def next_assigned_codepoint(self, codepoint: int, direction: int) -> int | None:
        """Step from ``codepoint`` until an indexed codepoint is reached.

        Returns ``None`` when the walk leaves the range covered by the index.
        """
        _check_direction(direction)
        upper = self.index.last_codepoint
        if upper is None:
            return None
        code = codepoint + direction
        if direction < 0 and code > upper:
            code = upper
        while True:
            if code < 0 or code > upper:
                return None
            if self.index.record_for(code) is not None:
                return code
            code += direction

    def block_relative_jump(self, codepoint: int, direction: int) -> Block | None:
        """Return the block before or after the one containing ``codepoint``."""
        _check_direction(direction)
        block = self.block_for_codepoint(codepoint)
        if block is None:
            return None
        ordinal = block.ordinal + direction
        if ordinal < 0 or ordinal >= len(self.index.blocks):
            return None
        return self.index.blocks[ordinal]

    def chart_page(self, base: int, current: int | None = None) -> ChartPage:
        """Build the chart page containing ``base``.

        Cells of unindexed codepoints carry no character and read as reserved.
        """
        start = chart_base(min(base, LAST_CHART_PAGE))
        rows: list[tuple[ChartCell, ...]] = []
        code = start
        for _row in range(CHART_ROWS):
            cells: list[ChartCell] = []
            for _column in range(CHART_COLUMNS):
                record = self.index.record_for(code)
                cells.append(
                    ChartCell(
                        codepoint=code,
                        hex_code=decimal_to_hex(code, 4),
                        character=printable_text(code) if record is not None else None,
                        current=record is not None and code == current,
                    )
                )
                code += 1
            rows.append(tuple(cells))
        return ChartPage(base=start, rows=tuple(rows), block=self.block_for_codepoint(start))

    def turn_chart_page(
        self, base: int, increment: int, current: int | None = None
    ) -> ChartPage:
        """Move ``increment`` pages away from ``base``, clamped to the codespace."""
        start = chart_base(base)
        target = start + increment * CHART_PAGE_SIZE
        target = min(max(target, 0), LAST_CHART_PAGE)
        return self.chart_page(target, current=current)

    def chart_page_for_block(self, ordinal: int) -> ChartPage:
        """Open the chart page holding the first codepoint of block ``ordinal``."""
        block = self.index.blocks[ordinal]
        return self.chart_page(block.start)

    def block_menu(self) -> list[tuple[int, str]]:
        return [(block.ordinal, block.menu_label) for block in self.index.blocks]


__all__ = [
    "CHART_COLUMNS",
    "CHART_PAGE_SIZE",
    "CHART_ROWS",
    "ChartCell",
    "ChartPage",
    "NavigationEngine",
    "chart_base",
]
