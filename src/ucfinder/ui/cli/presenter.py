"""Rich presenters for character details, search results and charts."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from rich import box
from rich.table import Table
from rich.text import Text

from ucfinder.core.details import CharacterDetails
from ucfinder.core.models import Block
from ucfinder.core.navigation import CHART_COLUMNS, ChartPage
from ucfinder.core.search import Match

from .state import CLIState


def _build_table(
    *,
    title: str | None,
    columns: Sequence[str],
    header_style: str = "bold cyan",
    show_header: bool = True,
) -> Table:
    """Create a Rich table with the house style."""
    table = Table(
        title=title or None,
        box=box.SQUARE,
        show_edge=True,
        show_header=show_header,
        header_style=header_style,
    )
    for column in columns:
        table.add_column(column)
    return table


def present_details(state: CLIState, details: CharacterDetails) -> None:
    table = _build_table(title=None, columns=("Property", "Value"), show_header=False)
    table.add_row("Code point", details.code_point)
    table.add_row("Character", Text(details.character))
    if details.description:
        description = Text(details.description)
        if details.alias:
            description.append("\n")
            description.append(details.alias, style="italic")
        table.add_row("Description", description)
    table.add_row("HTML entity", details.html_entity)
    table.add_row("UTF-8", details.utf8)
    table.add_row("UTF-16", details.utf16)
    if details.block is not None:
        block = details.block
        link = Text(block.title, style=f"link {block.pdf_url}" if block.pdf_url else "")
        table.add_row("Character block", link)
    state.console.print(table)


def present_matches(state: CLIState, matches: Sequence[Match], *, query: str) -> None:
    if not matches:
        state.console.print(Text(f"No characters match '{query}'.", style="yellow"))
        return
    table = _build_table(
        title=f"Matches for '{query}'",
        columns=("Code point", "Char", "Description", "Alias"),
    )
    for match in matches:
        table.add_row(
            Text(match.code_point, style="magenta"),
            Text(match.character),
            Text(match.display_label),
            Text(match.alias or "", style="italic"),
        )
    state.console.print(table)


def present_blocks(state: CLIState, blocks: Sequence[Block]) -> None:
    table = _build_table(title="Character blocks", columns=("#", "Range", "Title", "Chart"))
    for block in blocks:
        table.add_row(
            str(block.ordinal),
            f"{block.start:04X}-{block.end:04X}",
            Text(block.title),
            Text(block.filename, style=f"link {block.pdf_url}" if block.pdf_url else ""),
        )
    state.console.print(table)


def present_chart(state: CLIState, page: ChartPage) -> None:
    title = f"Unicode Character Chart {page.title}"
    if page.block is not None:
        title = f"{title} ({page.block.title})"
    columns = ["", *(f"{column:X}" for column in range(CHART_COLUMNS))]
    table = _build_table(title=title, columns=columns)
    for row in page.rows:
        cells: list[Any] = [Text(f"{row[0].codepoint:04X}", style="cyan")]
        for cell in row:
            if cell.reserved:
                cells.append(Text("·", style="dim"))
            elif cell.current:
                cells.append(Text(cell.character or "", style="reverse"))
            else:
                cells.append(Text(cell.character or ""))
        table.add_row(*cells)
    state.console.print(table)


__all__ = ["present_blocks", "present_chart", "present_details", "present_matches"]
