"""Implementation of the block listing and code chart commands."""

from __future__ import annotations

from typing import Annotated

import typer

from .._options import CodepointArgument
from ..presenter import present_blocks, present_chart
from ..state import emit_warning, get_cli_state
from ..utils import load_finder, parse_codepoint


def blocks() -> None:
    """List every character block in the data file."""
    state = get_cli_state()
    finder = load_finder(state)
    present_blocks(state, finder.index.blocks)


def block(
    char: CodepointArgument,
    jump: Annotated[
        int,
        typer.Option(
            "--jump",
            "-j",
            help="Report the block this many positions away (use -1 or 1).",
            min=-1,
            max=1,
        ),
    ] = 0,
) -> None:
    """Show the block containing a character, or its neighbour."""
    state = get_cli_state()
    codepoint = parse_codepoint(char)
    finder = load_finder(state)
    if jump:
        found = finder.block_relative_jump(codepoint, jump)
    else:
        found = finder.block_for_codepoint(codepoint)
    if found is None:
        emit_warning(f"No block found for U+{codepoint:04X}.")
        raise typer.Exit(code=1)
    present_blocks(state, [found])


def chart(
    char: CodepointArgument,
    page: Annotated[
        int,
        typer.Option(
            "--page",
            "-p",
            help="Pages (of 128 code points) to move away from the character's page.",
        ),
    ] = 0,
) -> None:
    """Print the 8x16 code chart page containing a character."""
    state = get_cli_state()
    codepoint = parse_codepoint(char)
    finder = load_finder(state)
    chart_page = finder.turn_chart_page(codepoint, page, current=codepoint)
    present_chart(state, chart_page)


__all__ = ["block", "blocks", "chart"]
