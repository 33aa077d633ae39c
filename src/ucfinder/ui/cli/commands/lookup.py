"""Implementation of the `ucfinder info` and `ucfinder step` commands."""

from __future__ import annotations

import json

import typer

from .._options import CodepointArgument, DirectionOption, JSONOption
from ..presenter import present_details
from ..state import emit_warning, get_cli_state
from ..utils import load_finder, parse_codepoint


def info(char: CodepointArgument, as_json: JSONOption = False) -> None:
    """Show the code point, encodings, entity and block of a character."""
    state = get_cli_state()
    codepoint = parse_codepoint(char)
    finder = load_finder(state)
    details = finder.describe(codepoint)
    if as_json:
        typer.echo(json.dumps(details.to_payload(), ensure_ascii=False, indent=2))
        return
    if not details.assigned:
        emit_warning(f"{details.code_point} is not an assigned character in the data file.")
    present_details(state, details)


def step(char: CodepointArgument, forward: DirectionOption = True) -> None:
    """Move to the next (or previous) assigned character."""
    state = get_cli_state()
    codepoint = parse_codepoint(char)
    finder = load_finder(state)
    target = finder.next_assigned_codepoint(codepoint, 1 if forward else -1)
    if target is None:
        emit_warning("No further character in that direction.")
        raise typer.Exit(code=1)
    present_details(state, finder.describe(target))


__all__ = ["info", "step"]
