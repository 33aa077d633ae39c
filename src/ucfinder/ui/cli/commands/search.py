"""Implementation of the `ucfinder search` and `ucfinder regex` commands."""

from __future__ import annotations

from typing import Annotated

import typer

from ucfinder.core.exceptions import InvalidPatternError, SearchTimeoutError

from ..presenter import present_matches
from ..state import emit_error, get_cli_state
from ..utils import load_finder


def search(
    query: Annotated[
        str,
        typer.Argument(
            help=(
                "Description text, a decimal or hex reference, an entity name, "
                "or /regex/ for a regular expression search."
            ),
        ),
    ],
) -> None:
    """Search character descriptions and aliases."""
    state = get_cli_state()
    finder = load_finder(state)
    try:
        matches = finder.query(query)
    except (InvalidPatternError, SearchTimeoutError) as exc:
        emit_error(str(exc), exception=exc)
        raise typer.Exit(code=1) from exc
    present_matches(state, matches, query=query)


def regex(
    pattern: Annotated[
        str,
        typer.Argument(help="Case-insensitive regular expression tested against descriptions."),
    ],
) -> None:
    """Search character descriptions with a regular expression."""
    state = get_cli_state()
    finder = load_finder(state)
    try:
        matches = finder.regex_search(pattern)
    except (InvalidPatternError, SearchTimeoutError) as exc:
        emit_error(str(exc), exception=exc)
        raise typer.Exit(code=1) from exc
    present_matches(state, matches, query=f"/{pattern}/")


__all__ = ["regex", "search"]
