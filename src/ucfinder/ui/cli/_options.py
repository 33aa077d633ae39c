"""Shared Typer option definitions for CLI commands."""

from __future__ import annotations

from typing import Annotated

import typer


CodepointArgument = Annotated[
    str,
    typer.Argument(
        metavar="CHAR",
        help="A character, a U+HHHH code point, a decimal number or uHHHHuHHHH surrogates.",
    ),
]

DirectionOption = Annotated[
    bool,
    typer.Option(
        "--next/--prev",
        help="Walk forward (default) or backward.",
    ),
]

JSONOption = Annotated[
    bool,
    typer.Option(
        "--json",
        help="Print machine-readable JSON instead of a table.",
    ),
]
