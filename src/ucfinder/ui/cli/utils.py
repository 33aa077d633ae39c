"""Helpers shared by CLI commands: argument parsing and finder loading."""

from __future__ import annotations

import asyncio
import logging
import re
import sys

import typer

from ucfinder.api.finder import CharacterFinder
from ucfinder.api.loader import DataLoader
from ucfinder.core.config import load_config
from ucfinder.core.encoding import MAX_CODEPOINT, hex_to_decimal, text_to_codepoint
from ucfinder.core.exceptions import ConfigError, LoadError

from .diagnostics import CliEmitter
from .state import CLIState, emit_error, get_cli_state


_HEX_CODEPOINT = re.compile(r"U[ +]([0-9A-Fa-f]{1,7})", re.IGNORECASE)
_DECIMAL_CODEPOINT = re.compile(r"[0-9]{1,9}")
_SURROGATE_UNITS = re.compile(r"u([0-9A-Fa-f]{4})u([0-9A-Fa-f]{4})")


def parse_codepoint(value: str) -> int:
    """Interpret ``U+HHHH``, decimal digits, ``uHHHHuHHHH`` or a literal character."""
    candidate = value.strip() or value
    match = _HEX_CODEPOINT.fullmatch(candidate)
    if match:
        codepoint = hex_to_decimal(match.group(1))
    elif _DECIMAL_CODEPOINT.fullmatch(candidate):
        codepoint = int(candidate, 10)
    elif match := _SURROGATE_UNITS.fullmatch(candidate):
        units = chr(hex_to_decimal(match.group(1))) + chr(hex_to_decimal(match.group(2)))
        codepoint = text_to_codepoint(units)
    elif len(candidate) == 1:
        codepoint = ord(candidate)
    else:
        raise typer.BadParameter(
            f"'{value}' is not a character, U+HHHH code point or decimal number."
        )
    if codepoint > MAX_CODEPOINT:
        raise typer.BadParameter(f"'{value}' is beyond U+10FFFF.")
    return codepoint


def configure_logging(state: CLIState) -> None:
    """Send debug logging from the package to stderr when running with ``-vv``."""
    if state.verbosity < 2:
        return
    logging.basicConfig(
        level=logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    logging.getLogger("ucfinder").setLevel(logging.DEBUG)


def load_finder(state: CLIState | None = None) -> CharacterFinder:
    """Load the configured data file, exiting with status 1 on failure."""
    state = state or get_cli_state()
    try:
        config = load_config(state.config_path, data_source=state.data_source)
    except ConfigError as exc:
        emit_error(str(exc), exception=exc)
        raise typer.Exit(code=1) from exc

    emitter = CliEmitter(state)
    loader = DataLoader(config=config, emitter=emitter)
    try:
        return asyncio.run(loader.load())
    except LoadError as exc:
        emitter.error(str(exc), exc)
        raise typer.Exit(code=1) from exc


__all__ = ["configure_logging", "load_finder", "parse_codepoint"]
