from __future__ import annotations

import logging

import pytest

from ucfinder.core.diagnostics import DiagnosticEmitter, LoggingEmitter, format_event_message
from ucfinder.ui.cli.diagnostics import CliEmitter
from ucfinder.ui.cli.state import CLIState


def test_logging_emitter_logs_messages(caplog: pytest.LogCaptureFixture) -> None:
    emitter = LoggingEmitter(debug_enabled=True)
    with caplog.at_level(logging.ERROR):
        emitter.error("boom")
    assert any(record.message == "boom" for record in caplog.records)
    assert emitter.debug_enabled is True
    assert isinstance(emitter, DiagnosticEmitter)


def test_logging_emitter_summarises_known_events(caplog: pytest.LogCaptureFixture) -> None:
    emitter = LoggingEmitter()
    with caplog.at_level(logging.INFO, logger="ucfinder"):
        emitter.event("data_fetch", {"source": "chars.txt", "kind": "file"})
    assert "Loading character data: chars.txt (file)" in caplog.text


def test_format_event_message() -> None:
    message = format_event_message(
        "index_loaded",
        {"characters": 14, "blocks": 5, "entities": 6, "elapsed": 0.25},
    )
    assert message == "Indexed 14 characters, 5 blocks, 6 entities in 0.25s"
    assert format_event_message("unknown", {}) is None


def test_cli_emitter_renders_warnings_and_errors(capsys: pytest.CaptureFixture[str]) -> None:
    emitter = CliEmitter(state=CLIState(verbosity=1))

    emitter.warning("Heads up", exc=None)
    emitter.error("Boom", exc=None)

    captured = capsys.readouterr()
    combined_output = f"{captured.out}\n{captured.err}"
    assert "Heads up" in combined_output
    assert "Boom" in combined_output


def test_cli_emitter_reports_events_when_verbose(capsys: pytest.CaptureFixture[str]) -> None:
    CliEmitter(state=CLIState()).event("data_fetch", {"source": "chars.txt", "kind": "file"})
    assert "Loading character data" not in capsys.readouterr().err

    CliEmitter(state=CLIState(verbosity=1)).event(
        "data_fetch", {"source": "chars.txt", "kind": "file"}
    )
    assert "Loading character data" in capsys.readouterr().err
