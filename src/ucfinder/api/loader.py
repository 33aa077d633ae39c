"""Asynchronous loading of the character data file.

`DataLoader` is the only way to obtain a ready `CharacterFinder`: it has no
query methods of its own, and `load()` either returns a finder backed by a
complete index or raises `LoadError`.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
import time
from typing import TYPE_CHECKING, Any

import requests

from ucfinder.api.finder import CharacterFinder
from ucfinder.core.config import FinderConfig
from ucfinder.core.diagnostics import DiagnosticEmitter, LoggingEmitter
from ucfinder.core.exceptions import LoadError, ParseError
from ucfinder.core.parser import load_index


if TYPE_CHECKING:  # pragma: no cover - typing only
    from requests import Session as RequestsSession
else:
    RequestsSession = Any


class DataLoader:
    """Fetch raw character data from a file or URL and build a finder."""

    def __init__(
        self,
        source: str | Path | None = None,
        *,
        config: FinderConfig | None = None,
        emitter: DiagnosticEmitter | None = None,
        session: RequestsSession | None = None,
    ) -> None:
        self.config = config or FinderConfig()
        self.source = str(source) if source is not None else self.config.data_source
        self.emitter = emitter or LoggingEmitter()
        self._session = session

    @property
    def is_remote(self) -> bool:
        return self.source.startswith(("http://", "https://"))

    async def load(self) -> CharacterFinder:
        """Read and parse the data source, returning a ready finder."""
        self.emitter.event(
            "data_fetch",
            {"source": self.source, "kind": "url" if self.is_remote else "file"},
        )
        started = time.perf_counter()
        raw_text = await asyncio.to_thread(self.fetch_text)
        if raw_text and not raw_text.endswith("\n"):
            self.emitter.warning(
                f"Character data in '{self.source}' ends without a newline; "
                "the unterminated final line is ignored."
            )
        try:
            index = load_index(raw_text)
        except ParseError as exc:
            raise LoadError(
                f"Character data in '{self.source}' is malformed: {exc}",
                source=self.source,
            ) from exc
        self.emitter.event(
            "index_loaded",
            {
                "source": self.source,
                "characters": len(index),
                "blocks": len(index.blocks),
                "entities": len(index.entities),
                "elapsed": time.perf_counter() - started,
            },
        )
        return CharacterFinder(index, config=self.config)

    def fetch_text(self) -> str:
        """Return the raw data file text (blocking)."""
        if self.is_remote:
            return self._fetch_remote()
        return self._read_file(Path(self.source).expanduser())

    def _read_file(self, path: Path) -> str:
        try:
            return path.read_text(encoding=self.config.encoding)
        except (OSError, LookupError, UnicodeDecodeError) as exc:
            raise LoadError(
                f"Failed to read character data from '{path}': {exc}",
                source=self.source,
            ) from exc

    def _fetch_remote(self) -> str:
        client = self._session or requests.Session()
        headers = {"User-Agent": self.config.user_agent}
        try:
            response = client.get(
                self.source, headers=headers, timeout=self.config.http_timeout
            )
        except requests.RequestException as exc:
            raise LoadError(
                f"Failed to download character data from '{self.source}': {exc}",
                source=self.source,
            ) from exc
        finally:
            if self._session is None:
                client.close()
        if response.status_code >= 400:
            raise LoadError(
                f"Failed to download character data from '{self.source}': "
                f"HTTP {response.status_code}",
                source=self.source,
            )
        response.encoding = self.config.encoding
        return response.text


def load_finder_sync(
    source: str | Path | None = None,
    *,
    config: FinderConfig | None = None,
    emitter: DiagnosticEmitter | None = None,
) -> CharacterFinder:
    """Run :meth:`DataLoader.load` to completion outside an event loop."""
    return asyncio.run(DataLoader(source, config=config, emitter=emitter).load())


__all__ = ["DataLoader", "load_finder_sync"]
