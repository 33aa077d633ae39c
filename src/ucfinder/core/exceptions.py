"""Exception hierarchy shared by the indexing, search and loading layers."""

from __future__ import annotations


class FinderError(RuntimeError):
    """Base exception for character finder failures."""


class ParseError(FinderError, ValueError):
    """Raised when the character data file violates its line grammar."""

    def __init__(
        self,
        message: str,
        *,
        line_number: int | None = None,
        line: str | None = None,
    ) -> None:
        self.line_number = line_number
        self.line = line
        if line_number is not None:
            message = f"line {line_number}: {message}"
            if line is not None:
                message = f"{message} ({line!r})"
        super().__init__(message)


class LoadError(FinderError):
    """Raised when the character data cannot be fetched or parsed."""

    def __init__(self, message: str, *, source: str | None = None) -> None:
        self.source = source
        super().__init__(message)


class InvalidPatternError(FinderError, ValueError):
    """Raised when a regular expression search pattern fails to compile."""

    def __init__(self, pattern: str, reason: str) -> None:
        self.pattern = pattern
        self.reason = reason
        super().__init__(f"Invalid search pattern {pattern!r}: {reason}")


class SearchTimeoutError(FinderError):
    """Raised when a regular expression search exhausts its time budget."""


class ConfigError(FinderError):
    """Raised when a configuration file cannot be read or validated."""


__all__ = [
    "ConfigError",
    "FinderError",
    "InvalidPatternError",
    "LoadError",
    "ParseError",
    "SearchTimeoutError",
]
