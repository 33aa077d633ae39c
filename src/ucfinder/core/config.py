"""Configuration model for the character finder.

FinderConfig

`data_source` (`str`)
: Path or HTTP(S) URL of the character data file. Defaults to
  `char-data-nounihan.txt` in the working directory; the `UCFINDER_DATA`
  environment variable overrides the default.

`encoding` (`str`)
: Text encoding of the data file.

`http_timeout` (`float`)
: Seconds to wait for a remote data file before giving up.

`user_agent` (`str`)
: User agent sent when fetching a remote data file.

`regex_timeout` (`float | None`)
: Time budget, in seconds, for one regular expression search across the whole
  index. `None` removes the bound.

`regex_match_alias` (`bool`)
: Let aliases participate in regular expression searches. Disabled by
  default, so only descriptions are tested.
"""

from __future__ import annotations

import os
from pathlib import Path
import tomllib
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ucfinder.core.exceptions import ConfigError


DATA_ENV_VAR = "UCFINDER_DATA"
DEFAULT_DATA_FILE = "char-data-nounihan.txt"
CONFIG_TABLE = "ucfinder"


def _default_data_source() -> str:
    return os.environ.get(DATA_ENV_VAR) or DEFAULT_DATA_FILE


class FinderConfig(BaseModel):
    """Settings shared by the loader and the search engine."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    data_source: str = Field(default_factory=_default_data_source)
    encoding: str = "utf-8"
    http_timeout: float = Field(default=30.0, gt=0)
    user_agent: str = "ucfinder-data-loader"
    regex_timeout: Annotated[float, Field(gt=0)] | None = 1.0
    regex_match_alias: bool = False

    @property
    def is_remote(self) -> bool:
        return self.data_source.startswith(("http://", "https://"))


def _settings_table(data: dict[str, Any]) -> dict[str, Any]:
    payload = data.get(CONFIG_TABLE, data)
    if not isinstance(payload, dict):
        raise ConfigError(f"'{CONFIG_TABLE}' must be a table.")
    return payload


def config_from_mapping(data: dict[str, Any]) -> FinderConfig:
    """Validate a mapping, accepting either top-level keys or a `[ucfinder]` table."""
    payload = _settings_table(data)
    try:
        return FinderConfig.model_validate(payload)
    except ValidationError as exc:
        raise ConfigError(f"Invalid configuration: {exc}") from exc


def load_config(path: Path | None = None, **overrides: Any) -> FinderConfig:
    """Read a TOML configuration file and apply keyword overrides."""
    data: dict[str, Any] = {}
    if path is not None:
        try:
            content = tomllib.loads(path.read_text(encoding="utf-8"))
        except OSError as exc:
            raise ConfigError(f"Unable to read configuration '{path}': {exc}") from exc
        except tomllib.TOMLDecodeError as exc:
            raise ConfigError(f"Malformed configuration '{path}': {exc}") from exc
        data = dict(_settings_table(content))
    data.update({key: value for key, value in overrides.items() if value is not None})
    return config_from_mapping(data)


__all__ = [
    "DATA_ENV_VAR",
    "DEFAULT_DATA_FILE",
    "FinderConfig",
    "config_from_mapping",
    "load_config",
]
