"""Loading TOML configuration files."""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path
from typing import Any

__all__ = ["ConfigError", "read_config"]

_log = logging.getLogger(__name__)


class ConfigError(Exception):
    """A configuration file could not be read, parsed or understood."""


def read_config(config_path: str | Path) -> dict[str, Any]:
    """Read the TOML file at ``config_path`` and return its contents as a dict.

    Raises:
        ConfigError: if the file cannot be read or is not valid TOML.
    """
    _log.info("Attempting to read file `%s`", config_path)

    try:
        contents = Path(config_path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigError(f"Could not read file `{config_path}`") from exc

    try:
        data = tomllib.loads(contents)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Unable to load data from `{config_path}`") from exc

    _log.info("Finished reading file `%s`", config_path)
    return data