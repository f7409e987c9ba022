"""
Project-level defaults for the msws command line.

This module provides:

- find_config_file: Walk up directories to locate .msws.toml
- CliConfig: Typed defaults for the ``msws`` command
- load_config: Locate, parse and validate the config

Defaults are read from the ``[cli]`` table of `.msws.toml`. Keys in the
``[cli]`` table of `.msws.local.toml`, from the same directory, replace
the shared ones:

    built-in defaults → .msws.toml → .msws.local.toml → command-line flags

Example:
    >>> config = load_config()
    >>> config.count
    10
"""

from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

CONFIG_FILENAME = ".msws.toml"
LOCAL_CONFIG_FILENAME = ".msws.local.toml"

OUTPUT_FORMATS = ("dec", "hex", "json", "table")


class ConfigError(ValueError):
    """Raised when a config file holds invalid settings."""

    pass


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """
    Return the nearest `.msws.toml` at or above *start_dir* (default: cwd).

    Returns ``None`` when no directory up to the filesystem root has one.
    """
    start = (start_dir or Path.cwd()).resolve()
    for directory in (start, *start.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


@dataclass(frozen=True)
class CliConfig:
    """
    Defaults for the ``msws`` command from the ``[cli]`` table.

    Attributes:
        count: Number of values ``msws rand`` prints.
        format: Output format, one of ``dec``, ``hex``, ``json``, ``table``.
    """

    count: int = 10
    format: str = "dec"

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> CliConfig:
        """
        Build a :class:`CliConfig` from a parsed TOML dict.

        Raises:
            ConfigError: If ``[cli]`` is not a table or a value is invalid.
        """
        raw = data.get("cli", {})
        if not isinstance(raw, dict):
            raise ConfigError("[cli] must be a table")

        count = raw.get("count", cls.count)
        if isinstance(count, bool) or not isinstance(count, int) or count <= 0:
            raise ConfigError(f"cli.count must be a positive integer, got {count!r}")

        fmt = raw.get("format", cls.format)
        if fmt not in OUTPUT_FORMATS:
            allowed = ", ".join(OUTPUT_FORMATS)
            raise ConfigError(f"cli.format must be one of {allowed}, got {fmt!r}")

        unknown = sorted(set(raw) - {"count", "format"})
        if unknown:
            logger.warning(f"Ignoring unknown [cli] keys: {', '.join(unknown)}")

        return cls(count=count, format=fmt)


def load_config(start_dir: Path | None = None) -> CliConfig:
    """
    Find and load CLI defaults.

    Walks up from *start_dir* (default: cwd) to locate `.msws.toml`. When
    `.msws.local.toml` sits next to it, its ``[cli]`` keys win.

    Returns:
        The resolved :class:`CliConfig`, or built-in defaults if no config
        file is found.

    Raises:
        ConfigError: If the file cannot be parsed or holds invalid values.
    """
    config_path = find_config_file(start_dir)
    if config_path is None:
        return CliConfig()

    data = _read_toml(config_path)
    local_path = config_path.parent / LOCAL_CONFIG_FILENAME
    if local_path.is_file():
        data = _merge_cli(data, _read_toml(local_path))

    logger.debug(f"Loaded config from {config_path}")
    return CliConfig.from_dict(data)


def _merge_cli(data: dict[str, Any], local: dict[str, Any]) -> dict[str, Any]:
    shared_cli = data.get("cli", {})
    local_cli = local.get("cli", {})
    if not isinstance(shared_cli, dict) or not isinstance(local_cli, dict):
        raise ConfigError("[cli] must be a table")
    return {**data, "cli": {**shared_cli, **local_cli}}


def _read_toml(path: Path) -> dict[str, Any]:
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Could not parse {path}: {e}") from e
