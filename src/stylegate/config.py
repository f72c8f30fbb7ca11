"""Configuration of a stylegate run.

Configuration is looked up in the following order, the first match wins:

1. An explicitly given JSON file.
2. `.stylegate.json` in the project root.
3. The `"stylegate"` key of the project's `package.json`.
4. Built-in defaults.
"""

from __future__ import annotations

from typing import Any

import json
from collections.abc import Iterable
from pathlib import Path

from loguru import logger
from pydantic import BaseModel, Field, ValidationError, field_validator

CONFIG_FILE_NAME = ".stylegate.json"
PACKAGE_JSON_KEY = "stylegate"

DEFAULT_IGNORE = (
    "node_modules",
    ".git",
    "build",
    "dist",
    "coverage",
    ".next",
)
DEFAULT_EXTENSIONS = (".js", ".jsx", ".ts", ".tsx", ".mjs", ".cjs")
DEFAULT_MAX_FILE_SIZE = 1_000_000


class ConfigError(ValueError):
    """Raised when the configuration cannot be loaded or is invalid."""


class StylegateConfig(BaseModel, frozen=True, extra="forbid"):
    #: Glob patterns of files and directories to skip.
    ignore: tuple[str, ...] = DEFAULT_IGNORE
    #: File extensions to scan, including the leading dot.
    extensions: tuple[str, ...] = DEFAULT_EXTENSIONS
    #: Rule IDs that are not run.
    disable: tuple[str, ...] = ()
    #: Files larger than this many bytes are skipped.
    max_file_size: int = Field(default=DEFAULT_MAX_FILE_SIZE, gt=0)

    @field_validator("extensions")
    @classmethod
    def _normalise_extensions(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        return tuple(ext.lower() if ext.startswith(".") else f".{ext.lower()}" for ext in value)

    def extend(
        self, ignore: Iterable[str] = (), disable: Iterable[str] = ()
    ) -> StylegateConfig:
        """Return a copy with additional ignore patterns and disabled rules."""
        return self.model_copy(
            update={
                "ignore": _merge(self.ignore, ignore),
                "disable": _merge(self.disable, disable),
            }
        )


def _merge(base: tuple[str, ...], extra: Iterable[str]) -> tuple[str, ...]:
    return tuple(dict.fromkeys([*base, *extra]))


def _read_json(path: Path) -> Any:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ConfigError(f"Cannot read configuration file {path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Malformed JSON in {path}: {exc}") from exc


def parse_config(raw: object, source: str = "<config>") -> StylegateConfig:
    if not isinstance(raw, dict):
        raise ConfigError(f"Configuration in {source} must be a JSON object")
    try:
        return StylegateConfig.model_validate(raw)
    except ValidationError as exc:
        raise ConfigError(f"Invalid configuration in {source}:\n{exc}") from exc


def _is_file(path: Path) -> bool:
    try:
        return path.is_file()
    except OSError as exc:
        raise ConfigError(f"Cannot access configuration file {path}: {exc}") from exc


def load_config(root: Path, config_path: Path | None = None) -> StylegateConfig:
    """Load the configuration for the project at `root`."""
    if config_path is not None:
        if not _is_file(config_path):
            raise ConfigError(f"Config file not found: {config_path}")
        logger.debug(f"Loading configuration from {config_path}")
        return parse_config(_read_json(config_path), str(config_path))

    dedicated = root / CONFIG_FILE_NAME
    if _is_file(dedicated):
        logger.debug(f"Loading configuration from {dedicated}")
        return parse_config(_read_json(dedicated), str(dedicated))

    package_json = root / "package.json"
    if _is_file(package_json):
        package = _read_json(package_json)
        if isinstance(package, dict) and PACKAGE_JSON_KEY in package:
            logger.debug(f"Loading configuration from {package_json}")
            return parse_config(
                package[PACKAGE_JSON_KEY], f"{package_json} ({PACKAGE_JSON_KEY!r} key)"
            )

    logger.debug("No configuration found, using defaults")
    return StylegateConfig()
