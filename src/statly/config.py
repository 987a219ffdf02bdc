"""Configuration loader for Statly.

Loads from statly.toml with sensible defaults when file is absent.
Configuration is loaded once at startup and passed to the app.
"""

from __future__ import annotations

import codecs
import logging
import tomllib
from dataclasses import dataclass, field
from pathlib import Path

_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


class ConfigError(Exception):
    """Raised when configuration loading or validation fails."""


@dataclass(frozen=True)
class EditorConfig:
    encoding: str = "utf-8"


@dataclass(frozen=True)
class WidgetConfig:
    enabled: bool = True


@dataclass(frozen=True)
class LoggingConfig:
    level: str = "INFO"
    log_path: str = ""  # empty = no log file

    @property
    def level_number(self) -> int:
        return logging.getLevelName(self.level)


@dataclass(frozen=True)
class Config:
    """Top-level Statly configuration."""

    editor: EditorConfig = field(default_factory=EditorConfig)
    widget: WidgetConfig = field(default_factory=WidgetConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @property
    def log_path(self) -> Path | None:
        if not self.logging.log_path:
            return None
        return Path(self.logging.log_path).expanduser()


def default_config_paths() -> list[Path]:
    return [
        Path.cwd() / "statly.toml",
        Path.home() / ".statly" / "statly.toml",
    ]


def _parse_encoding(value: object) -> str:
    encoding = str(value)
    try:
        codecs.lookup(encoding)
    except LookupError as e:
        raise ConfigError(f"Unknown editor encoding: {encoding!r}") from e
    return encoding


def _parse_level(value: object) -> str:
    level = str(value).upper()
    if level not in _LOG_LEVELS:
        raise ConfigError(
            f"Unknown log level {value!r}; expected one of {sorted(_LOG_LEVELS)}"
        )
    return level


def load_config(path: Path | None = None) -> Config:
    """Load configuration from a TOML file.

    If path is None, searches for statly.toml in current directory then
    ~/.statly/. Returns default config if no file is found.
    """
    if path is None:
        for candidate in default_config_paths():
            if candidate.exists():
                path = candidate
                break

    if path is None or not path.exists():
        return Config()

    try:
        with open(path, "rb") as f:
            raw = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Cannot read config {path}: {e}") from e

    editor_data = raw.get("editor", {})
    editor = EditorConfig(
        encoding=_parse_encoding(editor_data.get("encoding", "utf-8")),
    )

    widget_data = raw.get("widget", {})
    widget = WidgetConfig(
        enabled=bool(widget_data.get("enabled", True)),
    )

    log_data = raw.get("logging", {})
    logging_cfg = LoggingConfig(
        level=_parse_level(log_data.get("level", "INFO")),
        log_path=str(log_data.get("log_path", "")),
    )

    return Config(
        editor=editor,
        widget=widget,
        logging=logging_cfg,
    )
