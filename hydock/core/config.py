"""Configuration loading and defaults for the dock.

The user edits ``config.toml`` while the dock runs, so the file is read
again on every refresh tick. Anything that goes wrong while reading it
yields the compiled-in defaults instead of an error.
"""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Any

from hydock.core.position import Position, parse_position
from hydock.log import get_logger

_log = get_logger(name="config")

CONFIG_DIR_NAME = "hydock"
CONFIG_FILE_NAME = "config.toml"
# Settings live in a [config] table so the file can grow other sections.
CONFIG_TABLE = "config"


def config_dir() -> Path | None:
    """Return the hydock config directory, or None when no home is known."""
    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / CONFIG_DIR_NAME
    try:
        home = Path.home()
    except (RuntimeError, KeyError) as exc:
        _log.warning("Cannot determine home directory: %s", exc)
        return None
    return home / ".config" / CONFIG_DIR_NAME


def _class_list(values: list[str]) -> tuple[str, ...]:
    return tuple(v.lower() for v in values)


@dataclass(frozen=True)
class Config:
    """Dock configuration with sensible defaults."""

    # Shell command executed when the app launcher is clicked
    app_launcher_command: str = "rofi -show drun"
    # Icon name of the app launcher button
    app_launcher_icon: str = "applications-all-symbolic"
    # Hide dock when the pointer leaves it
    auto_hide: bool = False
    # Random order of app icons instead of alphabetical
    chaos_mode: bool = False
    # Screen edge where the dock is placed
    dock_position: str = "bottom"
    # Application classes that never appear in the dock
    ignore_applications: tuple[str, ...] = ()
    # Application classes that always appear in the dock
    pinned_applications: tuple[str, ...] = ()
    # Icon name per application class
    override_app_icons: dict[str, str] = field(default_factory=dict)
    # Add app launcher button after the apps
    show_app_launcher: bool = True
    # Add separator between apps and app launcher
    show_separator: bool = True

    @property
    def pos(self) -> Position:
        """Position as enum; unknown values read as the bottom edge."""
        return parse_position(self.dock_position)

    @classmethod
    def from_mapping(cls, data: dict[str, Any]) -> Config:
        """Build a config from a parsed ``[config]`` table.

        Unknown keys are ignored; values of the wrong type fall back to the
        default of their key.
        """
        defaults = cls()
        values: dict[str, Any] = {}
        for f in fields(cls):
            if f.name not in data:
                continue
            value = _coerce(
                name=f.name, value=data[f.name], default=getattr(defaults, f.name)
            )
            if value is not None:
                values[f.name] = value
        config = replace(defaults, **values)
        position = parse_position(config.dock_position)
        if position.value != config.dock_position:
            config = replace(config, dock_position=position.value)
        return config

    @classmethod
    def load(cls, path: Path | str | None = None) -> Config:
        """Load config from a TOML file, falling back to defaults on any error."""
        if path is None:
            directory = config_dir()
            if directory is None:
                return cls()
            path = directory / CONFIG_FILE_NAME
        path = Path(path)

        try:
            with open(path, "rb") as f:
                document = tomllib.load(f)
        except FileNotFoundError:
            _log.debug("No config at %s, using defaults", path)
            return cls()
        except (OSError, UnicodeDecodeError, tomllib.TOMLDecodeError) as exc:
            _log.warning("Failed to read config %s: %s", path, exc)
            return cls()

        table = document.get(CONFIG_TABLE)
        if not isinstance(table, dict):
            _log.warning("Config %s has no [%s] table, using defaults", path, CONFIG_TABLE)
            return cls()
        return cls.from_mapping(table)


def _coerce(name: str, value: Any, default: Any) -> Any:
    """Validate one raw value against the type of its default.

    Returns None when the value is rejected.
    """
    if isinstance(default, bool):
        ok = isinstance(value, bool)
    elif isinstance(default, str):
        ok = isinstance(value, str)
    elif isinstance(default, tuple):
        ok = isinstance(value, list) and all(isinstance(v, str) for v in value)
        if ok:
            value = _class_list(values=value)
    else:
        ok = isinstance(value, dict) and all(
            isinstance(v, str) for v in value.values()
        )
        if ok:
            value = {k.lower(): v for k, v in value.items()}
    if not ok:
        _log.warning("Ignoring config key %s: unexpected value %r", name, value)
        return None
    return value
