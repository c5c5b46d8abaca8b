"""Stylesheet lookup -- bundled default plus the user's style.css."""

from __future__ import annotations

from pathlib import Path

from hydock.core.config import config_dir
from hydock.log import get_logger

_log = get_logger(name="style")

STYLE_FILE_NAME = "style.css"

# Bundled assets directory (relative to package)
_BUILTIN_STYLE = Path(__file__).resolve().parent.parent / "assets" / STYLE_FILE_NAME


def default_style() -> str:
    """Bundled stylesheet giving the dots a size and colour."""
    try:
        return _BUILTIN_STYLE.read_text()
    except OSError as exc:
        _log.warning("Bundled stylesheet missing: %s", exc)
        return ""


def load_user_style(path: Path | str | None = None) -> str | None:
    """Return the user's stylesheet text, or None when there is none."""
    if path is None:
        directory = config_dir()
        if directory is None:
            return None
        path = directory / STYLE_FILE_NAME
    try:
        return Path(path).read_text()
    except FileNotFoundError:
        return None
    except (OSError, UnicodeDecodeError) as exc:
        _log.debug("Skipping stylesheet %s: %s", path, exc)
        return None
