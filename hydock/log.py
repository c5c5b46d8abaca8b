"""Logging setup for hydock.

Everything goes to stderr so a compositor ``exec-once`` log captures it.
The level comes from ``HYDOCK_LOG_LEVEL``, either a level name such as
``debug`` or a number such as ``10``.
"""

import logging
import os

DEFAULT_LEVEL = logging.WARNING


def parse_level(value: str | None) -> int:
    """Logging level for a HYDOCK_LOG_LEVEL value; unknown values are WARNING."""
    if not value:
        return DEFAULT_LEVEL
    value = value.strip()
    if value.isdigit():
        return int(value)
    level = logging.getLevelName(value.upper())
    # getLevelName maps unknown names to the string "Level <name>"
    return level if isinstance(level, int) else DEFAULT_LEVEL


LOG_LEVEL = parse_level(os.environ.get("HYDOCK_LOG_LEVEL"))

logging.basicConfig(
    format="%(asctime)s.%(msecs)03d %(name)-18s %(levelname)-5s %(message)s",
    datefmt="%H:%M:%S",
    level=LOG_LEVEL,
)


def get_logger(name: str) -> logging.Logger:
    """Logger for one hydock module, e.g. ``hydock.tick``."""
    return logging.getLogger(f"hydock.{name}")
