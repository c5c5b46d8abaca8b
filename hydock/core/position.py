"""Dock position types and helpers."""

from __future__ import annotations

import enum
from typing import NamedTuple

from hydock.log import get_logger

_log = get_logger(name="position")


class Position(str, enum.Enum):
    """Screen edge where the dock is anchored.

    Coordinate convention:
      main axis  -- along the dock (horizontal for BOTTOM/TOP, vertical for LEFT/RIGHT)
      cross axis -- perpendicular to the dock (toward/away from screen edge)
    """

    BOTTOM = "bottom"
    TOP = "top"
    LEFT = "left"
    RIGHT = "right"


class Axis(str, enum.Enum):
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


class Orientations(NamedTuple):
    """Axes used to lay out one dock.

    entries   -- axis along which app entries follow each other
    dots      -- axis along which the per-window dots of one entry follow each other
    stack     -- axis stacking an entry's icon and its dots box
    separator -- orientation of the separator line between apps and launcher
    """

    entries: Axis
    dots: Axis
    stack: Axis
    separator: Axis


DEFAULT_POSITION = Position.BOTTOM


def is_horizontal(pos: Position) -> bool:
    """True for bottom/top (icons laid out left-to-right)."""
    return pos in (Position.BOTTOM, Position.TOP)


def parse_position(value: object) -> Position:
    """Position for a configured value, falling back to bottom when unknown."""
    if isinstance(value, str):
        try:
            return Position(value.strip().lower())
        except ValueError:
            pass
    _log.warning("Unknown dock position %r, using %s", value, DEFAULT_POSITION.value)
    return DEFAULT_POSITION


def orientations_for(pos: Position) -> Orientations:
    """Layout axes for a dock anchored at ``pos``."""
    if is_horizontal(pos):
        return Orientations(
            entries=Axis.HORIZONTAL,
            dots=Axis.HORIZONTAL,
            stack=Axis.VERTICAL,
            separator=Axis.VERTICAL,
        )
    return Orientations(
        entries=Axis.VERTICAL,
        dots=Axis.VERTICAL,
        stack=Axis.HORIZONTAL,
        separator=Axis.HORIZONTAL,
    )


def perpendicular_edges(pos: Position) -> tuple[Position, Position]:
    """The two edges a full-length strip at ``pos`` must also be anchored to."""
    if is_horizontal(pos):
        return Position.LEFT, Position.RIGHT
    return Position.TOP, Position.BOTTOM
