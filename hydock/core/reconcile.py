"""Dock entries -- merges pinned, ignored and running applications."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable

if TYPE_CHECKING:
    from hydock.core.config import Config

FALLBACK_ICON = "application-default-icon"


def normalize_class(app_class: str) -> str:
    """Application identity used for grouping, pinning and ignoring."""
    return app_class.lower()


@dataclass(frozen=True)
class WindowSnapshotEntry:
    """One open window as reported by the window manager."""

    app_class: str
    address: str = ""


@dataclass(frozen=True)
class DockEntry:
    """A single application in the dock.

    ``window_count`` is 0 for a pinned application without open windows.
    """

    app_class: str
    window_count: int = 0


def count_windows(snapshot: Iterable[WindowSnapshotEntry]) -> dict[str, int]:
    """Number of open windows per normalized application class."""
    counts: dict[str, int] = {}
    for window in snapshot:
        key = normalize_class(window.app_class)
        counts[key] = counts.get(key, 0) + 1
    return counts


def reconcile(
    snapshot: Iterable[WindowSnapshotEntry],
    config: Config,
    rng: random.Random | None = None,
) -> list[DockEntry]:
    """Derive the dock entries for one refresh.

    Pinned classes are always present (count 0 when not running), ignored
    classes are always absent, even when pinned. Entries are sorted by
    class unless chaos mode is on, in which case they are shuffled.
    """
    counts = count_windows(snapshot=snapshot)

    for pinned in config.pinned_applications:
        counts.setdefault(normalize_class(pinned), 0)

    for ignored in config.ignore_applications:
        counts.pop(normalize_class(ignored), None)

    entries = [DockEntry(app_class=c, window_count=n) for c, n in counts.items()]

    if config.chaos_mode:
        (rng or random).shuffle(entries)
    else:
        entries.sort(key=lambda e: e.app_class)
    return entries


def icon_name_for(app_class: str, overrides: dict[str, str]) -> str:
    """Icon name for an application, honouring the configured overrides."""
    key = normalize_class(app_class)
    return overrides.get(key, key)
