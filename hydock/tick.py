"""Refresh loop -- rebuilds the whole dock from scratch once per second."""

from __future__ import annotations

import random
from typing import TYPE_CHECKING, Callable, Iterable

from hydock.core.config import Config
from hydock.core.position import orientations_for
from hydock.core.reconcile import DockEntry, WindowSnapshotEntry, icon_name_for, reconcile
from hydock.core.style import load_user_style
from hydock.log import get_logger
from hydock.platform.hyprctl import fetch_clients

if TYPE_CHECKING:
    from hydock.ui.autohide import VisibilityController
    from hydock.ui.dock_view import DockView
    from hydock.ui.surfaces import DockSurface, StyleManager

_log = get_logger(name="tick")

TICK_INTERVAL_S = 1


class TickDriver:
    """Owns the refresh pipeline: config -> anchor -> visibility -> style -> entries.

    Every tick is a full, level-triggered rebuild, so a failed window
    query or a broken config only lasts until the next tick.
    """

    def __init__(
        self,
        view: DockView,
        visibility: VisibilityController,
        dock: DockSurface,
        style: StyleManager | None = None,
        load_config: Callable[[], Config] = Config.load,
        fetch: Callable[[], Iterable[WindowSnapshotEntry]] = fetch_clients,
        load_style: Callable[[], str | None] = load_user_style,
        rng: random.Random | None = None,
    ) -> None:
        self._view = view
        self._visibility = visibility
        self._dock = dock
        self._style = style
        self._load_config = load_config
        self._fetch = fetch
        self._load_style = load_style
        self._rng = rng
        self.entries: list[DockEntry] = []

    def on_timeout(self) -> bool:
        """GLib timeout callback; the refresh never stops."""
        try:
            self.tick()
        except Exception:
            _log.exception("Dock refresh failed")
        return True

    def tick(self) -> list[DockEntry]:
        """Run one refresh and return the entries it rendered."""
        config = self._load_config()

        pos = config.pos
        if self._visibility.reanchor(pos=pos):
            self._view.set_orientations(orientations_for(pos=pos))

        self._visibility.apply_policy(auto_hide=config.auto_hide)
        self._dock.set_exclusive(reserve=not config.auto_hide)

        if self._style is not None:
            self._style.apply(text=self._load_style())

        self._view.clear()

        entries = reconcile(snapshot=self._fetch(), config=config, rng=self._rng)
        for entry in entries:
            self._view.add_entry(
                entry=entry,
                icon_name=icon_name_for(
                    app_class=entry.app_class, overrides=config.override_app_icons
                ),
            )

        if config.show_app_launcher:
            if config.show_separator:
                self._view.add_separator()
            self._view.add_launcher(
                icon_name=config.app_launcher_icon,
                command=config.app_launcher_command,
            )

        self.entries = entries
        return entries
