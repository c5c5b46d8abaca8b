"""Dock widgets -- one icon with window dots per entry, separator and launcher."""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable

import gi

gi.require_version("Gtk", "3.0")
gi.require_version("Gdk", "3.0")
from gi.repository import Gdk, Gtk  # noqa: E402

from hydock.core.position import (  # noqa: E402
    Axis,
    Orientations,
    Position,
    orientations_for,
)
from hydock.core.reconcile import FALLBACK_ICON  # noqa: E402
from hydock.log import get_logger  # noqa: E402

if TYPE_CHECKING:
    from hydock.core.reconcile import DockEntry
    from hydock.platform.dispatcher import CommandDispatcher

_log = get_logger(name="dock_view")

ICON_SIZE = 32
DOT_SIZE = 4
DOT_SPACING = 4

MOUSE_LEFT = 1
MOUSE_MIDDLE = 2


def gtk_orientation(axis: Axis) -> Gtk.Orientation:
    if axis == Axis.HORIZONTAL:
        return Gtk.Orientation.HORIZONTAL
    return Gtk.Orientation.VERTICAL


def is_single_press(event: Gdk.EventButton) -> bool:
    """True for the first press of a click (not the extra double/triple events)."""
    return event.type == Gdk.EventType.BUTTON_PRESS


def _icon(icon_name: str) -> Gtk.Image:
    """Themed icon at ICON_SIZE, or the default application icon."""
    theme = Gtk.IconTheme.get_default()
    if theme is not None and not theme.has_icon(icon_name):
        _log.debug("No icon %r in theme, using %s", icon_name, FALLBACK_ICON)
        icon_name = FALLBACK_ICON
    image = Gtk.Image.new_from_icon_name(icon_name, Gtk.IconSize.DIALOG)
    image.set_pixel_size(ICON_SIZE)
    return image


class DockView:
    """Builds the dock's child widgets inside the dock box."""

    def __init__(self, box: Gtk.Box, dispatcher: CommandDispatcher) -> None:
        self.box = box
        self._dispatcher = dispatcher
        self._orientations = orientations_for(pos=Position.BOTTOM)

    def set_orientations(self, orientations: Orientations) -> None:
        self._orientations = orientations
        self.box.set_orientation(gtk_orientation(axis=orientations.entries))

    def clear(self) -> None:
        """Remove every widget from the dock."""
        for child in self.box.get_children():
            self.box.remove(child)
            child.destroy()

    def add_entry(self, entry: DockEntry, icon_name: str) -> None:
        """Append an application icon with one dot per open window."""
        wrapper = Gtk.Box(
            orientation=gtk_orientation(axis=self._orientations.stack), spacing=0
        )
        wrapper.set_name("app-icon")
        wrapper.pack_start(_icon(icon_name=icon_name), False, False, 0)

        dots = Gtk.Box(
            orientation=gtk_orientation(axis=self._orientations.dots),
            spacing=DOT_SPACING,
        )
        dots.set_name("app-dots-box")
        dots.set_halign(Gtk.Align.CENTER)
        dots.set_valign(Gtk.Align.CENTER)
        for _ in range(entry.window_count):
            dot = Gtk.Box()
            dot.set_name("app-dot")
            dot.set_size_request(DOT_SIZE, DOT_SIZE)
            dots.pack_start(dot, False, False, 0)
        wrapper.pack_start(dots, False, False, 0)

        self._append_clickable(
            child=wrapper,
            handler=self._on_entry_press,
            data=entry.app_class,
            tooltip=entry.app_class,
        )

    def add_separator(self) -> None:
        separator = Gtk.Separator(
            orientation=gtk_orientation(axis=self._orientations.separator)
        )
        separator.set_name("separator")
        self.box.pack_start(separator, False, False, 0)
        separator.show()

    def add_launcher(self, icon_name: str, command: str) -> None:
        """Append the app launcher button running ``command``."""
        wrapper = Gtk.Box(
            orientation=gtk_orientation(axis=self._orientations.stack), spacing=0
        )
        wrapper.set_name("app-launcher")
        wrapper.pack_start(_icon(icon_name=icon_name), False, False, 0)
        self._append_clickable(
            child=wrapper, handler=self._on_launcher_press, data=command
        )

    def _append_clickable(
        self, child: Gtk.Widget, handler: Callable[..., bool], data: str, tooltip: str = ""
    ) -> None:
        event_box = Gtk.EventBox()
        event_box.add(child)
        if tooltip:
            event_box.set_tooltip_text(tooltip)
        event_box.connect("button-press-event", handler, data)
        self.box.pack_start(event_box, False, False, 0)
        event_box.show_all()

    def _on_entry_press(
        self, _widget: Gtk.Widget, event: Gdk.EventButton, app_class: str
    ) -> bool:
        """Left click focuses, middle click closes; both launch as fallback."""
        if not is_single_press(event=event):
            return False
        if event.button == MOUSE_LEFT:
            self._dispatcher.focus_or_launch(app_class)
        elif event.button == MOUSE_MIDDLE:
            self._dispatcher.close_or_launch(app_class)
        else:
            return False
        return True

    def _on_launcher_press(
        self, _widget: Gtk.Widget, event: Gdk.EventButton, command: str
    ) -> bool:
        if not is_single_press(event=event):
            return False
        self._dispatcher.run_launcher(command)
        return True
