"""Layer-shell windows -- the dock itself and its auto-hide trigger strip."""

from __future__ import annotations

from typing import Callable

import gi

gi.require_version("Gtk", "3.0")
gi.require_version("Gdk", "3.0")
from gi.repository import Gdk, GLib, Gtk  # noqa: E402

try:
    gi.require_version("GtkLayerShell", "0.1")
    from gi.repository import GtkLayerShell  # noqa: E402
except (ValueError, ImportError):
    GtkLayerShell = None

from hydock.core.position import Position, perpendicular_edges  # noqa: E402
from hydock.core.style import default_style  # noqa: E402
from hydock.log import get_logger  # noqa: E402

_log = get_logger(name="surfaces")

NAMESPACE = "hydock"
# Cross-axis thickness of the strip that re-summons a hidden dock
TRIGGER_PX = 1

_EDGE_NAMES = {
    Position.TOP: "TOP",
    Position.BOTTOM: "BOTTOM",
    Position.LEFT: "LEFT",
    Position.RIGHT: "RIGHT",
}


def has_layer_shell() -> bool:
    return GtkLayerShell is not None


def _edge(pos: Position):
    return getattr(GtkLayerShell.Edge, _EDGE_NAMES[pos])


class LayerSurface:
    """A borderless, unfocusable window pinned to one screen edge.

    Falls back to a plain toplevel when the GtkLayerShell typelib is
    missing (e.g. running outside a wlroots compositor).
    """

    hover_signal = ""
    style_class = ""

    def __init__(self, title: str) -> None:
        self.window = Gtk.Window(type=Gtk.WindowType.TOPLEVEL)
        self.window.set_title(title)
        self.window.set_decorated(False)
        self.window.set_resizable(False)
        self.window.set_can_focus(False)
        self.window.get_style_context().add_class(self.style_class)
        self.window.add_events(
            Gdk.EventMask.ENTER_NOTIFY_MASK | Gdk.EventMask.LEAVE_NOTIFY_MASK
        )
        self.position: Position | None = None
        self._hover_handler = 0

        if has_layer_shell():
            GtkLayerShell.init_for_window(self.window)
            GtkLayerShell.set_layer(self.window, GtkLayerShell.Layer.TOP)
            GtkLayerShell.set_namespace(self.window, NAMESPACE)
            GtkLayerShell.set_keyboard_mode(
                self.window, GtkLayerShell.KeyboardMode.NONE
            )
        else:
            _log.warning("GtkLayerShell unavailable, %s is a plain window", title)

    def anchor_edges(self, pos: Position) -> tuple[Position, ...]:
        return (pos,)

    def set_position(self, pos: Position) -> None:
        """Re-anchor the window to the edge ``pos``."""
        self.position = pos
        if not has_layer_shell():
            return
        anchored = self.anchor_edges(pos=pos)
        for edge in Position:
            GtkLayerShell.set_anchor(self.window, _edge(pos=edge), edge in anchored)

    def show(self) -> None:
        self.window.show_all()

    def hide(self) -> None:
        self.window.hide()

    def attach_hover(self, callback: Callable[[], None]) -> None:
        """Call ``callback`` on this surface's pointer crossing signal."""
        self.detach_hover()
        self._hover_handler = self.window.connect(
            self.hover_signal, self._on_crossing, callback
        )

    def detach_hover(self) -> None:
        if self._hover_handler:
            self.window.disconnect(self._hover_handler)
            self._hover_handler = 0

    def _on_crossing(
        self, _widget: Gtk.Widget, event: Gdk.EventCrossing, callback: Callable[[], None]
    ) -> bool:
        # Crossings into or out of our own child widgets are not real leaves
        if event.detail == Gdk.NotifyType.INFERIOR:
            return False
        callback()
        return False


class DockSurface(LayerSurface):
    """The dock window holding the entry box."""

    hover_signal = "leave-notify-event"
    style_class = "hydock"

    def __init__(self) -> None:
        super().__init__(title="Hydock")
        self.box = Gtk.Box(orientation=Gtk.Orientation.HORIZONTAL, spacing=0)
        self.box.set_name("dock")
        self.window.add(self.box)
        self.window.connect("destroy", Gtk.main_quit)
        self._reserve: bool | None = None

    def set_exclusive(self, reserve: bool) -> None:
        """Reserve screen space for the dock, or let windows go underneath."""
        if reserve == self._reserve:
            return
        self._reserve = reserve
        if not has_layer_shell():
            return
        if reserve:
            GtkLayerShell.auto_exclusive_zone_enable(self.window)
        else:
            GtkLayerShell.set_exclusive_zone(self.window, 0)


class TriggerSurface(LayerSurface):
    """Thin transparent strip along the dock's edge that re-shows the dock."""

    hover_signal = "enter-notify-event"
    style_class = "hydock-trigger"

    def __init__(self) -> None:
        super().__init__(title="Hydock Trigger")
        self.window.set_app_paintable(True)
        screen = self.window.get_screen()
        visual = screen.get_rgba_visual() if screen else None
        if visual is not None:
            self.window.set_visual(visual)
        self.window.set_size_request(TRIGGER_PX, TRIGGER_PX)

    def anchor_edges(self, pos: Position) -> tuple[Position, ...]:
        # Anchoring both perpendicular edges stretches the strip to full length
        return (pos, *perpendicular_edges(pos=pos))


class StyleManager:
    """Applies the bundled stylesheet and the user's, re-read every tick."""

    def __init__(self) -> None:
        self._default = Gtk.CssProvider()
        self._user = Gtk.CssProvider()
        self._user_text: str | None = None

        screen = Gdk.Screen.get_default()
        if screen is not None:
            Gtk.StyleContext.add_provider_for_screen(
                screen, self._default, Gtk.STYLE_PROVIDER_PRIORITY_APPLICATION
            )
            Gtk.StyleContext.add_provider_for_screen(
                screen, self._user, Gtk.STYLE_PROVIDER_PRIORITY_USER
            )
        self._load(provider=self._default, text=default_style())

    def apply(self, text: str | None) -> None:
        """Load the user's stylesheet text; None clears it."""
        text = text or ""
        if text == self._user_text:
            return
        self._user_text = text
        self._load(provider=self._user, text=text)

    @staticmethod
    def _load(provider: Gtk.CssProvider, text: str) -> None:
        try:
            provider.load_from_data(text.encode())
        except GLib.Error as exc:
            _log.debug("Ignoring invalid stylesheet: %s", exc)
