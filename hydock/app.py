"""Application entry point -- bootstraps the dock and runs the GTK main loop."""

from __future__ import annotations

import faulthandler
import signal

# Print Python traceback on SIGSEGV/SIGABRT/SIGFPE to stderr.
# Also dumps on SIGUSR1 for on-demand debugging (kill -USR1 <pid>).
faulthandler.enable()
faulthandler.register(signal.SIGUSR1)

import gi  # noqa: E402

gi.require_version("Gtk", "3.0")
from gi.repository import GLib, Gtk  # noqa: E402

from hydock.platform.dispatcher import CommandDispatcher  # noqa: E402
from hydock.tick import TICK_INTERVAL_S, TickDriver  # noqa: E402
from hydock.ui.autohide import VisibilityController  # noqa: E402
from hydock.ui.dock_view import DockView  # noqa: E402
from hydock.ui.surfaces import DockSurface, StyleManager, TriggerSurface  # noqa: E402


def main() -> None:
    """Entry point for the hydock application."""
    dispatcher = CommandDispatcher()
    dock = DockSurface()
    trigger = TriggerSurface()
    view = DockView(dock.box, dispatcher)
    visibility = VisibilityController(dock, trigger)
    style = StyleManager()

    driver = TickDriver(view, visibility, dock, style)

    # Graceful shutdown on SIGINT/SIGTERM
    GLib.unix_signal_add(GLib.PRIORITY_HIGH, signal.SIGINT, _quit)
    GLib.unix_signal_add(GLib.PRIORITY_HIGH, signal.SIGTERM, _quit)

    # First refresh right away instead of one interval after start
    driver.on_timeout()
    GLib.timeout_add_seconds(TICK_INTERVAL_S, driver.on_timeout)

    dock.show()
    Gtk.main()


def _quit() -> bool:
    Gtk.main_quit()
    return False
