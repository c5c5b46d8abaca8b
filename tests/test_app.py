"""Tests for application bootstrap wiring in hydock.app."""

from __future__ import annotations

import importlib
import signal
import sys
import types
from types import SimpleNamespace
from unittest.mock import MagicMock


def _load_app_module(monkeypatch):
    fake_glib = SimpleNamespace(
        PRIORITY_HIGH=100, unix_signal_add=MagicMock(), timeout_add_seconds=MagicMock()
    )
    fake_gtk = SimpleNamespace(main=MagicMock(), main_quit=MagicMock())
    fake_repo = SimpleNamespace(GLib=fake_glib, Gtk=fake_gtk)
    fake_gi = SimpleNamespace(require_version=MagicMock(), repository=fake_repo)

    monkeypatch.setitem(sys.modules, "gi", fake_gi)
    monkeypatch.setitem(sys.modules, "gi.repository", fake_repo)

    # Stub UI modules imported by hydock.app so we don't depend on full GI
    # bindings during unit tests.
    ui_stubs = {
        "hydock.ui.dock_view": ["DockView"],
        "hydock.ui.surfaces": ["DockSurface", "StyleManager", "TriggerSurface"],
    }
    for module_name, class_names in ui_stubs.items():
        stub_mod = types.ModuleType(module_name)
        for class_name in class_names:
            setattr(stub_mod, class_name, type(class_name, (), {}))
        monkeypatch.setitem(sys.modules, module_name, stub_mod)

    sys.modules.pop("hydock.app", None)
    return importlib.import_module("hydock.app"), fake_glib, fake_gtk


class TestAppMain:
    def test_main_builds_runtime_graph_and_starts_loop(self, monkeypatch):
        # Given
        app_mod, fake_glib, fake_gtk = _load_app_module(monkeypatch)

        dispatcher = MagicMock()
        dock = MagicMock()
        trigger = MagicMock()
        view = MagicMock()
        visibility = MagicMock()
        style = MagicMock()
        driver = MagicMock()

        monkeypatch.setattr(app_mod, "CommandDispatcher", MagicMock(return_value=dispatcher))
        monkeypatch.setattr(app_mod, "DockSurface", MagicMock(return_value=dock))
        monkeypatch.setattr(app_mod, "TriggerSurface", MagicMock(return_value=trigger))
        monkeypatch.setattr(app_mod, "StyleManager", MagicMock(return_value=style))
        view_cls = MagicMock(return_value=view)
        monkeypatch.setattr(app_mod, "DockView", view_cls)
        visibility_cls = MagicMock(return_value=visibility)
        monkeypatch.setattr(app_mod, "VisibilityController", visibility_cls)
        driver_cls = MagicMock(return_value=driver)
        monkeypatch.setattr(app_mod, "TickDriver", driver_cls)

        # When
        app_mod.main()

        # Then
        view_cls.assert_called_once_with(dock.box, dispatcher)
        visibility_cls.assert_called_once_with(dock, trigger)
        driver_cls.assert_called_once_with(view, visibility, dock, style)
        driver.on_timeout.assert_called_once()
        fake_glib.timeout_add_seconds.assert_called_once_with(1, driver.on_timeout)
        dock.show.assert_called_once()
        fake_gtk.main.assert_called_once()

        assert fake_glib.unix_signal_add.call_count == 2
        sig_calls = [c.args[1] for c in fake_glib.unix_signal_add.call_args_list]
        assert signal.SIGINT in sig_calls
        assert signal.SIGTERM in sig_calls
        for call in fake_glib.unix_signal_add.call_args_list:
            assert call.args[2] is app_mod._quit

    def test_quit_requests_gtk_main_quit(self, monkeypatch):
        # Given
        app_mod, _fake_glib, fake_gtk = _load_app_module(monkeypatch)
        # When
        result = app_mod._quit()
        # Then
        assert result is False
        fake_gtk.main_quit.assert_called_once()
