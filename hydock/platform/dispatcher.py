"""Click actions -- act on an application's window, or launch it."""

from __future__ import annotations

from typing import Callable

from hydock.log import get_logger
from hydock.platform import hyprctl, launcher

_log = get_logger(name="dispatcher")


class CommandDispatcher:
    """Runs window-manager actions with a fallback to launching the app.

    The window-manager and launch functions are injectable so the
    protocol can be exercised without Hyprland.
    """

    def __init__(
        self,
        find_address: Callable[[str], str] = hyprctl.find_address,
        dispatch: Callable[[str, str], str] = hyprctl.dispatch,
        launch_application: Callable[[str], bool] = launcher.launch_application,
        run_command: Callable[[str], bool] = launcher.run_command,
    ) -> None:
        self._find_address = find_address
        self._dispatch = dispatch
        self._launch_application = launch_application
        self._run_command = run_command

    def focus_or_launch(self, app_class: str) -> None:
        """Focus the first window of ``app_class``, or launch it."""
        self._act_or_launch(action=hyprctl.FOCUS_WINDOW, app_class=app_class)

    def close_or_launch(self, app_class: str) -> None:
        """Close the first window of ``app_class``, or launch it."""
        self._act_or_launch(action=hyprctl.CLOSE_WINDOW, app_class=app_class)

    def run_launcher(self, command: str) -> None:
        """Run the configured app launcher command."""
        self._run_command(command)

    def _act_or_launch(self, action: str, app_class: str) -> None:
        address = self._find_address(app_class)
        if not address:
            _log.debug("No window for %s, launching", app_class)
            self._launch_application(app_class)
            return

        reply = self._dispatch(action, address)
        # The window may close between the lookup and the dispatch
        if reply == hyprctl.NOT_FOUND:
            _log.debug("Window %s of %s vanished, launching", address, app_class)
            self._launch_application(app_class)
