"""Detached process launching for applications and the launcher command."""

from __future__ import annotations

import subprocess
import threading
from pathlib import Path

from hydock.log import get_logger

_log = get_logger(name="launcher")

# Applications are started from their binary named after the window class
APP_BIN_DIR = Path("/usr/bin")


def _reap(proc: subprocess.Popen) -> None:
    """Wait for a child so it does not linger as a zombie."""
    code = proc.wait()
    _log.debug("Child %d exited with %d", proc.pid, code)


def spawn_detached(cmd: list[str] | str, shell: bool = False) -> bool:
    """Start a child process without waiting for it.

    Uses start_new_session=True so the child gets its own session and
    process group and survives the dock. The exit status is collected on
    a short-lived daemon thread, never on the calling (UI) thread.
    """
    try:
        proc = subprocess.Popen(
            cmd,
            shell=shell,
            start_new_session=True,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
        )
    except OSError as exc:
        _log.warning("Failed to launch %s: %s", cmd, exc)
        return False
    threading.Thread(target=_reap, args=(proc,), daemon=True).start()
    return True


def app_binary(app_class: str) -> Path:
    """Executable started for an application class."""
    return APP_BIN_DIR / app_class


def launch_application(app_class: str) -> bool:
    """Launch an application by its class name."""
    _log.info("Launching %s", app_class)
    return spawn_detached(cmd=[str(app_binary(app_class=app_class))])


def run_command(command: str) -> bool:
    """Run a shell command line, e.g. the app launcher."""
    if not command.strip():
        _log.warning("Empty launcher command")
        return False
    return spawn_detached(cmd=command, shell=True)
