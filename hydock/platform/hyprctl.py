"""Hyprland access via hyprctl -- open clients and window dispatches."""

from __future__ import annotations

import json
import subprocess
from typing import Any

from hydock.core.reconcile import WindowSnapshotEntry, normalize_class
from hydock.log import get_logger

_log = get_logger(name="hyprctl")

HYPRCTL = "hyprctl"
# Reply of `hyprctl dispatch` when the addressed window is gone
NOT_FOUND = "No such window found"

FOCUS_WINDOW = "focuswindow"
CLOSE_WINDOW = "closewindow"


def _exec(cmd: list[str]) -> subprocess.CompletedProcess[str] | None:
    """Run hyprctl and return the finished process, None when it cannot start.

    No timeout: a hung compositor query stalls the caller.
    """
    try:
        return subprocess.run(cmd, capture_output=True, text=True)
    except (OSError, subprocess.SubprocessError) as exc:
        _log.warning("Failed to run %s: %s", cmd, exc)
        return None


def _failed(cmd: list[str], result: subprocess.CompletedProcess[str]) -> bool:
    if result.returncode == 0:
        return False
    _log.warning(
        "%s exited with %d: %s", cmd, result.returncode, result.stderr.strip()
    )
    return True


def _run(cmd: list[str]) -> str | None:
    """Run hyprctl, return stdout or None on failure."""
    result = _exec(cmd=cmd)
    if result is None or _failed(cmd=cmd, result=result):
        return None
    return result.stdout


def _parse_clients(output: str) -> list[dict[str, Any]] | None:
    """Decode `hyprctl clients -j` output, None when malformed."""
    try:
        data = json.loads(output)
    except json.JSONDecodeError as exc:
        _log.warning("Malformed hyprctl clients output: %s", exc)
        return None
    if not isinstance(data, list):
        _log.warning("Unexpected hyprctl clients payload: %s", type(data).__name__)
        return None
    for record in data:
        if not isinstance(record, dict) or not isinstance(record.get("class"), str):
            _log.warning("hyprctl client without a class: %r", record)
            return None
    return data


def _query_clients() -> list[dict[str, Any]]:
    output = _run(cmd=[HYPRCTL, "clients", "-j"])
    if output is None:
        return []
    return _parse_clients(output=output) or []


def fetch_clients() -> list[WindowSnapshotEntry]:
    """Current open windows; empty when Hyprland cannot be queried."""
    snapshot = []
    for record in _query_clients():
        if not record["class"]:
            continue
        address = record.get("address")
        snapshot.append(
            WindowSnapshotEntry(
                app_class=record["class"],
                address=address if isinstance(address, str) else "",
            )
        )
    return snapshot


def find_address(app_class: str) -> str:
    """Address of the first client of ``app_class``, "" when there is none.

    Matches the literal Hyprland class case-insensitively, so an entry
    grouped under its lower-cased class still resolves to a real window.
    """
    wanted = normalize_class(app_class)
    for record in _query_clients():
        if normalize_class(record["class"]) != wanted:
            continue
        address = record.get("address")
        if isinstance(address, str) and address != "null":
            return address
        return ""
    return ""


def dispatch(action: str, address: str) -> str:
    """Run `hyprctl dispatch <action> address:<address>` and return its reply."""
    cmd = [HYPRCTL, "dispatch", action, f"address:{address}"]
    result = _exec(cmd=cmd)
    if result is None:
        return ""
    reply = result.stdout.strip()
    # The sentinel counts whatever the exit status
    if reply == NOT_FOUND:
        return reply
    if _failed(cmd=cmd, result=result):
        return ""
    return reply
