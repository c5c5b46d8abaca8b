"""Tests for detached process launching."""

import subprocess
from pathlib import Path
from unittest.mock import MagicMock, patch

from hydock.platform import launcher
from hydock.platform.launcher import (
    app_binary,
    launch_application,
    run_command,
    spawn_detached,
)


class _InlineThread:
    """Runs the thread target synchronously so reaping is observable."""

    def __init__(self, target, args=(), daemon=None):
        self._target = target
        self._args = args
        self.daemon = daemon

    def start(self):
        self._target(*self._args)


class TestSpawnDetached:
    def test_starts_new_session_with_devnull_stdio(self):
        # Given
        proc = MagicMock(pid=42)
        proc.wait.return_value = 0
        with patch("hydock.platform.launcher.subprocess.Popen", return_value=proc) as popen, \
                patch("hydock.platform.launcher.threading.Thread", _InlineThread):
            # When
            ok = spawn_detached(cmd=["/usr/bin/foo"])
        # Then
        assert ok is True
        kwargs = popen.call_args.kwargs
        assert kwargs["start_new_session"] is True
        assert kwargs["shell"] is False
        assert kwargs["stdin"] is subprocess.DEVNULL
        assert kwargs["stdout"] is subprocess.DEVNULL
        assert kwargs["stderr"] is subprocess.DEVNULL

    def test_child_is_reaped_off_the_calling_thread(self):
        # Given
        proc = MagicMock(pid=7)
        thread = MagicMock()
        with patch("hydock.platform.launcher.subprocess.Popen", return_value=proc), \
                patch("hydock.platform.launcher.threading.Thread", return_value=thread) as thread_cls:
            # When
            spawn_detached(cmd=["/usr/bin/foo"])
        # Then -- no wait on the caller, a daemon thread waits instead
        proc.wait.assert_not_called()
        assert thread_cls.call_args.kwargs["target"] is launcher._reap
        assert thread_cls.call_args.kwargs["args"] == (proc,)
        assert thread_cls.call_args.kwargs["daemon"] is True
        thread.start.assert_called_once()

    def test_reap_waits_for_child(self):
        # Given
        proc = MagicMock(pid=1)
        proc.wait.return_value = 0
        # When
        launcher._reap(proc)
        # Then
        proc.wait.assert_called_once()

    def test_spawn_failure_is_logged_not_raised(self):
        with patch(
            "hydock.platform.launcher.subprocess.Popen",
            side_effect=PermissionError("denied"),
        ):
            assert spawn_detached(cmd=["/usr/bin/foo"]) is False

    def test_real_process_is_reaped(self):
        # Given / When
        with patch("hydock.platform.launcher.threading.Thread", _InlineThread):
            ok = spawn_detached(cmd=["true"])
        # Then
        assert ok is True


class TestLaunchApplication:
    def test_binary_path(self):
        assert app_binary("foo") == Path("/usr/bin/foo")

    def test_launches_usr_bin_class(self):
        with patch("hydock.platform.launcher.spawn_detached", return_value=True) as spawn:
            assert launch_application("foo") is True
        spawn.assert_called_once_with(cmd=["/usr/bin/foo"])

    def test_missing_binary_returns_false(self):
        with patch(
            "hydock.platform.launcher.subprocess.Popen",
            side_effect=FileNotFoundError("/usr/bin/nope"),
        ):
            assert launch_application("nope") is False


class TestRunCommand:
    def test_runs_through_shell(self):
        with patch("hydock.platform.launcher.spawn_detached", return_value=True) as spawn:
            assert run_command("rofi -show drun") is True
        spawn.assert_called_once_with(cmd="rofi -show drun", shell=True)

    def test_empty_command_is_not_run(self):
        with patch("hydock.platform.launcher.spawn_detached") as spawn:
            assert run_command("   ") is False
        spawn.assert_not_called()
