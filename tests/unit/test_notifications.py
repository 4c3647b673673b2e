# tests/unit/test_notifications.py

"""Tests for notification backends and the notifier factory."""

import subprocess
from unittest.mock import MagicMock, patch

import pytest

from behave_notifier.exceptions import ConfigurationError, NotificationSinkError
from behave_notifier.notifications import (
    LogNotifier,
    NotificationSink,
    NotifySendNotifier,
    NullNotifier,
    OsascriptNotifier,
    get_notifier,
)
from behave_notifier.notifications import backends
from behave_notifier.state import Icon


class TestNotifySendNotifier:
    @patch("behave_notifier.notifications.backends.subprocess.run")
    def test_failed_notification_is_critical(self, mock_run: MagicMock):
        NotifySendNotifier().notify("I see *Welcome*", title="Login", image=Icon.FAILED)

        mock_run.assert_called_once_with(
            [
                "notify-send",
                "--app-name=behave",
                "--urgency=critical",
                "--icon=dialog-error",
                "Login",
                "I see *Welcome*",
            ],
            check=True,
            capture_output=True,
            text=True,
        )

    @patch("behave_notifier.notifications.backends.subprocess.run")
    def test_success_notification(self, mock_run: MagicMock):
        NotifySendNotifier(app_name="suite").notify("3 passed steps", title="Results", image=Icon.SUCCESS)

        command = mock_run.call_args.args[0]
        assert "--app-name=suite" in command
        assert "--urgency=normal" in command
        assert "--icon=emblem-default" in command

    @patch("behave_notifier.notifications.backends.subprocess.run", side_effect=FileNotFoundError("notify-send"))
    def test_missing_command_raises(self, mock_run: MagicMock):
        with pytest.raises(NotificationSinkError, match="not found"):
            NotifySendNotifier().notify("msg", title="t", image=Icon.PENDING)

    @patch(
        "behave_notifier.notifications.backends.subprocess.run",
        side_effect=subprocess.CalledProcessError(1, ["notify-send"], stderr="no daemon"),
    )
    def test_failing_command_raises(self, mock_run: MagicMock):
        with pytest.raises(NotificationSinkError) as exc_info:
            NotifySendNotifier().notify("msg", title="t", image=Icon.PENDING)

        assert exc_info.value.backend == "notify-send"
        assert isinstance(exc_info.value.details, subprocess.CalledProcessError)


class TestOsascriptNotifier:
    @patch("behave_notifier.notifications.backends.subprocess.run")
    def test_quotes_are_escaped(self, mock_run: MagicMock):
        OsascriptNotifier().notify('I log in as *"bob"*', title="Login", image=Icon.FAILED)

        command = mock_run.call_args.args[0]
        assert command[:2] == ["osascript", "-e"]
        assert command[2] == (
            'display notification "I log in as *\\"bob\\"*" with title "Login" subtitle "failed"'
        )


class TestInProcessNotifiers:
    def test_log_notifier_logs_failures_as_warnings(self):
        with patch.object(backends, "log") as mock_log:
            LogNotifier().notify("boom", title="Login", image=Icon.FAILED)
            LogNotifier().notify("ok", title="Results", image=Icon.SUCCESS)

        mock_log.warning.assert_called_once_with("boom", title="Login", image="failed", emoji_key="notify")
        mock_log.info.assert_called_once_with("ok", title="Results", image="success", emoji_key="notify")

    @patch("behave_notifier.notifications.backends.subprocess.run")
    def test_null_notifier_does_nothing(self, mock_run: MagicMock):
        assert NullNotifier().notify("msg", title="t", image=Icon.FAILED) is None
        mock_run.assert_not_called()


class TestNotifierFactory:
    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("notify-send", NotifySendNotifier),
            ("libnotify", NotifySendNotifier),
            ("osascript", OsascriptNotifier),
            ("LOG", LogNotifier),
            ("null", NullNotifier),
        ],
    )
    def test_named_backends(self, name: str, expected: type):
        notifier = get_notifier(name)

        assert isinstance(notifier, expected)
        assert isinstance(notifier, NotificationSink)

    def test_unknown_backend(self):
        with pytest.raises(ConfigurationError, match="Unsupported notifier: 'growl'"):
            get_notifier("growl")

    def test_auto_prefers_osascript_on_macos(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setattr("sys.platform", "darwin")
        with patch("behave_notifier.notifications.factory.shutil.which", return_value="/usr/bin/osascript"):
            assert isinstance(get_notifier("auto"), OsascriptNotifier)

    def test_auto_uses_notify_send_on_linux(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setattr("sys.platform", "linux")
        with patch("behave_notifier.notifications.factory.shutil.which", return_value="/usr/bin/notify-send"):
            assert isinstance(get_notifier("auto"), NotifySendNotifier)

    def test_auto_falls_back_to_log(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setattr("sys.platform", "linux")
        with patch("behave_notifier.notifications.factory.shutil.which", return_value=None):
            assert isinstance(get_notifier("auto"), LogNotifier)
