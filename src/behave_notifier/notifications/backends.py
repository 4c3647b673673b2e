#
# src/behave_notifier/notifications/backends.py
#
"""
Concrete notification sinks.
"""
import subprocess

import structlog

from behave_notifier.exceptions import NotificationSinkError
from behave_notifier.notifications.protocols import Notification, NotificationSink
from behave_notifier.state import Icon

log = structlog.get_logger("behave_notifier.notifications.backends")


class CommandNotifier(NotificationSink):
    """
    Base for sinks that shell out to a desktop notification command.
    """
    backend_name = "command"

    def build_command(self, notification: Notification) -> list[str]:
        raise NotImplementedError

    def notify(self, message: str, *, title: str, image: Icon) -> None:
        notification = Notification(message=message, title=title, image=image)
        command = self.build_command(notification)
        notify_log = log.bind(backend=self.backend_name, title=title, image=image.value)
        notify_log.debug("Sending notification", emoji_key="notify")

        try:
            subprocess.run(command, check=True, capture_output=True, text=True)
        except FileNotFoundError as e:
            notify_log.error("Notification command not found", command_executable=command[0])
            raise NotificationSinkError(
                f"Notification command not found: '{command[0]}'. Is it installed and in the system's PATH?",
                backend=self.backend_name,
                details=e,
            ) from e
        except subprocess.CalledProcessError as e:
            notify_log.error("Notification command failed", exit_code=e.returncode, stderr=e.stderr)
            raise NotificationSinkError(
                f"Notification command exited with status {e.returncode}",
                backend=self.backend_name,
                details=e,
            ) from e


class NotifySendNotifier(CommandNotifier):
    """Linux desktop notifications through libnotify's ``notify-send``."""
    backend_name = "notify-send"

    ICONS = {
        Icon.SUCCESS: "emblem-default",
        Icon.PENDING: "dialog-warning",
        Icon.FAILED: "dialog-error",
    }

    def __init__(self, app_name: str = "behave"):
        self.app_name = app_name

    def build_command(self, notification: Notification) -> list[str]:
        urgency = "critical" if notification.image is Icon.FAILED else "normal"
        return [
            "notify-send",
            f"--app-name={self.app_name}",
            f"--urgency={urgency}",
            f"--icon={self.ICONS[notification.image]}",
            notification.title,
            notification.message,
        ]


def _applescript_string(value: str) -> str:
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


class OsascriptNotifier(CommandNotifier):
    """macOS Notification Center through ``osascript``."""
    backend_name = "osascript"

    def build_command(self, notification: Notification) -> list[str]:
        script = (
            f"display notification {_applescript_string(notification.message)} "
            f"with title {_applescript_string(notification.title)} "
            f"subtitle {_applescript_string(notification.image.value)}"
        )
        return ["osascript", "-e", script]


class LogNotifier(NotificationSink):
    """Writes notifications to the log instead of the desktop (CI, headless hosts)."""
    backend_name = "log"

    def notify(self, message: str, *, title: str, image: Icon) -> None:
        log_func = log.warning if image is Icon.FAILED else log.info
        log_func(message, title=title, image=image.value, emoji_key="notify")


class NullNotifier(NotificationSink):
    """Drops every notification."""
    backend_name = "null"

    def notify(self, message: str, *, title: str, image: Icon) -> None:
        return None

# 🔔⚙️
