#
# src/behave_notifier/notifications/factory.py
#
"""
Factory for creating NotificationSink instances.
"""
import shutil
import sys

import structlog

from behave_notifier.exceptions import ConfigurationError
from behave_notifier.notifications.backends import (
    LogNotifier,
    NotifySendNotifier,
    NullNotifier,
    OsascriptNotifier,
)
from behave_notifier.notifications.protocols import NotificationSink

log = structlog.get_logger("behave_notifier.notifications.factory")

NOTIFIER_MAP = {
    "notify-send": NotifySendNotifier,
    "libnotify": NotifySendNotifier,  # alias
    "osascript": OsascriptNotifier,
    "log": LogNotifier,
    "null": NullNotifier,
}


def detect_notifier_name() -> str:
    """Picks the desktop backend available on this machine, falling back to 'log'."""
    if sys.platform == "darwin" and shutil.which("osascript"):
        return "osascript"
    if shutil.which("notify-send"):
        return "notify-send"
    log.info("No desktop notification command found, notifications go to the log")
    return "log"


def get_notifier(notifier_name: str) -> NotificationSink:
    """
    Factory function to get an instance of a NotificationSink.
    """
    notifier_key = notifier_name.lower()
    if notifier_key == "auto":
        notifier_key = detect_notifier_name()

    notifier_class = NOTIFIER_MAP.get(notifier_key)
    if not notifier_class:
        log.error("Unsupported notifier specified", notifier=notifier_name)
        raise ConfigurationError(
            f"Unsupported notifier: '{notifier_name}'. "
            f"Available notifiers: {['auto', *NOTIFIER_MAP.keys()]}"
        )

    log.debug("Instantiating notifier", notifier=notifier_key)
    return notifier_class()

# 🔔⚙️
