#
# src/behave_notifier/notifications/__init__.py
#
"""
Notification sinks sub-package for behave-notifier.
"""
from .backends import LogNotifier, NotifySendNotifier, NullNotifier, OsascriptNotifier
from .factory import get_notifier
from .protocols import Notification, NotificationSink

__all__ = [
    "LogNotifier",
    "Notification",
    "NotificationSink",
    "NotifySendNotifier",
    "NullNotifier",
    "OsascriptNotifier",
    "get_notifier",
]

# 🔔⚙️
