#
# src/behave_notifier/notifications/protocols.py
#
"""
Defines the notification sink protocol and the notification record.
"""
from typing import Protocol, runtime_checkable

from attrs import define

from behave_notifier.state import Icon


@define(frozen=True, slots=True)
class Notification:
    """
    One desktop notification as handed to a sink.
    """
    message: str
    title: str
    image: Icon


@runtime_checkable
class NotificationSink(Protocol):
    """
    Protocol for anything that can show a notification to the user.
    """
    def notify(self, message: str, *, title: str, image: Icon) -> None:
        """
        Shows a notification. Fire and forget: nothing is returned.

        Args:
            message: The notification body.
            title: The notification title.
            image: The icon to show next to it.

        Raises:
            NotificationSinkError: if the channel is unavailable or rejects the call.
        """
        ...

# 🔔⚙️
