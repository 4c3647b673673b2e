# src/behave_notifier/exceptions.py

"""
Exception hierarchy for behave-notifier.
"""


class NotifierError(Exception):
    """Base class for all behave-notifier errors."""

    pass


class ConfigurationError(NotifierError):
    """Raised for invalid configuration values or unknown backends."""

    pass


class NotificationSinkError(NotifierError):
    """Raised when the notification channel is unavailable or rejects a call."""

    def __init__(
        self,
        message: str,
        backend: str | None = None,
        details: Exception | None = None,
    ):
        self.backend = backend
        self.details = details
        full_message = message
        if backend:
            full_message = f"[{backend}] {message}"
        super().__init__(full_message)
        if details and hasattr(self, "add_note"):
            self.add_note(f"Original error: {type(details).__name__}: {details}")


class RerunFileError(NotifierError):
    """Raised when the rerun file cannot be created or written."""

    def __init__(self, message: str, path: str | None = None):
        self.path = path
        full_message = message
        if path:
            full_message += f" (Path: '{path}')"
        super().__init__(full_message)


# 🔔⚙️
