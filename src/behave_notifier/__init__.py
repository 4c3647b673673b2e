#
# src/behave_notifier/__init__.py
#
"""
behave-notifier: desktop notifications and a rerun file for behave test runs.
"""

from behave_notifier.exceptions import (
    ConfigurationError,
    NotificationSinkError,
    NotifierError,
    RerunFileError,
)
from behave_notifier.runtime import ResultNotifier, StepTally
from behave_notifier.state import Icon, StepStatus

__all__ = [
    "ConfigurationError",
    "Icon",
    "NotificationSinkError",
    "NotifierError",
    "RerunFileError",
    "ResultNotifier",
    "StepStatus",
    "StepTally",
]

# 🔔⚙️
