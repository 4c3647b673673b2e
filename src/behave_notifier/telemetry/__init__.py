#
# src/behave_notifier/telemetry/__init__.py
#
"""
Logging and telemetry helpers for behave-notifier.
"""
from .logger import StructLogger, setup_logging

__all__ = ["StructLogger", "setup_logging"]

# 🔔⚙️
