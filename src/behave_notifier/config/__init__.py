#
# config/__init__.py
#
"""
Configuration handling sub-package for behave-notifier.
"""

from .loader import load_config
from .models import DEFAULT_RERUN_FILE, DEFAULT_SUMMARY_TITLE, NotifierConfig

__all__ = [
    "DEFAULT_RERUN_FILE",
    "DEFAULT_SUMMARY_TITLE",
    "NotifierConfig",
    "load_config",
]

# 🔔⚙️
