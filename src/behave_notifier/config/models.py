#
# config/models.py
#
"""
Attrs-based configuration model for behave-notifier.
"""

import logging
from pathlib import Path
from typing import Any

from attrs import define, field

DEFAULT_RERUN_FILE = "rerun.txt"
DEFAULT_SUMMARY_TITLE = "Cucumber Results"


def _validate_log_level(inst: Any, attr: Any, value: str) -> None:
    """Validator for standard logging level names."""
    valid = logging._nameToLevel.keys()
    if value.upper() not in valid:
        raise ValueError(f"Invalid log_level '{value}'. Must be one of {list(valid)}.")


def _validate_non_empty(inst: Any, attr: Any, value: str) -> None:
    if not str(value).strip():
        raise ValueError(f"Field '{attr.name}' must not be empty")


@define(frozen=True, slots=True)
class NotifierConfig:
    """Settings for the notification formatter and CLI."""

    notifier: str = field(default="auto", validator=_validate_non_empty)
    rerun_file: Path = field(default=Path(DEFAULT_RERUN_FILE), converter=Path)
    summary_title: str = field(default=DEFAULT_SUMMARY_TITLE)
    log_level: str = field(default="WARNING", validator=_validate_log_level)

    @property
    def numeric_log_level(self) -> int:
        return logging.getLevelName(self.log_level.upper())

# 🔔⚙️
