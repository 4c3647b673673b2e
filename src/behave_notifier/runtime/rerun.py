# src/behave_notifier/runtime/rerun.py
"""
Reading and writing the rerun file.

The file holds the locations of failed feature elements on a single line,
separated by spaces, which behave accepts as ``behave @rerun.txt``.
"""
from collections.abc import Sequence
from pathlib import Path

import structlog

from behave_notifier.exceptions import RerunFileError
from behave_notifier.telemetry import StructLogger

log: StructLogger = structlog.get_logger("behave_notifier.runtime.rerun")


def format_rerun_line(locations: Sequence[str]) -> str:
    return " ".join(locations) + "\n"


def write_rerun_file(locations: Sequence[str], path: Path) -> None:
    """Overwrites ``path`` with the given locations."""
    try:
        with open(path, "w", encoding="utf-8") as f:
            f.write(format_rerun_line(locations))
    except OSError as e:
        log.error("Failed to write rerun file", path=str(path), error=str(e))
        raise RerunFileError(f"Could not write rerun file: {e}", path=str(path)) from e
    log.info("Wrote rerun file", path=str(path), locations=len(locations), emoji_key="rerun")


def read_rerun_file(path: Path) -> list[str]:
    """Returns the locations listed in ``path``, or an empty list if it does not exist."""
    if not path.exists():
        return []
    return path.read_text(encoding="utf-8").split()


def clear_rerun_file(path: Path) -> bool:
    """Deletes the rerun file. Returns True if there was one."""
    try:
        path.unlink()
    except FileNotFoundError:
        return False
    log.info("Removed rerun file", path=str(path), emoji_key="rerun")
    return True
