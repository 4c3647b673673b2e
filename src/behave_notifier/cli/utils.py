# src/behave_notifier/cli/utils.py

import logging
from pathlib import Path

import click
import structlog

from behave_notifier.config import DEFAULT_RERUN_FILE
from behave_notifier.telemetry.logger import setup_logging as core_setup_logging

log = structlog.get_logger("behave_notifier.cli.utils")

LOG_LEVEL_CHOICES = click.Choice(list(logging._nameToLevel.keys()), case_sensitive=False)


def logging_options(f):
    """Decorator to add logging options to any command."""
    f = click.option(
        "-l",
        "--log-level",
        type=LOG_LEVEL_CHOICES,
        default=None,
        envvar="BEHAVE_NOTIFIER_LOG_LEVEL",
        help="Set the logging level.",
    )(f)
    f = click.option(
        "--log-file",
        type=click.Path(dir_okay=False, writable=True, resolve_path=True),
        default=None,
        envvar="BEHAVE_NOTIFIER_LOG_FILE",
        help="Path to write logs to a file (JSON format).",
    )(f)
    f = click.option(
        "--json-logs",
        is_flag=True,
        default=None,
        envvar="BEHAVE_NOTIFIER_JSON_LOGS",
        help="Output console logs as JSON.",
    )(f)
    return f


def rerun_file_option(f):
    """Decorator adding the shared --rerun-file option."""
    return click.option(
        "-f",
        "--rerun-file",
        type=click.Path(dir_okay=False, path_type=Path),
        default=Path(DEFAULT_RERUN_FILE),
        show_default=True,
        envvar="BEHAVE_NOTIFIER_RERUN_FILE",
        show_envvar=True,
        help="Path to the rerun file.",
    )(f)


def setup_logging_from_context(
    ctx: click.Context,
    default_log_level: str = "WARNING",
) -> None:
    """
    Setup logging using the values stored on the context by the main group.
    """
    obj = ctx.obj or {}
    log_level_str = obj.get("LOG_LEVEL") or default_log_level
    log_file_path = obj.get("LOG_FILE")
    use_json_logs = obj.get("JSON_LOGS", False)

    numeric_level = logging.getLevelName(log_level_str.upper())
    if not isinstance(numeric_level, int):
        numeric_level = logging.WARNING
        log_level_str = "WARNING"

    core_setup_logging(
        level=numeric_level,
        json_logs=use_json_logs,
        log_file=log_file_path,
    )

    log.debug(
        "CLI logging initialized via utils",
        level=log_level_str,
        file=log_file_path or "console",
        json=use_json_logs,
    )
