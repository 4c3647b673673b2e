# src/behave_notifier/formatter.py

"""
behave formatter that sends desktop notifications and writes a rerun file.

Enable it on the command line::

    behave -f behave_notifier.formatter:NotificationFormatter -f pretty

or register it in ``behave.ini``::

    [behave.formatters]
    notify = behave_notifier.formatter:NotificationFormatter

Failed scenarios end up in ``rerun.txt``; run them again with
``behave @rerun.txt``.
"""

from typing import Any

import structlog
from behave.formatter.base import Formatter

from behave_notifier.config import load_config
from behave_notifier.notifications import NotificationSink, get_notifier
from behave_notifier.runtime import ResultNotifier, StepTally
from behave_notifier.state import StepStatus
from behave_notifier.telemetry import StructLogger, setup_logging

log: StructLogger = structlog.get_logger("behave_notifier.formatter")

# behave status name -> StepStatus. Covers behave 1.2.6 and the 1.2.7+ additions.
BEHAVE_STATUS_MAP = {
    "passed": StepStatus.PASSED,
    "failed": StepStatus.FAILED,
    "error": StepStatus.FAILED,
    "hook_error": StepStatus.FAILED,
    "undefined": StepStatus.UNDEFINED,
    "pending": StepStatus.PENDING,
    "pending_warn": StepStatus.PENDING,
    "skipped": StepStatus.SKIPPED,
    "untested": StepStatus.SKIPPED,
}


def normalize_status(status: Any) -> StepStatus | None:
    """Maps a behave status (enum member or name) to a StepStatus, None if unknown."""
    name = getattr(status, "name", status)
    return BEHAVE_STATUS_MAP.get(str(name).lower())


def format_step_args(step: Any, marker: str = "*") -> str:
    """
    Renders the step text with every matched argument wrapped in ``marker``.

    Undefined steps have no match and are rendered as plain text.
    """
    text = step.name
    match = getattr(step, "match", None)
    arguments = getattr(match, "arguments", None) or []

    parts = []
    cursor = 0
    for arg in sorted(arguments, key=lambda a: a.start or 0):
        if arg.start is None or arg.end is None or arg.start < cursor:
            continue
        parts.append(text[cursor:arg.start])
        parts.append(f"{marker}{arg.original}{marker}")
        cursor = arg.end
    parts.append(text[cursor:])
    return "".join(parts)


class NotificationFormatter(Formatter):
    """
    Adapts behave's formatter callbacks to a ResultNotifier.

    behave has no "scenario finished" callback, so an element is closed when
    the next scenario starts, at the end of its feature file, or at close.
    """

    name = "notify"
    description = "Desktop notifications for failing steps, plus a rerun file."

    def __init__(self, stream_opener, config, notifier: NotificationSink | None = None):
        super().__init__(stream_opener, config)
        self.settings = load_config(getattr(config, "userdata", None))
        if not structlog.is_configured():
            setup_logging(level=self.settings.numeric_log_level)

        self.tally = StepTally()
        self.result_notifier = ResultNotifier(
            results=self.tally,
            notifier=notifier or get_notifier(self.settings.notifier),
            rerun_path=self.settings.rerun_file,
            summary_title=self.settings.summary_title,
        )
        self.current_scenario = None

    def scenario(self, scenario) -> None:
        self._end_current_scenario()
        self.current_scenario = scenario
        self.result_notifier.on_feature_element_start(scenario.name)

    def result(self, step) -> None:
        status = normalize_status(step.status)
        if status is None:
            log.debug("Ignoring step with unknown status", step=step.name, status=str(step.status))
            return
        self.tally.record(status)
        self.result_notifier.on_step_result(status, format_step_args(step))

    def eof(self) -> None:
        self._end_current_scenario()

    def close(self) -> None:
        self._end_current_scenario()
        try:
            self.result_notifier.on_run_end()
        finally:
            super().close()

    def _end_current_scenario(self) -> None:
        if self.current_scenario is None:
            return
        self.result_notifier.on_feature_element_end(str(self.current_scenario.location))
        self.current_scenario = None

# 🔔⚙️
