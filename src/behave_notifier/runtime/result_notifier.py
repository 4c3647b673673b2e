# src/behave_notifier/runtime/result_notifier.py
"""
Turns test-run lifecycle callbacks into desktop notifications and a rerun file.
"""
from collections.abc import Mapping
from pathlib import Path

import structlog

from behave_notifier.config.models import DEFAULT_RERUN_FILE, DEFAULT_SUMMARY_TITLE
from behave_notifier.notifications.protocols import NotificationSink
from behave_notifier.runtime.rerun import write_rerun_file
from behave_notifier.runtime.tally import ResultAccumulator
from behave_notifier.state import (
    RERUN_STATUSES,
    SEVERITY_ORDER,
    Icon,
    RunState,
    StepStatus,
    icon_for,
)
from behave_notifier.telemetry import StructLogger

log: StructLogger = structlog.get_logger("behave_notifier.runtime.result_notifier")


def dump_count(count: int, what: str, state: str | None = None) -> str:
    """Renders counts like ``3 failed steps`` or ``1 passed step``."""
    noun = what if count == 1 else f"{what}s"
    return " ".join(str(part) for part in (count, state, noun) if part is not None)


def present_statuses(status_counts: Mapping[StepStatus, int]) -> list[StepStatus]:
    """Statuses with at least one step, most severe first."""
    return [status for status in SEVERITY_ORDER if status_counts.get(status, 0) > 0]


def summary_message(status_counts: Mapping[StepStatus, int]) -> str:
    statuses = present_statuses(status_counts)
    if not statuses:
        return dump_count(0, "step")
    return ", ".join(dump_count(status_counts[status], "step", status.value) for status in statuses)


def summary_icon(status_counts: Mapping[StepStatus, int]) -> Icon:
    """Icon of the most severe status present; ``pending`` for an empty run."""
    statuses = present_statuses(status_counts)
    return icon_for(statuses[0]) if statuses else Icon.PENDING


class ResultNotifier:
    """
    Collects failed feature elements during a run and reports the results.

    The host engine drives it strictly in order: ``on_feature_element_start``,
    any number of ``on_step_result``, ``on_feature_element_end``, repeated per
    element, then a single ``on_run_end``. Sink and file errors propagate.
    """

    def __init__(
        self,
        results: ResultAccumulator,
        notifier: NotificationSink,
        rerun_path: Path = Path(DEFAULT_RERUN_FILE),
        summary_title: str = DEFAULT_SUMMARY_TITLE,
    ):
        self.results = results
        self.notifier = notifier
        self.rerun_path = rerun_path
        self.summary_title = summary_title
        self.state = RunState()
        log.debug(
            "ResultNotifier initialized",
            notifier=type(notifier).__name__,
            rerun_path=str(rerun_path),
        )

    @property
    def rerun_locations(self) -> list[str]:
        return self.state.rerun_locations

    def on_feature_element_start(self, name: str) -> None:
        self.state.start_element(name)

    def on_step_result(self, status: StepStatus, formatted_args: str) -> None:
        if status not in RERUN_STATUSES:
            return
        self.state.mark_for_rerun()
        self.notifier.notify(
            formatted_args,
            title=self.state.current_feature_name or "",
            image=icon_for(status),
        )

    def on_feature_element_end(self, location: str) -> None:
        self.state.end_element(location)

    def on_run_end(self, status_counts: Mapping[StepStatus, int] | None = None) -> None:
        """
        Sends the summary notification and writes the rerun file when needed.

        Args:
            status_counts: Step counts per status. Read from the result
                accumulator when omitted.
        """
        if status_counts is None:
            status_counts = {status: self.results.count(status) for status in SEVERITY_ORDER}

        message = summary_message(status_counts)
        icon = summary_icon(status_counts)
        log.info("Run finished", summary=message, icon=icon.value, emoji_key="summary")
        self.notifier.notify(message, title=self.summary_title, image=icon)

        if self.state.rerun_locations:
            write_rerun_file(self.state.rerun_locations, self.rerun_path)
