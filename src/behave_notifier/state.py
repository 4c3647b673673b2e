# src/behave_notifier/state.py
#
"""
Step statuses, notification icons and the per-run state of the result notifier.
"""

from enum import Enum

import structlog
from attrs import field, mutable

log: structlog.stdlib.BoundLogger = structlog.get_logger("behave_notifier.state")


class StepStatus(Enum):
    """Closed set of step outcomes reported by the test engine."""

    PASSED = "passed"
    FAILED = "failed"
    PENDING = "pending"
    UNDEFINED = "undefined"
    SKIPPED = "skipped"


class Icon(Enum):
    """Notification images understood by every backend."""

    SUCCESS = "success"
    PENDING = "pending"
    FAILED = "failed"


# Most severe first.
SEVERITY_ORDER: tuple[StepStatus, ...] = (
    StepStatus.FAILED,
    StepStatus.SKIPPED,
    StepStatus.UNDEFINED,
    StepStatus.PENDING,
    StepStatus.PASSED,
)

RERUN_STATUSES = frozenset({StepStatus.FAILED, StepStatus.PENDING, StepStatus.UNDEFINED})

STATUS_ICON_MAP = {
    StepStatus.PASSED: Icon.SUCCESS,
    StepStatus.PENDING: Icon.PENDING,
    StepStatus.UNDEFINED: Icon.PENDING,
    StepStatus.SKIPPED: Icon.PENDING,
    StepStatus.FAILED: Icon.FAILED,
}


def icon_for(status: StepStatus) -> Icon:
    """Gives the notification icon to use for a step status."""
    return STATUS_ICON_MAP[status]


@mutable(slots=True)
class RunState:
    """
    Holds the state of one test run as seen by the result notifier.

    Mutable because every lifecycle callback updates it.
    """

    rerun_locations: list[str] = field(factory=list)
    current_feature_name: str | None = field(default=None)
    pending_rerun: bool = field(default=False)

    def start_element(self, name: str) -> None:
        self.pending_rerun = False
        self.current_feature_name = name

    def mark_for_rerun(self) -> None:
        if not self.pending_rerun:
            log.debug("Feature element marked for rerun", feature=self.current_feature_name)
        self.pending_rerun = True

    def end_element(self, location: str) -> bool:
        """Records the location if the element was marked. Returns True if recorded."""
        if not self.pending_rerun:
            return False
        self.rerun_locations.append(location)
        self.pending_rerun = False
        log.debug(
            "Recorded rerun location",
            location=location,
            total_locations=len(self.rerun_locations),
        )
        return True


# 🔔⚙️
