# src/behave_notifier/runtime/tally.py
"""
Result accumulator counting step outcomes for a whole run.
"""
from collections import Counter
from typing import Protocol, runtime_checkable

from attrs import field, mutable

from behave_notifier.state import SEVERITY_ORDER, StepStatus


@runtime_checkable
class ResultAccumulator(Protocol):
    """Anything that can report how many steps ended with a given status."""

    def count(self, status: StepStatus) -> int: ...


@mutable(slots=True)
class StepTally:
    """Counts step results per status; satisfies ResultAccumulator."""

    _counts: Counter = field(factory=Counter, init=False, repr=False)

    def record(self, status: StepStatus) -> None:
        self._counts[status] += 1

    def count(self, status: StepStatus) -> int:
        return self._counts[status]

    def counts(self) -> dict[StepStatus, int]:
        return {status: self._counts[status] for status in SEVERITY_ORDER}

    @property
    def total(self) -> int:
        return sum(self._counts.values())
