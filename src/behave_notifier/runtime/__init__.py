#
# src/behave_notifier/runtime/__init__.py
#
"""
Run-time components: the result notifier, the step tally and rerun file helpers.
"""
from .rerun import clear_rerun_file, read_rerun_file, write_rerun_file
from .result_notifier import ResultNotifier
from .tally import ResultAccumulator, StepTally

__all__ = [
    "ResultAccumulator",
    "ResultNotifier",
    "StepTally",
    "clear_rerun_file",
    "read_rerun_file",
    "write_rerun_file",
]
