# tests/unit/test_rerun.py

"""Tests for the rerun file helpers and run state."""

from pathlib import Path

import pytest

from behave_notifier.exceptions import RerunFileError
from behave_notifier.runtime import clear_rerun_file, read_rerun_file, write_rerun_file
from behave_notifier.state import STATUS_ICON_MAP, Icon, RunState, StepStatus, icon_for


class TestRerunFile:
    def test_write_overwrites(self, rerun_path: Path):
        rerun_path.write_text("features/old.feature:1 features/old.feature:9\n", encoding="utf-8")

        write_rerun_file(["features/a.feature:3"], rerun_path)

        assert rerun_path.read_text(encoding="utf-8") == "features/a.feature:3\n"

    def test_write_to_missing_directory(self, tmp_path: Path):
        target = tmp_path / "missing" / "rerun.txt"

        with pytest.raises(RerunFileError) as exc_info:
            write_rerun_file(["features/a.feature:3"], target)

        assert exc_info.value.path == str(target)

    def test_read_round_trip_and_missing(self, rerun_path: Path):
        assert read_rerun_file(rerun_path) == []

        write_rerun_file(["features/a.feature:3", "features/b.feature:7"], rerun_path)

        assert read_rerun_file(rerun_path) == ["features/a.feature:3", "features/b.feature:7"]

    def test_clear(self, rerun_path: Path):
        rerun_path.write_text("features/a.feature:3\n", encoding="utf-8")

        assert clear_rerun_file(rerun_path) is True
        assert not rerun_path.exists()
        assert clear_rerun_file(rerun_path) is False


class TestRunState:
    def test_icon_mapping_is_total(self):
        assert set(STATUS_ICON_MAP) == set(StepStatus)
        assert icon_for(StepStatus.PASSED) is Icon.SUCCESS
        assert icon_for(StepStatus.SKIPPED) is Icon.PENDING
        assert icon_for(StepStatus.FAILED) is Icon.FAILED

    def test_unmarked_element_is_not_recorded(self):
        state = RunState()
        state.start_element("A")

        assert state.end_element("features/a.feature:3") is False
        assert state.rerun_locations == []

    def test_marked_element_is_recorded_once(self):
        state = RunState()
        state.start_element("A")
        state.mark_for_rerun()
        state.mark_for_rerun()

        assert state.end_element("features/a.feature:3") is True
        assert state.pending_rerun is False
        assert state.rerun_locations == ["features/a.feature:3"]
