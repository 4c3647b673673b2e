from pathlib import Path
from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest

from behave_notifier.config.loader import FIELD_SOURCES
from behave_notifier.notifications import NotificationSink
from behave_notifier.runtime import ResultNotifier, StepTally


@pytest.fixture(autouse=True)
def clean_notifier_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's BEHAVE_NOTIFIER_* settings out of the tests."""
    for env_var, _ in FIELD_SOURCES.values():
        monkeypatch.delenv(env_var, raising=False)


@pytest.fixture
def mock_notifier() -> MagicMock:
    return MagicMock(spec=NotificationSink)


@pytest.fixture
def rerun_path(tmp_path: Path) -> Path:
    return tmp_path / "rerun.txt"


@pytest.fixture
def tally() -> StepTally:
    return StepTally()


@pytest.fixture
def result_notifier(tally: StepTally, mock_notifier: MagicMock, rerun_path: Path) -> ResultNotifier:
    return ResultNotifier(results=tally, notifier=mock_notifier, rerun_path=rerun_path)


@pytest.fixture
def make_step():
    """Builds a stand-in for a behave Step after it has run."""

    def _make(name: str, status: str, arguments: list[tuple[int, int]] | None = None):
        match = None
        if arguments is not None:
            match = SimpleNamespace(
                arguments=[
                    SimpleNamespace(start=start, end=end, original=name[start:end])
                    for start, end in arguments
                ]
            )
        return SimpleNamespace(name=name, status=SimpleNamespace(name=status), match=match)

    return _make


@pytest.fixture
def make_scenario():
    """Builds a stand-in for a behave Scenario."""

    def _make(name: str, location: str):
        return SimpleNamespace(name=name, location=location)

    return _make
