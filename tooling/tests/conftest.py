"""Pytest fixtures for xcodebuild tooling tests."""

from collections.abc import Callable
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from xcodebuild_tooling.actions import ActionInputs


@pytest.fixture
def make_inputs() -> Callable[..., ActionInputs]:
    """Factory: make_inputs(project="App.xcodeproj", ...) -> ActionInputs with no RUNNER_DEBUG.

    Keyword names use underscores for dashes (only_testing -> only-testing).
    """

    def _make(env: dict[str, str] | None = None, **values: str) -> ActionInputs:
        return ActionInputs(
            {k.replace("_", "-"): v for k, v in values.items()},
            env=env or {},
        )

    return _make


@pytest.fixture
def fake_popen() -> Callable[..., MagicMock]:
    """Factory: fake_popen(0, 3) -> Popen mock whose processes return 0, then 3 from wait()."""

    def _make(*returncodes: int | None) -> MagicMock:
        procs = []
        for rc in returncodes:
            proc = MagicMock()
            proc.wait.return_value = rc
            proc.returncode = rc
            procs.append(proc)
        return MagicMock(side_effect=procs)

    return _make


@pytest.fixture
def in_tmp_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """chdir into tmp_path for the test; returns it."""
    monkeypatch.chdir(tmp_path)
    return tmp_path
