"""
Shared pytest fixtures for podbuild tests.

- recording_logger: ILogger that keeps every message per channel
- fake_runner: ICommandRunner that records argument vectors instead of
  starting podman
- isolated_env: clears PODBUILD_* environment variables
"""

import os
from collections.abc import Sequence
from pathlib import Path
from typing import Any

import pytest

from podbuild.core.interfaces.logger import ILogger
from podbuild.core.interfaces.runner import ICommandRunner
from podbuild.core.models.podman import ExecutionResult


class RecordingLogger(ILogger):
    """Logger that stores formatted messages per level."""

    def __init__(self) -> None:
        self.records: dict[str, list[str]] = {
            "debug": [],
            "info": [],
            "warning": [],
            "error": [],
        }

    def _record(self, level: str, message: str, *args: Any) -> None:
        self.records[level].append(message % args if args else message)

    def debug(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._record("debug", message, *args)

    def info(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._record("info", message, *args)

    def warning(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._record("warning", message, *args)

    def error(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._record("error", message, *args)

    def set_level(self, level: str) -> None:
        pass

    def all_messages(self) -> str:
        return "\n".join(m for messages in self.records.values() for m in messages)


class FakeRunner(ICommandRunner):
    """Runner that records calls and returns scripted output or raises."""

    def __init__(self) -> None:
        self.calls: list[dict[str, Any]] = []
        self.output: list[str] = []
        self.error: Exception | None = None

    def execute(
        self,
        working_dir: Path,
        argv: Sequence[str],
        capture_stderr: bool = True,
    ) -> ExecutionResult:
        self.calls.append(
            {
                "working_dir": working_dir,
                "argv": list(argv),
                "capture_stderr": capture_stderr,
            }
        )
        if self.error is not None:
            raise self.error
        return ExecutionResult(lines=tuple(self.output))

    @property
    def last_argv(self) -> list[str]:
        return self.calls[-1]["argv"]


@pytest.fixture
def recording_logger() -> RecordingLogger:
    return RecordingLogger()


@pytest.fixture
def fake_runner() -> FakeRunner:
    return FakeRunner()


@pytest.fixture
def isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    """
    Run with no PODBUILD_* variables and tmp_path as the working directory.

    Returns:
        The temporary directory
    """
    for key in list(os.environ):
        if key.startswith("PODBUILD_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path
