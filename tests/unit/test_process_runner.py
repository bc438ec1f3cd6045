"""
Unit tests for ProcessRunner.

The child process is the current Python interpreter, so podman is not needed.
"""

import sys
from pathlib import Path

import pytest

from podbuild.core.exceptions import AbnormalExitError, LaunchFailureError
from podbuild.services.podman.runner import ProcessRunner


def python_argv(script: str) -> list[str]:
    return [sys.executable, "-c", script]


class TestProcessRunnerSuccess:
    """Exit value 0 returns stdout lines in order."""

    def test_returns_lines_in_emission_order(self, recording_logger, tmp_path):
        runner = ProcessRunner(recording_logger)

        result = runner.execute(tmp_path, python_argv("print('one'); print('two'); print('three')"))

        assert result.lines == ("one", "two", "three")
        assert result.exit_code == 0

    def test_stdout_streamed_to_info(self, recording_logger, tmp_path):
        runner = ProcessRunner(recording_logger)

        runner.execute(tmp_path, python_argv("print('hello')"))

        assert "hello" in recording_logger.records["info"]

    def test_runs_in_working_directory(self, recording_logger, tmp_path):
        runner = ProcessRunner(recording_logger)

        result = runner.execute(tmp_path, python_argv("import os; print(os.getcwd())"))

        assert Path(result.lines[-1]).resolve() == tmp_path.resolve()

    def test_empty_output(self, recording_logger, tmp_path):
        result = ProcessRunner(recording_logger).execute(tmp_path, python_argv("pass"))

        assert result.lines == ()


class TestProcessRunnerStderrRouting:
    """Stderr goes to the error or info channel; it never fails the call."""

    SCRIPT = "import sys; sys.stderr.write('Copying blob sha256:abc\\n'); print('done')"

    def test_capture_stderr_logs_to_error(self, recording_logger, tmp_path):
        ProcessRunner(recording_logger).execute(tmp_path, python_argv(self.SCRIPT), True)

        assert "Copying blob sha256:abc" in recording_logger.records["error"]

    def test_redirected_stderr_logs_to_info(self, recording_logger, tmp_path):
        result = ProcessRunner(recording_logger).execute(
            tmp_path, python_argv(self.SCRIPT), capture_stderr=False
        )

        assert recording_logger.records["error"] == []
        assert "Copying blob sha256:abc" in recording_logger.records["info"]
        assert result.lines == ("done",)

    def test_stderr_not_in_result_lines(self, recording_logger, tmp_path):
        result = ProcessRunner(recording_logger).execute(tmp_path, python_argv(self.SCRIPT))

        assert result.lines == ("done",)

    def test_large_stderr_does_not_block(self, recording_logger, tmp_path):
        script = (
            "import sys\n"
            "for i in range(5000):\n"
            "    sys.stderr.write('progress %d\\n' % i)\n"
            "print('finished')\n"
        )

        result = ProcessRunner(recording_logger).execute(tmp_path, python_argv(script), False)

        assert result.lines == ("finished",)
        assert len(recording_logger.records["info"]) >= 5001


class TestProcessRunnerFailures:
    """Non-zero exits and launch failures raise typed errors."""

    def test_non_zero_exit_raises_abnormal_exit(self, recording_logger, tmp_path):
        script = "import sys; print('partial'); sys.stderr.write('boom\\n'); sys.exit(3)"

        with pytest.raises(AbnormalExitError) as exc_info:
            ProcessRunner(recording_logger).execute(tmp_path, python_argv(script))

        err = exc_info.value
        assert err.process_exit_code == 3
        assert err.context["exit_code"] == 3
        assert "Unexpected exit value: 3" in err.message
        assert "boom" in err.message
        assert err.output == ["partial", "boom"]

    def test_failure_message_contains_command_line(self, recording_logger, tmp_path):
        argv = python_argv("import sys; sys.exit(1)")

        with pytest.raises(AbnormalExitError) as exc_info:
            ProcessRunner(recording_logger).execute(tmp_path, argv)

        assert " ".join(argv) in exc_info.value.message

    def test_missing_binary_raises_launch_failure(self, recording_logger, tmp_path):
        with pytest.raises(LaunchFailureError) as exc_info:
            ProcessRunner(recording_logger).execute(
                tmp_path, ["podbuild-no-such-binary-xyz", "build"]
            )

        assert exc_info.value.recoverable is False
        assert exc_info.value.context["command"] == "podbuild-no-such-binary-xyz"

    def test_missing_working_dir_raises_launch_failure(self, recording_logger, tmp_path):
        with pytest.raises(LaunchFailureError):
            ProcessRunner(recording_logger).execute(tmp_path / "missing", python_argv("pass"))

    def test_empty_argv_rejected(self, recording_logger, tmp_path):
        with pytest.raises(ValueError):
            ProcessRunner(recording_logger).execute(tmp_path, [])

    def test_debug_log_omits_arguments(self, recording_logger, tmp_path):
        argv = [sys.executable, "-c", "pass", "-p", "hunter2"]

        ProcessRunner(recording_logger).execute(tmp_path, argv)

        assert "hunter2" not in recording_logger.all_messages()
