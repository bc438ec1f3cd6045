"""
Process runner for podman commands.

Executes one argument vector per call, streams its output to the logger as
it arrives, and enforces the exit-value-zero contract.
"""

import subprocess
import threading
from collections.abc import Callable, Sequence
from pathlib import Path
from typing import IO

from ...core.exceptions import AbnormalExitError, LaunchFailureError
from ...core.interfaces.logger import ILogger
from ...core.interfaces.runner import ICommandRunner
from ...core.models.podman import ExecutionResult
from ..logging import NullLogger

# Number of trailing output lines quoted in an AbnormalExitError message
SUMMARY_LINES = 20


class ProcessRunner(ICommandRunner):
    """
    Runs external commands synchronously.

    Stdout is read on the calling thread and logged at info level line by
    line. Stderr is drained on a helper thread and logged at error level,
    or at info level for commands whose stderr is ordinary progress text.

    Usage:
        runner = ProcessRunner(logger)
        result = runner.execute(Path("."), ["podman", "images"])
    """

    def __init__(self, logger: ILogger | None = None) -> None:
        self._logger = logger or NullLogger()

    def execute(
        self,
        working_dir: Path,
        argv: Sequence[str],
        capture_stderr: bool = True,
    ) -> ExecutionResult:
        if not argv:
            raise ValueError("Cannot execute an empty command")

        # Arguments may hold credentials; only the program and subcommand are logged.
        self._logger.debug(
            "Executing command %s from basedir %s", " ".join(argv[:2]), working_dir
        )

        try:
            proc = subprocess.Popen(
                list(argv),
                cwd=working_dir,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                text=True,
                errors="replace",
                bufsize=1,
            )
        except OSError as e:
            raise LaunchFailureError(
                f"Could not start {argv[0]}: {e.strerror or e}",
                command=argv[0],
                context={"working_dir": str(working_dir)},
                cause=e,
            ) from e

        stderr_sink = self._logger.error if capture_stderr else self._logger.info
        stderr_lines: list[str] = []
        stderr_reader = threading.Thread(
            target=self._pump,
            args=(proc.stderr, stderr_sink, stderr_lines),
            daemon=True,
        )
        stderr_reader.start()

        stdout_lines: list[str] = []
        try:
            self._pump(proc.stdout, self._logger.info, stdout_lines)
        finally:
            exit_code = proc.wait()
            stderr_reader.join()

        self._logger.debug("Process exited: code=%d", exit_code)

        if exit_code != 0:
            raise AbnormalExitError(
                self._failure_message(argv, exit_code, stdout_lines, stderr_lines),
                exit_code=exit_code,
                output=stdout_lines + stderr_lines,
            )

        return ExecutionResult(lines=tuple(stdout_lines), exit_code=exit_code)

    @staticmethod
    def _pump(stream: IO[str] | None, sink: Callable[..., None], lines: list[str]) -> None:
        """Forward each line of a stream to the sink as soon as it is read."""
        if stream is None:
            return
        with stream:
            for raw in stream:
                line = raw.rstrip("\r\n")
                lines.append(line)
                sink("%s", line)

    @staticmethod
    def _failure_message(
        argv: Sequence[str],
        exit_code: int,
        stdout_lines: list[str],
        stderr_lines: list[str],
    ) -> str:
        summary = (stderr_lines or stdout_lines)[-SUMMARY_LINES:]
        message = (
            f"Unexpected exit value: {exit_code}, allowed exit values: [0], "
            f"executed command [{' '.join(argv)}]"
        )
        if summary:
            message += ", output was:\n" + "\n".join(summary)
        return message
