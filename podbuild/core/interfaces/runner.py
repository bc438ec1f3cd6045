"""
Process runner interface.

The executor service never starts processes itself; it hands a fully
decorated argument vector to an ICommandRunner. Tests substitute a fake.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from pathlib import Path

from ..models.podman import ExecutionResult


class ICommandRunner(ABC):
    """Interface for executing an external command."""

    @abstractmethod
    def execute(
        self,
        working_dir: Path,
        argv: Sequence[str],
        capture_stderr: bool = True,
    ) -> ExecutionResult:
        """
        Run a command to completion.

        Args:
            working_dir: Directory the process runs in
            argv: Complete argument vector, binary first
            capture_stderr: Route stderr to the error channel (True) or the
                info channel (False)

        Returns:
            ExecutionResult holding the captured stdout lines

        Raises:
            LaunchFailureError: The binary could not be started
            AbnormalExitError: The process exited with a non-zero value
        """
        pass
