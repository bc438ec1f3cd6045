"""
Podman command execution.

- CommandDecorator: builds argument vectors per command
- ProcessRunner: runs them and streams output to the logger
- PodmanExecutorService: one method per podman operation
"""

from .decorator import COMMAND_CAPABILITIES, CommandDecorator, supports
from .executor_service import PodmanExecutorService
from .runner import ProcessRunner

__all__ = [
    "COMMAND_CAPABILITIES",
    "CommandDecorator",
    "PodmanExecutorService",
    "ProcessRunner",
    "supports",
]
