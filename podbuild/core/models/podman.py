"""
Podman command models.

Value types shared by the command decorator, the process runner and the
executor service.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from ..exceptions import ConfigValidationError, EmptyOutputError
from .base import ImmutableModel


class PodmanCommand(Enum):
    """Podman subcommands, plus the root binary itself."""

    PODMAN = "podman"
    BUILD = "build"
    TAG = "tag"
    SAVE = "save"
    PUSH = "push"
    LOGIN = "login"
    RMI = "rmi"

    @property
    def token(self) -> str:
        """The literal argument podman expects for this command."""
        return self.value


class TlsPolicy(Enum):
    """Whether podman verifies TLS certificates when talking to a registry."""

    ENFORCE = "true"
    SKIP = "false"
    UNSPECIFIED = "unspecified"

    @property
    def flag(self) -> str | None:
        """The --tls-verify flag for this policy, or None when unspecified."""
        if self is TlsPolicy.UNSPECIFIED:
            return None
        return f"--tls-verify={self.value}"

    @classmethod
    def parse(cls, value: bool | str | TlsPolicy | None) -> TlsPolicy:
        """Convert a config value (bool, 'true', 'false', None, ...) to a policy."""
        if isinstance(value, TlsPolicy):
            return value
        if value is None:
            return cls.UNSPECIFIED
        if isinstance(value, bool):
            return cls.ENFORCE if value else cls.SKIP
        if not isinstance(value, str):
            raise ConfigValidationError(
                "TLS verification must be a boolean or a string",
                key="tls_verify",
                value=repr(value),
            )

        normalized = value.strip().lower()
        if normalized in ("true", "enforce", "yes", "1"):
            return cls.ENFORCE
        if normalized in ("false", "skip", "no", "0"):
            return cls.SKIP
        if normalized in ("", "unspecified", "not_specified", "none"):
            return cls.UNSPECIFIED
        raise ConfigValidationError(
            "Invalid TLS verification setting", key="tls_verify", value=value
        )


class CommandFlag(Enum):
    """Conditional flags the decorator may add to a command."""

    TLS_VERIFY = "tls_verify"


class ImageBuildSpec(ImmutableModel):
    """What to build: the Containerfile and whether to bypass the layer cache."""

    containerfile: Path
    no_cache: bool = False


@dataclass(frozen=True)
class StorageOptions:
    """Podman global storage locations (--root / --runroot)."""

    root: Path | None = None
    run_root: Path | None = None

    def to_args(self) -> list[str]:
        args = []
        if self.root is not None:
            args.append(f"--root={self.root}")
        if self.run_root is not None:
            args.append(f"--runroot={self.run_root}")
        return args


@dataclass(frozen=True)
class CommandInvocation:
    """A fully decorated argument vector, ready to execute."""

    command: PodmanCommand
    argv: tuple[str, ...]

    @property
    def display_name(self) -> str:
        """Binary and subcommand only; never includes arguments."""
        return f"{PodmanCommand.PODMAN.token} {self.command.token}"


@dataclass(frozen=True)
class ExecutionResult:
    """Stdout lines captured from a finished process."""

    lines: tuple[str, ...] = ()
    exit_code: int = 0

    def last_line(self, command: str | None = None) -> str:
        """
        Return the last non-blank output line.

        Raises:
            EmptyOutputError: If the process printed nothing but blank lines
        """
        for line in reversed(self.lines):
            if line.strip():
                return line.strip()
        raise EmptyOutputError("Process produced no output", command=command)
