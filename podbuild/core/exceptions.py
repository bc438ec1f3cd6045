"""
Custom exception hierarchy for podbuild.

Every failure of a podman invocation surfaces as a typed exception so the
caller (CLI or host build tool) can decide how to report it.
"""

from __future__ import annotations


class PodbuildException(Exception):
    """
    Base exception for all podbuild errors.

    Attributes:
        message: Human-readable error description
        context: Additional debugging context (exit codes, paths, etc.)
        exit_code: Suggested exit code for CLI (default: 1)
        recoverable: Whether retry/recovery may be possible
    """

    exit_code: int = 1
    recoverable: bool = True

    def __init__(
        self,
        message: str,
        *,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        self.message = message
        self.context = context or {}
        if cause is not None:
            self.__cause__ = cause
        super().__init__(message)

    def __str__(self) -> str:
        if self.context:
            ctx_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"{self.message} ({ctx_str})"
        return self.message


# =============================================================================
# Configuration Errors
# =============================================================================


class PodbuildConfigError(PodbuildException):
    """Base class for configuration-related errors."""

    pass


class ConfigFileError(PodbuildConfigError):
    """
    Error reading or parsing a configuration file.

    Raised for TOML parsing errors, file not found, permission errors, etc.
    """

    def __init__(
        self,
        message: str,
        *,
        file_path: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if file_path:
            ctx["file_path"] = file_path
        super().__init__(message, context=ctx, cause=cause)


class ConfigValidationError(PodbuildConfigError, ValueError):
    """
    Invalid or missing configuration value.

    Inherits from ValueError so pydantic validators can raise it directly.
    """

    def __init__(
        self,
        message: str,
        *,
        key: str | None = None,
        value: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if key:
            ctx["key"] = key
        if value is not None:
            ctx["value"] = value
        super().__init__(message, context=ctx, cause=cause)


# =============================================================================
# Execution Errors
# =============================================================================


class PodbuildExecutionError(PodbuildException):
    """Base class for errors raised while running podman."""

    pass


class LaunchFailureError(PodbuildExecutionError):
    """
    The podman binary could not be started.

    Raised when the binary is missing, not executable, or the working
    directory does not exist. Never retried.
    """

    exit_code: int = 127
    recoverable: bool = False

    def __init__(
        self,
        message: str,
        *,
        command: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if command:
            ctx["command"] = command
        super().__init__(message, context=ctx, cause=cause)


class AbnormalExitError(PodbuildExecutionError):
    """
    podman exited with a non-zero exit value.

    The message contains the full command line, so it may hold credentials
    for commands that take them.
    """

    def __init__(
        self,
        message: str,
        *,
        exit_code: int | None = None,
        output: list[str] | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if exit_code is not None:
            ctx["exit_code"] = exit_code
        super().__init__(message, context=ctx, cause=cause)
        self.process_exit_code = exit_code
        self.output = output or []


class RegistryLoginError(AbnormalExitError):
    """
    Login to a container registry failed.

    The message has already been stripped of the password.
    """

    recoverable: bool = False


class EmptyOutputError(PodbuildExecutionError):
    """
    A command that must report a result printed nothing on stdout.

    Raised by build when no image identifier can be read from the output.
    """

    def __init__(
        self,
        message: str,
        *,
        command: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if command:
            ctx["command"] = command
        super().__init__(message, context=ctx, cause=cause)
