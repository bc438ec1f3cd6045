"""
Click decorators for podbuild CLI commands.
"""

from __future__ import annotations

import functools
from collections.abc import Callable
from typing import Any, TypeVar

import click

from ..core.exceptions import PodbuildException

F = TypeVar("F", bound=Callable[..., Any])


def to_click_exception(error: PodbuildException) -> click.ClickException:
    """Wrap a podbuild error, keeping its suggested exit code."""
    exc = click.ClickException(str(error))
    exc.exit_code = error.exit_code
    return exc


def handle_errors(f: F) -> F:
    """Decorator turning podbuild exceptions into a clean CLI error.

    The process exits with the exception's exit_code (127 when podman
    could not be started, 1 otherwise).

    Usage:
        @cli.command()
        @click.pass_obj
        @handle_errors
        def push(ctx: PodbuildContext, image: str):
            ...
    """

    @functools.wraps(f)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return f(*args, **kwargs)
        except PodbuildException as e:
            raise to_click_exception(e) from e

    return wrapper  # type: ignore[return-value]
