"""
Click-based CLI for podbuild.

Usage:
    from podbuild.cli import cli
    cli()  # Invokes the CLI
"""

from __future__ import annotations

from pathlib import Path

import click
from pydantic import ValidationError

from .. import __version__
from ..core.exceptions import PodbuildException
from .context import PodbuildContext
from .decorators import to_click_exception


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="podbuild")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Config file (default: nearest .podbuild/config.toml)",
)
@click.option("-v", "--verbose", is_flag=True, help="Log debug output to stderr")
@click.pass_context
def cli(ctx: click.Context, config_path: Path | None, verbose: bool) -> None:
    """podbuild - build and publish container images with podman

    \b
    Images:
        podbuild build -f Containerfile -t app:1.0
        podbuild tag <image-id> registry.example.com/app:1.0
        podbuild save registry.example.com/app:1.0 -o app.tar
        podbuild rmi registry.example.com/app:1.0

    \b
    Registries:
        podbuild login                 Log in to every configured registry
        podbuild push <image>...       Push images

    \b
    Configuration:
        podbuild config                Show effective configuration
    """
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())
        ctx.exit(0)
    elif ctx.obj is None:
        try:
            ctx.obj = PodbuildContext.create(config_path=config_path, verbose=verbose)
        except PodbuildException as e:
            raise to_click_exception(e) from e
        except ValidationError as e:
            raise click.ClickException(f"Invalid configuration:\n{e}") from e


def register_commands() -> None:
    """Register all CLI commands with the main group."""
    from .commands import COMMANDS

    for cmd in COMMANDS:
        cli.add_command(cmd)


register_commands()


__all__ = [
    "PodbuildContext",
    "cli",
    "register_commands",
]
