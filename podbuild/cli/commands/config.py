"""
Native Click implementation of the config command.
"""

import json

import click

from ..context import PodbuildContext


@click.command("config")
@click.pass_obj
def config(ctx: PodbuildContext) -> None:
    """Show the effective configuration.

    Passwords are always masked.
    """
    settings = ctx.settings
    if settings.config_error:
        click.echo(f"Warning: {settings.config_error}", err=True)
    click.echo(f"Config file: {settings.config_file or '(none)'}")
    click.echo(json.dumps(settings.to_config().to_dict(), indent=2))
