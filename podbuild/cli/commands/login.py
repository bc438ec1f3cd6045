"""
Native Click implementation of the login command.

Usage:
    podbuild login                                  # every configured registry
    podbuild login -r registry.example.com -u bob   # prompts for the password
"""

import click
from pydantic import ValidationError

from ...core.models.config import RegistryConfig
from ..context import PodbuildContext
from ..decorators import handle_errors


@click.command("login")
@click.option("-r", "--registry", help="Registry host to log in to")
@click.option("-u", "--username", help="Registry username")
@click.option(
    "--password-stdin",
    is_flag=True,
    help="Read the password from stdin instead of prompting",
)
@click.pass_obj
@handle_errors
def login(
    ctx: PodbuildContext,
    registry: str | None,
    username: str | None,
    password_stdin: bool,
) -> None:
    """Log in to container registries.

    Without --registry, logs in to every [[registries]] entry in the
    configuration that has a username and password.
    """
    service = ctx.executor()

    if registry:
        if not username:
            raise click.UsageError("--username is required with --registry")
        try:
            host = RegistryConfig(host=registry).host
        except ValidationError as e:
            raise click.BadParameter(
                "must name a registry host", param_hint="'--registry'"
            ) from e
        if password_stdin:
            password = click.get_text_stream("stdin").readline().rstrip("\r\n")
        else:
            password = click.prompt("Password", hide_input=True)
        service.login(host, username, password)
        click.echo(f"Logged in to {host}")
        return

    targets = [r for r in ctx.settings.registries if r.has_credentials]
    if not targets:
        raise click.ClickException("No registries with credentials are configured")

    for entry in targets:
        service.login(entry.host, entry.username, entry.password.get_secret_value())
        click.echo(f"Logged in to {entry.host}")
