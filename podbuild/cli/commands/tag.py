"""
Native Click implementation of the tag command.
"""

import click

from ..context import PodbuildContext
from ..decorators import handle_errors


@click.command("tag")
@click.argument("source")
@click.argument("target")
@click.pass_obj
@handle_errors
def tag(ctx: PodbuildContext, source: str, target: str) -> None:
    """Tag image SOURCE (id or name) as TARGET."""
    ctx.executor().tag(source, target)
    click.echo(f"Tagged {source} as {target}")
