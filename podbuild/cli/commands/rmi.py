"""
Native Click implementation of the rmi command.
"""

import click

from ..context import PodbuildContext
from ..decorators import handle_errors


@click.command("rmi")
@click.argument("images", nargs=-1, required=True)
@click.pass_obj
@handle_errors
def rmi(ctx: PodbuildContext, images: tuple[str, ...]) -> None:
    """Remove IMAGES from local storage."""
    service = ctx.executor()
    for image in images:
        service.remove_local_image(image)
        click.echo(f"Removed {image}")
