"""
Native Click implementation of the push command.
"""

import click

from ..context import PodbuildContext
from ..decorators import handle_errors


@click.command("push")
@click.argument("images", nargs=-1, required=True)
@click.option(
    "--remove-after",
    is_flag=True,
    help="Remove each image from local storage once it is pushed",
)
@click.pass_obj
@handle_errors
def push(ctx: PodbuildContext, images: tuple[str, ...], remove_after: bool) -> None:
    """Push one or more IMAGES to their registries."""
    service = ctx.executor()
    for image in images:
        service.push(image)
        click.echo(f"Pushed {image}")
        if remove_after:
            service.remove_local_image(image)
            click.echo(f"Removed local image {image}")
