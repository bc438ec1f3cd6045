"""
Native Click implementation of the build command.

Usage: podbuild build -f <containerfile> [--no-cache] [-t <name>]...
"""

from pathlib import Path

import click

from ...core.models.podman import ImageBuildSpec
from ..context import PodbuildContext
from ..decorators import handle_errors


@click.command("build")
@click.option(
    "-f",
    "--file",
    "containerfile",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=Path("Containerfile"),
    show_default=True,
    help="Containerfile to build",
)
@click.option("--no-cache", is_flag=True, help="Do not use cached layers")
@click.option("-t", "--tag", "tags", multiple=True, help="Tag the built image (repeatable)")
@click.pass_obj
@handle_errors
def build(
    ctx: PodbuildContext,
    containerfile: Path,
    no_cache: bool,
    tags: tuple[str, ...],
) -> None:
    """Build an image and print its id.

    The build context is the configured working directory. The
    Containerfile path is taken relative to where podbuild runs.

    \b
    Examples:
        podbuild build
        podbuild build -f docker/Containerfile --no-cache -t app:1.0 -t app:latest
    """
    service = ctx.executor()
    spec = ImageBuildSpec(containerfile=containerfile.resolve(), no_cache=no_cache)
    image_id = service.build(spec)

    for tag in tags:
        service.tag(image_id, tag)

    click.echo(image_id)
