"""
Native Click implementation of the save command.
"""

from pathlib import Path

import click

from ..context import PodbuildContext
from ..decorators import handle_errors


@click.command("save")
@click.argument("image")
@click.option(
    "-o",
    "--output",
    "archive",
    required=True,
    type=click.Path(dir_okay=False, path_type=Path),
    help="Archive file to write",
)
@click.pass_obj
@handle_errors
def save(ctx: PodbuildContext, image: str, archive: Path) -> None:
    """Save IMAGE to an OCI archive."""
    # podman runs in the configured working directory
    archive = archive.resolve()
    archive.parent.mkdir(parents=True, exist_ok=True)
    ctx.executor().save(archive, image)
    click.echo(f"Saved {image} to {archive}")
