"""
Click command implementations for podbuild CLI.

Each module corresponds to one podbuild command. Commands are registered
with the main CLI group via register_commands() in podbuild.cli.
"""

from .build import build
from .config import config
from .login import login
from .push import push
from .rmi import rmi
from .save import save
from .tag import tag

COMMANDS = [
    build,
    config,
    login,
    push,
    rmi,
    save,
    tag,
]

__all__ = [
    "COMMANDS",
    "build",
    "config",
    "login",
    "push",
    "rmi",
    "save",
    "tag",
]
