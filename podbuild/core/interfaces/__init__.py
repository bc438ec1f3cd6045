"""
Interface definitions for podbuild services.
"""

from .logger import ILogger
from .runner import ICommandRunner

__all__ = [
    "ICommandRunner",
    "ILogger",
]
