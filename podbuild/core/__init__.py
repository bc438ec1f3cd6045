"""
Core types for podbuild: exceptions, interfaces, models and settings.

Service wiring lives in podbuild.core.container and is imported from there
directly.
"""

from .exceptions import (
    AbnormalExitError,
    ConfigFileError,
    ConfigValidationError,
    EmptyOutputError,
    LaunchFailureError,
    PodbuildConfigError,
    PodbuildException,
    PodbuildExecutionError,
    RegistryLoginError,
)

__all__ = [
    "AbnormalExitError",
    "ConfigFileError",
    "ConfigValidationError",
    "EmptyOutputError",
    "LaunchFailureError",
    "PodbuildConfigError",
    "PodbuildException",
    "PodbuildExecutionError",
    "RegistryLoginError",
]
