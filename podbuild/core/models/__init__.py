"""
Pydantic models and value types for podbuild.
"""

from .base import ImmutableModel, PodbuildBaseModel
from .config import (
    LoggingConfig,
    PodbuildConfig,
    PodmanConfig,
    RegistryConfig,
)
from .podman import (
    CommandFlag,
    CommandInvocation,
    ExecutionResult,
    ImageBuildSpec,
    PodmanCommand,
    StorageOptions,
    TlsPolicy,
)

__all__ = [
    "CommandFlag",
    "CommandInvocation",
    "ExecutionResult",
    "ImageBuildSpec",
    "ImmutableModel",
    "LoggingConfig",
    "PodbuildBaseModel",
    "PodbuildConfig",
    "PodmanCommand",
    "PodmanConfig",
    "RegistryConfig",
    "StorageOptions",
    "TlsPolicy",
]
