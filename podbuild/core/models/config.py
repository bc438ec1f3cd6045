"""
Configuration models.

Provides Pydantic models for podbuild configuration with validation.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

from pydantic import ConfigDict, Field, SecretStr, field_validator

from ..exceptions import ConfigValidationError
from .base import PodbuildBaseModel
from .podman import StorageOptions, TlsPolicy

LogLevel = Literal["debug", "info", "warning", "error"]


class ConfigBaseModel(PodbuildBaseModel):
    """Base model for config sections with relaxed strict mode for TOML loading."""

    model_config = ConfigDict(
        strict=False,  # Allow coercion from TOML types
        validate_assignment=True,
        extra="ignore",  # Ignore unknown fields in config files
        populate_by_name=True,
        revalidate_instances="never",
    )


class PodmanConfig(ConfigBaseModel):
    """Podman configuration section."""

    tls_verify: TlsPolicy = TlsPolicy.UNSPECIFIED
    root: Path | None = None
    run_root: Path | None = None
    working_dir: Path = Path(".")

    @field_validator("tls_verify", mode="before")
    @classmethod
    def parse_tls_verify(cls, v: Any) -> TlsPolicy:
        """Accept booleans and strings such as 'true' or 'unspecified'."""
        return TlsPolicy.parse(v)

    @field_validator("root", "run_root", mode="before")
    @classmethod
    def empty_path_is_none(cls, v: Any) -> Any:
        if v == "":
            return None
        return v

    @property
    def storage(self) -> StorageOptions:
        return StorageOptions(root=self.root, run_root=self.run_root)


class RegistryConfig(ConfigBaseModel):
    """A registry to log in to."""

    host: str
    username: str | None = None
    password: SecretStr | None = None

    @field_validator("host", mode="before")
    @classmethod
    def normalize_host(cls, v: Any) -> Any:
        """Strip whitespace, any URL scheme and trailing slashes."""
        if not isinstance(v, str):
            return v
        host = v.strip()
        for scheme in ("https://", "http://"):
            if host.startswith(scheme):
                host = host[len(scheme) :]
        host = host.rstrip("/")
        if not host:
            raise ConfigValidationError("Registry host must not be empty", key="host", value=v)
        return host

    @property
    def has_credentials(self) -> bool:
        return bool(self.username) and self.password is not None


class LoggingConfig(ConfigBaseModel):
    """Logging configuration section."""

    level: LogLevel = "info"
    console: bool = True
    file: bool = False


class PodbuildConfig(ConfigBaseModel):
    """Complete podbuild configuration.

    Loaded from TOML files or constructed programmatically.
    """

    podman: PodmanConfig = Field(default_factory=PodmanConfig)
    registries: list[RegistryConfig] = Field(default_factory=list)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    def to_dict(self) -> dict[str, Any]:
        """Convert config to a JSON-friendly dict, passwords masked."""
        return self.model_dump(mode="json")
