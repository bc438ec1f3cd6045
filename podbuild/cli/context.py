"""
Click context extension for podbuild CLI.

Provides PodbuildContext, the object passed to every command via ctx.obj.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from ..core.container import ServiceHub, ServiceHubFactory
from ..core.settings import PodbuildSettings, load_settings
from ..services.podman.executor_service import PodmanExecutorService


@dataclass
class PodbuildContext:
    """Extended context passed through Click command chain.

    Attributes:
        settings: Merged settings (TOML, environment, defaults)
        verbose: Whether debug output was requested
    """

    settings: PodbuildSettings
    verbose: bool = False
    _hub: ServiceHub | None = field(default=None, repr=False)

    @classmethod
    def create(
        cls,
        config_path: Path | None = None,
        cwd: Path | None = None,
        verbose: bool = False,
    ) -> PodbuildContext:
        """Load settings for the current directory and build a context."""
        settings = load_settings(config_path=config_path, start_dir=cwd)
        if verbose:
            # Keep the rest of [logging], e.g. file = true
            settings.logging = settings.logging.model_copy(
                update={"level": "debug", "console": True}
            )
        return cls(settings=settings, verbose=verbose)

    @property
    def hub(self) -> ServiceHub:
        if self._hub is None:
            self._hub = ServiceHubFactory().create_service_hub(self.settings.to_config())
        return self._hub

    def executor(self) -> PodmanExecutorService:
        return self.hub.executor_service()
