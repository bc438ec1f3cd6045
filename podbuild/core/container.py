"""
Service wiring for podbuild.

Uses dependency-injector providers to build the logger, command decorator,
process runner and executor service from one PodbuildConfig. A ServiceHub
is created per invocation by ServiceHubFactory, the entry point host build
tools and the CLI use.
"""

from collections.abc import Callable
from typing import TypeVar

from dependency_injector import providers

from ..services.logging import PodbuildLogger
from ..services.podman.decorator import CommandDecorator
from ..services.podman.executor_service import PodmanExecutorService
from ..services.podman.runner import ProcessRunner
from .interfaces.logger import ILogger
from .interfaces.runner import ICommandRunner
from .models.config import LoggingConfig, PodbuildConfig

T = TypeVar("T")


def _create_logger(config: LoggingConfig) -> ILogger:
    return PodbuildLogger.from_config(config)


class ServiceHub:
    """
    Holds the services for one configuration.

    The logger, decorator and runner are singletons; a fresh executor
    service is handed out on each access to `executor_service()`.
    """

    def __init__(self, config: PodbuildConfig, logger: ILogger | None = None) -> None:
        self._config = config
        self._providers: dict[type, providers.Provider] = {}

        if logger is not None:
            self._providers[ILogger] = providers.Object(logger)
        else:
            self._providers[ILogger] = providers.Singleton(_create_logger, config.logging)

        self._providers[CommandDecorator] = providers.Singleton(
            CommandDecorator, config.podman.storage
        )
        self._providers[ICommandRunner] = providers.Singleton(
            ProcessRunner, self._providers[ILogger]
        )
        self._providers[PodmanExecutorService] = providers.Factory(
            PodmanExecutorService,
            logger=self._providers[ILogger],
            tls_policy=config.podman.tls_verify,
            runner=self._providers[ICommandRunner],
            decorator=self._providers[CommandDecorator],
            working_dir=config.podman.working_dir,
        )

    @property
    def config(self) -> PodbuildConfig:
        return self._config

    def resolve(self, interface: type[T]) -> T:
        """
        Resolve a service by type.

        Raises:
            KeyError: If no registration found
        """
        if interface not in self._providers:
            raise KeyError(f"No provider registered for: {interface}")
        return self._providers[interface]()

    def override(self, interface: type[T], factory: Callable[[], T]) -> None:
        """Replace a registered provider (useful for testing)."""
        self._providers[interface].override(providers.Callable(factory))

    def logger(self) -> ILogger:
        return self.resolve(ILogger)  # type: ignore[type-abstract]

    def executor_service(self) -> PodmanExecutorService:
        return self.resolve(PodmanExecutorService)


class ServiceHubFactory:
    """Creates ServiceHub instances."""

    def create_service_hub(
        self,
        config: PodbuildConfig,
        logger: ILogger | None = None,
    ) -> ServiceHub:
        """
        Create a new ServiceHub.

        Args:
            config: Validated podbuild configuration
            logger: Log sink supplied by the host build tool, if any

        Returns:
            A new ServiceHub
        """
        return ServiceHub(config, logger=logger)
