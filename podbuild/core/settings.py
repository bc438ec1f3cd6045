"""
Pydantic Settings for podbuild configuration.

Provides settings loading from TOML files, environment variables, and defaults.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

try:
    import tomllib
except ImportError:
    import tomli as tomllib

from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from .exceptions import ConfigFileError
from .models.config import LoggingConfig, PodbuildConfig, PodmanConfig, RegistryConfig

CONFIG_DIR_NAME = ".podbuild"
CONFIG_FILE_NAME = "config.toml"

logger = logging.getLogger(__name__)


def find_config_file(start_dir: str | Path | None = None) -> Path | None:
    """
    Find .podbuild/config.toml by walking up from start_dir (or cwd).

    A pyproject.toml with a [tool.podbuild] section also counts.

    Returns:
        Path to config file, or None if not found.
    """
    start = Path(start_dir) if start_dir else Path.cwd()

    for parent in [start, *list(start.parents)]:
        config_path = parent / CONFIG_DIR_NAME / CONFIG_FILE_NAME
        if config_path.exists():
            return config_path

        pyproject = parent / "pyproject.toml"
        if pyproject.exists():
            try:
                with open(pyproject, "rb") as f:
                    data = tomllib.load(f)
                if "tool" in data and "podbuild" in data["tool"]:
                    return pyproject
            except tomllib.TOMLDecodeError as e:
                logger.debug("Failed to parse pyproject.toml at %s: %s", pyproject, e)
            except OSError as e:
                logger.debug("Failed to read pyproject.toml at %s: %s", pyproject, e)

    return None


class TomlConfigSource(PydanticBaseSettingsSource):
    """Settings source that loads from TOML config files."""

    def __init__(
        self,
        settings_cls: type[BaseSettings],
        config_path: Path | None = None,
        start_dir: str | Path | None = None,
    ):
        super().__init__(settings_cls)
        self._config_path = config_path
        self._start_dir = start_dir
        self._data: dict[str, Any] | None = None
        self.config_file: str | None = None
        self.config_error: str | None = None

    def _load_toml(self) -> dict[str, Any]:
        """Load and cache TOML data."""
        if self._data is not None:
            return self._data

        self._data = {}

        path = self._config_path
        if path is None:
            path = find_config_file(self._start_dir)

        if path is None:
            return self._data

        try:
            with open(path, "rb") as f:
                data = tomllib.load(f)

            if path.name == "pyproject.toml":
                data = data.get("tool", {}).get("podbuild", {})

            self._data = data
            self.config_file = str(path)

        except tomllib.TOMLDecodeError as e:
            logger.warning("Failed to parse config file %s: %s", path, e)
            self.config_error = f"Failed to parse config file: {e}"
        except OSError as e:
            logger.warning("Failed to read config file %s: %s", path, e)
            self.config_error = f"Failed to read config file: {e}"

        return self._data

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Get field value from TOML data."""
        data = self._load_toml()
        field_value = data.get(field_name)
        return field_value, field_name, False

    def __call__(self) -> dict[str, Any]:
        """Return all TOML data for settings initialization."""
        return self._load_toml()


class PodbuildSettings(BaseSettings):
    """podbuild settings with TOML and environment variable support.

    Priority (highest to lowest):
    1. Explicit init values
    2. Environment variables (PODBUILD_<section>__<field>)
    3. TOML config file (.podbuild/config.toml or pyproject.toml [tool.podbuild])
    4. Model defaults
    """

    model_config = {
        "env_prefix": "PODBUILD_",
        "env_nested_delimiter": "__",
        "extra": "ignore",
    }

    podman: PodmanConfig = Field(default_factory=PodmanConfig)
    registries: list[RegistryConfig] = Field(default_factory=list)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    # Set by load_settings(), not read from any source
    _config_file: str | None = None
    _config_error: str | None = None

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Add TOML loading below init values and environment variables."""
        toml_source = TomlConfigSource(
            settings_cls,
            config_path=_current_config_path,
            start_dir=_current_start_dir,
        )
        return (
            init_settings,
            env_settings,
            toml_source,
        )

    @property
    def config_file(self) -> str | None:
        return self._config_file

    @property
    def config_error(self) -> str | None:
        return self._config_error

    def to_config(self) -> PodbuildConfig:
        """Snapshot the merged settings as a plain PodbuildConfig."""
        return PodbuildConfig(
            podman=self.podman,
            registries=list(self.registries),
            logging=self.logging,
        )


# Module-level variables for passing to settings_customise_sources
_current_config_path: Path | None = None
_current_start_dir: str | Path | None = None


def load_settings(
    config_path: Path | None = None,
    start_dir: str | Path | None = None,
    **overrides: Any,
) -> PodbuildSettings:
    """Load podbuild settings from config file and environment.

    Args:
        config_path: Explicit path to config file; unlike a discovered file,
            one that cannot be read or parsed is an error
        start_dir: Directory to start searching from (if config_path not given)
        **overrides: Explicit values that win over every other source

    Returns:
        PodbuildSettings instance with all sources merged

    Raises:
        ConfigFileError: If config_path cannot be read or parsed
    """
    global _current_config_path, _current_start_dir

    _current_config_path = config_path
    _current_start_dir = start_dir

    try:
        settings = PodbuildSettings(**overrides)

        toml_source = TomlConfigSource(PodbuildSettings, config_path, start_dir)
        toml_source()
        if config_path is not None and toml_source.config_error:
            raise ConfigFileError(toml_source.config_error, file_path=str(config_path))
        settings._config_file = toml_source.config_file
        settings._config_error = toml_source.config_error

        return settings
    finally:
        _current_config_path = None
        _current_start_dir = None
