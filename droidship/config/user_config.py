"""
User configuration management for Droidship.

This module handles user-specific configuration settings with multiple sources:
1. Environment variables (highest precedence)
2. Command-line provided config file
3. Config file in current directory
4. User's XDG config directory
5. Default values (lowest precedence)
"""

import logging
import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from droidship.config.models import UserConfigData
from droidship.core.errors import ConfigError


logger = logging.getLogger(__name__)

ENV_PREFIX = "DROIDSHIP_"


class UserConfig:
    """Manages user-specific configuration for Droidship.

    File values are passed to ``UserConfigData`` as constructor arguments and
    Pydantic Settings layers environment variables on top of them.
    """

    def __init__(self, cli_config_path: str | Path | None = None) -> None:
        """
        Initialize the user configuration handler.

        Args:
            cli_config_path: Optional config file path provided via CLI

        Raises:
            ConfigError: If the CLI config file is missing or any config is invalid
        """
        self._cli_config_path = (
            Path(cli_config_path).expanduser().resolve() if cli_config_path else None
        )
        self._config_path: Path | None = None
        self._config_paths = self._generate_config_paths()
        self._config = self._load_config()

    def _generate_config_paths(self) -> list[Path]:
        """Generate a list of config paths to search in order of precedence."""
        config_paths = []

        if self._cli_config_path:
            config_paths.append(self._cli_config_path)

        config_paths.extend(
            [Path.cwd() / "droidship.yaml", Path.cwd() / ".droidship.yml"]
        )

        xdg_config_home = os.environ.get("XDG_CONFIG_HOME")
        config_home = (
            Path(xdg_config_home) if xdg_config_home else Path.home() / ".config"
        )
        config_paths.extend(
            [
                config_home / "droidship" / "config.yaml",
                config_home / "droidship" / "config.yml",
            ]
        )
        return config_paths

    def _read_config_file(self, path: Path) -> dict[str, Any]:
        try:
            with path.open(encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(
                f"Invalid YAML in config file {path}: {e}", {"path": str(path)}
            ) from e
        except OSError as e:
            raise ConfigError(
                f"Cannot read config file {path}: {e}", {"path": str(path)}
            ) from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigError(
                f"Config file {path} must contain a mapping", {"path": str(path)}
            )
        return data

    def _load_config(self) -> UserConfigData:
        logger.debug(
            "Config search paths: %s", [str(p) for p in self._config_paths]
        )

        if self._cli_config_path and not self._cli_config_path.is_file():
            raise ConfigError(
                f"Config file not found: {self._cli_config_path}",
                {"path": str(self._cli_config_path)},
            )

        config_data: dict[str, Any] = {}
        for path in self._config_paths:
            if path.is_file():
                config_data = self._read_config_file(path)
                self._config_path = path
                logger.debug("Loaded user configuration from %s", path)
                break
        else:
            logger.debug("No user configuration file found, using defaults")

        env_vars = [k for k in os.environ if k.startswith(ENV_PREFIX)]
        if env_vars:
            logger.debug("Found %d Droidship environment variables", len(env_vars))

        try:
            return UserConfigData(**config_data)
        except ValidationError as e:
            raise ConfigError(
                f"Invalid configuration: {e}",
                {"path": str(self._config_path) if self._config_path else None},
            ) from e

    @property
    def config_path(self) -> Path | None:
        """Config file the values were loaded from, if any."""
        return self._config_path

    @property
    def data(self) -> UserConfigData:
        return self._config

    def get(self, key: str, default: Any = None) -> Any:
        """Return a configuration value by field name."""
        return getattr(self._config, key, default)


def create_user_config(cli_config_path: str | Path | None = None) -> UserConfig:
    """Create a UserConfig instance.

    Args:
        cli_config_path: Optional config file path provided via CLI

    Returns:
        Configured UserConfig instance
    """
    return UserConfig(cli_config_path=cli_config_path)
