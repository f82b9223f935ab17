"""User configuration models."""

import os
from pathlib import Path
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_BUNDLETOOL_VERSION = "1.15.6"
DEFAULT_BUNDLETOOL_URL = (
    "https://github.com/google/bundletool/releases/download/"
    "{version}/bundletool-all-{version}.jar"
)


def _default_cache_path() -> Path:
    if "XDG_CACHE_HOME" in os.environ:
        return Path(os.environ["XDG_CACHE_HOME"]) / "droidship"
    return Path.home() / ".cache" / "droidship"


class UserConfigData(BaseSettings):
    """User configuration data model with automatic environment variable support.

    Precedence order (highest to lowest):
    1. Environment variables (highest)
    2. Constructor arguments (file data)
    3. .env file
    4. Default values (lowest)
    """

    model_config = SettingsConfigDict(
        env_prefix="DROIDSHIP_",
        env_nested_delimiter="__",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: Any,
        env_settings: Any,
        dotenv_settings: Any,
        file_secret_settings: Any,
    ) -> tuple[Any, ...]:
        """Environment variables override file configuration."""
        return (
            env_settings,
            init_settings,
            dotenv_settings,
            file_secret_settings,
        )

    log_level: str = "WARNING"

    cache_path: Path = Field(
        default_factory=_default_cache_path,
        description="Directory holding downloaded build tools",
    )

    bundletool_version: str = Field(
        default=DEFAULT_BUNDLETOOL_VERSION,
        description="Version of bundletool to download into the cache",
    )

    bundletool_url: str = Field(
        default=DEFAULT_BUNDLETOOL_URL,
        description="Download URL template; '{version}' is substituted",
    )

    java_path: str = Field(
        default="java", description="Java executable used to run bundletool"
    )

    download_timeout: float = Field(
        default=60.0, gt=0, description="Timeout in seconds for tool downloads"
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is recognized."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        upper_v = v.strip().upper()
        if upper_v not in valid_levels:
            raise ValueError(f"Log level must be one of {valid_levels}")
        return upper_v

    @field_validator("cache_path", mode="before")
    @classmethod
    def expand_cache_path(cls, v: Any) -> Any:
        if isinstance(v, str | Path):
            return Path(v).expanduser()
        return v

    @field_validator("bundletool_url")
    @classmethod
    def validate_bundletool_url(cls, v: str) -> str:
        if "{version}" not in v:
            raise ValueError("bundletool_url must contain a '{version}' placeholder")
        return v

    @property
    def bundletool_jar(self) -> Path:
        """Location of the cached bundletool jar for the configured version."""
        return self.cache_path / "bundletool" / f"bundletool-{self.bundletool_version}.jar"
