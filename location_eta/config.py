"""Centralized configuration using Pydantic Settings.

Configuration can be overridden via environment variables:
- LETA_STORE_REDIS_URL=redis://cache:6379/0
- LETA_DIRECTIONS_API_KEY=...
- LETA_PUBLISHER_KIND=webhook
- LETA_SERVER_PORT=8080
- etc.

Deployments that still ship the legacy ``conf.json`` file
(``{"RedisUrl": ..., "MapsApiKey": ...}``) can load it with
AppConfig.from_json_file().
"""

from __future__ import annotations

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Literal, Optional, Union

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .domain.errors import ConfigurationError


class StoreConfig(BaseSettings):
    """Order state store configuration.

    Environment variables prefixed with LETA_STORE_.
    """

    model_config = SettingsConfigDict(env_prefix="LETA_STORE_")

    backend: Literal["redis", "memory"] = "redis"
    redis_url: str = "redis://localhost:6379/0"
    socket_timeout_seconds: Optional[float] = 5.0


class DirectionsConfig(BaseSettings):
    """Directions provider configuration.

    Environment variables prefixed with LETA_DIRECTIONS_.
    """

    model_config = SettingsConfigDict(env_prefix="LETA_DIRECTIONS_")

    api_key: str = ""
    base_url: str = "https://maps.googleapis.com"
    timeout_seconds: float = 10.0


class PublisherConfig(BaseSettings):
    """Travel-time publisher configuration.

    Environment variables prefixed with LETA_PUBLISHER_.
    """

    model_config = SettingsConfigDict(env_prefix="LETA_PUBLISHER_")

    kind: Literal["log", "webhook"] = "log"
    webhook_url: Optional[str] = None
    timeout_seconds: float = 5.0


class ServerConfig(BaseSettings):
    """HTTP server configuration.

    Environment variables prefixed with LETA_SERVER_.
    """

    model_config = SettingsConfigDict(env_prefix="LETA_SERVER_")

    host: str = "0.0.0.0"
    port: int = 8080


class ObservabilityConfig(BaseSettings):
    """Logging and observability configuration.

    Environment variables prefixed with LETA_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="LETA_LOG_")

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    structured: bool = False  # Set True for JSON logging


# Keys of the legacy conf.json file and the settings they map to
_LEGACY_JSON_KEYS = {
    "RedisUrl": ("store", "redis_url"),
    "MapsApiKey": ("directions", "api_key"),
}


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

    Sub-configurations can be accessed via attributes:

        config = get_config()
        print(config.store.redis_url)
        print(config.server.port)

    Environment variables prefixed with LETA_.
    """

    model_config = SettingsConfigDict(env_prefix="LETA_")

    store: StoreConfig = Field(default_factory=StoreConfig)
    directions: DirectionsConfig = Field(default_factory=DirectionsConfig)
    publisher: PublisherConfig = Field(default_factory=PublisherConfig)
    server: ServerConfig = Field(default_factory=ServerConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)

    @classmethod
    def from_json_file(cls, path: Union[str, Path]) -> AppConfig:
        """Load a legacy ``conf.json`` on top of the environment defaults.

        Args:
            path: Path to a JSON object with ``RedisUrl`` and/or
                ``MapsApiKey`` keys. Unknown keys are ignored.

        Returns:
            The merged configuration.

        Raises:
            ConfigurationError: If the file is missing or not a JSON object.
        """
        file_path = Path(path)
        try:
            raw: Any = json.loads(file_path.read_text(encoding="utf-8"))
        except OSError as e:
            raise ConfigurationError(
                f"Cannot read configuration file {file_path}",
                setting_name="config_file",
                cause=e,
            ) from e
        except json.JSONDecodeError as e:
            raise ConfigurationError(
                f"Configuration file {file_path} is not valid JSON",
                setting_name="config_file",
                cause=e,
            ) from e

        if not isinstance(raw, dict):
            raise ConfigurationError(
                f"Configuration file {file_path} must hold a JSON object",
                setting_name="config_file",
            )

        config = cls()
        overrides: Dict[str, Dict[str, Any]] = {}
        for key, (section, setting) in _LEGACY_JSON_KEYS.items():
            if key in raw:
                overrides.setdefault(section, {})[setting] = raw[key]

        updates = {
            section: getattr(config, section).model_copy(update=values)
            for section, values in overrides.items()
        }
        return config.model_copy(update=updates)


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton application configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.

    Returns:
        The application configuration instance.
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache.

    Call this in tests to ensure a fresh configuration is loaded.
    """
    get_config.cache_clear()
