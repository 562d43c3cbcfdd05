"""
Configuration Management.

Loads settings from the YAML files bundled in quickhttp/config/settings/.
No hardcoded values in code: client defaults and output settings come
from these files.

Settings (YAML):
    application.yaml   - App identity, HTTP client defaults, output settings
    logging.yaml       - Logging configuration
"""

from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from quickhttp.core.config_schema import (
    ApplicationSchema,
    ClientConfig,
    LoggingSchema,
    OutputConfig,
)
from quickhttp.core.exceptions import ConfigurationError

SETTINGS_DIR = Path(__file__).resolve().parent.parent / "config" / "settings"


def load_yaml_config(filename: str, settings_dir: Path | None = None) -> dict[str, Any]:
    """Load a YAML configuration file from the settings directory."""
    config_path = (settings_dir or SETTINGS_DIR) / filename

    if not config_path.exists():
        raise ConfigurationError(f"Configuration file not found: {config_path}")

    with open(config_path, encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def _load_validated(schema_cls: type, filename: str, settings_dir: Path | None = None) -> Any:
    """Load YAML and validate against schema. Returns typed model instance."""
    raw = load_yaml_config(filename, settings_dir)
    try:
        return schema_cls(**raw)
    except ValidationError as e:
        raise ConfigurationError(
            f"Invalid configuration in {filename}:\n{e}"
        ) from e


class AppConfig:
    """
    Application configuration loaded from YAML files.

    Each YAML file is validated against its Pydantic schema at load time.
    Properties return typed, frozen Pydantic model instances.
    """

    def __init__(self, settings_dir: Path | None = None) -> None:
        self._application = _load_validated(ApplicationSchema, "application.yaml", settings_dir)
        self._logging = _load_validated(LoggingSchema, "logging.yaml", settings_dir)

    @property
    def application(self) -> ApplicationSchema:
        """Application settings."""
        return self._application

    @property
    def logging(self) -> LoggingSchema:
        """Logging settings."""
        return self._logging

    @property
    def client(self) -> ClientConfig:
        """HTTP client defaults."""
        return self._application.client

    @property
    def output(self) -> OutputConfig:
        """Terminal output settings."""
        return self._application.output


@lru_cache
def get_app_config() -> AppConfig:
    """Get cached application configuration."""
    return AppConfig()


def get_client_config(timeout: float | None = None) -> ClientConfig:
    """
    Get the client configuration for one invocation.

    Args:
        timeout: Overall request deadline in seconds. Overrides application.yaml.

    Returns:
        Frozen ClientConfig.
    """
    client = get_app_config().client
    if timeout is not None:
        return client.model_copy(update={"timeout_seconds": timeout})
    return client
