"""Configuration loading and environment variable utilities."""

import os
from pathlib import Path

from typing import Any

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from block_explorer.helpers.constants import DEFAULT_CONFIG_PATH, DEFAULT_LOG_LEVEL
from block_explorer.helpers.logging import LOG_LEVELS
from block_explorer.helpers.rpc_models import RpcEndpoint


# Load environment variables from .env file
load_dotenv()


class ConfigError(Exception):
    """Raised when the configuration file is missing or invalid."""


class RpcSettings(BaseModel):
    """``rpc`` section: node endpoint and credentials."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    url: str = Field(..., min_length=1)
    user: str
    password: str = Field(..., alias="pass", repr=False)

    def to_endpoint(self) -> RpcEndpoint:
        """Build the immutable endpoint shared by all requests."""
        return RpcEndpoint(url=self.url, username=self.user, password=self.password)


class ServerSettings(BaseModel):
    """``server`` section: local bind address."""

    model_config = ConfigDict(frozen=True)

    host: str = Field(..., min_length=1)
    port: int = Field(..., ge=1, le=65535)


class LoggingSettings(BaseModel):
    """Optional ``logging`` section."""

    model_config = ConfigDict(frozen=True)

    level: str = DEFAULT_LOG_LEVEL
    color: bool = False

    @field_validator("level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            msg = f"Invalid log level: {value}"
            raise ValueError(msg)
        return level


class GatewayConfig(BaseModel):
    """Root of the YAML configuration file."""

    model_config = ConfigDict(frozen=True)

    rpc: RpcSettings
    server: ServerSettings
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


def get_optional_env(key: str, default: str | None = None) -> str | None:
    """Get an optional environment variable with a default value.

    Args:
        key: Environment variable name
        default: Default value if not set

    Returns:
        Environment variable value or default
    """
    return os.getenv(key, default)


def get_config_path(config_path: str | None = None) -> Path:
    """Get the configuration file path from parameter or environment.

    Args:
        config_path: Optional path to use directly

    Returns:
        Path to the YAML configuration file

    Example:
        ```python
        from block_explorer.helpers.config import get_config_path

        # EXPLORER_CONFIG, falling back to ./config.yaml
        path = get_config_path()
        ```
    """
    if config_path:
        return Path(config_path)
    return Path(get_optional_env("EXPLORER_CONFIG") or DEFAULT_CONFIG_PATH)


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        with path.open(encoding="utf-8") as f:
            raw_data = yaml.safe_load(f)
    except OSError as e:
        msg = f"Cannot read configuration file {path}: {e}"
        raise ConfigError(msg) from e
    except yaml.YAMLError as e:
        msg = f"Invalid YAML in {path}: {e}"
        raise ConfigError(msg) from e

    if not isinstance(raw_data, dict):
        msg = f"Configuration root in {path} must be a mapping"
        raise ConfigError(msg)
    return raw_data


def load_config(config_path: str | Path | None = None) -> GatewayConfig:
    """Load and validate the gateway configuration.

    ``LOG_LEVEL`` in the environment overrides ``logging.level``.

    Args:
        config_path: YAML file path, defaults to EXPLORER_CONFIG or config.yaml

    Returns:
        Validated, immutable configuration

    Raises:
        ConfigError: If the file is missing, unreadable, or fails validation

    Example:
        ```python
        from block_explorer.helpers.config import load_config

        config = load_config("config.yaml")
        endpoint = config.rpc.to_endpoint()
        ```
    """
    path = get_config_path(str(config_path) if config_path else None)
    raw_data = _read_yaml(path)

    log_level = get_optional_env("LOG_LEVEL")
    if log_level:
        logging_section = raw_data.get("logging") or {}
        if not isinstance(logging_section, dict):
            msg = f"'logging' section in {path} must be a mapping"
            raise ConfigError(msg)
        raw_data = {**raw_data, "logging": {**logging_section, "level": log_level}}

    try:
        return GatewayConfig.model_validate(raw_data)
    except ValidationError as e:
        msg = f"Invalid configuration in {path}: {e}"
        raise ConfigError(msg) from e


__all__ = [
    "ConfigError",
    "GatewayConfig",
    "LoggingSettings",
    "RpcSettings",
    "ServerSettings",
    "get_config_path",
    "get_optional_env",
    "load_config",
]
