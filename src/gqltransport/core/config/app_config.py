from __future__ import annotations

import logging
import os
from collections.abc import Callable, Mapping
from enum import Enum
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv
from pydantic import Field, ValidationError, field_validator

from gqltransport.core.common.exceptions import ConfigurationError
from gqltransport.core.constants import CONFIG_LOADING_ERROR
from gqltransport.core.interfaces.model_bases import DomainModel

logger = logging.getLogger(__name__)

_TRUE_VALUES = {"1", "true", "yes", "on"}


def _get_env_value(
    env: Mapping[str, str],
    name: str,
    default: Any,
    *,
    transform: Callable[[str], Any] | None = None,
) -> Any:
    """Return an environment variable value, transformed when requested."""
    if name in env:
        raw_value = env[name]
        return transform(raw_value) if transform is not None else raw_value
    return default


def _to_int(value: str, fallback: int) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return fallback


def _to_bool(value: str) -> bool:
    return value.strip().lower() in _TRUE_VALUES


class LogLevel(str, Enum):
    """Log levels for configuration."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LoggingConfig(DomainModel):
    """Logging configuration."""

    level: LogLevel = LogLevel.INFO
    request_logging: bool = False
    response_logging: bool = False
    log_file: str | None = None


class AppConfig(DomainModel):
    """Complete application configuration."""

    host: str = "0.0.0.0"
    port: int = 8000
    graphql_path: str = "/graphql"
    # SDL file served by the CLI
    schema_path: str | None = None
    # Optional JSON document used as the root value by the CLI
    root_value_path: str | None = None

    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @field_validator("graphql_path")
    @classmethod
    def validate_graphql_path(cls, v: str) -> str:
        if not v.startswith("/"):
            raise ValueError("graphql_path must start with '/'")
        return v

    @classmethod
    def from_env(cls, *, environ: Mapping[str, str] | None = None) -> AppConfig:
        """Create AppConfig from environment variables.

        Returns:
            AppConfig instance
        """
        env: Mapping[str, str] = os.environ if environ is None else environ
        return cls.model_validate(_config_from_env(env, cls().model_dump()))


def _config_from_env(env: Mapping[str, str], base: dict[str, Any]) -> dict[str, Any]:
    """Overlay environment variables on a configuration dictionary."""
    config = dict(base)
    config["host"] = _get_env_value(env, "APP_HOST", config["host"])
    config["port"] = _get_env_value(
        env,
        "APP_PORT",
        config["port"],
        transform=lambda value: _to_int(value, config["port"]),
    )
    config["graphql_path"] = _get_env_value(env, "GRAPHQL_PATH", config["graphql_path"])
    config["schema_path"] = _get_env_value(
        env, "GRAPHQL_SCHEMA_PATH", config["schema_path"]
    )
    config["root_value_path"] = _get_env_value(
        env, "GRAPHQL_ROOT_VALUE_PATH", config["root_value_path"]
    )

    logging_config = dict(config["logging"])
    logging_config["level"] = _get_env_value(
        env, "LOG_LEVEL", logging_config["level"], transform=str.upper
    )
    logging_config["request_logging"] = _get_env_value(
        env, "REQUEST_LOGGING", logging_config["request_logging"], transform=_to_bool
    )
    logging_config["response_logging"] = _get_env_value(
        env,
        "RESPONSE_LOGGING",
        logging_config["response_logging"],
        transform=_to_bool,
    )
    logging_config["log_file"] = _get_env_value(
        env, "LOG_FILE", logging_config["log_file"]
    )
    config["logging"] = logging_config
    return config


def _merge_dicts(d1: dict[str, Any], d2: dict[str, Any]) -> dict[str, Any]:
    for key, value in d2.items():
        if isinstance(value, dict) and isinstance(d1.get(key), dict):
            _merge_dicts(d1[key], value)
        else:
            d1[key] = value
    return d1


def load_config(
    config_path: str | Path | None = None,
    *,
    environ: Mapping[str, str] | None = None,
) -> AppConfig:
    """
    Load configuration from file and environment.

    Environment variables override values from the YAML file.

    Args:
        config_path: Optional path to a YAML configuration file
        environ: Environment to read; defaults to ``os.environ`` after
            loading a ``.env`` file

    Returns:
        AppConfig instance

    Raises:
        ConfigurationError: If the file is missing, unreadable or invalid
    """
    if environ is None:
        load_dotenv()
        environ = os.environ

    config_data: dict[str, Any] = AppConfig().model_dump(mode="json")

    if config_path:
        path = Path(config_path)
        if not path.is_file():
            raise ConfigurationError(
                CONFIG_LOADING_ERROR.format(error=f"file not found: {path}")
            )
        if path.suffix.lower() not in {".yaml", ".yml"}:
            raise ConfigurationError(
                CONFIG_LOADING_ERROR.format(
                    error=f"unsupported file format {path.suffix}, use YAML"
                )
            )
        try:
            with path.open(encoding="utf-8") as f:
                file_config = yaml.safe_load(f) or {}
        except yaml.YAMLError as exc:
            raise ConfigurationError(CONFIG_LOADING_ERROR.format(error=exc)) from exc
        if not isinstance(file_config, dict):
            raise ConfigurationError(
                CONFIG_LOADING_ERROR.format(error="top level must be a mapping")
            )
        _merge_dicts(config_data, file_config)
        logger.info("Loaded configuration file %s", path)

    try:
        return AppConfig.model_validate(_config_from_env(environ, config_data))
    except ValidationError as exc:
        raise ConfigurationError(
            CONFIG_LOADING_ERROR.format(error=exc), details={"errors": exc.errors()}
        ) from exc
