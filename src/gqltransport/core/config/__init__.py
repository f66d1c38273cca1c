"""Configuration package for the GraphQL transport."""

from gqltransport.core.config.app_config import (
    AppConfig,
    LoggingConfig,
    LogLevel,
    load_config,
)

__all__ = ["AppConfig", "LogLevel", "LoggingConfig", "load_config"]
