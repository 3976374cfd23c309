"""Infrastructure layer - configuration and logging."""

from .config import (
    Config,
    LoggingConfig,
    configure_from_env,
    get_config,
    get_logging_config,
    reset_config,
)
from .exceptions import ConfigurationError, InfrastructureException
from .logging import JSONFormatter, correlation_context, get_logger, setup_logging

__all__ = [
    "Config",
    "ConfigurationError",
    "InfrastructureException",
    "JSONFormatter",
    "LoggingConfig",
    "configure_from_env",
    "correlation_context",
    "get_config",
    "get_logger",
    "get_logging_config",
    "reset_config",
    "setup_logging",
]
