"""
Configuration Management - Loads settings from the environment
"""

import logging
import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

from .exceptions import ConfigurationError
from .logging import setup_logging

logger = logging.getLogger(__name__)

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
VALID_LOG_FORMATS = ("text", "json")


@dataclass
class LoggingConfig:
    """Logging configuration settings"""

    level: str = "INFO"
    format_type: str = "text"
    log_file: str | None = None

    def __post_init__(self) -> None:
        self.level = self.level.upper()
        self.format_type = self.format_type.lower()
        if self.level not in VALID_LOG_LEVELS:
            raise ConfigurationError(
                "LOG_LEVEL", self.level, f"expected one of {', '.join(VALID_LOG_LEVELS)}"
            )
        if self.format_type not in VALID_LOG_FORMATS:
            raise ConfigurationError(
                "LOG_FORMAT", self.format_type, f"expected one of {', '.join(VALID_LOG_FORMATS)}"
            )

    @classmethod
    def from_env(cls) -> "LoggingConfig":
        """Load logging config from environment variables"""
        return cls(
            level=os.getenv("LOG_LEVEL", "INFO"),
            format_type=os.getenv("LOG_FORMAT", "text"),
            log_file=os.getenv("LOG_FILE") or None,
        )


@dataclass
class Config:
    """Application configuration"""

    environment: str = "development"
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @classmethod
    def from_env(cls) -> "Config":
        """Load all configuration from environment variables.

        Values from a ``.env`` file are loaded first; variables already set in
        the process environment take precedence.
        """
        load_dotenv()
        return cls(
            environment=os.getenv("ENVIRONMENT", "development").strip().lower(),
            logging=LoggingConfig.from_env(),
        )


# Global configuration instance (lazy-loaded)
_config: Config | None = None


def get_config() -> Config:
    """Get or create global configuration instance."""
    global _config
    if _config is None:
        _config = Config.from_env()
    return _config


def get_logging_config() -> LoggingConfig:
    """Get logging configuration"""
    return get_config().logging


def reset_config() -> None:
    """Drop the cached configuration so the next access reloads it."""
    global _config
    _config = None


def configure_from_env() -> Config:
    """Load configuration and set up logging from it.

    Returns:
        The loaded configuration
    """
    config = get_config()
    setup_logging(
        level=config.logging.level,
        format_type=config.logging.format_type,
        log_file=config.logging.log_file,
    )
    logger.info(
        "Configuration loaded",
        extra={"environment": config.environment, "log_format": config.logging.format_type},
    )
    return config
