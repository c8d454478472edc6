"""
Configuration Management for Event Discovery Search

This module provides configuration management for the event discovery system.
It implements a singleton pattern so every component sees the same settings and
loads them from defaults, a `.env` file and environment variables.

Key Features:
- Singleton pattern for global configuration access
- Environment variable support with validation
- `.env` file loading through python-dotenv
- Default value management
- Runtime updates for tests and the CLI

Example Usage:
    from event_discovery.config import config

    # Access settings
    threshold = config.min_score
    catalog = config.catalog_file

    # Update settings
    config.update({"min_score": 100, "top_k": 5})

Environment Variables:
    ENVIRONMENT: Environment name (development/staging/production)
    DEBUG: Enable debug mode (true/false)
    CATALOG_FILE: Event catalog file (YAML or JSON)
    REGISTRIES_FILE: Optional YAML file overriding the search registries
    MIN_SCORE: Minimum relevance score for a result
    TOP_K: Number of results shown by the CLI
    DEFAULT_CITY: City assumed by intent analysis
    INTENT_SERVICE_URL: Intent-extraction service endpoint
    INTENT_SERVICE_KEY: Bearer token for the intent-extraction service
    INTENT_TIMEOUT: Intent-extraction request timeout in seconds
    LOG_LEVEL: CLI logging level when no -v flag is given
"""

import logging
import os
from enum import Enum
from typing import Any, Callable, Dict, Optional

from dotenv import load_dotenv

from . import constants
from .errors import ConfigurationError

logger = logging.getLogger(__name__)


class Environment(str, Enum):
    """Environment enumeration."""

    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"


VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def _parse_number(name: str, raw: str, cast: Callable[[str], Any]) -> Any:
    try:
        return cast(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be a number, got {raw!r}")


class Config:
    """Configuration settings."""

    _instance = None

    def __new__(cls):
        """Create singleton instance."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self):
        """Initialize configuration."""
        if self._initialized:
            return
        self._initialized = True
        self._set_defaults()
        self._load_from_env()

    def _set_defaults(self) -> None:
        """Set default values."""
        # Environment
        self.environment = Environment.DEVELOPMENT.value
        self.debug = False

        # Paths
        self.catalog_file = "data/events.yaml"
        self.registries_file: Optional[str] = None

        # Search
        self.min_score = float(constants.MIN_SCORE)
        self.top_k = 10
        self.default_city = constants.DEFAULT_CITY

        # Intent extraction
        self.intent_service_url: Optional[str] = None
        self.intent_service_key: Optional[str] = None
        self.intent_timeout = 30.0

        # Logging
        self.log_level = "WARNING"

    def _load_from_env(self) -> None:
        """Load configuration from environment variables."""
        # Load environment from .env file if it exists
        if os.path.exists(".env"):
            load_dotenv(".env")

        # Environment
        self.environment = os.getenv("ENVIRONMENT", self.environment)
        self.debug = os.getenv("DEBUG", str(self.debug)).lower() == "true"

        # Paths
        self.catalog_file = os.getenv("CATALOG_FILE", self.catalog_file)
        self.registries_file = os.getenv("REGISTRIES_FILE", self.registries_file)

        # Search
        self.min_score = _parse_number(
            "MIN_SCORE", os.getenv("MIN_SCORE", str(self.min_score)), float
        )
        self.top_k = _parse_number("TOP_K", os.getenv("TOP_K", str(self.top_k)), int)
        self.default_city = os.getenv("DEFAULT_CITY", self.default_city)

        # Intent extraction
        self.intent_service_url = os.getenv(
            "INTENT_SERVICE_URL", self.intent_service_url
        )
        self.intent_service_key = os.getenv(
            "INTENT_SERVICE_KEY", self.intent_service_key
        )
        self.intent_timeout = _parse_number(
            "INTENT_TIMEOUT",
            os.getenv("INTENT_TIMEOUT", str(self.intent_timeout)),
            float,
        )

        # Logging
        self.log_level = os.getenv("LOG_LEVEL", self.log_level).upper()

        # Validate environment
        if self.environment not in [e.value for e in Environment]:
            logger.warning(f"Unknown environment {self.environment!r}, using development")
            self.environment = Environment.DEVELOPMENT.value

        # Validate log level
        if self.log_level not in VALID_LOG_LEVELS:
            self.log_level = "WARNING"

    def reload(self) -> None:
        """Reset to defaults and re-read the environment."""
        self._set_defaults()
        self._load_from_env()

    def update(self, values: Dict[str, Any]) -> None:
        """Update settings at runtime.

        Args:
            values: Mapping of setting names to new values.

        Raises:
            ConfigurationError: If a setting name is unknown.
        """
        known = self.to_dict()
        for key, value in values.items():
            if key not in known:
                raise ConfigurationError(f"Unknown configuration key: {key}")
            setattr(self, key, value)

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return {
            "environment": self.environment,
            "debug": self.debug,
            "catalog_file": self.catalog_file,
            "registries_file": self.registries_file,
            "min_score": self.min_score,
            "top_k": self.top_k,
            "default_city": self.default_city,
            "intent_service_url": self.intent_service_url,
            "intent_service_key": self.intent_service_key,
            "intent_timeout": self.intent_timeout,
            "log_level": self.log_level,
        }


# Create global instance
config = Config()

# Export configuration instance
__all__ = ["config", "Config", "Environment"]
