"""
Configuration management using Dynaconf.

This module provides the ambient configuration for the logging stack:
- Environment-specific settings (TRACELOG_ENV)
- Optional settings.toml / .secrets.toml files
- Environment variable overrides (TRACELOG_<NAME>)
- Validation with defaults

Library code never reads these settings directly. They are turned into an
explicit LoggingOptions instance by LoggingOptions.from_settings().
"""

import os
from pathlib import Path

from dynaconf import Dynaconf, Validator
from dynaconf.validator import ValidationError

from tracelog.exceptions import ConfigurationError

from .environment import EnvironmentDetector

CONFIG_DIR = Path(__file__).parent
SETTINGS_FILES = [
    CONFIG_DIR / "settings.toml",
]

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
LOG_FORMATS = ["json", "console"]


def get_environment() -> str:
    """
    Detect the current environment using the EnvironmentDetector.

    Returns:
        Current environment name
    """
    return EnvironmentDetector.detect_environment().value


settings = Dynaconf(
    envvar_prefix="TRACELOG",
    environments=True,
    env=get_environment(),
    settings_files=SETTINGS_FILES,
    secrets=CONFIG_DIR / ".secrets.toml",
    load_dotenv=True,
    validators=[
        Validator("service_name", default="tracelog", is_type_of=str),
        Validator("log_level", default="INFO", is_type_of=str, is_in=LOG_LEVELS),
        Validator("log_format", default="json", is_type_of=str, is_in=LOG_FORMATS),
        Validator("enable_correlation_id", default=True, is_type_of=bool),
        Validator("enable_request_id", default=True, is_type_of=bool),
        Validator("enable_machine_name", default=False, is_type_of=bool),
        Validator("redact_sensitive_data", default=True, is_type_of=bool),
    ],
)


def validate_configuration() -> None:
    """
    Validate the current configuration.

    Raises:
        ConfigurationError: If configuration validation fails.
    """
    try:
        settings.validators.validate()
    except ValidationError as e:
        raise ConfigurationError(f"Configuration validation failed: {e}") from e


def is_production() -> bool:
    """Check if running in production environment."""
    return get_environment() == "production"


# Validate configuration on import (can be disabled for testing)
if not os.getenv("SKIP_CONFIG_VALIDATION"):
    try:
        validate_configuration()
    except ConfigurationError as e:
        print(f"Configuration Error: {e}")
        if is_production():
            raise
