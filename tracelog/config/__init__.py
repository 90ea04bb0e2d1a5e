"""
Configuration module.

Usage:
    from tracelog.config import LoggingOptions, settings

    options = LoggingOptions.from_settings(settings)
    configure_logging(options)
"""

from .environment import Environment, EnvironmentDetector
from .options import LoggingOptions
from .settings import (
    get_environment,
    is_production,
    settings,
    validate_configuration,
)

__all__ = [
    "settings",
    "validate_configuration",
    "get_environment",
    "is_production",
    "Environment",
    "EnvironmentDetector",
    "LoggingOptions",
]
