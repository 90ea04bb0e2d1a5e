"""
Environment detection utilities.

This module decides which environment the logging stack is running in so
that sensible defaults (console vs JSON output) can be chosen.
"""

import os
import sys
from enum import Enum
from typing import Any, Dict


class Environment(str, Enum):
    """Supported environments."""
    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"
    TEST = "test"


class EnvironmentDetector:
    """Utility class for environment detection."""

    ENV_VARS = ("TRACELOG_ENV", "ENV", "ENVIRONMENT")

    @staticmethod
    def detect_environment() -> Environment:
        """
        Detect the current environment from various sources.

        Detection priority:
        1. TRACELOG_ENV environment variable
        2. ENV environment variable
        3. ENVIRONMENT environment variable
        4. Check if running in pytest (test environment)
        5. Default to development

        Returns:
            Detected environment
        """
        for var in EnvironmentDetector.ENV_VARS:
            env_value = os.getenv(var)
            if env_value:
                env_value = env_value.lower().strip()
                try:
                    return Environment(env_value)
                except ValueError:
                    print(f"Warning: Invalid environment value '{env_value}' in {var}")

        if "pytest" in sys.modules or "PYTEST_CURRENT_TEST" in os.environ:
            return Environment.TEST

        return Environment.DEVELOPMENT

    @staticmethod
    def is_development() -> bool:
        """Check if running in development environment."""
        return EnvironmentDetector.detect_environment() == Environment.DEVELOPMENT

    @staticmethod
    def is_production() -> bool:
        """Check if running in production environment."""
        return EnvironmentDetector.detect_environment() == Environment.PRODUCTION

    @staticmethod
    def is_testing() -> bool:
        """Check if running in test environment."""
        return EnvironmentDetector.detect_environment() == Environment.TEST

    @staticmethod
    def get_environment_info() -> Dict[str, Any]:
        """
        Get a summary of the detected environment.

        Returns:
            Dictionary with the environment and the variables consulted
        """
        return {
            "environment": EnvironmentDetector.detect_environment().value,
            "variables": {var: os.getenv(var) for var in EnvironmentDetector.ENV_VARS},
            "python_version": sys.version.split()[0],
        }
