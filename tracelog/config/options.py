"""
Explicit logging options.

LoggingOptions is the configuration struct handed to configure_logging().
Ambient configuration (Dynaconf settings, environment variables) is only
consulted by LoggingOptions.from_settings().
"""

import logging
from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .settings import LOG_LEVELS


class LoggingOptions(BaseModel):
    """Options controlling the structlog processor chain."""

    model_config = ConfigDict(frozen=True)

    service_name: str = Field(default="tracelog", min_length=1)
    log_level: str = Field(default="INFO")
    log_format: Literal["json", "console"] = "json"
    enable_correlation_id: bool = True
    enable_request_id: bool = True
    enable_machine_name: bool = False
    redact_sensitive_data: bool = True

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_level(cls, value: Any) -> str:
        """Accept level names in any case."""
        if not isinstance(value, str):
            raise ValueError("log_level must be a string")
        level = value.upper().strip()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level

    @property
    def level(self) -> int:
        """Numeric stdlib logging level."""
        return getattr(logging, self.log_level)

    @classmethod
    def from_settings(cls, source: Optional[Any] = None) -> "LoggingOptions":
        """
        Build options from Dynaconf settings.

        Args:
            source: Settings object to read from (defaults to tracelog.config.settings)

        Returns:
            LoggingOptions populated from the settings
        """
        if source is None:
            from .settings import settings as source

        return cls(
            service_name=source.get("service_name", "tracelog"),
            log_level=source.get("log_level", "INFO"),
            log_format=source.get("log_format", "json"),
            enable_correlation_id=source.get("enable_correlation_id", True),
            enable_request_id=source.get("enable_request_id", True),
            enable_machine_name=source.get("enable_machine_name", False),
            redact_sensitive_data=source.get("redact_sensitive_data", True),
        )
