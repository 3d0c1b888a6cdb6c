"""Environment-driven configuration for versrange."""

import os
from dataclasses import dataclass

from .exceptions import ConfigurationError
from .schemes import KNOWN_SCHEMES

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
LOG_FORMATS = ("text", "json")


@dataclass
class Config:
    """Configuration settings for range conversion."""

    log_level: str = "WARNING"
    log_format: str = "text"
    fallback_scheme: str = "generic"

    @property
    def structured_logging(self) -> bool:
        return self.log_format.lower() == "json"

    def validate(self) -> None:
        """
        Validate configuration settings.

        Raises:
            ConfigurationError: If configuration is invalid
        """
        if self.log_level.upper() not in LOG_LEVELS:
            raise ConfigurationError(
                f"Invalid VERSRANGE_LOG_LEVEL: '{self.log_level}'. Expected one of: {', '.join(LOG_LEVELS)}"
            )
        if self.log_format.lower() not in LOG_FORMATS:
            raise ConfigurationError(
                f"Invalid VERSRANGE_LOG_FORMAT: '{self.log_format}'. Expected one of: {', '.join(LOG_FORMATS)}"
            )
        self.validate_fallback_scheme()

    def validate_fallback_scheme(self) -> None:
        if not self.fallback_scheme.strip():
            raise ConfigurationError("VERSRANGE_FALLBACK_SCHEME cannot be empty")

        if self.fallback_scheme not in KNOWN_SCHEMES:
            raise ConfigurationError(
                f"Invalid VERSRANGE_FALLBACK_SCHEME: '{self.fallback_scheme}'. "
                f"Expected one of: {', '.join(KNOWN_SCHEMES)}"
            )


def load_fallback_scheme() -> str:
    """
    Load the fallback version scheme from the environment.

    Only VERSRANGE_FALLBACK_SCHEME is read, so logging settings never
    affect range conversion.

    Returns:
        Validated fallback scheme tag

    Raises:
        ConfigurationError: If the scheme is empty or unknown
    """
    fallback_scheme = os.getenv("VERSRANGE_FALLBACK_SCHEME", "generic").strip()
    Config(fallback_scheme=fallback_scheme).validate_fallback_scheme()
    return fallback_scheme


def load_config() -> Config:
    """
    Load and validate configuration from environment variables.

    Returns:
        Validated configuration object

    Raises:
        ConfigurationError: If configuration is invalid
    """
    config = Config(
        log_level=os.getenv("VERSRANGE_LOG_LEVEL", "WARNING").strip().upper(),
        log_format=os.getenv("VERSRANGE_LOG_FORMAT", "text").strip().lower(),
        fallback_scheme=os.getenv("VERSRANGE_FALLBACK_SCHEME", "generic").strip(),
    )
    config.validate()
    return config
