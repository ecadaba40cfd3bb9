"""Environment variable loading and validation."""

import os
from pathlib import Path
from typing import Optional

from .exceptions import ConfigurationError

VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class EnvironmentConfig:
    """Environment variable configuration holder."""

    def __init__(
        self,
        log_level: Optional[str] = None,
        environment: Optional[str] = None,
        config_path: Optional[Path] = None,
    ):
        self.log_level = log_level
        self.environment = environment or "local"
        self.config_path = config_path


def load_environment_config() -> EnvironmentConfig:
    """
    Load and validate environment variables.

    All variables are optional:
    - LOG_LEVEL: Override log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    - ENVIRONMENT: Environment label attached to every log record
    - WHOIS_FIELDS_CONFIG: Path to the YAML configuration file

    Returns:
        EnvironmentConfig object with validated values

    Raises:
        ConfigurationError: If a variable is set to an invalid value
    """
    errors = []

    log_level = os.getenv("LOG_LEVEL")
    environment = os.getenv("ENVIRONMENT")
    config_path_str = os.getenv("WHOIS_FIELDS_CONFIG")

    if log_level:
        if log_level.strip().upper() not in VALID_LOG_LEVELS:
            errors.append(
                f"Invalid LOG_LEVEL: '{log_level}'. Must be one of: {', '.join(VALID_LOG_LEVELS)}"
            )
        else:
            log_level = log_level.strip().upper()

    config_path = None
    if config_path_str:
        config_path = Path(config_path_str)
        if not config_path.exists():
            errors.append(f"WHOIS_FIELDS_CONFIG points to a missing file: {config_path_str}")

    if errors:
        raise ConfigurationError(
            "Environment variable validation failed",
            errors=errors,
            suggestions=[
                "Check the values in your .env file",
                "Unset variables you do not need; all of them are optional",
            ],
        )

    return EnvironmentConfig(
        log_level=log_level or None,
        environment=environment,
        config_path=config_path,
    )
