"""Configuration management module for whois field resolution."""

from .environment import EnvironmentConfig, load_environment_config
from .exceptions import ConfigurationError
from .loader import load_config
from .models import AppConfig, LabelRuleConfig, LogFormat, LoggingConfig, LogLevel

__all__ = [
    # Main loader functions
    "load_config",
    "load_environment_config",
    # Configuration models
    "AppConfig",
    "LabelRuleConfig",
    "LoggingConfig",
    "EnvironmentConfig",
    # Enums
    "LogLevel",
    "LogFormat",
    # Exceptions
    "ConfigurationError",
]
