"""Configuration schema models using Pydantic."""

from enum import Enum
from typing import List

from pydantic import BaseModel, Field, field_validator

from whois_fields.domain.models import CanonicalKey
from whois_fields.normalization.labels import normalize_label


class LogLevel(str, Enum):
    """Logging levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogFormat(str, Enum):
    """Log output formats."""

    JSON = "json"
    KEY_VALUE = "key-value"


class LabelRuleConfig(BaseModel):
    """A single additive label rule supplied by configuration."""

    label: str = Field(..., min_length=1, description="Raw field label as seen in whois text")
    key: CanonicalKey = Field(..., description="Canonical field key the label maps to")

    @field_validator("label")
    @classmethod
    def normalize(cls, v: str) -> str:
        """Store the label in the same form the resolver looks it up."""
        normalized = normalize_label(v)
        if not normalized:
            raise ValueError("Label cannot be empty, whitespace-only or punctuation-only")
        return normalized

    model_config = {"frozen": True}

    def as_pair(self) -> tuple:
        """Return the rule as a (label, CanonicalKey) pair."""
        return (self.label, self.key)


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: LogLevel = Field(LogLevel.INFO, description="Log level")
    format: LogFormat = Field(
        LogFormat.KEY_VALUE, description="Log output format (json or key-value)"
    )

    model_config = {"use_enum_values": True, "validate_default": True}


class AppConfig(BaseModel):
    """Root configuration object for whois field resolution."""

    extra_rules: List[LabelRuleConfig] = Field(
        default_factory=list,
        description="Additional label rules merged after the built-in table",
    )
    log_unmapped_labels: bool = Field(
        False, description="Log every unmapped label at DEBUG level"
    )
    logging: LoggingConfig = Field(
        default_factory=LoggingConfig, description="Logging configuration"
    )

    def extra_rule_pairs(self) -> List[tuple]:
        """Return extra rules as (label, CanonicalKey) pairs in file order."""
        return [rule.as_pair() for rule in self.extra_rules]
