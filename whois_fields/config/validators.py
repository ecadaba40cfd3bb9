"""Additional validation utilities for configuration."""

import warnings
from typing import Any, Dict, List

from whois_fields.normalization.labels import normalize_label
from whois_fields.normalization.rules import BASE_RULES


def check_for_warnings(config_dict: Dict[str, Any]) -> List[str]:
    """
    Check configuration for redundant entries and return warnings.

    Contradictions are not reported here: those are table defects and are
    raised when the table is built.

    Args:
        config_dict: Raw configuration dictionary

    Returns:
        List of warning messages
    """
    warning_messages = []

    extra_rules = config_dict.get("extra_rules", [])
    if not isinstance(extra_rules, list):
        return warning_messages

    base = {label: key.value for label, key in BASE_RULES}
    seen = {}
    for rule in extra_rules:
        if not isinstance(rule, dict):
            continue
        label = normalize_label(rule.get("label"))
        key = rule.get("key")
        if not label or not isinstance(key, str):
            continue

        if base.get(label) == key:
            warning_messages.append(
                f"Extra rule '{label}' -> {key} is already built in and can be removed"
            )
        elif seen.get(label) == key:
            warning_messages.append(f"Duplicate extra rule '{label}' -> {key}")
        seen.setdefault(label, key)

    return warning_messages


def emit_warnings(warning_messages: List[str]) -> None:
    """
    Emit warning messages using Python's warnings module.

    Args:
        warning_messages: List of warning messages to emit
    """
    for message in warning_messages:
        warnings.warn(message, UserWarning, stacklevel=2)
