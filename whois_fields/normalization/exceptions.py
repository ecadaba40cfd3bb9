"""Normalization table exceptions."""

from typing import List, Optional, Tuple

from whois_fields.config.exceptions import ConfigurationError


class NormalizationTableError(ConfigurationError):
    """Raised when the label table fails its build-time self-check.

    The table is unusable until the rule data is fixed; nothing should try
    to recover from this at lookup time.

    Attributes:
        conflicts: (normalized label, sorted target keys) for every label
            mapped to more than one canonical key
    """

    def __init__(
        self,
        message: str,
        errors: Optional[List[str]] = None,
        conflicts: Optional[List[Tuple[str, Tuple[str, ...]]]] = None,
    ):
        self.conflicts = list(conflicts or [])
        super().__init__(
            message,
            errors=errors,
            suggestions=[
                "Each normalized label may map to exactly one canonical key",
                "Add a new, more specific label instead of re-targeting an existing one",
            ],
        )
