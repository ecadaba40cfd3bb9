"""Label normalization for raw whois field names.

Registries spell the same field in many ways ("Registrant Name:",
"  REGISTRANT NAME ", "Registrant Name......:"). normalize_label folds
those spellings into the key form the label table is written in.
"""

import re
from typing import Any

LABEL_TERMINATORS = ":."

_WHITESPACE_RE = re.compile(r"\s+")
# Strips the whole trailing run, not one character: "Created On::" must not
# normalize to "created on:", or normalize_label would not be idempotent.
_TRAILING_TERMINATORS_RE = re.compile(rf"[\s{re.escape(LABEL_TERMINATORS)}]+$")


def normalize_label(raw_label: Any) -> str:
    """Normalize a raw label into a comparison-ready key.

    Normalization steps:
    - Trim leading/trailing whitespace
    - Collapse internal whitespace runs to a single space
    - Convert to lowercase
    - Strip the trailing run of label terminators (":" and ".")

    Other punctuation is kept: table entries such as "registrant's address"
    or "registrant e-mail" carry it.

    Args:
        raw_label: Label text as it appears in the whois response

    Returns:
        Normalized label (empty string for blank or non-text input)

    Example:
        >>> normalize_label("  REGISTRANT   E-Mail:  ")
        'registrant e-mail'
    """
    if not isinstance(raw_label, str):
        return ""

    normalized = _WHITESPACE_RE.sub(" ", raw_label.strip()).lower()
    return _TRAILING_TERMINATORS_RE.sub("", normalized)


def is_normalized(label: str) -> bool:
    """Whether label is already in normalized form."""
    return isinstance(label, str) and normalize_label(label) == label
