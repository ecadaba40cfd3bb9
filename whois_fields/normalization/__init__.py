"""Label normalization and field resolution for raw whois text.

This module provides:
- normalize_label: Turns a raw label into a comparison-ready key
- NormalizationTable: Immutable label table with role-derived variants
- FieldResolver: Resolves (label, value, role) triples to canonical keys
- ResolvedField / UnmappedLabel: Results handed to the record assembler
- ResolutionSummary: Counts over a batch of results
"""

from .labels import normalize_label
from .rules import BASE_RULES
from .exceptions import NormalizationTableError
from .table import DEFAULT_TABLE, ROLE_SYNONYMS, NormalizationTable
from .models import ResolutionResult, ResolutionSummary, ResolvedField, UnmappedLabel
from .resolver import FieldResolver

__all__ = [
    "normalize_label",
    "BASE_RULES",
    "DEFAULT_TABLE",
    "ROLE_SYNONYMS",
    "NormalizationTable",
    "NormalizationTableError",
    "FieldResolver",
    "ResolutionResult",
    "ResolutionSummary",
    "ResolvedField",
    "UnmappedLabel",
]
