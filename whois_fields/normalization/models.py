"""Data models for label resolution results.

A resolver call yields either a ResolvedField (the label mapped to a
canonical key) or an UnmappedLabel. Both are plain immutable values owned by
whoever assembles the final record.
"""

from dataclasses import dataclass, field
from typing import Iterable, List, Union

from whois_fields.domain.models import CanonicalKey, ContactRole


@dataclass(frozen=True)
class ResolvedField:
    """A raw value paired with the canonical key its label resolved to.

    Attributes:
        key: Canonical field key
        value: Raw value, untouched
        raw_label: Label as it appeared in the whois text
        role: Contact role the label was resolved under
    """

    key: CanonicalKey
    value: str
    raw_label: str
    role: ContactRole

    @property
    def is_mapped(self) -> bool:
        return True


@dataclass(frozen=True)
class UnmappedLabel:
    """A label no table entry matched.

    Expected for legal notices, banners and registry wording the table does
    not know yet; callers may log it, drop it, or keep it for a new rule.

    Attributes:
        raw_label: Label as it appeared in the whois text
        clean_key: Normalized label that missed the lookup
        value: Raw value, untouched
        role: Contact role the label was resolved under
    """

    raw_label: str
    clean_key: str
    value: str
    role: ContactRole

    @property
    def is_mapped(self) -> bool:
        return False


ResolutionResult = Union[ResolvedField, UnmappedLabel]


@dataclass
class ResolutionSummary:
    """Counts over a batch of resolution results.

    Attributes:
        mapped_count: Number of labels resolved to a canonical key
        unmapped_count: Number of labels with no match
        unmapped_labels: Distinct unmapped clean keys, first-seen order
    """

    mapped_count: int = 0
    unmapped_count: int = 0
    unmapped_labels: List[str] = field(default_factory=list)

    @property
    def total(self) -> int:
        return self.mapped_count + self.unmapped_count

    @classmethod
    def from_results(cls, results: Iterable[ResolutionResult]) -> "ResolutionSummary":
        summary = cls()
        seen = set()
        for result in results:
            if result.is_mapped:
                summary.mapped_count += 1
                continue
            summary.unmapped_count += 1
            if result.clean_key and result.clean_key not in seen:
                seen.add(result.clean_key)
                summary.unmapped_labels.append(result.clean_key)
        return summary
