"""Field resolution from raw whois labels to canonical keys.

FieldResolver is the entry point for the record assembler:
1. Normalize the raw label
2. Pick the lookup table for the contact role
3. Return the canonical key, or an explicit unmapped result on a miss
"""

import logging
from typing import Iterable, Iterator, List, Optional, Tuple, Union

from whois_fields.domain.models import CanonicalKey, ContactRole
from whois_fields.logging import get_logger

from .labels import normalize_label
from .models import ResolutionResult, ResolutionSummary, ResolvedField, UnmappedLabel
from .table import DEFAULT_TABLE, NormalizationTable

logger = get_logger(__name__, component="resolver")

RoleLike = Union[ContactRole, str]


class FieldResolver:
    """Resolves (label, value, role) triples against a NormalizationTable.

    The resolver holds no mutable state: one instance can serve any number
    of threads parsing responses in parallel.
    """

    def __init__(
        self,
        table: NormalizationTable = DEFAULT_TABLE,
        log_unmapped: bool = False,
        logger_instance: Optional[logging.Logger] = None,
    ):
        """Initialize FieldResolver.

        Args:
            table: Label table to resolve against (defaults to the built-in table)
            log_unmapped: Log every unmapped label at DEBUG level
            logger_instance: Logger instance (defaults to module logger)
        """
        self.table = table
        self.log_unmapped = log_unmapped
        self.logger = logger_instance or logger

    def resolve(self, raw_label: str, role: RoleLike = ContactRole.REGISTRANT) -> Optional[CanonicalKey]:
        """Resolve a raw label to its canonical key.

        Args:
            raw_label: Label as it appears in whois text
            role: Contact section the label was found in

        Returns:
            CanonicalKey on a hit, None when the label is unmapped

        Raises:
            ValueError: If role is not a known contact role
        """
        return self.table.lookup(normalize_label(raw_label), role)

    def resolve_field(
        self, raw_label: str, raw_value: str, role: RoleLike = ContactRole.REGISTRANT
    ) -> ResolutionResult:
        """Resolve one (label, value, role) triple.

        Returns:
            ResolvedField on a hit, UnmappedLabel on a miss
        """
        role = ContactRole.coerce(role)
        clean_key = normalize_label(raw_label)
        key = self.table.lookup(clean_key, role)

        if key is None:
            if self.log_unmapped:
                self.logger.debug(
                    f"Unmapped label '{clean_key}'",
                    extra={
                        "event": "resolver.label.unmapped",
                        "raw_label": raw_label,
                        "clean_key": clean_key,
                        "role": role.value,
                    },
                )
            return UnmappedLabel(raw_label=raw_label, clean_key=clean_key, value=raw_value, role=role)

        return ResolvedField(key=key, value=raw_value, raw_label=raw_label, role=role)

    def resolve_fields(
        self, triples: Iterable[Tuple[str, str, RoleLike]]
    ) -> Iterator[ResolutionResult]:
        """Resolve a batch of (label, value, role) triples in order.

        Unmapped labels never stop the batch; they are yielded as
        UnmappedLabel and counted in the completion log.

        Yields:
            ResolvedField or UnmappedLabel for every triple
        """
        mapped = 0
        unmapped = 0
        for raw_label, raw_value, role in triples:
            result = self.resolve_field(raw_label, raw_value, role)
            if result.is_mapped:
                mapped += 1
            else:
                unmapped += 1
            yield result

        self.logger.debug(
            "Resolved label batch",
            extra={
                "event": "resolver.batch.completed",
                "mapped_count": mapped,
                "unmapped_count": unmapped,
            },
        )

    @staticmethod
    def summarize(results: Iterable[ResolutionResult]) -> ResolutionSummary:
        """Count mapped and unmapped results of a batch."""
        return ResolutionSummary.from_results(results)

    def known_labels(self, role: RoleLike = ContactRole.REGISTRANT) -> List[str]:
        """Sorted labels the table knows for a role."""
        return self.table.labels(role)
