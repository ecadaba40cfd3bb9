"""Immutable label table and its role-derived variants.

The table is built once from (label, key) rules, checked for defects, and
then only read. Admin, tech and billing lookups use tables derived from the
registrant entries by substituting each role's synonyms for the word
"registrant" in the label and the role prefix in the key.
"""

from collections import defaultdict
from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional, Set, Tuple, Union

from whois_fields.domain.models import CanonicalKey, ContactRole
from whois_fields.logging import get_logger

from .exceptions import NormalizationTableError
from .labels import is_normalized
from .rules import BASE_RULES

logger = get_logger(__name__, component="normalization")

ROLE_PLACEHOLDER = "registrant"

ROLE_SYNONYMS: Mapping[ContactRole, Tuple[str, ...]] = MappingProxyType(
    {
        ContactRole.ADMIN: ("admin", "administrative"),
        ContactRole.TECH: ("tech", "technical"),
        ContactRole.BILLING: ("billing", "bill"),
    }
)

LabelRule = Tuple[str, Union[CanonicalKey, str]]


@dataclass(frozen=True)
class NormalizationTable:
    """Per-role lookup tables from normalized label to canonical key.

    Attributes:
        base: Registrant and domain-level entries as written in the rules
        role_tables: Lookup table for every contact role; the registrant
            table is the base table itself
    """

    base: Mapping[str, CanonicalKey]
    role_tables: Mapping[ContactRole, Mapping[str, CanonicalKey]]

    @classmethod
    def build(
        cls,
        rules: Iterable[LabelRule] = BASE_RULES,
        extra_rules: Iterable[LabelRule] = (),
        role_synonyms: Mapping[ContactRole, Tuple[str, ...]] = ROLE_SYNONYMS,
    ) -> "NormalizationTable":
        """Validate rules and build the base and role-derived tables.

        Extra rules are appended after the built-in rules and validated
        together with them, so they can only add labels.

        Args:
            rules: Built-in (label, key) rules
            extra_rules: Additional (label, key) rules, e.g. from configuration
            role_synonyms: Label words substituted for "registrant" per role

        Returns:
            NormalizationTable ready for concurrent read-only use

        Raises:
            NormalizationTableError: If any rule is malformed or two rules
                give one normalized label different keys
        """
        errors: List[str] = []
        base: Dict[str, CanonicalKey] = {}
        targets: Dict[str, Set[CanonicalKey]] = defaultdict(set)
        duplicates = 0

        for label, raw_key in list(rules) + list(extra_rules):
            try:
                key = CanonicalKey(raw_key)
            except ValueError:
                errors.append(f"'{label}' targets unknown key {raw_key!r}")
                continue

            if not label or not is_normalized(label):
                errors.append(f"'{label}' is not a normalized label")
                continue

            if key.role not in (None, ContactRole.REGISTRANT):
                errors.append(
                    f"'{label}' targets {key.value}; only registrant keys are listed, "
                    f"{key.role.value} keys are derived"
                )
                continue

            if (ROLE_PLACEHOLDER in label) != (key.role is ContactRole.REGISTRANT):
                errors.append(
                    f"'{label}' -> {key.value}: labels containing '{ROLE_PLACEHOLDER}' "
                    f"must target registrant keys and only those"
                )
                continue

            if base.get(label) == key:
                duplicates += 1
            targets[label].add(key)
            base.setdefault(label, key)

        conflicts = [
            (label, tuple(sorted(key.value for key in keys)))
            for label, keys in targets.items()
            if len(keys) > 1
        ]
        for label, keys in conflicts:
            errors.append(f"'{label}' maps to conflicting keys: {', '.join(keys)}")

        role_tables: Dict[ContactRole, Mapping[str, CanonicalKey]] = {
            ContactRole.REGISTRANT: MappingProxyType(base),
        }
        for role, synonyms in role_synonyms.items():
            derived, role_conflicts = _derive_role_table(base, role, synonyms)
            conflicts.extend(role_conflicts)
            for label, keys in role_conflicts:
                errors.append(
                    f"{role.value} label '{label}' maps to conflicting keys: {', '.join(keys)}"
                )
            role_tables[role] = MappingProxyType(derived)

        if errors:
            logger.error(
                f"Label table failed validation with {len(errors)} error(s)",
                extra={
                    "event": "normalization.table.invalid",
                    "error_count": len(errors),
                    "conflict_count": len(conflicts),
                },
            )
            raise NormalizationTableError(
                "Label table failed validation", errors=errors, conflicts=conflicts
            )

        table = cls(base=MappingProxyType(base), role_tables=MappingProxyType(role_tables))
        logger.info(
            "Label table built",
            extra={
                "event": "normalization.table.built",
                "base_labels": len(base),
                "duplicate_rules": duplicates,
                **{f"{role.value}_labels": len(t) for role, t in role_tables.items()},
            },
        )
        return table

    def for_role(self, role: Union[ContactRole, str]) -> Mapping[str, CanonicalKey]:
        """Return the read-only lookup table for a contact role."""
        return self.role_tables[ContactRole.coerce(role)]

    def lookup(
        self, clean_key: str, role: Union[ContactRole, str] = ContactRole.REGISTRANT
    ) -> Optional[CanonicalKey]:
        """Look up an already normalized label; None when unmapped."""
        return self.for_role(role).get(clean_key)

    def labels(self, role: Union[ContactRole, str] = ContactRole.REGISTRANT) -> List[str]:
        """Sorted labels known for a role."""
        return sorted(self.for_role(role))

    def reachable_keys(self, role: Union[ContactRole, str] = ContactRole.REGISTRANT) -> Set[CanonicalKey]:
        """Canonical keys at least one label resolves to for a role."""
        return set(self.for_role(role).values())

    def __len__(self) -> int:
        return len(self.base)


def _derive_role_table(
    base: Mapping[str, CanonicalKey],
    role: ContactRole,
    synonyms: Tuple[str, ...],
) -> Tuple[Dict[str, CanonicalKey], List[Tuple[str, Tuple[str, ...]]]]:
    """Derive one role's table from the base entries.

    Role-independent entries are shared unchanged; every registrant entry
    yields one label per synonym with the key moved to the role prefix.

    Returns:
        (derived table, conflicts) where conflicts lists derived labels that
        clash with a role-independent label or with each other
    """
    table = {label: key for label, key in base.items() if ROLE_PLACEHOLDER not in label}

    derived_targets: Dict[str, Set[CanonicalKey]] = defaultdict(set)
    for label, key in base.items():
        if ROLE_PLACEHOLDER not in label:
            continue
        for synonym in synonyms:
            derived_targets[label.replace(ROLE_PLACEHOLDER, synonym)].add(key.with_role(role))

    conflicts = []
    for label, keys in derived_targets.items():
        existing = table.get(label)
        if existing is not None:
            keys = keys | {existing}
        if len(keys) > 1:
            conflicts.append((label, tuple(sorted(key.value for key in keys))))
            continue
        table[label] = next(iter(keys))

    return table, conflicts


# Process-wide table; a defect in the built-in rules fails at import time.
DEFAULT_TABLE = NormalizationTable.build()
