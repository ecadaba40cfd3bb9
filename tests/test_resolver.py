"""Unit tests for FieldResolver.

Covers:
- Resolution scenarios for registrant, derived roles and role-independent keys
- Equivalence of labels that normalize identically
- Role derivation completeness over the built-in table
- Batch resolution, summaries and unmapped logging
"""

import logging
from concurrent.futures import ThreadPoolExecutor

import pytest

from whois_fields.domain.models import CONTACT_ATTRIBUTES, CanonicalKey, ContactRole
from whois_fields.normalization import (
    DEFAULT_TABLE,
    ROLE_SYNONYMS,
    FieldResolver,
    NormalizationTable,
    ResolvedField,
    UnmappedLabel,
)
from whois_fields.normalization.labels import normalize_label
from whois_fields.normalization.rules import LABELS_BY_KEY


@pytest.fixture
def resolver():
    return FieldResolver()


class TestResolveScenarios:
    """Resolution of single labels."""

    def test_registrant_organization(self, resolver):
        assert resolver.resolve("Registrant Organization", ContactRole.REGISTRANT) is (
            CanonicalKey.REGISTRANT_ORGANIZATION
        )

    def test_messy_registrant_email(self, resolver):
        assert resolver.resolve("  REGISTRANT   E-Mail  ", "registrant") is CanonicalKey.REGISTRANT_EMAIL

    def test_admin_organization_derived_from_registrant(self, resolver):
        assert resolver.resolve("Admin Organization", ContactRole.ADMIN) is CanonicalKey.ADMIN_ORGANIZATION

    def test_unknown_legal_notice_is_unmapped(self, resolver):
        assert resolver.resolve("Some Unknown Legal Notice", ContactRole.REGISTRANT) is None

    def test_role_independent_key(self, resolver):
        assert resolver.resolve("Name Servers", ContactRole.REGISTRANT) is CanonicalKey.NAME_SERVERS
        assert resolver.resolve("Name Servers", ContactRole.BILLING) is CanonicalKey.NAME_SERVERS

    def test_role_defaults_to_registrant(self, resolver):
        assert resolver.resolve("Registrant City:") is CanonicalKey.REGISTRANT_CITY

    @pytest.mark.parametrize(
        "label, role, expected",
        [
            ("Registry Admin ID:", "admin", CanonicalKey.ADMIN_ID),
            ("Administrative Contact Email", "admin", CanonicalKey.ADMIN_EMAIL),
            ("Tech State/Province:", "tech", CanonicalKey.TECH_STATE_PROVINCE),
            ("Technical Contact Fax Number", "tech", CanonicalKey.TECH_FAX),
            ("Billing Phone Ext:", "billing", CanonicalKey.BILLING_PHONE_EXT),
            ("Registrant Phone-Ext:", "registrant", CanonicalKey.REGISTRANT_PHONE_EXT),
            ("Registrant Fax-Ext:", "registrant", CanonicalKey.REGISTRANT_FAX_EXT),
            ("Admin Phone-Ext:", "admin", CanonicalKey.ADMIN_PHONE_EXT),
            ("Tech Fax-Ext:", "tech", CanonicalKey.TECH_FAX_EXT),
            ("Bill Postal Code", "billing", CanonicalKey.BILLING_POSTAL_CODE),
            ("Registrant's Address:", "registrant", CanonicalKey.REGISTRANT_STREET),
            ("Registry Expiry Date:", "registrant", CanonicalKey.EXPIRED_DATE),
            ("Domain Name..........:", "registrant", CanonicalKey.DOMAIN_NAME),
        ],
    )
    def test_common_registry_wordings(self, resolver, label, role, expected):
        assert resolver.resolve(label, role) is expected

    def test_registrant_label_under_other_role_is_unmapped(self, resolver):
        assert resolver.resolve("Registrant Name", ContactRole.ADMIN) is None

    def test_role_label_under_registrant_is_unmapped(self, resolver):
        assert resolver.resolve("Admin Name", ContactRole.REGISTRANT) is None

    @pytest.mark.parametrize("label", ["", "   ", ":", None, 12])
    def test_malformed_label_is_unmapped(self, resolver, label):
        assert resolver.resolve(label) is None

    def test_unknown_role_raises(self, resolver):
        with pytest.raises(ValueError):
            resolver.resolve("Admin Name", "owner")


class TestResolutionProperties:
    """Properties that must hold over the whole built-in table."""

    def test_every_registrant_key_covered(self, resolver):
        for attribute in CONTACT_ATTRIBUTES:
            key = CanonicalKey.for_role(ContactRole.REGISTRANT, attribute)
            labels = LABELS_BY_KEY[key]
            assert any(resolver.resolve(label.upper() + ":") is key for label in labels), key

    @pytest.mark.parametrize("role", [ContactRole.ADMIN, ContactRole.TECH, ContactRole.BILLING])
    def test_every_registrant_key_has_derived_role_key(self, resolver, role):
        for attribute in CONTACT_ATTRIBUTES:
            registrant_key = CanonicalKey.for_role(ContactRole.REGISTRANT, attribute)
            derived_key = registrant_key.with_role(role)
            labels = [
                label.replace("registrant", synonym)
                for label in LABELS_BY_KEY[registrant_key]
                for synonym in ROLE_SYNONYMS[role]
            ]
            assert all(resolver.resolve(label, role) is derived_key for label in labels)

    @pytest.mark.parametrize("role", list(ContactRole))
    def test_equivalent_labels_resolve_identically(self, resolver, role):
        for label in DEFAULT_TABLE.labels(role):
            variants = [label, label.upper(), f"  {label.title()} :", label.replace(" ", "   ")]
            results = {resolver.resolve(variant, role) for variant in variants}
            assert len(results) == 1, label

    def test_resolve_matches_table_lookup_of_normalized_label(self, resolver):
        for raw in ["Registrant Fax:", "NSERVER", "Whois Server", "nothing here"]:
            assert resolver.resolve(raw) == DEFAULT_TABLE.lookup(normalize_label(raw))

    def test_concurrent_resolution(self, resolver):
        labels = [("Tech Email", "tech"), ("Billing Name", "billing"), ("Domain Status", "admin")] * 200

        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(lambda pair: resolver.resolve(*pair), labels))

        assert results[:3] == [CanonicalKey.TECH_EMAIL, CanonicalKey.BILLING_NAME, CanonicalKey.DOMAIN_STATUS]
        assert results == results[:3] * 200


class TestResolveField:
    """Tests for resolve_field and resolve_fields."""

    def test_resolved_field_keeps_raw_value(self, resolver):
        result = resolver.resolve_field("Tech Email:", "  noc@example.com ", "tech")

        assert result == ResolvedField(
            key=CanonicalKey.TECH_EMAIL,
            value="  noc@example.com ",
            raw_label="Tech Email:",
            role=ContactRole.TECH,
        )
        assert result.is_mapped

    def test_unmapped_label(self, resolver):
        result = resolver.resolve_field("NOTICE: The expiration date", "is not the", "registrant")

        assert isinstance(result, UnmappedLabel)
        assert not result.is_mapped
        assert result.clean_key == "notice: the expiration date"
        assert result.value == "is not the"
        assert result.role is ContactRole.REGISTRANT

    def test_batch_continues_past_unmapped_labels(self, resolver):
        triples = [
            ("Domain Name", "EXAMPLE.COM", "registrant"),
            ("", "", "registrant"),
            ("Terms of Use", "You agree...", "registrant"),
            ("Admin Name", "Jane Doe", "admin"),
            ("Admin Shoe Size", "42", "admin"),
            ("Tech Phone", "+1.5555550100", ContactRole.TECH),
        ]

        results = list(resolver.resolve_fields(triples))

        assert [r.is_mapped for r in results] == [True, False, False, True, False, True]
        assert [r.key for r in results if r.is_mapped] == [
            CanonicalKey.DOMAIN_NAME,
            CanonicalKey.ADMIN_NAME,
            CanonicalKey.TECH_PHONE,
        ]

    def test_batch_is_lazy(self, resolver):
        results = resolver.resolve_fields(iter([("Domain", "example.com", "registrant")]))
        assert next(results).key is CanonicalKey.DOMAIN_NAME

    def test_summarize(self, resolver):
        results = resolver.resolve_fields(
            [
                ("Domain", "example.com", "registrant"),
                ("Disclaimer", "a", "registrant"),
                ("DISCLAIMER:", "b", "registrant"),
                ("", "", "registrant"),
                ("Admin Email", "a@example.com", "admin"),
            ]
        )

        summary = resolver.summarize(results)

        assert summary.mapped_count == 2
        assert summary.unmapped_count == 3
        assert summary.total == 5
        assert summary.unmapped_labels == ["disclaimer"]

    def test_known_labels(self, resolver):
        assert "admin e-mail" in resolver.known_labels("admin")
        assert "registrant e-mail" in resolver.known_labels()

    def test_custom_table(self):
        table = NormalizationTable.build([("registrant handle", "registrant_id")])
        resolver = FieldResolver(table)

        assert resolver.resolve("Tech Handle", "tech") is CanonicalKey.TECH_ID
        assert resolver.resolve("Domain Name") is None


class TestUnmappedLogging:
    """Logging of unmapped labels."""

    def test_unmapped_label_logged_when_enabled(self, caplog):
        resolver = FieldResolver(log_unmapped=True)

        with caplog.at_level(logging.DEBUG, logger="whois_fields.normalization.resolver"):
            resolver.resolve_field("Registrar Abuse Contact Email", "abuse@example.com", "registrant")

        records = [r for r in caplog.records if getattr(r, "event", None) == "resolver.label.unmapped"]
        assert len(records) == 1
        assert records[0].clean_key == "registrar abuse contact email"
        assert records[0].role == "registrant"
        assert records[0].component == "resolver"

    def test_unmapped_label_not_logged_by_default(self, caplog):
        resolver = FieldResolver()

        with caplog.at_level(logging.DEBUG, logger="whois_fields.normalization.resolver"):
            resolver.resolve_field("Registrar Abuse Contact Email", "abuse@example.com", "registrant")

        assert not [r for r in caplog.records if getattr(r, "event", None) == "resolver.label.unmapped"]

    def test_batch_completion_logged(self, caplog):
        resolver = FieldResolver()

        with caplog.at_level(logging.DEBUG, logger="whois_fields.normalization.resolver"):
            list(resolver.resolve_fields([("Domain", "example.com", "registrant"), ("x", "y", "admin")]))

        records = [r for r in caplog.records if getattr(r, "event", None) == "resolver.batch.completed"]
        assert len(records) == 1
        assert records[0].mapped_count == 1
        assert records[0].unmapped_count == 1
