"""Core domain vocabulary for canonical whois fields.

This module defines the closed set of identifiers the rest of the library
consumes:
- ContactRole: the four parallel contact sections of a whois record
- CanonicalKey: every canonical field key (domain-level and per-role)
- CONTACT_ATTRIBUTES / DOMAIN_KEYS: the building blocks of CanonicalKey
"""

from enum import Enum
from typing import Optional, Tuple, Union


class ContactRole(str, Enum):
    """Contact sections sharing the same attribute set."""

    REGISTRANT = "registrant"
    ADMIN = "admin"
    TECH = "tech"
    BILLING = "billing"

    @classmethod
    def coerce(cls, value: Union["ContactRole", str]) -> "ContactRole":
        """Return a ContactRole for an enum member or its string value.

        Raises:
            ValueError: If value names no known role
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            valid = ", ".join(role.value for role in cls)
            raise ValueError(f"Unknown contact role: {value!r}. Must be one of: {valid}") from None


CONTACT_ATTRIBUTES: Tuple[str, ...] = (
    "id",
    "name",
    "organization",
    "street",
    "city",
    "state_province",
    "postal_code",
    "country",
    "phone",
    "phone_ext",
    "fax",
    "fax_ext",
    "email",
)


class CanonicalKey(str, Enum):
    """Closed set of canonical field keys produced by label resolution."""

    # Domain-level keys (role-independent)
    DOMAIN_ID = "domain_id"
    DOMAIN_NAME = "domain_name"
    DOMAIN_STATUS = "domain_status"
    DOMAIN_DNSSEC = "domain_dnssec"
    WHOIS_SERVER = "whois_server"
    NAME_SERVERS = "name_servers"
    CREATED_DATE = "created_date"
    UPDATED_DATE = "updated_date"
    EXPIRED_DATE = "expired_date"
    REFERRAL_URL = "referral_url"

    REGISTRANT_ID = "registrant_id"
    REGISTRANT_NAME = "registrant_name"
    REGISTRANT_ORGANIZATION = "registrant_organization"
    REGISTRANT_STREET = "registrant_street"
    REGISTRANT_CITY = "registrant_city"
    REGISTRANT_STATE_PROVINCE = "registrant_state_province"
    REGISTRANT_POSTAL_CODE = "registrant_postal_code"
    REGISTRANT_COUNTRY = "registrant_country"
    REGISTRANT_PHONE = "registrant_phone"
    REGISTRANT_PHONE_EXT = "registrant_phone_ext"
    REGISTRANT_FAX = "registrant_fax"
    REGISTRANT_FAX_EXT = "registrant_fax_ext"
    REGISTRANT_EMAIL = "registrant_email"

    ADMIN_ID = "admin_id"
    ADMIN_NAME = "admin_name"
    ADMIN_ORGANIZATION = "admin_organization"
    ADMIN_STREET = "admin_street"
    ADMIN_CITY = "admin_city"
    ADMIN_STATE_PROVINCE = "admin_state_province"
    ADMIN_POSTAL_CODE = "admin_postal_code"
    ADMIN_COUNTRY = "admin_country"
    ADMIN_PHONE = "admin_phone"
    ADMIN_PHONE_EXT = "admin_phone_ext"
    ADMIN_FAX = "admin_fax"
    ADMIN_FAX_EXT = "admin_fax_ext"
    ADMIN_EMAIL = "admin_email"

    TECH_ID = "tech_id"
    TECH_NAME = "tech_name"
    TECH_ORGANIZATION = "tech_organization"
    TECH_STREET = "tech_street"
    TECH_CITY = "tech_city"
    TECH_STATE_PROVINCE = "tech_state_province"
    TECH_POSTAL_CODE = "tech_postal_code"
    TECH_COUNTRY = "tech_country"
    TECH_PHONE = "tech_phone"
    TECH_PHONE_EXT = "tech_phone_ext"
    TECH_FAX = "tech_fax"
    TECH_FAX_EXT = "tech_fax_ext"
    TECH_EMAIL = "tech_email"

    BILLING_ID = "billing_id"
    BILLING_NAME = "billing_name"
    BILLING_ORGANIZATION = "billing_organization"
    BILLING_STREET = "billing_street"
    BILLING_CITY = "billing_city"
    BILLING_STATE_PROVINCE = "billing_state_province"
    BILLING_POSTAL_CODE = "billing_postal_code"
    BILLING_COUNTRY = "billing_country"
    BILLING_PHONE = "billing_phone"
    BILLING_PHONE_EXT = "billing_phone_ext"
    BILLING_FAX = "billing_fax"
    BILLING_FAX_EXT = "billing_fax_ext"
    BILLING_EMAIL = "billing_email"

    @classmethod
    def for_role(cls, role: Union[ContactRole, str], attribute: str) -> "CanonicalKey":
        """Build the key for a contact attribute under a role prefix.

        Example:
            >>> CanonicalKey.for_role(ContactRole.ADMIN, "email")
            <CanonicalKey.ADMIN_EMAIL: 'admin_email'>
        """
        if attribute not in CONTACT_ATTRIBUTES:
            raise ValueError(f"Unknown contact attribute: {attribute!r}")
        return cls(f"{ContactRole.coerce(role).value}_{attribute}")

    @property
    def role(self) -> Optional[ContactRole]:
        """Contact role of a per-role key, None for domain-level keys."""
        prefix = self.value.split("_", 1)[0]
        try:
            return ContactRole(prefix)
        except ValueError:
            return None

    @property
    def attribute(self) -> Optional[str]:
        """Contact attribute of a per-role key, None for domain-level keys."""
        if self.role is None:
            return None
        return self.value.split("_", 1)[1]

    def with_role(self, role: Union[ContactRole, str]) -> "CanonicalKey":
        """Return the same contact attribute under another role prefix.

        Raises:
            ValueError: If this is a domain-level key
        """
        if self.attribute is None:
            raise ValueError(f"{self.value} is a domain-level key and has no role")
        return CanonicalKey.for_role(role, self.attribute)


DOMAIN_KEYS: Tuple[CanonicalKey, ...] = tuple(key for key in CanonicalKey if key.role is None)
