"""Built-in label rules mapping normalized whois labels to canonical keys.

Only domain-level and registrant labels are listed here. Admin, tech and
billing labels are derived from the registrant entries when the table is
built, so a new registrant wording covers every contact role at once.

Labels must already be in normalize_label() form. Adding a wording is an
append to the matching tuple; the table build rejects any label that ends
up mapped to two different keys.
"""

from typing import Dict, Tuple

from whois_fields.domain.models import CanonicalKey

LABELS_BY_KEY: Dict[CanonicalKey, Tuple[str, ...]] = {
    CanonicalKey.DOMAIN_ID: (
        "id",
        "roid",
        "domain id",
        "registry domain id",
    ),
    CanonicalKey.DOMAIN_NAME: (
        "domain",
        "domain name",
        "domain-name",
    ),
    CanonicalKey.DOMAIN_STATUS: (
        "status",
        "state",
        "domain status",
        "registration status",
        "query status",
    ),
    CanonicalKey.DOMAIN_DNSSEC: (
        "dnssec",
        "domain dnssec",
        "registrar dnssec",
        "signing key",
        "domain signed",
    ),
    CanonicalKey.WHOIS_SERVER: (
        "whois",
        "whois server",
        "registrar whois server",
    ),
    CanonicalKey.NAME_SERVERS: (
        "nserver",
        "name server",
        "name servers",
        "nameserver",
        "nameservers",
        "name servers information",
        "host name",
        "domain nameservers",
        "domain name servers",
        "domain servers in listed order",
    ),
    CanonicalKey.CREATED_DATE: (
        "created",
        "registered",
        "created on",
        "create date",
        "created date",
        "creation date",
        "domain registration date",
        "registration date",
        "domain create date",
        "domain name commencement date",
        "registered date",
        "registered on",
        "registration time",
        "first registration date",
        "domain record activated",
        "record created on",
        "domain registered",
    ),
    CanonicalKey.UPDATED_DATE: (
        "modified",
        "changed",
        "update date",
        "updated date",
        "updated on",
        "last update",
        "last updated",
        "last updated on",
        "last modified",
        "last updated date",
        "domain last updated date",
        "domain record last updated",
        "domain datelastmodified",
    ),
    CanonicalKey.EXPIRED_DATE: (
        "expire",
        "expires",
        "expires on",
        "paid till",
        "expire date",
        "expired date",
        "expiration date",
        "expiration on",
        "registrar registration expiration date",
        "registry expiry date",
        "domain expiration date",
        "expiry date",
        "expiration time",
        "domain expires",
        "record expires on",
        "record will expire on",
    ),
    CanonicalKey.REFERRAL_URL: (
        "registrar www",
        "referral url",
        "registrar url",
        "registrar web",
        "registrar website",
        "registration service url",
    ),
    CanonicalKey.REGISTRANT_ID: (
        "registrant c",
        "registrant-c",
        "registrant id",
        "registrant iana id",
        "registrant contact id",
        "registry registrant id",
    ),
    CanonicalKey.REGISTRANT_NAME: (
        "registrant name",
        "registrant person",
        "registrant contact",
        "registrant contact name",
        "registrant given name",
        "registrant holder name",
        "registrant holder english name",
        "registrant service provider",
    ),
    CanonicalKey.REGISTRANT_ORGANIZATION: (
        "registrant org",
        "registrant organization",
        "registrant contact organization",
        "registrant organisation",
        "registrant contact organisation",
        "registrant company name",
        "registrant company english name",
    ),
    CanonicalKey.REGISTRANT_STREET: (
        "registrant address",
        "registrant address1",
        "registrant street",
        "registrant street1",
        "registrant contact address",
        "registrant contact address1",
        "registrant contact street",
        "registrant contact street1",
        "registrant s address",
        "registrant s address1",
        "registrant's address",
        "registrant's address1",
        "registrant postal address",
        "registrant postal address1",
    ),
    CanonicalKey.REGISTRANT_CITY: (
        "registrant city",
        "registrant contact city",
    ),
    CanonicalKey.REGISTRANT_STATE_PROVINCE: (
        "registrant state province",
        "registrant state/province",
        "registrant contact state province",
        "registrant contact state/province",
    ),
    CanonicalKey.REGISTRANT_POSTAL_CODE: (
        "registrant zipcode",
        "registrant zip code",
        "registrant postal code",
        "registrant contact postal code",
    ),
    CanonicalKey.REGISTRANT_COUNTRY: (
        "registrant country",
        "registrant country economy",
        "registrant country/economy",
        "registrant contact country",
    ),
    CanonicalKey.REGISTRANT_PHONE: (
        "registrant phone",
        "registrant phone number",
        "registrant contact phone",
        "registrant contact phone number",
        "registrant abuse contact phone",
    ),
    CanonicalKey.REGISTRANT_PHONE_EXT: (
        "registrant phone ext",
        "registrant phone-ext",
        "registrant contact phone ext",
    ),
    CanonicalKey.REGISTRANT_FAX: (
        "registrant fax",
        "registrant fax no",
        "registrant fax number",
        "registrant facsimile",
        "registrant facsimile number",
        "registrant contact fax",
        "registrant contact fax number",
        "registrant contact facsimile",
        "registrant contact facsimile number",
    ),
    CanonicalKey.REGISTRANT_FAX_EXT: (
        "registrant fax ext",
        "registrant fax-ext",
        "registrant contact fax ext",
    ),
    CanonicalKey.REGISTRANT_EMAIL: (
        "registrant mail",
        "registrant email",
        "registrant e mail",
        "registrant e-mail",
        "registrant contact mail",
        "registrant contact email",
        "registrant contact e mail",
        "registrant contact e-mail",
        "registrant abuse contact email",
    ),
}

# Flattened (label, key) pairs in declaration order; duplicates are kept so
# the table build can report them.
BASE_RULES: Tuple[Tuple[str, CanonicalKey], ...] = tuple(
    (label, key) for key, labels in LABELS_BY_KEY.items() for label in labels
)
