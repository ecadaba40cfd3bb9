"""Domain vocabulary for canonical whois fields."""

from .models import CONTACT_ATTRIBUTES, DOMAIN_KEYS, CanonicalKey, ContactRole

__all__ = ["CanonicalKey", "ContactRole", "CONTACT_ATTRIBUTES", "DOMAIN_KEYS"]
