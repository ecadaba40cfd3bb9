"""Test helper utilities."""

from .whois_lines import load_fixture, split_whois_text

__all__ = ["load_fixture", "split_whois_text"]
