"""Tests for logging context propagation."""

import threading

import pytest

from whois_fields.logging.context import (
    get_log_context,
    log_context,
    pop_log_context,
    push_log_context,
)


def test_empty_context():
    assert get_log_context() == {}


def test_push_and_pop():
    token = push_log_context(domain="example.com", role="admin")
    assert get_log_context() == {"domain": "example.com", "role": "admin"}
    pop_log_context(token)
    assert get_log_context() == {}


def test_nested_push_overrides_and_restores():
    outer = push_log_context(domain="example.com", role="registrant")
    inner = push_log_context(role="tech")

    assert get_log_context() == {"domain": "example.com", "role": "tech"}

    pop_log_context(inner)
    assert get_log_context() == {"domain": "example.com", "role": "registrant"}
    pop_log_context(outer)


def test_returned_context_is_a_copy():
    with log_context(domain="example.com"):
        context = get_log_context()
        context["domain"] = "changed.example"
        assert get_log_context() == {"domain": "example.com"}


def test_context_manager_restores_on_exception():
    with pytest.raises(RuntimeError):
        with log_context(domain="example.com"):
            raise RuntimeError("boom")

    assert get_log_context() == {}


def test_context_is_isolated_per_thread():
    seen = {}

    def worker():
        seen["thread"] = get_log_context()

    with log_context(domain="example.com"):
        thread = threading.Thread(target=worker)
        thread.start()
        thread.join()

    assert seen["thread"] == {}
