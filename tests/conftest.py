"""Shared pytest fixtures."""

import logging

import pytest

from whois_fields.logging.context import clear_log_context


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Run with no whois-fields environment variables and an empty working directory."""
    for name in ("LOG_LEVEL", "ENVIRONMENT", "WHOIS_FIELDS_CONFIG"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def write_config(tmp_path):
    """Write a YAML config file and return its path."""

    def _write(content: str, name: str = "whois_fields.yaml"):
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def restore_root_logger():
    """Restore root logger handlers and level after configure_logging()."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture(autouse=True)
def clean_log_context():
    clear_log_context()
    yield
    clear_log_context()
