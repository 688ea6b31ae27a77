from __future__ import annotations

import logging

import pytest

from civiltime.config import reset_settings


@pytest.fixture(autouse=True)
def _clean_settings(monkeypatch):
    """Each test starts from default settings, whatever the outer environment holds."""
    for name in ("CIVILTIME_RANGE_MODE", "CIVILTIME_LOG_LEVEL", "CIVILTIME_LOG_JSON"):
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture(autouse=True)
def _restore_logging():
    """Restore root and civiltime logger state after each test."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    ct = logging.getLogger("civiltime")
    ct_level = ct.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    ct.setLevel(ct_level)


@pytest.fixture
def strict(monkeypatch):
    monkeypatch.setenv("CIVILTIME_RANGE_MODE", "strict")
    reset_settings()
