"""Shared test fixtures for schematics-trigger."""

from __future__ import annotations

import os
from collections.abc import Iterator

import pytest
from loguru import logger

from schematics_trigger.config import Settings, get_settings
from tests.fakes import FakeCloud


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Isolate each test from the caller's environment and the settings cache."""
    for key in list(os.environ):
        if key.upper().startswith("SCHEMATICS_TRIGGER_"):
            monkeypatch.delenv(key)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings() -> Settings:
    return Settings()


@pytest.fixture
def cloud() -> FakeCloud:
    return FakeCloud()


@pytest.fixture
def log_messages() -> Iterator[list[str]]:
    """Collect loguru messages emitted during the test."""
    messages: list[str] = []
    handler_id = logger.add(lambda m: messages.append(m.record["message"]), level="DEBUG")
    yield messages
    logger.remove(handler_id)
