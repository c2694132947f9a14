"""Shared test fixtures.

Every test gets a clean settings cache, no ``WSM_*`` variables from the outer
environment, and no loguru sinks left over from a previous test.
"""

from __future__ import annotations

import os
from collections.abc import Iterator
from pathlib import Path

import pytest
from loguru import logger

from workspace_manager.settings import get_settings

FAKE_COMMAND = ["/opt/bin/workspace-manager"]


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    for key in list(os.environ):
        if key.upper().startswith("WSM_"):
            monkeypatch.delenv(key)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    logger.remove()


@pytest.fixture
def command() -> list[str]:
    return list(FAKE_COMMAND)


@pytest.fixture
def workspace_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """An empty ``proj`` directory that is also the working directory."""
    root = tmp_path / "proj"
    root.mkdir()
    monkeypatch.chdir(root)
    return root


@pytest.fixture
def warnings() -> Iterator[list[str]]:
    """Collect loguru WARNING+ messages emitted during the test."""
    messages: list[str] = []
    handler_id = logger.add(lambda msg: messages.append(msg.record["message"]), level="WARNING")
    yield messages
    logger.remove(handler_id)
