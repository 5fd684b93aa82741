"""Shared pytest fixtures."""

from __future__ import annotations

import os

import pytest
from click.testing import CliRunner


@pytest.fixture
def runner(monkeypatch: pytest.MonkeyPatch) -> CliRunner:
    """Return a CLI runner isolated from ``SHAMV__`` environment overrides."""
    for key in list(os.environ):
        if key.startswith("SHAMV__"):
            monkeypatch.delenv(key)
    return CliRunner()
