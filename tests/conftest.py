"""Shared fixtures for ui_guidelines tests."""

from __future__ import annotations

import pytest

from ui_guidelines.foundation.config.settings import get_settings


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """Point the config home at an empty directory so only packaged defaults apply."""
    monkeypatch.setenv("PRJ_CONFIG_HOME", str(tmp_path / "config"))
    settings = get_settings()
    settings.reload()
    yield settings
    monkeypatch.undo()
    settings.reload()
