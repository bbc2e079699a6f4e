# tests/conftest.py
import importlib
from pathlib import Path

import pytest

from ssaangn.services.settings_store import SettingsStore


@pytest.fixture
def settings_store(tmp_path: Path) -> SettingsStore:
    """A store pointed at a temp file so tests never touch the real settings.yaml."""
    return SettingsStore(str(tmp_path / "settings.yaml"))


@pytest.fixture
def main_module(monkeypatch, tmp_path: Path):
    m = importlib.import_module("main")
    monkeypatch.setattr(m, "SETTINGS_PATH", str(tmp_path / "settings.yaml"), raising=False)
    return m
