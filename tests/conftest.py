"""Shared pytest fixtures for TimeTracker tests."""

import os
import sys
import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PyQt6.QtWidgets import QApplication

from timetracker.presets.store import PresetStore
from timetracker.timer.session import TimerSession

from helpers import FakeClock


@pytest.fixture(scope="session")
def qapp():
    """A single QApplication instance shared across the entire test run."""
    app = QApplication.instance() or QApplication(sys.argv)
    yield app


@pytest.fixture(autouse=True)
def data_dir(tmp_path, monkeypatch):
    """Point settings and presets at a per-test temporary directory."""
    monkeypatch.setattr("timetracker.settings.APP_DATA_DIR", tmp_path)
    monkeypatch.setattr("timetracker.settings.SETTINGS_PATH", tmp_path / "settings.json")
    monkeypatch.setattr("timetracker.settings.PRESETS_PATH", tmp_path / "presets.json")
    yield tmp_path


@pytest.fixture
def store(data_dir):
    return PresetStore(data_dir / "presets.json")


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def session(qapp, clock):
    """Fresh TimerSession driven by a fake clock."""
    return TimerSession(parent=None, clock=clock)
