"""Application settings with JSON persistence.

Settings live next to the preset catalogue, in the per-user data
directory (``TIMETRACKER_HOME`` overrides it)::

    settings = load_settings()
    settings.last_preset = "Consultant"
    save_settings(settings)
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, asdict, fields
from pathlib import Path

from platformdirs import user_data_dir


APP_NAME = "TimeTracker"


def data_dir() -> Path:
    """Directory holding ``presets.json`` and ``settings.json``."""
    override = os.environ.get("TIMETRACKER_HOME")
    if override:
        return Path(override)
    return Path(user_data_dir(APP_NAME, appauthor=False))


APP_DATA_DIR = data_dir()
SETTINGS_PATH = APP_DATA_DIR / "settings.json"
PRESETS_PATH = APP_DATA_DIR / "presets.json"


@dataclass
class Settings:
    """All user-configurable preferences."""

    # ── presets ───────────────────────────────────────────────────────
    last_preset: str | None = None
    base_task_count: int = 2               # tasks given to a new preset

    # ── timers ────────────────────────────────────────────────────────
    time_format: str = "%H:%M:%S"          # session log timestamps
    refresh_interval_ms: int = 1000

    # ── window ────────────────────────────────────────────────────────
    window_width: int = 420
    window_height: int = 560


def load_settings() -> Settings:
    """Load settings from disk, falling back to defaults."""
    try:
        if SETTINGS_PATH.exists():
            data = json.loads(SETTINGS_PATH.read_text(encoding="utf-8"))
            # Only use keys that exist in the dataclass
            valid_keys = {f.name for f in fields(Settings)}
            filtered = {k: v for k, v in data.items() if k in valid_keys}
            return Settings(**filtered)
    except (OSError, ValueError, TypeError, AttributeError):
        pass
    return Settings()


def save_settings(settings: Settings) -> None:
    """Write settings to disk as JSON."""
    SETTINGS_PATH.parent.mkdir(parents=True, exist_ok=True)
    SETTINGS_PATH.write_text(
        json.dumps(asdict(settings), indent=2, ensure_ascii=False) + "\n",
        encoding="utf-8",
    )
