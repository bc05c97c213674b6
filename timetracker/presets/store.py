"""Durable preset catalogue.

A preset maps a job name to the ordered task labels it usually involves.
The catalogue is a single JSON object on disk::

    {"Consultant": ["Client", "Préparation", "Rapports", "Réunions"], ...}

``parse_presets`` / ``dump_presets`` are pure conversions between that
text and a ``PresetCollection``; ``PresetStore`` only adds file I/O.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Container
from pathlib import Path

from .. import settings
from ..errors import StorageReadError, StorageWriteError

logger = logging.getLogger(__name__)

PresetCollection = dict[str, list[str]]

DEFAULT_PRESETS: PresetCollection = {
    "Enseignant-Chercheur": [
        "Code", "Administration", "Enseignement",
        "Recherche", "Biblio", "Montage Projet",
    ],
    "Développeur": ["Développement", "Tests", "Documentation", "Réunions"],
    "Consultant": ["Client", "Préparation", "Rapports", "Réunions"],
}

NEW_PRESET_PREFIX = "Nouveau Métier"
TASK_PREFIX = "Tâche"


def default_presets() -> PresetCollection:
    """A fresh copy of the built-in catalogue."""
    return {name: list(tasks) for name, tasks in DEFAULT_PRESETS.items()}


def parse_presets(text: str) -> PresetCollection:
    """Decode and validate catalogue JSON.

    Raises ``ValueError`` when the text is not a JSON object of
    non-empty names mapped to arrays of strings.
    """
    data = json.loads(text)
    if not isinstance(data, dict):
        raise ValueError("preset catalogue must be a JSON object")

    presets: PresetCollection = {}
    for name, tasks in data.items():
        if not name:
            raise ValueError("preset name must not be empty")
        if not isinstance(tasks, list) or not all(isinstance(t, str) for t in tasks):
            raise ValueError(f"preset {name!r} must map to an array of strings")
        presets[name] = list(tasks)
    return presets


def dump_presets(collection: PresetCollection) -> str:
    """Encode a catalogue as the JSON text written to disk."""
    return json.dumps(collection, indent=2, ensure_ascii=False) + "\n"


def next_free_name(prefix: str, taken: Container[str], count: int) -> str:
    """``"<prefix> <count+1>"``, bumped until it is not in *taken*."""
    n = count + 1
    name = f"{prefix} {n}"
    while name in taken:
        n += 1
        name = f"{prefix} {n}"
    return name


def add_preset(
    collection: PresetCollection, base_task_count: int = 2,
) -> tuple[PresetCollection, str]:
    """Return a copy of *collection* with a new placeholder preset added.

    The caller is responsible for persisting the result.
    """
    name = next_free_name(NEW_PRESET_PREFIX, collection, len(collection))
    updated = {k: list(v) for k, v in collection.items()}
    updated[name] = [f"{TASK_PREFIX} {i}" for i in range(1, base_task_count + 1)]
    return updated, name


class PresetStore:
    """Loads and saves the preset catalogue at a fixed file location."""

    def __init__(self, path: Path | None = None) -> None:
        self._path = Path(path) if path is not None else settings.PRESETS_PATH

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> PresetCollection:
        """Read the catalogue, seeding and persisting defaults on first run."""
        if not self._path.exists():
            presets = default_presets()
            logger.info("No preset file at %s, writing defaults", self._path)
            self.save(presets)
            return presets

        try:
            text = self._path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            logger.error("Cannot read presets from %s: %s", self._path, exc)
            raise StorageReadError(
                f"cannot read presets: {exc}", self._path,
            ) from exc

        try:
            return parse_presets(text)
        except ValueError as exc:  # includes json.JSONDecodeError
            logger.error("Malformed preset file %s: %s", self._path, exc)
            raise StorageReadError(
                f"malformed preset file: {exc}", self._path,
            ) from exc

    def save(self, collection: PresetCollection) -> None:
        """Overwrite the catalogue file with *collection*."""
        text = dump_presets(collection)
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.write_text(text, encoding="utf-8")
        except OSError as exc:
            logger.error("Cannot write presets to %s: %s", self._path, exc)
            raise StorageWriteError(
                f"cannot write presets: {exc}", self._path,
            ) from exc
        logger.info("Saved %d presets to %s", len(collection), self._path)

    def add_preset(
        self, collection: PresetCollection, base_task_count: int = 2,
    ) -> tuple[PresetCollection, str]:
        return add_preset(collection, base_task_count)
