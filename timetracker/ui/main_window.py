"""Main application window for TimeTracker.

Layout (top → bottom):
    - Preset selector
    - Task list (double-click a row to start/stop it)
    - Action buttons
    - Session log
"""

from __future__ import annotations

from PyQt6.QtCore import Qt, QTimer
from PyQt6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QComboBox,
    QListWidget, QListWidgetItem, QPushButton, QPlainTextEdit,
    QMessageBox, QLabel,
)

from ..errors import StorageError
from ..presets.store import PresetCollection, PresetStore
from ..settings import Settings, load_settings, save_settings
from ..timer.session import TimerSession


class MainWindow(QMainWindow):
    """Preset selector, task timers and the in-memory session log."""

    def __init__(
        self,
        store: PresetStore | None = None,
        session: TimerSession | None = None,
        settings: Settings | None = None,
    ) -> None:
        super().__init__()
        self._settings = settings or load_settings()
        self._store = store or PresetStore()
        self._session = session or TimerSession(
            self, time_format=self._settings.time_format,
        )
        self._presets: PresetCollection = {}
        self._catalogue_loaded = False

        self.setWindowTitle("Time Tracker")
        self.resize(self._settings.window_width, self._settings.window_height)

        self._build_ui()
        self._connect_signals()

        # display-only refresh so the running row can show live time
        self._refresh_timer = QTimer(self)
        self._refresh_timer.setInterval(self._settings.refresh_interval_ms)
        self._refresh_timer.timeout.connect(self._refresh_tasks)

        self._load_presets()

    # ── build ─────────────────────────────────────────────────────────

    def _build_ui(self) -> None:
        central = QWidget(self)
        layout = QVBoxLayout(central)
        layout.setContentsMargins(16, 16, 16, 16)
        layout.setSpacing(8)

        self._preset_combo = QComboBox(central)
        layout.addWidget(self._preset_combo)

        self._task_list = QListWidget(central)
        layout.addWidget(self._task_list, stretch=3)

        row = QHBoxLayout()
        self._add_task_btn = QPushButton("Ajouter un compteur", central)
        self._remove_task_btn = QPushButton("Supprimer", central)
        row.addWidget(self._add_task_btn)
        row.addWidget(self._remove_task_btn)
        layout.addLayout(row)

        self._reset_btn = QPushButton("Remise à zéro", central)
        self._correct_btn = QPushButton("Correction du temps", central)
        self._new_preset_btn = QPushButton("Créer un nouveau métier", central)
        for btn in (self._reset_btn, self._correct_btn, self._new_preset_btn):
            layout.addWidget(btn)

        layout.addWidget(QLabel("Journal", central))
        self._log_view = QPlainTextEdit(central)
        self._log_view.setReadOnly(True)
        layout.addWidget(self._log_view, stretch=1)

        self.setCentralWidget(central)

    def _connect_signals(self) -> None:
        self._preset_combo.textActivated.connect(self._on_preset_selected)
        self._task_list.itemDoubleClicked.connect(self._on_task_activated)
        self._add_task_btn.clicked.connect(lambda: self._session.add_task())
        self._remove_task_btn.clicked.connect(self._on_remove_clicked)
        self._reset_btn.clicked.connect(self._session.reset_all)
        self._correct_btn.clicked.connect(lambda: self._session.correct())
        self._new_preset_btn.clicked.connect(self._on_new_preset)

        self._session.timers_changed.connect(self._refresh_tasks)
        self._session.running_changed.connect(self._on_running_changed)
        self._session.log_appended.connect(self._log_view.appendPlainText)
        self._session.timers_changed.connect(self._sync_log_view)

    # ── presets ───────────────────────────────────────────────────────

    def _load_presets(self) -> None:
        try:
            self._presets = self._store.load()
        except StorageError as exc:
            self._report_storage_error("Chargement des métiers impossible", exc)
            self._new_preset_btn.setEnabled(False)
            return
        self._catalogue_loaded = True
        self._populate_presets()

        selected = self._settings.last_preset
        if selected not in self._presets:
            selected = next(iter(self._presets), None)
        if selected is not None:
            self._preset_combo.setCurrentText(selected)
            self._session.apply_preset(self._presets[selected])

    def _populate_presets(self) -> None:
        self._preset_combo.blockSignals(True)
        self._preset_combo.clear()
        self._preset_combo.addItems(list(self._presets))
        self._preset_combo.blockSignals(False)

    def _on_preset_selected(self, name: str) -> None:
        if name not in self._presets:
            return
        self._session.apply_preset(self._presets[name])
        self._settings.last_preset = name
        save_settings(self._settings)

    def _on_new_preset(self) -> None:
        # never overwrite a catalogue that failed to load
        if not self._catalogue_loaded:
            return
        updated, name = self._store.add_preset(
            self._presets, self._settings.base_task_count,
        )
        try:
            self._store.save(updated)
        except StorageError as exc:
            self._report_storage_error("Sauvegarde des métiers impossible", exc)
            return
        self._presets = updated
        self._populate_presets()
        self._preset_combo.setCurrentText(name)

    # ── tasks ─────────────────────────────────────────────────────────

    def _on_task_activated(self, item: QListWidgetItem) -> None:
        self._session.toggle(item.data(Qt.ItemDataRole.UserRole))

    def _on_remove_clicked(self) -> None:
        item = self._task_list.currentItem()
        if item is not None:
            self._session.remove_task(item.data(Qt.ItemDataRole.UserRole))

    def _on_running_changed(self, label: str | None) -> None:
        if label is None:
            self._refresh_timer.stop()
        else:
            self._refresh_timer.start()
        self._refresh_tasks()

    def _refresh_tasks(self) -> None:
        labels = self._session.labels
        running = self._session.running_task
        if labels != self._row_labels():
            current = self._task_list.currentRow()
            self._task_list.clear()
            for label in labels:
                item = QListWidgetItem()
                item.setData(Qt.ItemDataRole.UserRole, label)
                self._task_list.addItem(item)
            if 0 <= current < self._task_list.count():
                self._task_list.setCurrentRow(current)

        for row, label in enumerate(labels):
            text = self._session.format_elapsed(label)
            if label == running:
                live = self._session.in_progress_ms() // 1000
                text = f"▶ {text} (+{live} sec)"
            self._task_list.item(row).setText(text)

    def _row_labels(self) -> list[str]:
        return [
            self._task_list.item(i).data(Qt.ItemDataRole.UserRole)
            for i in range(self._task_list.count())
        ]

    def _sync_log_view(self) -> None:
        # reset_all clears the log without appending
        if not self._session.log and self._log_view.toPlainText():
            self._log_view.clear()

    # ── errors / lifecycle ────────────────────────────────────────────

    def _report_storage_error(self, title: str, exc: StorageError) -> None:
        QMessageBox.warning(self, title, f"{exc}\n\n{exc.path}")

    def closeEvent(self, event) -> None:  # noqa: N802
        self._settings.window_width = self.width()
        self._settings.window_height = self.height()
        save_settings(self._settings)
        super().closeEvent(event)
