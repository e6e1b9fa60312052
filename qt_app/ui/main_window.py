"""Main window for the rasp Qt shell."""
from __future__ import annotations
from PySide6.QtCore import Qt
from PySide6.QtGui import QCloseEvent
from PySide6.QtWidgets import QFileDialog, QFormLayout, QGroupBox, QHBoxLayout, QLabel, QLineEdit, QMainWindow, QMessageBox, QPushButton, QSpinBox, QVBoxLayout, QWidget
from qt_app.services.dialog_decisions import QtDecisionProvider
from qt_app.services.settings_service import SettingsService
from rasp.archiving import archive_project
from rasp.config import SettingsStore, load_settings
from rasp.errors import RaspError
from rasp.host import FileProjectHost
from rasp.models import ArchiveStatus
from rasp.versioning import project_display, resolve_project_info, version_display
from rasp.versioning.snapshot import SnapshotCreator

class MainWindow(QMainWindow):
    """Project panel: snapshot the live project and archive old versions."""

    def __init__(self, *, shell_settings: SettingsService | None=None, store: SettingsStore | None=None, project_path: str | None=None) -> None:
        super().__init__()
        self.setWindowTitle('rasp')
        self._shell = shell_settings or SettingsService()
        self._store = store or SettingsStore()
        self._decisions = QtDecisionProvider(self)
        self._host = FileProjectHost(project_path or self._shell.get_project_path() or None)
        geometry = self._shell.get_window_state()
        self.setGeometry(geometry['x'], geometry['y'], geometry['width'], geometry['height'])
        self._build_ui()
        self._wire_events()
        self._load_archive_settings()
        self.refresh_project_info()

    def _build_ui(self) -> None:
        central = QWidget(self)
        self.setCentralWidget(central)
        root_layout = QVBoxLayout(central)
        project_row = QHBoxLayout()
        project_row.addWidget(QLabel('Project file:'))
        self.project_edit = QLineEdit()
        self.project_edit.setPlaceholderText('Select project file')
        project_row.addWidget(self.project_edit, 1)
        self.open_btn = QPushButton('Open')
        project_row.addWidget(self.open_btn)
        root_layout.addLayout(project_row)
        info_box = QGroupBox('Project Info')
        info_layout = QFormLayout(info_box)
        self.project_name_label = QLabel('No project loaded')
        self.version_label = QLabel('-')
        self.location_label = QLabel('-')
        self.location_label.setTextInteractionFlags(Qt.TextInteractionFlag.TextSelectableByMouse)
        self.location_label.setWordWrap(True)
        info_layout.addRow('Project', self.project_name_label)
        info_layout.addRow('Version', self.version_label)
        info_layout.addRow('Location', self.location_label)
        root_layout.addWidget(info_box)
        self.snapshot_btn = QPushButton('Create New Version')
        root_layout.addWidget(self.snapshot_btn)
        archive_box = QGroupBox('Archive Old Versions')
        archive_layout = QFormLayout(archive_box)
        self.keep_spin = QSpinBox()
        self.keep_spin.setRange(0, 99)
        archive_layout.addRow('Versions to keep', self.keep_spin)
        dest_row = QHBoxLayout()
        self.dest_edit = QLineEdit()
        self.dest_edit.setPlaceholderText('Archive destination')
        dest_row.addWidget(self.dest_edit, 1)
        self.dest_browse_btn = QPushButton('Browse')
        dest_row.addWidget(self.dest_browse_btn)
        archive_layout.addRow('Destination', dest_row)
        self.archive_btn = QPushButton('Archive Now')
        archive_layout.addRow(self.archive_btn)
        root_layout.addWidget(archive_box)
        root_layout.addStretch(1)
        self.status_label = QLabel('Idle')
        self.status_label.setWordWrap(True)
        root_layout.addWidget(self.status_label)

    def _wire_events(self) -> None:
        self.open_btn.clicked.connect(self._select_project)
        self.project_edit.editingFinished.connect(self._on_project_edited)
        self.snapshot_btn.clicked.connect(self.create_snapshot)
        self.keep_spin.valueChanged.connect(self._on_keep_changed)
        self.dest_browse_btn.clicked.connect(self._select_destination)
        self.dest_edit.editingFinished.connect(self._on_destination_edited)
        self.archive_btn.clicked.connect(self.archive_now)

    def _load_archive_settings(self) -> None:
        settings = load_settings(self._store)
        self.keep_spin.blockSignals(True)
        self.keep_spin.setValue(max(0, settings.versions_to_keep))
        self.keep_spin.blockSignals(False)
        self.dest_edit.setText(settings.archive_destination)

    def _set_project_path(self, value: str) -> None:
        self._host = FileProjectHost(value or None)
        self._shell.set_project_path(value)
        self.refresh_project_info()

    def _select_project(self) -> None:
        selected, _ = QFileDialog.getOpenFileName(self, 'Select project file', self.project_edit.text() or '.')
        if selected:
            self._set_project_path(selected)

    def _on_project_edited(self) -> None:
        value = self.project_edit.text().strip()
        current = self._host.current_project_path()
        if value and value != str(current or ''):
            self._set_project_path(value)

    def _select_destination(self) -> None:
        selected = QFileDialog.getExistingDirectory(self, 'Select archive destination', self.dest_edit.text() or '.')
        if selected:
            self.dest_edit.setText(selected)
            self._on_destination_edited()

    def _on_destination_edited(self) -> None:
        self._store.set('archive_destination', self.dest_edit.text().strip())

    def _on_keep_changed(self, value: int) -> None:
        self._store.set('versions_to_keep', value)

    def refresh_project_info(self) -> None:
        """Recompute project labels from the host's current file."""
        live = self._host.current_project_path()
        self.project_edit.setText(str(live) if live else '')
        try:
            info = resolve_project_info(live, load_settings(self._store).name_format)
        except (RaspError, ValueError):
            info = None
        self.project_name_label.setText(project_display(info))
        self.version_label.setText(version_display(info) if info else '-')
        self.location_label.setText(str(info.parent_directory) if info else '-')
        has_project = info is not None
        self.snapshot_btn.setEnabled(has_project)
        self.archive_btn.setEnabled(has_project)

    def create_snapshot(self) -> None:
        self.status_label.setText('Creating version...')
        creator = SnapshotCreator(load_settings(self._store), self._host, self._decisions)
        result = creator.run()
        if result.ok:
            self._shell.set_project_path(str(self._host.current_project_path() or ''))
            self.status_label.setText(result.message)
        elif result.cancelled:
            self.status_label.setText('Snapshot cancelled')
        else:
            self.status_label.setText(result.message)
            QMessageBox.warning(self, 'Snapshot Failed', result.message)
        self.refresh_project_info()

    def archive_now(self) -> None:
        self._on_destination_edited()
        settings = load_settings(self._store)
        self.status_label.setText('Archiving...')
        _plan, result = archive_project(settings, self._host, self._decisions, keep_count=self.keep_spin.value())
        self.status_label.setText(result.message)
        if result.status in (ArchiveStatus.FAILED, ArchiveStatus.PARTIAL_FAILURE):
            QMessageBox.warning(self, 'Archive', result.message)
        elif result.status is ArchiveStatus.SUCCESS:
            QMessageBox.information(self, 'Archive Complete', result.message)
        self.refresh_project_info()

    def closeEvent(self, event: QCloseEvent) -> None:
        """Remember window geometry and the live project before closing."""
        geo = self.geometry()
        self._shell.set_window_state(x=geo.x(), y=geo.y(), width=geo.width(), height=geo.height())
        live = self._host.current_project_path()
        if live is not None:
            self._shell.set_project_path(str(live))
        super().closeEvent(event)
