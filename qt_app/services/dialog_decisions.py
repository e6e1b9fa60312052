"""Message-box decision provider for the Qt shell."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

from PySide6.QtWidgets import QMessageBox, QWidget

from rasp.models import ArchiveConflictChoice, SnapshotConflictChoice, VersionEntry


class QtDecisionProvider:
    """Blocking QMessageBox prompts for every decision point."""

    def __init__(self, parent: QWidget | None = None) -> None:
        self._parent = parent

    def choose_snapshot_conflict(self, target_path: Path) -> SnapshotConflictChoice:
        box = QMessageBox(self._parent)
        box.setWindowTitle("Version Already Exists")
        box.setText(f'"{Path(target_path).name}" already exists.')
        alongside = box.addButton("Create alongside", QMessageBox.ButtonRole.AcceptRole)
        overwrite = box.addButton("Overwrite", QMessageBox.ButtonRole.DestructiveRole)
        box.addButton(QMessageBox.StandardButton.Cancel)
        box.exec()
        clicked = box.clickedButton()
        if clicked is alongside:
            return SnapshotConflictChoice.ALONGSIDE
        if clicked is overwrite:
            return SnapshotConflictChoice.OVERWRITE
        return SnapshotConflictChoice.CANCEL

    def choose_archive_conflict(self, name: str) -> ArchiveConflictChoice:
        message = (
            f'"{name}" already exists in archive.\n\n'
            "• Yes = Skip this version\n"
            "• No = Replace existing archive\n"
            "• Cancel = Abort entire operation"
        )
        buttons = (
            QMessageBox.StandardButton.Yes
            | QMessageBox.StandardButton.No
            | QMessageBox.StandardButton.Cancel
        )
        answer = QMessageBox.question(self._parent, "Version Already Exists", message, buttons)
        if answer == QMessageBox.StandardButton.Yes:
            return ArchiveConflictChoice.SKIP
        if answer == QMessageBox.StandardButton.No:
            return ArchiveConflictChoice.REPLACE
        return ArchiveConflictChoice.ABORT

    def confirm_archive(self, entries: Sequence[VersionEntry], destination: Path) -> bool:
        version_list = "\n".join(
            f"  • {v.name} {'(v0 - original)' if v.version == 0 else ''}".rstrip() for v in entries
        )
        message = (
            "Archive and REMOVE the following versions from source?\n\n"
            f"{version_list}\n\nDestination: {destination}\n\nThis action cannot be undone."
        )
        answer = QMessageBox.question(
            self._parent,
            "Archive Confirmation",
            message,
            QMessageBox.StandardButton.Yes | QMessageBox.StandardButton.No,
        )
        return answer == QMessageBox.StandardButton.Yes
