"""Host application collaborators: live project accessor and save-as primitive."""

from __future__ import annotations

import shutil
from pathlib import Path
from typing import Protocol, runtime_checkable

from rasp.logging import get_logger

_LOG = get_logger("host")


@runtime_checkable
class ProjectHost(Protocol):
    """What the core needs from the application that owns the project."""

    def current_project_path(self) -> Path | None:
        """Path of the live project file, or None when nothing is loaded."""
        ...

    def save_project_as(self, new_path: Path) -> bool:
        """Persist the live project at new_path. Returns False on failure."""
        ...


class FileProjectHost:
    """Standalone host: the live project is a file on disk.

    save_project_as writes the current file's bytes to new_path and makes it
    the live project, as a host application's Save As does.
    """

    def __init__(self, project_path: Path | str | None) -> None:
        self._path = Path(project_path).expanduser() if project_path else None

    def current_project_path(self) -> Path | None:
        if self._path is None:
            return None
        return self._path

    def save_project_as(self, new_path: Path) -> bool:
        if self._path is None or not self._path.is_file():
            _LOG.error("rasp: live project file missing: %s", self._path)
            return False
        new_path = Path(new_path)
        try:
            new_path.parent.mkdir(parents=True, exist_ok=True)
            shutil.copy2(self._path, new_path)
        except OSError as exc:
            _LOG.error("rasp: save as %s failed: %s", new_path, exc)
            return False
        self._path = new_path
        return True
