"""Persist Qt shell state (window geometry, last project) outside core settings."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from rasp.config import read_json_object, write_json

_WINDOW_DEFAULTS = {"x": 100, "y": 100, "width": 350, "height": 420}


class SettingsService:
    """Store shell preferences in ~/.rasp/qt_settings.json by default."""

    def __init__(self, settings_path: Path | None = None) -> None:
        default_path = Path.home() / ".rasp" / "qt_settings.json"
        self._path = settings_path or default_path

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> dict[str, Any]:
        return read_json_object(self._path)

    def save(self, payload: dict[str, Any]) -> None:
        try:
            write_json(self._path, payload)
        except OSError:
            # Shell state is best-effort; the window keeps working without it.
            return

    def get_project_path(self) -> str:
        data = self.load()
        path = data.get("project_path")
        return str(path) if isinstance(path, str) else ""

    def set_project_path(self, project_path: str) -> None:
        data = self.load()
        data["project_path"] = project_path
        self.save(data)

    def get_window_state(self) -> dict[str, int]:
        raw = self.load().get("window")
        state = dict(_WINDOW_DEFAULTS)
        if isinstance(raw, dict):
            for key in state:
                value = raw.get(key)
                if isinstance(value, int) and not isinstance(value, bool):
                    state[key] = value
        return state

    def set_window_state(self, *, x: int, y: int, width: int, height: int) -> None:
        data = self.load()
        data["window"] = {"x": x, "y": y, "width": width, "height": height}
        self.save(data)
