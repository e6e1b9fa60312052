"""Settings snapshot and persistent settings store.

Values live in ~/.rasp/settings.json by default (RASP_SETTINGS overrides the
location). RASP_<KEY> environment variables take precedence over stored
values. Operations call load_settings() at their start and never cache it.
"""

from __future__ import annotations

import json
import os
from dataclasses import asdict, dataclass, fields, replace
from pathlib import Path
from typing import Any

from rasp.versioning.naming import NameFormat

SETTINGS_ENV = "RASP_SETTINGS"
ENV_PREFIX = "RASP_"


@dataclass(frozen=True, slots=True)
class RaspSettings:
    """Immutable settings snapshot for one operation."""

    version_prefix: str = "_v"
    version_digits: int = 3
    start_version: int = 1
    archive_destination: str = ""
    versions_to_keep: int = 3

    @property
    def name_format(self) -> NameFormat:
        return NameFormat(prefix=self.version_prefix, digits=self.version_digits)

    @property
    def archive_path(self) -> Path | None:
        dest = self.archive_destination.strip()
        return Path(dest).expanduser() if dest else None

    def validate(self) -> RaspSettings:
        """Raise ValueError for settings no operation can work with."""
        NameFormat(prefix=self.version_prefix, digits=self.version_digits)
        if self.start_version < 0:
            raise ValueError(f"start_version must be >= 0, got {self.start_version}")
        return self

    def with_overrides(self, **overrides: Any) -> RaspSettings:
        clean = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **clean) if clean else self


DEFAULTS = RaspSettings()
SETTING_KEYS: tuple[str, ...] = tuple(f.name for f in fields(RaspSettings))


def _coerce(key: str, value: Any) -> Any:
    """Convert a stored value to the type of its default; fall back to the default."""
    default = getattr(DEFAULTS, key)
    if isinstance(default, int):
        if isinstance(value, bool):
            return default
        if isinstance(value, int):
            return value
        try:
            return int(str(value).strip())
        except ValueError:
            return default
    if value is None:
        return default
    return str(value)


def read_json_object(path: Path) -> dict[str, Any]:
    """JSON object stored at path; a missing, unreadable or non-object file reads as {}."""
    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError):
        return {}
    return data if isinstance(data, dict) else {}


def write_json(path: Path, payload: dict[str, Any]) -> None:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(payload, ensure_ascii=True, indent=2), encoding="utf-8")


def default_settings_path() -> Path:
    raw = os.environ.get(SETTINGS_ENV, "").strip()
    if raw:
        return Path(raw).expanduser()
    return Path.home() / ".rasp" / "settings.json"


class SettingsStore:
    """Typed get/set over a JSON settings file."""

    def __init__(self, settings_path: Path | None = None) -> None:
        self._path = settings_path or default_settings_path()

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> dict[str, Any]:
        return read_json_object(self._path)

    def save(self, payload: dict[str, Any]) -> None:
        write_json(self._path, payload)

    def get(self, key: str) -> Any:
        if key not in SETTING_KEYS:
            raise KeyError(key)
        data = self.load()
        if key not in data or data[key] == "":
            return getattr(DEFAULTS, key)
        return _coerce(key, data[key])

    def set(self, key: str, value: Any) -> Any:
        """Persist one setting; returns the coerced value actually stored."""
        if key not in SETTING_KEYS:
            raise KeyError(key)
        coerced = _coerce(key, value)
        data = self.load()
        data[key] = coerced
        self.save(data)
        return coerced

    def reset(self) -> None:
        if self._path.exists():
            self._path.unlink()

    def snapshot(self) -> RaspSettings:
        data = self.load()
        values = {
            key: _coerce(key, data[key])
            for key in SETTING_KEYS
            if key in data and data[key] != ""
        }
        return replace(DEFAULTS, **values)


def _env_overrides() -> dict[str, Any]:
    out: dict[str, Any] = {}
    for key in SETTING_KEYS:
        raw = os.environ.get(ENV_PREFIX + key.upper())
        if raw is None or raw.strip() == "":
            continue
        out[key] = _coerce(key, raw.strip())
    return out


def load_settings(store: SettingsStore | None = None) -> RaspSettings:
    """Read a fresh settings snapshot: defaults, then stored values, then env."""
    store = store or SettingsStore()
    settings = store.snapshot()
    return settings.with_overrides(**_env_overrides())


def settings_to_dict(settings: RaspSettings) -> dict[str, Any]:
    return asdict(settings)
