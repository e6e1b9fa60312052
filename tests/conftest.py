"""Pytest configuration. Ensures project root is in sys.path for top-level modules (rasp_cli) and isolates settings."""
from pathlib import Path

import pytest


@pytest.fixture(scope="session", autouse=True)
def _add_project_root_to_path():
    root = Path(__file__).resolve().parent.parent
    import sys
    if str(root) not in sys.path:
        sys.path.insert(0, str(root))


@pytest.fixture(autouse=True)
def _isolated_settings(tmp_path: Path, monkeypatch):
    """Keep every test away from ~/.rasp and from RASP_* values of the shell."""
    import os

    for key in list(os.environ):
        if key.startswith("RASP_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("RASP_SETTINGS", str(tmp_path / "settings" / "settings.json"))


def make_project(parent: Path, folder: str = "Song", filename: str = "Song.rpp", extra: dict | None = None) -> Path:
    """Create parent/folder/filename plus extra relative files; return the project file."""
    project_dir = parent / folder
    project_dir.mkdir(parents=True, exist_ok=True)
    project_file = project_dir / filename
    project_file.write_text("<PROJECT>\n", encoding="utf-8")
    for rel, content in (extra or {}).items():
        path = project_dir / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    return project_file


@pytest.fixture
def project_factory():
    return make_project
