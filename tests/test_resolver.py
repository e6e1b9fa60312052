"""Tests for project info resolution and next-version arithmetic."""

from pathlib import Path

import pytest

from rasp.errors import NoProjectLoaded
from rasp.versioning.naming import NameFormat
from rasp.versioning.resolver import (
    find_highest_version,
    next_version,
    project_display,
    resolve_project_info,
    version_display,
)

FMT = NameFormat()


@pytest.mark.parametrize("value", [None, "", "   "])
def test_no_project_loaded(value) -> None:
    with pytest.raises(NoProjectLoaded):
        resolve_project_info(value, FMT)


def test_unversioned_project(tmp_path: Path, project_factory) -> None:
    project = project_factory(tmp_path)
    info = resolve_project_info(project, FMT)
    assert info.base_name == "Song"
    assert info.current_version is None
    assert not info.is_versioned
    assert info.extension == ".rpp"
    assert info.filename == "Song.rpp"
    assert info.directory == (tmp_path / "Song").resolve()
    assert info.parent_directory == tmp_path.resolve()


def test_versioned_project(tmp_path: Path, project_factory) -> None:
    project = project_factory(tmp_path, "Song_v004", "Song_v004.rpp")
    info = resolve_project_info(project, FMT)
    assert info.base_name == "Song"
    assert info.current_version == 4
    assert info.stem == "Song_v004"


def test_name_that_is_only_a_suffix_stays_unversioned(tmp_path: Path, project_factory) -> None:
    project = project_factory(tmp_path, "x", "_v001.rpp")
    info = resolve_project_info(project, FMT)
    assert info.base_name == "_v001"
    assert info.current_version is None


def test_project_at_filesystem_root_keeps_versions_alongside() -> None:
    info = resolve_project_info(Path("/Song.rpp"), FMT)
    assert info.directory == Path("/")
    assert info.parent_directory == Path("/")


def test_next_version_continues_after_highest_sibling(tmp_path: Path, project_factory) -> None:
    project = project_factory(tmp_path)
    (tmp_path / "Song_v001").mkdir()
    info = resolve_project_info(project, FMT)
    assert next_version(info, FMT) == 2
    assert FMT.folder_name(info.base_name, next_version(info, FMT)) == "Song_v002"


def test_next_version_starts_at_start_version(tmp_path: Path, project_factory) -> None:
    project = project_factory(tmp_path)
    info = resolve_project_info(project, FMT)
    assert next_version(info, FMT) == 1
    assert next_version(info, FMT, start_version=5) == 5


def test_next_version_of_versioned_project_ignores_disk(tmp_path: Path, project_factory) -> None:
    project = project_factory(tmp_path, "Song_v002", "Song_v002.rpp")
    (tmp_path / "Song_v007").mkdir()
    info = resolve_project_info(project, FMT)
    assert next_version(info, FMT) == 3


def test_highest_version_ignores_original_folder(tmp_path: Path) -> None:
    (tmp_path / "Song").mkdir()
    assert find_highest_version(tmp_path, "Song", FMT) == 0
    (tmp_path / "Song_v009").mkdir()
    assert find_highest_version(tmp_path, "Song", FMT) == 9


def test_display_helpers(tmp_path: Path, project_factory) -> None:
    assert version_display(None) == "No project loaded"
    assert project_display(None) == "No project loaded"
    info = resolve_project_info(project_factory(tmp_path, "Song_v003", "Song_v003.rpp"), FMT)
    assert version_display(info) == "v3"
    assert project_display(info) == "Song"
    plain = resolve_project_info(project_factory(tmp_path), FMT)
    assert version_display(plain) == "Not versioned"
