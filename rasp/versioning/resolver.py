"""Project info resolution and next-version arithmetic."""

from __future__ import annotations

from pathlib import Path

from rasp.errors import NoProjectLoaded
from rasp.models import ProjectInfo, VersionEntry, VersionId

from .naming import NameFormat
from .scanner import find_all_versions


def resolve_project_info(live_path: Path | str | None, fmt: NameFormat) -> ProjectInfo:
    """Build ProjectInfo from the live project file path.

    Raises NoProjectLoaded when no path is available. Version folders are
    created next to the project's directory (in its parent); a project
    directory without a parent keeps its versions alongside itself.
    """
    if live_path is None or str(live_path).strip() == "":
        raise NoProjectLoaded()
    raw = Path(live_path).expanduser()
    directory = raw.parent.resolve()
    full_path = directory / raw.name
    parent_directory = directory.parent
    if parent_directory == directory:
        parent_directory = directory
    stem = full_path.stem
    base_name, current_version = fmt.split(stem)
    if not base_name:
        # A name that is nothing but a suffix ("_v001") has no base to strip to.
        base_name, current_version = stem, None
    return ProjectInfo(
        full_path=full_path,
        directory=directory,
        parent_directory=parent_directory,
        filename=full_path.name,
        stem=stem,
        base_name=base_name,
        extension=full_path.suffix,
        current_version=current_version,
    )


def find_highest_version(parent: Path | str | None, base_name: str, fmt: NameFormat) -> VersionId:
    """Highest version among strictly matching siblings, 0 if there are none.

    The unsuffixed folder is listed as version 0 and therefore never raises
    the result above 0; only positive encoded suffixes count as "found".
    """
    versions = find_all_versions(parent, base_name, fmt)
    return max((v.version for v in versions), default=0)


def next_version(info: ProjectInfo, fmt: NameFormat, start_version: int = 1) -> VersionId:
    """Version number the next snapshot gets.

    A versioned project always gets current + 1, whatever exists on disk, so
    numbers may be skipped but never reused. An unversioned project continues
    after the highest sibling version, or starts at start_version.
    """
    if info.current_version is not None:
        return info.current_version + 1
    highest = find_highest_version(info.parent_directory, info.base_name, fmt)
    if highest > 0:
        return highest + 1
    return start_version


def list_project_versions(info: ProjectInfo, fmt: NameFormat) -> list[VersionEntry]:
    return find_all_versions(info.parent_directory, info.base_name, fmt)


def version_display(info: ProjectInfo | None) -> str:
    if info is None:
        return "No project loaded"
    if info.current_version is not None:
        return f"v{info.current_version}"
    return "Not versioned"


def project_display(info: ProjectInfo | None) -> str:
    if info is None:
        return "No project loaded"
    return info.base_name
