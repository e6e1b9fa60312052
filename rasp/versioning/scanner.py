"""Sibling directory scanning and the shared version-listing routine."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterator

from rasp.logging import get_logger
from rasp.models import VersionEntry

from .naming import NameFormat

_LOG = get_logger("versioning.scanner")


def list_siblings(parent: Path | str | None) -> Iterator[str]:
    """Yield names of immediate subdirectories of parent.

    A missing, unreadable or non-directory parent yields nothing: a project
    without prior versions has zero siblings, which is not an error.
    """
    if not parent:
        return
    try:
        with os.scandir(parent) as it:
            for entry in it:
                try:
                    if entry.is_dir():
                        yield entry.name
                except OSError:
                    continue
    except (FileNotFoundError, NotADirectoryError, PermissionError) as exc:
        _LOG.debug("rasp: cannot list %s (%s); treating as empty", parent, exc)
        return


def match_version(name: str, base_name: str, fmt: NameFormat) -> int | None:
    """Version of a sibling folder name, or None if it is not a version of base_name.

    `base_name` alone is version 0. Otherwise the name must be base_name followed
    by exactly one canonical encoded suffix: `Song_v001` matches `Song`, while
    `Song_extra_v001`, `Song_v1` (width 3) and `Song_v001x` do not.
    """
    if name == base_name:
        return 0
    if not name.startswith(base_name):
        return None
    return fmt.matches_exactly(name[len(base_name):])


def find_all_versions(
    parent: Path | str | None, base_name: str, fmt: NameFormat
) -> list[VersionEntry]:
    """All version folders of base_name under parent, sorted by version ascending."""
    if not parent:
        return []
    parent = Path(parent)
    versions: list[VersionEntry] = []
    for name in list_siblings(parent):
        version = match_version(name, base_name, fmt)
        if version is None:
            continue
        versions.append(VersionEntry(name=name, version=version, path=parent / name))
    versions.sort(key=lambda v: v.version)
    return versions
