"""Versioning façade: name codec, sibling scanning and version resolution.

SnapshotCreator lives in rasp.versioning.snapshot and is not re-exported here
to keep this package importable from rasp.config.
"""

from .naming import NameFormat  # noqa: F401
from .resolver import (  # noqa: F401
    find_highest_version,
    next_version,
    project_display,
    resolve_project_info,
    version_display,
)
from .scanner import find_all_versions, list_siblings, match_version  # noqa: F401

__all__ = [
    "NameFormat",
    "list_siblings",
    "match_version",
    "find_all_versions",
    "find_highest_version",
    "next_version",
    "resolve_project_info",
    "version_display",
    "project_display",
]
