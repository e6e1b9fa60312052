"""Archiving façade: selection, mover and the full archive run."""

from .mover import ArchiveMover  # noqa: F401
from .selector import plan_archive, versions_to_archive  # noqa: F401
from .workflow import archive_project, ensure_destination  # noqa: F401

__all__ = [
    "ArchiveMover",
    "plan_archive",
    "versions_to_archive",
    "archive_project",
    "ensure_destination",
]
