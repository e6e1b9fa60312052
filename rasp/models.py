"""Data models for versioning and archiving operations."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

VersionId = int


class SnapshotConflictChoice(str, Enum):
    """Answer when the target snapshot folder already exists."""

    ALONGSIDE = "alongside"
    OVERWRITE = "overwrite"
    CANCEL = "cancel"


class ArchiveConflictChoice(str, Enum):
    """Answer when a version already exists at the archive destination."""

    SKIP = "skip"
    REPLACE = "replace"
    ABORT = "abort"


@dataclass(frozen=True, slots=True)
class ProjectInfo:
    """Location and version facts about the live project, computed per call."""

    full_path: Path
    directory: Path
    parent_directory: Path
    filename: str
    stem: str
    base_name: str
    extension: str
    current_version: VersionId | None = None

    def __post_init__(self) -> None:
        if not self.base_name:
            raise ValueError(f"empty base name for project {self.full_path}")
        if self.current_version is not None and self.current_version < 0:
            raise ValueError(f"negative version {self.current_version}")

    @property
    def is_versioned(self) -> bool:
        return self.current_version is not None


@dataclass(frozen=True, slots=True)
class VersionEntry:
    """One sibling folder recognised as a version of the project."""

    name: str
    version: VersionId
    path: Path


@dataclass(frozen=True, slots=True)
class ConflictDecision:
    """Resolved snapshot conflict: the choice plus the suffix for alongside."""

    choice: SnapshotConflictChoice
    suffix: str = ""


class SnapshotState(str, Enum):
    """States of one snapshot creation run."""

    RESOLVING = "resolving"
    CONFLICT_CHECK = "conflict_check"
    CREATING = "creating"
    COPYING = "copying"
    SAVING = "saving"
    VERIFYING = "verifying"
    DONE = "done"
    FAILED = "failed"
    CANCELLED = "cancelled"


@dataclass(slots=True)
class SnapshotResult:
    """Outcome of SnapshotCreator.run()."""

    state: SnapshotState = SnapshotState.RESOLVING
    folder_name: str = ""
    target_path: Path | None = None
    file_count: int = 0
    source_file_count: int = 0
    message: str = ""
    error: Exception | None = None
    state_history: list[SnapshotState] = field(
        default_factory=lambda: [SnapshotState.RESOLVING]
    )

    @property
    def ok(self) -> bool:
        return self.state is SnapshotState.DONE

    @property
    def cancelled(self) -> bool:
        return self.state is SnapshotState.CANCELLED


class ArchiveStatus(str, Enum):
    SUCCESS = "success"
    FAILED = "failed"
    PARTIAL_FAILURE = "partial_failure"
    ABORTED = "aborted"
    CANCELLED = "cancelled"
    NOTHING_TO_ARCHIVE = "nothing_to_archive"
    DRY_RUN = "dry_run"


@dataclass(slots=True)
class ArchivePlan:
    """Versions selected for archival, before anything is moved."""

    info: ProjectInfo | None
    current_version: VersionId
    keep_count: int
    all_versions: list[VersionEntry] = field(default_factory=list)
    entries: list[VersionEntry] = field(default_factory=list)
    message: str = ""

    @property
    def empty(self) -> bool:
        return not self.entries


@dataclass(slots=True)
class ArchiveResult:
    """Counters and per-item errors of one archive run."""

    total: int = 0
    archived_count: int = 0
    skipped_count: int = 0
    errors: list[str] = field(default_factory=list)
    status: ArchiveStatus = ArchiveStatus.SUCCESS
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.status in (
            ArchiveStatus.SUCCESS,
            ArchiveStatus.NOTHING_TO_ARCHIVE,
            ArchiveStatus.DRY_RUN,
        )
