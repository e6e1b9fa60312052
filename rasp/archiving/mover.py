"""Move selected versions to the archive: copy, verify, then delete the source."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

from rasp.decisions import DecisionProvider
from rasp.errors import PartialArchiveFailure
from rasp.fs import FileOps, default_file_ops
from rasp.logging import get_logger
from rasp.models import ArchiveConflictChoice, ArchiveResult, ArchiveStatus, VersionEntry
from rasp.versioning.conflicts import decide_archive_conflict

_LOG = get_logger("archiving.mover")


def _reason(exc: BaseException | None) -> str:
    text = str(exc) if exc is not None else ""
    return text or "unknown error"


def paths_overlap(first: Path, second: Path) -> bool:
    """True when the resolved paths are equal or one lies inside the other."""
    a = Path(first).resolve()
    b = Path(second).resolve()
    return a == b or a in b.parents or b in a.parents


class ArchiveMover:
    """Archive entries into destination one by one, in ascending version order.

    A source folder is deleted only after its copy is confirmed present at the
    destination. Per-item failures are recorded and the run continues; an
    Abort decision stops the run and keeps what was archived so far.
    """

    def __init__(
        self,
        destination: Path,
        decisions: DecisionProvider,
        fs: FileOps | None = None,
    ) -> None:
        self.destination = Path(destination)
        self.decisions = decisions
        self.fs = fs or default_file_ops

    def run(self, entries: Iterable[VersionEntry]) -> ArchiveResult:
        ordered = sorted(entries, key=lambda v: v.version)
        result = ArchiveResult(total=len(ordered))
        if not ordered:
            result.status = ArchiveStatus.NOTHING_TO_ARCHIVE
            result.message = "No versions to archive"
            return result

        for entry in ordered:
            dest = self.destination / entry.name
            if paths_overlap(dest, entry.path):
                result.errors.append(f"Archive destination overlaps source: {entry.name}")
                _LOG.warning("rasp: %s overlaps its archive target %s; left in place", entry.name, dest)
                continue
            if self.fs.exists(dest):
                action = decide_archive_conflict(entry.name, self.decisions)
                if action is ArchiveConflictChoice.ABORT:
                    result.status = ArchiveStatus.ABORTED
                    break
                if action is ArchiveConflictChoice.SKIP:
                    _LOG.info("rasp: skipping %s (already in archive)", entry.name)
                    result.skipped_count += 1
                    continue
                try:
                    self.fs.delete_tree(dest)
                except OSError as exc:
                    result.errors.append(
                        f"Could not remove existing archive: {entry.name} - {_reason(exc)}"
                    )
                    continue
            self._archive_one(entry, dest, result)

        _finish(result)
        return result

    def _archive_one(self, entry: VersionEntry, dest: Path, result: ArchiveResult) -> None:
        source_count = self.fs.count_files(entry.path)
        try:
            self.fs.copy_tree(entry.path, dest)
        except OSError as exc:
            result.errors.append(f"Failed to archive: {entry.name} - {_reason(exc)}")
            _LOG.warning("rasp: copy of %s failed; source left in place", entry.name)
            return

        if not self.fs.dir_exists(dest):
            result.errors.append(f"Copy verification failed: {entry.name}")
            return
        copied_count = self.fs.count_files(dest)
        if copied_count < source_count:
            result.errors.append(
                f"Copy verification failed: {entry.name} "
                f"({copied_count} of {source_count} files at destination)"
            )
            return

        result.archived_count += 1
        try:
            self.fs.delete_tree(entry.path)
        except OSError as exc:
            result.errors.append(
                f"Archived but could not delete source: {entry.name} - {_reason(exc)}"
            )
            return
        _LOG.info("rasp: archived %s -> %s", entry.name, dest)


def _finish(result: ArchiveResult) -> None:
    """Set status and summary message from the collected counters."""
    if result.status is ArchiveStatus.ABORTED:
        result.message = (
            f"Archiving aborted. Archived {result.archived_count} version(s) before cancellation."
        )
        if result.errors:
            result.message += "\n" + "\n".join(result.errors)
        return
    if result.errors:
        result.status = ArchiveStatus.PARTIAL_FAILURE
        result.message = str(
            PartialArchiveFailure(
                result.archived_count, result.total, result.skipped_count, result.errors
            )
        )
        return
    result.status = ArchiveStatus.SUCCESS
    msg = f"Successfully archived {result.archived_count} version(s)"
    if result.skipped_count > 0:
        msg += f", skipped {result.skipped_count}"
    result.message = msg
