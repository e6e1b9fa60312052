"""Error taxonomy for snapshot and archive operations."""

from __future__ import annotations

from pathlib import Path


class RaspError(Exception):
    """Base exception for all rasp errors."""


class NoProjectLoaded(RaspError):
    def __init__(self, message: str = "No project loaded") -> None:
        super().__init__(message)


class DirectoryCreateFailed(RaspError):
    def __init__(self, path: Path, reason: str = "") -> None:
        self.path = Path(path)
        self.reason = reason
        msg = f"Could not create directory: {self.path}"
        if reason:
            msg += f" - {reason}"
        super().__init__(msg)


class CopyFailed(RaspError):
    """Some files could not be copied; carries per-file detail."""

    def __init__(self, copied: int, failures: list[str]) -> None:
        self.copied = copied
        self.failures = list(failures)
        lines = [f"Copied {copied} files, {len(self.failures)} errors"]
        lines.extend(f"  - {item}" for item in self.failures)
        super().__init__("\n".join(lines))


class ProjectSaveFailed(RaspError):
    def __init__(self, path: Path, reason: str = "") -> None:
        self.path = Path(path)
        msg = f"Host could not save project at {self.path}"
        if reason:
            msg += f" - {reason}"
        super().__init__(msg)


class VerificationFailed(RaspError):
    """Post-copy checks failed. The written target is left on disk."""

    def __init__(self, reasons: list[str], target_path: Path) -> None:
        self.reasons = list(reasons)
        self.target_path = Path(target_path)
        lines = ["Verification failed:"]
        lines.extend(f"  - {r}" for r in self.reasons)
        lines.append(
            f"Files were written to {self.target_path} and were NOT removed; "
            "inspect or delete that folder manually."
        )
        super().__init__("\n".join(lines))


class SuffixExhausted(RaspError):
    def __init__(self, folder_name: str) -> None:
        self.folder_name = folder_name
        super().__init__(f"All alongside suffixes _a.._z are taken for {folder_name}")


class OperationCancelled(RaspError):
    """User-chosen terminal outcome; reported, not treated as a failure."""

    def __init__(self, message: str = "Operation cancelled by user") -> None:
        super().__init__(message)


class ArchiveDestinationError(RaspError):
    pass


class PartialArchiveFailure(RaspError):
    def __init__(self, archived: int, total: int, skipped: int, errors: list[str]) -> None:
        self.archived = archived
        self.total = total
        self.skipped = skipped
        self.errors = list(errors)
        summary = f"Archived {archived}/{total} versions, skipped {skipped}, errors:"
        super().__init__("\n".join([summary, *self.errors]))
