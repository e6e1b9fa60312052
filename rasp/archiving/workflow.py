"""Full archive run: destination check, selection, confirmation, move."""

from __future__ import annotations

from pathlib import Path

from rasp.config import RaspSettings
from rasp.decisions import DecisionProvider
from rasp.errors import ArchiveDestinationError, RaspError
from rasp.fs import FileOps, default_file_ops
from rasp.host import ProjectHost
from rasp.logging import get_logger
from rasp.models import ArchivePlan, ArchiveResult, ArchiveStatus

from .mover import ArchiveMover
from .selector import plan_archive

_LOG = get_logger("archiving.workflow")


def ensure_destination(destination: Path | None, fs: FileOps = default_file_ops) -> Path:
    """Return the archive destination, creating it if missing."""
    if destination is None or str(destination).strip() == "":
        raise ArchiveDestinationError("Archive destination not set")
    destination = Path(destination)
    if fs.dir_exists(destination):
        return destination
    if fs.exists(destination):
        raise ArchiveDestinationError(f"Archive destination is not a directory: {destination}")
    try:
        fs.create_directory(destination)
    except OSError as exc:
        raise ArchiveDestinationError(
            f"Could not create archive destination: {destination} - {exc}"
        ) from exc
    return destination


def _check_not_version_folder(destination: Path, parent_directory: Path) -> None:
    """Reject a destination that is the folder the versions live in."""
    if destination.resolve() == Path(parent_directory).resolve():
        raise ArchiveDestinationError(
            f"Archive destination is the folder holding the versions: {destination}"
        )


def archive_project(
    settings: RaspSettings,
    host: ProjectHost,
    decisions: DecisionProvider,
    *,
    keep_count: int | None = None,
    fs: FileOps | None = None,
    dry_run: bool = False,
) -> tuple[ArchivePlan | None, ArchiveResult]:
    """Archive old versions of the live project. Never raises RaspError.

    Returns the computed plan (None if the project could not be resolved) and
    the run result. A declined confirmation yields status CANCELLED.
    """
    fs = fs or default_file_ops
    plan: ArchivePlan | None = None
    try:
        destination = settings.archive_path
        if not dry_run:
            destination = ensure_destination(destination, fs)
        plan = plan_archive(settings, host, keep_count)
        if destination is not None and plan.info is not None:
            _check_not_version_folder(Path(destination), plan.info.parent_directory)
    except (RaspError, OSError, ValueError) as exc:
        return plan, ArchiveResult(status=ArchiveStatus.FAILED, errors=[str(exc)], message=str(exc))

    if plan.empty:
        return plan, ArchiveResult(status=ArchiveStatus.NOTHING_TO_ARCHIVE, message=plan.message)
    if dry_run:
        names = ", ".join(v.name for v in plan.entries)
        return plan, ArchiveResult(
            total=len(plan.entries),
            status=ArchiveStatus.DRY_RUN,
            message=f"Dry run: would archive {len(plan.entries)} version(s): {names}",
        )

    if not decisions.confirm_archive(plan.entries, destination):
        _LOG.info("rasp: archiving cancelled by user")
        return plan, ArchiveResult(
            total=len(plan.entries),
            status=ArchiveStatus.CANCELLED,
            message="Archiving cancelled by user",
        )

    mover = ArchiveMover(destination, decisions, fs)
    return plan, mover.run(plan.entries)
