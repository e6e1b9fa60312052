"""Snapshot creation: materialize the next version of the live project.

Flow: resolving -> conflict check -> creating -> copying -> saving ->
verifying -> done | failed (or cancelled at the conflict decision).
Every failure is returned in SnapshotResult; nothing is retried and a
partially written target is never deleted automatically.
"""

from __future__ import annotations

from pathlib import Path

from rasp.config import RaspSettings
from rasp.decisions import DecisionProvider
from rasp.errors import (
    CopyFailed,
    DirectoryCreateFailed,
    OperationCancelled,
    ProjectSaveFailed,
    RaspError,
    VerificationFailed,
)
from rasp.fs import FileOps, default_file_ops
from rasp.host import ProjectHost
from rasp.logging import get_logger
from rasp.models import ProjectInfo, SnapshotConflictChoice, SnapshotResult, SnapshotState

from .conflicts import decide_snapshot_conflict
from .resolver import next_version, resolve_project_info

_LOG = get_logger("versioning.snapshot")


class SnapshotCreator:
    """One snapshot run against the host's live project."""

    def __init__(
        self,
        settings: RaspSettings,
        host: ProjectHost,
        decisions: DecisionProvider,
        fs: FileOps | None = None,
    ) -> None:
        self.settings = settings
        self.host = host
        self.decisions = decisions
        self.fs = fs or default_file_ops
        self.result = SnapshotResult()

    def _enter(self, state: SnapshotState) -> None:
        _LOG.debug("rasp: snapshot %s -> %s", self.result.state.value, state.value)
        self.result.state = state
        self.result.state_history.append(state)

    def run(self) -> SnapshotResult:
        try:
            self._run()
        except OperationCancelled as exc:
            self.result.error = exc
            self.result.message = str(exc)
            self._enter(SnapshotState.CANCELLED)
            _LOG.info("rasp: %s", exc)
        except (RaspError, OSError, ValueError) as exc:
            failed_in = self.result.state.value
            self.result.error = exc
            self.result.message = f"Snapshot failed during {failed_in}: {exc}"
            self._enter(SnapshotState.FAILED)
            _LOG.error("rasp: %s", self.result.message)
        return self.result

    def _run(self) -> None:
        fmt = self.settings.name_format
        info = resolve_project_info(self.host.current_project_path(), fmt)

        version = next_version(info, fmt, self.settings.start_version)
        folder_name = fmt.folder_name(info.base_name, version)
        target = info.parent_directory / folder_name

        self._enter(SnapshotState.CONFLICT_CHECK)
        if self.fs.exists(target):
            decision = decide_snapshot_conflict(target, self.decisions, self.fs)
            if decision.choice is SnapshotConflictChoice.CANCEL:
                raise OperationCancelled(f"Snapshot cancelled: {folder_name} already exists")
            if decision.choice is SnapshotConflictChoice.ALONGSIDE:
                folder_name += decision.suffix
                target = info.parent_directory / folder_name
            else:
                _LOG.warning(
                    "rasp: overwriting %s in place; files absent from the project are kept",
                    target,
                )
        self.result.folder_name = folder_name
        self.result.target_path = target

        self._enter(SnapshotState.CREATING)
        try:
            self.fs.create_directory(target)
        except OSError as exc:
            raise DirectoryCreateFailed(target, str(exc)) from exc

        self._enter(SnapshotState.COPYING)
        source_count = self._copy_project_files(info, target)
        self.result.source_file_count = source_count

        self._enter(SnapshotState.SAVING)
        project_file = target / f"{folder_name}{info.extension}"
        try:
            saved = self.host.save_project_as(project_file)
        except OSError as exc:
            raise ProjectSaveFailed(project_file, str(exc)) from exc
        if not saved:
            raise ProjectSaveFailed(project_file)

        self._enter(SnapshotState.VERIFYING)
        file_count = self._verify(target, project_file, source_count)

        self.result.file_count = file_count
        self.result.message = f"Version created: {folder_name} ({file_count} files)"
        self._enter(SnapshotState.DONE)
        _LOG.info("rasp: %s", self.result.message)

    def _copy_project_files(self, info: ProjectInfo, target: Path) -> int:
        """Copy the project tree (minus the live project file) into target.

        Returns the source file count taken before copying. The target is
        excluded from the walk since it may sit inside the project directory.
        """
        skip = (target,)
        files = list(self.fs.iter_files(info.directory, skip_dirs=skip))
        copied = 0
        failures: list[str] = []
        for full_path, rel_path in files:
            if full_path == info.full_path:
                continue
            dest = target / rel_path
            try:
                if rel_path.parent != Path("."):
                    self.fs.create_directory(dest.parent)
                self.fs.copy_file(full_path, dest)
                copied += 1
            except OSError as exc:
                failures.append(f"{rel_path}: {exc}")
        _LOG.debug("rasp: copied %s of %s files into %s", copied, len(files), target)
        if failures:
            raise CopyFailed(copied, failures)
        return len(files)

    def _verify(self, target: Path, project_file: Path, source_count: int) -> int:
        reasons: list[str] = []
        if not self.fs.dir_exists(target):
            reasons.append(f"target directory missing: {target}")
        if not self.fs.file_exists(project_file):
            reasons.append(f"project file missing: {project_file}")
        found = self.fs.count_files(target)
        if found < source_count:
            reasons.append(
                f"file count mismatch: {found} files in target, "
                f"expected at least {source_count} from source"
            )
        if reasons:
            raise VerificationFailed(reasons, target)
        return found
