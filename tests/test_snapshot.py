"""Tests for SnapshotCreator: copy, save-as, verification and conflict handling."""

from pathlib import Path

from rasp.config import RaspSettings
from rasp.decisions import PolicyDecisionProvider
from rasp.errors import CopyFailed, DirectoryCreateFailed, NoProjectLoaded, ProjectSaveFailed, VerificationFailed
from rasp.fs import FileOps
from rasp.host import FileProjectHost
from rasp.models import SnapshotConflictChoice, SnapshotState
from rasp.versioning.snapshot import SnapshotCreator

EXTRA = {"audio/kick.wav": "kick", "audio/stems/bass.wav": "bass", "notes.txt": "mix notes"}


def _run(host, policy=None, fs=None, settings=None):
    creator = SnapshotCreator(settings or RaspSettings(), host, policy or PolicyDecisionProvider(), fs)
    return creator.run()


def test_first_snapshot_copies_tree_and_saves_project(tmp_path: Path, project_factory) -> None:
    project = project_factory(tmp_path, extra=EXTRA)
    host = FileProjectHost(project)
    result = _run(host)

    target = tmp_path.resolve() / "Song_v001"
    assert result.ok
    assert result.folder_name == "Song_v001"
    assert result.target_path == target
    assert (target / "Song_v001.rpp").is_file()
    assert (target / "audio" / "stems" / "bass.wav").read_text(encoding="utf-8") == "bass"
    assert (target / "notes.txt").is_file()
    assert not (target / "Song.rpp").exists()
    assert result.source_file_count == 4
    assert result.file_count == 4
    assert result.message == "Version created: Song_v001 (4 files)"
    assert host.current_project_path() == target / "Song_v001.rpp"
    assert project.is_file()
    assert result.state_history == [
        SnapshotState.RESOLVING,
        SnapshotState.CONFLICT_CHECK,
        SnapshotState.CREATING,
        SnapshotState.COPYING,
        SnapshotState.SAVING,
        SnapshotState.VERIFYING,
        SnapshotState.DONE,
    ]


def test_snapshot_from_versioned_project_increments(tmp_path: Path, project_factory) -> None:
    host = FileProjectHost(project_factory(tmp_path))
    assert _run(host).folder_name == "Song_v001"
    second = _run(host)
    assert second.ok
    assert second.folder_name == "Song_v002"
    assert (tmp_path / "Song_v002" / "Song_v002.rpp").is_file()
    # The live project file is replaced by the newly saved one, not copied.
    assert not (tmp_path / "Song_v002" / "Song_v001.rpp").exists()


def test_existing_original_sibling_continues_numbering(tmp_path: Path, project_factory) -> None:
    host = FileProjectHost(project_factory(tmp_path))
    (tmp_path / "Song_v001").mkdir()
    policy = PolicyDecisionProvider()
    result = _run(host, policy)
    assert result.ok
    assert result.folder_name == "Song_v002"
    assert policy.asked == []


def test_conflict_cancel_leaves_everything_untouched(tmp_path: Path, project_factory) -> None:
    project = project_factory(tmp_path, "Song_v001", "Song_v001.rpp")
    (tmp_path / "Song_v002").mkdir()
    host = FileProjectHost(project)
    policy = PolicyDecisionProvider(snapshot_conflict=SnapshotConflictChoice.CANCEL)
    result = _run(host, policy)
    assert result.cancelled
    assert not result.ok
    assert policy.asked == ["snapshot:Song_v002"]
    assert list((tmp_path / "Song_v002").iterdir()) == []
    assert not (tmp_path / "Song_v002_a").exists()
    assert host.current_project_path() == project


def test_conflict_alongside_uses_next_free_suffix(tmp_path: Path, project_factory) -> None:
    project = project_factory(tmp_path, "Song_v001", "Song_v001.rpp")
    (tmp_path / "Song_v002").mkdir()
    (tmp_path / "Song_v002_a").mkdir()
    host = FileProjectHost(project)
    result = _run(host, PolicyDecisionProvider(snapshot_conflict=SnapshotConflictChoice.ALONGSIDE))
    assert result.ok
    assert result.folder_name == "Song_v002_b"
    assert (tmp_path / "Song_v002_b" / "Song_v002_b.rpp").is_file()


def test_conflict_overwrite_keeps_stale_files(tmp_path: Path, project_factory) -> None:
    project = project_factory(tmp_path, "Song_v001", "Song_v001.rpp", extra={"notes.txt": "new"})
    stale_dir = tmp_path / "Song_v002"
    stale_dir.mkdir()
    (stale_dir / "notes.txt").write_text("old", encoding="utf-8")
    (stale_dir / "stale.wav").write_text("stale", encoding="utf-8")
    result = _run(FileProjectHost(project), PolicyDecisionProvider(snapshot_conflict=SnapshotConflictChoice.OVERWRITE))
    assert result.ok
    assert result.folder_name == "Song_v002"
    assert (stale_dir / "notes.txt").read_text(encoding="utf-8") == "new"
    assert (stale_dir / "stale.wav").exists()
    assert (stale_dir / "Song_v002.rpp").is_file()


class _NoCopyOps(FileOps):
    def copy_file(self, source: Path, dest: Path) -> None:
        return None


def test_verification_reports_count_mismatch_and_keeps_target(tmp_path: Path, project_factory) -> None:
    project = project_factory(tmp_path, extra={"a.wav": "a", "b.wav": "b"})
    result = _run(FileProjectHost(project), fs=_NoCopyOps())
    assert result.state is SnapshotState.FAILED
    assert isinstance(result.error, VerificationFailed)
    assert len(result.error.reasons) == 1
    assert "file count mismatch" in result.error.reasons[0]
    assert result.message.startswith("Snapshot failed during verifying:")
    assert "NOT removed" in result.message
    target = tmp_path / "Song_v001"
    assert target.is_dir()
    assert (target / "Song_v001.rpp").is_file()


class _FlakyCopyOps(FileOps):
    def copy_file(self, source: Path, dest: Path) -> None:
        if Path(source).name == "b.wav":
            raise OSError("disk full")
        super().copy_file(source, dest)


def test_copy_failure_reports_counts(tmp_path: Path, project_factory) -> None:
    project = project_factory(tmp_path, extra={"a.wav": "a", "b.wav": "b"})
    host = FileProjectHost(project)
    result = _run(host, fs=_FlakyCopyOps())
    assert result.state is SnapshotState.FAILED
    assert isinstance(result.error, CopyFailed)
    assert result.error.copied == 1
    assert "Copied 1 files, 1 errors" in result.message
    assert "b.wav: disk full" in result.message
    assert SnapshotState.SAVING not in result.state_history
    assert host.current_project_path() == project


class _RefusingHost(FileProjectHost):
    def save_project_as(self, new_path: Path) -> bool:
        return False


def test_save_failure(tmp_path: Path, project_factory) -> None:
    result = _run(_RefusingHost(project_factory(tmp_path)))
    assert result.state is SnapshotState.FAILED
    assert isinstance(result.error, ProjectSaveFailed)
    assert result.message.startswith("Snapshot failed during saving:")


class _NoMkdirOps(FileOps):
    def create_directory(self, path: Path) -> None:
        raise PermissionError("read-only volume")


def test_directory_create_failure(tmp_path: Path, project_factory) -> None:
    result = _run(FileProjectHost(project_factory(tmp_path)), fs=_NoMkdirOps())
    assert result.state is SnapshotState.FAILED
    assert isinstance(result.error, DirectoryCreateFailed)
    assert "read-only volume" in result.message


def test_no_project_loaded() -> None:
    result = _run(FileProjectHost(None))
    assert result.state is SnapshotState.FAILED
    assert isinstance(result.error, NoProjectLoaded)
    assert result.message == "Snapshot failed during resolving: No project loaded"


def test_custom_name_format(tmp_path: Path, project_factory) -> None:
    settings = RaspSettings(version_prefix="-r", version_digits=2, start_version=10)
    result = _run(FileProjectHost(project_factory(tmp_path)), settings=settings)
    assert result.ok
    assert result.folder_name == "Song-r10"
