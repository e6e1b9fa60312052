"""Tests for policy-file decisions and terminal prompts."""

import sys
from pathlib import Path
from unittest.mock import patch

import pytest

from cli.prompts import PromptDecisionProvider
from rasp.decisions import DecisionProvider, PolicyDecisionProvider, load_policy
from rasp.models import ArchiveConflictChoice, SnapshotConflictChoice, VersionEntry


def test_policy_defaults_are_conservative() -> None:
    policy = PolicyDecisionProvider()
    assert isinstance(policy, DecisionProvider)
    assert policy.choose_snapshot_conflict(Path("/x/Song_v002")) is SnapshotConflictChoice.CANCEL
    assert policy.choose_archive_conflict("Song_v001") is ArchiveConflictChoice.SKIP
    assert policy.confirm_archive([], Path("/a")) is False
    assert policy.asked == ["snapshot:Song_v002", "archive:Song_v001", "confirm"]


def test_load_policy_yaml(tmp_path: Path) -> None:
    path = tmp_path / "policy.yaml"
    path.write_text(
        "snapshot_conflict: Alongside\n"
        "archive_conflict:\n"
        "  default: replace\n"
        "  Song_v003: abort\n"
        "confirm_archive: true\n",
        encoding="utf-8",
    )
    policy = load_policy(path)
    assert policy.snapshot_conflict is SnapshotConflictChoice.ALONGSIDE
    assert policy.archive_conflict is ArchiveConflictChoice.REPLACE
    assert policy.choose_archive_conflict("Song_v003") is ArchiveConflictChoice.ABORT
    assert policy.confirm is True


def test_load_policy_single_archive_choice(tmp_path: Path) -> None:
    path = tmp_path / "policy.yaml"
    path.write_text("archive_conflict: skip\n", encoding="utf-8")
    policy = load_policy(path)
    assert policy.archive_conflict is ArchiveConflictChoice.SKIP
    assert policy.snapshot_conflict is SnapshotConflictChoice.CANCEL


@pytest.mark.parametrize(
    "content",
    ["- just\n- a list\n", "snapshot_conflict: sometimes\n", "archive_conflict: [unclosed\n"],
)
def test_load_policy_invalid(tmp_path: Path, content: str) -> None:
    path = tmp_path / "policy.yaml"
    path.write_text(content, encoding="utf-8")
    with pytest.raises(ValueError):
        load_policy(path)


def test_prompt_non_tty_uses_fallback_without_input() -> None:
    fallback = PolicyDecisionProvider(snapshot_conflict=SnapshotConflictChoice.OVERWRITE)
    provider = PromptDecisionProvider(fallback)
    with patch.object(sys.stdin, "isatty", return_value=False), patch("builtins.input") as mocked:
        assert provider.choose_snapshot_conflict(Path("/x/Song_v002")) is SnapshotConflictChoice.OVERWRITE
        assert provider.choose_archive_conflict("Song_v001") is ArchiveConflictChoice.SKIP
        assert provider.confirm_archive([], Path("/a")) is False
    mocked.assert_not_called()


def test_prompt_interactive_snapshot_retries_invalid_answer() -> None:
    provider = PromptDecisionProvider()
    with patch.object(sys.stdin, "isatty", return_value=True), patch("builtins.input", side_effect=["x", "a"]):
        assert provider.choose_snapshot_conflict(Path("/x/Song_v002")) is SnapshotConflictChoice.ALONGSIDE


def test_prompt_interactive_archive_default_is_skip() -> None:
    provider = PromptDecisionProvider()
    with patch.object(sys.stdin, "isatty", return_value=True), patch("builtins.input", return_value=""):
        assert provider.choose_archive_conflict("Song_v001") is ArchiveConflictChoice.SKIP
    with patch.object(sys.stdin, "isatty", return_value=True), patch("builtins.input", return_value="R"):
        assert provider.choose_archive_conflict("Song_v001") is ArchiveConflictChoice.REPLACE


def test_prompt_confirm_lists_versions(capsys) -> None:
    entries = [
        VersionEntry(name="Song", version=0, path=Path("/p/Song")),
        VersionEntry(name="Song_v001", version=1, path=Path("/p/Song_v001")),
    ]
    provider = PromptDecisionProvider()
    with patch.object(sys.stdin, "isatty", return_value=True), patch("builtins.input", return_value="y"):
        assert provider.confirm_archive(entries, Path("/archive")) is True
    err = capsys.readouterr().err
    assert "Song (v0 - original)" in err
    assert "Song_v001" in err
    assert "Destination: /archive" in err


def test_prompt_assume_yes_skips_question() -> None:
    provider = PromptDecisionProvider(assume_yes=True)
    with patch("builtins.input") as mocked:
        assert provider.confirm_archive([], Path("/a")) is True
    mocked.assert_not_called()
