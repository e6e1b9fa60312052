"""Conflict decisions for snapshot targets and archive destinations."""

from __future__ import annotations

import string
from pathlib import Path

from rasp.decisions import DecisionProvider
from rasp.errors import SuffixExhausted
from rasp.fs import FileOps, default_file_ops
from rasp.models import ArchiveConflictChoice, ConflictDecision, SnapshotConflictChoice

ALONGSIDE_SUFFIXES: tuple[str, ...] = tuple(f"_{c}" for c in string.ascii_lowercase)


def find_alongside_suffix(
    parent: Path, folder_name: str, fs: FileOps = default_file_ops
) -> str:
    """First suffix _a.._z for which parent/<folder_name><suffix> does not exist."""
    for suffix in ALONGSIDE_SUFFIXES:
        if not fs.exists(Path(parent) / f"{folder_name}{suffix}"):
            return suffix
    raise SuffixExhausted(folder_name)


def decide_snapshot_conflict(
    target_path: Path,
    decisions: DecisionProvider,
    fs: FileOps = default_file_ops,
) -> ConflictDecision:
    """Ask once what to do about an existing snapshot target."""
    target_path = Path(target_path)
    choice = SnapshotConflictChoice(decisions.choose_snapshot_conflict(target_path))
    if choice is SnapshotConflictChoice.ALONGSIDE:
        suffix = find_alongside_suffix(target_path.parent, target_path.name, fs)
        return ConflictDecision(choice=choice, suffix=suffix)
    return ConflictDecision(choice=choice)


def decide_archive_conflict(existing_name: str, decisions: DecisionProvider) -> ArchiveConflictChoice:
    return ArchiveConflictChoice(decisions.choose_archive_conflict(existing_name))
