"""Decision providers for the conflict points of snapshot and archive runs.

Every decision is a synchronous call. A provider may prompt a human or answer
from a pre-supplied policy (automation, tests).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Protocol, Sequence, runtime_checkable

import yaml

from rasp.models import ArchiveConflictChoice, SnapshotConflictChoice, VersionEntry


@runtime_checkable
class DecisionProvider(Protocol):
    def choose_snapshot_conflict(self, target_path: Path) -> SnapshotConflictChoice:
        """Target snapshot folder exists: create alongside, overwrite, or cancel."""
        ...

    def choose_archive_conflict(self, name: str) -> ArchiveConflictChoice:
        """Version already present in the archive: skip, replace, or abort the run."""
        ...

    def confirm_archive(self, entries: Sequence[VersionEntry], destination: Path) -> bool:
        """Approve moving entries to destination (and removing them from source)."""
        ...


@dataclass(slots=True)
class PolicyDecisionProvider:
    """Answers every decision point from fixed choices.

    archive_overrides maps a version folder name to the choice for that item;
    other items get archive_conflict.
    """

    snapshot_conflict: SnapshotConflictChoice = SnapshotConflictChoice.CANCEL
    archive_conflict: ArchiveConflictChoice = ArchiveConflictChoice.SKIP
    archive_overrides: dict[str, ArchiveConflictChoice] = field(default_factory=dict)
    confirm: bool = False
    asked: list[str] = field(default_factory=list)

    def choose_snapshot_conflict(self, target_path: Path) -> SnapshotConflictChoice:
        self.asked.append(f"snapshot:{Path(target_path).name}")
        return self.snapshot_conflict

    def choose_archive_conflict(self, name: str) -> ArchiveConflictChoice:
        self.asked.append(f"archive:{name}")
        return self.archive_overrides.get(name, self.archive_conflict)

    def confirm_archive(self, entries: Sequence[VersionEntry], destination: Path) -> bool:
        self.asked.append("confirm")
        return self.confirm

    @classmethod
    def from_mapping(cls, data: dict[str, Any]) -> PolicyDecisionProvider:
        """Build from {snapshot_conflict, archive_conflict, confirm_archive}.

        archive_conflict may be a single choice or a mapping of folder name to
        choice with an optional "default" key.
        """
        policy = cls()
        if data.get("snapshot_conflict") is not None:
            policy.snapshot_conflict = SnapshotConflictChoice(str(data["snapshot_conflict"]).lower())
        raw_archive = data.get("archive_conflict")
        if isinstance(raw_archive, dict):
            for name, choice in raw_archive.items():
                value = ArchiveConflictChoice(str(choice).lower())
                if name == "default":
                    policy.archive_conflict = value
                else:
                    policy.archive_overrides[str(name)] = value
        elif raw_archive is not None:
            policy.archive_conflict = ArchiveConflictChoice(str(raw_archive).lower())
        if data.get("confirm_archive") is not None:
            policy.confirm = bool(data["confirm_archive"])
        return policy


def load_policy(path: Path) -> PolicyDecisionProvider:
    """Load a YAML policy file. Invalid choices raise ValueError."""
    raw = Path(path).read_text(encoding="utf-8")
    try:
        data = yaml.safe_load(raw) or {}
    except yaml.YAMLError as exc:
        raise ValueError(f"invalid policy file {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ValueError(f"policy file must contain a mapping: {path}")
    return PolicyDecisionProvider.from_mapping(data)
