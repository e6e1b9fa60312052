"""Interactive terminal decisions for snapshot and archive conflicts."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Sequence

from rasp.decisions import PolicyDecisionProvider
from rasp.logging import get_logger
from rasp.models import ArchiveConflictChoice, SnapshotConflictChoice, VersionEntry

_LOG = get_logger("cli.prompts")


def read_choice(prompt: str, allowed: dict[str, str], default: str) -> str:
    """Read one valid answer; empty input picks default."""
    while True:
        choice = input(prompt).strip().lower() or default
        if choice in allowed:
            return allowed[choice]
        _LOG.warning("Use one of: %s", ", ".join(sorted(allowed)))


class PromptDecisionProvider:
    """Asks on the terminal; answers from fallback when stdin is not a TTY."""

    def __init__(self, fallback: PolicyDecisionProvider | None = None, *, assume_yes: bool = False) -> None:
        self.fallback = fallback or PolicyDecisionProvider()
        self.assume_yes = assume_yes

    def _interactive(self) -> bool:
        return sys.stdin.isatty()

    def choose_snapshot_conflict(self, target_path: Path) -> SnapshotConflictChoice:
        if not self._interactive():
            return self.fallback.choose_snapshot_conflict(target_path)
        prompt = (
            f'"{Path(target_path).name}" already exists. '
            "[a]longside (_a, _b, ...)/[o]verwrite in place/[c]ancel: "
        )
        answer = read_choice(
            prompt,
            {"a": "alongside", "o": "overwrite", "c": "cancel"},
            default="c",
        )
        return SnapshotConflictChoice(answer)

    def choose_archive_conflict(self, name: str) -> ArchiveConflictChoice:
        if not self._interactive():
            return self.fallback.choose_archive_conflict(name)
        prompt = (
            f'"{name}" already exists in archive. '
            "[s]kip this version/[r]eplace existing archive/[a]bort entire operation: "
        )
        answer = read_choice(
            prompt,
            {"s": "skip", "r": "replace", "a": "abort"},
            default="s",
        )
        return ArchiveConflictChoice(answer)

    def confirm_archive(self, entries: Sequence[VersionEntry], destination: Path) -> bool:
        if self.assume_yes:
            return True
        if not self._interactive():
            return self.fallback.confirm_archive(entries, destination)
        lines = ["Archive and REMOVE the following versions from source?", ""]
        for ver in entries:
            label = " (v0 - original)" if ver.version == 0 else ""
            lines.append(f"  • {ver.name}{label}")
        lines += ["", f"Destination: {destination}", "", "This action cannot be undone."]
        print("\n".join(lines), file=sys.stderr)
        answer = read_choice("Proceed? [y]es/[n]o: ", {"y": "yes", "n": "no"}, default="n")
        return answer == "yes"
