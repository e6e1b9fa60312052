"""Shared helpers for CLI handlers."""

from __future__ import annotations

import json
import os
import sys
from pathlib import Path
from typing import Any

from rich.console import Console

from rasp.config import RaspSettings, SettingsStore, load_settings
from rasp.decisions import PolicyDecisionProvider, load_policy
from rasp.logging import get_logger
from rasp.models import ArchiveConflictChoice, SnapshotConflictChoice

from .prompts import PromptDecisionProvider

PROJECT_ENV = "RASP_PROJECT"


def _clog() -> Any:
    return get_logger("cli")


def _err(msg: str) -> None:
    """Log unified error message (respects --quiet for everything but errors)."""
    _clog().error("rasp: %s", msg)


def _project_path(args: Any) -> Path | None:
    """Project file from args, else $RASP_PROJECT. None means no project loaded."""
    raw = getattr(args, "project", None)
    if raw:
        return Path(raw)
    env = os.environ.get(PROJECT_ENV, "").strip()
    return Path(env) if env else None


def _store(args: Any) -> SettingsStore:
    return SettingsStore(getattr(args, "settings", None))


def _settings(args: Any) -> RaspSettings:
    """Fresh settings snapshot for this command, with CLI overrides applied."""
    settings = load_settings(_store(args))
    dest = getattr(args, "dest", None)
    return settings.with_overrides(archive_destination=str(dest) if dest else None)


def _decisions(args: Any) -> PolicyDecisionProvider | PromptDecisionProvider:
    """Policy provider when answers were pre-supplied, terminal prompts otherwise."""
    policy_file = getattr(args, "policy", None)
    on_conflict = getattr(args, "on_conflict", None)
    assume_yes = bool(getattr(args, "yes", False))
    policy = load_policy(policy_file) if policy_file else PolicyDecisionProvider()
    if on_conflict:
        if args.command == "snapshot":
            policy.snapshot_conflict = SnapshotConflictChoice(on_conflict)
        else:
            policy.archive_conflict = ArchiveConflictChoice(on_conflict)
    if assume_yes:
        policy.confirm = True
    if policy_file or on_conflict:
        return policy
    return PromptDecisionProvider(policy, assume_yes=assume_yes)


def _status_console(decisions: Any) -> Console | None:
    """Spinner console on stderr, only for unattended runs on a TTY."""
    if isinstance(decisions, PromptDecisionProvider) or not sys.stderr.isatty():
        return None
    return Console(file=sys.stderr)


def _print_json(payload: Any) -> None:
    print(json.dumps(payload, indent=2, ensure_ascii=False, default=str))
