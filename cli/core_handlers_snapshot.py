"""Snapshot handler."""

from __future__ import annotations

from contextlib import nullcontext
from typing import Any

from rasp.host import FileProjectHost
from rasp.models import SnapshotResult
from rasp.versioning.snapshot import SnapshotCreator

from .core_handlers_common import (
    _clog,
    _decisions,
    _err,
    _print_json,
    _project_path,
    _settings,
    _status_console,
)


def _snapshot_payload(result: SnapshotResult) -> dict[str, Any]:
    return {
        "ok": result.ok,
        "state": result.state.value,
        "folder_name": result.folder_name,
        "target_path": str(result.target_path) if result.target_path else None,
        "file_count": result.file_count,
        "source_file_count": result.source_file_count,
        "message": result.message,
        "states": [s.value for s in result.state_history],
    }


def handle_snapshot(args: Any) -> int:
    """Create the next version of the project. Exit 1 only on failure."""
    settings = _settings(args)
    host = FileProjectHost(_project_path(args))
    try:
        decisions = _decisions(args)
    except (OSError, ValueError) as exc:
        _err(f"cannot load policy: {exc}")
        return 1
    creator = SnapshotCreator(settings, host, decisions)

    console = _status_console(decisions)
    status = console.status("[bold green]Creating new version...", spinner="dots") if console else nullcontext()
    with status:
        result = creator.run()

    if getattr(args, "json", False):
        _print_json(_snapshot_payload(result))
        return 0 if result.ok or result.cancelled else 1
    if result.ok:
        print(result.message)
        return 0
    if result.cancelled:
        _clog().info("rasp: %s", result.message)
        return 0
    _err(result.message)
    return 1
