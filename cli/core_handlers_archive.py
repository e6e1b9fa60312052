"""Archive handler."""

from __future__ import annotations

from contextlib import nullcontext
from typing import Any

from rasp.archiving.workflow import archive_project
from rasp.host import FileProjectHost
from rasp.models import ArchivePlan, ArchiveResult, ArchiveStatus

from .core_handlers_common import (
    _clog,
    _decisions,
    _err,
    _print_json,
    _project_path,
    _settings,
    _status_console,
)


def _archive_payload(plan: ArchivePlan | None, result: ArchiveResult) -> dict[str, Any]:
    return {
        "ok": result.ok,
        "status": result.status.value,
        "current_version": plan.current_version if plan else None,
        "keep_count": plan.keep_count if plan else None,
        "selected": [v.name for v in plan.entries] if plan else [],
        "total": result.total,
        "archived_count": result.archived_count,
        "skipped_count": result.skipped_count,
        "errors": list(result.errors),
        "message": result.message,
    }


def handle_archive(args: Any) -> int:
    """Archive versions older than the retention window. Exit 1 on errors or abort."""
    settings = _settings(args)
    host = FileProjectHost(_project_path(args))
    try:
        decisions = _decisions(args)
    except (OSError, ValueError) as exc:
        _err(f"cannot load policy: {exc}")
        return 1
    dry_run = bool(getattr(args, "dry_run", False))

    console = _status_console(decisions)
    status = console.status("[bold green]Archiving versions...", spinner="dots") if console else nullcontext()
    with status:
        plan, result = archive_project(
            settings,
            host,
            decisions,
            keep_count=getattr(args, "keep", None),
            dry_run=dry_run,
        )

    if getattr(args, "json", False):
        _print_json(_archive_payload(plan, result))
    elif result.ok or result.status is ArchiveStatus.CANCELLED:
        print(result.message)
    else:
        _err(result.message)

    if result.ok or result.status is ArchiveStatus.CANCELLED:
        return 0
    _clog().debug("rasp: archive finished with status %s", result.status.value)
    return 1
