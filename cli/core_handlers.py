"""Core CLI command handlers (help/info/versions).

Snapshot, archive and config handlers live in their own modules and are
re-exported via cli.handlers.
"""

from __future__ import annotations

from typing import Any

from rich.console import Console
from rich.table import Table

from rasp.errors import NoProjectLoaded
from rasp.versioning.naming import NameFormat
from rasp.versioning.resolver import (
    list_project_versions,
    next_version,
    project_display,
    resolve_project_info,
    version_display,
)

from .core_handlers_common import _err, _print_json, _project_path, _settings


def handle_help(parser: Any) -> int:
    """Print high-level command overview and detailed argparse help."""
    print("rasp — versioned project snapshots and archiving")
    print()
    print("Commands:")
    print("  info [project]        project name, current version, next snapshot folder")
    print("  versions [project]    list version folders next to the project")
    print("  snapshot [project]    create the next version (copy + save + verify)")
    print("  archive [project]     move old versions to the archive destination")
    print("  config show|set|reset persistent settings")
    print()
    print("  [project] defaults to $RASP_PROJECT.")
    print("  --json with info/versions/snapshot/archive for machine output.")
    print("  --help after any command for details.")
    print()
    parser.print_help()
    return 0


def handle_info(args: Any) -> int:
    settings = _settings(args)
    try:
        fmt = settings.name_format
        info = resolve_project_info(_project_path(args), fmt)
    except (NoProjectLoaded, ValueError) as exc:
        _err(str(exc))
        return 1
    nxt = next_version(info, fmt, settings.start_version)
    folder = fmt.folder_name(info.base_name, nxt)
    if getattr(args, "json", False):
        _print_json(
            {
                "project": project_display(info),
                "full_path": str(info.full_path),
                "directory": str(info.directory),
                "parent_directory": str(info.parent_directory),
                "current_version": info.current_version,
                "next_version": nxt,
                "next_folder": folder,
            }
        )
        return 0
    print(f"Project:  {project_display(info)}")
    print(f"Version:  {version_display(info)}")
    print(f"Location: {info.directory}")
    print(f"Next:     {folder}  ({info.parent_directory / folder})")
    return 0


def _versions_table(rows: list[Any], current: int | None, fmt: NameFormat) -> Table:
    table = Table(title=f"Versions ({fmt.prefix}{'N' * fmt.digits})")
    table.add_column("Version", justify="right")
    table.add_column("Folder")
    table.add_column("Path")
    for v in rows:
        label = f"v{v.version}" + (" (original)" if v.version == 0 else "")
        if current is not None and v.version == current:
            label += " *"
        table.add_row(label, v.name, str(v.path))
    return table


def handle_versions(args: Any) -> int:
    settings = _settings(args)
    try:
        fmt = settings.name_format
        info = resolve_project_info(_project_path(args), fmt)
    except (NoProjectLoaded, ValueError) as exc:
        _err(str(exc))
        return 1
    rows = list_project_versions(info, fmt)
    if getattr(args, "json", False):
        _print_json(
            {
                "project": info.base_name,
                "current_version": info.current_version,
                "versions": [{"name": v.name, "version": v.version, "path": str(v.path)} for v in rows],
            }
        )
        return 0
    if not rows:
        print("No versioned folders found")
        return 0
    Console().print(_versions_table(rows, info.current_version, fmt))
    return 0
