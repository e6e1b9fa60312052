"""Parser wiring extracted from the rasp_cli entrypoint."""

from __future__ import annotations

import argparse
from pathlib import Path

SNAPSHOT_CONFLICT_CHOICES = ("alongside", "overwrite", "cancel")
ARCHIVE_CONFLICT_CHOICES = ("skip", "replace", "abort")


def build_parser(*, version: str) -> argparse.ArgumentParser:
    """Configure top-level CLI parser and subcommands."""
    parser = argparse.ArgumentParser(
        prog="rasp",
        description="rasp — versioned project snapshots and archiving",
        epilog="Commands: info | versions | snapshot | archive | config. Use rasp help for an overview.",
    )
    parser.add_argument("--version", "-V", action="version", version=f"%(prog)s {version}")
    parser.add_argument("--settings", type=Path, default=None, metavar="FILE", help="Settings JSON file (default: $RASP_SETTINGS or ~/.rasp/settings.json)")
    parser.add_argument("--quiet", "-q", action="store_true", help="Only warnings and errors on stderr")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    subparsers = parser.add_subparsers(dest="command")

    _add_version_commands(subparsers)
    _add_archive_commands(subparsers)
    _add_config_commands(subparsers)

    subparsers.add_parser("help", help="Show rasp command overview")

    return parser


def _add_project_arg(p: argparse.ArgumentParser) -> None:
    p.add_argument("project", nargs="?", default=None, type=Path, help="Live project file (default: $RASP_PROJECT)")


def _add_version_commands(subparsers: argparse._SubParsersAction) -> None:
    info_parser = subparsers.add_parser("info", help="Show project name, current version and next snapshot folder")
    _add_project_arg(info_parser)
    info_parser.add_argument("--json", action="store_true", help="Output JSON (machine-readable)")

    versions_parser = subparsers.add_parser("versions", help="List version folders next to the project")
    _add_project_arg(versions_parser)
    versions_parser.add_argument("--json", action="store_true", help="Output JSON (machine-readable)")

    snapshot_parser = subparsers.add_parser("snapshot", help="Create the next version: new folder, full copy, save, verify")
    _add_project_arg(snapshot_parser)
    snapshot_parser.add_argument("--on-conflict", choices=SNAPSHOT_CONFLICT_CHOICES, default=None, help="Answer for an existing target folder (default: ask)")
    snapshot_parser.add_argument("--policy", type=Path, default=None, metavar="FILE", help="YAML decision policy for unattended runs")
    snapshot_parser.add_argument("--json", action="store_true", help="Output JSON (machine-readable)")


def _add_archive_commands(subparsers: argparse._SubParsersAction) -> None:
    archive_parser = subparsers.add_parser("archive", help="Move versions older than the retention window to the archive")
    _add_project_arg(archive_parser)
    archive_parser.add_argument("--dest", type=Path, default=None, metavar="DIR", help="Archive destination (default: archive_destination setting)")
    archive_parser.add_argument("--keep", type=int, default=None, metavar="N", help="Versions to keep active (default: versions_to_keep setting)")
    archive_parser.add_argument("--yes", "-y", action="store_true", help="Do not ask for confirmation")
    archive_parser.add_argument("--dry-run", action="store_true", help="Only show what would be archived")
    archive_parser.add_argument("--on-conflict", choices=ARCHIVE_CONFLICT_CHOICES, default=None, help="Answer for versions already in the archive (default: ask)")
    archive_parser.add_argument("--policy", type=Path, default=None, metavar="FILE", help="YAML decision policy for unattended runs")
    archive_parser.add_argument("--json", action="store_true", help="Output JSON (machine-readable)")


def _add_config_commands(subparsers: argparse._SubParsersAction) -> None:
    config_parser = subparsers.add_parser("config", help="Show or change persistent settings")
    config_subparsers = config_parser.add_subparsers(dest="config_command")

    show = config_subparsers.add_parser("show", help="Print effective settings")
    show.add_argument("--json", action="store_true", help="Output JSON (machine-readable)")

    set_parser = config_subparsers.add_parser("set", help="Persist one setting")
    set_parser.add_argument("key", type=str, help="Setting name (e.g. version_prefix, versions_to_keep)")
    set_parser.add_argument("value", type=str, help="New value")

    config_subparsers.add_parser("reset", help="Delete the settings file (back to defaults)")
