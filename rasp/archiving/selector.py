"""Select which versions are eligible for archival under the retention policy."""

from __future__ import annotations

from typing import Iterable

from rasp.config import RaspSettings
from rasp.host import ProjectHost
from rasp.models import ArchivePlan, VersionEntry, VersionId
from rasp.versioning.resolver import list_project_versions, resolve_project_info


def versions_to_archive(
    current_version: VersionId,
    keep_count: int,
    all_versions: Iterable[VersionEntry],
) -> list[VersionEntry]:
    """Entries strictly older than current_version - keep_count, ascending.

    The current version is never selected, whatever keep_count is (0 or
    negative included).
    """
    cutoff = current_version - keep_count
    selected = [
        v for v in all_versions
        if v.version < cutoff and v.version != current_version
    ]
    selected.sort(key=lambda v: v.version)
    return selected


def plan_archive(
    settings: RaspSettings,
    host: ProjectHost,
    keep_count: int | None = None,
) -> ArchivePlan:
    """Resolve the live project and compute its archive set.

    Raises NoProjectLoaded. "No versioned folders found" and "No versions to
    archive" come back as empty plans, not errors.
    """
    fmt = settings.name_format
    keep = settings.versions_to_keep if keep_count is None else keep_count
    info = resolve_project_info(host.current_project_path(), fmt)
    current = info.current_version or 0
    all_versions = list_project_versions(info, fmt)
    plan = ArchivePlan(info=info, current_version=current, keep_count=keep, all_versions=all_versions)
    if not all_versions:
        plan.message = "No versioned folders found"
        return plan
    plan.entries = versions_to_archive(current, keep, all_versions)
    if not plan.entries:
        plan.message = "No versions to archive"
    else:
        plan.message = f"{len(plan.entries)} version(s) eligible for archive"
    return plan
