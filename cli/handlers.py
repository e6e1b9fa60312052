"""CLI handlers facade.

Thin wrapper that re-exports concrete handler implementations from:
- cli.core_handlers           — help/info/versions
- cli.core_handlers_snapshot  — snapshot
- cli.core_handlers_archive   — archive
- cli.core_handlers_config    — config show/set/reset
"""
from __future__ import annotations
from .core_handlers import handle_help, handle_info, handle_versions
from .core_handlers_archive import handle_archive
from .core_handlers_config import handle_config
from .core_handlers_snapshot import handle_snapshot
__all__ = ['handle_help', 'handle_info', 'handle_versions', 'handle_snapshot', 'handle_archive', 'handle_config']
