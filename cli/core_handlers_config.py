"""Settings handlers: show, set, reset."""

from __future__ import annotations

from typing import Any

from rich.console import Console
from rich.table import Table

from rasp.config import SETTING_KEYS, settings_to_dict

from .core_handlers_common import _err, _print_json, _settings, _store


def handle_config(args: Any) -> int:
    sub = getattr(args, "config_command", None) or "show"
    store = _store(args)
    if sub == "reset":
        store.reset()
        print(f"Settings reset ({store.path})")
        return 0
    if sub == "set":
        return _handle_config_set(args, store)

    data = settings_to_dict(_settings(args))
    if getattr(args, "json", False):
        _print_json({"path": str(store.path), "settings": data})
        return 0
    table = Table(title=f"Settings ({store.path})")
    table.add_column("Key")
    table.add_column("Value")
    for key, value in data.items():
        table.add_row(key, repr(value))
    Console().print(table)
    return 0


def _handle_config_set(args: Any, store: Any) -> int:
    key = args.key
    if key not in SETTING_KEYS:
        _err(f"unknown setting: {key} (one of: {', '.join(SETTING_KEYS)})")
        return 1
    current = store.snapshot()
    try:
        candidate = current.with_overrides(**{key: type(getattr(current, key))(args.value)}).validate()
    except ValueError as exc:
        _err(f"invalid value for {key}: {exc}")
        return 1
    stored = store.set(key, getattr(candidate, key))
    print(f"{key} = {stored!r}")
    return 0
