"""Version suffix codec: `<prefix><zero-padded number>` at the end of a name."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from rasp.models import VersionId


@dataclass(frozen=True, slots=True)
class NameFormat:
    """Prefix and zero-padding width used to encode version numbers in names."""

    prefix: str = "_v"
    digits: int = 3
    _pattern: re.Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if not self.prefix:
            raise ValueError("version prefix must not be empty")
        if self.digits < 1:
            raise ValueError(f"version digits must be >= 1, got {self.digits}")
        object.__setattr__(
            self, "_pattern", re.compile(re.escape(self.prefix) + r"([0-9]+)\Z")
        )

    def encode(self, version: VersionId) -> str:
        """Return prefix + zero-padded version. Wider numbers are not truncated."""
        if version < 0:
            raise ValueError(f"version must be non-negative, got {version}")
        return f"{self.prefix}{version:0{self.digits}d}"

    def decode(self, name: str) -> VersionId | None:
        """Return the trailing version number, or None if the name carries no suffix."""
        m = self._pattern.search(name)
        if m is None:
            return None
        return int(m.group(1))

    def split(self, name: str) -> tuple[str, VersionId | None]:
        """Split name into (unversioned base, version). Base is name itself when unversioned."""
        m = self._pattern.search(name)
        if m is None:
            return name, None
        return name[: m.start()], int(m.group(1))

    def folder_name(self, base_name: str, version: VersionId) -> str:
        return base_name + self.encode(version)

    def matches_exactly(self, remainder: str) -> VersionId | None:
        """Version for a remainder that is exactly one encoded suffix (canonical width)."""
        version = self.decode(remainder)
        if version is None or remainder != self.encode(version):
            return None
        return version
