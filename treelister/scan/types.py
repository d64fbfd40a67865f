"""Domain datatypes for one directory scan."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path, PurePath


@dataclass(frozen=True)
class TargetDirectory:
    """Validated scan root: the path as typed plus its resolved absolute form."""

    given: str
    path: Path


@dataclass(frozen=True)
class ScanEntry:
    """One file or directory discovered under the scan root."""

    path: Path
    relative: PurePath
    is_dir: bool

    @property
    def name(self) -> str:
        return self.relative.name

    @property
    def parts(self) -> tuple[str, ...]:
        return self.relative.parts

    @property
    def depth(self) -> int:
        """Number of path segments below the root (direct children are 1)."""
        return len(self.relative.parts)

    def display_path(self, given: str) -> str:
        """Join ``given`` with the relative path, matching how the root was typed."""
        return os.path.join(given, str(self.relative))


@dataclass(frozen=True)
class ScanStats:
    """Item counts for a scan; ``files + directories == total`` always holds."""

    total: int
    files: int
    directories: int


@dataclass(frozen=True)
class ScanResult:
    target: TargetDirectory
    entries: tuple[ScanEntry, ...]
    stats: ScanStats
    excluded_name: str | None = None
    unreadable: tuple[Path, ...] = ()


__all__ = [
    "TargetDirectory",
    "ScanEntry",
    "ScanStats",
    "ScanResult",
]
