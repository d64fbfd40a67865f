"""Directory scanning: target validation, recursive walk and item counts."""

from __future__ import annotations

from .fs import count_entries, resolve_target_directory, scan_directory
from .types import ScanEntry, ScanResult, ScanStats, TargetDirectory

__all__ = [
    "TargetDirectory",
    "ScanEntry",
    "ScanStats",
    "ScanResult",
    "resolve_target_directory",
    "count_entries",
    "scan_directory",
]
