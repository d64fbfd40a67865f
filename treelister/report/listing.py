"""Flat list-mode report body."""

from __future__ import annotations

from ..scan import ScanResult


def format_list_lines(result: ScanResult) -> list[str]:
    """Return one path per entry, prefixed the way the target was given.

    Lines are sorted as plain strings so re-sorting the output is a no-op.
    """
    given = result.target.given
    return sorted(entry.display_path(given) for entry in result.entries)
