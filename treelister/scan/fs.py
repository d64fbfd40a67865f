"""Target validation and depth-first filesystem walking."""

from __future__ import annotations

import os
from collections.abc import Iterable
from pathlib import Path, PurePath

from ..errors import DirectoryPermissionError, MissingArgumentError, NotFoundError
from .types import ScanEntry, ScanResult, ScanStats, TargetDirectory


def resolve_target_directory(raw: str | os.PathLike[str] | None) -> TargetDirectory:
    """Validate ``raw`` as a readable directory and resolve it to an absolute path.

    Raises ``MissingArgumentError`` for an absent or empty path,
    ``NotFoundError`` when the path is missing or not a directory and
    ``DirectoryPermissionError`` when it cannot be read.
    """
    if raw is None or os.fspath(raw) == "":
        raise MissingArgumentError("No directory path provided!")
    given = os.fspath(raw)
    path = Path(given)
    if not path.is_dir():
        raise NotFoundError(f"Directory '{given}' not found or is not a directory.")
    if not os.access(path, os.R_OK):
        raise DirectoryPermissionError(f"Directory '{given}' is not readable. Check permissions.")
    return TargetDirectory(given=given, path=path.resolve())


def _is_directory(child: os.DirEntry[str]) -> bool:
    try:
        return child.is_dir(follow_symlinks=False)
    except OSError:
        return False


def count_entries(entries: Iterable[ScanEntry]) -> ScanStats:
    """Count total items, files and directories in ``entries``."""
    files = 0
    directories = 0
    for entry in entries:
        if entry.is_dir:
            directories += 1
        else:
            files += 1
    return ScanStats(total=files + directories, files=files, directories=directories)


def scan_directory(target: TargetDirectory, excluded_name: str | None = None) -> ScanResult:
    """Walk ``target`` depth-first and return every entry in tree order.

    Siblings are ordered by name in codepoint order and each directory is
    followed directly by its subtree. Hidden entries are included and symlinks
    are never followed. Non-directory entries named ``excluded_name`` are
    skipped; directories of that name are still listed and descended.
    Subdirectories that cannot be listed are reported in ``unreadable``.
    """
    entries: list[ScanEntry] = []
    unreadable: list[Path] = []

    def list_children(directory: Path, relative: PurePath) -> list[ScanEntry]:
        try:
            with os.scandir(directory) as it:
                children = sorted(it, key=lambda child: child.name)
                kinds = [_is_directory(child) for child in children]
        except OSError:
            unreadable.append(directory)
            return []
        return [
            ScanEntry(path=directory / child.name, relative=relative / child.name, is_dir=is_dir)
            for child, is_dir in zip(children, kinds)
            if is_dir or child.name != excluded_name
        ]

    # Explicit stack instead of recursion: depth is unbounded.
    stack = list(reversed(list_children(target.path, PurePath())))
    while stack:
        entry = stack.pop()
        entries.append(entry)
        if entry.is_dir:
            stack.extend(reversed(list_children(entry.path, entry.relative)))

    return ScanResult(
        target=target,
        entries=tuple(entries),
        stats=count_entries(entries),
        excluded_name=excluded_name,
        unreadable=tuple(unreadable),
    )


__all__ = [
    "resolve_target_directory",
    "count_entries",
    "scan_directory",
]
