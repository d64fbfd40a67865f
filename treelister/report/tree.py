"""Tree-mode report body.

Prefers an installed ``tree`` executable for its corner/branch glyphs and
falls back to a depth-indented renderer. Nesting is equivalent either way.
"""

from __future__ import annotations

import shutil
import subprocess

from ..scan import ScanResult

TREE_COMMAND = "tree"
TREE_TIMEOUT_SECONDS = 60.0
TREE_GUIDE = "│   "
TREE_BRANCH = "├── "


def render_fallback_tree(result: ScanResult) -> list[str]:
    """Render the root path then one ``guide * (depth - 1) + branch + name`` row per entry."""
    lines = [str(result.target.path)]
    for entry in result.entries:
        lines.append(f"{TREE_GUIDE * (entry.depth - 1)}{TREE_BRANCH}{entry.name}")
    return lines


def render_external_tree(result: ScanResult) -> list[str] | None:
    """Run the external ``tree`` utility, returning ``None`` when it cannot be used.

    ``tree -I`` also hides directories, so a scan holding a directory named
    like the excluded file is left to the fallback renderer.
    """
    if shutil.which(TREE_COMMAND) is None:
        return None
    if result.excluded_name and any(
        entry.is_dir and entry.name == result.excluded_name for entry in result.entries
    ):
        return None
    command = [TREE_COMMAND, result.target.given, "-a"]
    if result.excluded_name:
        command.extend(["-I", result.excluded_name])
    try:
        proc = subprocess.run(
            command,
            stdout=subprocess.PIPE,
            stderr=subprocess.DEVNULL,
            text=True,
            encoding="utf-8",
            errors="replace",
            check=False,
            timeout=TREE_TIMEOUT_SECONDS,
        )
    except (OSError, subprocess.SubprocessError):
        return None
    if proc.returncode != 0 or not proc.stdout.strip():
        return None
    return proc.stdout.rstrip("\n").splitlines()


def format_tree_lines(result: ScanResult, use_external: bool = True) -> list[str]:
    """Return tree-mode body lines, delegating to ``tree`` when allowed and available."""
    if use_external:
        external = render_external_tree(result)
        if external is not None:
            return external
    return render_fallback_tree(result)
