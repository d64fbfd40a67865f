"""Reporter pipeline: resolve, scan, format, assemble and write one report."""

from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

from .report import Report, build_report, format_list_lines, format_tree_lines, write_report
from .scan import ScanResult, TargetDirectory, resolve_target_directory, scan_directory


@dataclass(frozen=True)
class ReportOutcome:
    report: Report
    output_path: Path
    scan: ScanResult


def generate_report(
    raw_target: str | os.PathLike[str] | TargetDirectory,
    output_format: str = "list",
    excluded_name: str | None = None,
    output_dir: Path | None = None,
    now: datetime | None = None,
    use_external_tree: bool = True,
) -> ReportOutcome:
    """Scan ``raw_target`` once and write one report file.

    ``raw_target`` may be an already validated ``TargetDirectory``. Validation
    errors propagate before anything is written. ``output_dir``
    defaults to the current working directory and ``now`` to the current
    local time.
    """
    if isinstance(raw_target, TargetDirectory):
        target = raw_target
    else:
        target = resolve_target_directory(raw_target)
    result = scan_directory(target, excluded_name=excluded_name)
    if output_format == "tree":
        body_lines = format_tree_lines(result, use_external=use_external_tree)
    else:
        body_lines = format_list_lines(result)
    report = build_report(result, output_format, body_lines, now or datetime.now())
    output_path = write_report(report, output_dir if output_dir is not None else Path.cwd())
    return ReportOutcome(report=report, output_path=output_path, scan=result)
