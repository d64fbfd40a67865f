"""Report document assembly and writing.

A report is header (identity, timestamp, target, format), body (listing or
tree) and footer (counts plus a restated identity line). Its filename embeds
the generation time at second granularity.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

from ..about import TOOL_AUTHOR, TOOL_EMAIL, tool_title
from ..scan import ScanResult, ScanStats, TargetDirectory

REPORT_PREFIX = "directory_contents"
REPORT_SUFFIX = ".txt"
REPORT_TIMESTAMP_FORMAT = "%Y%m%d_%H%M%S"
GENERATED_ON_FORMAT = "%a %b %d %H:%M:%S %Y"
RULE = "=" * 80
OUTPUT_FORMATS = ("list", "tree")
BODY_HEADINGS = {
    "list": "DIRECTORY LISTING:",
    "tree": "DIRECTORY TREE:",
}


def report_filename(now: datetime) -> str:
    """Return ``directory_contents_<YYYYMMDD>_<HHMMSS>.txt`` for ``now``."""
    return f"{REPORT_PREFIX}_{now.strftime(REPORT_TIMESTAMP_FORMAT)}{REPORT_SUFFIX}"


@dataclass(frozen=True)
class Report:
    generated_at: datetime
    target: TargetDirectory
    output_format: str
    body_lines: tuple[str, ...]
    stats: ScanStats
    excluded_name: str | None = None

    @property
    def filename(self) -> str:
        return report_filename(self.generated_at)

    def header_lines(self) -> list[str]:
        return [
            RULE,
            tool_title(),
            RULE,
            f"Author:           {TOOL_AUTHOR}",
            f"Email:            {TOOL_EMAIL}",
            f"Generated on:     {self.generated_at.strftime(GENERATED_ON_FORMAT)}",
            f"Target directory: {self.target.path}",
            f"Output format:    {self.output_format}",
            RULE,
            "",
        ]

    def footer_lines(self) -> list[str]:
        return [
            "",
            RULE,
            "STATISTICS:",
            RULE,
            f"Total items:      {self.stats.total}",
            f"Files:            {self.stats.files}",
            f"Directories:      {self.stats.directories}",
            f"Script excluded:  {self.excluded_name or '(none)'}",
            "",
            f"Generated by {tool_title()}",
            f"Author: {TOOL_AUTHOR} <{TOOL_EMAIL}>",
            RULE,
        ]

    def render(self) -> str:
        lines = self.header_lines()
        lines.append(BODY_HEADINGS[self.output_format])
        lines.append(RULE)
        lines.extend(self.body_lines)
        lines.extend(self.footer_lines())
        return "\n".join(lines) + "\n"


def build_report(result: ScanResult, output_format: str, body_lines: list[str], now: datetime) -> Report:
    """Freeze a scan and its formatted body into a ``Report``."""
    if output_format not in OUTPUT_FORMATS:
        raise ValueError(f"unknown output format: {output_format!r}")
    return Report(
        generated_at=now,
        target=result.target,
        output_format=output_format,
        body_lines=tuple(body_lines),
        stats=result.stats,
        excluded_name=result.excluded_name,
    )


def write_report(report: Report, output_dir: Path) -> Path:
    """Write ``report`` into ``output_dir`` and return the file path.

    A report generated within the same second as an earlier one replaces it.
    """
    output_path = output_dir / report.filename
    output_path.write_text(report.render(), encoding="utf-8")
    return output_path
