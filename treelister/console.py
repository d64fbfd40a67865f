"""Console text: help, version, banners, guidance and run summary."""

from __future__ import annotations

from pathlib import Path

from .about import TOOL_AUTHOR, TOOL_DATE, TOOL_EMAIL, TOOL_LICENSE, TOOL_NAME, TOOL_VERSION, tool_title
from .reporter import ReportOutcome

BANNER_RULE = "=" * 42


def help_text(prog: str) -> str:
    return f"""{tool_title()}
Author: {TOOL_AUTHOR} <{TOOL_EMAIL}>

USAGE:
    {prog} directory_path [OPTIONS]

DESCRIPTION:
    Lists all files and subdirectories in the specified directory and saves
    the output to a timestamped text file.

OPTIONS:
    --tree          Display output in tree format (default: simple list)
    -h, --help      Show this help message
    -v, --version   Show version information

EXAMPLES:
    {prog} /home/user/documents
    {prog} /home/user/documents --tree
    {prog} . --tree

OUTPUT:
    Creates a file named 'directory_contents_YYYYMMDD_HHMMSS.txt' in the
    current directory containing the complete directory listing.

REQUIREMENTS:
    - Optional: tree command for enhanced formatting

LICENSE:
    {TOOL_LICENSE} License - Feel free to use, modify, and distribute.
"""


def version_text() -> str:
    return (
        f"{TOOL_NAME} v{TOOL_VERSION}\n"
        f"Author: {TOOL_AUTHOR} <{TOOL_EMAIL}>\n"
        f"Date: {TOOL_DATE}\n"
        f"License: {TOOL_LICENSE}\n"
    )


def _banner_title() -> list[str]:
    return [BANNER_RULE, tool_title(), f"Author: {TOOL_AUTHOR}", BANNER_RULE]


def missing_directory_text(prog: str) -> str:
    lines = _banner_title()
    lines.extend(
        [
            "❌ Error: No directory path provided!",
            "",
            "📁 Please specify a directory to scan:",
            f"   Example: {prog} /path/to/directory",
            f"   Example: {prog} /home/user/documents --tree",
            "",
            f"💡 Use '{prog} --help' for complete usage information.",
            BANNER_RULE,
        ]
    )
    return "\n".join(lines) + "\n"


def unknown_option_text(option: str) -> str:
    return f"Warning: Unknown option '{option}'. Use --help for valid options.\n"


def start_banner_text(target: Path, output_format: str, filename: str) -> str:
    lines = _banner_title()
    lines.extend(
        [
            f"📁 Scanning: '{target}'",
            f"📄 Output format: {output_format}",
            f"💾 Saving to: '{filename}' (in current directory)",
            BANNER_RULE,
        ]
    )
    return "\n".join(lines) + "\n"


def summary_text(outcome: ReportOutcome) -> str:
    stats = outcome.report.stats
    lines = [
        "✅ Scan completed successfully!",
        f"📁 Total items found: {stats.total} ({stats.files} files, {stats.directories} directories)",
        f"📄 Results saved to: {outcome.report.filename}",
        f"💾 File location: {outcome.output_path.resolve()}",
        BANNER_RULE,
    ]
    for directory in outcome.scan.unreadable:
        lines.append(f"Warning: Could not read directory '{directory}'; its contents were skipped.")
    return "\n".join(lines) + "\n"
