"""Command-line front door for treelister.

Parses the target directory and format flag, prints the console banner and
summary, and dispatches into the reporter pipeline. Unknown options only warn.
"""

from __future__ import annotations

import argparse
import sys
from datetime import datetime
from pathlib import Path

from .console import (
    help_text,
    missing_directory_text,
    start_banner_text,
    summary_text,
    unknown_option_text,
    version_text,
)
from .errors import MissingArgumentError, TreeListerError
from .report import report_filename
from .reporter import generate_report
from .scan import resolve_target_directory

DEFAULT_PROG = "treelister"


def build_parser(prog: str) -> argparse.ArgumentParser:
    """Build the parser; help/version are plain flags so they can short-circuit."""
    parser = argparse.ArgumentParser(prog=prog, add_help=False, allow_abbrev=False)
    parser.add_argument("directory", nargs="?", default=None)
    parser.add_argument("--tree", action="store_true")
    parser.add_argument("-h", "--help", action="store_true")
    parser.add_argument("-v", "--version", action="store_true")
    return parser


def main(argv: list[str] | None = None, prog: str | None = None) -> int:
    """Run one scan and return the process exit status.

    ``prog`` names the invoking tool; its base name is excluded from the scan.
    Validation failures raise ``SystemExit`` with a message (exit status 1).
    """
    if argv is None:
        argv = sys.argv[1:]
    if prog is None:
        prog = Path(sys.argv[0]).name if sys.argv and sys.argv[0] else DEFAULT_PROG

    args, unknown = build_parser(prog).parse_known_args(argv)

    if args.help:
        sys.stdout.write(help_text(prog))
        return 0
    if args.version:
        sys.stdout.write(version_text())
        return 0

    for option in unknown:
        sys.stdout.write(unknown_option_text(option))

    output_format = "tree" if args.tree else "list"
    try:
        target = resolve_target_directory(args.directory)
    except MissingArgumentError:
        sys.stdout.write(missing_directory_text(prog))
        return 1
    except TreeListerError as exc:
        raise SystemExit(f"Error: {exc}") from exc

    now = datetime.now()
    sys.stdout.write(start_banner_text(target.path, output_format, report_filename(now)))
    try:
        outcome = generate_report(target, output_format, excluded_name=prog, now=now)
    except OSError as exc:
        raise SystemExit(f"Error: could not write report: {exc}") from exc

    sys.stdout.write(summary_text(outcome))
    return 0


def run(prog: str | None = None) -> None:
    """Console-script and ``python -m`` entrypoint."""
    raise SystemExit(main(prog=prog))


if __name__ == "__main__":
    run()
