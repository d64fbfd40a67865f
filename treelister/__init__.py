"""treelister: write a timestamped listing or tree report of a directory.

``main(argv, prog)`` runs the command line and returns its exit status.
Library callers wanting the report without console output use
``treelister.reporter.generate_report``.
"""

from __future__ import annotations


def main(*args, **kwargs):
    """Run ``treelister.cli.main``; imported on first call."""
    from .cli import main as _main

    return _main(*args, **kwargs)

__all__ = ["main"]
