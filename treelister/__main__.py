"""Module entrypoint for ``python -m treelister``.

Runs under the program name ``treelister`` rather than ``__main__.py``.
"""

from .cli import DEFAULT_PROG, run


if __name__ == "__main__":
    run(prog=DEFAULT_PROG)
