"""
tabledb/__main__.py

Package entry point for running tabledb as a module:

    python -m tabledb [--verbose | --quiet]

This also serves as the target for the console script entry point defined in
pyproject.toml:

    tabledb [--verbose | --quiet]
"""

from __future__ import annotations

import sys


def main() -> int:
    """
    Entry point for `python -m tabledb` and the installed `tabledb` command.

    Returns:
        Exit code (0 for normal exit).
    """
    from .repl import main as repl_main

    return int(repl_main(sys.argv[1:]))


if __name__ == "__main__":
    raise SystemExit(main())
