"""
tabledb/repl.py

Interactive REPL (Read-Eval-Print Loop) for the tabledb interpreter.

Responsibilities:
- Read one line at a time, strip it, and hand it to Database.run()
- Stop on the exit command ("exit;" by default, case-insensitive) or EOF
- Provide small meta-commands for introspection:
    - .help
    - .exit / .quit
    - .tables
    - .schema <table>
- Configure logging for the whole process (colorlog on stderr)

Usage:
    python -m tabledb [--prompt "> "] [--verbose | --quiet]
"""

from __future__ import annotations

import argparse
import logging
from dataclasses import dataclass

import colorlog

try:
    import readline  # noqa: F401
except ImportError:
    # readline is optional; if missing, REPL still works.
    readline = None  # type: ignore[assignment]

from .db import Database

DEFAULT_PROMPT = "> "
EXIT_COMMAND = "exit;"

LOG_FORMAT = "%(asctime)s:%(levelname)s:%(name)s: %(message)s"
LOG_COLORS = {
    "DEBUG": "cyan",
    "INFO": "green",
    "WARNING": "yellow",
    "ERROR": "red",
    "CRITICAL": "bold_red",
}


@dataclass(frozen=True)
class ReplConfig:
    """
    REPL settings taken from the command line.

    Attributes:
        prompt: Prompt printed before each line.
        exit_command: Line that ends the session (compared case-insensitively).
        log_level: Root logger level.
    """
    prompt: str = DEFAULT_PROMPT
    exit_command: str = EXIT_COMMAND
    log_level: int = logging.WARNING


def setup_logging(level: int = logging.WARNING) -> None:
    """Route all log records to a single colored stderr handler."""
    logger = logging.getLogger()
    for h in list(logger.handlers):
        logger.removeHandler(h)
    handler = colorlog.StreamHandler()
    handler.setFormatter(colorlog.ColoredFormatter(f"%(log_color)s{LOG_FORMAT}", log_colors=LOG_COLORS))
    logger.addHandler(handler)
    logger.setLevel(level)


def cmd_tables(db: Database) -> None:
    """
    Meta-command: list all tables from catalog.

    Args:
        db: Database instance.
    """
    names = db.catalog.table_names()
    if not names:
        print("(no tables)")
        return
    for n in names:
        print(n)


def cmd_schema(db: Database, table: str) -> None:
    """
    Meta-command: print table schema.

    Args:
        db: Database instance.
        table: Table name.
    """
    t = db.catalog.tables.get(table)
    if t is None:
        print(f"Table not found: {table}")
        return

    print(f"TABLE {t.name} ({len(t.rows)} rows)")
    for c in t.columns:
        suffix = " INDEXED" if c.indexed else ""
        print(f"  - {c.name} {c.typ.name}{suffix}")


def print_help() -> None:
    print("Meta commands:")
    print("  .help              show this help")
    print("  .tables            list tables")
    print("  .schema <table>    show table schema")
    print("  .exit / .quit      exit (or type exit;)")
    print()
    print("One statement per line, ';' optional. Example:")
    print("  CREATE TABLE Users (id INT, name TEXT);")
    print("  INSERT INTO Users (1, 'Bob');")
    print("  SELECT * FROM Users WHERE id = 1;")


def handle_meta(db: Database, line: str) -> bool:
    """
    Run a meta-command line (one starting with '.').

    Returns:
        False if the command asks to leave the REPL, else True.
    """
    parts = line.split()
    cmd = parts[0].lower()

    if cmd in (".exit", ".quit"):
        return False
    if cmd == ".help":
        print_help()
    elif cmd == ".tables":
        cmd_tables(db)
    elif cmd == ".schema":
        if len(parts) != 2:
            print("Usage: .schema <table>")
        else:
            cmd_schema(db, parts[1])
    else:
        print(f"Unknown command: {cmd}. Type .help")
    return True


def repl(config: ReplConfig, db: Database | None = None) -> int:
    """
    Run the interactive REPL.

    Args:
        config: REPL settings.
        db: Database to use; a fresh one when omitted.

    Returns:
        Process exit code (0 on normal exit).
    """
    db = db if db is not None else Database()
    print(f"Enter commands, or '{config.exit_command}' to quit. Type .help for help.")

    while True:
        try:
            line = input(config.prompt)
        except EOFError:
            print()
            return 0
        except KeyboardInterrupt:
            print()
            continue

        line = line.strip()
        if line.lower() == config.exit_command.lower():
            return 0
        if not line:
            continue

        if line.startswith("."):
            if not handle_meta(db, line):
                return 0
            continue

        try:
            print(db.run(line))
        except Exception as e:
            # Unexpected internal error; keep REPL alive but show message
            logging.getLogger(__name__).exception("Internal error while running %r", line)
            print(f"Internal error: {e}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="tabledb", description="In-memory mini SQL interpreter")
    parser.add_argument("--prompt", default=DEFAULT_PROMPT, help="prompt string (default: %(default)r)")
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true", help="log debug details")
    verbosity.add_argument("-q", "--quiet", action="store_true", help="log errors only")
    return parser


def config_from_args(argv: list[str] | None = None) -> ReplConfig:
    args = build_parser().parse_args(argv)
    level = logging.WARNING
    if args.verbose:
        level = logging.DEBUG
    elif args.quiet:
        level = logging.ERROR
    return ReplConfig(prompt=args.prompt, log_level=level)


def main(argv: list[str] | None = None) -> int:
    """
    CLI entrypoint.

    Args:
        argv: Arguments without the program name (defaults to sys.argv[1:]).

    Returns:
        Exit code.
    """
    config = config_from_args(argv)
    setup_logging(config.log_level)
    return repl(config)
