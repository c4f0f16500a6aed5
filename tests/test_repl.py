import logging

from tabledb import Database
from tabledb.repl import ReplConfig, config_from_args, repl


def feed(monkeypatch, lines):
    it = iter(lines)

    def fake_input(prompt=""):
        try:
            return next(it)
        except StopIteration:
            raise EOFError

    monkeypatch.setattr("builtins.input", fake_input)


def test_repl_runs_statements_until_exit(monkeypatch, capsys):
    db = Database()
    feed(
        monkeypatch,
        [
            "  CREATE TABLE Users (id INT, name TEXT);  ",
            "INSERT INTO Users (1, 'Bob');",
            "SELECT * FROM Users;",
            "EXIT;",
            "INSERT INTO Users (2, 'Never');",
        ],
    )
    assert repl(ReplConfig(), db) == 0
    out = capsys.readouterr().out
    assert "Table Users created successfully with 2 columns." in out
    assert "1, Bob" in out
    assert db.catalog.tables["Users"].rows == [[1, "Bob"]]


def test_repl_reports_errors_and_continues(monkeypatch, capsys):
    feed(monkeypatch, ["SELECT * FROM Nope;", "CREATE TABLE t (a INT)"])
    assert repl(ReplConfig()) == 0
    out = capsys.readouterr().out
    assert "Error: Table not found: Nope" in out
    assert "Table t created successfully with 1 columns." in out


def test_repl_meta_commands(monkeypatch, capsys):
    db = Database()
    db.run("CREATE TABLE Users (id INT INDEXED, name TEXT)")
    feed(monkeypatch, [".tables", ".schema Users", ".schema", ".bogus", ".quit", ".tables"])
    assert repl(ReplConfig(), db) == 0
    out = capsys.readouterr().out
    assert "Users\n" in out
    assert "TABLE Users (0 rows)" in out
    assert "  - id INT INDEXED" in out
    assert "  - name TEXT" in out
    assert "Usage: .schema <table>" in out
    assert "Unknown command: .bogus" in out


def test_config_from_args():
    assert config_from_args([]) == ReplConfig()
    assert config_from_args(["-v"]).log_level == logging.DEBUG
    assert config_from_args(["--quiet", "--prompt", "sql> "]) == ReplConfig(
        prompt="sql> ", log_level=logging.ERROR
    )
