import pytest

from tabledb.ast import CreateTable, Direction, Insert, OrderBy, Select
from tabledb.errors import SqlSyntaxError, UnexpectedEndOfStatement
from tabledb.lexer import TokenKind, tokenize
from tabledb.parser import parse_create, parse_insert, parse_select, parse_statement
from tabledb.types import IntType, TextType


def test_parse_create_keeps_declaration_order():
    cmd = parse_create(tokenize("CREATE TABLE Users (id INT INDEXED, name TEXT, born DATE);"))
    assert cmd.table_name == "Users"
    assert [c.name for c in cmd.columns] == ["id", "name", "born"]
    assert [c.indexed for c in cmd.columns] == [True, False, False]
    assert isinstance(cmd.columns[0].typ, IntType)
    assert cmd.columns[1].typ == TextType(name="TEXT")
    assert cmd.columns[2].typ == TextType(name="DATE")


def test_parse_create_table_keyword_is_optional():
    cmd = parse_create(tokenize("create Users (id int)"))
    assert cmd.table_name == "Users"
    assert isinstance(cmd.columns[0].typ, IntType)


def test_parse_create_missing_paren():
    with pytest.raises(SqlSyntaxError, match=r"Expected '\(' after table name"):
        parse_create(tokenize("CREATE TABLE Users id INT)"))


def test_parse_create_missing_type():
    with pytest.raises(SqlSyntaxError, match="Expected column type"):
        parse_create(tokenize("CREATE TABLE Users (id, name TEXT)"))


def test_parse_create_requires_a_column():
    with pytest.raises(SqlSyntaxError, match="Expected column name"):
        parse_create(tokenize("CREATE TABLE Users ()"))


def test_parse_create_truncated_is_unexpected_end():
    with pytest.raises(UnexpectedEndOfStatement):
        parse_create(tokenize("CREATE TABLE Users (id INT"))


def test_trailing_tokens_are_rejected():
    with pytest.raises(SqlSyntaxError, match="Unexpected token after end of statement"):
        parse_create(tokenize("CREATE TABLE Users (id INT); extra"))


def test_parse_insert_values():
    cmd = parse_insert(tokenize("INSERT INTO Users (1, 'Bob', \"Smith\");"))
    assert cmd.table_name == "Users"
    assert [(v.kind, v.text) for v in cmd.values] == [
        (TokenKind.NUMBER, "1"),
        (TokenKind.STRING, "Bob"),
        (TokenKind.STRING, "Smith"),
    ]


def test_parse_insert_skips_non_literal_tokens():
    cmd = parse_insert(tokenize("INSERT INTO Users VALUES (1 foo, 'x')"))
    assert [v.text for v in cmd.values] == ["1", "x"]


def test_parse_insert_does_not_check_arity():
    cmd = parse_insert(tokenize("INSERT INTO Users ()"))
    assert cmd == Insert(table_name="Users", values=())


def test_parse_insert_missing_into():
    with pytest.raises(SqlSyntaxError, match="Expected INTO after INSERT"):
        parse_insert(tokenize("INSERT Users (1)"))


def test_parse_insert_unclosed_values():
    with pytest.raises(UnexpectedEndOfStatement):
        parse_insert(tokenize("INSERT INTO Users (1, 2"))


def test_parse_select_star_with_where():
    cmd = parse_select(tokenize("SELECT * FROM Users WHERE id = 1;"))
    assert cmd == Select(table_name="Users", columns=("*",), where="id = 1", order_by=())


def test_parse_select_columns_where_and_order_by():
    cmd = parse_select(
        tokenize("SELECT id, name FROM Users WHERE name = 'Bob' ORDER BY id DESC, name")
    )
    assert cmd.columns == ("id", "name")
    assert cmd.where == "name = 'Bob'"
    assert cmd.order_by == (
        OrderBy(column="id", direction=Direction.DESC),
        OrderBy(column="name", direction=Direction.ASC),
    )


def test_parse_select_where_keeps_any_shape():
    cmd = parse_select(tokenize("SELECT * FROM t WHERE a = 1 b c;"))
    assert cmd.where == "a = 1 b c"


def test_parse_select_empty_where():
    with pytest.raises(SqlSyntaxError, match="Expected condition after WHERE"):
        parse_select(tokenize("SELECT * FROM t WHERE;"))


def test_parse_select_missing_from():
    with pytest.raises(SqlSyntaxError, match="Expected FROM"):
        parse_select(tokenize("SELECT * Users"))


def test_parse_select_missing_table():
    with pytest.raises(UnexpectedEndOfStatement):
        parse_select(tokenize("SELECT * FROM"))


def test_parse_statement_dispatch():
    assert isinstance(parse_statement("CREATE TABLE t (a INT)"), CreateTable)
    assert isinstance(parse_statement("insert into t (1)"), Insert)
    assert isinstance(parse_statement("SELECT * FROM t"), Select)


def test_parse_statement_empty_input():
    with pytest.raises(SqlSyntaxError, match="No input detected"):
        parse_statement("   ")


def test_parse_statement_unknown_command():
    with pytest.raises(SqlSyntaxError, match="Unknown or incorrect command"):
        parse_statement("DROP TABLE Users;")
