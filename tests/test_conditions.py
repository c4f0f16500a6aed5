import pytest

from tabledb.catalog import Catalog
from tabledb.errors import ExecutionError, TypeMismatchError
from tabledb.exec.conditions import Condition, bind_condition, evaluate_condition, split_condition
from tabledb.parser import parse_statement
from tabledb.types import IntType, TextType


@pytest.fixture
def users():
    catalog = Catalog()
    catalog.create_table(parse_statement("CREATE TABLE Users (id INT, name TEXT)"))
    return catalog.tables["Users"]


def test_split_condition_three_parts():
    assert split_condition("id = 1") == Condition(column="id", op="=", literal="1")
    assert split_condition("name = 'alice'") == Condition(column="name", op="=", literal="alice")
    assert split_condition('name > "m"') == Condition(column="name", op=">", literal="m")


def test_split_condition_other_shapes():
    assert split_condition("") is None
    assert split_condition("id") is None
    assert split_condition("id = 1 extra") is None


def test_bind_unknown_column(users):
    with pytest.raises(ExecutionError, match=r"Column not found: Users\.age"):
        bind_condition(users, Condition(column="age", op="=", literal="1"))


def test_bind_unsupported_operator(users):
    with pytest.raises(ExecutionError, match="Unsupported operator in WHERE: LIKE"):
        bind_condition(users, Condition(column="name", op="LIKE", literal="b"))


def test_bind_invalid_int_literal(users):
    with pytest.raises(TypeMismatchError):
        bind_condition(users, Condition(column="id", op="=", literal="abc"))


def test_bound_condition_matches_rows(users):
    bound = bind_condition(users, Condition(column="id", op=">", literal="9"))
    assert bound.matches([10, "x"])
    assert not bound.matches([9, "x"])


def test_int_comparison_is_numeric():
    typ = IntType()
    assert evaluate_condition(typ, 10, ">", 9)
    assert evaluate_condition(typ, 2, "<", 10)
    assert evaluate_condition(typ, 5, "=", 5)
    assert not evaluate_condition(typ, 5, "=", 6)


def test_text_comparison_is_case_insensitive():
    typ = TextType()
    assert evaluate_condition(typ, "Alice", "=", "alice")
    assert evaluate_condition(typ, "apple", "<", "Banana")
    assert evaluate_condition(typ, "Zed", ">", "alpha")
    assert not evaluate_condition(typ, "Bob", "=", "Rob")


def test_other_declared_types_compare_as_text():
    typ = TextType(name="DATE")
    assert evaluate_condition(typ, "2024-01-02", ">", "2024-01-01")
