import pytest

from argmill.exceptions import (
    ArgmillError,
    ValuesIndexError,
    ValuesKeyError,
    VarTypeError,
)
from argmill.parser import BooleanVar, IntegerVar, NullVar, Parser, StringVar, Values


@pytest.fixture
def values():
    return Values(
        {
            "name": [StringVar("alice"), StringVar("bob")],
            "count": [IntegerVar("0x1f")],
            "verbose": [BooleanVar("true")],
            "maybe": [NullVar()],
            "empty": [],
        }
    )


def test_typed_getters(values):
    assert values.get_string("name") == "alice"
    assert values.get_string("name", 1) == "bob"
    assert values.get_int("count") == 31
    assert values.get_string("count") == "0x1f"
    assert values.is_true("verbose")
    assert values.get_string("verbose") == "true"
    assert values["name"] == "alice"


def test_size_and_is_set(values):
    assert values.size("name") == 2
    assert values.size("empty") == 0
    assert values.is_set("empty")
    assert values.size("missing") == 0
    assert not values.is_set("missing")
    assert "name" in values
    assert "missing" not in values


def test_missing_destination(values):
    with pytest.raises(ValuesKeyError, match="not found in options"):
        values.get_string("missing")

    with pytest.raises(KeyError):
        values["missing"]

    with pytest.raises(ArgmillError):
        values.get_vars("missing")


def test_index_out_of_range(values):
    with pytest.raises(ValuesIndexError):
        values.get_string("name", 2)

    with pytest.raises(IndexError):
        values.get_string("empty")

    with pytest.raises(IndexError):
        values.get_var("name", -1)


def test_wrong_accessor(values):
    with pytest.raises(VarTypeError):
        values.get_int("name")

    with pytest.raises(TypeError):
        values.is_true("count")

    with pytest.raises(VarTypeError, match="not has a string value"):
        values.get_string("maybe")


def test_null_var(values):
    assert values.get_var("maybe").is_null()
    assert not values.get_var("name").is_null()


def test_to_dict_and_iteration(values):
    assert values.to_dict() == {
        "name": ["alice", "bob"],
        "count": [31],
        "verbose": [True],
        "maybe": [None],
        "empty": [],
    }
    assert list(values) == ["name", "count", "verbose", "maybe", "empty"]
    assert values.destinations() == list(values)
    assert len(values) == 5


def test_values_are_immutable_snapshots():
    source = {"a": [StringVar("x")]}
    values = Values(source)
    source["a"].append(StringVar("y"))
    assert values.size("a") == 1
    assert isinstance(values.get_vars("a"), tuple)


def test_help_requested_flag():
    assert not Values().is_help_requested()
    assert Values(help_requested=True).is_help_requested()
    assert len(Values()) == 0


def test_parse_to_dict():
    parser = Parser("test")
    parser.add_argument("-n").nargs("+").type("int")
    parser.add_argument("-v").action("store_true")
    parser.add_argument("file")

    values = parser.parse_args(["./test", "in.txt", "-n", "1", "2"])
    assert values.to_dict() == {"file": ["in.txt"], "n": [1, 2], "v": [False]}
    assert "Values(" in repr(values)
