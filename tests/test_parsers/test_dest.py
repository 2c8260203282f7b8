import pytest

from argmill.exceptions import ConfigureError, ParseError
from argmill.parser import Parser


def test_dest_defaults_to_primary_name():
    parser = Parser("test")
    parser.add_argument("-a")
    values = parser.parse_args(["./test", "-a", "v"])
    assert values["a"] == "v"


def test_dest_defaults_to_secondary_name():
    parser = Parser("test")
    parser.add_argument("-a").name("--apple")

    values = parser.parse_args(["./test", "-a", "v"])
    assert values["apple"] == "v"
    assert not values.is_set("a")

    values = parser.parse_args(["./test", "--apple", "w"])
    assert values["apple"] == "w"


def test_explicit_dest():
    parser = Parser("test")
    parser.add_argument("-a").name("--apple").dest("fruit")
    values = parser.parse_args(["./test", "--apple", "v"])
    assert values["fruit"] == "v"
    assert values.destinations() == ["fruit"]


def test_positional_dest():
    parser = Parser("test")
    parser.add_argument("src").dest("source")
    values = parser.parse_args(["./test", "file.txt"])
    assert values["source"] == "file.txt"


def test_shared_dest_appends():
    parser = Parser("test")
    parser.add_argument("-x").action("append_const").set_const("x").dest("marks")
    parser.add_argument("-y").action("append_const").set_const("y").dest("marks")
    values = parser.parse_args(["./test", "-x", "-y", "-x"])
    assert [values.get_string("marks", i) for i in range(3)] == ["x", "y", "x"]


def test_shared_dest_store_is_duplicated():
    parser = Parser("test")
    parser.add_argument("-x").dest("out")
    parser.add_argument("-y").dest("out")
    with pytest.raises(ParseError, match="duplicated option, y"):
        parser.parse_args(["./test", "-x", "1", "-y", "2"])


def test_empty_dest_rejected():
    parser = Parser("test")
    with pytest.raises(ConfigureError):
        parser.add_argument("-a").dest("")


def test_count_cannot_share_dest_with_store():
    parser = Parser("test")
    parser.add_argument("-a").dest("x")
    parser.add_argument("-c").action("count").dest("x")

    with pytest.raises(
        ConfigureError, match="action 'count' cannot share destination, 'x'"
    ):
        parser.parse_args(["./test", "-a", "v", "-c"])


def test_count_cannot_share_dest_with_append():
    parser = Parser("test")
    parser.add_argument("-a").action("append").nargs(2).dest("x")
    parser.add_argument("-c").action("count").dest("x")

    with pytest.raises(ConfigureError, match="cannot share destination"):
        parser.parse_args(["./test", "-a", "v", "w", "-c"])


def test_count_arguments_may_share_dest():
    parser = Parser("test")
    parser.add_argument("-v").action("count").dest("level")
    parser.add_argument("-w").action("count").dest("level")

    values = parser.parse_args(["./test", "-v", "-w", "-vv"])
    assert values.get_int("level") == 4
