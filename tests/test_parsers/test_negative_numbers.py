import pytest

from argmill.exceptions import ParseError
from argmill.parser import Parser


def test_negative_number_ends_option_values():
    parser = Parser("test")
    parser.add_argument("-a").type("int")

    with pytest.raises(ParseError, match="must have 1 arguments"):
        parser.parse_args(["./test", "-a", "-1"])


def test_negative_number_is_read_as_an_option_cluster():
    parser = Parser("test")
    parser.add_argument("n").type(int)

    with pytest.raises(ParseError, match="option not found: 5"):
        parser.parse_args(["./test", "-5"])


def test_negative_number_after_optional_value():
    parser = Parser("test")
    parser.add_argument("-a").nargs("?").type("int")

    with pytest.raises(ParseError, match="option not found: 1"):
        parser.parse_args(["./test", "-a", "-1"])


def test_negative_number_through_default():
    parser = Parser("test")
    parser.add_argument("-a").type("int").set_default("-3")

    values = parser.parse_args(["./test"])
    assert values.get_int("a") == -3


def test_negative_number_through_const():
    parser = Parser("test")
    parser.add_argument("-a").type("int").action("store_const").set_const("-0x10")

    values = parser.parse_args(["./test", "-a"])
    assert values.get_int("a") == -16
