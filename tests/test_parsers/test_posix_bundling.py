import pytest

from argmill.exceptions import ParseError
from argmill.parser import Parser


@pytest.fixture
def flags_parser():
    parser = Parser("test")
    parser.add_argument("-a").action("store_true")
    parser.add_argument("-b").action("store_true")
    parser.add_argument("-c").action("store_true")
    return parser


def test_clustered_flags(flags_parser):
    values = flags_parser.parse_args(["./test", "-abc"])
    assert values.is_true("a")
    assert values.is_true("b")
    assert values.is_true("c")


def test_clustered_flags_partial(flags_parser):
    values = flags_parser.parse_args(["./test", "-ca"])
    assert values.is_true("a")
    assert not values.is_true("b")
    assert values.is_true("c")


def test_clustered_unknown_letter(flags_parser):
    with pytest.raises(ParseError, match="option not found: z"):
        flags_parser.parse_args(["./test", "-abz"])


def test_clustered_repeat_is_duplicated(flags_parser):
    with pytest.raises(ParseError, match="duplicated option, a"):
        flags_parser.parse_args(["./test", "-aa"])


def test_each_letter_advances_one_token():
    parser = Parser("test")
    parser.add_argument("-a").action("store_true")
    parser.add_argument("-b")

    # -a moves past "skipped" before -b starts reading its value.
    values = parser.parse_args(["./test", "-ab", "skipped", "v"])
    assert values.is_true("a")
    assert values["b"] == "v"
    assert values.size("b") == 1


def test_clustered_value_option_last():
    parser = Parser("test")
    parser.add_argument("-b")

    values = parser.parse_args(["./test", "-b", "v"])
    assert values["b"] == "v"


def test_lone_hyphen_is_rejected(flags_parser):
    with pytest.raises(ParseError, match="option name is empty"):
        flags_parser.parse_args(["./test", "-"])


def test_three_hyphens_rejected(flags_parser):
    with pytest.raises(ParseError, match="too long hyphen"):
        flags_parser.parse_args(["./test", "---a"])


def test_double_hyphen_alone_is_unknown_option(flags_parser):
    with pytest.raises(ParseError, match="option not found"):
        flags_parser.parse_args(["./test", "--"])
