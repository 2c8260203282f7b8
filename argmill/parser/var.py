# Argmill Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Typed value wrappers produced while parsing.

Every token (or synthesized default, const or null) that reaches a `Values`
container is wrapped in one `Var`. Constructors never raise: a token that does
not coerce to the declared type leaves the instance invalid with an error
message. `Var.build()` is the factory used by the parser; it turns an invalid
construction into a `ParseError`.

Variants:
- `IntegerVar`: an `int` plus the text it was parsed from.
- `StringVar`: the token verbatim.
- `BooleanVar`: `True` / `False` from the literals "true" / "false".
- `NullVar`: "nargs='?' matched nothing"; carries no value.

Accessors that the variant cannot answer raise `VarTypeError`.
"""
from __future__ import annotations

import re
from abc import ABC, abstractmethod
from typing import Any

from argmill.exceptions import ParseError, VarTypeError
from argmill.parser.parser_types import ArgType

INTEGER_PATTERN = re.compile(r"\s*([+-]?)(0[xX][0-9a-fA-F]+|0[0-7]*|[1-9][0-9]*)")


def parse_integer(text: str) -> int | None:
    """
    Parse `text` with C-style base detection (`0x` hex, leading `0` octal,
    otherwise decimal).

    Returns:
        int | None: The parsed value, or None unless the whole string is a number.
    """
    match = INTEGER_PATTERN.fullmatch(text)
    if match is None:
        return None
    sign, digits = match.groups()
    if digits[:2] in ("0x", "0X"):
        value = int(digits[2:], 16)
    elif digits.startswith("0"):
        value = int(digits, 8)
    else:
        value = int(digits, 10)
    return -value if sign == "-" else value


class Var(ABC):
    """Base class for parsed values."""

    def __init__(self) -> None:
        self._valid: bool = True
        self._error: str = ""

    def _invalidate(self, message: str) -> None:
        self._valid = False
        self._error = message

    def is_valid(self) -> bool:
        return self._valid

    @property
    def error(self) -> str:
        return self._error

    @property
    @abstractmethod
    def value(self) -> Any:
        """Native Python value held by this var."""
        raise NotImplementedError("value must be implemented by subclasses")

    def to_string(self) -> str:
        raise VarTypeError("not has a string value")

    def to_int(self) -> int:
        raise VarTypeError("not has an integer value")

    def is_true(self) -> bool:
        raise VarTypeError("not has a boolean value")

    def is_null(self) -> bool:
        return False

    @staticmethod
    def build(text: str, arg_type: ArgType) -> Var:
        """
        Build a var of the given type from `text`.

        Raises:
            ParseError: If `text` cannot be coerced to `arg_type`.
        """
        var: Var
        if arg_type == ArgType.INTEGER:
            var = IntegerVar(text)
        elif arg_type == ArgType.BOOLEAN:
            var = BooleanVar(text)
        else:
            var = StringVar(text)

        if not var.is_valid():
            raise ParseError(var.error)
        return var


class IntegerVar(Var):
    def __init__(self, text: str) -> None:
        super().__init__()
        self._text = text
        parsed = parse_integer(text)
        if parsed is None:
            self._number = 0
            self._invalidate(f"Invalid number format: {text}")
        else:
            self._number = parsed

    @property
    def value(self) -> int:
        return self._number

    def to_string(self) -> str:
        return self._text

    def to_int(self) -> int:
        return self._number

    def increment(self) -> None:
        """Add one to the stored number, keeping the text in sync."""
        self._number += 1
        self._text = str(self._number)

    def __repr__(self) -> str:
        return f"IntegerVar({self._number})"


class StringVar(Var):
    def __init__(self, text: str) -> None:
        super().__init__()
        self._text = text

    @property
    def value(self) -> str:
        return self._text

    def to_string(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f"StringVar({self._text!r})"


class BooleanVar(Var):
    TRUE_TEXT = "true"
    FALSE_TEXT = "false"

    def __init__(self, text: str) -> None:
        super().__init__()
        self._text = text
        self._flag = text == self.TRUE_TEXT
        if text not in (self.TRUE_TEXT, self.FALSE_TEXT):
            self._invalidate(
                f"Invalid bool format: {text}, should be "
                f"{self.TRUE_TEXT} or {self.FALSE_TEXT}"
            )

    @property
    def value(self) -> bool:
        return self._flag

    def to_string(self) -> str:
        return self._text

    def is_true(self) -> bool:
        return self._flag

    def __repr__(self) -> str:
        return f"BooleanVar({self._flag})"


class NullVar(Var):
    @property
    def value(self) -> None:
        return None

    def is_null(self) -> bool:
        return True

    def __repr__(self) -> str:
        return "NullVar()"
