# Argmill Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Small enums shared by the argmill argument parser.

Contents:
- `ArgFormat`: whether an argument is a hyphen-prefixed option or a positional
  sequence slot.
- `Nargs`: the cardinality rule deciding how many tokens one occurrence takes.
- `ArgType`: the value type tokens are coerced to. Lookup accepts the enum,
  its keyword (`"str"`, `"int"`, `"bool"`) or the matching Python builtin.
"""
from __future__ import annotations

from enum import Enum


class ArgFormat(Enum):
    """How an argument is identified on the command line."""

    OPTION = "option"
    SEQUENCE = "sequence"

    def __str__(self) -> str:
        return self.value


class Nargs(Enum):
    """Cardinality of a single argument occurrence."""

    NUMBER = "N"
    QUESTION = "?"
    ASTERISK = "*"
    PLUS = "+"

    @classmethod
    def symbols(cls) -> tuple[str, ...]:
        """Return the symbolic nargs values accepted by `Argument.nargs`."""
        return tuple(member.value for member in cls if member is not cls.NUMBER)

    def __str__(self) -> str:
        return self.value


class ArgType(Enum):
    """Type used to coerce argument tokens into values."""

    STRING = "str"
    INTEGER = "int"
    BOOLEAN = "bool"

    @classmethod
    def _missing_(cls, value: object) -> ArgType:
        builtins = {str: cls.STRING, int: cls.INTEGER, bool: cls.BOOLEAN}
        if isinstance(value, type) and value in builtins:
            return builtins[value]
        if isinstance(value, str):
            normalized = value.strip().lower()
            for member in cls:
                if member.value == normalized:
                    return member
        valid = ", ".join(member.value for member in cls)
        raise ValueError(f"Invalid {cls.__name__}: {value!r}. Must be one of: {valid}")

    def __str__(self) -> str:
        return self.value
