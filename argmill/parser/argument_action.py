# Argmill Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `ArgumentAction`, an enum used to standardize what happens when an
argument occurrence is found on the command line.

Each member maps to one of the `argparse` actions argmill supports. Keyword
lookup goes through the enum itself, so `Argument.action("store_true")` and
`Argument.action(ArgumentAction.STORE_TRUE)` are equivalent.

Exports:
    - ArgumentAction: Enum of allowed actions for arguments.

Example:
    ArgumentAction("store_true") → ArgumentAction.STORE_TRUE
    ArgumentAction("true")       → ArgumentAction.STORE_TRUE (via alias)
"""
from __future__ import annotations

from enum import Enum


class ArgumentAction(Enum):
    """
    Defines the action to be taken when the argument is encountered.

    Members:
        STORE: Store the provided value(s) (default).
        STORE_CONST: Store the configured const value.
        STORE_TRUE: Store `true` if the flag is present, `false` otherwise.
        STORE_FALSE: Store `false` if the flag is present, `true` otherwise.
        APPEND: Append the provided value(s) on every occurrence.
        APPEND_CONST: Append the configured const value on every occurrence.
        COUNT: Count the number of occurrences.
        HELP: Request help output.

    Aliases:
        - "true" → "store_true"
        - "false" → "store_false"
    """

    STORE = "store"
    STORE_CONST = "store_const"
    STORE_TRUE = "store_true"
    STORE_FALSE = "store_false"
    APPEND = "append"
    APPEND_CONST = "append_const"
    COUNT = "count"
    HELP = "help"

    @classmethod
    def choices(cls) -> list[ArgumentAction]:
        """Return a list of all argument actions."""
        return list(cls)

    @classmethod
    def _get_alias(cls, value: str) -> str:
        aliases = {
            "true": "store_true",
            "false": "store_false",
        }
        return aliases.get(value, value)

    @classmethod
    def _missing_(cls, value: object) -> ArgumentAction:
        if not isinstance(value, str):
            raise ValueError(f"Invalid {cls.__name__}: {value!r}")
        normalized = value.strip().lower()
        alias = cls._get_alias(normalized)
        for member in cls:
            if member.value == alias:
                return member
        valid = ", ".join(member.value for member in cls)
        raise ValueError(f"Invalid {cls.__name__}: '{value}'. Must be one of: {valid}")

    @property
    def accepts_repeats(self) -> bool:
        """True if the action may occur more than once for the same destination."""
        return self in (
            ArgumentAction.APPEND,
            ArgumentAction.APPEND_CONST,
            ArgumentAction.COUNT,
        )

    def __str__(self) -> str:
        """Return the string representation of the argument action."""
        return self.value
