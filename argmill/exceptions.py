# Argmill Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes used by argmill.

Configuration mistakes made while declaring arguments raise `ConfigureError`.
Malformed user input found while scanning a token list raises `ParseError`.
Lookups against parsed `Values` raise lookup errors that also inherit from the
matching builtin, so callers can catch `KeyError`, `IndexError` or `TypeError`
directly.

All exceptions inherit from `ArgmillError`, the base exception for the package.

Exception Hierarchy:
- ArgmillError
    ├── ConfigureError
    ├── ParseError
    ├── ValuesKeyError    (also KeyError)
    ├── ValuesIndexError  (also IndexError)
    └── VarTypeError      (also TypeError)
"""


class ArgmillError(Exception):
    """Base exception for argmill."""


class ConfigureError(ArgmillError):
    """Exception raised when an argument is declared in an invalid way."""

    def __init__(self, message: str, target: str = ""):
        self.message = message
        self.target = target
        if target:
            super().__init__(f"{message}, '{target}'")
        else:
            super().__init__(message)


class ParseError(ArgmillError):
    """Exception raised when a token list does not match the declared arguments."""


class ValuesKeyError(ArgmillError, KeyError):
    """Exception raised when a destination is missing from parsed values."""

    def __init__(self, key: str, message: str = "not found in options"):
        self.key = key
        super().__init__(f"'{key}': {message}")

    def __str__(self) -> str:
        return str(self.args[0])


class ValuesIndexError(ArgmillError, IndexError):
    """Exception raised when a value index is beyond the stored values."""


class VarTypeError(ArgmillError, TypeError):
    """Exception raised when a value is read through the wrong accessor."""
