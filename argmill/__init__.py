"""
Argmill Argument Parser

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .exceptions import (
    ArgmillError,
    ConfigureError,
    ParseError,
    ValuesIndexError,
    ValuesKeyError,
    VarTypeError,
)
from .logger import logger
from .parser import Argument, ArgumentAction, ArgType, Nargs, Parser, Values
from .utils import setup_logging

__all__ = [
    "Parser",
    "Argument",
    "ArgumentAction",
    "ArgType",
    "Nargs",
    "Values",
    "ArgmillError",
    "ConfigureError",
    "ParseError",
    "ValuesKeyError",
    "ValuesIndexError",
    "VarTypeError",
    "logger",
    "setup_logging",
]
