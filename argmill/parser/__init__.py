"""
Argmill Argument Parser

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .argument import Argument
from .argument_action import ArgumentAction
from .argument_parser import Parser
from .argument_processor import ArgumentProcessor
from .parser_types import ArgFormat, ArgType, Nargs
from .values import Values
from .var import BooleanVar, IntegerVar, NullVar, StringVar, Var

__all__ = [
    "Argument",
    "ArgumentAction",
    "ArgumentProcessor",
    "ArgFormat",
    "ArgType",
    "Nargs",
    "Parser",
    "Values",
    "Var",
    "IntegerVar",
    "StringVar",
    "BooleanVar",
    "NullVar",
]
