# Argmill Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements `Parser`, the caller-facing entry point of argmill.

A `Parser` owns an `ArgumentProcessor`, registers `-h/--help` by default, and
renders usage and help text through a Rich console when help is requested.
It never exits the process: user errors surface as `ParseError`, declaration
errors as `ConfigureError`, and the embedding program decides what to do.

Public Interface:
- `add_argument(name)`: Register a new argument and return it for chaining.
- `parse_args(tokens=None)`: Parse argv-style tokens (defaults to `sys.argv`).
- `format_usage()` / `format_help()`: Plain-text usage and help.
- `print_usage()` / `print_help()`: Write them to the console.

Example Usage:
    parser = Parser("backup")
    parser.add_argument("-c").name("--config").set_default("conf.yml") \
        .metavar("FILE").help("Configuration file")
    parser.add_argument("-v").name("--verbose").action("store_true") \
        .help("verbose output")
    parser.add_argument("target").nargs("+")

    values = parser.parse_args(["backup", "-v", "/srv", "/home"])
    values["config"]           # "conf.yml"
    values.is_true("verbose")  # True
    values.size("target")      # 2
"""
from __future__ import annotations

import sys
from typing import Sequence

from rich.console import Console

from argmill.console import console as argmill_console
from argmill.parser.argument import Argument
from argmill.parser.argument_action import ArgumentAction
from argmill.parser.argument_processor import ArgumentProcessor
from argmill.parser.values import Values

LINE_WIDTH = 80
HELP_INDENT = 24
LABEL_WIDTH = HELP_INDENT - 4


class Parser:
    """
    Command-line parser modeled on Python's `argparse.ArgumentParser`.

    Features:
    - Options with one or two names (`-c` / `--config`) and positionals.
    - `nargs` as an exact count or '?', '*', '+'.
    - store, store_const, store_true, store_false, append, append_const,
      count and help actions.
    - str, int and bool value types.
    - Clustered single-letter flags (`-abc`).
    - Usage/help rendering in the classic argparse layout.
    """

    def __init__(
        self,
        prog_name: str = "(none)",
        add_help: bool = True,
        console: Console | None = None,
    ) -> None:
        self.prog_name: str = prog_name
        self.console: Console = console or argmill_console
        self._processor: ArgumentProcessor = ArgumentProcessor()
        if add_help:
            self._add_help()

    def _add_help(self) -> None:
        """Add help argument to the parser."""
        self.add_argument("-h").name("--help").action(ArgumentAction.HELP).help(
            "display help"
        )

    @property
    def processor(self) -> ArgumentProcessor:
        return self._processor

    def add_argument(self, name: str) -> Argument:
        """
        Define a new argument for the parser.

        Args:
            name (str): "-x" / "--xyz" for an option, a bare word for a positional.

        Returns:
            Argument: The registered argument, configured through chained calls.
        """
        return self._processor.add_argument(name)

    def get_argument(self, name: str) -> Argument | None:
        return self._processor.get_argument(name)

    def parse_args(self, tokens: Sequence[str] | None = None) -> Values:
        """
        Parse argv-style tokens into `Values`.

        Index 0 is the program name and is skipped. When help was requested the
        full help text is printed before the values are returned.

        Args:
            tokens (Sequence[str] | None): Tokens to parse; `sys.argv` if None.

        Returns:
            Values: Parsed values per destination.
        """
        if tokens is None:
            tokens = sys.argv
        values = self._processor.parse_args(list(tokens))
        if values.is_help_requested():
            self.print_help()
        return values

    def format_usage(self) -> str:
        """
        Render the usage line, wrapped to 80 columns.

        Returns:
            str: e.g. "usage: prog [-a VAL] [-h] x y"
        """
        lines: list[str] = []
        line = f"usage: {self.prog_name}"
        indent = " " * (len(line) + 1)

        for argument in self._processor.options() + self._processor.sequences():
            usage = argument.get_usage_text()
            if len(line) + len(usage) + 1 > LINE_WIDTH:
                lines.append(line)
                line = indent
            if argument.is_required or not argument.is_option:
                line += f" {usage}"
            else:
                line += f" [{usage}]"

        lines.append(line)
        return "\n".join(lines)

    @staticmethod
    def _format_help_line(argument: Argument) -> str:
        if argument.is_option:
            label = argument.get_usage_text()
            secondary = argument.get_secondary_usage_text()
            if secondary:
                label = f"{label}, {secondary}"
        else:
            label = argument.primary_name

        help_text = argument.help_text
        line = f"  {label:<{HELP_INDENT - 2}}"
        help_width = LINE_WIDTH - HELP_INDENT

        if len(label) > LABEL_WIDTH:
            if len(help_text) < help_width:
                return f"{line}\n{'':<{HELP_INDENT}}{help_text}"
            return f"{line}\n{help_text:>{LINE_WIDTH}}"
        if len(help_text) > help_width:
            return f"{line}\n{help_text:>{LINE_WIDTH}}"
        return f"{line}{help_text}"

    def format_help(self) -> str:
        """
        Render usage followed by the positional and optional argument sections.
        """
        lines = [self.format_usage(), "", "positional arguments:"]
        lines.extend(
            self._format_help_line(argument)
            for argument in self._processor.sequences()
        )
        lines.extend(["", "optional arguments:"])
        lines.extend(
            self._format_help_line(argument) for argument in self._processor.options()
        )
        return "\n".join(lines)

    def print_usage(self) -> None:
        self.console.print(
            self.format_usage(), markup=False, highlight=False, soft_wrap=True
        )

    def print_help(self) -> None:
        """Print usage and help text using Rich output."""
        self.console.print(
            self.format_help(), markup=False, highlight=False, soft_wrap=True
        )

    def __str__(self) -> str:
        options = self._processor.options()
        required = sum(arg.is_required for arg in options)
        return (
            f"Parser(prog={self.prog_name}, options={len(options)}, "
            f"positional={len(self._processor.sequences())}, required={required})"
        )

    def __repr__(self) -> str:
        return str(self)
