# Argmill Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements `ArgumentProcessor`, the registry of declared arguments
and the single-pass scanner that turns a token list into `Values`.

Registration:
- Option arguments (`-x`, `--xyz`) are stored in a name map. A secondary name
  (`Argument.name("--xyz")`) is another key pointing at the same `Argument`.
- Positional arguments are kept in declaration order and filled one slot at a
  time.

Scanning (`parse_args`), left to right from index 1 (index 0 is the program):
- `---x` is always rejected.
- `--name` dispatches to the option named `name`.
- `-abc` dispatches to `a`, `b` and `c` in turn. Each letter moves the scan
  index forward by one token before dispatching, so `-aaa` counts three times.
- Anything else fills the next positional slot.

After scanning, unset options receive their defaults (and `store_true` /
`store_false` their implied booleans), then required options are checked.

The processor is read-only while parsing; every call builds a fresh `Values`.
"""
from __future__ import annotations

from typing import Sequence

from argmill.exceptions import ConfigureError, ParseError
from argmill.logger import logger
from argmill.parser.argument import Argument
from argmill.parser.argument_action import ArgumentAction
from argmill.parser.parser_types import ArgType
from argmill.parser.values import Values
from argmill.parser.var import Var


class ArgumentProcessor:
    """Registry of arguments and dispatcher for command-line tokens."""

    def __init__(self) -> None:
        self._option_map: dict[str, Argument] = {}
        self._sequences: list[Argument] = []

    def add_argument(self, name: str) -> Argument:
        """
        Declare a new argument.

        Args:
            name (str): "-x" or "--xyz" for an option, a bare word for a positional.

        Returns:
            Argument: The new argument, ready for chained configuration.
        """
        argument = Argument(self)
        argument.set_name(name)
        return argument

    def insert_option(self, name: str, argument: Argument) -> None:
        if name in self._option_map:
            raise ConfigureError("duplicated option name", name)
        self._option_map[name] = argument
        logger.debug("Registered option '%s'", name)

    def add_alias(self, name: str, alias: str) -> None:
        """Make `alias` resolve to the option registered as `name`."""
        if name not in self._option_map:
            raise ConfigureError(f"can not copy option from {name}", alias)
        if alias in self._option_map:
            raise ConfigureError("duplicated option name", alias)
        self._option_map[alias] = self._option_map[name]
        logger.debug("Registered alias '%s' for option '%s'", alias, name)

    def insert_sequence(self, argument: Argument) -> None:
        self._sequences.append(argument)
        logger.debug("Registered positional '%s'", argument.primary_name)

    def get_argument(self, name: str) -> Argument | None:
        """Return the option registered under `name` (or alias), else a positional."""
        if name in self._option_map:
            return self._option_map[name]
        return next((arg for arg in self._sequences if arg.primary_name == name), None)

    def options(self) -> list[Argument]:
        """Unique option arguments, ordered by their first name in sorted order."""
        seen: set[int] = set()
        ordered: list[Argument] = []
        for _, argument in sorted(self._option_map.items()):
            if id(argument) not in seen:
                seen.add(id(argument))
                ordered.append(argument)
        return ordered

    def sequences(self) -> list[Argument]:
        """Positional arguments in declaration order."""
        return list(self._sequences)

    def _dispatch_option(
        self,
        tokens: Sequence[str],
        index: int,
        key: str,
        var_map: dict[str, list[Var]],
    ) -> tuple[int, bool]:
        """
        Hand the tokens after an option marker to the option named `key`.

        Returns:
            tuple[int, bool]: Next scan index and whether help was requested.
        """
        argument = self._option_map.get(key)
        if argument is None:
            raise ParseError(f"option not found: {key}")

        if argument.argument_action == ArgumentAction.HELP:
            return index, True

        dest = argument.destination
        if dest in var_map:
            if not argument.argument_action.accepts_repeats:
                raise ParseError(f"duplicated option, {key}")
            vars = var_map[dest]
        else:
            vars = []
            var_map[dest] = vars

        return argument.parse(tokens, index, vars), False

    def _dispatch_sequence(
        self,
        tokens: Sequence[str],
        index: int,
        seq_index: int,
        var_map: dict[str, list[Var]],
    ) -> int:
        if seq_index >= len(self._sequences):
            raise ParseError(f"too long arguments after {tokens[index]}")
        argument = self._sequences[seq_index]
        vars = var_map.setdefault(argument.destination, [])
        return argument.parse(tokens, index, vars)

    def _check_count_destinations(self) -> None:
        """A count destination may only be shared with other count arguments."""
        count_dests = {
            arg.destination
            for arg in self.options()
            if arg.argument_action == ArgumentAction.COUNT
        }
        for argument in self.options() + self._sequences:
            if (
                argument.argument_action != ArgumentAction.COUNT
                and argument.destination in count_dests
            ):
                raise ConfigureError(
                    "action 'count' cannot share destination", argument.destination
                )

    def _fill_defaults(self, var_map: dict[str, list[Var]]) -> None:
        options = self.options()
        for argument in options:
            dest = argument.destination
            action = argument.argument_action
            if dest in var_map:
                continue

            if action in (
                ArgumentAction.STORE,
                ArgumentAction.APPEND,
                ArgumentAction.STORE_TRUE,
                ArgumentAction.STORE_FALSE,
            ) and argument.default_value:
                var_map[dest] = [Var.build(argument.default_value, argument.value_type)]
            elif action == ArgumentAction.STORE_TRUE:
                var_map[dest] = [Var.build("false", ArgType.BOOLEAN)]
            elif action == ArgumentAction.STORE_FALSE:
                var_map[dest] = [Var.build("true", ArgType.BOOLEAN)]

        for argument in options:
            if argument.is_required and argument.destination not in var_map:
                raise ParseError(f"option '{argument.primary_name}' is required")

    def parse_args(self, tokens: Sequence[str]) -> Values:
        """
        Parse a token list into `Values`.

        Args:
            tokens (Sequence[str]): argv-style tokens; index 0 is the program name.

        Raises:
            ConfigureError: If a registered argument is inconsistently configured.
            ParseError: If the tokens do not match the registered arguments.
        """
        for argument in self.options() + self._sequences:
            argument.check_consistency()
        self._check_count_destinations()

        logger.debug("Parsing %d tokens", max(len(tokens) - 1, 0))
        var_map: dict[str, list[Var]] = {}
        help_requested = False
        seq_index = 0
        index = 1

        while index < len(tokens):
            token = tokens[index]
            if token.startswith("---"):
                raise ParseError(f"too long hyphen. Supporting only 1 or 2: {token}")
            elif token.startswith("--"):
                index, wants_help = self._dispatch_option(
                    tokens, index + 1, token[2:], var_map
                )
                help_requested = help_requested or wants_help
            elif token.startswith("-"):
                if len(token) == 1:
                    raise ParseError(f"option name is empty: {token}")
                for letter in token[1:]:
                    index, wants_help = self._dispatch_option(
                        tokens, index + 1, letter, var_map
                    )
                    help_requested = help_requested or wants_help
            else:
                index = self._dispatch_sequence(tokens, index, seq_index, var_map)
                seq_index += 1

        self._fill_defaults(var_map)
        logger.debug(
            "Parsed destinations: %s (help requested: %s)",
            ", ".join(var_map) or "<none>",
            help_requested,
        )
        return Values(var_map, help_requested=help_requested)

    def __str__(self) -> str:
        required = sum(arg.is_required for arg in self.options())
        return (
            f"ArgumentProcessor(options={len(self.options())}, "
            f"names={len(self._option_map)}, positional={len(self._sequences)}, "
            f"required={required})"
        )

    def __repr__(self) -> str:
        return str(self)
