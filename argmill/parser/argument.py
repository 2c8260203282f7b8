# Argmill Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `Argument`, the per-argument configuration object returned by
`Parser.add_argument()` and `ArgumentProcessor.add_argument()`.

Arguments are configured through chained builder calls, mirroring the keyword
arguments of Python's `argparse.add_argument`:

    parser.add_argument("-c").name("--config").set_default("conf.yml") \
        .metavar("FILE").help("Configuration file")

Each builder call validates its own input immediately. Rules that depend on
several settings at once (action vs. nargs vs. const) are enforced by
`check_consistency()`, which the processor runs before every parse.

During parsing an `Argument` consumes tokens according to its action and
cardinality and appends the resulting `Var` instances to the destination list
it is handed. It never mutates its own configuration while parsing.

Key Attributes (read-only properties):
- `primary_name` / `secondary_name`: option names without hyphens
- `arg_format`: `ArgFormat.OPTION` or `ArgFormat.SEQUENCE`
- `cardinality` / `nargs_count`: `Nargs` rule and exact count for `Nargs.NUMBER`
- `argument_action`: `ArgumentAction` applied per occurrence
- `value_type`: `ArgType` tokens are coerced to
- `destination`: key in the parsed `Values`
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, Sequence

from argmill.exceptions import ConfigureError, ParseError
from argmill.parser.argument_action import ArgumentAction
from argmill.parser.parser_types import ArgFormat, ArgType, Nargs
from argmill.parser.var import IntegerVar, NullVar, Var

if TYPE_CHECKING:
    from argmill.parser.argument_processor import ArgumentProcessor


class Argument:
    """
    Represents one command-line argument.

    Builder methods return the argument itself so calls can be chained.
    """

    def __init__(self, processor: ArgumentProcessor | None = None) -> None:
        self._processor = processor
        self._arg_format: ArgFormat | None = None
        self._name: str = ""
        self._secondary_name: str = ""
        self._nargs: Nargs = Nargs.NUMBER
        self._nargs_count: int = 1
        self._const: str = ""
        self._default: str = ""
        self._type: ArgType = ArgType.STRING
        self._choices: tuple[str, ...] = ()
        self._required: bool = False
        self._help: str = ""
        self._metavar: str = ""
        self._dest: str = ""
        self._action: ArgumentAction = ArgumentAction.STORE

    @staticmethod
    def extract_option_name(name: str) -> str:
        """
        Strip the option prefix from `name`.

        Returns:
            str: The option name, or "" if `name` is not an option.

        Raises:
            ConfigureError: If the prefix or the remaining name is malformed.
        """
        if name.startswith("---"):
            raise ConfigureError("too long hyphen. Supporting only 1 or 2", name)
        if name.startswith("--"):
            option_name = name[2:]
            if len(option_name) <= 1:
                raise ConfigureError("option name must be 2 letters and up for --", name)
            return option_name
        if name.startswith("-"):
            option_name = name[1:]
            if len(option_name) != 1:
                raise ConfigureError("option name must be 1 letter for -", name)
            return option_name
        return ""

    def set_name(self, name: str) -> str:
        """
        Set the primary name and register the argument with its processor.

        Can be called only once; `ArgumentProcessor.add_argument` does it.
        """
        if self._name:
            raise ConfigureError("can not redefine name", name)
        if not name:
            raise ConfigureError("argument name must not be empty", name)

        option_name = self.extract_option_name(name)
        if option_name:
            self._name = option_name
            self._arg_format = ArgFormat.OPTION
        else:
            self._name = name
            self._arg_format = ArgFormat.SEQUENCE

        if self._processor is not None:
            if self._arg_format == ArgFormat.OPTION:
                self._processor.insert_option(self._name, self)
            else:
                self._processor.insert_sequence(self)
        return self._name

    # Builder methods

    def name(self, name: str) -> Argument:
        """Set a secondary option name, e.g. "--sum" for "-s"."""
        if self._arg_format != ArgFormat.OPTION:
            raise ConfigureError(
                "second name is allowed for only option, not sequence", self._name
            )
        option_name = self.extract_option_name(name)
        if not option_name:
            raise ConfigureError("second name must be option format, e.g. -a", name)
        if self._processor is not None:
            self._processor.add_alias(self._name, option_name)
        self._secondary_name = option_name
        return self

    def action(self, action: ArgumentAction | str) -> Argument:
        if not isinstance(action, ArgumentAction):
            try:
                action = ArgumentAction(action)
            except ValueError:
                raise ConfigureError(
                    f"{action} is not matched with keywords", self._name
                ) from None
        self._action = action
        if action == ArgumentAction.COUNT:
            self._type = ArgType.INTEGER
        return self

    def nargs(self, nargs: int | str) -> Argument:
        """Set the cardinality: an exact count >= 1, or one of '?', '*', '+'."""
        if isinstance(nargs, bool):
            raise ConfigureError(f"Invalid argument: {nargs}", self._name)
        if isinstance(nargs, int):
            if nargs < 1:
                raise ConfigureError("nargs must be a positive integer", self._name)
            self._nargs = Nargs.NUMBER
            self._nargs_count = nargs
            return self
        if isinstance(nargs, str) and nargs in Nargs.symbols():
            self._nargs = Nargs(nargs)
            self._nargs_count = 0
            return self
        raise ConfigureError(f"Invalid argument: {nargs}", self._name)

    def set_const(self, const: str) -> Argument:
        self._const = const
        return self

    def set_default(self, default: str) -> Argument:
        self._default = default
        return self

    def type(self, value_type: ArgType | str | type) -> Argument:
        """Set the value type by enum, keyword ("str", "int", "bool") or builtin."""
        try:
            self._type = ArgType(value_type)
        except ValueError:
            raise ConfigureError(f"invalid keyword: {value_type}", self._name) from None
        return self

    def choices(self, choices: Iterable[str]) -> Argument:
        """Restrict the tokens this argument accepts."""
        if isinstance(choices, (str, dict)):
            raise ConfigureError("choices must be a list, tuple or set", self._name)
        self._choices = tuple(str(choice) for choice in choices)
        return self

    def required(self, required: bool = True) -> Argument:
        self._required = required
        return self

    def help(self, help_text: str) -> Argument:
        self._help = help_text
        return self

    def metavar(self, metavar: str) -> Argument:
        self._metavar = metavar
        return self

    def dest(self, dest: str) -> Argument:
        if not dest:
            raise ConfigureError("dest must not be empty", self._name)
        self._dest = dest
        return self

    # Accessors used by the processor and the help renderer

    @property
    def primary_name(self) -> str:
        return self._name

    @property
    def secondary_name(self) -> str:
        return self._secondary_name

    @property
    def arg_format(self) -> ArgFormat | None:
        return self._arg_format

    @property
    def cardinality(self) -> Nargs:
        return self._nargs

    @property
    def nargs_count(self) -> int:
        return self._nargs_count

    @property
    def argument_action(self) -> ArgumentAction:
        return self._action

    @property
    def value_type(self) -> ArgType:
        return self._type

    @property
    def const_value(self) -> str:
        return self._const

    @property
    def default_value(self) -> str:
        return self._default

    @property
    def choice_values(self) -> tuple[str, ...]:
        return self._choices

    @property
    def is_required(self) -> bool:
        return self._required

    @property
    def help_text(self) -> str:
        return self._help

    @property
    def metavar_text(self) -> str:
        return self._metavar

    @property
    def destination(self) -> str:
        """Explicit dest, else the secondary name, else the primary name."""
        return self._dest or self._secondary_name or self._name

    @property
    def is_option(self) -> bool:
        return self._arg_format == ArgFormat.OPTION

    def check_consistency(self) -> None:
        """
        Validate combinations of settings that no single builder call can check.

        Raises:
            ConfigureError: Naming this argument and the violated rule.
        """
        if self._arg_format == ArgFormat.SEQUENCE and self._action not in (
            ArgumentAction.STORE,
            ArgumentAction.APPEND,
        ):
            raise ConfigureError(
                f"action '{self._action}' cannot be used with positional arguments",
                self._name,
            )

        single_value = self._nargs == Nargs.NUMBER and self._nargs_count == 1

        if self._action in (ArgumentAction.STORE_CONST, ArgumentAction.APPEND_CONST):
            if not self._const:
                raise ConfigureError(
                    "store_const and append_const are required 'const' parameter",
                    self._name,
                )
            if not single_value:
                raise ConfigureError(
                    "store_const and append_const support only 1 argument", self._name
                )

        if self._action == ArgumentAction.COUNT and self._type != ArgType.INTEGER:
            raise ConfigureError("action 'count' must have 'int' type", self._name)

        if self._action in (ArgumentAction.STORE_TRUE, ArgumentAction.STORE_FALSE):
            if self._const:
                raise ConfigureError(
                    "store_true and store_false do not support 'const'", self._name
                )
            if not single_value:
                raise ConfigureError(
                    "store_true and store_false support only 1 argument", self._name
                )

        if self._choices and self._default and self._default not in self._choices:
            raise ConfigureError(
                f"default '{self._default}' not in allowed choices", self._name
            )

    # Parsing

    def parse(self, tokens: Sequence[str], index: int, output: list[Var]) -> int:
        """
        Consume tokens starting at `index` and append the produced vars to `output`.

        Args:
            tokens (Sequence[str]): The full token list.
            index (int): Position of the first token this occurrence may consume.
            output (list[Var]): Values already stored under this destination.

        Returns:
            int: Position of the first token not consumed.
        """
        if self._action in (ArgumentAction.STORE, ArgumentAction.APPEND):
            return self._consume_nargs(tokens, index, output)

        if self._action in (ArgumentAction.STORE_CONST, ArgumentAction.APPEND_CONST):
            output.append(Var.build(self._const, self._type))
        elif self._action == ArgumentAction.STORE_TRUE:
            output.append(Var.build("true", ArgType.BOOLEAN))
        elif self._action == ArgumentAction.STORE_FALSE:
            output.append(Var.build("false", ArgType.BOOLEAN))
        elif self._action == ArgumentAction.COUNT:
            self._increment_count(output)
        return index

    def _consume_nargs(self, tokens: Sequence[str], start: int, output: list[Var]) -> int:
        if self._nargs == Nargs.NUMBER:
            end: int | None = start + self._nargs_count
        elif self._nargs == Nargs.QUESTION:
            end = start + 1
        else:
            end = None

        # Any token starting with '-' opens the next option, negative numbers included.
        index = start
        while (
            (end is None or index < end)
            and index < len(tokens)
            and not tokens[index].startswith("-")
        ):
            index += 1
        taken = tokens[start:index]

        if self._nargs == Nargs.NUMBER and self._nargs_count > 1:
            if len(taken) != self._nargs_count:
                raise ParseError(
                    f"option '{self._name}' must have {self._nargs_count} arguments"
                )

        produced: list[Var] = []
        if not taken:
            # const wins over default when both are set.
            fallback = self._const or self._default
            if fallback:
                produced.append(Var.build(fallback, self._type))
            elif self._nargs == Nargs.PLUS:
                raise ParseError(f"option '{self._name}' must have 1 or more arguments")
            elif self._nargs == Nargs.NUMBER:
                raise ParseError(f"option '{self._name}' must have 1 arguments")
            elif self._nargs == Nargs.QUESTION:
                produced.append(NullVar())
        else:
            for token in taken:
                if self._choices and token not in self._choices:
                    raise ParseError(
                        f"invalid choice for '{self._name}': '{token}' "
                        f"(choose from {', '.join(self._choices)})"
                    )
                produced.append(Var.build(token, self._type))

        output.extend(produced)
        return index

    @staticmethod
    def _increment_count(output: list[Var]) -> None:
        # The processor keeps count destinations exclusive to count arguments.
        if not output:
            output.append(IntegerVar("0"))
        counter = output[0]
        if isinstance(counter, IntegerVar):
            counter.increment()

    # Usage text

    def get_usage_text(self, arg_name: str | None = None) -> str:
        """
        Build the usage fragment for this argument, e.g. "-a VAL [VAL ...]".

        Args:
            arg_name (str | None): Option name to render; defaults to the primary name.
        """
        if arg_name is None:
            arg_name = self._name

        parts: list[str] = []
        if self._arg_format == ArgFormat.OPTION:
            prefix = "--" if len(arg_name) > 1 else "-"
            parts.append(f"{prefix}{arg_name}")
            meta = self._metavar or "VAL"
        else:
            meta = self._metavar or self._secondary_name or self._name

        if self._action in (ArgumentAction.STORE, ArgumentAction.APPEND):
            if self._nargs == Nargs.ASTERISK:
                parts.append(f"[{meta} [{meta} ...]]")
            elif self._nargs == Nargs.QUESTION:
                parts.append(f"[{meta}]")
            elif self._nargs == Nargs.PLUS:
                parts.append(f"{meta} [{meta} ...]")
            elif self._nargs_count > 1:
                parts.append(
                    " ".join(f"{meta}{i}" for i in range(1, self._nargs_count + 1))
                )
            else:
                parts.append(meta)
        return " ".join(parts)

    def get_secondary_usage_text(self) -> str:
        """Usage fragment for the secondary name, or "" without one."""
        if not self._secondary_name:
            return ""
        return self.get_usage_text(self._secondary_name)

    def __repr__(self) -> str:
        return (
            f"Argument(name={self._name!r}, format={self._arg_format}, "
            f"action={self._action}, nargs={self._nargs_count or self._nargs}, "
            f"dest={self.destination!r})"
        )
