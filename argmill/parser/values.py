# Argmill Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `Values`, the read-only result of `parse_args()`.

Parsed values are filed per destination as an ordered tuple of `Var`. A
destination that is present with no vars (e.g. `nargs="*"` given zero tokens)
is "set but empty", which `is_set()` distinguishes from never being touched.

Example:
    values = parser.parse_args(["prog", "-a", "v1", "v2"])
    values.size("a")            # 2
    values.get_string("a", 1)   # "v2"
    values["a"]                 # "v1"
"""
from __future__ import annotations

from typing import Any, Iterator, Mapping, Sequence

from argmill.exceptions import ValuesIndexError, ValuesKeyError
from argmill.parser.var import Var


class Values:
    """Mapping of destination names to parsed vars."""

    def __init__(
        self,
        var_map: Mapping[str, Sequence[Var]] | None = None,
        help_requested: bool = False,
    ) -> None:
        self._var_map: dict[str, tuple[Var, ...]] = {
            dest: tuple(vars) for dest, vars in (var_map or {}).items()
        }
        self._help_requested = help_requested

    def get_vars(self, dest: str) -> tuple[Var, ...]:
        """
        Return every var stored under `dest`.

        Raises:
            ValuesKeyError: If `dest` was never set.
        """
        try:
            return self._var_map[dest]
        except KeyError:
            raise ValuesKeyError(dest) from None

    def get_var(self, dest: str, index: int = 0) -> Var:
        """
        Return the var at `index` under `dest`.

        Raises:
            ValuesKeyError: If `dest` was never set.
            ValuesIndexError: If `index` is past the stored vars.
        """
        vars = self.get_vars(dest)
        if index < 0 or index >= len(vars):
            raise ValuesIndexError(f"{dest}[{index}] out of range ({len(vars)} values)")
        return vars[index]

    def get_string(self, dest: str, index: int = 0) -> str:
        return self.get_var(dest, index).to_string()

    def get_int(self, dest: str, index: int = 0) -> int:
        return self.get_var(dest, index).to_int()

    def is_true(self, dest: str, index: int = 0) -> bool:
        return self.get_var(dest, index).is_true()

    def size(self, dest: str) -> int:
        """Number of vars stored under `dest`, 0 if it was never set."""
        return len(self._var_map.get(dest, ()))

    def is_set(self, dest: str) -> bool:
        return dest in self._var_map

    def is_help_requested(self) -> bool:
        return self._help_requested

    def destinations(self) -> list[str]:
        return list(self._var_map)

    def to_dict(self) -> dict[str, list[Any]]:
        """Return native Python values per destination."""
        return {dest: [var.value for var in vars] for dest, vars in self._var_map.items()}

    def __getitem__(self, dest: str) -> str:
        return self.get_string(dest, 0)

    def __contains__(self, dest: object) -> bool:
        return dest in self._var_map

    def __iter__(self) -> Iterator[str]:
        return iter(self._var_map)

    def __len__(self) -> int:
        return len(self._var_map)

    def __repr__(self) -> str:
        return f"Values({self.to_dict()!r}, help_requested={self._help_requested})"
