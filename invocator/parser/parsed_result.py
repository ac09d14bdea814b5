# Invocator Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `ParsedResult`, the read-only output of a single parse call.

A result maps argument names to `Value`s and only holds entries for arguments
that were actually invoked. Tokens skipped under the tolerant policy are kept in
`unrecognized`, in input order.
"""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Iterator

from invocator.parser.value import Flag, Value, Vector, Word


class ParsedResult(Mapping):
    """Mapping of argument name to parsed `Value`."""

    def __init__(
        self,
        values: Mapping[str, Value] | None = None,
        unrecognized: tuple[str, ...] = (),
    ) -> None:
        self._values: dict[str, Value] = dict(values or {})
        self.unrecognized: tuple[str, ...] = tuple(unrecognized)

    def __getitem__(self, name: str) -> Value:
        return self._values[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"ParsedResult({self._values!r})"

    @property
    def count(self) -> int:
        """Return the number of populated arguments."""
        return len(self._values)

    def contains(self, name: str) -> bool:
        return name in self._values

    def _typed(self, name: str, expected: type[Value]) -> Value | None:
        value = self._values.get(name)
        if value is not None and not isinstance(value, expected):
            raise TypeError(
                f"Argument '{name}' holds a {value.type} value, not a {expected.type}"
            )
        return value

    def flag(self, name: str, default: bool = False) -> bool:
        """Return the boolean of a flag argument, or `default` if it was absent."""
        value = self._typed(name, Flag)
        return value.raw if value is not None else default

    def word(self, name: str, default: str | None = None) -> str | None:
        """Return the string of a word argument, or `default` if it was absent."""
        value = self._typed(name, Word)
        return value.raw if value is not None else default

    def vector(self, name: str, default: tuple[str, ...] = ()) -> list[str]:
        """Return the values of a vector argument, or `default` if it was absent."""
        value = self._typed(name, Vector)
        return value.raw if value is not None else list(default)

    def to_dict(self) -> dict[str, Any]:
        """Return the result with plain Python payloads."""
        return {name: value.raw for name, value in self._values.items()}
