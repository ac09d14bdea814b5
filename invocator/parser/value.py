# Invocator Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Parsed argument payloads.

`Value` is a closed tagged union with three variants:
- `Flag(bool)`: produced by flag arguments (`--verbose`, `--no-verbose`).
- `Word(str)`: produced by word arguments, holds the token verbatim.
- `Vector(tuple[str, ...])`: produced by vector arguments, in input order.

Values are frozen and hashable, so they compare by content:

    Flag(True) == Value.from_raw(True)
    Vector(["a", "b"]) == Vector(("a", "b"))
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Iterable

from invocator.parser.argument_type import ArgumentType


@dataclass(frozen=True)
class Value:
    """Base class for parsed argument payloads."""

    type: ClassVar[ArgumentType]

    @property
    def raw(self) -> Any:
        """Return the payload as a plain Python object."""
        raise NotImplementedError

    @staticmethod
    def from_raw(value: Any) -> Value:
        """
        Convert a plain Python object into a `Value`.

        Args:
            value (Any): A bool, a str, a non-string iterable of str, or a Value.

        Returns:
            Value: The matching variant.

        Raises:
            TypeError: If the object has no Value representation.
        """
        if isinstance(value, Value):
            return value
        if isinstance(value, bool):
            return Flag(value)
        if isinstance(value, str):
            return Word(value)
        if isinstance(value, Iterable):
            items = list(value)
            if all(isinstance(item, str) for item in items):
                return Vector(items)
        raise TypeError(f"Cannot convert {type(value).__name__} to a Value: {value!r}")


@dataclass(frozen=True)
class Flag(Value):
    """Boolean payload of a flag argument."""

    type: ClassVar[ArgumentType] = ArgumentType.FLAG
    value: bool = True

    @property
    def raw(self) -> bool:
        return self.value

    def __bool__(self) -> bool:
        return self.value


@dataclass(frozen=True)
class Word(Value):
    """Single string payload of a word argument."""

    type: ClassVar[ArgumentType] = ArgumentType.WORD
    value: str = ""

    @property
    def raw(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Vector(Value):
    """Ordered string payload of a vector argument."""

    type: ClassVar[ArgumentType] = ArgumentType.VECTOR
    value: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.value, tuple):
            object.__setattr__(self, "value", tuple(self.value))

    @property
    def raw(self) -> list[str]:
        return list(self.value)

    def __len__(self) -> int:
        return len(self.value)

    def __iter__(self):
        return iter(self.value)
