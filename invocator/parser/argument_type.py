# Invocator Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `ArgumentType`, the enum tagging every declared argument with the shape
of the payload it produces.

Each member maps to one `Value` variant:
    - FLAG   → `Flag(bool)`, consumes no following tokens.
    - WORD   → `Word(str)`, consumes exactly one following token.
    - VECTOR → `Vector(tuple[str, ...])`, consumes one or more following tokens.

Supports alias coercion for config-friendly spellings, so YAML/TOML argument
declarations can say `type: bool` or `type: list`.

Example:
    ArgumentType("flag")   → ArgumentType.FLAG
    ArgumentType("Text")   → ArgumentType.WORD (via alias)
    ArgumentType("multi")  → ArgumentType.VECTOR (via alias)
"""
from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from invocator.parser.value import Value


class ArgumentType(Enum):
    """
    Declared type of an argument.

    Members:
        FLAG: Presence switch, negatable with a `no-` prefix.
        WORD: Single value taken verbatim from the next token.
        VECTOR: Ordered values taken from the following tokens.

    Aliases:
        - "bool", "switch" → "flag"
        - "text", "str", "value" → "word"
        - "list", "multi" → "vector"
    """

    FLAG = "flag"
    WORD = "word"
    VECTOR = "vector"

    @classmethod
    def choices(cls) -> list[ArgumentType]:
        """Return a list of all argument types."""
        return list(cls)

    @classmethod
    def _get_alias(cls, value: str) -> str:
        aliases = {
            "bool": "flag",
            "switch": "flag",
            "text": "word",
            "str": "word",
            "value": "word",
            "list": "vector",
            "multi": "vector",
        }
        return aliases.get(value, value)

    @classmethod
    def _missing_(cls, value: object) -> ArgumentType:
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
    def value_class(self) -> type[Value]:
        """Return the `Value` subclass produced by arguments of this type."""
        from invocator.parser.value import Flag, Vector, Word

        return {
            ArgumentType.FLAG: Flag,
            ArgumentType.WORD: Word,
            ArgumentType.VECTOR: Vector,
        }[self]

    def __str__(self) -> str:
        """Return the string representation of the argument type."""
        return self.value
