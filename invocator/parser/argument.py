# Invocator Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `ArgumentSpec`, the immutable declaration of one command-line argument,
and `ArgumentSpecBuilder`, the validating builder that produces it.

An `ArgumentSpec` carries:
- `name`: Canonical name, the key of the parsed value. Always an alias too.
- `type`: `ArgumentType` deciding how many tokens the argument consumes.
- `aliases`: Every token that invokes the argument (`-o`, `--output`, `output`).
- `required`: Whether parsing fails when the argument is absent.

The builder never raises from its setters. All checks are deferred to `build()`,
which reports every problem at once through `InvalidSpecError`:

    spec = (
        ArgumentSpecBuilder("word")
        .name("output")
        .alias("-o", "--output")
        .required()
        .build()
    )

Shortcuts are available for the common case:

    ArgumentSpec.flag("verbose", "-v", "--verbose")
    ArgumentSpec.vector("files", "-f", required=True)
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from invocator.exceptions import InvalidSpecError
from invocator.parser.argument_type import ArgumentType


@dataclass(frozen=True)
class ArgumentSpec:
    """
    Represents a declared command-line argument.

    Attributes:
        name (str): Canonical name of the argument.
        type (ArgumentType): Declared payload type.
        aliases (frozenset[str]): Invocation aliases, the name included.
        required (bool): True if the argument must appear in every parse.
    """

    name: str
    type: ArgumentType = ArgumentType.FLAG
    aliases: frozenset[str] = field(default_factory=frozenset)
    required: bool = False

    def __post_init__(self) -> None:
        try:
            argument_type = ArgumentType(self.type)
        except ValueError as error:
            raise InvalidSpecError(f"Invalid '{self.name}': {error}") from error
        object.__setattr__(self, "type", argument_type)
        aliases = set(self.aliases)
        if self.name:
            aliases.add(self.name)
        object.__setattr__(self, "aliases", frozenset(aliases))

    @classmethod
    def flag(cls, name: str, *aliases: str, required: bool = False) -> ArgumentSpec:
        """Build a flag argument."""
        return cls._build(ArgumentType.FLAG, name, aliases, required)

    @classmethod
    def word(cls, name: str, *aliases: str, required: bool = False) -> ArgumentSpec:
        """Build a word argument."""
        return cls._build(ArgumentType.WORD, name, aliases, required)

    @classmethod
    def vector(cls, name: str, *aliases: str, required: bool = False) -> ArgumentSpec:
        """Build a vector argument."""
        return cls._build(ArgumentType.VECTOR, name, aliases, required)

    @classmethod
    def _build(
        cls,
        argument_type: ArgumentType,
        name: str,
        aliases: Iterable[str],
        required: bool,
    ) -> ArgumentSpec:
        return (
            ArgumentSpecBuilder(argument_type)
            .name(name)
            .alias(*aliases)
            .required(required)
            .build()
        )

    @property
    def is_flag(self) -> bool:
        return self.type == ArgumentType.FLAG

    @property
    def is_word(self) -> bool:
        return self.type == ArgumentType.WORD

    @property
    def is_vector(self) -> bool:
        return self.type == ArgumentType.VECTOR

    @property
    def short(self) -> str | None:
        """Return the single-character dash alias (`-o`), if declared."""
        shorts = sorted(
            alias
            for alias in self.aliases
            if alias.startswith("-") and not alias.startswith("--") and len(alias) == 2
        )
        return shorts[0] if shorts else None

    @property
    def long(self) -> str | None:
        """Return the double-dash alias (`--output`), if declared."""
        longs = sorted(alias for alias in self.aliases if alias.startswith("--"))
        return longs[0] if longs else None

    @property
    def identity(self) -> str:
        """Return the name used to refer to this argument in error messages."""
        if self.short and self.long:
            return f"{self.short}/{self.long}"
        return self.short or self.long or self.name

    def same_as(self, alias: str) -> bool:
        """Return True if `alias` invokes this argument."""
        return alias in self.aliases

    def sorted_aliases(self) -> list[str]:
        """Return the aliases with the dashed forms first, short before long."""
        return sorted(
            self.aliases,
            key=lambda alias: (not alias.startswith("-"), alias.startswith("--"), alias),
        )


def validate_alias(alias: object, label: str = "alias") -> list[str]:
    """Return the problems with a single invocation alias, if any."""
    if not isinstance(alias, str):
        return [f"{label} {alias!r} must be a string"]
    if not alias:
        return [f"{label} must not be empty"]
    if any(char.isspace() for char in alias):
        return [f"{label} '{alias}' must not contain whitespace"]
    if alias in ("-", "--"):
        return [f"{label} '{alias}' must contain more than dashes"]
    return []


def validate_name(name: object) -> list[str]:
    if not isinstance(name, str) or not name.strip():
        return ["name must be a non-empty string"]
    return validate_alias(name, "name")


def validate_spec(spec: ArgumentSpec) -> list[str]:
    """
    Return every problem with an already constructed `ArgumentSpec`.

    Specs produced by `ArgumentSpecBuilder` always pass. Specs built directly
    from the dataclass skip the builder, so the registry runs this check too.
    """
    problems = validate_name(spec.name)
    for alias in sorted((alias for alias in spec.aliases if alias != spec.name), key=str):
        problems.extend(validate_alias(alias, "alias"))
    if not isinstance(spec.required, bool):
        problems.append(f"required must be a boolean, got {spec.required!r}")
    return problems


class ArgumentSpecBuilder:
    """
    Fluent builder for `ArgumentSpec`.

    Setters only record state and always return the builder. `build()` runs the
    validation and either returns a spec or raises `InvalidSpecError`.
    """

    def __init__(self, argument_type: ArgumentType | str = ArgumentType.FLAG) -> None:
        self._type: ArgumentType | str = argument_type
        self._names: list[str] = []
        self._aliases: list[str] = []
        self._required: bool = False

    def name(self, name: str) -> ArgumentSpecBuilder:
        """Set the canonical name of the argument."""
        self._names.append(name)
        return self

    def type(self, argument_type: ArgumentType | str) -> ArgumentSpecBuilder:
        """Set the argument type."""
        self._type = argument_type
        return self

    def alias(self, *aliases: str) -> ArgumentSpecBuilder:
        """Add one or more invocation aliases."""
        self._aliases.extend(aliases)
        return self

    invoke_with = alias

    def required(self, required: bool = True) -> ArgumentSpecBuilder:
        """Mark the argument as required or optional."""
        self._required = required
        return self

    def _validate(self) -> list[str]:
        problems = []
        try:
            ArgumentType(self._type)
        except ValueError as error:
            problems.append(str(error))

        if not self._names:
            problems.append("no name specified")
        elif len(self._names) > 1:
            problems.append(f"name specified more than once: {self._names}")
        else:
            problems.extend(validate_name(self._names[0]))

        for alias in self._aliases:
            problems.extend(validate_alias(alias, "alias"))

        if not isinstance(self._required, bool):
            problems.append(f"required must be a boolean, got {self._required!r}")
        return problems

    def build(self) -> ArgumentSpec:
        """
        Validate the recorded state and produce an `ArgumentSpec`.

        Returns:
            ArgumentSpec: The immutable argument declaration.

        Raises:
            InvalidSpecError: If the declaration is incomplete or malformed.
        """
        problems = self._validate()
        if problems:
            label = f"'{self._names[0]}'" if self._names else "argument"
            raise InvalidSpecError(f"Invalid {label}: {'; '.join(problems)}")
        return ArgumentSpec(
            name=self._names[0],
            type=ArgumentType(self._type),
            aliases=frozenset(self._aliases),
            required=self._required,
        )
