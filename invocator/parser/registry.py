# Invocator Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `Registry`, the set of declared arguments a `ParseEngine` parses against.

The registry owns every registered `ArgumentSpec` by name and keeps a single
alias index mapping each invocation alias to the name of its owning argument.
Flag arguments also get synthesized negation aliases (`--no-verbose`) in the
same index, so global uniqueness is enforced by one dictionary lookup per alias
no matter how many arguments are registered.

Registration is all-or-nothing: a spec that collides on its name, on any
explicit alias, or on any synthesized negation alias leaves the registry
untouched.

A populated registry is only read during parsing and may be shared by any
number of parse calls. Registration is not synchronized.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator

from invocator.exceptions import DuplicateAliasError, InvalidSpecError
from invocator.logger import logger
from invocator.parser.argument import ArgumentSpec, validate_spec
from invocator.parser.negation import detect_negation, negate_alias, strip_negation


@dataclass(frozen=True)
class AliasMatch:
    """Result of looking a token up in the registry."""

    spec: ArgumentSpec
    alias: str
    negated: bool = False


class Registry:
    """
    Mapping from invocation aliases to declared arguments.

    Example:
        registry = Registry()
        registry.register(ArgumentSpec.flag("verbose", "-v", "--verbose"))
        registry.resolve("--no-verbose").name  # "verbose"
    """

    def __init__(self, specs: Iterable[ArgumentSpec] | None = None) -> None:
        self._specs: dict[str, ArgumentSpec] = {}
        self._alias_index: dict[str, str] = {}
        self._synthesized: set[str] = set()
        if specs:
            self.register_all(specs)

    def _aliases_for(self, spec: ArgumentSpec) -> tuple[list[str], list[str]]:
        explicit = spec.sorted_aliases()
        synthesized = [negate_alias(alias) for alias in explicit] if spec.is_flag else []
        return explicit, synthesized

    def register(self, spec: ArgumentSpec) -> None:
        """
        Register an argument.

        Args:
            spec (ArgumentSpec): The argument declaration.

        Raises:
            InvalidSpecError: If `spec` is not an `ArgumentSpec` or has a blank
                name or a malformed alias.
            DuplicateAliasError: If the name or any alias, explicit or
                synthesized, is already owned by a registered argument.
        """
        if not isinstance(spec, ArgumentSpec):
            raise InvalidSpecError(f"Expected an ArgumentSpec, got {type(spec).__name__}")
        problems = validate_spec(spec)
        if problems:
            raise InvalidSpecError(f"Invalid '{spec.name}': {'; '.join(problems)}")
        if spec.name in self._specs:
            raise DuplicateAliasError(spec.name, spec.name)

        explicit, synthesized = self._aliases_for(spec)
        seen: set[str] = set()
        for alias in explicit + synthesized:
            if alias in self._alias_index:
                raise DuplicateAliasError(alias, self._alias_index[alias])
            if alias in seen:
                raise DuplicateAliasError(alias, spec.name)
            seen.add(alias)

        self._specs[spec.name] = spec
        for alias in explicit:
            self._alias_index[alias] = spec.name
        for alias in synthesized:
            self._alias_index[alias] = spec.name
            self._synthesized.add(alias)
        logger.debug(
            "Registered %s argument '%s' with aliases: %s",
            spec.type,
            spec.name,
            ", ".join(explicit + synthesized),
        )

    def register_all(self, specs: Iterable[ArgumentSpec]) -> None:
        """Register several arguments, stopping at the first failure."""
        for spec in specs:
            self.register(spec)

    def match(self, token: str) -> AliasMatch | None:
        """
        Look `token` up, stripping a negation prefix if needed.

        An explicit alias is matched verbatim first, so an argument declared as
        `no-cache` is not mistaken for the negation of `cache`.

        Args:
            token (str): A raw token.

        Returns:
            AliasMatch | None: The owning spec, the matched alias and whether the
            token was negated, or None for unknown tokens.
        """
        name = self._alias_index.get(token)
        if name is not None and token not in self._synthesized:
            return AliasMatch(self._specs[name], token, negated=False)
        if not detect_negation(token):
            return None
        stripped = strip_negation(token)
        name = self._alias_index.get(stripped)
        if name is None or stripped in self._synthesized:
            return None
        return AliasMatch(self._specs[name], stripped, negated=True)

    def resolve(self, token: str) -> ArgumentSpec | None:
        """Return the argument `token` invokes, if any."""
        found = self.match(token)
        return found.spec if found else None

    def is_known(self, token: str) -> bool:
        """Return True if `token` invokes a registered argument."""
        return self.match(token) is not None

    def get(self, name: str) -> ArgumentSpec | None:
        """Return the argument registered under `name`."""
        return self._specs.get(name)

    @property
    def names(self) -> list[str]:
        return list(self._specs)

    @property
    def aliases(self) -> list[str]:
        """Return every known alias, synthesized negations included."""
        return sorted(self._alias_index)

    @property
    def required(self) -> list[ArgumentSpec]:
        return [spec for spec in self._specs.values() if spec.required]

    def is_synthesized(self, alias: str) -> bool:
        return alias in self._synthesized

    def __contains__(self, name: object) -> bool:
        return name in self._specs

    def __iter__(self) -> Iterator[ArgumentSpec]:
        return iter(self._specs.values())

    def __len__(self) -> int:
        return len(self._specs)

    def __repr__(self) -> str:
        return f"Registry({', '.join(self._specs)})"
