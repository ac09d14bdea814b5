# Invocator Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements `ParseEngine`, the single-pass tokenizer that turns a raw
token sequence into a `ParsedResult` using the arguments declared in a
`Registry`.

Tokens are consumed strictly left to right with one token of lookahead. Each
token is classified before it is consumed:

- ALIAS: the token, after negation stripping, is a known alias.
- CLUSTER: the token splits into single-character aliases that all resolve to
  flag arguments (`-abc` → `-a -b -c`, `xy` → `x y`). Splitting is attempted
  opportunistically and silently abandoned when any piece is unknown or is not
  a flag.
- VALUE: anything else. A value only means something right after a word or
  vector argument.

Per-type consumption:
- Flag: stores `Flag(not negated)` and consumes nothing else.
- Word: takes the next token verbatim. Missing or argument-like next tokens
  raise `MissingValueError`.
- Vector: takes following tokens until the input ends or an argument-like
  token appears. Collecting nothing raises `EmptyVectorError`.

Tokens that no argument claims are skipped (tolerant, the default) or raise
`UnrecognizedTokenError` (strict). After the loop every required argument must
be present.

Example Usage:
    registry = Registry()
    registry.register(ArgumentSpec.flag("sleep", "-s", "--sleep"))
    registry.register(ArgumentSpec.vector("colors", "-d", required=True))

    result = ParseEngine(registry).parse(["-no-s", "-d", "red", "blue"])
    # result == {"sleep": Flag(False), "colors": Vector(("red", "blue"))}
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Sequence

from invocator.exceptions import (
    EmptyVectorError,
    MissingRequiredError,
    MissingValueError,
    NegationOnNonFlagError,
    UnrecognizedTokenError,
)
from invocator.logger import logger
from invocator.parser.argument import ArgumentSpec
from invocator.parser.argument_type import ArgumentType
from invocator.parser.parsed_result import ParsedResult
from invocator.parser.registry import AliasMatch, Registry
from invocator.parser.value import Flag, Value, Vector, Word


class TokenKind(Enum):
    """How a raw token is treated by the engine."""

    ALIAS = "alias"
    CLUSTER = "cluster"
    VALUE = "value"


@dataclass(frozen=True)
class Classification:
    """Classification of a single token."""

    token: str
    kind: TokenKind
    match: AliasMatch | None = None
    cluster: tuple[ArgumentSpec, ...] = field(default_factory=tuple)

    @property
    def is_argument(self) -> bool:
        return self.kind in (TokenKind.ALIAS, TokenKind.CLUSTER)


def split_cluster(token: str) -> list[str] | None:
    """
    Break a token into single-character aliases.

    Args:
        token (str): The raw token.

    Returns:
        list[str] | None: `-abc` → `["-a", "-b", "-c"]`, `abc` → `["a", "b", "c"]`,
        or None for long options and tokens with nothing to split.
    """
    if token.startswith("--"):
        return None
    if token.startswith("-"):
        pieces = [f"-{char}" for char in token[1:]]
    else:
        pieces = list(token)
    return pieces or None


class _Cursor:
    """Forward-only view over the token sequence with one token of lookahead."""

    def __init__(self, tokens: Sequence[str]) -> None:
        self._tokens = tokens
        self._index = 0

    def __bool__(self) -> bool:
        return self._index < len(self._tokens)

    def peek(self) -> str | None:
        if self._index < len(self._tokens):
            return self._tokens[self._index]
        return None

    def next(self) -> str | None:
        token = self.peek()
        if token is not None:
            self._index += 1
        return token


class ParseEngine:
    """
    Parses token sequences against a `Registry`.

    The engine holds no per-parse state; each `parse` call builds a fresh
    result, so one engine can serve any number of calls.

    Args:
        registry (Registry): The declared arguments.
        strict (bool): If True, raise `UnrecognizedTokenError` for tokens no
            argument claims. If False they are skipped and reported in
            `ParsedResult.unrecognized`.
    """

    def __init__(self, registry: Registry, strict: bool = False) -> None:
        self.registry: Registry = registry
        self.strict: bool = strict

    def classify(self, token: str) -> Classification:
        """Classify `token` as an alias, a flag cluster or a plain value."""
        found = self.registry.match(token)
        if found is not None:
            return Classification(token, TokenKind.ALIAS, match=found)

        pieces = split_cluster(token)
        if pieces is None:
            return Classification(token, TokenKind.VALUE)

        specs = []
        for piece in pieces:
            spec = self.registry.resolve(piece)
            if spec is None or not spec.is_flag:
                return Classification(token, TokenKind.VALUE)
            specs.append(spec)
        return Classification(token, TokenKind.CLUSTER, cluster=tuple(specs))

    def is_argument_like(self, token: str) -> bool:
        """Return True if `token` would start a new argument."""
        return self.classify(token).is_argument

    def _consume_word(self, token: str, spec: ArgumentSpec, cursor: _Cursor) -> Word:
        following = cursor.peek()
        if following is None:
            raise MissingValueError(token, spec.name)
        if self.is_argument_like(following):
            raise MissingValueError(token, spec.name, found=following)
        cursor.next()
        return Word(following)

    def _consume_vector(
        self, token: str, spec: ArgumentSpec, cursor: _Cursor
    ) -> Vector:
        values: list[str] = []
        while cursor:
            following = cursor.peek()
            assert following is not None
            if self.is_argument_like(following):
                if not values:
                    raise EmptyVectorError(token, spec.name, found=following)
                break
            values.append(following)
            cursor.next()
        if not values:
            raise EmptyVectorError(token, spec.name)
        return Vector(values)

    def _consume(
        self, token: str, found: AliasMatch, cursor: _Cursor
    ) -> Value:
        spec = found.spec
        if found.negated and not spec.is_flag:
            raise NegationOnNonFlagError(token, spec.name)
        if spec.type == ArgumentType.FLAG:
            return Flag(not found.negated)
        elif spec.type == ArgumentType.WORD:
            return self._consume_word(token, spec, cursor)
        elif spec.type == ArgumentType.VECTOR:
            return self._consume_vector(token, spec, cursor)
        assert False, f"Unhandled argument type: {spec.type}"

    def _store(self, values: dict[str, Value], spec: ArgumentSpec, value: Value) -> None:
        if spec.name in values:
            logger.debug(
                "Argument '%s' given more than once, keeping the last value", spec.name
            )
        values[spec.name] = value

    def _check_required(self, values: dict[str, Value]) -> None:
        for spec in self.registry.required:
            if spec.name not in values:
                raise MissingRequiredError(spec.name, spec.identity)

    def parse(self, tokens: Iterable[str]) -> ParsedResult:
        """
        Parse a token sequence.

        Args:
            tokens (Iterable[str]): Raw tokens, typically `sys.argv[1:]`.

        Returns:
            ParsedResult: The parsed values keyed by argument name.

        Raises:
            ParseError: Any of its subclasses, on the first problem found.
        """
        tokens = [str(token) for token in tokens]
        cursor = _Cursor(tokens)
        values: dict[str, Value] = {}
        unrecognized: list[str] = []

        while cursor:
            token = cursor.next()
            assert token is not None
            classified = self.classify(token)
            if classified.kind == TokenKind.ALIAS:
                assert classified.match is not None
                value = self._consume(token, classified.match, cursor)
                self._store(values, classified.match.spec, value)
            elif classified.kind == TokenKind.CLUSTER:
                for spec in classified.cluster:
                    self._store(values, spec, Flag(True))
            elif self.strict:
                raise UnrecognizedTokenError(token)
            else:
                logger.debug("Skipping unrecognized token '%s'", token)
                unrecognized.append(token)

        self._check_required(values)
        return ParsedResult(values, unrecognized=tuple(unrecognized))


def parse(
    registry: Registry, tokens: Iterable[str], strict: bool = False
) -> ParsedResult:
    """Parse `tokens` against `registry` with a throwaway `ParseEngine`."""
    return ParseEngine(registry, strict=strict).parse(tokens)
