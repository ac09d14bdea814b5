"""
Invocator Argument Parser

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .argument import ArgumentSpec, ArgumentSpecBuilder
from .argument_type import ArgumentType
from .engine import Classification, ParseEngine, TokenKind, parse, split_cluster
from .negation import detect_negation, negate_alias, strip_negation
from .parsed_result import ParsedResult
from .registry import AliasMatch, Registry
from .value import Flag, Value, Vector, Word

__all__ = [
    "AliasMatch",
    "ArgumentSpec",
    "ArgumentSpecBuilder",
    "ArgumentType",
    "Classification",
    "Flag",
    "ParseEngine",
    "ParsedResult",
    "Registry",
    "TokenKind",
    "Value",
    "Vector",
    "Word",
    "detect_negation",
    "negate_alias",
    "parse",
    "split_cluster",
    "strip_negation",
]
