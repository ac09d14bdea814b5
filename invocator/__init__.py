"""
Invocator Argument Parser

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging

from .exceptions import (
    DuplicateAliasError,
    EmptyVectorError,
    InvalidSpecError,
    InvocatorError,
    MissingRequiredError,
    MissingValueError,
    NegationOnNonFlagError,
    ParseError,
    RegistrationError,
    UnrecognizedTokenError,
)
from .parser import (
    ArgumentSpec,
    ArgumentSpecBuilder,
    ArgumentType,
    Flag,
    ParseEngine,
    ParsedResult,
    Registry,
    Value,
    Vector,
    Word,
    parse,
)

logger = logging.getLogger("invocator")


__all__ = [
    "ArgumentSpec",
    "ArgumentSpecBuilder",
    "ArgumentType",
    "DuplicateAliasError",
    "EmptyVectorError",
    "Flag",
    "InvalidSpecError",
    "InvocatorError",
    "MissingRequiredError",
    "MissingValueError",
    "NegationOnNonFlagError",
    "ParseEngine",
    "ParseError",
    "ParsedResult",
    "RegistrationError",
    "Registry",
    "UnrecognizedTokenError",
    "Value",
    "Vector",
    "Word",
    "parse",
]
