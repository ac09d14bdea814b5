# Invocator Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes used by Invocator.

Errors are categorical and fatal to the current `register` or `parse` call; no
partial result is ever returned alongside one of them.

All exceptions inherit from `InvocatorError`, the base exception for the package.

Exception Hierarchy:
- InvocatorError
    ├── RegistrationError
    │   ├── InvalidSpecError
    │   └── DuplicateAliasError
    └── ParseError
        ├── UnrecognizedTokenError
        ├── NegationOnNonFlagError
        ├── MissingValueError
        ├── EmptyVectorError
        └── MissingRequiredError
"""


class InvocatorError(Exception):
    """Base exception for Invocator."""


class RegistrationError(InvocatorError):
    """Exception raised when an argument cannot be registered."""


class InvalidSpecError(RegistrationError):
    """Exception raised when an argument declaration is incomplete or malformed."""


class DuplicateAliasError(RegistrationError):
    """Exception raised when a name or alias is already owned by another argument."""

    def __init__(self, alias: str, existing: str) -> None:
        super().__init__(f"Alias '{alias}' is already used by argument '{existing}'")
        self.alias = alias
        self.existing = existing


class ParseError(InvocatorError):
    """Exception raised when a token sequence cannot be parsed."""

    def __init__(self, message: str, token: str | None = None) -> None:
        super().__init__(message)
        self.token = token


class UnrecognizedTokenError(ParseError):
    """Exception raised in strict mode for a token no argument claims."""

    def __init__(self, token: str) -> None:
        super().__init__(f"Unrecognized argument: '{token}'", token=token)


class NegationOnNonFlagError(ParseError):
    """Exception raised when a negated alias points at a Word or Vector argument."""

    def __init__(self, token: str, argument: str) -> None:
        super().__init__(
            f"Negation is only supported for flag arguments: '{token}' ({argument})",
            token=token,
        )
        self.argument = argument


class MissingValueError(ParseError):
    """Exception raised when a Word argument does not receive its value."""

    def __init__(self, token: str, argument: str, found: str | None = None) -> None:
        if found is None:
            message = f"Expected a value for '{token}'"
        else:
            message = f"Expected a value for '{token}', found argument '{found}'"
        super().__init__(message, token=token)
        self.argument = argument
        self.found = found


class EmptyVectorError(ParseError):
    """Exception raised when a Vector argument collects no values."""

    def __init__(self, token: str, argument: str, found: str | None = None) -> None:
        if found is None:
            message = f"Expected value(s) for '{token}'"
        else:
            message = f"Expected value(s) for '{token}', found argument '{found}'"
        super().__init__(message, token=token)
        self.argument = argument
        self.found = found


class MissingRequiredError(ParseError):
    """Exception raised when a required argument is never invoked."""

    def __init__(self, argument: str, identity: str) -> None:
        super().__init__(f"Argument '{identity}' is required")
        self.argument = argument
        self.identity = identity
