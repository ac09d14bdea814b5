# Invocator Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Input validators for use with Prompt Toolkit.

- parse_validator: Accepts a line only if it parses against a `ParseEngine`.
"""
from prompt_toolkit.document import Document
from prompt_toolkit.validation import ValidationError, Validator

from invocator.exceptions import InvocatorError
from invocator.parser.engine import ParseEngine
from invocator.utils import split_command_line


class ParseValidator(Validator):
    """Validator that runs each input line through a `ParseEngine`."""

    def __init__(self, engine: ParseEngine):
        self.engine = engine

    def validate(self, document: Document) -> None:
        text = document.text
        try:
            tokens = split_command_line(text)
        except ValueError as error:
            raise ValidationError(message=f"Invalid quoting: {error}", cursor_position=len(text))
        try:
            self.engine.parse(tokens)
        except InvocatorError as error:
            raise ValidationError(message=str(error), cursor_position=len(text))


def parse_validator(engine: ParseEngine) -> Validator:
    """Validator for complete token lines."""
    return ParseValidator(engine)
