# Invocator Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Provides `RegistryCompleter`, a Prompt Toolkit completer for token lines parsed by
a `Registry`.

This completer supports:
- Alias completion for every registered argument, negated flag forms included
- Longest-common-prefix insertion when several aliases share a prefix
- Quiet behavior while a word or vector argument is waiting for its value
"""
from __future__ import annotations

import os
import shlex
from typing import Iterable

from prompt_toolkit.completion import Completer, Completion
from prompt_toolkit.document import Document

from invocator.parser.registry import Registry


class RegistryCompleter(Completer):
    """
    Prompt Toolkit completer for Invocator token lines.

    Args:
        registry (Registry): The arguments whose aliases are suggested.
        include_negations (bool): Also suggest `--no-*` forms of flags.
    """

    def __init__(self, registry: Registry, include_negations: bool = True):
        self.registry = registry
        self.include_negations = include_negations

    def get_completions(self, document: Document, complete_event) -> Iterable[Completion]:
        text = document.text_before_cursor
        try:
            tokens = shlex.split(text)
            cursor_at_end_of_token = text.endswith((" ", "\t"))
        except ValueError:
            return

        if cursor_at_end_of_token or not tokens:
            previous = tokens
            stub = ""
        else:
            previous = tokens[:-1]
            stub = tokens[-1]

        if not stub and self._awaiting_value(previous):
            return

        yield from self._yield_lcp_completions(self.suggest(stub), stub)

    def suggest(self, stub: str) -> list[str]:
        """Return every alias starting with `stub`."""
        return [
            alias
            for alias in self.registry.aliases
            if alias.startswith(stub)
            and (self.include_negations or not self.registry.is_synthesized(alias))
        ]

    def _awaiting_value(self, tokens: list[str]) -> bool:
        """Return True if the last token invokes an argument that takes values."""
        if not tokens:
            return False
        spec = self.registry.resolve(tokens[-1])
        return spec is not None and not spec.is_flag

    def _ensure_quote(self, text: str) -> str:
        if " " in text or "\t" in text:
            return f'"{text}"'
        return text

    def _yield_lcp_completions(self, suggestions, stub):
        """
        Yield completions for the current stub using longest-common-prefix logic.

        Behavior:
        - If only one match → yield it fully.
        - If multiple matches share a longer prefix → insert the prefix, but also
            display all matches in the menu.
        - If no shared prefix → list all matches individually.
        """
        matches = [s for s in suggestions if s.startswith(stub)]
        if not matches:
            return

        lcp = os.path.commonprefix(matches)

        if len(matches) == 1:
            yield Completion(
                self._ensure_quote(matches[0]),
                start_position=-len(stub),
                display=matches[0],
            )
        elif len(lcp) > len(stub) and not lcp.startswith("-"):
            yield Completion(lcp, start_position=-len(stub), display=lcp)
            for match in matches:
                yield Completion(
                    self._ensure_quote(match), start_position=-len(stub), display=match
                )
        else:
            for match in matches:
                yield Completion(
                    self._ensure_quote(match), start_position=-len(stub), display=match
                )
