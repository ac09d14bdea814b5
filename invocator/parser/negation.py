# Invocator Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Negation prefix handling for flag aliases.

Every flag alias gets a negated twin that keeps its dash style:

    --verbose → --no-verbose
    -v        → -no-v
    verbose   → no-verbose

Detection and stripping are separate steps. `detect_negation` only reports
whether one of the prefixes is present; `strip_negation` removes exactly the
matched prefix once, rebuilding the alias it was synthesized from.
"""
from __future__ import annotations

LONG_NEGATION = "--no-"
SHORT_NEGATION = "-no-"
BARE_NEGATION = "no-"

# Longest first, "-no-" is a suffix of "--no-".
NEGATION_PREFIXES: tuple[tuple[str, str], ...] = (
    (LONG_NEGATION, "--"),
    (SHORT_NEGATION, "-"),
    (BARE_NEGATION, ""),
)


def negation_prefix(token: str) -> str | None:
    """Return the negation prefix `token` starts with, if any."""
    for prefix, _ in NEGATION_PREFIXES:
        if token.startswith(prefix):
            return prefix
    return None


def detect_negation(token: str) -> bool:
    """Return True if `token` carries a negation prefix."""
    return negation_prefix(token) is not None


def strip_negation(token: str) -> str:
    """
    Remove a single negation prefix from `token`.

    Args:
        token (str): The raw token, e.g. `--no-color`.

    Returns:
        str: The un-negated alias (`--color`), or `token` unchanged when it
        carries no negation prefix.
    """
    for prefix, replacement in NEGATION_PREFIXES:
        if token.startswith(prefix):
            return replacement + token[len(prefix) :]
    return token


def negate_alias(alias: str) -> str:
    """Build the negated form of a flag alias."""
    if alias.startswith("--"):
        return f"{LONG_NEGATION}{alias[2:]}"
    if alias.startswith("-"):
        return f"{SHORT_NEGATION}{alias[1:]}"
    return f"{BARE_NEGATION}{alias}"
