# Invocator Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Rich rendering of parse results and errors.

Only results are rendered here; Invocator does not generate usage or help text.
"""
from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from invocator.console import console as default_console
from invocator.exceptions import InvocatorError
from invocator.parser.parsed_result import ParsedResult
from invocator.parser.registry import Registry
from invocator.parser.value import Flag, Value, Vector

TYPE_STYLES = {
    "flag": "cyan",
    "word": "green",
    "vector": "magenta",
}


def format_value(value: Value) -> str:
    if isinstance(value, Flag):
        return "[bold green]true[/]" if value.value else "[bold red]false[/]"
    if isinstance(value, Vector):
        return ", ".join(escape(item) for item in value.value)
    return escape(str(value.raw))


def build_result_table(
    result: ParsedResult,
    registry: Registry | None = None,
    title: str = "Parsed Arguments",
) -> Table:
    """
    Build a table of parsed values.

    When a registry is given, its arguments are listed in registration order and
    absent ones are shown dimmed; otherwise only the populated entries appear.
    """
    table = Table(title=title, show_lines=False, expand=False)
    table.add_column("Argument", style="bold")
    table.add_column("Type")
    table.add_column("Value")

    if registry is None:
        for name, value in result.items():
            style = TYPE_STYLES[value.type.value]
            table.add_row(escape(name), f"[{style}]{value.type}[/]", format_value(value))
    else:
        for spec in registry:
            style = TYPE_STYLES[spec.type.value]
            value = result.get(spec.name)
            shown = format_value(value) if value is not None else "[dim]-[/]"
            table.add_row(escape(spec.name), f"[{style}]{spec.type}[/]", shown)

    if result.unrecognized:
        table.caption = f"Skipped: {escape(' '.join(result.unrecognized))}"
    return table


def render_result(
    result: ParsedResult,
    registry: Registry | None = None,
    console: Console | None = None,
) -> None:
    (console or default_console).print(build_result_table(result, registry))


def render_error(error: InvocatorError, console: Console | None = None) -> None:
    (console or default_console).print(
        f"[bold red]error:[/] {escape(str(error))} [dim]({type(error).__name__})[/]"
    )
