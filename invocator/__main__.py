"""
Invocator Argument Parser

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import json
import logging
import sys
from argparse import REMAINDER, ArgumentParser, Namespace
from pathlib import Path
from typing import Sequence

from prompt_toolkit import PromptSession

from invocator.completer import RegistryCompleter
from invocator.config import InvocatorConfig, find_config, loader
from invocator.console import console
from invocator.display import render_error, render_result
from invocator.exceptions import InvocatorError
from invocator.logger import logger
from invocator.parser.engine import ParseEngine
from invocator.utils import get_program_invocation, setup_logging, split_command_line
from invocator.validators import parse_validator


def get_root_parser(prog: str | None = "invocator") -> ArgumentParser:
    parser = ArgumentParser(
        prog=prog,
        description="Invocator - Parse tokens against a declared argument set.",
        epilog="Arguments are declared in invocator.yaml or invocator.toml.",
    )
    parser.add_argument(
        "-c", "--config", type=Path, help="Path to a YAML or TOML argument set."
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail on tokens no argument claims instead of skipping them.",
    )
    parser.add_argument(
        "--json", action="store_true", help="Print the parsed values as JSON."
    )
    parser.add_argument(
        "-i",
        "--interactive",
        action="store_true",
        help="Read token lines from an interactive prompt.",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging."
    )
    parser.add_argument("tokens", nargs=REMAINDER, help="Tokens to parse.")
    return parser


def load_engine(args: Namespace) -> ParseEngine | None:
    config_path = args.config or find_config()
    if config_path is None:
        return None
    config: InvocatorConfig = loader(config_path)
    if args.strict:
        config.strict = True
    return config.to_engine()


def parse_and_render(engine: ParseEngine, tokens: Sequence[str], as_json: bool) -> int:
    try:
        result = engine.parse(tokens)
    except InvocatorError as error:
        render_error(error)
        return 2
    if as_json:
        print(json.dumps(result.to_dict()))
    else:
        render_result(result, engine.registry)
    return 0


def run_interactive(engine: ParseEngine, as_json: bool) -> int:
    session: PromptSession = PromptSession(
        message="invocator > ",
        completer=RegistryCompleter(engine.registry),
        validator=parse_validator(engine),
        validate_while_typing=False,
    )
    while True:
        try:
            text = session.prompt()
        except (EOFError, KeyboardInterrupt):
            return 0
        parse_and_render(engine, split_command_line(text), as_json)


def main(argv: Sequence[str] | None = None) -> int:
    args = get_root_parser().parse_args(argv)
    setup_logging(
        log_filename=None,
        console_log_level=logging.DEBUG if args.verbose else logging.WARNING,
    )

    try:
        engine = load_engine(args)
    except (InvocatorError, ValueError, OSError) as error:
        logger.error("Failed to load argument set: %s", error)
        console.print(f"[bold red]Could not load argument set:[/] {error}")
        return 1
    if engine is None:
        console.print(
            "[bold red]No argument set found.[/] "
            f"Run '{get_program_invocation()} --config PATH' "
            "or create invocator.yaml in the current directory."
        )
        return 1

    tokens = list(args.tokens)
    if tokens and tokens[0] == "--":
        tokens = tokens[1:]

    if args.interactive:
        return run_interactive(engine, args.json)
    return parse_and_render(engine, tokens, args.json)


if __name__ == "__main__":
    sys.exit(main())
