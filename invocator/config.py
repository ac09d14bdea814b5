# Invocator Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""config.py
Configuration loader for Invocator argument sets.

Argument sets can be declared in YAML or TOML:

    strict: false
    arguments:
      - name: verbose
        type: flag
        aliases: ["-v", "--verbose"]
      - name: files
        type: vector
        aliases: ["-f", "--files"]
        required: true
"""
from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import toml
import yaml
from pydantic import BaseModel, Field, field_validator

from invocator.logger import logger
from invocator.parser.argument import ArgumentSpec, ArgumentSpecBuilder
from invocator.parser.argument_type import ArgumentType
from invocator.parser.engine import ParseEngine
from invocator.parser.registry import Registry


class RawArgument(BaseModel):
    """Raw argument model for Invocator configuration."""

    name: str
    type: ArgumentType = ArgumentType.FLAG
    aliases: list[str] = Field(default_factory=list)
    required: bool = False

    @field_validator("type", mode="before")
    @classmethod
    def validate_type(cls, value: Any) -> ArgumentType:
        return ArgumentType(value)

    @field_validator("aliases", mode="before")
    @classmethod
    def validate_aliases(cls, value: Any) -> list[str]:
        if isinstance(value, str):
            return [value]
        return value

    def to_spec(self) -> ArgumentSpec:
        return (
            ArgumentSpecBuilder(self.type)
            .name(self.name)
            .alias(*self.aliases)
            .required(self.required)
            .build()
        )


class InvocatorConfig(BaseModel):
    """Invocator argument set configuration model."""

    strict: bool = False
    arguments: list[RawArgument] = Field(default_factory=list)

    def to_registry(self) -> Registry:
        registry = Registry()
        for raw_argument in self.arguments:
            registry.register(raw_argument.to_spec())
        return registry

    def to_engine(self) -> ParseEngine:
        return ParseEngine(self.to_registry(), strict=self.strict)


def find_config() -> Path | None:
    candidates = [
        Path.cwd() / "invocator.yaml",
        Path.cwd() / "invocator.toml",
        Path.cwd() / ".invocator.yaml",
        Path.cwd() / ".invocator.toml",
        Path(os.environ.get("INVOCATOR_CONFIG", "invocator.yaml")),
        Path.home() / ".config" / "invocator" / "invocator.yaml",
        Path.home() / ".config" / "invocator" / "invocator.toml",
    ]
    return next((path for path in candidates if path.is_file()), None)


def loader(file_path: Path | str) -> InvocatorConfig:
    """
    Load an Invocator argument set from a YAML or TOML file.

    The file should contain a dictionary with a list of arguments.

    Each argument should be defined as a dictionary with at least:
    - name: the canonical argument name
    and optionally `type` (flag, word, vector), `aliases` and `required`.

    Args:
        file_path (str | Path): Path to the config file (YAML or TOML).

    Returns:
        InvocatorConfig: The validated configuration.

    Raises:
        TypeError: If `file_path` is not a string or Path.
        FileNotFoundError: If the file does not exist.
        ValueError: If the file format is unsupported or the content is not a
            dictionary.
        pydantic.ValidationError: If an argument entry is malformed.
    """
    if isinstance(file_path, (str, Path)):
        path = Path(file_path)
    else:
        raise TypeError("file_path must be a string or Path object.")

    if not path.is_file():
        raise FileNotFoundError(f"No such config file: {file_path}")

    suffix = path.suffix
    with path.open("r", encoding="UTF-8") as config_file:
        if suffix in (".yaml", ".yml"):
            raw_config = yaml.safe_load(config_file)
        elif suffix == ".toml":
            raw_config = toml.load(config_file)
        else:
            raise ValueError(f"Unsupported config format: {suffix}")

    if not isinstance(raw_config, dict):
        raise ValueError(
            "Configuration file must contain a dictionary with a list of arguments.\n"
            "Example:\n"
            "arguments:\n"
            "  - name: 'verbose'\n"
            "    type: 'flag'\n"
            "    aliases: ['-v', '--verbose']"
        )

    config = InvocatorConfig.model_validate(raw_config)
    logger.debug("Loaded %d argument(s) from %s", len(config.arguments), path)
    return config
