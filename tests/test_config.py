from pathlib import Path

import pytest
from pydantic import ValidationError

from invocator.config import InvocatorConfig, RawArgument, find_config, loader
from invocator.exceptions import DuplicateAliasError, InvalidSpecError
from invocator.parser import ArgumentType, ParseEngine

YAML_CONFIG = """
strict: true
arguments:
  - name: verbose
    type: flag
    aliases: ["-v", "--verbose"]
  - name: output
    type: text
    aliases: -o
  - name: files
    type: vector
    aliases: ["-f", "--files"]
    required: true
"""

TOML_CONFIG = """
[[arguments]]
name = "verbose"
aliases = ["-v", "--verbose"]

[[arguments]]
name = "files"
type = "list"
aliases = ["-f"]
required = true
"""


@pytest.fixture(autouse=True)
def fake_home(monkeypatch, tmp_path):
    """Isolate config discovery from the real home and working directory."""
    home = tmp_path / "home"
    work = tmp_path / "work"
    home.mkdir()
    work.mkdir()
    monkeypatch.setattr(Path, "home", lambda: home)
    monkeypatch.chdir(work)
    monkeypatch.delenv("INVOCATOR_CONFIG", raising=False)
    return home


def test_load_yaml(tmp_path):
    path = tmp_path / "args.yaml"
    path.write_text(YAML_CONFIG)
    config = loader(path)
    assert config.strict is True
    assert [argument.name for argument in config.arguments] == [
        "verbose",
        "output",
        "files",
    ]
    assert config.arguments[1].type == ArgumentType.WORD
    assert config.arguments[1].aliases == ["-o"]

    engine = config.to_engine()
    assert isinstance(engine, ParseEngine)
    assert engine.strict is True
    result = engine.parse(["-v", "-o", "out.txt", "-f", "a", "b"])
    assert result.to_dict() == {
        "verbose": True,
        "output": "out.txt",
        "files": ["a", "b"],
    }


def test_load_toml(tmp_path):
    path = tmp_path / "args.toml"
    path.write_text(TOML_CONFIG)
    config = loader(str(path))
    assert config.strict is False
    registry = config.to_registry()
    assert registry.get("files").type == ArgumentType.VECTOR
    assert registry.get("verbose").type == ArgumentType.FLAG
    assert registry.is_known("--no-verbose")


def test_loader_rejects_bad_input(tmp_path):
    with pytest.raises(TypeError):
        loader(42)  # type: ignore[arg-type]
    with pytest.raises(FileNotFoundError):
        loader(tmp_path / "missing.yaml")

    unsupported = tmp_path / "args.json"
    unsupported.write_text("{}")
    with pytest.raises(ValueError, match="Unsupported"):
        loader(unsupported)

    not_a_mapping = tmp_path / "list.yaml"
    not_a_mapping.write_text("- a\n- b\n")
    with pytest.raises(ValueError, match="dictionary"):
        loader(not_a_mapping)


def test_invalid_argument_type(tmp_path):
    path = tmp_path / "args.yaml"
    path.write_text("arguments:\n  - name: count\n    type: number\n")
    with pytest.raises(ValidationError):
        loader(path)


def test_to_registry_propagates_registration_errors():
    config = InvocatorConfig(
        arguments=[
            RawArgument(name="pizza", aliases=["-p"]),
            RawArgument(name="pasta", aliases=["-p"]),
        ]
    )
    with pytest.raises(DuplicateAliasError):
        config.to_registry()


def test_raw_argument_invalid_spec():
    with pytest.raises(InvalidSpecError):
        RawArgument(name="  ").to_spec()


def test_find_config_in_cwd():
    config_file = Path.cwd() / "invocator.yaml"
    config_file.touch()
    assert find_config() == config_file


def test_find_config_from_environment(monkeypatch, tmp_path):
    config_file = tmp_path / "custom.toml"
    config_file.touch()
    monkeypatch.setenv("INVOCATOR_CONFIG", str(config_file))
    assert find_config() == config_file


def test_find_global_config(fake_home):
    config_file = fake_home / ".config" / "invocator" / "invocator.toml"
    config_file.parent.mkdir(parents=True)
    config_file.touch()
    assert find_config() == config_file


def test_find_config_none():
    assert find_config() is None
