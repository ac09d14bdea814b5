import logging

import pytest
from rich.logging import RichHandler

from invocator.utils import get_program_invocation, setup_logging, split_command_line


@pytest.fixture(autouse=True)
def restore_root_handlers():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in root.handlers:
        handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


def test_setup_logging_cli_mode():
    setup_logging(mode="cli", log_filename=None)
    root = logging.getLogger()
    assert len(root.handlers) == 1
    assert isinstance(root.handlers[0], RichHandler)
    assert root.handlers[0].level == logging.WARNING


def test_setup_logging_json_mode_with_file(tmp_path):
    log_file = tmp_path / "invocator.log"
    setup_logging(
        mode="json",
        log_filename=str(log_file),
        json_log_to_file=True,
        console_log_level=logging.ERROR,
    )
    root = logging.getLogger()
    assert len(root.handlers) == 2
    assert any(isinstance(h, logging.FileHandler) for h in root.handlers)
    logging.getLogger("invocator").info("hello")
    for handler in root.handlers:
        handler.flush()
    assert '"message": "hello"' in log_file.read_text()


def test_setup_logging_from_environment(monkeypatch):
    monkeypatch.setenv("INVOCATOR_LOG_MODE", "cli")
    setup_logging(log_filename=None)
    assert isinstance(logging.getLogger().handlers[0], RichHandler)


def test_setup_logging_invalid_mode():
    with pytest.raises(ValueError):
        setup_logging(mode="xml", log_filename=None)


def test_split_command_line():
    assert split_command_line('-n "two words" -v') == ["-n", "two words", "-v"]


def test_get_program_invocation(monkeypatch):
    monkeypatch.setattr("sys.argv", ["/usr/bin/invocator"])
    assert get_program_invocation() == "invocator"
    monkeypatch.setattr("sys.argv", ["/x/invocator/__main__.py"])
    assert get_program_invocation() == "python -m invocator"
