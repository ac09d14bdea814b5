import pytest

from invocator.exceptions import NegationOnNonFlagError
from invocator.parser import ArgumentSpec, Flag, ParseEngine, Registry


@pytest.fixture
def registry():
    registry = Registry()
    registry.register(ArgumentSpec.flag("sleep", "-s", "--sleep"))
    registry.register(ArgumentSpec.flag("radio", "--radio", "r"))
    registry.register(ArgumentSpec.word("name", "-n", "--name"))
    registry.register(ArgumentSpec.vector("colors", "-d", "--colors"))
    return registry


@pytest.mark.parametrize("token", ["-s", "--sleep", "sleep"])
def test_flag_sets_true(registry, token):
    result = ParseEngine(registry).parse([token])
    assert result["sleep"] == Flag(True)


@pytest.mark.parametrize("token", ["-no-s", "--no-sleep", "no-sleep"])
def test_negated_flag_sets_false(registry, token):
    result = ParseEngine(registry).parse([token])
    assert result["sleep"] == Flag(False)


def test_bare_alias_negation(registry):
    result = ParseEngine(registry).parse(["no-r"])
    assert result.flag("radio") is False
    result = ParseEngine(registry).parse(["r"])
    assert result.flag("radio") is True


def test_flag_consumes_nothing(registry):
    result = ParseEngine(registry).parse(["--sleep", "--name", "Jondo"])
    assert result.flag("sleep") is True
    assert result.word("name") == "Jondo"


def test_last_invocation_wins(registry):
    result = ParseEngine(registry).parse(["--sleep", "--no-sleep"])
    assert result.flag("sleep") is False
    result = ParseEngine(registry).parse(["--no-sleep", "-s"])
    assert result.flag("sleep") is True


@pytest.mark.parametrize("token", ["--no-name", "-no-n", "no-name", "-no-d"])
def test_negation_on_non_flag_fails(registry, token):
    with pytest.raises(NegationOnNonFlagError) as exc_info:
        ParseEngine(registry).parse([token, "value"])
    assert exc_info.value.token == token
