import pytest

from invocator.exceptions import MissingRequiredError
from invocator.parser import ArgumentSpec, ParseEngine, Registry


def test_missing_required_names_short_and_long():
    registry = Registry()
    registry.register(ArgumentSpec.vector("beans", "--beans", "-b", required=True))
    with pytest.raises(MissingRequiredError) as exc_info:
        ParseEngine(registry).parse([])
    assert exc_info.value.argument == "beans"
    assert exc_info.value.identity == "-b/--beans"
    assert "-b/--beans" in str(exc_info.value)


@pytest.mark.parametrize(
    "aliases,identity",
    [
        (("--beans",), "--beans"),
        (("-b",), "-b"),
        ((), "beans"),
        (("bean-list",), "beans"),
    ],
)
def test_missing_required_identity(aliases, identity):
    registry = Registry()
    registry.register(ArgumentSpec.word("beans", *aliases, required=True))
    with pytest.raises(MissingRequiredError) as exc_info:
        ParseEngine(registry).parse(["unrelated"])
    assert exc_info.value.identity == identity


def test_required_present():
    registry = Registry()
    registry.register(ArgumentSpec.word("name", "-n", required=True))
    registry.register(ArgumentSpec.flag("verbose", "-v"))
    result = ParseEngine(registry).parse(["-n", "Jondo"])
    assert result.word("name") == "Jondo"
    assert "verbose" not in result


def test_required_flag_satisfied_by_negation():
    registry = Registry()
    registry.register(ArgumentSpec.flag("confirm", "--confirm", required=True))
    result = ParseEngine(registry).parse(["--no-confirm"])
    assert result.flag("confirm", default=True) is False
    with pytest.raises(MissingRequiredError):
        ParseEngine(registry).parse([])
