import pytest
from prompt_toolkit.completion import Completion
from prompt_toolkit.document import Document

from invocator.completer import RegistryCompleter
from invocator.parser import ArgumentSpec, Registry


@pytest.fixture
def registry():
    return Registry(
        [
            ArgumentSpec.flag("verbose", "-v", "--verbose"),
            ArgumentSpec.flag("version", "--version"),
            ArgumentSpec.word("name", "-n", "--name"),
            ArgumentSpec.vector("tags", "--tags"),
        ]
    )


def completions_for(completer, text):
    return list(completer.get_completions(Document(text), None))


def test_suggest_by_prefix(registry):
    completer = RegistryCompleter(registry)
    assert completer.suggest("--ve") == ["--verbose", "--version"]
    assert "--no-verbose" in completer.suggest("--no")


def test_suggest_without_negations(registry):
    completer = RegistryCompleter(registry, include_negations=False)
    assert not any(alias.startswith("--no-") for alias in completer.suggest("--"))


def test_single_match_completes_fully(registry):
    completer = RegistryCompleter(registry)
    results = completions_for(completer, "--na")
    assert len(results) == 1
    assert results[0].text == "--name"
    assert results[0].start_position == -4


def test_multiple_matches_listed(registry):
    completer = RegistryCompleter(registry)
    results = completions_for(completer, "-v --ver")
    texts = [c.text for c in results]
    assert texts == ["--verbose", "--version"]
    assert all(isinstance(c, Completion) for c in results)


def test_bare_prefix_inserts_lcp(registry):
    completer = RegistryCompleter(registry)
    results = completions_for(completer, "v")
    texts = [c.text for c in results]
    assert texts[0] == "ver"
    assert "verbose" in texts
    assert "version" in texts


def test_no_suggestions_while_awaiting_value(registry):
    completer = RegistryCompleter(registry)
    assert completions_for(completer, "--name ") == []
    assert completions_for(completer, "--tags ") == []


def test_suggestions_after_flag(registry):
    completer = RegistryCompleter(registry)
    texts = [c.text for c in completions_for(completer, "-v ")]
    assert "--name" in texts
    assert "-n" in texts


def test_no_match(registry):
    completer = RegistryCompleter(registry)
    assert completions_for(completer, "--zzz") == []


def test_unbalanced_quotes(registry):
    completer = RegistryCompleter(registry)
    assert completions_for(completer, '--name "oops') == []
