import pytest

from invocator.exceptions import EmptyVectorError
from invocator.parser import ArgumentSpec, ParseEngine, Registry, Vector


@pytest.fixture
def engine():
    registry = Registry()
    registry.register(ArgumentSpec.vector("v", "-v"))
    registry.register(ArgumentSpec.flag("mangle", "-M"))
    registry.register(ArgumentSpec.flag("pass", "-p"))
    registry.register(ArgumentSpec.word("name", "--name"))
    return ParseEngine(registry)


def test_vector_collects_values(engine):
    result = engine.parse(["-v", "a", "b", "c"])
    assert result["v"] == Vector(["a", "b", "c"])


def test_vector_alone_fails(engine):
    with pytest.raises(EmptyVectorError) as exc_info:
        engine.parse(["-v"])
    assert exc_info.value.argument == "v"


@pytest.mark.parametrize("following", ["-M", "--name", "-Mp", "-no-M", "no-mangle"])
def test_vector_followed_by_argument_fails(engine, following):
    with pytest.raises(EmptyVectorError) as exc_info:
        engine.parse(["-v", following, "x"])
    assert exc_info.value.found == following


def test_vector_stops_at_next_argument(engine):
    result = engine.parse(["-v", "red", "blue", "--name", "Jondo"])
    assert result.vector("v") == ["red", "blue"]
    assert result.word("name") == "Jondo"


def test_vector_stops_at_flag_cluster(engine):
    result = engine.parse(["-v", "red", "-Mp"])
    assert result.vector("v") == ["red"]
    assert result.flag("mangle") is True
    assert result.flag("pass") is True


def test_vector_keeps_abandoned_clusters(engine):
    # -x is unknown, so "-Mx" is a value
    result = engine.parse(["-v", "red", "-Mx", "blue"])
    assert result.vector("v") == ["red", "-Mx", "blue"]
    assert "mangle" not in result


def test_vector_keeps_unknown_long_options(engine):
    result = engine.parse(["-v", "--unknown", "orange"])
    assert result.vector("v") == ["--unknown", "orange"]


def test_vector_single_value(engine):
    result = engine.parse(["-v", "only"])
    assert result.vector("v") == ["only"]
