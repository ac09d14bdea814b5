import sys

from invocator import ArgumentSpec, ArgumentSpecBuilder, InvocatorError, ParseEngine, Registry
from invocator.display import render_error, render_result


def build_registry() -> Registry:
    registry = Registry()
    registry.register(ArgumentSpec.flag("verbose", "-v", "--verbose"))
    registry.register(ArgumentSpec.flag("dry_run", "-d", "--dry-run"))
    registry.register(ArgumentSpec.word("region", "-r", "--region"))
    registry.register(
        ArgumentSpecBuilder("vector")
        .name("services")
        .alias("-s", "--services")
        .required()
        .build()
    )
    return registry


def main() -> int:
    registry = build_registry()
    engine = ParseEngine(registry)
    tokens = sys.argv[1:] or ["-vd", "--region", "us-east-1", "-s", "api", "worker"]
    try:
        result = engine.parse(tokens)
    except InvocatorError as error:
        render_error(error)
        return 2
    render_result(result, registry)
    return 0


if __name__ == "__main__":
    sys.exit(main())
