"""Entry point: python -m restgen [--output FILE] SCHEMA.json

Reads a Swagger document and writes the generated Lua client module to
stdout or to FILE.
"""

from __future__ import annotations

import logging
from pathlib import Path

import click

from .codegen import generate
from .errors import GeneratorError
from .loader import load_schema

logger = logging.getLogger(__name__)


@click.command()
@click.argument("inputs", nargs=-1, type=click.Path(path_type=Path))
@click.option("-o", "--output", default=None, type=click.Path(dir_okay=False, path_type=Path), help="The output for generated code.")
@click.option("-v", "--verbose", is_flag=True, help="Log every generated function.")
@click.pass_context
def main(ctx: click.Context, inputs: tuple[Path, ...], output: Path | None, verbose: bool) -> None:
    """Generate a Lua REST client for Defold from a Swagger JSON document."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if not inputs:
        click.echo("No input file found.\n")
        click.echo(ctx.get_help())
        return
    if len(inputs) > 1:
        logger.warning("Ignoring extra inputs: %s", ", ".join(str(p) for p in inputs[1:]))

    try:
        schema = load_schema(inputs[0])
        generate(schema, output)
    except GeneratorError as exc:
        raise click.ClickException(str(exc)) from exc


if __name__ == "__main__":
    main()
