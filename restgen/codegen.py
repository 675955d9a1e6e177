"""Render the Lua template and write generated output.

Takes the context from context_builder and produces the client module,
either on stdout or in a file.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Any, Callable

import jinja2

from .context_builder import build_context
from .errors import OutputError, TemplateError
from .model import Schema
from .naming import pascal_to_snake, strip_newlines

logger = logging.getLogger(__name__)

TEMPLATE_DIR = Path(__file__).parent / "templates"
TEMPLATE_NAME = "rest.lua.j2"


def template_filters() -> dict[str, Callable[..., Any]]:
    """Text filters available in the template."""
    return {
        "pascal_to_snake": pascal_to_snake,
        "strip_newlines": strip_newlines,
        "uppercase": str.upper,
    }


def make_environment(template_dir: Path = TEMPLATE_DIR) -> jinja2.Environment:
    """Create the Jinja2 environment with the template filters installed."""
    env = jinja2.Environment(
        loader=jinja2.FileSystemLoader(str(template_dir)),
        keep_trailing_newline=True,
        trim_blocks=True,
        lstrip_blocks=True,
    )
    env.filters.update(template_filters())
    return env


def render(
    schema: Schema,
    template_name: str = TEMPLATE_NAME,
    template_dir: Path = TEMPLATE_DIR,
) -> str:
    """Render the client module for schema into a string."""
    context = build_context(schema)
    env = make_environment(template_dir)
    try:
        template = env.get_template(template_name)
        output = template.render(**context)
    except jinja2.TemplateError as exc:
        raise TemplateError(f"Template parse error: {exc}") from exc

    logger.info(
        "Rendered %d functions, %d enums",
        context["function_count"], context["enum_count"],
    )
    return output


def write_output(output: str, path: Path | None = None) -> None:
    """Write rendered output to path, or to stdout when path is None."""
    if path is None:
        sys.stdout.write(output)
        sys.stdout.flush()
        return

    try:
        with open(path, "w", encoding="utf-8") as f:
            f.write(output)
    except OSError as exc:
        raise OutputError(f"Unable to create file: {exc}") from exc


def generate(
    schema: Schema,
    output: Path | None = None,
    template_dir: Path = TEMPLATE_DIR,
) -> str:
    """Render the template for schema and write it out.

    The whole module is rendered before the destination is opened, so a
    template failure never leaves an output file behind.
    """
    text = render(schema, template_dir=template_dir)
    write_output(text, output)
    logger.info("Generated %s", output or "<stdout>")
    return text
