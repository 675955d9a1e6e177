"""Load and decode the Swagger document.

Reads a JSON file and validates it into the immutable Schema model.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from .errors import InputError
from .model import Schema

logger = logging.getLogger(__name__)


def read_document(path: Path) -> dict[str, Any]:
    """Read the raw JSON document from disk."""
    try:
        with open(path, encoding="utf-8") as f:
            document = json.load(f)
    except OSError as exc:
        raise InputError(f"Unable to read file: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise InputError(f"Unable to decode input {path} : {exc}") from exc

    if not isinstance(document, dict):
        raise InputError(f"Unable to decode input {path} : top level is not an object")
    return document


def parse_schema(document: dict[str, Any], source: str = "<document>") -> Schema:
    """Validate a decoded document into a Schema."""
    try:
        schema = Schema.model_validate(document)
    except ValidationError as exc:
        raise InputError(f"Unable to decode input {source} : {exc}") from exc

    logger.debug(
        "Decoded %s: %d paths, %d definitions",
        source, len(schema.paths), len(schema.definitions),
    )
    return schema


def load_schema(path: Path) -> Schema:
    """Load the Swagger document at path."""
    return parse_schema(read_document(path), str(path))
