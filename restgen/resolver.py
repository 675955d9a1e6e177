"""Resolve $ref strings against the schema definitions.

Definition keys in Swagger documents produced by grpc-gateway do not use a
consistent first-letter casing, so every lookup tries both the PascalCase and
the camelCase spelling of the referenced name. The PascalCase entry wins when
both exist. A reference that matches neither is treated as absent.
"""

from __future__ import annotations

from .model import Definition, Property, Schema
from .naming import camel_to_pascal, pascal_to_camel, title

REF_PREFIX = "#/definitions/"


def clean_ref(ref: str) -> str:
    """Turn '#/definitions/apiAccount' into the class name 'ApiAccount'."""
    return title(ref.removeprefix(REF_PREFIX))


def find_definition(schema: Schema, ref: str) -> Definition | None:
    """Look up the definition a $ref points to, or None."""
    if not ref:
        return None
    name = clean_ref(ref)
    for candidate in (camel_to_pascal(name), pascal_to_camel(name)):
        definition = schema.definitions.get(candidate)
        if definition is not None:
            return definition
    return None


def is_enum(schema: Schema, ref: str) -> bool:
    """True if ref names a definition with at least one enum value."""
    definition = find_definition(schema, ref)
    return definition is not None and definition.is_enum


def sorted_properties(schema: Schema, ref: str) -> list[tuple[str, Property]]:
    """Return the properties of the referenced definition sorted by name."""
    definition = find_definition(schema, ref)
    if definition is None:
        return []
    return sorted(definition.properties.items(), key=lambda item: item[0])
