"""Map Swagger parameter and property types to Lua.

Handles:
- Lua type tags used in runtime type assertions
- Generated variable names tagged with their type
- Zero-value literals
- Human readable type comments for the docs
- Enum references, which are plain strings on the wire

Every function is total: unknown types fall through to the table branch,
which stands for a reference to an object definition.
"""

from __future__ import annotations

from .model import Schema
from .naming import pascal_to_snake
from .resolver import clean_ref, is_enum

_LUA_TYPES: dict[str, str] = {
    "integer": "number",
    "number": "number",
    "string": "string",
    "boolean": "boolean",
    "array": "table",
    "object": "table",
}

_VAR_SUFFIXES: dict[str, str] = {
    "integer": "_int",
    "number": "_num",
    "string": "_str",
    "boolean": "_bool",
    "array": "_arr",
    "object": "_obj",
}

_LUA_DEFAULTS: dict[str, str] = {
    "integer": "0",
    "number": "0",
    "string": '""',
    "boolean": "false",
    "array": "{}",
    "object": "{ _ = '' }",
}


def class_snake_name(ref: str) -> str:
    """Snake-cased class name of a $ref, e.g. 'api_account'."""
    return pascal_to_snake(clean_ref(ref))


def lua_type(schema: Schema, param_type: str, ref: str) -> str:
    """Resolve a Swagger type (or enum reference) to a Lua type tag."""
    if is_enum(schema, ref):
        return "string"
    return _LUA_TYPES.get(param_type, "table")


def lua_default(param_type: str, ref: str) -> str:
    """Zero value literal for a Swagger type."""
    if param_type in _LUA_DEFAULTS:
        return _LUA_DEFAULTS[param_type]
    return f"M.create_{class_snake_name(ref)}()"


def var_name(name: str, param_type: str, ref: str) -> str:
    """Local variable name tagged with its type, e.g. 'id_str'."""
    if param_type in _VAR_SUFFIXES:
        return name + _VAR_SUFFIXES[param_type]
    return f"{name}_{class_snake_name(ref)}"


def var_comment(
    schema: Schema,
    name: str,
    param_type: str,
    ref: str,
    item_type: str = "",
) -> str:
    """Type annotation used in generated @param docs."""
    if param_type in ("integer", "number", "string", "boolean"):
        return _LUA_TYPES[param_type]
    if param_type == "array":
        return f"table ({lua_type(schema, item_type, ref)})"
    if param_type == "object":
        return "table (object)"
    return f"table ({class_snake_name(ref)})"
