"""Build Jinja2 template context from the decoded schema.

Turns enum definitions into constant groups and every operation into a
function description: docs, formal arguments, assertions, URL building,
query parameters, request body and response wrapping.
"""

from __future__ import annotations

import logging
from typing import Any

from .model import Definition, Operation, Parameter, Schema
from .naming import (
    is_authenticate_method,
    pascal_to_snake,
    remove_prefix,
    title,
)
from .resolver import sorted_properties
from .schema_parser import class_snake_name, lua_type, var_comment, var_name

logger = logging.getLogger(__name__)


def function_name(operation_id: str) -> str:
    """Generated function name, e.g. 'Nakama_GetAccount' -> 'get_account'."""
    return remove_prefix(pascal_to_snake(operation_id))


def _local_name(param: Parameter) -> str:
    return pascal_to_snake(var_name(param.name, param.param_type, param.schema_.ref))


def _check(var: str, luatype: str, optional: bool) -> dict[str, Any]:
    return {"var": var, "lua_type": luatype, "optional": optional}


def build_enum(name: str, definition: Definition) -> dict[str, Any]:
    """Constant group for one enum definition."""
    return {
        "name": title(name),
        "description": definition.description,
        "values": list(definition.enum),
    }


def _expand_body(schema: Schema, param: Parameter, fn: dict[str, Any]) -> None:
    """Flatten a referenced body object into one argument per property."""
    properties = sorted_properties(schema, param.schema_.ref)
    fields = []
    for key, prop in properties:
        ref = prop.ref or prop.items.ref
        fn["docs"].append({
            "name": key,
            "type": var_comment(schema, key, prop.type, ref, prop.items.type),
            "description": prop.description,
        })
        fn["args"].append(key)
        # Expanded properties are always optional
        fn["checks"].append(_check(key, lua_type(schema, prop.type, prop.ref), True))
        fields.append(key)
    fn["bodies"].append({"fields": fields, "raw": False})


def _raw_body(schema: Schema, param: Parameter, fn: dict[str, Any]) -> None:
    """Pass a body with an inline schema through as a single argument."""
    fn["docs"].append({
        "name": "body",
        "type": param.schema_.type,
        "description": param.description,
    })
    fn["args"].append("body")
    fn["checks"].append(
        _check("body", lua_type(schema, param.schema_.type, ""), not param.required)
    )
    fn["bodies"].append({"fields": [], "raw": True})


def build_function(
    schema: Schema, url: str, method: str, operation: Operation,
) -> dict[str, Any]:
    """Describe the generated function for one operation."""
    fn: dict[str, Any] = {
        "name": function_name(operation.operation_id),
        "summary": operation.summary,
        "url": url,
        "method": method.upper(),
        "is_authenticate": is_authenticate_method(operation.operation_id),
        "docs": [],
        "args": [],
        "checks": [],
        "path_params": [],
        "query_params": [],
        "bodies": [],
        "response_class": "",
    }

    for param in operation.parameters:
        if param.location == "body":
            if param.schema_.ref:
                _expand_body(schema, param, fn)
            elif param.schema_.type:
                _raw_body(schema, param, fn)
            continue

        local = _local_name(param)
        fn["docs"].append({
            "name": local,
            "type": var_comment(
                schema, param.name, param.param_type, param.schema_.ref,
                param.items.type,
            ),
            "description": param.description,
        })
        fn["args"].append(local)
        fn["checks"].append(_check(
            local,
            lua_type(schema, param.param_type, param.schema_.ref),
            not param.required,
        ))
        if param.location == "path":
            fn["path_params"].append({
                "name": param.name, "placeholder": "{" + param.name + "}", "var": local,
            })
        elif param.location == "query":
            fn["query_params"].append({"name": param.name, "var": local})

    if operation.response_ref:
        fn["response_class"] = class_snake_name(operation.response_ref)

    logger.debug("%s %s -> %s(%s)", fn["method"], url, fn["name"], ", ".join(fn["args"]))
    return fn


def build_context(schema: Schema) -> dict[str, Any]:
    """Build the full template context from the schema."""
    enums = [
        build_enum(name, definition)
        for name, definition in sorted(schema.definitions.items(), key=lambda item: item[0])
        if definition.is_enum
    ]
    functions = [
        build_function(schema, url, method, operation)
        for url, method, operation in schema.operations()
    ]
    return {
        "enums": enums,
        "functions": functions,
        "enum_count": len(enums),
        "function_count": len(functions),
    }
