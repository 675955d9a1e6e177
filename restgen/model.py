"""Immutable model of the Swagger document fields the generator reads.

Only the subset of Swagger 2.0 consumed by the template is modelled.
Unknown fields are ignored. All models are frozen once validated.
"""

from __future__ import annotations

from typing import Any, Iterator

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

# Keys of a path item that describe an operation
HTTP_METHODS = ("get", "put", "post", "delete", "options", "head", "patch")


class _Model(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, value: Any) -> Any:
        # null fields fall back to their defaults
        if isinstance(value, dict):
            return {k: v for k, v in value.items() if v is not None}
        return value


class ItemType(_Model):
    """Element type of an array parameter or property."""

    type: str = ""
    ref: str = Field(default="", alias="$ref")


class SchemaRef(_Model):
    """Inline schema of a body parameter or a response."""

    type: str = ""
    ref: str = Field(default="", alias="$ref")


class Parameter(_Model):
    """A single operation parameter (path, query or body)."""

    name: str = ""
    description: str = ""
    location: str = Field(default="", alias="in")
    required: bool = False
    param_type: str = Field(default="", alias="type")  # primitives only
    items: ItemType = ItemType()
    schema_: SchemaRef = Field(default=SchemaRef(), alias="schema")  # body only
    format: str = ""


class Response(_Model):
    schema_: SchemaRef = Field(default=SchemaRef(), alias="schema")


class Responses(_Model):
    ok: Response = Field(default=Response(), alias="200")


class Operation(_Model):
    """One HTTP method on one path."""

    operation_id: str = Field(default="", alias="operationId")
    summary: str = ""
    parameters: tuple[Parameter, ...] = ()
    responses: Responses = Responses()

    @property
    def response_ref(self) -> str:
        """The $ref of the 200 response schema, or an empty string."""
        return self.responses.ok.schema_.ref


class Property(_Model):
    """A property of an object definition."""

    type: str = ""
    ref: str = Field(default="", alias="$ref")
    items: ItemType = ItemType()
    format: str = ""
    description: str = ""


class Definition(_Model):
    """A named data shape: an enum or an object with properties."""

    properties: dict[str, Property] = {}
    enum: tuple[str, ...] = ()
    description: str = ""
    title: str = ""

    @field_validator("properties", mode="before")
    @classmethod
    def _skip_null_properties(cls, value: Any) -> Any:
        if not isinstance(value, dict):
            return value
        return {name: p for name, p in value.items() if p is not None}

    @field_validator("enum", mode="before")
    @classmethod
    def _enum_as_strings(cls, value: Any) -> Any:
        if isinstance(value, list):
            return [str(v) for v in value if v is not None]
        return value

    @property
    def is_enum(self) -> bool:
        return len(self.enum) > 0


class Schema(_Model):
    """Root of the decoded document."""

    paths: dict[str, dict[str, Operation]] = {}
    definitions: dict[str, Definition] = {}

    @field_validator("paths", mode="before")
    @classmethod
    def _only_operations(cls, value: Any) -> Any:
        # Path items may carry shared keys such as "parameters"
        if not isinstance(value, dict):
            return value
        return {
            url: {
                method: operation
                for method, operation in item.items()
                if method.lower() in HTTP_METHODS and operation is not None
            } if isinstance(item, dict) else item
            for url, item in value.items()
            if item is not None
        }

    @field_validator("definitions", mode="before")
    @classmethod
    def _skip_null_definitions(cls, value: Any) -> Any:
        if not isinstance(value, dict):
            return value
        return {name: d for name, d in value.items() if d is not None}

    def operations(self) -> Iterator[tuple[str, str, Operation]]:
        """Yield (url, method, operation) sorted by url, then method."""
        for url in sorted(self.paths):
            methods = self.paths[url]
            for method in sorted(methods):
                yield url, method, methods[method]
