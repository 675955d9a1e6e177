"""Shared fixtures for the generator tests.

The fixture document under tests/fixtures is a trimmed copy of the Nakama
Swagger document, including its mixed definition key casing.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable

import pytest

from restgen.loader import load_schema, parse_schema
from restgen.model import Schema

FIXTURES = Path(__file__).parent / "fixtures"
SWAGGER_PATH = FIXTURES / "nakama.swagger.json"


@pytest.fixture(scope="session")
def swagger_path() -> Path:
    return SWAGGER_PATH


@pytest.fixture(scope="session")
def schema() -> Schema:
    """The fixture document, decoded once for the whole session."""
    return load_schema(SWAGGER_PATH)


@pytest.fixture
def make_schema() -> Callable[..., Schema]:
    """Build a Schema from inline paths and definitions.

    Usage in tests::

        schema = make_schema(definitions={"Environment": {"enum": ["A"]}})
    """
    def _make(
        paths: dict[str, Any] | None = None,
        definitions: dict[str, Any] | None = None,
    ) -> Schema:
        return parse_schema({"paths": paths or {}, "definitions": definitions or {}})
    return _make


@pytest.fixture
def account_document() -> dict[str, Any]:
    """One GET /v2/account operation returning an Account object."""
    return {
        "paths": {
            "/v2/account": {
                "get": {
                    "summary": "Fetch an account.",
                    "operationId": "Nakama_GetAccount",
                    "parameters": [
                        {
                            "name": "id",
                            "description": "The account id.",
                            "in": "query",
                            "required": True,
                            "type": "string",
                        },
                    ],
                    "responses": {
                        "200": {
                            "description": "A successful response.",
                            "schema": {"$ref": "#/definitions/Account"},
                        },
                    },
                },
            },
        },
        "definitions": {
            "Account": {
                "type": "object",
                "properties": {
                    "email": {"type": "string"},
                    "id": {"type": "string"},
                },
            },
        },
    }
