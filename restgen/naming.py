"""Case conversion and identifier helpers.

Generated identifiers come from Swagger operation ids and definition names:

  Nakama_AuthenticateEmail -> nakama_authenticate_email -> authenticate_email
  apiAccount               -> ApiAccount -> api_account
  ID                       -> id   (acronyms are not split)
"""

from __future__ import annotations

import re

# Prefix dropped from snake-cased operation ids
OPERATION_PREFIX = "nakama_"

# Operation ids starting with this are authentication calls
AUTHENTICATE_MARKER = "Nakama_Authenticate"

_WORD_START = re.compile(r"(^|[^0-9A-Za-z_])([a-z])")


def title(name: str) -> str:
    """Uppercase the first letter of every word."""
    return _WORD_START.sub(lambda m: m.group(1) + m.group(2).upper(), name)


def camel_to_pascal(name: str) -> str:
    """Convert camelCase to PascalCase."""
    if not name:
        return ""
    return name[0].upper() + name[1:]


def pascal_to_camel(name: str) -> str:
    """Convert PascalCase to camelCase."""
    if not name:
        return ""
    return name[0].lower() + name[1:]


def pascal_to_snake(name: str) -> str:
    """Convert PascalCase or camelCase to snake_case.

    A separator is inserted only where an uppercase ASCII letter directly
    follows a lowercase one, so runs of capitals stay together.
    """
    out = []
    prev_lower = False
    for ch in name:
        if "A" <= ch <= "Z" and prev_lower:
            out.append("_")
        out.append(ch.lower())
        prev_lower = "a" <= ch <= "z"
    return "".join(out)


def remove_prefix(name: str) -> str:
    """Strip the API prefix from a snake-cased operation id."""
    if name.startswith(OPERATION_PREFIX):
        return name[len(OPERATION_PREFIX):]
    return name


def is_authenticate_method(operation_id: str) -> bool:
    return operation_id.startswith(AUTHENTICATE_MARKER)


def strip_newlines(text: str) -> str:
    """Continue a multi-line description as Lua comment lines."""
    return text.replace("\n", "\n--")
