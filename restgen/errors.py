"""Errors raised while generating a client module.

Every failure is fatal to the run. The CLI turns these into a diagnostic
and a non-zero exit status.
"""

from __future__ import annotations


class GeneratorError(Exception):
    """Base class for all generation failures."""


class InputError(GeneratorError):
    """The schema document is missing, unreadable or malformed."""


class TemplateError(GeneratorError):
    """The code template is missing or fails to parse or render."""


class OutputError(GeneratorError):
    """The output destination cannot be created or written."""
