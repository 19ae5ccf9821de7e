"""Exceptions raised by the event page pipeline."""
from __future__ import annotations


class GeneratorError(RuntimeError):
    """Base class for failures that abort a generation run."""


class FetchError(GeneratorError):
    """Raised when the feed cannot be retrieved."""


class ParseError(GeneratorError):
    """Raised when the feed body is not valid JSON."""


class SchemaError(GeneratorError):
    """Raised when the feed matches none of the accepted top-level shapes."""


class OutputError(GeneratorError):
    """Raised when the output directory or a generated file cannot be written."""
