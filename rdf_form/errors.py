"""Exception types raised by the form engine and its collaborators."""
from __future__ import annotations

from typing import Optional


class FormError(RuntimeError):
    """Base class for failures surfaced to callers of the form engine."""


class DescribeRequestError(FormError):
    """Raised when the SPARQL endpoint cannot answer a DESCRIBE request."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class TurtleParseError(FormError, ValueError):
    """Raised when a Turtle document cannot be parsed into statements."""


class ResourceNotFoundError(FormError):
    """Raised when a fetched document describes neither the resource nor any fallback."""

    def __init__(self, resource_iri: str) -> None:
        super().__init__(f"Resource not found in description: {resource_iri}")
        self.resource_iri = resource_iri
