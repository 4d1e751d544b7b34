"""Session-scoped store of edited field values."""
from __future__ import annotations

import dataclasses
import logging
from types import MappingProxyType
from typing import Any, Dict, Iterator, Mapping, Optional

from .inference import parse_number
from .structures import Field

logger = logging.getLogger(__name__)

_TRUTHY_FORM_VALUES = frozenset({"on", "true", "1", "yes"})


class FieldMutationStore:
    """Keyed mapping from predicate IRI to the current field value.

    The store is created from a freshly built field model and replaced, not
    merged, when another subject is loaded.
    """

    def __init__(self, fields: Mapping[str, Field]) -> None:
        self._fields: Dict[str, Field] = dict(fields)

    def __len__(self) -> int:
        return len(self._fields)

    def __iter__(self) -> Iterator[str]:
        return iter(self._fields)

    def __contains__(self, predicate: object) -> bool:
        return predicate in self._fields

    @property
    def fields(self) -> Mapping[str, Field]:
        return MappingProxyType(self._fields)

    def get(self, predicate: str) -> Optional[Field]:
        return self._fields.get(predicate)

    def values(self) -> Dict[str, Any]:
        return {predicate: field.value for predicate, field in self._fields.items()}

    def update(self, predicate: str, value: Any) -> Mapping[str, Field]:
        """Replace the field at ``predicate`` with a copy carrying ``value``.

        Updates aimed at a predicate the store does not hold are ignored.
        """

        current = self._fields.get(predicate)
        if current is None:
            logger.debug("Ignoring update for unknown predicate %s", predicate)
            return self.fields
        updated = dict(self._fields)
        updated[predicate] = dataclasses.replace(current, value=value)
        self._fields = updated
        return self.fields


def coerce_value(field: Field, raw: Optional[str]) -> Any:
    """Convert a submitted form value into the value type of ``field``."""

    if field.kind == "boolean":
        return raw is not None and raw.strip().lower() in _TRUTHY_FORM_VALUES
    text = "" if raw is None else raw
    if field.kind == "number":
        return parse_number(text)
    if field.kind == "date":
        return text.strip()[:10]
    return text
