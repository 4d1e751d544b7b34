"""Typed domain objects used throughout the form engine."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar, Dict, List, NamedTuple, Optional, Union

from rdflib import BNode, Literal, URIRef


class Statement(NamedTuple):
    """A single parsed (subject, predicate, object) fact."""

    subject: Union[URIRef, BNode]
    predicate: URIRef
    object: Union[URIRef, Literal, BNode]


@dataclass(frozen=True)
class _BaseField:
    predicate: str
    label: str


@dataclass(frozen=True)
class StringField(_BaseField):
    kind: ClassVar[str] = "string"
    value: str = ""


@dataclass(frozen=True)
class NumberField(_BaseField):
    """Numeric field; ``value`` is ``None`` when the literal could not be parsed."""

    kind: ClassVar[str] = "number"
    value: Optional[Union[int, float]] = None


@dataclass(frozen=True)
class BooleanField(_BaseField):
    kind: ClassVar[str] = "boolean"
    value: bool = False


@dataclass(frozen=True)
class DateField(_BaseField):
    """Calendar date truncated to ``YYYY-MM-DD`` (not validated)."""

    kind: ClassVar[str] = "date"
    value: str = ""


@dataclass(frozen=True)
class TextareaField(_BaseField):
    kind: ClassVar[str] = "textarea"
    value: str = ""


@dataclass(frozen=True)
class IriField(_BaseField):
    kind: ClassVar[str] = "iri"
    value: str = ""


Field = Union[StringField, NumberField, BooleanField, DateField, TextareaField, IriField]


@dataclass(frozen=True)
class TypeInfo:
    """An ``rdf:type`` of the described resource with a display label."""

    iri: str
    label: str
    description: Optional[str] = None


@dataclass
class FormModel:
    """Everything derived from one DESCRIBE response for one subject."""

    subject: str
    fields: Dict[str, Field] = field(default_factory=dict)
    types: List[TypeInfo] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.fields and not self.types


__all__ = [
    "Statement",
    "Field",
    "StringField",
    "NumberField",
    "BooleanField",
    "DateField",
    "TextareaField",
    "IriField",
    "TypeInfo",
    "FormModel",
]
