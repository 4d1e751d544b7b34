"""Classification of a single RDF object into a typed form field."""
from __future__ import annotations

import math
import re
from typing import Optional, Union

from rdflib import Literal, URIRef

from .namespaces import XSD_DATE_TYPES, XSD_NS, XSD_NUMERIC_TYPES
from .structures import (
    BooleanField,
    DateField,
    Field,
    IriField,
    NumberField,
    StringField,
    TextareaField,
)

# Untyped literals longer than this are edited in a multi-line box.
DEFAULT_TEXTAREA_THRESHOLD = 120

_SEPARATOR_RE = re.compile(r"[/#]")
_WORD_JOINER_RE = re.compile(r"[_\-]+")
_BOOLEAN_RE = re.compile(r"^(true|false)$", re.IGNORECASE)
_NUMBER_RE = re.compile(r"^[+-]?\d+(\.\d+)?$")
_INTEGER_RE = re.compile(r"^[+-]?\d+$")


def local_name(iri: str) -> str:
    """Return the part of ``iri`` after the last ``/`` or ``#`` (may be empty)."""

    return _SEPARATOR_RE.split(str(iri))[-1]


def humanize_label(iri: str) -> str:
    """Turn a predicate IRI into a display label, e.g. ``ex:birth_date`` -> ``Birth date``."""

    name = local_name(iri) or str(iri)
    name = _WORD_JOINER_RE.sub(" ", name)
    return name[:1].upper() + name[1:]


def parse_number(text: str) -> Optional[Union[int, float]]:
    """Parse a numeric lexical form; ``None`` when it is not a finite number."""

    text = text.strip()
    if not text or "_" in text:
        return None
    if _INTEGER_RE.match(text):
        return int(text)
    try:
        value = float(text)
    except ValueError:
        return None
    if math.isnan(value) or math.isinf(value):
        return None
    return value


def _is_true(text: str) -> bool:
    return text.lower() == "true"


def classify(
    predicate: str,
    obj: Union[URIRef, Literal],
    textarea_threshold: int = DEFAULT_TEXTAREA_THRESHOLD,
) -> Field:
    """Derive the form field for one (predicate, object) pair.

    IRIs always become ``iri`` fields. Literals are typed from their XML
    Schema datatype when they carry one; untyped literals fall back to
    length and content heuristics. A numeric literal that does not parse
    yields a ``number`` field with an unset value rather than an error.
    """

    predicate = str(predicate)
    label = humanize_label(predicate)

    if isinstance(obj, URIRef):
        return IriField(predicate, label, str(obj))
    if not isinstance(obj, Literal):
        raise TypeError(f"Cannot classify {type(obj).__name__} object for {predicate}")

    text = str(obj)
    datatype = str(obj.datatype) if obj.datatype is not None else ""
    is_xsd = datatype.startswith(XSD_NS)

    if obj.language is None and not is_xsd and len(text) > textarea_threshold:
        return TextareaField(predicate, label, text)

    if obj.language is not None:
        return StringField(predicate, label, text)

    if is_xsd:
        local = datatype[len(XSD_NS):]
        if local == "boolean":
            return BooleanField(predicate, label, _is_true(text))
        if local in XSD_DATE_TYPES:
            return DateField(predicate, label, text[:10])
        if local in XSD_NUMERIC_TYPES:
            return NumberField(predicate, label, parse_number(text))
        return StringField(predicate, label, text)

    if _BOOLEAN_RE.match(text):
        return BooleanField(predicate, label, _is_true(text))
    if _NUMBER_RE.match(text):
        return NumberField(predicate, label, parse_number(text))
    return StringField(predicate, label, text)
