"""Resolve display labels and descriptions for a subject's ``rdf:type`` values."""
from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Sequence

from rdflib import Literal, URIRef

from .inference import local_name
from .namespaces import DCTERMS_DESCRIPTION, RDF_TYPE, RDFS_COMMENT, RDFS_LABEL
from .store import TripleStoreView
from .structures import Statement, TypeInfo

DEFAULT_LANGUAGES = ("fr", "en")


def pick_best_literal(
    values: Iterable[Literal], languages: Sequence[str] = DEFAULT_LANGUAGES
) -> Optional[str]:
    """Pick the text of the literal that best matches ``languages``.

    Preferred language tags are tried in order, then the first untagged
    literal, then whatever literal comes first. ``None`` for no input.
    """

    candidates = list(values)
    for lang in languages:
        wanted = lang.lower()
        for value in candidates:
            if value.language and value.language.lower() == wanted:
                return str(value)
    for value in candidates:
        if not value.language:
            return str(value)
    if candidates:
        return str(candidates[0])
    return None


def _literals(statements: Iterable[Statement], predicate: str) -> List[Literal]:
    return [
        st.object
        for st in statements
        if str(st.predicate) == predicate and isinstance(st.object, Literal)
    ]


def resolve_types(
    statements: Iterable[Statement],
    subject_iri: str,
    *,
    languages: Sequence[str] = DEFAULT_LANGUAGES,
) -> List[TypeInfo]:
    view = statements if isinstance(statements, TripleStoreView) else TripleStoreView(statements)

    type_iris: List[str] = []
    for st in view.statements_for_subject(subject_iri):
        if str(st.predicate) != RDF_TYPE or not isinstance(st.object, URIRef):
            continue
        iri = str(st.object)
        if iri not in type_iris:
            type_iris.append(iri)
    if not type_iris:
        return []

    by_subject: Dict[str, List[Statement]] = view.group_by_subject()
    types: List[TypeInfo] = []
    for iri in type_iris:
        about = by_subject.get(iri, [])
        label = (
            pick_best_literal(_literals(about, RDFS_LABEL), languages)
            or local_name(iri)
            or iri
        )
        description = pick_best_literal(
            _literals(about, DCTERMS_DESCRIPTION), languages
        ) or pick_best_literal(_literals(about, RDFS_COMMENT), languages)
        types.append(TypeInfo(iri=iri, label=label, description=description))
    return types
