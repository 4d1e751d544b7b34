"""Build the per-predicate field model of one subject."""
from __future__ import annotations

import logging
from typing import Dict, Iterable

from rdflib import BNode

from .inference import DEFAULT_TEXTAREA_THRESHOLD, classify
from .namespaces import RDF_TYPE
from .store import TripleStoreView
from .structures import Field, Statement

logger = logging.getLogger(__name__)


def build_fields(
    statements: Iterable[Statement],
    subject_iri: str,
    *,
    exclude_rdf_type: bool = False,
    textarea_threshold: int = DEFAULT_TEXTAREA_THRESHOLD,
) -> Dict[str, Field]:
    """Return one field per predicate of ``subject_iri``, in first-appearance order.

    Only the first value of a multi-valued predicate is kept. Blank-node
    objects have no editable value and are passed over. An empty mapping
    means the subject is not described by ``statements``.
    """

    view = statements if isinstance(statements, TripleStoreView) else TripleStoreView(statements)
    fields: Dict[str, Field] = {}
    dropped = 0
    for st in view.statements_for_subject(subject_iri):
        predicate = str(st.predicate)
        if isinstance(st.object, BNode):
            continue
        if predicate in fields:
            dropped += 1
            continue
        fields[predicate] = classify(predicate, st.object, textarea_threshold)

    if exclude_rdf_type:
        fields.pop(RDF_TYPE, None)
    if dropped:
        logger.debug("Collapsed %d additional values for %s", dropped, subject_iri)
    return fields
