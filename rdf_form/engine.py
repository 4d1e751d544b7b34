"""Configuration-bound facade over the inference, builder and resolver modules."""
from __future__ import annotations

from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Union

from rdflib import Literal, URIRef

from .config import EngineConfig
from .fields import build_fields
from .inference import classify
from .mutation import FieldMutationStore
from .store import TripleStoreView
from .structures import Field, FormModel, Statement, TypeInfo
from .typeinfo import pick_best_literal, resolve_types


class FormEngine:
    """Derives form models using the preferences of one :class:`EngineConfig`.

    Engines hold no state between calls, so instances with different
    thresholds or language orders can be used side by side.
    """

    def __init__(self, config: Optional[EngineConfig] = None) -> None:
        self.config = config or EngineConfig()

    @property
    def languages(self) -> Sequence[str]:
        return self.config.languages

    def classify(self, predicate: str, obj: Union[URIRef, Literal]) -> Field:
        return classify(predicate, obj, self.config.textarea_threshold)

    def build_fields(
        self,
        statements: Iterable[Statement],
        subject_iri: str,
        *,
        exclude_rdf_type: Optional[bool] = None,
    ) -> Dict[str, Field]:
        if exclude_rdf_type is None:
            exclude_rdf_type = self.config.exclude_rdf_type
        return build_fields(
            statements,
            subject_iri,
            exclude_rdf_type=exclude_rdf_type,
            textarea_threshold=self.config.textarea_threshold,
        )

    def resolve_types(self, statements: Iterable[Statement], subject_iri: str) -> List[TypeInfo]:
        return resolve_types(statements, subject_iri, languages=self.config.languages)

    def pick_best_literal(self, values: Iterable[Literal]) -> Optional[str]:
        return pick_best_literal(values, self.config.languages)

    def describe(self, statements: Iterable[Statement], subject_iri: str) -> FormModel:
        """Build the fields and types of ``subject_iri`` in one pass over the statements."""

        view = statements if isinstance(statements, TripleStoreView) else TripleStoreView(statements)
        return FormModel(
            subject=str(subject_iri),
            fields=self.build_fields(view, subject_iri),
            types=self.resolve_types(view, subject_iri),
        )

    def new_store(self, fields: Mapping[str, Field]) -> FieldMutationStore:
        return FieldMutationStore(fields)
