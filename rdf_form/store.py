"""Read-only, subject-scoped access to a parsed statement list."""
from __future__ import annotations

from typing import Dict, Iterable, Iterator, List, Optional

from rdflib import Graph, URIRef

from .structures import Statement


class TripleStoreView:
    """In-memory index over a flat sequence of statements.

    Statements keep their source order; lookups compare subjects by exact
    string equality.
    """

    def __init__(self, statements: Iterable[Statement]) -> None:
        self._statements: tuple[Statement, ...] = tuple(
            st if isinstance(st, Statement) else Statement(*st) for st in statements
        )
        self._by_subject: Optional[Dict[str, List[Statement]]] = None

    @classmethod
    def from_graph(cls, graph: Graph) -> "TripleStoreView":
        """Build a view over ``graph``; statements follow the graph's iteration order."""

        return cls(Statement(s, p, o) for s, p, o in graph)

    def __len__(self) -> int:
        return len(self._statements)

    def __iter__(self) -> Iterator[Statement]:
        return iter(self._statements)

    @property
    def statements(self) -> tuple[Statement, ...]:
        return self._statements

    def statements_for_subject(self, subject: str) -> List[Statement]:
        return [st for st in self._statements if str(st.subject) == str(subject)]

    def group_by_subject(self) -> Dict[str, List[Statement]]:
        if self._by_subject is None:
            grouped: Dict[str, List[Statement]] = {}
            for st in self._statements:
                grouped.setdefault(str(st.subject), []).append(st)
            self._by_subject = grouped
        # Callers get their own lists; the cached index stays untouched.
        return {key: list(value) for key, value in self._by_subject.items()}

    def first_iri_subject(self) -> Optional[str]:
        """Return the first subject that is an IRI, in source order."""

        for st in self._statements:
            if isinstance(st.subject, URIRef):
                return str(st.subject)
        return None
