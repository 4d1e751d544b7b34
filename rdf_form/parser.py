"""Turn Turtle text into an ordered statement list."""
from __future__ import annotations

import logging
from typing import List, Optional

import rdflib
from rdflib import Graph

from .errors import TurtleParseError
from .structures import Statement

logger = logging.getLogger(__name__)


class _RecordingGraph(Graph):
    """Graph that remembers the order in which the parser emitted triples.

    rdflib's memory store keeps triples in a set, so iterating the graph
    afterwards loses document order.
    """

    def __init__(self) -> None:
        super().__init__()
        self.emitted: List[Statement] = []

    def add(self, triple):
        if triple not in self:
            self.emitted.append(Statement(*triple))
        return super().add(triple)


def parse_turtle(text: str, base: Optional[str] = None) -> List[Statement]:
    """Parse a Turtle document with rdflib, keeping document order.

    Literals keep their lexical form as written (``"1"^^xsd:boolean`` stays
    ``"1"``). Malformed input raises :class:`TurtleParseError`; no repair is
    attempted.
    """

    if not text.strip():
        return []
    graph = _RecordingGraph()
    normalize = rdflib.NORMALIZE_LITERALS
    rdflib.NORMALIZE_LITERALS = False
    try:
        graph.parse(data=text, format="turtle", publicID=base)
    except Exception as exc:
        raise TurtleParseError(f"Failed to parse Turtle: {exc}") from exc
    finally:
        rdflib.NORMALIZE_LITERALS = normalize
    logger.debug("Parsed %d statements", len(graph.emitted))
    return list(graph.emitted)
