"""rdf-form: typed form models derived from SPARQL DESCRIBE responses."""

from .config import EngineConfig
from .engine import FormEngine
from .errors import DescribeRequestError, FormError, ResourceNotFoundError, TurtleParseError
from .fields import build_fields
from .inference import classify, humanize_label
from .mutation import FieldMutationStore
from .parser import parse_turtle
from .session import FormSession
from .sparql import AsyncDescribeClient, DescribeClient
from .store import TripleStoreView
from .structures import FormModel, Statement, TypeInfo
from .typeinfo import pick_best_literal, resolve_types

__all__ = [
    "EngineConfig",
    "FormEngine",
    "FormSession",
    "FormModel",
    "Statement",
    "TypeInfo",
    "TripleStoreView",
    "FieldMutationStore",
    "DescribeClient",
    "AsyncDescribeClient",
    "classify",
    "humanize_label",
    "build_fields",
    "resolve_types",
    "pick_best_literal",
    "parse_turtle",
    "FormError",
    "DescribeRequestError",
    "TurtleParseError",
    "ResourceNotFoundError",
]
