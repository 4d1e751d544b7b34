"""Fetch, parse and derive the form model of one resource at a time."""
from __future__ import annotations

import asyncio
import logging
import threading
from typing import Any, List, Mapping, Optional, Tuple

from .config import EngineConfig
from .engine import FormEngine
from .errors import FormError, ResourceNotFoundError
from .mutation import FieldMutationStore
from .parser import parse_turtle
from .sparql import AsyncDescribeClient, DescribeClient
from .store import TripleStoreView
from .structures import Field, FormModel, Statement

logger = logging.getLogger(__name__)


class FormSession:
    """Holds the form currently shown for one resource.

    Every load starts a new request generation. Results belonging to an older
    generation are dropped, so a slow response for a resource the user has
    already moved away from never overwrites newer state. A successful load
    replaces the model, raw Turtle and mutation store together; a failed one
    keeps the previous model and records ``error``.
    """

    def __init__(
        self,
        config: Optional[EngineConfig] = None,
        *,
        client: Optional[DescribeClient] = None,
        async_client: Optional[AsyncDescribeClient] = None,
        engine: Optional[FormEngine] = None,
    ) -> None:
        self.config = config or EngineConfig()
        self.engine = engine or FormEngine(self.config)
        self._client = client
        self._async_client = async_client
        self._lock = threading.Lock()
        self._generation = 0
        self._task: Optional[asyncio.Future] = None

        self.resource_iri: Optional[str] = None
        self.model: Optional[FormModel] = None
        self.store: Optional[FieldMutationStore] = None
        self.statements: List[Statement] = []
        self.raw: str = ""
        self.loading = False
        self.error: Optional[str] = None

    @property
    def client(self) -> DescribeClient:
        if self._client is None:
            self._client = DescribeClient(
                self.config.endpoint,
                timeout=self.config.timeout,
                post_fallback=self.config.post_fallback,
            )
        return self._client

    @property
    def async_client(self) -> AsyncDescribeClient:
        if self._async_client is None:
            self._async_client = AsyncDescribeClient(
                self.config.endpoint,
                timeout=self.config.timeout,
                post_fallback=self.config.post_fallback,
            )
        return self._async_client

    # -- request generations -------------------------------------------------

    def _begin(self, resource_iri: str) -> int:
        with self._lock:
            self._generation += 1
            self.resource_iri = resource_iri
            self.loading = True
            self.error = None
            return self._generation

    def _is_current(self, generation: int) -> bool:
        return generation == self._generation

    def _commit(
        self, generation: int, turtle: str, model: FormModel, statements: List[Statement]
    ) -> bool:
        with self._lock:
            if not self._is_current(generation):
                logger.info("Discarding superseded result for %s", model.subject)
                return False
            self.model = model
            self.store = self.engine.new_store(model.fields)
            self.statements = statements
            self.raw = turtle
            self.loading = False
            self.error = None
            return True

    def _fail(self, generation: int, exc: Exception) -> bool:
        with self._lock:
            if not self._is_current(generation):
                logger.info("Discarding superseded failure: %s", exc)
                return False
            self.loading = False
            self.error = str(exc)
        logger.error("Loading %s failed: %s", self.resource_iri, exc)
        return True

    # -- derivation ----------------------------------------------------------

    def derive(self, turtle: str, resource_iri: str) -> Tuple[FormModel, List[Statement]]:
        """Parse ``turtle`` and build the model of ``resource_iri``.

        When the document says nothing about ``resource_iri`` the first IRI
        subject it does describe is used instead. Relative IRIs resolve against
        ``resource_iri``.
        """

        statements = parse_turtle(turtle, base=resource_iri)
        view = TripleStoreView(statements)
        subject = resource_iri
        if not view.statements_for_subject(subject):
            alternate = view.first_iri_subject()
            if alternate is None:
                raise ResourceNotFoundError(resource_iri)
            logger.warning(
                "No statements about %s; falling back to subject %s", resource_iri, alternate
            )
            subject = alternate
        return self.engine.describe(view, subject), statements

    def load_turtle(
        self, turtle: str, resource_iri: Optional[str] = None
    ) -> Optional[FormModel]:
        """Load an already fetched Turtle document.

        Returns ``None`` when a newer load superseded this one, whether this
        one succeeded or failed.
        """

        iri = resource_iri or self.config.resource_iri
        generation = self._begin(iri)
        try:
            model, statements = self.derive(turtle, iri)
        except FormError as exc:
            if not self._fail(generation, exc):
                return None
            raise
        if not self._commit(generation, turtle, model, statements):
            return None
        return model

    def load(self, resource_iri: Optional[str] = None) -> Optional[FormModel]:
        iri = resource_iri or self.config.resource_iri
        generation = self._begin(iri)
        try:
            turtle = self.client.describe(iri)
            model, statements = self.derive(turtle, iri)
        except (FormError, ValueError) as exc:
            if not self._fail(generation, exc):
                return None
            raise
        if not self._commit(generation, turtle, model, statements):
            return None
        return model

    async def aload(self, resource_iri: Optional[str] = None) -> Optional[FormModel]:
        """Asynchronous :meth:`load`; cancels the request it supersedes.

        Returns ``None`` when this request was itself superseded before it
        completed, including when it failed after being superseded.
        """

        iri = resource_iri or self.config.resource_iri
        generation = self._begin(iri)
        previous = self._task
        if previous is not None and not previous.done():
            previous.cancel()
        task = asyncio.ensure_future(self.async_client.describe(iri))
        self._task = task
        try:
            turtle = await task
            model, statements = self.derive(turtle, iri)
        except asyncio.CancelledError:
            if self._is_current(generation):
                with self._lock:
                    self.loading = False
                raise
            logger.info("Request for %s was superseded", iri)
            return None
        except (FormError, ValueError) as exc:
            if not self._fail(generation, exc):
                return None
            raise
        if not self._commit(generation, turtle, model, statements):
            return None
        return model

    # -- edits ---------------------------------------------------------------

    def update(self, predicate: str, value: Any) -> Mapping[str, Field]:
        if self.store is None:
            raise FormError("No form has been loaded")
        return self.store.update(predicate, value)

    def close(self) -> None:
        if self._client is not None:
            self._client.close()
