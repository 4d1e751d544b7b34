"""HTTP client issuing a single SPARQL ``DESCRIBE`` query for Turtle."""
from __future__ import annotations

import logging
import re
from typing import Dict, Optional

import httpx

from .errors import DescribeRequestError

logger = logging.getLogger(__name__)

TURTLE_HEADERS = {"Accept": "text/turtle"}

# Characters that may not appear inside an IRIREF in SPARQL.
_INVALID_IRI_RE = re.compile(r'[\x00-\x20<>"{}|^`\\]')


def build_query(iri: str) -> str:
    """Return ``DESCRIBE <iri>``, rejecting IRIs that would break out of the brackets."""

    if not iri or _INVALID_IRI_RE.search(iri):
        raise ValueError(f"Not a valid IRI for a DESCRIBE query: {iri!r}")
    return f"DESCRIBE <{iri}>"


def _failure(response: httpx.Response) -> DescribeRequestError:
    return DescribeRequestError(f"HTTP {response.status_code}", status_code=response.status_code)


class _DescribeBase:
    def __init__(self, endpoint: str, *, timeout: float, post_fallback: bool) -> None:
        self.endpoint = endpoint
        self.timeout = timeout
        self.post_fallback = post_fallback

    def _get_request(self, query: str) -> Dict[str, object]:
        return {"params": {"query": query}, "headers": TURTLE_HEADERS}

    def _post_request(self, query: str) -> Dict[str, object]:
        return {"data": {"query": query}, "headers": TURTLE_HEADERS}

    def _should_fall_back(self, response: httpx.Response) -> bool:
        if response.is_success:
            return False
        if not self.post_fallback:
            raise _failure(response)
        logger.warning(
            "GET %s returned HTTP %s; retrying DESCRIBE via POST",
            self.endpoint,
            response.status_code,
        )
        return True


class DescribeClient(_DescribeBase):
    """Blocking DESCRIBE client.

    The query is sent with GET first; a non-success status triggers one POST
    with a form-encoded body when ``post_fallback`` is enabled. Any final
    non-success status or transport failure raises
    :class:`DescribeRequestError`.
    """

    def __init__(
        self,
        endpoint: str,
        *,
        timeout: float = 30.0,
        post_fallback: bool = True,
        client: Optional[httpx.Client] = None,
    ) -> None:
        super().__init__(endpoint, timeout=timeout, post_fallback=post_fallback)
        self._owns_client = client is None
        self._client = client or httpx.Client(timeout=timeout)

    def describe(self, iri: str) -> str:
        query = build_query(iri)
        try:
            response = self._client.get(self.endpoint, **self._get_request(query))
            if self._should_fall_back(response):
                response = self._client.post(self.endpoint, **self._post_request(query))
        except httpx.HTTPError as exc:
            raise DescribeRequestError(str(exc) or type(exc).__name__) from exc
        if not response.is_success:
            raise _failure(response)
        return response.text

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "DescribeClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


class AsyncDescribeClient(_DescribeBase):
    """``asyncio`` counterpart of :class:`DescribeClient` with the same contract."""

    def __init__(
        self,
        endpoint: str,
        *,
        timeout: float = 30.0,
        post_fallback: bool = True,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        super().__init__(endpoint, timeout=timeout, post_fallback=post_fallback)
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=timeout)

    async def describe(self, iri: str) -> str:
        query = build_query(iri)
        try:
            response = await self._client.get(self.endpoint, **self._get_request(query))
            if self._should_fall_back(response):
                response = await self._client.post(self.endpoint, **self._post_request(query))
        except httpx.HTTPError as exc:
            raise DescribeRequestError(str(exc) or type(exc).__name__) from exc
        if not response.is_success:
            raise _failure(response)
        return response.text

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "AsyncDescribeClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()
