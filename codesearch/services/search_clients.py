"""Backend search clients and their per-request construction.

Ranking and query execution happen in a remote search backend. This module
only knows how to hand a normalized request to it: each client posts the
request's wire payload to ``/{domain}/{mode}`` and returns whatever JSON the
backend answers with.
"""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from dataclasses import dataclass
from typing import Any, AsyncIterator, Dict, Optional, Protocol

import httpx
from fastapi import Request

from codesearch.config import Config
from codesearch.models.search import (
    DocumentSearchRequest,
    RepositorySearchRequest,
    SearchRequest,
    SymbolSearchRequest,
)

logger = logging.getLogger(__name__)


class SearchClient(Protocol):
    """Contract every domain client fulfils; results are opaque to callers."""

    async def search(self, request: Any) -> Any:
        ...

    async def suggest(self, request: Any) -> Any:
        ...


class BackendConnection:
    """An HTTP session to the search backend, bound to one caller's credentials."""

    def __init__(self, http: httpx.AsyncClient):
        self.http = http

    async def post(self, path: str, payload: Dict[str, Any]) -> Any:
        resp = await self.http.post(path, json=payload)
        resp.raise_for_status()
        return resp.json()


class _HTTPSearchClient:
    domain = ""

    def __init__(self, connection: BackendConnection):
        self.connection = connection

    async def _send(self, mode: str, request: SearchRequest) -> Any:
        logger.debug("Posting %s %s request (page=%s)", self.domain, mode, request.page)
        return await self.connection.post(f"/{self.domain}/{mode}", request.to_payload())


class RepositorySearchClient(_HTTPSearchClient):
    domain = "repo"

    async def search(self, request: RepositorySearchRequest) -> Any:
        return await self._send("search", request)

    async def suggest(self, request: RepositorySearchRequest) -> Any:
        return await self._send("suggest", request)


class DocumentSearchClient(_HTTPSearchClient):
    domain = "doc"

    async def search(self, request: DocumentSearchRequest) -> Any:
        return await self._send("search", request)

    async def suggest(self, request: DocumentSearchRequest) -> Any:
        return await self._send("suggest", request)


class SymbolSearchClient(_HTTPSearchClient):
    domain = "symbol"

    async def search(self, request: SymbolSearchRequest) -> Any:
        return await self._send("search", request)

    async def suggest(self, request: SymbolSearchRequest) -> Any:
        return await self._send("suggest", request)


@dataclass(frozen=True)
class SearchClients:
    repository: SearchClient
    document: SearchClient
    symbol: SearchClient


class SearchClientFactory:
    """Builds a fresh set of clients for each inbound request."""

    def __init__(self, config: Config, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.config = config
        self._transport = transport

    def forwarded_headers(self, request: Request) -> Dict[str, str]:
        headers: Dict[str, str] = {}
        for name in self.config.FORWARD_HEADERS:
            value = request.headers.get(name)
            if value is not None:
                headers[name] = value
        return headers

    @asynccontextmanager
    async def connect(self, request: Request) -> AsyncIterator[SearchClients]:
        async with httpx.AsyncClient(
            base_url=self.config.SEARCH_BACKEND_URL,
            headers=self.forwarded_headers(request),
            timeout=self.config.SEARCH_BACKEND_TIMEOUT,
            transport=self._transport,
        ) as http:
            connection = BackendConnection(http)
            yield SearchClients(
                repository=RepositorySearchClient(connection),
                document=DocumentSearchClient(connection),
                symbol=SymbolSearchClient(connection),
            )
