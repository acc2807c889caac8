from __future__ import annotations

import logging
from typing import Any, Awaitable, Callable, Literal

from fastapi import APIRouter, HTTPException, Request
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from starlette.datastructures import QueryParams

from codesearch.errors import BackendError, ValidationError
from codesearch.models.search import SearchRequest
from codesearch.services.normalizer import (
    normalize_document_request,
    normalize_document_suggestion,
    normalize_repository_request,
    normalize_symbol_request,
)
from codesearch.services.search_clients import SearchClient, SearchClientFactory, SearchClients

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/code", tags=["search"])

Mode = Literal["search", "suggest"]
Normalizer = Callable[[QueryParams], SearchRequest]
ClientAccessor = Callable[[SearchClients], SearchClient]


def _client_factory(request: Request) -> SearchClientFactory:
    return request.app.state.client_factory


async def _call_backend(
    request: Request,
    search_req: SearchRequest,
    client_for: ClientAccessor,
    mode: Mode,
) -> JSONResponse:
    try:
        async with _client_factory(request).connect(request) as clients:
            client = client_for(clients)
            result = await getattr(client, mode)(search_req)
        return JSONResponse(content=jsonable_encoder(result))
    except Exception as exc:
        logger.exception("Search backend failed on %s (%s)", request.url.path, mode)
        raise BackendError() from exc


def _search_handler(
    normalize: Normalizer,
    client_for: ClientAccessor,
    mode: Mode,
) -> Callable[[Request], Awaitable[Any]]:
    async def handler(request: Request):
        try:
            search_req = normalize(request.query_params)
        except ValidationError as exc:
            logger.debug("Rejected %s: %s", request.url.path, exc)
            raise HTTPException(status_code=exc.status_code, detail=exc.message) from exc
        try:
            return await _call_backend(request, search_req, client_for, mode)
        except BackendError as exc:
            raise HTTPException(status_code=exc.status_code, detail=exc.message) from exc

    return handler


def _repository(clients: SearchClients) -> SearchClient:
    return clients.repository


def _document(clients: SearchClients) -> SearchClient:
    return clients.document


def _symbol(clients: SearchClients) -> SearchClient:
    return clients.symbol


router.add_api_route(
    "/search/repo",
    _search_handler(normalize_repository_request, _repository, "search"),
    methods=["GET"],
    name="repository_search",
)
router.add_api_route(
    "/suggestions/repo",
    _search_handler(normalize_repository_request, _repository, "suggest"),
    methods=["GET"],
    name="repository_suggestions",
)
router.add_api_route(
    "/search/doc",
    _search_handler(normalize_document_request, _document, "search"),
    methods=["GET"],
    name="document_search",
)
router.add_api_route(
    "/suggestions/doc",
    _search_handler(normalize_document_suggestion, _document, "suggest"),
    methods=["GET"],
    name="document_suggestions",
)

# Symbol search and symbol suggestions are the same call.
_symbol_handler = _search_handler(normalize_symbol_request, _symbol, "suggest")
router.add_api_route("/suggestions/symbol", _symbol_handler, methods=["GET"], name="symbol_suggestions")
router.add_api_route("/search/symbol", _symbol_handler, methods=["GET"], name="symbol_search")
