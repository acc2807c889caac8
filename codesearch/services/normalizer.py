from __future__ import annotations

from starlette.datastructures import QueryParams

from codesearch.models.search import (
    DocumentSearchRequest,
    RepositorySearchRequest,
    SymbolSearchRequest,
)
from codesearch.services.query_params import (
    parse_lang_filters,
    parse_page,
    parse_query,
    parse_repo_filters,
    parse_repo_scope,
)


def normalize_repository_request(params: QueryParams) -> RepositorySearchRequest:
    return RepositorySearchRequest(
        query=parse_query(params),
        page=parse_page(params),
        repo_scope=parse_repo_scope(params),
    )


def normalize_document_request(params: QueryParams) -> DocumentSearchRequest:
    """Full document search; the only route that reads `langs` and `repos`."""
    return DocumentSearchRequest(
        query=parse_query(params),
        page=parse_page(params),
        lang_filters=parse_lang_filters(params),
        repo_filters=parse_repo_filters(params),
        repo_scope=parse_repo_scope(params),
    )


def normalize_document_suggestion(params: QueryParams) -> DocumentSearchRequest:
    """Document suggestions ignore `langs`/`repos`; filters stay empty."""
    return DocumentSearchRequest(
        query=parse_query(params),
        page=parse_page(params),
        repo_scope=parse_repo_scope(params),
    )


def normalize_symbol_request(params: QueryParams) -> SymbolSearchRequest:
    return SymbolSearchRequest(
        query=parse_query(params),
        page=parse_page(params),
        repo_scope=parse_repo_scope(params),
    )
