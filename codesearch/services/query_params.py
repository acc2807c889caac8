"""Coerce raw query-string values into typed search fields.

Every function here is pure: it only reads the mapping it is given. The only
failure path is :func:`parse_repo_scope`, everything else degrades to a
default.
"""
from __future__ import annotations

import logging
import re
from typing import Optional, Tuple
from urllib.parse import unquote

from starlette.datastructures import QueryParams

from codesearch.errors import ValidationError

logger = logging.getLogger(__name__)

DEFAULT_PAGE = 1

# Leading integer prefix, e.g. " 12abc" -> "12".
_INT_PREFIX = re.compile(r"\s*([+-]?[0-9]+)")


def _split(raw: str) -> Tuple[str, ...]:
    return tuple(token for token in raw.split(",") if token)


def parse_page(params: QueryParams) -> int:
    raw = params.get("p")
    if not raw:
        return DEFAULT_PAGE
    match = _INT_PREFIX.match(raw)
    if not match:
        logger.debug("Unparseable page %r; using page %s", raw, DEFAULT_PAGE)
        return DEFAULT_PAGE
    try:
        page = int(match.group(1))
    except ValueError:
        # Beyond the interpreter's int/str digit limit.
        logger.debug("Page %.20s... too long; using page %s", raw, DEFAULT_PAGE)
        return DEFAULT_PAGE
    if page < 1:
        logger.debug("Page %s out of range; using page %s", page, DEFAULT_PAGE)
        return DEFAULT_PAGE
    return page


def parse_repo_scope(params: QueryParams) -> Tuple[str, ...]:
    values = params.getlist("repoScope")
    if len(values) != 1:
        raise ValidationError()
    return _split(values[0])


def parse_lang_filters(params: QueryParams) -> Tuple[str, ...]:
    raw = params.get("langs")
    if not raw:
        return ()
    return _split(raw)


def parse_repo_filters(params: QueryParams) -> Tuple[str, ...]:
    # The framework decodes the query string once; repos is encoded twice.
    raw = params.get("repos")
    if not raw:
        return ()
    return _split(unquote(raw))


def parse_query(params: QueryParams) -> Optional[str]:
    return params.get("q")
