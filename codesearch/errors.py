from __future__ import annotations


class SearchError(Exception):
    """Base class for failures surfaced by the search routes."""

    status_code = 500
    message = "Search Exception"

    def __init__(self) -> None:
        super().__init__(self.message)


class ValidationError(SearchError):
    """Query parameters could not be normalized into a search request."""

    status_code = 400
    message = "Invalid repoScope param"


class BackendError(SearchError):
    """The backend search client failed; the cause is kept for logging only."""

    status_code = 500
    message = "Search Exception"
