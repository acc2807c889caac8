from __future__ import annotations

from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


class SearchRequest(BaseModel):
    query: Optional[str] = None
    page: int = Field(default=1, ge=1)
    repo_scope: Tuple[str, ...] = Field(default=(), alias="repoScope")

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    def to_payload(self) -> Dict[str, Any]:
        """Wire form sent to the search backend (camelCase keys)."""
        return self.model_dump(mode="json", by_alias=True)


class RepositorySearchRequest(SearchRequest):
    pass


class DocumentSearchRequest(SearchRequest):
    lang_filters: Tuple[str, ...] = Field(default=(), alias="langFilters")
    repo_filters: Tuple[str, ...] = Field(default=(), alias="repoFilters")


class SymbolSearchRequest(SearchRequest):
    pass
