from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Tuple

from dotenv import load_dotenv

# Load repo-level .env so default_factory lookups see those values.
load_dotenv(dotenv_path=Path(__file__).resolve().parent.parent / ".env", override=False)


def _split_csv(raw: str) -> Tuple[str, ...]:
    return tuple(item.strip().lower() for item in raw.split(",") if item.strip())


@dataclass
class Config:
    """Shared configuration loaded from environment variables."""

    ENV: str = field(default_factory=lambda: os.getenv("APP_ENV", "dev"))
    SEARCH_BACKEND_URL: str = field(
        default_factory=lambda: os.getenv("SEARCH_BACKEND_URL", "http://localhost:9200/api/code")
    )
    SEARCH_BACKEND_TIMEOUT: Optional[float] = field(default=None)
    FORWARD_HEADERS: Tuple[str, ...] = field(
        default_factory=lambda: _split_csv(os.getenv("FORWARD_HEADERS", "authorization,cookie"))
    )
    LOG_LEVEL: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO").upper())
    HOST: str = field(default_factory=lambda: os.getenv("HOST", "0.0.0.0"))
    PORT: int = field(default_factory=lambda: int(os.getenv("PORT", "8000")))

    def __post_init__(self) -> None:
        self.SEARCH_BACKEND_URL = self.SEARCH_BACKEND_URL.rstrip("/")
        if self.SEARCH_BACKEND_TIMEOUT is None:
            self.SEARCH_BACKEND_TIMEOUT = self._resolve_timeout("SEARCH_BACKEND_TIMEOUT")

    def _resolve_timeout(self, env_key: str) -> Optional[float]:
        raw = os.getenv(env_key)
        if not raw:
            return None
        value = float(raw)
        return value if value > 0 else None
