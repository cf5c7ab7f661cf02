"""Environment-driven configuration."""

import os
from dataclasses import dataclass
from typing import Callable, Optional, TypeVar

from dotenv import load_dotenv

from docgate.rate_limiter import RateLimiter
from docgate.serializer import JsonSerializer
from docgate.submitter import BASE_URL, DocumentSubmitter
from docgate.transport import DEFAULT_TIMEOUT, HttpTransport

T = TypeVar("T")


def _load_env() -> None:
    """Load .env file if present."""
    load_dotenv()


def _env(name: str, default: T, cast: Callable[[str], T]) -> T:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return cast(raw.strip())
    except ValueError as exc:
        raise ValueError(f"{name} has an invalid value: {raw!r}") from exc


@dataclass(frozen=True)
class Settings:
    base_url: str = BASE_URL
    auth_token: str = ""
    request_limit: int = 1
    window_seconds: float = 1.0
    timeout: float = DEFAULT_TIMEOUT


def load_settings() -> Settings:
    """Read ``DOCGATE_*`` variables (after loading ``.env``).

    Raises:
        ValueError: If a numeric variable cannot be parsed.
    """
    _load_env()
    return Settings(
        base_url=os.getenv("DOCGATE_BASE_URL") or BASE_URL,
        auth_token=os.getenv("DOCGATE_AUTH_TOKEN", ""),
        request_limit=_env("DOCGATE_REQUEST_LIMIT", 1, int),
        window_seconds=_env("DOCGATE_WINDOW_SECONDS", 1.0, float),
        timeout=_env("DOCGATE_TIMEOUT", DEFAULT_TIMEOUT, float),
    )


def build_submitter(settings: Optional[Settings] = None) -> DocumentSubmitter:
    """Wire limiter, transport and serializer from *settings*."""
    settings = settings or load_settings()
    return DocumentSubmitter(
        RateLimiter(settings.request_limit, settings.window_seconds),
        HttpTransport(timeout=settings.timeout),
        JsonSerializer(),
        token=settings.auth_token,
        base_url=settings.base_url,
    )
