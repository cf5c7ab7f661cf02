"""HTTP transport for the registration endpoint."""

import logging
from typing import Optional, Protocol

import httpx

from docgate.errors import TransportError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0


class Transport(Protocol):
    def post(self, url: str, body: str, headers: dict[str, str]) -> str:
        ...


class HttpTransport:
    """Sends one JSON POST per call over a shared ``httpx.Client``."""

    def __init__(self, timeout: float = DEFAULT_TIMEOUT,
                 client: Optional[httpx.Client] = None) -> None:
        self._http = client or httpx.Client(timeout=timeout)

    def post(self, url: str, body: str, headers: dict[str, str]) -> str:
        """POST *body* to *url* and return the response text.

        Raises:
            TransportError: On any network failure or HTTP status >= 400.
        """
        all_headers = {"Content-Type": "application/json"}
        all_headers.update(headers)

        try:
            resp = self._http.post(url, content=body.encode("utf-8"), headers=all_headers)
            resp.raise_for_status()
            return resp.text
        except httpx.HTTPStatusError as exc:
            status = exc.response.status_code
            logger.error("Registration API error %s: %s", status, url)
            raise TransportError(
                f"Registration API returned {status} for {url}",
                code="api_error",
                status_code=status,
            ) from exc
        except httpx.HTTPError as exc:
            logger.error("Registration request failed: %s", exc)
            raise TransportError(f"Registration request failed: {exc}") from exc

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> "HttpTransport":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
