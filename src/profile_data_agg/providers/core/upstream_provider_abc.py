"""Abstract base class for upstream JSON API providers."""
import logging
from abc import ABC, abstractmethod
from typing import Any

import httpx

logger = logging.getLogger(__name__)


class UpstreamProviderABC(ABC):
    """Base interface for the third-party APIs this service aggregates.

    Owns one httpx.AsyncClient per provider. Subclasses call super().__init__()
    with their base URL and any default headers, then use _get_json() for
    requests so that transport and HTTP errors surface as httpx exceptions.
    """

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = 10.0,
        headers: dict[str, str] | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the provider's HTTP client.

        Args:
            base_url: Root URL of the upstream API.
            timeout: Request timeout in seconds.
            headers: Default headers sent with every request.
            transport: Optional httpx transport (tests use httpx.MockTransport).
        """
        default_headers = {"Accept": "application/json"}
        default_headers.update(headers or {})
        self._client = httpx.AsyncClient(
            base_url=base_url,
            headers=default_headers,
            timeout=timeout,
            transport=transport,
        )

    @property
    @abstractmethod
    def api_name(self) -> str:
        """Human-readable upstream name used in logs and error messages."""

    async def _get_json(
        self,
        path: str,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        """GET path and return the decoded JSON body. Raises on non-2xx."""
        response = await self._client.get(path, params=params, headers=headers)
        logger.debug("%s GET %s -> %s", self.api_name, response.url.path, response.status_code)
        response.raise_for_status()
        return response.json()

    async def close(self) -> None:
        """Close the HTTP client."""
        await self._client.aclose()

    async def __aenter__(self) -> "UpstreamProviderABC":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:  # noqa: ANN001
        """Async context manager exit - calls close()."""
        await self.close()
