"""Dashboard client: runs the user -> country -> exchange -> news chain.

The chain is all-or-nothing: an ``error`` field or a non-2xx status on the
user, country or news step aborts it and the already fetched records are
discarded. The exchange step never aborts; its error body already carries
"N/A" rates.

News depends only on the user, so it is requested as soon as the user is
known and runs concurrently with the country/exchange stage.
"""
import asyncio
import logging
from dataclasses import dataclass
from typing import Any
from urllib.parse import quote

import httpx
from pydantic import TypeAdapter

from profile_data_agg.schemas import (CountryRecord, ExchangeRecord, NewsItem,
                                      UserRecord)
from profile_data_agg.utils import NOT_AVAILABLE

logger = logging.getLogger(__name__)

_NEWS_LIST = TypeAdapter(list[NewsItem])


class ChainError(Exception):
    """A chain step failed; message is what the error panel shows."""

    def __init__(self, message: str, detail: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.detail = detail


@dataclass(frozen=True)
class Dashboard:
    """The four records collected by a successful chain."""

    user: UserRecord
    country: CountryRecord
    exchange: ExchangeRecord
    news: list[NewsItem]


def wants_exchange(country: CountryRecord) -> bool:
    """True when the country reports a usable currency code."""
    return country.has_currency and country.currency != NOT_AVAILABLE


class DashboardClient:
    """Async client for the aggregation service's /api endpoints."""

    def __init__(
        self,
        base_url: str = "http://127.0.0.1:3000",
        *,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._client = httpx.AsyncClient(
            base_url=base_url.rstrip("/"),
            timeout=timeout,
            transport=transport,
        )

    async def _get_response(self, path: str) -> tuple[httpx.Response, Any]:
        """GET path and return the response with its JSON body, whatever the status code."""
        try:
            response = await self._client.get(path)
        except httpx.HTTPError as e:
            raise ChainError("Failed to reach the server", str(e)) from e
        try:
            return response, response.json()
        except ValueError as e:
            raise ChainError(f"Invalid response from {path}", response.text) from e

    async def _get_body(self, path: str) -> Any:
        _, body = await self._get_response(path)
        return body

    async def _get_checked(self, path: str) -> Any:
        """GET path; raise ChainError on an ``error`` field or a non-2xx status."""
        response, body = await self._get_response(path)
        if isinstance(body, dict) and body.get("error"):
            raise ChainError(str(body["error"]), body.get("message"))
        if not response.is_success:
            detail = body.get("detail") if isinstance(body, dict) else None
            raise ChainError(
                f"Request to {path} failed with status {response.status_code}",
                str(detail) if detail is not None else response.text,
            )
        return body

    async def get_user(self) -> UserRecord:
        return UserRecord.model_validate(await self._get_checked("/api/user"))

    async def get_country(self, name: str) -> CountryRecord:
        body = await self._get_checked(f"/api/country/{quote(name, safe='')}")
        return CountryRecord.model_validate(body)

    async def get_exchange(self, currency: str) -> ExchangeRecord:
        """Rates for currency; failures degrade to "N/A" rates instead of raising."""
        try:
            body = await self._get_body(f"/api/exchange/{quote(currency, safe='')}")
        except ChainError as e:
            logger.warning("Exchange lookup for %s failed: %s", currency, e.detail or e.message)
            return ExchangeRecord()
        if not isinstance(body, dict):
            return ExchangeRecord()
        return ExchangeRecord.model_validate(body)

    async def get_news(self, country: str) -> list[NewsItem]:
        body = await self._get_checked(f"/api/news/{quote(country, safe='')}")
        if not isinstance(body, list):
            raise ChainError("Failed to fetch news", "Unexpected news response")
        return _NEWS_LIST.validate_python(body)

    async def load_dashboard(self) -> Dashboard:
        """Run the full chain.

        Raises:
            ChainError: The user, country or news step failed.
        """
        user = await self.get_user()
        news_task = asyncio.create_task(self.get_news(user.country))
        try:
            country = await self.get_country(user.country)
            if wants_exchange(country):
                exchange = await self.get_exchange(country.currency)
            else:
                exchange = ExchangeRecord()
            news = await news_task
        finally:
            if not news_task.done():
                news_task.cancel()
            elif not news_task.cancelled():
                news_task.exception()  # mark retrieved when an earlier step failed
        return Dashboard(user=user, country=country, exchange=exchange, news=news)

    async def close(self) -> None:
        """Close the HTTP client."""
        await self._client.aclose()

    async def __aenter__(self) -> "DashboardClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:  # noqa: ANN001
        await self.close()
