"""Pytest configuration and fixtures for profile_data_agg tests."""
from collections.abc import Callable
from typing import Any

import httpx
import pytest
from fastapi.testclient import TestClient

from profile_data_agg.config import Settings
from profile_data_agg.main import create_app
from profile_data_agg.services import create_profile_services

RANDOM_USER_HOST = "randomuser.me"
COUNTRIES_HOST = "restcountries.com"
EXCHANGE_HOST = "v6.exchangerate-api.com"
NEWS_HOST = "newsapi.org"

Responder = httpx.Response | Callable[[httpx.Request], httpx.Response]


class FakeUpstream:
    """Routes httpx requests by (host, path) to canned responses and records them."""

    def __init__(self) -> None:
        self._routes: dict[tuple[str, str], Callable[[httpx.Request], httpx.Response]] = {}
        self.requests: list[httpx.Request] = []

    def add(self, host: str, path: str, response: Responder) -> None:
        if isinstance(response, httpx.Response):
            canned = response

            def response(_request: httpx.Request) -> httpx.Response:
                # one Response per request
                return httpx.Response(
                    canned.status_code, headers=canned.headers, content=canned.content
                )

        self._routes[(host, path)] = response

    def add_json(self, host: str, path: str, data: Any, status_code: int = 200) -> None:
        self.add(host, path, lambda _request: httpx.Response(status_code, json=data))

    def calls(self, host: str) -> list[httpx.Request]:
        return [r for r in self.requests if r.url.host == host]

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        key = (request.url.host, request.url.path)
        if key not in self._routes:
            raise AssertionError(f"Unexpected upstream request: {request.method} {request.url}")
        return self._routes[key](request)

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


def random_user_payload(country: str = "France") -> dict:
    return {
        "results": [
            {
                "gender": "female",
                "name": {"title": "Ms", "first": "Louise", "last": "Martin"},
                "location": {
                    "street": {"number": 4127, "name": "Rue de la Gare"},
                    "city": "Lyon",
                    "country": country,
                },
                "dob": {"date": "1990-03-05T10:21:33.123Z", "age": 36},
                "picture": {"large": "https://randomuser.me/api/portraits/women/1.jpg"},
            }
        ],
        "info": {"seed": "abc", "results": 1, "page": 1, "version": "1.4"},
    }


def country_payload(
    name: str = "France",
    currencies: dict | None = None,
    capital: list[str] | None = None,
    languages: dict | None = None,
) -> dict:
    entry: dict[str, Any] = {
        "name": {"common": name, "official": f"{name} Republic"},
        "flags": {"png": f"https://flagcdn.com/w320/{name[:2].lower()}.png"},
    }
    entry["currencies"] = (
        currencies if currencies is not None else {"EUR": {"name": "Euro", "symbol": "€"}}
    )
    entry["capital"] = capital if capital is not None else ["Paris"]
    entry["languages"] = languages if languages is not None else {"fra": "French"}
    return entry


def exchange_payload(base: str = "EUR", usd: float = 1.0873, kzt: float = 512.456) -> dict:
    return {
        "result": "success",
        "base_code": base,
        "conversion_rates": {base: 1, "USD": usd, "KZT": kzt, "GBP": 0.85},
    }


def article(title: str | None, **overrides: Any) -> dict:
    data = {
        "source": {"id": None, "name": "Example Wire"},
        "title": title,
        "description": f"About {title}",
        "url": f"https://news.example.com/{abs(hash(title))}",
        "urlToImage": "https://news.example.com/img.jpg",
        "publishedAt": "2026-10-17T08:30:00Z",
    }
    data.update(overrides)
    return data


def news_payload(articles: list[dict]) -> dict:
    return {"status": "ok", "totalResults": len(articles), "articles": articles}


@pytest.fixture
def settings() -> Settings:
    """Settings with both required keys configured and no .env lookup."""
    return Settings(
        _env_file=None,
        EXCHANGE_API_KEY="test-exchange-key",
        news_api_key="test-news-key",
        rest_countries_api_key=None,
    )


@pytest.fixture
def upstream() -> FakeUpstream:
    return FakeUpstream()


@pytest.fixture
def make_api_client(upstream: FakeUpstream):
    """Build a TestClient for an app wired to the fake upstream."""
    clients: list[TestClient] = []

    def _make(app_settings: Settings) -> TestClient:
        client = TestClient(create_app(app_settings, transport=upstream.transport()))
        client.__enter__()
        clients.append(client)
        return client

    yield _make
    for client in clients:
        client.__exit__(None, None, None)


@pytest.fixture
def api_client(make_api_client, settings: Settings) -> TestClient:
    return make_api_client(settings)


@pytest.fixture
def asgi_app(settings: Settings, upstream: FakeUpstream):
    """App with services attached directly (ASGITransport does not run lifespan)."""
    app = create_app(settings)
    app.state.services = create_profile_services(settings, transport=upstream.transport())
    return app
