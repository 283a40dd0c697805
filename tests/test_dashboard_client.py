"""End-to-end tests for the dashboard chain and its HTML rendering."""
import httpx
import pytest

from profile_data_agg.client import (ChainError, DashboardClient,
                                     load_and_render)
from profile_data_agg.client.render import (NO_EXCHANGE_MESSAGE,
                                            NO_NEWS_MESSAGE)

from .conftest import (COUNTRIES_HOST, EXCHANGE_HOST, NEWS_HOST,
                       RANDOM_USER_HOST, article, country_payload,
                       exchange_payload, news_payload, random_user_payload)


@pytest.fixture
def dashboard_client(asgi_app):
    return DashboardClient("http://testserver", transport=httpx.ASGITransport(app=asgi_app))


def _stub_happy_path(upstream, country="France", currencies=None):
    upstream.add_json(RANDOM_USER_HOST, "/api/", random_user_payload(country))
    upstream.add_json(
        COUNTRIES_HOST,
        f"/v3.1/name/{country}",
        [country_payload(country, currencies=currencies)],
    )
    upstream.add_json(
        NEWS_HOST,
        "/v2/everything",
        news_payload([article(f"{country} headline"), article("World news")]),
    )


async def test_chain_looks_up_country_currency_and_news(dashboard_client, upstream):
    _stub_happy_path(upstream)
    upstream.add_json(EXCHANGE_HOST, "/v6/test-exchange-key/latest/EUR", exchange_payload())

    async with dashboard_client as client:
        dashboard = await client.load_dashboard()

    assert dashboard.user.country == "France"
    assert dashboard.country.currency == "EUR"
    assert dashboard.exchange.usd == "1.09"
    assert [n.title for n in dashboard.news] == ["France headline", "World news"]
    assert upstream.calls(COUNTRIES_HOST)[0].url.path == "/v3.1/name/France"
    assert upstream.calls(EXCHANGE_HOST)[0].url.path.endswith("/latest/EUR")
    assert upstream.calls(NEWS_HOST)[0].url.params["q"] == "France"


async def test_chain_skips_exchange_without_currency(dashboard_client, upstream):
    _stub_happy_path(upstream, country="Antarctica", currencies={})

    async with dashboard_client as client:
        dashboard = await client.load_dashboard()
        html = await load_and_render(client)

    assert upstream.calls(EXCHANGE_HOST) == []
    assert dashboard.country.has_currency is False
    assert dashboard.exchange.usd == "N/A"
    assert NO_EXCHANGE_MESSAGE in html


async def test_exchange_failure_does_not_abort_chain(dashboard_client, upstream):
    _stub_happy_path(upstream)
    upstream.add(EXCHANGE_HOST, "/v6/test-exchange-key/latest/EUR", httpx.Response(500))

    async with dashboard_client as client:
        dashboard = await client.load_dashboard()

    assert dashboard.exchange.usd == "N/A"
    assert dashboard.exchange.kzt == "N/A"
    assert dashboard.exchange.error == "Exchange rate unavailable"


async def test_user_failure_aborts_before_other_calls(dashboard_client, upstream):
    upstream.add(RANDOM_USER_HOST, "/api/", httpx.Response(503))

    async with dashboard_client as client:
        with pytest.raises(ChainError) as exc_info:
            await client.load_dashboard()

    assert exc_info.value.message == "Failed to fetch user data"
    assert [r.url.host for r in upstream.requests] == [RANDOM_USER_HOST]


async def test_country_failure_renders_single_error_panel(dashboard_client, upstream):
    upstream.add_json(RANDOM_USER_HOST, "/api/", random_user_payload("Atlantis"))
    upstream.add_json(COUNTRIES_HOST, "/v3.1/name/Atlantis", [])
    upstream.add_json(NEWS_HOST, "/v2/everything", news_payload([]))

    async with dashboard_client as client:
        html = await load_and_render(client)

    assert "Error Loading Data" in html
    assert "Country data not found" in html
    assert "User Profile" not in html
    assert upstream.calls(EXCHANGE_HOST) == []


async def test_news_failure_aborts_chain(dashboard_client, upstream):
    _stub_happy_path(upstream)
    upstream.add_json(EXCHANGE_HOST, "/v6/test-exchange-key/latest/EUR", exchange_payload())
    upstream.add_json(
        NEWS_HOST,
        "/v2/everything",
        {"status": "error", "message": "rate limited"},
        status_code=429,
    )

    async with dashboard_client as client:
        with pytest.raises(ChainError) as exc_info:
            await client.load_dashboard()

    assert exc_info.value.message == "Failed to fetch news"
    assert exc_info.value.detail == "rate limited"


async def test_rendered_cards_escape_and_show_rates(dashboard_client, upstream):
    _stub_happy_path(upstream)
    upstream.add_json(EXCHANGE_HOST, "/v6/test-exchange-key/latest/EUR", exchange_payload())
    upstream.add_json(
        NEWS_HOST,
        "/v2/everything",
        news_payload([article("France <b>alert</b>", urlToImage=None)]),
    )

    async with dashboard_client as client:
        html = await load_and_render(client)

    assert "User Profile" in html
    assert "Louise Martin" in html
    assert "1 EUR = 1.09 USD" in html
    assert "1 EUR = 512.46 KZT" in html
    assert "France &lt;b&gt;alert&lt;/b&gt;" in html
    assert "Latest News from France" in html
    assert NO_NEWS_MESSAGE not in html


async def test_empty_news_renders_placeholder(dashboard_client, upstream):
    _stub_happy_path(upstream)
    upstream.add_json(EXCHANGE_HOST, "/v6/test-exchange-key/latest/EUR", exchange_payload())
    upstream.add_json(NEWS_HOST, "/v2/everything", news_payload([article("[Removed]")]))

    async with dashboard_client as client:
        html = await load_and_render(client)

    assert NO_NEWS_MESSAGE in html


async def test_country_error_wins_when_news_also_fails(dashboard_client, upstream):
    upstream.add_json(RANDOM_USER_HOST, "/api/", random_user_payload("Atlantis"))
    upstream.add_json(COUNTRIES_HOST, "/v3.1/name/Atlantis", [])
    upstream.add_json(
        NEWS_HOST,
        "/v2/everything",
        {"status": "error", "message": "rate limited"},
        status_code=429,
    )

    async with dashboard_client as client:
        html = await load_and_render(client)

    assert "Country data not found" in html
    assert "Failed to fetch news" not in html
    assert "rate limited" not in html
    assert upstream.calls(EXCHANGE_HOST) == []


async def test_unmatched_route_is_chain_error(dashboard_client, upstream):
    async with dashboard_client as client:
        with pytest.raises(ChainError) as exc_info:
            await client.get_country("N/A")

    assert "404" in exc_info.value.message
    assert upstream.calls(COUNTRIES_HOST) == []
