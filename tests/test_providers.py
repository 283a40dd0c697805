"""Tests for upstream providers against a mocked transport."""
import httpx
import pytest

from profile_data_agg.providers import (ExchangeRateProvider, NewsApiProvider,
                                        RandomUserProvider,
                                        RestCountriesProvider)
from profile_data_agg.providers.core import (MissingCredentialError,
                                             ResourceNotFoundError,
                                             UnexpectedPayloadError)
from profile_data_agg.utils import NOT_AVAILABLE

from .conftest import (COUNTRIES_HOST, EXCHANGE_HOST, NEWS_HOST,
                       RANDOM_USER_HOST, article, country_payload,
                       exchange_payload, news_payload, random_user_payload)


async def test_random_user_is_flattened(upstream):
    upstream.add_json(RANDOM_USER_HOST, "/api/", random_user_payload())
    async with RandomUserProvider(transport=upstream.transport()) as provider:
        user = await provider.get_user()

    assert user.first_name == "Louise"
    assert user.last_name == "Martin"
    assert user.age == 36
    assert user.date_of_birth == "March 5, 1990"
    assert user.address == "4127, Rue de la Gare"
    assert user.full_address == "4127 Rue de la Gare, Lyon, France"
    assert user.image == user.profile_picture


async def test_random_user_partial_payload_uses_sentinels(upstream):
    upstream.add_json(RANDOM_USER_HOST, "/api/", {"results": [{"gender": "male"}]})
    async with RandomUserProvider(transport=upstream.transport()) as provider:
        user = await provider.get_user()

    dumped = user.model_dump(by_alias=True)
    assert None not in dumped.values()
    assert dumped["country"] == NOT_AVAILABLE
    assert dumped["address"] == NOT_AVAILABLE


async def test_random_user_without_results_is_unexpected(upstream):
    upstream.add_json(RANDOM_USER_HOST, "/api/", {"results": []})
    async with RandomUserProvider(transport=upstream.transport()) as provider:
        with pytest.raises(UnexpectedPayloadError):
            await provider.get_user()


async def test_country_takes_first_match_and_first_currency_key(upstream):
    upstream.add_json(
        COUNTRIES_HOST,
        "/v3.1/name/Switzerland",
        [
            country_payload(
                "Switzerland",
                currencies={"CHF": {"name": "Swiss franc"}, "EUR": {"name": "Euro"}},
                languages={"fra": "French", "gsw": "Swiss German", "ita": "Italian"},
                capital=["Bern"],
            ),
            country_payload("Other"),
        ],
    )
    async with RestCountriesProvider(transport=upstream.transport()) as provider:
        country = await provider.get_country("Switzerland")

    assert country.name == "Switzerland"
    assert country.currency == "CHF"
    assert country.currency_code == "CHF"
    assert country.has_currency is True
    assert country.languages == "French, Swiss German, Italian"
    assert country.capital == "Bern"
    request = upstream.calls(COUNTRIES_HOST)[0]
    assert request.url.params["fullText"] == "false"
    assert "X-API-Key" not in request.headers


async def test_country_without_currency_or_capital(upstream):
    upstream.add_json(
        COUNTRIES_HOST,
        "/v3.1/name/Antarctica",
        [country_payload("Antarctica", currencies={}, capital=[], languages={})],
    )
    async with RestCountriesProvider(transport=upstream.transport()) as provider:
        country = await provider.get_country("Antarctica")

    assert country.currency == NOT_AVAILABLE
    assert country.has_currency is False
    assert country.capital == NOT_AVAILABLE
    assert country.languages == NOT_AVAILABLE


async def test_country_name_is_url_encoded_and_key_sent(upstream):
    upstream.add_json(COUNTRIES_HOST, "/v3.1/name/United States", [country_payload("United States")])
    async with RestCountriesProvider(api_key="rc-key", transport=upstream.transport()) as provider:
        await provider.get_country("United States")

    request = upstream.calls(COUNTRIES_HOST)[0]
    assert request.url.raw_path.startswith(b"/v3.1/name/United%20States")
    assert request.headers["X-API-Key"] == "rc-key"


async def test_country_empty_list_is_not_found(upstream):
    upstream.add_json(COUNTRIES_HOST, "/v3.1/name/Atlantis", [])
    async with RestCountriesProvider(transport=upstream.transport()) as provider:
        with pytest.raises(ResourceNotFoundError):
            await provider.get_country("Atlantis")


async def test_exchange_rates_are_rounded_strings(upstream):
    upstream.add_json(EXCHANGE_HOST, "/v6/k/latest/EUR", exchange_payload())
    async with ExchangeRateProvider("k", transport=upstream.transport()) as provider:
        record = await provider.get_rates("EUR")

    assert record.usd == "1.09"
    assert record.kzt == "512.46"
    assert record.base_currency == "EUR"
    assert record.formatted.usd == "1 EUR = 1.09 USD"
    assert record.formatted.kzt == "1 EUR = 512.46 KZT"


async def test_exchange_without_key_never_calls_upstream(upstream):
    async with ExchangeRateProvider(None, transport=upstream.transport()) as provider:
        with pytest.raises(MissingCredentialError):
            await provider.get_rates("EUR")
    assert upstream.requests == []


async def test_exchange_missing_quote_currency(upstream):
    upstream.add_json(
        EXCHANGE_HOST,
        "/v6/k/latest/XYZ",
        {"result": "success", "conversion_rates": {"USD": 0.5}},
    )
    async with ExchangeRateProvider("k", transport=upstream.transport()) as provider:
        with pytest.raises(UnexpectedPayloadError):
            await provider.get_rates("XYZ")


async def test_news_search_params_and_header(upstream):
    upstream.add_json(NEWS_HOST, "/v2/everything", news_payload([article("France votes")]))
    async with NewsApiProvider("news-key", transport=upstream.transport()) as provider:
        articles = await provider.search("France", page_size=20)

    assert [a.title for a in articles] == ["France votes"]
    request = upstream.calls(NEWS_HOST)[0]
    assert request.url.params["q"] == "France"
    assert request.url.params["language"] == "en"
    assert request.url.params["sortBy"] == "publishedAt"
    assert request.url.params["pageSize"] == "20"
    assert request.headers["X-Api-Key"] == "news-key"


async def test_news_upstream_error_is_raised(upstream):
    upstream.add_json(
        NEWS_HOST,
        "/v2/everything",
        {"status": "error", "code": "rateLimited", "message": "Too many requests"},
        status_code=429,
    )
    async with NewsApiProvider("news-key", transport=upstream.transport()) as provider:
        with pytest.raises(httpx.HTTPStatusError):
            await provider.search("France")
