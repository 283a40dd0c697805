"""Factory wiring providers and services from Settings (composition root)."""
from dataclasses import dataclass

import httpx

from profile_data_agg.config import Settings
from profile_data_agg.providers import (ExchangeRateProvider, NewsApiProvider,
                                        RandomUserProvider,
                                        RestCountriesProvider,
                                        UpstreamProviderABC)
from profile_data_agg.services.country_service import CountryService
from profile_data_agg.services.exchange_service import ExchangeService
from profile_data_agg.services.news_service import NewsService
from profile_data_agg.services.user_service import UserService


@dataclass(frozen=True)
class ProfileServices:
    """The four endpoint services plus the providers to close on shutdown."""

    user: UserService
    country: CountryService
    exchange: ExchangeService
    news: NewsService
    providers: tuple[UpstreamProviderABC, ...]


def create_profile_services(
    settings: Settings,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> ProfileServices:
    """Create providers and services from explicit settings.

    Args:
        settings: Credentials, upstream URLs and timeouts.
        transport: Optional httpx transport shared by all providers (tests).

    Returns:
        A ProfileServices bundle.
    """
    user_provider = RandomUserProvider(
        settings.random_user_url,
        timeout=settings.http_timeout,
        transport=transport,
    )
    country_provider = RestCountriesProvider(
        settings.rest_countries_api_key,
        settings.rest_countries_url,
        timeout=settings.http_timeout,
        transport=transport,
    )
    exchange_provider = ExchangeRateProvider(
        settings.exchange_api_key,
        settings.exchange_rate_url,
        timeout=settings.http_timeout,
        transport=transport,
    )
    news_provider = NewsApiProvider(
        settings.news_api_key,
        settings.news_api_url,
        timeout=settings.http_timeout,
        transport=transport,
    )
    return ProfileServices(
        user=UserService(user_provider),
        country=CountryService(country_provider),
        exchange=ExchangeService(exchange_provider),
        news=NewsService(
            news_provider,
            page_size=settings.news_page_size,
            limit=settings.news_limit,
        ),
        providers=(user_provider, country_provider, exchange_provider, news_provider),
    )
