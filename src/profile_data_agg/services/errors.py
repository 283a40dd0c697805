"""Error mappers per endpoint domain and the provider exceptions they cover."""
import asyncio

import httpx

from profile_data_agg.providers.core import ProviderError, ProviderErrorMapper

# Exceptions from providers we map to ApiError; all others propagate (e.g. bugs, BaseException).
PROVIDER_EXCEPTIONS: tuple[type[Exception], ...] = (
    ProviderError,
    ValueError,
    KeyError,
    TypeError,
    TimeoutError,
    OSError,
    asyncio.TimeoutError,
    httpx.HTTPError,
)

USER_ERRORS = ProviderErrorMapper(
    api_name="Random User",
    error="Failed to fetch user data",
)

COUNTRY_ERRORS = ProviderErrorMapper(
    api_name="REST Countries",
    error="Failed to fetch country data",
    not_found_error="Country data not found",
)

EXCHANGE_ERRORS = ProviderErrorMapper(
    api_name="Exchange Rate",
    error="Exchange rate unavailable",
    config_error="Exchange rate API key not configured",
    sentinel_fields=("USD", "KZT"),
)

NEWS_ERRORS = ProviderErrorMapper(
    api_name="News",
    error="Failed to fetch news",
    config_error="News API key not configured",
    propagate_upstream_status=True,
)
