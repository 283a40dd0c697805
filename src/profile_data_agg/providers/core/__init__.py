"""Core provider abstractions."""
from profile_data_agg.providers.core.error_mapper import ProviderErrorMapper
from profile_data_agg.providers.core.exceptions import (ApiError,
                                                        MissingCredentialError,
                                                        ProviderError,
                                                        ResourceNotFoundError,
                                                        UnexpectedPayloadError)
from profile_data_agg.providers.core.upstream_provider_abc import \
    UpstreamProviderABC
from profile_data_agg.utils import (NOT_AVAILABLE, format_long_date,
                                    format_rate, or_na)

__all__ = [
    "NOT_AVAILABLE",
    "ApiError",
    "MissingCredentialError",
    "ProviderError",
    "ProviderErrorMapper",
    "ResourceNotFoundError",
    "UnexpectedPayloadError",
    "UpstreamProviderABC",
    "format_long_date",
    "format_rate",
    "or_na",
]
