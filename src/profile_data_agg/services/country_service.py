"""Country service: by-name lookup; empty matches become 404."""
from profile_data_agg.providers import RestCountriesProvider
from profile_data_agg.providers.core import ProviderErrorMapper
from profile_data_agg.schemas import CountryRecord
from profile_data_agg.services.errors import (COUNTRY_ERRORS,
                                              PROVIDER_EXCEPTIONS)


class CountryService:
    """Thin service over REST Countries; maps provider errors to ApiError."""

    def __init__(
        self,
        provider: RestCountriesProvider,
        error_mapper: ProviderErrorMapper = COUNTRY_ERRORS,
    ) -> None:
        self._provider = provider
        self._error_mapper = error_mapper

    async def get_country(self, name: str) -> CountryRecord:
        """Get country metadata for name. Raises ApiError (404 when nothing matches)."""
        try:
            return await self._provider.get_country(name.strip())
        except PROVIDER_EXCEPTIONS as e:
            self._error_mapper.raise_api_error(e, subject=name)
