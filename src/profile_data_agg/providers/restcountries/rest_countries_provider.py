"""REST Countries provider: country metadata by (partial) name."""
from urllib.parse import quote

import httpx
from pydantic import TypeAdapter

from profile_data_agg.providers.core import (NOT_AVAILABLE,
                                             ResourceNotFoundError,
                                             UpstreamProviderABC, or_na)
from profile_data_agg.providers.restcountries.models import (
    RestCountriesByNameParams, RestCountry)
from profile_data_agg.schemas import CountryRecord

_COUNTRY_LIST = TypeAdapter(list[RestCountry])


class RestCountriesProvider(UpstreamProviderABC):
    """Looks up a country by name and reshapes the first match.

    Ambiguous names resolve silently to the API's first hit.
    """

    BASE_URL = "https://restcountries.com/v3.1"

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str | None = None,
        *,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the REST Countries provider.

        Args:
            api_key: Optional key sent as X-API-Key (the public API ignores it).
            base_url: Override for the v3.1 root URL.
            timeout: Request timeout in seconds.
            transport: Optional httpx transport.
        """
        headers: dict[str, str] = {}
        if api_key:
            headers["X-API-Key"] = api_key
        super().__init__(
            base_url or self.BASE_URL,
            timeout=timeout,
            headers=headers,
            transport=transport,
        )

    @property
    def api_name(self) -> str:
        return "REST Countries"

    async def get_country(self, name: str) -> CountryRecord:
        """Fetch country metadata for a free-text country name.

        Args:
            name: Country name, e.g. "France" or "united".

        Returns:
            CountryRecord built from the first matching country.

        Raises:
            ResourceNotFoundError: The lookup returned an empty list.
            httpx.HTTPStatusError: Non-2xx from upstream (404 when no match).
        """
        params = RestCountriesByNameParams().model_dump(by_alias=True)
        data = await self._get_json(f"/name/{quote(name, safe='')}", params=params)
        countries = _COUNTRY_LIST.validate_python(data or [])
        if not countries:
            raise ResourceNotFoundError(f"No country matches '{name}'")
        return self._record_from_country(countries[0])

    def _record_from_country(self, country: RestCountry) -> CountryRecord:
        """Build a CountryRecord from a REST Countries entry."""
        display_name = or_na(country.name.common)
        languages = ", ".join(country.languages.values()) if country.languages else NOT_AVAILABLE
        currency_code = next(iter(country.currencies), None) if country.currencies else None
        return CountryRecord(
            name=display_name,
            country_name=display_name,
            capital=or_na(country.capital[0]) if country.capital else NOT_AVAILABLE,
            languages=languages,
            official_languages=languages,
            currency=currency_code or NOT_AVAILABLE,
            currency_code=currency_code or NOT_AVAILABLE,
            flag=or_na(country.flags.png),
            has_currency=bool(currency_code),
        )
