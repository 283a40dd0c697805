"""REST Countries provider and DTOs."""
from profile_data_agg.providers.restcountries.rest_countries_provider import \
    RestCountriesProvider

__all__ = ["RestCountriesProvider"]
