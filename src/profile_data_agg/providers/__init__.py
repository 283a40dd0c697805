"""Upstream data providers for the profile dashboard.

This module provides one provider per third-party API:

- RandomUserProvider: random user profiles via randomuser.me
- RestCountriesProvider: country metadata via REST Countries
- ExchangeRateProvider: USD/KZT conversion rates via ExchangeRate-API
- NewsApiProvider: English headlines via NewsAPI

All providers derive from UpstreamProviderABC, own an httpx.AsyncClient and
must be closed (or used as async context managers).

Example:
    async with RestCountriesProvider() as provider:
        country = await provider.get_country("France")
        print(f"{country.name}: {country.currency}")
"""
from profile_data_agg.providers.core import (ProviderErrorMapper,
                                             UpstreamProviderABC)
from profile_data_agg.providers.exchangerate import ExchangeRateProvider
from profile_data_agg.providers.newsapi import NewsApiProvider
from profile_data_agg.providers.randomuser import RandomUserProvider
from profile_data_agg.providers.restcountries import RestCountriesProvider

__all__ = [
    "ExchangeRateProvider",
    "NewsApiProvider",
    "ProviderErrorMapper",
    "RandomUserProvider",
    "RestCountriesProvider",
    "UpstreamProviderABC",
]
