"""ExchangeRate-API provider and DTOs."""
from profile_data_agg.providers.exchangerate.exchange_rate_provider import (
    QUOTE_CURRENCIES, ExchangeRateProvider)

__all__ = ["QUOTE_CURRENCIES", "ExchangeRateProvider"]
