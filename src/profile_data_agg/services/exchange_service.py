"""Exchange service: USD/KZT rates with the "no currency" short-circuit."""
import logging

from profile_data_agg.providers import ExchangeRateProvider
from profile_data_agg.providers.core import ProviderErrorMapper
from profile_data_agg.schemas import ExchangeRecord
from profile_data_agg.services.errors import (EXCHANGE_ERRORS,
                                              PROVIDER_EXCEPTIONS)
from profile_data_agg.utils import NOT_AVAILABLE

logger = logging.getLogger(__name__)


def normalize_currency(code: str) -> str:
    """Strip and upper-case a currency code ("eur " -> "EUR")."""
    return code.strip().upper()


class ExchangeService:
    """Service over ExchangeRate-API.

    An empty code or the "N/A" sentinel is a supported state (the country has
    no currency), answered with sentinel rates and no upstream call. Failures
    raise ApiError whose body still carries USD/KZT as "N/A".
    """

    def __init__(
        self,
        provider: ExchangeRateProvider,
        error_mapper: ProviderErrorMapper = EXCHANGE_ERRORS,
    ) -> None:
        self._provider = provider
        self._error_mapper = error_mapper

    async def get_rates(self, currency: str) -> ExchangeRecord:
        """Get USD and KZT rates for currency. Raises ApiError on provider errors."""
        code = normalize_currency(currency)
        if not code or code == NOT_AVAILABLE:
            logger.debug("No currency to convert; returning sentinel rates")
            return ExchangeRecord()
        try:
            return await self._provider.get_rates(code)
        except PROVIDER_EXCEPTIONS as e:
            self._error_mapper.raise_api_error(e, subject=code)
