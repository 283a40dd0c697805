"""ExchangeRate-API provider: USD and KZT rates for a base currency."""
import httpx

from profile_data_agg.providers.core import (MissingCredentialError,
                                             UnexpectedPayloadError,
                                             UpstreamProviderABC, format_rate)
from profile_data_agg.providers.exchangerate.models import \
    ExchangeRateLatestResponse
from profile_data_agg.schemas import ExchangeRecord, FormattedRates

QUOTE_CURRENCIES = ("USD", "KZT")


class ExchangeRateProvider(UpstreamProviderABC):
    """Provider for currency conversion rates via ExchangeRate-API.

    The API key is part of the URL path (/v6/{key}/latest/{base}); without a
    key every lookup raises MissingCredentialError.
    """

    BASE_URL = "https://v6.exchangerate-api.com/v6"

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str | None = None,
        *,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        super().__init__(base_url or self.BASE_URL, timeout=timeout, transport=transport)
        self._api_key = api_key

    @property
    def api_name(self) -> str:
        return "Exchange Rate"

    async def get_rates(self, base_currency: str) -> ExchangeRecord:
        """Fetch USD and KZT rates for one unit of base_currency.

        Args:
            base_currency: ISO 4217 code, already upper-cased (e.g. "EUR").

        Returns:
            ExchangeRecord with two-decimal rate strings and display lines.

        Raises:
            MissingCredentialError: EXCHANGE_API_KEY is not configured.
            UnexpectedPayloadError: USD or KZT is missing from the response.
        """
        if not self._api_key:
            raise MissingCredentialError("EXCHANGE_API_KEY", self.api_name)
        data = await self._get_json(f"/{self._api_key}/latest/{base_currency}")
        payload = ExchangeRateLatestResponse.model_validate(data)
        rates = payload.conversion_rates
        if any(rates.get(code) is None for code in QUOTE_CURRENCIES):
            raise UnexpectedPayloadError("Exchange rates not available for this currency")

        usd = format_rate(rates["USD"])
        kzt = format_rate(rates["KZT"])
        return ExchangeRecord(
            usd=usd,
            kzt=kzt,
            base_currency=base_currency,
            formatted=FormattedRates(
                usd=f"1 {base_currency} = {usd} USD",
                kzt=f"1 {base_currency} = {kzt} KZT",
            ),
        )
