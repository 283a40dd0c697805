"""Exchange rate route (ExchangeRate-API)."""
from fastapi import APIRouter

from profile_data_agg.deps import ExchangeServiceDep
from profile_data_agg.schemas import ExchangeErrorBody, ExchangeRecord

router = APIRouter(prefix="/api/exchange", tags=["exchange"])


# path converter: the "N/A" sentinel contains a slash
@router.get(
    "/{currency:path}",
    response_model=ExchangeRecord,
    response_model_exclude_none=True,
    responses={500: {"model": ExchangeErrorBody}},
)
async def get_exchange_rates(currency: str, service: ExchangeServiceDep) -> ExchangeRecord:
    """Get USD and KZT rates for one unit of currency.

    Args:
        currency: ISO 4217 code (case-insensitive). "N/A" or an empty code
            returns {"USD": "N/A", "KZT": "N/A"} without calling upstream.

    Returns:
        Rates as two-decimal strings, plus base currency and display lines.
    """
    return await service.get_rates(currency)
