"""Country metadata route (REST Countries)."""
from fastapi import APIRouter

from profile_data_agg.deps import CountryServiceDep
from profile_data_agg.schemas import CountryRecord, ErrorBody

router = APIRouter(prefix="/api/country", tags=["country"])


@router.get(
    "/{country}",
    response_model=CountryRecord,
    responses={404: {"model": ErrorBody}, 500: {"model": ErrorBody}},
)
async def get_country(country: str, service: CountryServiceDep) -> CountryRecord:
    """Get metadata for a country by (partial) name.

    Args:
        country: Country name, e.g. "France". Ambiguous names resolve to the
            upstream's first match.

    Returns:
        Country record; capital, languages, currency and flag fall back to "N/A".
    """
    return await service.get_country(country)
