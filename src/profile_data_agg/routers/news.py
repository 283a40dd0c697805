"""Country news route (NewsAPI)."""
from fastapi import APIRouter

from profile_data_agg.deps import NewsServiceDep
from profile_data_agg.schemas import ErrorBody, NewsItem

router = APIRouter(prefix="/api/news", tags=["news"])


@router.get(
    "/{country}",
    response_model=list[NewsItem],
    responses={500: {"model": ErrorBody}},
)
async def get_news(country: str, service: NewsServiceDep) -> list[NewsItem]:
    """Get up to five recent English headlines about a country.

    Headlines naming the country come first; the rest is backfilled with
    other recent articles from the same search.
    """
    return await service.get_headlines(country)
