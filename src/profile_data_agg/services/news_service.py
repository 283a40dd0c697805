"""News service: country headlines via NewsAPI plus headline selection."""
from profile_data_agg.providers import NewsApiProvider
from profile_data_agg.providers.core import ProviderErrorMapper
from profile_data_agg.schemas import NewsItem
from profile_data_agg.services.errors import NEWS_ERRORS, PROVIDER_EXCEPTIONS
from profile_data_agg.services.headline_selection import (DEFAULT_LIMIT,
                                                          select_headlines)


class NewsService:
    """Service over NewsAPI; fetches a wide batch and narrows it to limit items."""

    def __init__(
        self,
        provider: NewsApiProvider,
        error_mapper: ProviderErrorMapper = NEWS_ERRORS,
        *,
        page_size: int = 20,
        limit: int = DEFAULT_LIMIT,
    ) -> None:
        """Initialize with provider and batch sizes.

        Args:
            provider: The NewsAPI provider.
            error_mapper: Maps provider exceptions to ApiError.
            page_size: Upstream batch size; should exceed limit to allow filtering.
            limit: Number of headlines returned.
        """
        self._provider = provider
        self._error_mapper = error_mapper
        self._page_size = page_size
        self._limit = limit

    async def get_headlines(self, country: str) -> list[NewsItem]:
        """Get up to limit headlines about country. Raises ApiError on provider errors."""
        country = country.strip()
        try:
            articles = await self._provider.search(country, page_size=self._page_size)
        except PROVIDER_EXCEPTIONS as e:
            self._error_mapper.raise_api_error(e, subject=country)
        selected = select_headlines(articles, country, limit=self._limit)
        return [article.to_news_item() for article in selected]
