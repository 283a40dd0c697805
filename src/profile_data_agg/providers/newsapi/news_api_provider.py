"""NewsAPI provider: recent English articles matching a query."""
import httpx

from profile_data_agg.providers.core import (MissingCredentialError,
                                             UpstreamProviderABC)
from profile_data_agg.providers.newsapi.models import (NewsApiArticle,
                                                       NewsApiEverythingParams,
                                                       NewsApiResponse)


class NewsApiProvider(UpstreamProviderABC):
    """Searches NewsAPI's /everything endpoint.

    The key is sent in the X-Api-Key header so it never appears in URLs.
    """

    BASE_URL = "https://newsapi.org/v2"

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
        return "News"

    async def search(self, query: str, page_size: int = 20) -> list[NewsApiArticle]:
        """Fetch up to page_size English articles for query, newest first.

        Args:
            query: Free-text search, e.g. a country name.
            page_size: Batch size; larger than the final output to allow filtering.

        Raises:
            MissingCredentialError: NEWS_API_KEY is not configured.
            httpx.HTTPStatusError: Non-2xx from upstream (401, 426, 429, ...).
        """
        if not self._api_key:
            raise MissingCredentialError("NEWS_API_KEY", self.api_name)
        params = NewsApiEverythingParams(q=query, page_size=page_size).model_dump(by_alias=True)
        data = await self._get_json(
            "/everything",
            params=params,
            headers={"X-Api-Key": self._api_key},
        )
        return NewsApiResponse.model_validate(data).articles
