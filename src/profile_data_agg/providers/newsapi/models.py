"""DTOs for NewsAPI /v2/everything (https://newsapi.org/docs/endpoints/everything)."""
from pydantic import BaseModel, ConfigDict, Field

from profile_data_agg.schemas import NewsItem
from profile_data_agg.utils import NOT_AVAILABLE, format_long_date

REMOVED_TITLE = "[Removed]"


class NewsApiSource(BaseModel):
    id: str | None = None
    name: str | None = None


class NewsApiArticle(BaseModel):
    """One article as returned by NewsAPI."""

    model_config = ConfigDict(populate_by_name=True)

    title: str | None = None
    description: str | None = None
    url: str | None = None
    url_to_image: str | None = Field(default=None, alias="urlToImage")
    published_at: str | None = Field(default=None, alias="publishedAt")
    source: NewsApiSource | None = None

    @property
    def is_usable(self) -> bool:
        """False for untitled articles and NewsAPI's "[Removed]" placeholders."""
        return bool(self.title) and self.title != REMOVED_TITLE

    def to_news_item(self) -> NewsItem:
        """Reshape into the NewsItem returned by the news endpoint."""
        url = self.url or NOT_AVAILABLE
        return NewsItem(
            title=self.title or NOT_AVAILABLE,
            description=self.description or "No description available",
            image=self.url_to_image or None,
            url=url,
            source_url=url,
            source=(self.source.name if self.source else None) or NOT_AVAILABLE,
            published_at=format_long_date(self.published_at),
        )


class NewsApiResponse(BaseModel):
    status: str | None = None
    total_results: int | None = Field(default=None, alias="totalResults")
    articles: list[NewsApiArticle] = Field(default_factory=list)


class NewsApiEverythingParams(BaseModel):
    """Query params for /everything: English, newest first."""

    q: str
    language: str = "en"
    sort_by: str = Field(default="publishedAt", serialization_alias="sortBy")
    page_size: int = Field(default=20, serialization_alias="pageSize")
