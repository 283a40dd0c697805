"""NewsAPI provider and DTOs."""
from profile_data_agg.providers.newsapi.models import (REMOVED_TITLE,
                                                       NewsApiArticle)
from profile_data_agg.providers.newsapi.news_api_provider import \
    NewsApiProvider

__all__ = ["REMOVED_TITLE", "NewsApiArticle", "NewsApiProvider"]
