"""Best-effort headline selection for a country's news card."""
from profile_data_agg.providers.newsapi import NewsApiArticle

DEFAULT_LIMIT = 5


def select_headlines(
    articles: list[NewsApiArticle],
    country: str,
    limit: int = DEFAULT_LIMIT,
) -> list[NewsApiArticle]:
    """Pick up to limit articles, preferring titles that name the country.

    Untitled and "[Removed]" articles are dropped first. Titles containing the
    country name (case-insensitive) are taken in upstream order; if fewer than
    limit match, the rest is backfilled from the remaining usable articles
    whose title is not already selected.

    Args:
        articles: Upstream batch, newest first.
        country: Country name to look for in titles.
        limit: Maximum number of articles to return.

    Returns:
        Selected articles; matches first, then backfill, both in upstream order.
    """
    pool = [a for a in articles if a.is_usable]
    needle = country.lower()

    selected = [a for a in pool if needle in a.title.lower()][:limit]
    titles = {a.title for a in selected}
    for article in pool:
        if len(selected) >= limit:
            break
        if article.title in titles:
            continue
        selected.append(article)
        titles.add(article.title)
    return selected
