from typing import Iterable, List

from cryptonews.news.model import NewsArticle


def aggregate(per_source_results: Iterable[Iterable[NewsArticle]]) -> List[NewsArticle]:
    """
    Concatenate per-source article lists and sort newest first.

    The sort is stable, so articles with equal timestamps keep source order, then discovery order.
    No deduplication is done.
    """
    combined: List[NewsArticle] = []
    for articles in per_source_results:
        combined.extend(articles)

    return sorted(combined, key=lambda article: article.timestamp, reverse=True)
