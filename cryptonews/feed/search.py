from typing import Iterable, List

from cryptonews.news.model import NewsArticle


def matches_search(article: NewsArticle, search_term: str) -> bool:
    """Case-insensitive substring match against title, description and source name."""
    if not search_term:
        return True

    search_lower = search_term.lower()
    return (
        search_lower in article.title.lower()
        or search_lower in article.description.lower()
        or search_lower in article.source.lower()
    )


def filter_articles(articles: Iterable[NewsArticle], search_term: str) -> List[NewsArticle]:
    return [article for article in articles if matches_search(article, search_term)]
