from .cache import NewsCache
from .refresher import NewsRefresher
from .search import matches_search, filter_articles

__all__ = [
    "NewsCache",
    "NewsRefresher",
    "matches_search",
    "filter_articles",
]
