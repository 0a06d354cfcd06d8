# Import core models
from .model import NewsArticle, NewsSource

from .errors import NewsError, FeedFetchError, FeedParsingError, TagNotFoundError

__all__ = [
    "NewsArticle",
    "NewsSource",
    "NewsError",
    "FeedFetchError",
    "FeedParsingError",
    "TagNotFoundError",
]
