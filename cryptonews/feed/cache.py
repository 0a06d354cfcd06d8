import threading
from datetime import datetime, timezone
from typing import Iterable, List, Optional, Tuple

from cryptonews.news.model import NewsArticle


class NewsCache:
    """
    In-memory holder of the latest aggregated article list.

    One writer replaces the whole list per refresh cycle; any number of readers take snapshots. The
    lock is held only to swap or copy the reference, so readers see either the old or the new list,
    never a mix.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._articles: Tuple[NewsArticle, ...] = ()
        self._refreshed_at: Optional[datetime] = None

    def replace(self, articles: Iterable[NewsArticle], refreshed_at: Optional[datetime] = None) -> None:
        new_articles = tuple(articles)
        refreshed_at = refreshed_at or datetime.now(timezone.utc)

        with self._lock:
            self._articles = new_articles
            self._refreshed_at = refreshed_at

    def snapshot(self) -> List[NewsArticle]:
        with self._lock:
            articles = self._articles
        return list(articles)

    @property
    def last_refreshed_at(self) -> Optional[datetime]:
        """Time of the last completed refresh, None until the first one."""
        with self._lock:
            return self._refreshed_at

    def __len__(self) -> int:
        with self._lock:
            return len(self._articles)
