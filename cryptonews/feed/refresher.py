import asyncio
from typing import List, Optional, Sequence

import aiohttp

from cryptonews.feed.cache import NewsCache
from cryptonews.news.fetcher import fetch_all_news
from cryptonews.news.model import NewsArticle, NewsSource
from cryptonews.logging_config import create_logger


class NewsRefresher:
    """
    Background job that keeps the news cache current.

    Runs one fetch -> aggregate -> replace cycle immediately, then again every `interval_seconds`
    until stopped. There is no jitter or backoff; failing sources are handled inside the cycle.
    """

    def __init__(
        self,
        cache: NewsCache,
        sources: Sequence[NewsSource],
        interval_seconds: float,
        timeout_seconds: Optional[float] = None,
    ):
        self.cache = cache
        self.sources = list(sources)
        self.interval_seconds = interval_seconds
        self.timeout_seconds = timeout_seconds
        self.logger = create_logger("NewsRefresher")

        self._stop_event: Optional[asyncio.Event] = None
        self._task: Optional[asyncio.Task] = None

    async def refresh_once(self) -> List[NewsArticle]:
        """Run a single refresh cycle and store the result in the cache."""
        self.logger.info(f"Refreshing news from {len(self.sources)} sources...")

        async with aiohttp.ClientSession() as session:
            articles = await fetch_all_news(session, self.sources, self.timeout_seconds)

        self.cache.replace(articles)
        self.logger.info(f"News cache updated with {len(articles)} articles")
        return articles

    async def run(self, stop_event: asyncio.Event) -> None:
        """Refresh forever, waiting `interval_seconds` between cycles, until `stop_event` is set."""
        while not stop_event.is_set():
            try:
                await self.refresh_once()
            except Exception:
                self.logger.exception("Unexpected error during news refresh; will retry next cycle")

            try:
                await asyncio.wait_for(stop_event.wait(), timeout=self.interval_seconds)
            except asyncio.TimeoutError:
                continue

        self.logger.info("News refresher stopped")

    def start(self) -> asyncio.Task:
        """Start the refresh loop as a background task on the running event loop."""
        if self._task is not None and not self._task.done():
            return self._task

        self._stop_event = asyncio.Event()
        self._task = asyncio.create_task(self.run(self._stop_event))
        return self._task

    async def stop(self) -> None:
        """Signal the loop to stop and wait for it; a cycle stuck on the network is cancelled."""
        if self._task is None:
            return

        if self._stop_event is not None:
            self._stop_event.set()

        try:
            await asyncio.wait_for(self._task, timeout=1.0)
        except asyncio.TimeoutError:
            # wait_for cancels the task on timeout
            self.logger.warning("News refresher did not stop in time; cancelled in-flight refresh")
        finally:
            self._task = None
            self._stop_event = None
