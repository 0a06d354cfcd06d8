import asyncio
import time
from typing import List, Optional, Sequence

import aiohttp

from cryptonews.news.aggregator import aggregate
from cryptonews.news.errors import FeedFetchError
from cryptonews.news.model import NewsArticle, NewsSource
from cryptonews.news.parser import parse_rss_items
from cryptonews.logging_config import logger


def _client_timeout(timeout_seconds: Optional[float]) -> Optional[aiohttp.ClientTimeout]:
    if not timeout_seconds:
        return None
    return aiohttp.ClientTimeout(total=timeout_seconds)


async def fetch_feed_body(session: aiohttp.ClientSession, source: NewsSource, timeout_seconds: Optional[float] = None) -> str:
    """Retrieve the raw feed document for a source. Raises FeedFetchError on any transport failure."""
    request_kwargs = {}
    timeout = _client_timeout(timeout_seconds)
    if timeout is not None:
        request_kwargs["timeout"] = timeout

    try:
        async with session.get(source.url, **request_kwargs) as response:
            if response.status != 200:
                raise FeedFetchError(source.name, f"HTTP {response.status} when fetching {source.url}")

            return await response.text(errors="replace")

    except asyncio.TimeoutError as e:
        raise FeedFetchError(source.name, f"Timed out fetching {source.url}") from e
    except aiohttp.ClientError as e:
        raise FeedFetchError(source.name, f"{type(e).__name__}: {e}") from e


async def fetch_source_articles(session: aiohttp.ClientSession, source: NewsSource, timeout_seconds: Optional[float] = None) -> List[NewsArticle]:
    """Fetch one source and parse its items, stamping unparseable dates with the fetch time."""
    body = await fetch_feed_body(session, source, timeout_seconds)
    fetched_at = int(time.time())

    articles = parse_rss_items(body, source.name, now=fetched_at)
    logger.info(f"Successfully fetched {len(articles)} articles from news source: {source.name}")
    return articles


async def fetch_all_news(session: aiohttp.ClientSession, sources: Sequence[NewsSource], timeout_seconds: Optional[float] = None) -> List[NewsArticle]:
    """
    Fetch every source in configured order and return the merged articles, newest first.

    A failing source is logged and contributes no articles; it never aborts the other sources.
    """
    per_source_results: List[List[NewsArticle]] = []

    for source in sources:
        try:
            per_source_results.append(await fetch_source_articles(session, source, timeout_seconds))
        except FeedFetchError as e:
            logger.error(f"Error fetching from {source.name}: {e}")

    return aggregate(per_source_results)
