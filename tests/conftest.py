from contextlib import asynccontextmanager
from email.utils import formatdate
from typing import Awaitable, Callable, Dict, Optional

import pytest
from aiohttp import web
from aiohttp.test_utils import TestServer

from cryptonews.news.model import NewsArticle


def build_rss_item(
    title: Optional[str] = "Bitcoin climbs",
    link: Optional[str] = "https://example.com/a",
    description: Optional[str] = "Prices moved.",
    pub_date: Optional[str] = "Mon, 01 Jan 2024 12:00:00 GMT",
) -> str:
    """Build an RSS <item> block; a field set to None is left out."""
    parts = ["<item>"]
    if title is not None:
        parts.append(f"<title>{title}</title>")
    if link is not None:
        parts.append(f"<link>{link}</link>")
    if description is not None:
        parts.append(f"<description>{description}</description>")
    if pub_date is not None:
        parts.append(f"<pubDate>{pub_date}</pubDate>")
    parts.append("</item>")
    return "".join(parts)


def build_rss_feed(*items: str, channel_title: str = "Example Feed") -> str:
    return (
        '<?xml version="1.0" encoding="UTF-8"?>'
        "<rss version=\"2.0\"><channel>"
        f"<title>{channel_title}</title><link>https://example.com</link>"
        f"<description>Feed level description</description>"
        + "".join(items)
        + "</channel></rss>"
    )


@pytest.fixture
def rss_item() -> Callable[..., str]:
    return build_rss_item


@pytest.fixture
def rss_feed() -> Callable[..., str]:
    return build_rss_feed


@pytest.fixture
def rfc2822():
    """Format a unix timestamp the way RSS pubDate fields do."""
    return lambda timestamp: formatdate(timestamp, usegmt=True)


@pytest.fixture
def make_article():
    def _make(title="Title", description="Description...", source="Source", timestamp=0, link="https://example.com", pub_date=""):
        return NewsArticle(
            title=title,
            link=link,
            description=description,
            source=source,
            pub_date=pub_date,
            timestamp=timestamp,
        )
    return _make


@pytest.fixture
def feed_server():
    """Serve canned handlers from a local aiohttp server: `async with feed_server({"/path": handler}) as server`."""
    @asynccontextmanager
    async def _serve(routes: Dict[str, Callable[[web.Request], Awaitable[web.StreamResponse]]]):
        app = web.Application()
        for path, handler in routes.items():
            app.router.add_get(path, handler)

        async with TestServer(app) as server:
            yield server

    return _serve


def text_handler(body: str, status: int = 200):
    async def handler(request: web.Request) -> web.Response:
        return web.Response(text=body, status=status, content_type="application/rss+xml")
    return handler


@pytest.fixture
def respond_with():
    return text_handler
