"""FastAPI application serving the cached news."""

from contextlib import asynccontextmanager
from pathlib import Path
from typing import Annotated, List, Optional

from fastapi import Depends, FastAPI, Query, Request
from fastapi.responses import HTMLResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates
from pydantic import BaseModel

from cryptonews.feed.cache import NewsCache
from cryptonews.feed.refresher import NewsRefresher
from cryptonews.feed.search import filter_articles
from cryptonews.logging_config import logger
from cryptonews.utils.time import format_rfc2822


WEB_DIR = Path(__file__).resolve().parent
templates = Jinja2Templates(directory=str(WEB_DIR / "templates"))


class ArticleResponse(BaseModel):
    title: str
    link: str
    description: str
    source: str
    pub_date: str
    timestamp: int


def get_cache(request: Request) -> NewsCache:
    """Dependency to get the shared news cache."""
    return request.app.state.cache


def create_app(cache: Optional[NewsCache] = None, refresher: Optional[NewsRefresher] = None) -> FastAPI:
    """Build the web app around a cache; when a refresher is given it runs for the app's lifetime."""
    cache = cache if cache is not None else NewsCache()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if refresher is not None:
            logger.info("Starting background news refresher")
            refresher.start()
        yield
        if refresher is not None:
            await refresher.stop()

    app = FastAPI(
        title="Crypto News Aggregator",
        description="Latest cryptocurrency news merged from several RSS feeds",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.cache = cache

    @app.get("/", response_class=HTMLResponse)
    async def index(
        request: Request,
        cache: Annotated[NewsCache, Depends(get_cache)],
        q: Annotated[Optional[str], Query(description="Search term")] = None,
    ):
        """Render the news page, optionally filtered by a search term."""
        search_term = q or ""
        articles = filter_articles(cache.snapshot(), search_term)

        return templates.TemplateResponse(
            request,
            "index.html",
            {
                "articles": articles,
                "search_term": search_term,
                "last_updated": format_rfc2822(cache.last_refreshed_at) or "Never",
                "article_count": len(articles),
                "has_search": bool(search_term),
            },
        )

    @app.get("/api/news", response_model=List[ArticleResponse])
    async def api_news(
        cache: Annotated[NewsCache, Depends(get_cache)],
        q: Annotated[Optional[str], Query(description="Search term")] = None,
    ):
        """Return the cached articles as JSON, optionally filtered by a search term."""
        articles = filter_articles(cache.snapshot(), q or "")
        return [ArticleResponse(**article.to_dict()) for article in articles]

    app.mount("/static", StaticFiles(directory=str(WEB_DIR / "static")), name="static")

    return app
