import asyncio
import json
import sys
import argparse

import uvicorn

from cryptonews.config import CONFIG
from cryptonews.feed.cache import NewsCache
from cryptonews.feed.refresher import NewsRefresher
from cryptonews.feed.search import filter_articles
from cryptonews.logging_config import logger
from cryptonews.web.app import create_app


def setup_argparser():
    """Set up command line argument parser."""
    parser = argparse.ArgumentParser(description="Crypto news aggregator")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    serve_parser = subparsers.add_parser("serve", help="Run the web server with the background news refresher")
    serve_parser.add_argument("--host", default=CONFIG.HOST, help="Bind address")
    serve_parser.add_argument("--port", type=int, default=CONFIG.PORT, help="Bind port")

    refresh_parser = subparsers.add_parser("refresh", help="Fetch all sources once and print the articles as JSON")
    refresh_parser.add_argument("--query", default="", help="Only print articles matching this search term")

    return parser


def build_refresher(cache: NewsCache) -> NewsRefresher:
    return NewsRefresher(
        cache=cache,
        sources=CONFIG.NEWS_SOURCES,
        interval_seconds=CONFIG.REFRESH_INTERVAL_SECONDS,
        timeout_seconds=CONFIG.FETCH_TIMEOUT_SECONDS,
    )


async def refresh(query: str) -> list:
    """Run one refresh cycle and return the matching articles as dicts."""
    cache = NewsCache()
    await build_refresher(cache).refresh_once()
    return [article.to_dict() for article in filter_articles(cache.snapshot(), query)]


def serve(host: str, port: int):
    cache = NewsCache()
    app = create_app(cache=cache, refresher=build_refresher(cache))

    logger.info(f"Starting Crypto News Aggregator on http://{host}:{port}")
    uvicorn.run(app, host=host, port=port)


def main():
    """Main CLI entry point."""
    parser = setup_argparser()
    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        sys.exit(1)

    if args.command == "serve":
        serve(args.host, args.port)

    elif args.command == "refresh":
        articles = asyncio.run(refresh(args.query))
        print(json.dumps(articles, indent=2, ensure_ascii=False))

    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
