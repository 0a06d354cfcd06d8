from pydantic_settings import BaseSettings
from pydantic import Field
from typing import List
from dotenv import load_dotenv

from cryptonews.news.model import NewsSource


load_dotenv()


DEFAULT_NEWS_SOURCES = [
    NewsSource(name="CoinDesk", url="https://www.coindesk.com/arc/outboundfeeds/rss/"),
    NewsSource(name="CryptoSlate", url="https://cryptoslate.com/feed/"),
    NewsSource(name="Cointelegraph", url="https://cointelegraph.com/rss"),
]


class Config(BaseSettings):
    """Settings for the application using Pydantic BaseSettings for environment variables."""

    # Logging
    LOG_LEVEL: str = Field(default="info")

    # News Collection Settings
    NEWS_SOURCES: List[NewsSource] = Field(default_factory=lambda: list(DEFAULT_NEWS_SOURCES), description="Feeds to aggregate, as a JSON list of {name, url}")
    REFRESH_INTERVAL_SECONDS: int = Field(default=300, description="Seconds to wait between refresh cycles")
    FETCH_TIMEOUT_SECONDS: float = Field(default=30.0, description="Total timeout per feed request; 0 keeps the HTTP client's defaults")

    # Server Settings
    HOST: str = Field(default="127.0.0.1", description="Bind address for the web server")
    PORT: int = Field(default=8080, description="Bind port for the web server")


CONFIG = Config()


__all__ = ["CONFIG", "Config", "DEFAULT_NEWS_SOURCES"]
