from dataclasses import dataclass, asdict
from typing import Any, Dict
from pydantic import BaseModel, Field


@dataclass(frozen=True)
class NewsArticle:
    """Represents a single news article extracted from a feed item."""
    title: str
    link: str
    description: str  # Truncated, always ends with the ellipsis marker
    source: str  # Human-readable source name, not the feed URL
    pub_date: str  # Raw date string as found in the feed
    timestamp: int  # Unix timestamp, used for ordering only

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


class NewsSource(BaseModel):
    """A configured feed provider."""
    name: str = Field(description="Display name of the source")
    url: str = Field(description="RSS feed URL")
