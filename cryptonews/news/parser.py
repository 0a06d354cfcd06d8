import time
from typing import List, Optional

from cryptonews.news.errors import TagNotFoundError
from cryptonews.news.extractor import extract_text
from cryptonews.news.model import NewsArticle
from cryptonews.logging_config import create_logger
from cryptonews.utils.time import convert_date_str_to_timestamp


ITEM_MARKER = "<item>"
DESCRIPTION_MAX_CHARS = 200
ELLIPSIS = "..."

logger = create_logger("RSSParser")


def truncate_description(text: str) -> str:
    """Keep the first 200 characters and append the ellipsis marker, even for short text."""
    return text[:DESCRIPTION_MAX_CHARS] + ELLIPSIS


def parse_rss_items(feed_body: str, source_name: str, now: Optional[int] = None) -> List[NewsArticle]:
    """
    Split an RSS document into item fragments and build one article per complete fragment.

    Everything before the first <item> is feed-level metadata and is ignored. Fragments missing any of
    title, link, description or pubDate are skipped. Unparseable dates get `now` as timestamp.
    """
    if now is None:
        now = int(time.time())

    articles = []
    fragments = feed_body.split(ITEM_MARKER)[1:]

    for index, fragment in enumerate(fragments):
        try:
            title = extract_text(fragment, "title")
            link = extract_text(fragment, "link")
            description = extract_text(fragment, "description")
            pub_date = extract_text(fragment, "pubDate")
        except TagNotFoundError as e:
            logger.debug(f"Skipping item {index} from {source_name}: {e}")
            continue

        articles.append(NewsArticle(
            title=title,
            link=link,
            description=truncate_description(description),
            source=source_name,
            pub_date=pub_date,
            timestamp=convert_date_str_to_timestamp(pub_date, fallback=now),
        ))

    logger.debug(f"Parsed {len(articles)} of {len(fragments)} items from {source_name}")
    return articles
