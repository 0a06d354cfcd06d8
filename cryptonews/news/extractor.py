"""
Naive tag extraction used by the item parser.

This is a substring scan, not an XML parser: it finds the first opening and the first closing marker of
a tag anywhere in the block and returns what is between them. Nested or repeated tags, attributes on
the opening tag, CDATA sections and entities are not handled.
"""
from cryptonews.news.errors import TagNotFoundError


def extract_text(text: str, tag: str) -> str:
    """Return the content between the first `<tag>` and the first `</tag>` in `text`.

    Raises TagNotFoundError if either marker is missing, or if the closing marker does not come after
    the opening marker's content start.
    """
    start_tag = f"<{tag}>"
    end_tag = f"</{tag}>"

    start = text.find(start_tag)
    end = text.find(end_tag)
    if start == -1 or end == -1:
        raise TagNotFoundError(tag, f"Tag not found: {tag}")

    start_pos = start + len(start_tag)
    if start_pos >= end:
        raise TagNotFoundError(tag, f"Invalid tag positions for {tag}")

    return text[start_pos:end]
