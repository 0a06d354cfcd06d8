class NewsError(Exception):
    """Base class for errors raised while collecting news."""


class FeedFetchError(NewsError):
    """Raised when a feed cannot be retrieved (network failure or non-success response)."""

    def __init__(self, source_name: str, message: str):
        self.source_name = source_name
        super().__init__(f"{source_name}: {message}")


class FeedParsingError(NewsError):
    """Raised when feed content cannot be parsed into expected fields."""


class TagNotFoundError(FeedParsingError):
    """Raised when a tag is missing from a text block or its markers are out of order."""

    def __init__(self, tag: str, message: str):
        self.tag = tag
        super().__init__(message)
