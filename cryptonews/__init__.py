"""
cryptonews

Aggregates cryptocurrency news from several RSS feeds into one in-memory list, newest first, and serves
it as a web page and a JSON API with keyword search.

Pipeline: fetch (per source) -> parse items -> merge + sort by timestamp -> replace cache
"""

__version__ = "0.1.0"
