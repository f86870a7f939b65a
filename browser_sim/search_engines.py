"""
Search engine configuration for Browser Sim.

Provides the query endpoints that non-URL input is sent to.
"""

from enum import Enum


class SearchEngine(str, Enum):
    """Supported search engines."""
    GOOGLE = "google"
    DUCKDUCKGO = "duckduckgo"
    BING = "bing"


# Query endpoints; the percent-encoded query is appended verbatim
SEARCH_ENDPOINTS = {
    SearchEngine.GOOGLE: "https://www.google.com/search?q=",
    SearchEngine.DUCKDUCKGO: "https://duckduckgo.com/?q=",
    SearchEngine.BING: "https://www.bing.com/search?q=",
}

# Search engine display names
SEARCH_ENGINE_DISPLAY_NAMES = {
    SearchEngine.GOOGLE: "Google",
    SearchEngine.DUCKDUCKGO: "DuckDuckGo",
    SearchEngine.BING: "Bing",
}

DEFAULT_SEARCH_ENGINE = SearchEngine.GOOGLE
DEFAULT_SEARCH_ENDPOINT = SEARCH_ENDPOINTS[DEFAULT_SEARCH_ENGINE]


def parse_search_engine(value: str) -> SearchEngine:
    """Parse a search engine name, falling back to the default.

    Args:
        value: Engine name such as "google" or "DuckDuckGo"

    Returns:
        The matching SearchEngine, or DEFAULT_SEARCH_ENGINE if unknown
    """
    try:
        return SearchEngine(value.strip().lower())
    except (ValueError, AttributeError):
        return DEFAULT_SEARCH_ENGINE


def get_search_endpoint(engine: SearchEngine) -> str:
    """Get the query endpoint for a search engine."""
    return SEARCH_ENDPOINTS.get(engine, DEFAULT_SEARCH_ENDPOINT)
