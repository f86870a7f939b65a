"""
URL resolution for Browser Sim.

Turns whatever the user typed into the address bar into an absolute URL.
This is a heuristic, not a URL validator: anything that looks like a bare
domain is opened over https, everything else goes to the search engine.
"""

import re
from urllib.parse import quote

from .errors import EmptyQueryError
from .search_engines import DEFAULT_SEARCH_ENDPOINT
from .types import Destination


URL_SCHEMES = ("http://", "https://")

# Characters left unescaped by JavaScript's encodeURIComponent
_QUERY_SAFE_CHARS = "-_.!~*'()"

_WHITESPACE = re.compile(r"\s")


def encode_query(text: str) -> str:
    """Percent-encode a search query component.

    Args:
        text: Raw query text

    Returns:
        Encoded text where spaces become %20
    """
    return quote(text, safe=_QUERY_SAFE_CHARS)


def looks_like_domain(text: str) -> bool:
    """Check if text should be treated as a bare domain.

    A dot must be present and whitespace absent, so "a.b c" is a search.
    """
    return "." in text and not _WHITESPACE.search(text)


def resolve(text: str, search_endpoint: str = DEFAULT_SEARCH_ENDPOINT) -> Destination:
    """Resolve raw address bar input into a navigable destination.

    Args:
        text: Raw user input
        search_endpoint: Search URL prefix the encoded query is appended to

    Returns:
        Destination with the stripped query and an absolute URL

    Raises:
        EmptyQueryError: If the input is blank
    """
    query = text.strip()
    if not query:
        raise EmptyQueryError("Cannot resolve an empty query")

    if query.startswith(URL_SCHEMES):
        url = query
    elif looks_like_domain(query):
        url = "https://" + query
    else:
        url = search_endpoint + encode_query(query)

    return Destination(raw_query=query, resolved_url=url)
