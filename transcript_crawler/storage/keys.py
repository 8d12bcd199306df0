"""Storage key derivation: one deterministic key per transcript URL."""

from __future__ import annotations

from urllib.parse import urlsplit, urlunsplit


def _without_query(url: str) -> str:
    parts = urlsplit(url)
    return urlunsplit((parts.scheme, parts.netloc, parts.path, "", ""))


def derive_key(url: str, starting_url: str) -> str:
    """Return the storage key for *url* relative to *starting_url*.

    The path left after removing the *starting_url* prefix, with surrounding
    slashes stripped, is followed by ``_<query>`` when the URL has a query
    string, then ``.json``::

        >>> derive_key("https://site.com/show/ep1?tab=full", "https://site.com/show")
        'ep1_tab=full.json'

    Both URLs are compared without their query and fragment, so a starting
    URL carrying its own query still strips to a relative path.
    """
    query = urlsplit(url).query

    ending = _without_query(url)
    prefix = _without_query(starting_url)
    if ending.startswith(prefix):
        ending = ending[len(prefix):]

    path_segment = ending.strip("/")
    query_segment = f"_{query}" if query else ""
    return f"{path_segment}{query_segment}.json"
