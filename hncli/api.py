"""Public Python API for hncli — use as a library.

Quick start:

    from hncli.api import top, search, digest

    items = top(limit=10)                         # front page, top 10
    items = top("best", limit=5)                  # best stories
    items = search("rust", tags="story")          # Algolia search
    print(digest(limit=10, style="markdown"))     # rendered document

Every call raises an ``hncli.errors.HNError`` subclass on failure; there is
no partial result.
"""
from __future__ import annotations

from typing import Iterable, List, Optional, Union

from hncli.client import HackerNewsClient
from hncli.formatters import parse_style, render
from hncli.models import Item

_client: Optional[HackerNewsClient] = None


def _get_client() -> HackerNewsClient:
    global _client
    if _client is None:
        _client = HackerNewsClient()
    return _client


def top(ranking: str = "top", limit: int = 30) -> List[Item]:
    """Front-page items (top, best or new), in ranking order."""
    client = _get_client()
    return client.fetch_items(client.fetch_ranked_ids(ranking, limit))


def search(
    query: str,
    tags: Optional[Union[str, Iterable[str]]] = None,
    ranking: str = "popularity",
    limit: int = 30,
) -> List[Item]:
    """Search hits (popularity or date ranked), in result order."""
    client = _get_client()
    return client.fetch_items(client.search_ids(query, tags=tags, ranking=ranking, limit=limit))


def digest(
    *,
    query: Optional[str] = None,
    tags: Optional[Union[str, Iterable[str]]] = None,
    ranking: Optional[str] = None,
    limit: int = 30,
    style: str = "plain",
) -> str:
    """Fetch front-page items (or search hits when ``query`` is given) and render them."""
    style = parse_style(style)
    if query:
        items = search(query, tags=tags, ranking=ranking or "popularity", limit=limit)
    else:
        items = top(ranking or "top", limit=limit)
    return render(items, style)
