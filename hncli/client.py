"""Hacker News client — the free Firebase API for items and rankings, Algolia for search.

Every request is a single attempt. Failures surface as :class:`FetchError`
(transport, non-2xx) or :class:`DecodeError` (unexpected payload).
"""
import logging
import os
import threading
from typing import Any, Iterable, List, Optional, Union

import requests

from hncli.engine import fetch_items
from hncli.errors import DecodeError, FetchError, InvalidArgumentError
from hncli.models import FRONT_PAGE_RANKINGS, MAX_LIMIT, SEARCH_RANKINGS, Item

logger = logging.getLogger(__name__)

HN_BASE = "https://hacker-news.firebaseio.com/v0"
SEARCH_POPULARITY_URL = "https://hn.algolia.com/api/v1/search"
SEARCH_DATE_URL = "https://hn.algolia.com/api/v1/search_by_date"


def _build_headers():
    from hncli import __version__
    return {"User-Agent": f"hncli/{__version__}"}


# Shared session for connection pooling (TCP keep-alive, connection reuse)
_session: Optional[requests.Session] = None
_session_lock = threading.Lock()


def _get_session() -> requests.Session:
    """Return a shared requests.Session for connection pooling."""
    global _session
    if _session is None:
        with _session_lock:
            if _session is None:
                s = requests.Session()
                # Batches fan out one request per item
                adapter = requests.adapters.HTTPAdapter(
                    pool_connections=20,
                    pool_maxsize=100,
                    max_retries=0,
                )
                s.mount("https://", adapter)
                s.mount("http://", adapter)
                s.headers.update(_build_headers())
                _session = s
    return _session


def validate_limit(limit: int) -> int:
    if isinstance(limit, bool) or not isinstance(limit, int) or limit < 0 or limit > MAX_LIMIT:
        raise InvalidArgumentError(f"Invalid limit: {limit} (must be between 0 and {MAX_LIMIT})")
    return limit


def _validate_ranking(ranking: str, allowed: Iterable[str], kind: str) -> str:
    if ranking not in allowed:
        raise InvalidArgumentError(f"invalid {kind} ranking: {ranking}")
    return ranking


class HackerNewsClient:
    """Thin wrapper over the ranking, search and item endpoints.

    Parameters
    ----------
    base_url : str
        Firebase API root. Default ``$HNCLI_BASE_URL`` or the public API.
    search_url, search_by_date_url : str
        Algolia endpoints for popularity and date ranked search.
    timeout : float
        Per-request timeout in seconds. Default 15.
    session : requests.Session
        Injected session; the shared pooled session by default.
    """

    name = "hackernews"

    def __init__(
        self,
        base_url: Optional[str] = None,
        search_url: Optional[str] = None,
        search_by_date_url: Optional[str] = None,
        timeout: float = 15,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = (base_url or os.getenv("HNCLI_BASE_URL") or HN_BASE).rstrip("/")
        self.search_urls = {
            "popularity": search_url or os.getenv("HNCLI_SEARCH_URL") or SEARCH_POPULARITY_URL,
            "date": search_by_date_url or os.getenv("HNCLI_SEARCH_BY_DATE_URL") or SEARCH_DATE_URL,
        }
        self.timeout = timeout
        self.session = session

    def _get_json(self, url: str, params: Optional[dict] = None) -> Any:
        session = self.session or _get_session()
        try:
            resp = session.get(url, params=params, timeout=self.timeout)
        except requests.RequestException as e:
            raise FetchError(f"Request to {url} failed: {e}") from e
        if resp.status_code > 299:
            raise FetchError(f"Response failed with code {resp.status_code}", status_code=resp.status_code)
        try:
            return resp.json()
        except ValueError as e:
            raise DecodeError(f"Malformed response from {url}: {e}") from e

    def fetch_ranked_ids(self, ranking: str = "top", limit: int = 30) -> List[int]:
        """Return up to ``limit`` front-page ids for ``ranking`` (top, best or new)."""
        validate_limit(limit)
        _validate_ranking(ranking, FRONT_PAGE_RANKINGS, "front page")
        ids = self._get_json(f"{self.base_url}/{ranking}stories.json")
        if not isinstance(ids, list) or not all(isinstance(i, int) for i in ids):
            raise DecodeError(f"{ranking}stories returned an unexpected payload: {type(ids).__name__}")
        logger.info(f"[Client] {ranking}stories returned {len(ids)} ids")
        return ids[:limit]

    def search_ids(
        self,
        query: str,
        tags: Optional[Union[str, Iterable[str]]] = None,
        ranking: str = "popularity",
        limit: int = 30,
    ) -> List[int]:
        """Return up to ``limit`` ids of search hits for ``query``, ranked by popularity or date."""
        validate_limit(limit)
        _validate_ranking(ranking, SEARCH_RANKINGS, "search")
        if tags is not None and not isinstance(tags, str):
            tags = ",".join(tags)
        params = {"query": query, "hitsPerPage": limit}
        if tags:
            params["tags"] = tags
        data = self._get_json(self.search_urls[ranking], params=params)
        hits = data.get("hits") if isinstance(data, dict) else None
        if not isinstance(hits, list):
            raise DecodeError("search response has no 'hits' list")
        ids = []
        for hit in hits[:limit]:
            try:
                ids.append(int(hit["objectID"]))
            except (KeyError, TypeError, ValueError) as e:
                raise DecodeError(f"search hit without a numeric objectID: {hit!r}") from e
        logger.info(f"[Client] search {query!r} returned {len(hits)} hits")
        return ids

    def fetch_item(self, item_id: int) -> Item:
        data = self._get_json(f"{self.base_url}/item/{int(item_id)}.json")
        if data is None:
            raise DecodeError(f"item {item_id} not found")
        return Item.from_dict(data)

    def fetch_items(self, ids: Iterable[int]) -> List[Item]:
        """Fetch all ``ids`` concurrently, in order; the first failure aborts the batch."""
        return fetch_items(list(ids), self.fetch_item)
