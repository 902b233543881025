"""Concurrent batch fetch of items."""
import logging
import time
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Callable, List, Optional, Sequence, Tuple

from hncli.models import Item

logger = logging.getLogger(__name__)


def _timed_fetch(fetch_item: Callable[[int], Item], item_id: int) -> Tuple[Item, float]:
    """Run one fetch and return (item, elapsed_ms)."""
    t0 = time.monotonic()
    item = fetch_item(item_id)
    return item, (time.monotonic() - t0) * 1000


def fetch_items(
    ids: Sequence[int],
    fetch_item: Callable[[int], Item],
    max_workers: Optional[int] = None,
) -> List[Item]:
    """Fetch every id in parallel and return the items in the order of ``ids``.

    One worker per id unless ``max_workers`` says otherwise. All fetches run to
    completion even when one has already failed; after that, the failure at
    the lowest position in ``ids`` is re-raised and no items are returned.
    """
    ids = list(ids)
    if not ids:
        return []

    results: List[Optional[Item]] = [None] * len(ids)
    failures: List[Tuple[int, Exception]] = []

    t0 = time.monotonic()
    with ThreadPoolExecutor(max_workers=max_workers or len(ids)) as pool:
        futures = {pool.submit(_timed_fetch, fetch_item, item_id): pos for pos, item_id in enumerate(ids)}
        for future in as_completed(futures):
            pos = futures[future]
            try:
                item, elapsed_ms = future.result()
            except Exception as e:
                logger.error(f"[Engine] item {ids[pos]} failed: {e}")
                failures.append((pos, e))
                continue
            logger.debug(f"[Engine] item {ids[pos]} fetched in {elapsed_ms:.0f}ms")
            results[pos] = item

    if failures:
        pos, error = min(failures, key=lambda f: f[0])
        logger.info(f"[Engine] {len(failures)}/{len(ids)} fetches failed, reporting item {ids[pos]}")
        raise error

    logger.info(f"[Engine] fetched {len(ids)} items in {(time.monotonic() - t0) * 1000:.0f}ms")
    return results
