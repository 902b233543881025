"""Tests for hncli.engine — concurrent batch fetch."""
import random
import threading
import time
from unittest.mock import MagicMock

import pytest

from hncli.engine import fetch_items
from hncli.errors import FetchError
from hncli.models import Item


def _item(item_id):
    return Item(id=item_id, type="story")


class TestFetchItems:
    def test_empty_makes_no_calls(self):
        fetch = MagicMock()
        assert fetch_items([], fetch) == []
        fetch.assert_not_called()

    def test_preserves_input_order(self):
        ids = list(range(1, 21))
        delays = {i: random.uniform(0, 0.05) for i in ids}

        def fetch(item_id):
            time.sleep(delays[item_id])
            return _item(item_id)

        items = fetch_items(ids, fetch)
        assert [i.id for i in items] == ids

    def test_reverse_completion_order(self):
        ids = [123, 456, 789]
        delays = {123: 0.15, 456: 0.08, 789: 0.0}
        finished = []

        def fetch(item_id):
            time.sleep(delays[item_id])
            finished.append(item_id)
            return _item(item_id)

        items = fetch_items(ids, fetch)
        assert finished == [789, 456, 123]
        assert [i.id for i in items] == [123, 456, 789]

    def test_duplicate_ids(self):
        items = fetch_items([5, 5, 6], _item)
        assert [i.id for i in items] == [5, 5, 6]

    def test_one_worker_per_id(self):
        ids = list(range(10))
        barrier = threading.Barrier(len(ids), timeout=5)

        def fetch(item_id):
            # Only passes if all fetches are in flight at once
            barrier.wait()
            return _item(item_id)

        assert len(fetch_items(ids, fetch)) == 10

    def test_max_workers_cap(self):
        active = []
        peak = []
        lock = threading.Lock()

        def fetch(item_id):
            with lock:
                active.append(item_id)
                peak.append(len(active))
            time.sleep(0.01)
            with lock:
                active.remove(item_id)
            return _item(item_id)

        fetch_items(list(range(8)), fetch, max_workers=2)
        assert max(peak) <= 2


class TestFailures:
    def test_error_raised_not_partial_list(self):
        def fetch(item_id):
            if item_id == 2:
                raise FetchError("Response failed with code 500", status_code=500)
            return _item(item_id)

        with pytest.raises(FetchError, match="500"):
            fetch_items([1, 2, 3], fetch)

    def test_waits_for_in_flight_fetches(self):
        completed = []

        def fetch(item_id):
            if item_id == 1:
                raise FetchError("boom")
            time.sleep(0.1)
            completed.append(item_id)
            return _item(item_id)

        with pytest.raises(FetchError):
            fetch_items([1, 2, 3, 4], fetch)
        assert sorted(completed) == [2, 3, 4]

    def test_lowest_position_error_wins(self):
        def fetch(item_id):
            # Later positions fail first
            time.sleep(0.1 if item_id == 10 else 0)
            raise FetchError(f"failed {item_id}")

        with pytest.raises(FetchError, match="failed 10"):
            fetch_items([10, 20, 30], fetch)

    def test_any_exception_type_propagates(self):
        def fetch(item_id):
            raise KeyError("bad")

        with pytest.raises(KeyError):
            fetch_items([1], fetch)
