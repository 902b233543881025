"""Shared test fixtures and configuration."""
from datetime import datetime, timedelta, timezone

import pytest

from hncli.models import Item

NOW = datetime.fromtimestamp(10_000_000, tz=timezone.utc)


def _ago(delta: timedelta) -> int:
    return int((NOW - delta).timestamp())


@pytest.fixture
def now():
    """Fixed 'current time' for rendering."""
    return NOW


@pytest.fixture
def clock():
    """Zero-arg clock returning ``now``."""
    return lambda: NOW


@pytest.fixture
def ago():
    """Unix timestamp ``delta`` before ``now``."""
    return _ago


@pytest.fixture
def job():
    return Item(id=1, type="job", score=1, by="jobuser", time=_ago(timedelta(hours=6)), title="Job title")


@pytest.fixture
def story():
    return Item(id=2, type="story", score=10, by="storyuser", time=_ago(timedelta(days=12)),
                descendants=20, title="Story title", url="www.story.url")


@pytest.fixture
def poll():
    return Item(id=3, type="poll", score=100, by="polluser", time=_ago(timedelta(minutes=40)),
                descendants=200, title="Poll title")


@pytest.fixture
def pollopt():
    return Item(id=4, type="pollopt", score=1000, by="polloptuser", time=_ago(timedelta(days=90)),
                text="Poll option text")


@pytest.fixture
def comment():
    return Item(id=5, type="comment", by="commentuser", time=_ago(timedelta(days=1)),
                text="Comment text", kids=(6, 7, 8, 9))
