"""Tests for the hncli command line."""
from datetime import timedelta
from unittest.mock import MagicMock, patch

import pytest

from hncli.cli import build_parser, main, resolve_ranking, run
from hncli.engine import fetch_items
from hncli.errors import FetchError, InvalidArgumentError
from hncli.models import Item


class FakeClient:
    def __init__(self, items, ids=(123, 456, 789), fail_on=None):
        self.items = items
        self.ids = list(ids)
        self.fail_on = fail_on
        self.calls = []

    def fetch_ranked_ids(self, ranking, limit):
        self.calls.append(("ranked", ranking, limit))
        return self.ids[:limit]

    def search_ids(self, query, tags=None, ranking="popularity", limit=30):
        self.calls.append(("search", query, tags, ranking, limit))
        return self.ids[:limit]

    def fetch_item(self, item_id):
        if item_id == self.fail_on:
            raise FetchError("Response failed with code 500", status_code=500)
        return self.items[item_id]

    def fetch_items(self, ids):
        return fetch_items(ids, self.fetch_item)


@pytest.fixture
def make_client(ago):
    """Factory for a FakeClient serving a job, a story with a url and a poll."""
    items = {
        123: Item(id=123, type="job", score=5, title="Acme is hiring", time=ago(timedelta(hours=3))),
        456: Item(id=456, type="story", by="alice", score=1, descendants=1, title="A story",
                  url="https://example.com/a", time=ago(timedelta(minutes=45))),
        789: Item(id=789, type="poll", by="bob", score=42, descendants=7, title="A poll",
                  time=ago(timedelta(days=6))),
    }
    return lambda **kwargs: FakeClient(items, **kwargs)


def _args(*argv):
    return build_parser().parse_args(list(argv))


class TestResolveRanking:
    def test_defaults(self):
        assert resolve_ranking(None, None) == "top"
        assert resolve_ranking(None, "rust") == "popularity"

    def test_search_rankings(self):
        assert resolve_ranking("date", "rust") == "date"
        with pytest.raises(InvalidArgumentError, match="search ranking"):
            resolve_ranking("top", "rust")

    def test_front_page_rankings(self):
        assert resolve_ranking("best", None) == "best"
        with pytest.raises(InvalidArgumentError, match="front page ranking"):
            resolve_ranking("date", None)


class TestRun:
    def test_end_to_end_plain(self, make_client, clock):
        with patch("hncli.formatters.plain.utcnow", clock):
            out = run(_args(), client=make_client())
        assert out == (
            "HIRING: https://news.ycombinator.com/item?id=123\n"
            "└─── 5 pts 3 hours ago\n"
            "https://example.com/a\n"
            "└─── 1 pt by alice 45 min ago | 1 comment\n"
            "https://news.ycombinator.com/item?id=789\n"
            "└─── 42 pts by bob 6 days ago | 7 comments\n"
        )

    def test_limit_and_ranking_passed(self, make_client):
        client = make_client()
        run(_args("-l", "2", "-r", "new", "-s", "csv"), client=client)
        assert client.calls == [("ranked", "new", 2)]

    def test_search_mode(self, make_client):
        client = make_client()
        out = run(_args("-q", "rust", "-t", "story", "-r", "date", "-s", "json"), client=client)
        assert client.calls == [("search", "rust", "story", "date", 30)]
        assert '"id": 123' in out

    def test_invalid_style_before_network(self, make_client):
        client = make_client()
        with pytest.raises(InvalidArgumentError):
            run(_args("-s", "html"), client=client)
        assert client.calls == []

    def test_invalid_limit_before_network(self, make_client):
        client = make_client()
        with pytest.raises(InvalidArgumentError):
            run(_args("-l", "501"), client=client)
        assert client.calls == []

    def test_fetch_failure_propagates(self, make_client):
        with pytest.raises(FetchError):
            run(_args(), client=make_client(fail_on=456))


class TestMain:
    def test_success_prints_document(self, capsys, make_client):
        with patch("hncli.cli.HackerNewsClient", return_value=make_client()):
            main(["--no-config", "-s", "md"])
        out = capsys.readouterr().out
        assert out.startswith("* **[HIRING: Acme is hiring](https://news.ycombinator.com/item?id=123)**")

    def test_error_exits_nonzero(self, capsys, make_client):
        with patch("hncli.cli.HackerNewsClient", return_value=make_client(fail_on=789)):
            with pytest.raises(SystemExit) as exc_info:
                main(["--no-config"])
        assert exc_info.value.code == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "500" in captured.err

    def test_invalid_ranking_exits_nonzero(self, capsys):
        client_cls = MagicMock()
        with patch("hncli.cli.HackerNewsClient", client_cls):
            with pytest.raises(SystemExit) as exc_info:
                main(["--no-config", "-r", "worst"])
        assert exc_info.value.code == 1
        client_cls.assert_not_called()

    def test_output_file(self, tmp_path, capsys, make_client):
        target = tmp_path / "out.csv"
        with patch("hncli.cli.HackerNewsClient", return_value=make_client()):
            main(["--no-config", "-s", "csv", "-o", str(target)])
        assert target.read_text(encoding="utf-8").splitlines()[1].startswith('123,job,,')
        assert capsys.readouterr().out == ""

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0
        assert "hncli" in capsys.readouterr().out
