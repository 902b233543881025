"""Per-item rendering for every item type and output style.

Everything here is pure: the same item, style and ``now`` always produce the
same text. The document-level formatters in this package call
:func:`render_item` once per item.
"""
import json
from datetime import datetime
from typing import Any, Callable, Dict

from hncli.errors import MissingFieldError, RenderError, UnknownItemTypeError
from hncli.models import COMMENT, JOB, POLL, POLLOPT, STORY, Item, user_url
from hncli.utils import from_unix, relative_time

PLAIN = "plain"
MARKDOWN = "markdown"
CSV = "csv"
JSON = "json"
STYLES = (PLAIN, MARKDOWN, CSV, JSON)

TREE = "└───"
MAX_TEXT_CHARS = 70
CSV_COLUMNS = ("id", "type", "by", "time", "title_or_text", "url", "score", "comment_count")


def _require(item: Item, field: str) -> Any:
    value = getattr(item, field)
    if value is None:
        raise MissingFieldError(item.id, item.type, field)
    return value


def _plural(count: int, singular: str, plural: str) -> str:
    return f"{count} {singular if count == 1 else plural}"


def _truncate(text: str) -> str:
    # Slices characters, so it can still cut an HTML entity or tag in half.
    if len(text) > MAX_TEXT_CHARS:
        return f"{text[:MAX_TEXT_CHARS]}..."
    return text


def _age(item: Item, now: datetime) -> str:
    return relative_time(now, from_unix(_require(item, "time")))


def _render_job(job: Item, style: str, now: datetime) -> str:
    score = _require(job, "score")
    title = _require(job, "title")
    age = _age(job, now)
    pts = _plural(score, "pt", "pts")
    if style == PLAIN:
        return f"HIRING: {job.permalink}\n{TREE} {pts} {age}\n"
    return f"* **[HIRING: {title}]({job.permalink})**\n* {TREE} {pts} {age}\n"


def _render_discussion(item: Item, url: str, style: str, now: datetime) -> str:
    """Shared layout of stories and polls, which differ only in their link."""
    by = _require(item, "by")
    score = _require(item, "score")
    descendants = _require(item, "descendants")
    title = _require(item, "title")
    age = _age(item, now)
    pts = _plural(score, "pt", "pts")
    comments = _plural(descendants, "comment", "comments")
    if style == PLAIN:
        return f"{url}\n{TREE} {pts} by {by} {age} | {comments}\n"
    return (
        f"* **[{title}]({url})**\n"
        f"* {TREE} {pts} by [{by}]({user_url(by)}) {age} | [{comments}]({item.permalink})\n"
    )


def _render_story(story: Item, style: str, now: datetime) -> str:
    url = story.url if story.url else story.permalink
    return _render_discussion(story, url, style, now)


def _render_poll(poll: Item, style: str, now: datetime) -> str:
    return _render_discussion(poll, poll.permalink, style, now)


def _render_pollopt(pollopt: Item, style: str, now: datetime) -> str:
    by = _require(pollopt, "by")
    score = _require(pollopt, "score")
    text = _truncate(_require(pollopt, "text"))
    age = _age(pollopt, now)
    pts = _plural(score, "pt", "pts")
    if style == PLAIN:
        return f"{text}\n{TREE} {pts} by {by} {age}\n"
    return f"* **[{text}]({pollopt.permalink})**\n* {TREE} {pts} by [{by}]({user_url(by)}) {age}\n"


def _render_comment(comment: Item, style: str, now: datetime) -> str:
    by = _require(comment, "by")
    text = _truncate(_require(comment, "text"))
    age = _age(comment, now)
    replies = _plural(len(comment.kids or ()), "reply", "replies")
    if style == PLAIN:
        return f"{text}\n{TREE} by {by} {age} | {replies}\n"
    return (
        f"* *[{text}]({comment.permalink})*\n"
        f"* {TREE} by [{by}]({user_url(by)}) {age} | [{replies}]({comment.permalink})\n"
    )


_TEXT_RENDERERS: Dict[str, Callable[[Item, str, datetime], str]] = {
    JOB: _render_job,
    STORY: _render_story,
    POLL: _render_poll,
    POLLOPT: _render_pollopt,
    COMMENT: _render_comment,
}


def comment_count(item: Item) -> int:
    if item.type == COMMENT:
        return len(item.kids or ())
    if item.type in (STORY, POLL):
        return item.descendants or 0
    return 0


def csv_row(item: Item) -> str:
    """One CSV line. The text column is quoted but embedded quotes are not escaped."""
    if item.type not in _TEXT_RENDERERS:
        raise UnknownItemTypeError(item.type)
    title_or_text = item.title if item.title is not None else (item.text or "")
    return ",".join([
        str(item.id),
        item.type,
        item.by or "",
        str(item.time or 0),
        f'"{title_or_text}"',
        item.url or "",
        str(item.score or 0),
        str(comment_count(item)),
    ]) + "\n"


def render_item(item: Item, style: str, now: datetime) -> str:
    """Render a single item as a text fragment in the given style."""
    if item.type not in _TEXT_RENDERERS:
        raise UnknownItemTypeError(item.type)
    if style == CSV:
        return csv_row(item)
    if style == JSON:
        return json.dumps(item.to_dict(), ensure_ascii=False)
    if style not in (PLAIN, MARKDOWN):
        raise RenderError(f"invalid style: {style}")
    return _TEXT_RENDERERS[item.type](item, style, now)
