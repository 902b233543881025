"""Data models for hncli."""
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from hncli.errors import DecodeError

ITEM_BASE_URL = "https://news.ycombinator.com/item?id="
USER_BASE_URL = "https://news.ycombinator.com/user?id="

# Item types as spelled by the API
JOB = "job"
STORY = "story"
COMMENT = "comment"
POLL = "poll"
POLLOPT = "pollopt"
ITEM_TYPES = (JOB, STORY, COMMENT, POLL, POLLOPT)

FRONT_PAGE_RANKINGS = ("top", "best", "new")
SEARCH_RANKINGS = ("popularity", "date")

MAX_LIMIT = 500


def user_url(username: str) -> str:
    return f"{USER_BASE_URL}{username}"


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


# Expected JSON type of every optional scalar field
_SCALAR_FIELDS = {
    "deleted": bool,
    "dead": bool,
    "by": str,
    "text": str,
    "url": str,
    "title": str,
    "time": int,
    "parent": int,
    "poll": int,
    "score": int,
    "descendants": int,
}


def _scalar(value: Any, key: str) -> Any:
    if value is None:
        return None
    expected = _SCALAR_FIELDS[key]
    ok = _is_int(value) if expected is int else isinstance(value, expected)
    if not ok:
        raise DecodeError(f"field '{key}' is not {expected.__name__}: {value!r}")
    return value


def _int_tuple(value: Any, key: str) -> Optional[Tuple[int, ...]]:
    if value is None:
        return None
    if not isinstance(value, list) or not all(_is_int(v) for v in value):
        raise DecodeError(f"field '{key}' is not a list of ids: {value!r}")
    return tuple(value)


@dataclass(frozen=True)
class Item:
    """One Hacker News item (job, story, comment, poll or pollopt).

    Only ``id`` and ``type`` are always present. Everything else is ``None``
    when the API left the field out, which keeps "absent" distinct from
    "zero" or "empty" for the CSV and JSON outputs.
    """

    id: int
    type: str
    deleted: Optional[bool] = None
    by: Optional[str] = None
    time: Optional[int] = None  # Unix seconds
    text: Optional[str] = None  # HTML
    dead: Optional[bool] = None
    parent: Optional[int] = None
    poll: Optional[int] = None
    kids: Optional[Tuple[int, ...]] = None  # ranked display order
    url: Optional[str] = None
    score: Optional[int] = None
    title: Optional[str] = None  # HTML
    parts: Optional[Tuple[int, ...]] = None
    descendants: Optional[int] = None

    # Field order of the raw dump; matches the API documentation
    FIELD_ORDER = (
        "id", "deleted", "type", "by", "time", "text", "dead", "parent",
        "poll", "kids", "url", "score", "title", "parts", "descendants",
    )

    @property
    def permalink(self) -> str:
        return f"{ITEM_BASE_URL}{self.id}"

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Item":
        """Build an Item from a decoded API payload.

        Every known field is type-checked; a mismatch raises DecodeError.
        Unknown keys are ignored.
        """
        if not isinstance(data, dict):
            raise DecodeError(f"item payload is not an object: {type(data).__name__}")
        item_id = data.get("id")
        item_type = data.get("type")
        if not _is_int(item_id):
            raise DecodeError(f"item payload has no integer id: {item_id!r}")
        if not isinstance(item_type, str):
            raise DecodeError(f"item {item_id} has no type")
        try:
            kwargs = {key: _scalar(data.get(key), key) for key in _SCALAR_FIELDS}
            kwargs["kids"] = _int_tuple(data.get("kids"), "kids")
            kwargs["parts"] = _int_tuple(data.get("parts"), "parts")
        except DecodeError as e:
            raise DecodeError(f"item {item_id}: {e}") from None
        return cls(id=item_id, type=item_type, **kwargs)

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {}
        for key in self.FIELD_ORDER:
            value = getattr(self, key)
            if isinstance(value, tuple):
                value = list(value)
            out[key] = value
        return out
