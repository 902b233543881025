"""Exception hierarchy for hncli."""
from typing import Optional


class HNError(Exception):
    """Base class for every error hncli raises on purpose."""


class InvalidArgumentError(HNError, ValueError):
    """Bad limit, ranking or style. Raised before any network activity."""


class FetchError(HNError):
    """Transport failure or non-2xx response from an upstream endpoint."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class DecodeError(FetchError):
    """Response body could not be decoded into the expected shape."""


class RenderError(HNError):
    pass


class UnknownItemTypeError(RenderError):
    def __init__(self, item_type):
        super().__init__(f"invalid item type {item_type!r}")
        self.item_type = item_type


class MissingFieldError(RenderError):
    def __init__(self, item_id: int, item_type: str, field: str):
        super().__init__(f"{item_type} item {item_id} has no '{field}' field")
        self.item_id = item_id
        self.field = field


class FutureTimestampError(RenderError, ValueError):
    """Relative time was requested for an instant after 'now'."""
