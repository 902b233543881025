"""Output formatters."""
from datetime import datetime
from typing import Callable, List, Optional

from hncli.errors import InvalidArgumentError
from hncli.models import Item

from .csv_out import CSVFormatter
from .items import CSV, JSON, MARKDOWN, PLAIN, STYLES, render_item
from .json_out import JSONFormatter
from .markdown import MarkdownFormatter
from .plain import PlainFormatter

__all__ = [
    "CSVFormatter", "JSONFormatter", "MarkdownFormatter", "PlainFormatter",
    "STYLES", "get_formatter", "parse_style", "render", "render_item",
]

_ALIASES = {"md": MARKDOWN}


def parse_style(value: str) -> str:
    """Map a user-supplied style name (plain, markdown/md, csv, json) to its canonical form."""
    style = (value or PLAIN).strip().lower()
    style = _ALIASES.get(style, style)
    if style not in STYLES:
        raise InvalidArgumentError(f"invalid style: {value}")
    return style


def get_formatter(style: str, clock: Optional[Callable[[], datetime]] = None):
    style = parse_style(style)
    if style == PLAIN:
        return PlainFormatter(clock=clock)
    if style == MARKDOWN:
        return MarkdownFormatter(clock=clock)
    if style == CSV:
        return CSVFormatter()
    return JSONFormatter()


def render(items: List[Item], style: str = PLAIN, clock: Optional[Callable[[], datetime]] = None) -> str:
    """Render the whole batch as one document."""
    return get_formatter(style, clock=clock).format(items)
