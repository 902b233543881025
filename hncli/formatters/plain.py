"""Plain text output: one two-line block per item, no links."""
from datetime import datetime
from typing import Callable, List, Optional

from hncli.formatters.items import PLAIN, render_item
from hncli.models import Item
from hncli.utils import utcnow


class PlainFormatter:
    style = PLAIN

    def __init__(self, clock: Optional[Callable[[], datetime]] = None):
        self.clock = clock or utcnow

    def format(self, items: List[Item]) -> str:
        now = self.clock()
        return "".join(render_item(item, self.style, now) for item in items)
