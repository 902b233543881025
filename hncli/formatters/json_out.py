"""JSON output.

A one-to-one dump of the items as fetched: Unix timestamps, absent fields as
null, no url fallback and no truncation.
"""
import json
from typing import List, Optional, Union

from hncli.errors import UnknownItemTypeError
from hncli.models import ITEM_TYPES, Item


class JSONFormatter:
    def __init__(self, indent: Optional[Union[int, str]] = "\t"):
        self.indent = indent

    def format(self, items: List[Item]) -> str:
        for item in items:
            if item.type not in ITEM_TYPES:
                raise UnknownItemTypeError(item.type)
        return json.dumps([item.to_dict() for item in items], indent=self.indent, ensure_ascii=False) + "\n"
