"""CSV output — handy for spreadsheets and data pipelines."""
from typing import List

from hncli.formatters.items import CSV_COLUMNS, csv_row
from hncli.models import Item


class CSVFormatter:
    def format(self, items: List[Item]) -> str:
        lines = [",".join(CSV_COLUMNS) + "\n"]
        lines.extend(csv_row(item) for item in items)
        return "".join(lines)
