"""Markdown output, with links to items, users and discussions."""
from hncli.formatters.items import MARKDOWN
from hncli.formatters.plain import PlainFormatter


class MarkdownFormatter(PlainFormatter):
    style = MARKDOWN
