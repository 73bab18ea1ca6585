"""Terminal renderers for the explorer's list and detail views."""
import json
import sys
from typing import Sequence, TextIO, Optional
from tabulate import tabulate

from booksearch.models import BookRecord
from booksearch.state import Renderer

EMPTY_STATE = "No books available."


def _truncate(text: str, width: int) -> str:
    return text[:width] + "..." if len(text) > width else text


class StreamRenderer(Renderer):
    """Base for renderers that print to a text stream."""

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream or sys.stdout

    def write(self, text: str) -> None:
        print(text, file=self.stream)


class TableRenderer(StreamRenderer):
    """Grid tables, one row per book."""

    def render_list(self, records: Sequence[BookRecord]) -> None:
        if not records:
            self.write(EMPTY_STATE)
            return

        headers = ["#", "Title", "Author", "Rating", "E-book"]
        rows = [
            [
                i,
                _truncate(book.title, 50),
                _truncate(book.author_name, 30),
                book.rating_sortable,
                book.ebook_access.value
            ]
            for i, book in enumerate(records, 1)
        ]
        self.write("\n" + tabulate(rows, headers=headers, tablefmt="grid"))

    def render_detail(self, record: BookRecord) -> None:
        rows = [
            ["Title", record.title],
            ["Author", record.author_name],
            ["Published", record.first_publish_year],
            ["Rating", record.rating_sortable],
            ["E-book", record.ebook_access.label],
            ["ISBN", record.isbn],
            ["Cover", record.cover_url or "-"],
        ]
        self.write("\n" + tabulate(rows, tablefmt="grid"))


class CompactRenderer(StreamRenderer):
    """One line per book."""

    def render_list(self, records: Sequence[BookRecord]) -> None:
        if not records:
            self.write(EMPTY_STATE)
            return
        for i, book in enumerate(records, 1):
            self.write(f"{i}. {book.title} - {book.author_name} ({book.rating_sortable})")

    def render_detail(self, record: BookRecord) -> None:
        self.write(f"{record.title} - {record.author_name}")
        self.write(f"Published: {record.first_publish_year}")
        self.write(f"Rating: {record.rating_sortable}")
        self.write(record.ebook_access.label)
        self.write(f"ISBN: {record.isbn}")
        if record.cover_url:
            self.write(f"Cover: {record.cover_url}")


class JsonRenderer(StreamRenderer):
    """
    JSON documents, for piping into other tools.

    An empty result is written as ``[]``; consumers check the length.
    """

    def render_list(self, records: Sequence[BookRecord]) -> None:
        self.write(json.dumps([book.to_dict() for book in records], indent=2))

    def render_detail(self, record: BookRecord) -> None:
        self.write(json.dumps(record.to_dict(), indent=2))


RENDERERS = {
    "table": TableRenderer,
    "compact": CompactRenderer,
    "json": JsonRenderer,
}


def make_renderer(format_type: str, stream: Optional[TextIO] = None) -> StreamRenderer:
    """Build the renderer for an output format name."""
    return RENDERERS[format_type](stream)
