"""Shared fixtures and fakes for explorer tests."""
from typing import List, Optional, Sequence

import pytest

from booksearch.models import BookRecord, EbookAccess
from booksearch.state import Renderer


def make_item(title, rating=None, is_ebook=False, authors=None):
    """Raw Google Books volume with just the fields a test cares about."""
    volume_info = {"title": title}
    if rating is not None:
        volume_info["averageRating"] = rating
    if authors is not None:
        volume_info["authors"] = authors
    return {"volumeInfo": volume_info, "accessInfo": {"isEbook": is_ebook}}


class FakeClient:
    """Sync client returning a canned response and recording queries."""

    def __init__(self, response: Optional[dict] = None):
        self.response = response
        self.queries: List[tuple] = []

        self.closed = False

    def search(self, query, max_results=10):
        self.queries.append((query, max_results))
        return self.response

    def close(self):
        self.closed = True

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()


class FakeAsyncClient(FakeClient):
    async def search(self, query, max_results=10):
        self.queries.append((query, max_results))
        return self.response

    async def close(self):
        self.closed = True

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()


class RecordingRenderer(Renderer):
    """Keeps every render instruction instead of drawing anything."""

    def __init__(self):
        self.calls: List[tuple] = []

    def render_list(self, records: Sequence[BookRecord]) -> None:
        self.calls.append(("list", tuple(records)))

    def render_detail(self, record: BookRecord) -> None:
        self.calls.append(("detail", record))


@pytest.fixture
def full_item():
    return {
        "id": "B1xbAAAAQBAJ",
        "volumeInfo": {
            "title": "Dune",
            "authors": ["Frank Herbert", "Brian Herbert"],
            "publishedDate": "1965-08-01",
            "industryIdentifiers": [
                {"type": "ISBN_13", "identifier": "9780441013593"},
                {"type": "ISBN_10", "identifier": "0441013597"}
            ],
            "imageLinks": {
                "smallThumbnail": "http://books.google.com/small.jpg",
                "thumbnail": "http://books.google.com/thumb.jpg"
            },
            "averageRating": 4.5
        },
        "accessInfo": {"isEbook": True}
    }


@pytest.fixture
def rated_books():
    """Books rated 4.5, Unknown and 3.0, in that order."""
    return [
        BookRecord(title="High", rating_sortable=4.5, ebook_access=EbookAccess.AVAILABLE),
        BookRecord(title="Unrated"),
        BookRecord(title="Low", rating_sortable=3.0, ebook_access=EbookAccess.AVAILABLE),
    ]


@pytest.fixture
def renderer():
    return RecordingRenderer()
