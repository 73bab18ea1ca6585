"""Sort and filter operations over a set of book records.

Both operators return new lists and leave their input untouched, so the
explorer can always rebuild a view from the full search result.
"""
from typing import Iterable, List

from booksearch.models import BookRecord, EbookAccess


def rating_value(record: BookRecord) -> float:
    """Numeric rating for ordering; the "Unknown" sentinel counts as 0."""
    return float(record.rating_sortable) if record.has_rating else 0.0


def sort_by_rating_descending(records: Iterable[BookRecord]) -> List[BookRecord]:
    """Highest rated first. Equal ratings keep their input order."""
    return sorted(records, key=rating_value, reverse=True)


def filter_ebook_available(records: Iterable[BookRecord], enabled: bool) -> List[BookRecord]:
    """Keep only e-books when enabled; otherwise return every record."""
    if not enabled:
        return list(records)
    return [r for r in records if r.ebook_access is EbookAccess.AVAILABLE]
