"""Parse and normalize Google Books API responses."""
from typing import Dict, Any, List, Optional, Union
import logging
import math

from booksearch.models import BookRecord, EbookAccess, UNKNOWN

logger = logging.getLogger(__name__)


def _section(data: Any, key: str) -> Dict[str, Any]:
    """Return a nested object, or an empty dict when absent or malformed."""
    if not isinstance(data, dict):
        return {}
    value = data.get(key)
    return value if isinstance(value, dict) else {}


def _text(value: Any, default: str = UNKNOWN) -> str:
    if isinstance(value, str) and value:
        return value
    return default


def _authors(volume_info: Dict[str, Any]) -> str:
    authors = volume_info.get("authors")
    if not isinstance(authors, list):
        return UNKNOWN
    names = [name for name in authors if isinstance(name, str) and name]
    return ", ".join(names) if names else UNKNOWN


def _first_identifier(volume_info: Dict[str, Any]) -> str:
    identifiers = volume_info.get("industryIdentifiers")
    if not isinstance(identifiers, list) or not identifiers:
        return UNKNOWN
    first = identifiers[0]
    if not isinstance(first, dict):
        return UNKNOWN
    return _text(first.get("identifier"))


def _publish_year(volume_info: Dict[str, Any]) -> str:
    # "1965-08-01", "1965-08" and "1965" all carry the year first
    published_date = volume_info.get("publishedDate")
    if not isinstance(published_date, str):
        return UNKNOWN
    return _text(published_date.split("-")[0].strip())


def _rating(volume_info: Dict[str, Any]) -> Union[float, str]:
    rating = volume_info.get("averageRating")
    if isinstance(rating, bool) or not isinstance(rating, (int, float)):
        return UNKNOWN
    if not rating or not math.isfinite(rating):
        return UNKNOWN
    return float(rating)


def normalize_item(item: Dict[str, Any]) -> BookRecord:
    """
    Normalize a single volume from the Google Books API.

    Any missing or malformed nested field resolves to its sentinel, so
    this never raises for loosely-shaped input.

    Args:
        item: Single item from Google Books API response

    Returns:
        BookRecord with all fields populated
    """
    volume_info = _section(item, "volumeInfo")
    access_info = _section(item, "accessInfo")
    image_links = _section(volume_info, "imageLinks")

    return BookRecord(
        title=_text(volume_info.get("title")),
        author_name=_authors(volume_info),
        isbn=_first_identifier(volume_info),
        cover_url=_text(image_links.get("thumbnail"), default=""),
        ebook_access=(
            EbookAccess.AVAILABLE if access_info.get("isEbook")
            else EbookAccess.UNAVAILABLE
        ),
        first_publish_year=_publish_year(volume_info),
        rating_sortable=_rating(volume_info),
    )


def parse_books_response(response_json: Optional[Dict[str, Any]]) -> List[BookRecord]:
    """
    Parse full Google Books API response.

    Args:
        response_json: Complete API response JSON, or None after a failed request

    Returns:
        List of BookRecord objects (empty if no items found)
    """
    if not isinstance(response_json, dict):
        return []

    items = response_json.get("items")
    if not isinstance(items, list) or not items:
        logger.info("No items found in response")
        return []

    return [normalize_item(item) for item in items]
