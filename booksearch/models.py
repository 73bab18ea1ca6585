"""Data models for books and explorer view state."""
from dataclasses import dataclass, asdict
from enum import Enum
from typing import Union, Tuple

UNKNOWN = "Unknown"


class EbookAccess(Enum):
    """Whether a volume can be read as an e-book."""
    AVAILABLE = "Available"
    UNAVAILABLE = "Unavailable"

    @property
    def label(self) -> str:
        return f"E-book Access: {self.value}"


class SearchType(Enum):
    """Field a search is keyed on, valued by its Google Books keyword."""
    TITLE = "intitle"
    ISBN = "isbn"
    AUTHOR = "inauthor"

    @classmethod
    def from_label(cls, label: str) -> "SearchType":
        """
        Resolve a user-facing label ("title", "isbn", "author") or keyword.

        Raises:
            ValueError: if the label names no search type
        """
        text = label.strip().lower()
        for search_type in cls:
            if text in (search_type.name.lower(), search_type.value):
                return search_type
        raise ValueError(f"Unknown search type: {label!r}")


@dataclass(frozen=True)
class BookRecord:
    """Normalized book representation. Every field always holds a value."""
    title: str = UNKNOWN
    author_name: str = UNKNOWN
    isbn: str = UNKNOWN
    cover_url: str = ""
    ebook_access: EbookAccess = EbookAccess.UNAVAILABLE
    first_publish_year: str = UNKNOWN
    rating_sortable: Union[float, str] = UNKNOWN

    @property
    def has_rating(self) -> bool:
        """True when the rating is numeric rather than the sentinel."""
        return isinstance(self.rating_sortable, (int, float)) and not isinstance(
            self.rating_sortable, bool
        )

    def to_dict(self) -> dict:
        data = asdict(self)
        data["ebook_access"] = self.ebook_access.value
        return data


WorkingSet = Tuple[BookRecord, ...]


@dataclass(frozen=True)
class ListView:
    """The result list is showing these records."""
    records: WorkingSet = ()


@dataclass(frozen=True)
class DetailView:
    """A single selected record is showing; the list is hidden."""
    record: BookRecord


ViewState = Union[ListView, DetailView]
