"""Explorer state: the last search result and what is currently shown."""
from abc import ABC, abstractmethod
import logging
from typing import Optional, Sequence

from booksearch.models import (
    BookRecord,
    DetailView,
    ListView,
    SearchType,
    ViewState,
    WorkingSet,
)
from booksearch.operators import filter_ebook_available, sort_by_rating_descending
from booksearch.search import EmptyQueryError, SearchOrchestrator

logger = logging.getLogger(__name__)


class Renderer(ABC):
    """Presentation layer that draws what the explorer asks for."""

    @abstractmethod
    def render_list(self, records: Sequence[BookRecord]) -> None:
        """Replace the visible list with these records (possibly none)."""

    @abstractmethod
    def render_detail(self, record: BookRecord) -> None:
        """Show a single record, hiding the list."""


class BookExplorer:
    """
    Owns the working set and view state, and handles the four UI events:
    submit-search, click-sort, toggle-filter and click-record.

    Every list shown is derived from the working set, first sorted (if the
    user asked for it since the last search) and then filtered (if the
    e-book checkbox is on). The working set itself only changes on search.
    """

    def __init__(self, orchestrator: SearchOrchestrator, renderer: Renderer):
        self.orchestrator = orchestrator
        self.renderer = renderer
        self.working_set: WorkingSet = ()
        self.view: ViewState = ListView()
        self.sorted_by_rating = False
        self.ebook_only = False

    @property
    def displayed(self) -> WorkingSet:
        """Records in the current list view, or the last one shown."""
        if isinstance(self.view, ListView):
            return self.view.records
        return self._derive()

    def _derive(self) -> WorkingSet:
        records = list(self.working_set)
        if self.sorted_by_rating:
            records = sort_by_rating_descending(records)
        return tuple(filter_ebook_available(records, self.ebook_only))

    def render_list(self, records: Sequence[BookRecord]) -> None:
        self.view = ListView(tuple(records))
        self.renderer.render_list(self.view.records)

    def render_detail(self, record: BookRecord) -> None:
        self.view = DetailView(record)
        self.renderer.render_detail(record)

    async def handle_search(self, query: str, search_type: SearchType) -> bool:
        """
        Run a search and show its results.

        Returns:
            False if the query was rejected, leaving state unchanged
        """
        try:
            books = await self.orchestrator.search(query, search_type)
        except EmptyQueryError as e:
            logger.error(str(e))
            return False

        # Last search to resolve wins; overlapping searches are not guarded
        self.working_set = tuple(books)
        self.sorted_by_rating = False
        self.render_list(self._derive())
        return True

    def handle_sort(self) -> None:
        self.sorted_by_rating = True
        self.render_list(self._derive())

    def handle_filter(self, enabled: bool) -> None:
        self.ebook_only = enabled
        records = self._derive()
        logger.debug(f"Filtered books: {len(records)} of {len(self.working_set)}")
        self.render_list(records)

    def handle_select(self, record: BookRecord) -> None:
        self.render_detail(record)

    def handle_select_index(self, position: int) -> BookRecord:
        """
        Select a record by its 1-based position in the displayed list.

        Raises:
            IndexError: if no record is shown at that position
        """
        records = self.displayed
        if not 1 <= position <= len(records):
            raise IndexError(f"No book at position {position}")
        record = records[position - 1]
        self.handle_select(record)
        return record

    @property
    def selected(self) -> Optional[BookRecord]:
        if isinstance(self.view, DetailView):
            return self.view.record
        return None
