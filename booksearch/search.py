"""Turn a user search into normalized book records."""
import asyncio
import inspect
import logging
from typing import List, Union

from booksearch.async_client import AsyncGoogleBooksClient
from booksearch.client import GoogleBooksClient
from booksearch.config import PAGE_SIZE
from booksearch.models import BookRecord, SearchType
from booksearch.parse import parse_books_response

logger = logging.getLogger(__name__)


class EmptyQueryError(ValueError):
    """Raised when a search is submitted without any query text."""


def validate_query(query: str) -> str:
    """
    Trim a query and reject it when nothing is left.

    Raises:
        EmptyQueryError: if the query is empty or only whitespace
    """
    text = (query or "").strip()
    if not text:
        raise EmptyQueryError("Search query cannot be empty.")
    return text


def build_query(query: str, search_type: SearchType) -> str:
    """Google Books query string, e.g. ``intitle:Dune``."""
    return f"{search_type.value}:{query}"


class SearchOrchestrator:
    """Runs one request per search and normalizes what comes back."""

    def __init__(
        self,
        client: Union[GoogleBooksClient, AsyncGoogleBooksClient],
        max_results: int = PAGE_SIZE
    ):
        """
        Args:
            client: Sync or async Google Books client
            max_results: Results per search, capped at one page
        """
        self.client = client
        self.max_results = min(max_results, PAGE_SIZE)

    async def search(self, query: str, search_type: SearchType) -> List[BookRecord]:
        """
        Search for books.

        A failed request and a search with no matches both give an empty list.

        Raises:
            EmptyQueryError: before any request, if the query is blank
        """
        text = validate_query(query)
        q = build_query(text, search_type)

        if inspect.iscoroutinefunction(self.client.search):
            response = await self.client.search(q, self.max_results)
        else:
            response = await asyncio.to_thread(self.client.search, q, self.max_results)

        if response is None:
            logger.warning(f"Search failed for {q}; showing no results")
            return []

        books = parse_books_response(response)
        logger.info(f"Found {len(books)} books for {q}")
        return books
