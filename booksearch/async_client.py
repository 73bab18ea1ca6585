"""Async HTTP client for Google Books API."""
import httpx
from typing import Optional, Dict, Any
import logging

logger = logging.getLogger(__name__)


class AsyncGoogleBooksClient:
    """Async client issuing one request per search, without retries."""

    BASE_URL = "https://www.googleapis.com/books/v1/volumes"

    def __init__(
        self,
        api_key: Optional[str] = None,
        timeout: int = 10,
        base_url: Optional[str] = None,
        client: Optional[httpx.AsyncClient] = None
    ):
        """
        Initialize async client.

        Args:
            api_key: Optional API key
            timeout: Request timeout
            base_url: Override for the volumes endpoint
            client: Preconfigured httpx client (tests pass a mock transport)
        """
        self.api_key = api_key
        self.timeout = timeout
        self.base_url = base_url or self.BASE_URL

        # Create async HTTP client
        self.client = client or httpx.AsyncClient(timeout=timeout)

    async def search(self, query: str, max_results: int = 10) -> Optional[Dict[str, Any]]:
        """
        Search for books asynchronously.

        Args:
            query: Search query, e.g. "inauthor:herbert"
            max_results: Max results (1-10)

        Returns:
            API response or None
        """
        params = {
            "q": query,
            "maxResults": max(1, min(max_results, 10))
        }

        if self.api_key:
            params["key"] = self.api_key

        try:
            logger.info(f"Async request: {query}")
            response = await self.client.get(self.base_url, params=params)
        except httpx.HTTPError as e:
            logger.warning(f"Async request failed: {e}")
            return None

        if response.status_code != 200:
            logger.warning(f"Status {response.status_code} for query: {query}")
            return None

        try:
            return response.json()
        except ValueError as e:
            logger.error(f"Malformed response for {query}: {e}")
            return None

    async def close(self):
        """Close the HTTP client."""
        await self.client.aclose()

    async def __aenter__(self):
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.close()
