"""HTTP client for Google Books API."""
import requests
from typing import Optional, Dict, Any
import logging

logger = logging.getLogger(__name__)


class GoogleBooksClient:
    """Client for Google Books API. Each search is a single attempt."""

    BASE_URL = "https://www.googleapis.com/books/v1/volumes"

    def __init__(
        self,
        api_key: Optional[str] = None,
        timeout: int = 10,
        base_url: Optional[str] = None
    ):
        """
        Initialize Google Books API client.

        Args:
            api_key: Optional API key (increases rate limits)
            timeout: Request timeout in seconds
            base_url: Override for the volumes endpoint
        """
        self.api_key = api_key
        self.timeout = timeout
        self.base_url = base_url or self.BASE_URL

        # Create session for connection pooling
        self.session = requests.Session()

    def search(self, query: str, max_results: int = 10) -> Optional[Dict[str, Any]]:
        """
        Search for books.

        Args:
            query: Search query string, e.g. "intitle:dune"
            max_results: Maximum results to return (1-10)

        Returns:
            API response JSON or None if the request failed
        """
        params = {
            "q": query,
            "maxResults": max(1, min(max_results, 10))
        }

        if self.api_key:
            params["key"] = self.api_key

        try:
            logger.info(f"Request: {self.base_url} q={query}")
            response = self.session.get(
                self.base_url,
                params=params,
                timeout=self.timeout
            )
        except requests.exceptions.Timeout:
            logger.warning(f"Timeout searching for: {query}")
            return None
        except requests.exceptions.RequestException as e:
            logger.warning(f"Request failed for {query}: {e}")
            return None

        if response.status_code != 200:
            logger.error(f"Status {response.status_code} for query: {query}")
            return None

        try:
            return response.json()
        except ValueError as e:
            logger.error(f"Malformed response for {query}: {e}")
            return None

    def close(self):
        """Close the session."""
        self.session.close()

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
