"""Configuration management."""
import os
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# Google Books caps a page well above this; the explorer shows one fixed page
PAGE_SIZE = 10


class Config:
    """Application configuration."""

    # API
    GOOGLE_BOOKS_API_URL = os.getenv(
        "GOOGLE_BOOKS_API_URL", "https://www.googleapis.com/books/v1/volumes"
    )
    GOOGLE_BOOKS_API_KEY = os.getenv("GOOGLE_BOOKS_API_KEY")

    # Defaults
    DEFAULT_TIMEOUT = int(os.getenv("DEFAULT_TIMEOUT", "10"))
    LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING").upper()

    @property
    def MAX_RESULTS(self):
        """Results per search, never more than one page."""
        return min(int(os.getenv("MAX_RESULTS", str(PAGE_SIZE))), PAGE_SIZE)
