"""Exception types shared across the scraper pipeline."""


class ScraperError(Exception):
    """Base class for scraper pipeline errors."""


class FetchError(ScraperError):
    """Raised when a venue page cannot be retrieved."""

    def __init__(self, url: str, message: str):
        super().__init__(message)
        self.url = url
        self.message = message


class StorageError(ScraperError):
    """Raised when a report or spotlight cannot be read or written."""


class ReportNotFoundError(StorageError):
    """Raised when no scrape report has been written yet."""
