"""HTTP fetcher for venue pages."""
import logging
from typing import Optional

import requests

from processor.errors import FetchError

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (compatible; SpottedBot/1.0; +https://spottedwhathappens.com)"
)


class VenueFetcher:
    """Fetches raw HTML for a venue with a bounded timeout."""

    def __init__(
        self,
        timeout: float = 10,
        user_agent: str = DEFAULT_USER_AGENT,
        session: Optional[requests.Session] = None
    ):
        """
        Initialize the fetcher.

        Args:
            timeout: HTTP request timeout in seconds (default: 10)
            user_agent: Identifying User-Agent sent with every request
            session: Optional requests session to reuse connections
        """
        self.timeout = timeout
        self.user_agent = user_agent
        self.session = session or requests.Session()

    def fetch(self, url: str) -> str:
        """
        Fetch a page once, without retrying.

        Args:
            url: Page URL

        Returns:
            Response body as text

        Raises:
            FetchError: On timeout, connection failure or non-success status
        """
        logger.debug(f"Fetching {url}")
        try:
            response = self.session.get(
                url,
                headers={'User-Agent': self.user_agent},
                timeout=self.timeout
            )
            response.raise_for_status()
        except requests.Timeout as e:
            raise FetchError(url, f"Timed out after {self.timeout}s: {e}") from e
        except requests.RequestException as e:
            raise FetchError(url, str(e) or type(e).__name__) from e

        return response.text

    def close(self) -> None:
        self.session.close()
