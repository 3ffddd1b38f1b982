"""Page fetcher - downloads a page and prepares it for analysis."""

import logging
import random
import re
import time
from typing import Optional

import requests

from seo_signals.constants import (
    DEFAULT_MAX_RETRIES,
    DEFAULT_REQUEST_TIMEOUT_SECONDS,
    EXPONENTIAL_BACKOFF_BASE,
)
from seo_signals.document import Document
from seo_signals.exceptions import FetchError

logger = logging.getLogger(__name__)

# Raw-text elements keep their content byte for byte; whitespace elsewhere collapses.
_COLLAPSE_PATTERN = re.compile(
    r"(?P<keep><(?P<tag>script|style|pre|textarea)\b[^>]*>.*?</(?P=tag)\s*>)|(?P<space>\s+)",
    re.IGNORECASE | re.DOTALL,
)


def _collapse_match(match: "re.Match[str]") -> str:
    if match.group("keep") is not None:
        return match.group("keep")
    return " "


def collapse_whitespace(html: str) -> str:
    """Collapse whitespace runs in the markup to a single space.

    The contents of script, style, pre and textarea elements are left
    untouched so JSON-LD values and preformatted text survive the fetch.
    """
    return _COLLAPSE_PATTERN.sub(_collapse_match, html).strip()


class PageFetcher:
    """Fetches pages over HTTP for single-page analysis."""

    def __init__(self, user_agent: Optional[str] = None):
        """Initialize the page fetcher.

        Args:
            user_agent: Custom user agent string for requests
        """
        self.user_agent = user_agent or "SEO-Signals-Bot/1.0"

        self.session = requests.Session()
        self.session.headers.update({
            "User-Agent": self.user_agent,
            "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
            "Accept-Language": "en-US,en;q=0.9",
        })

    def fetch(
        self,
        url: str,
        timeout: int = DEFAULT_REQUEST_TIMEOUT_SECONDS,
        max_retries: int = DEFAULT_MAX_RETRIES,
    ) -> str:
        """Fetch a URL with retry logic and return whitespace-collapsed HTML.

        Args:
            url: The URL to fetch
            timeout: Request timeout in seconds
            max_retries: Maximum number of attempts

        Returns:
            HTML with whitespace runs collapsed

        Raises:
            FetchError: If every attempt fails
        """
        last_error = None
        status_code = None

        for attempt in range(max_retries):
            try:
                if attempt > 0:
                    delay = (EXPONENTIAL_BACKOFF_BASE ** attempt) + random.uniform(0, 1)  # Exponential backoff
                    time.sleep(delay)

                response = self.session.get(url, timeout=timeout, allow_redirects=True)
                response.raise_for_status()
                return collapse_whitespace(response.text)

            except requests.exceptions.HTTPError as e:
                status_code = e.response.status_code if e.response is not None else None
                last_error = str(e)
                # Client errors other than rate limiting will not improve on retry
                if status_code is not None and 400 <= status_code < 500 and status_code != 429:
                    break

            except requests.exceptions.Timeout:
                last_error = f"Request timeout after {timeout}s"

            except requests.exceptions.ConnectionError as e:
                last_error = f"Connection error: {str(e)}"

            except requests.exceptions.RequestException as e:
                last_error = str(e)
                break

            logger.warning(f"Fetch attempt {attempt + 1}/{max_retries} failed for {url}: {last_error}")

        raise FetchError(
            f"Failed to fetch {url}: {last_error}",
            url=url,
            status_code=status_code,
        )

    def fetch_document(self, url: str, **kwargs) -> Document:
        """Fetch a URL and parse it into a Document."""
        return Document.from_html(self.fetch(url, **kwargs))
