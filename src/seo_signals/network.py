"""
Network-dependent signals.

BrokenLinkChecker probes outbound links with GET requests through an
httpx.AsyncClient. Probes share a semaphore so at most
``max_concurrent`` are in flight; ``max_concurrent=1`` probes strictly one
after another. The set of broken links does not depend on probe order.

Page load speed and content uniqueness are fixed placeholders.
"""

import asyncio
import logging
from typing import Dict, Iterable, List, Optional
from urllib.parse import urljoin

import httpx

from seo_signals.models import (
    BrokenLinksReport,
    ContentUniquenessReport,
    PageLoadSpeedReport,
)

logger = logging.getLogger(__name__)


class BrokenLinkChecker:
    """Finds links whose GET request fails."""

    def __init__(
        self,
        max_concurrent: int = 10,
        timeout: float = 10.0,
        user_agent: Optional[str] = None,
        client: Optional[httpx.AsyncClient] = None,
    ):
        """
        Initialize the broken link checker.

        Args:
            max_concurrent: Maximum probes in flight at once
            timeout: Per-probe timeout in seconds
            user_agent: User-Agent header for probes
            client: Shared AsyncClient (the caller keeps ownership)
        """
        if max_concurrent < 1:
            raise ValueError("max_concurrent must be at least 1")
        self.max_concurrent = max_concurrent
        self.timeout = timeout
        self.user_agent = user_agent
        self._client = client

    async def check(self, hrefs: Iterable[str], base_url: Optional[str] = None) -> BrokenLinksReport:
        """
        Probe every distinct href once.

        Args:
            hrefs: Link targets as written in the page
            base_url: Page URL used to resolve relative hrefs

        Returns:
            BrokenLinksReport with failing hrefs in first-occurrence order
        """
        unique_hrefs = list(dict.fromkeys(hrefs))
        if not unique_hrefs:
            return BrokenLinksReport()

        semaphore = asyncio.Semaphore(self.max_concurrent)

        if self._client is not None:
            results = await self._probe_all(self._client, semaphore, unique_hrefs, base_url)
        else:
            headers = {"User-Agent": self.user_agent} if self.user_agent else None
            async with httpx.AsyncClient(
                timeout=self.timeout, follow_redirects=True, headers=headers
            ) as client:
                results = await self._probe_all(client, semaphore, unique_hrefs, base_url)

        broken = [href for href in unique_hrefs if not results[href]]
        logger.info(f"Probed {len(unique_hrefs)} links, {len(broken)} broken")
        return BrokenLinksReport(links=tuple(broken))

    async def _probe_all(
        self,
        client: httpx.AsyncClient,
        semaphore: asyncio.Semaphore,
        hrefs: List[str],
        base_url: Optional[str],
    ) -> Dict[str, bool]:
        outcomes = await asyncio.gather(
            *(self._probe(client, semaphore, href, base_url) for href in hrefs)
        )
        return dict(zip(hrefs, outcomes))

    async def _probe(
        self,
        client: httpx.AsyncClient,
        semaphore: asyncio.Semaphore,
        href: str,
        base_url: Optional[str],
    ) -> bool:
        """True when the GET completes with a 2xx final status."""
        target = href
        async with semaphore:
            try:
                if base_url:
                    target = urljoin(base_url, href)
                response = await client.get(
                    target, timeout=self.timeout, follow_redirects=True
                )
            except httpx.TimeoutException:
                logger.debug(f"Probe timed out after {self.timeout}s: {target}")
                return False
            except (httpx.HTTPError, httpx.InvalidURL, ValueError) as e:
                logger.debug(f"Probe failed for {target}: {e}")
                return False

        if not response.is_success:
            logger.debug(f"Probe got {response.status_code} for {target}")
            return False
        return True


async def check_page_load_speed(url: str) -> PageLoadSpeedReport:
    """Placeholder; no performance measurement is made."""
    return PageLoadSpeedReport()


async def check_content_uniqueness(url: str) -> ContentUniquenessReport:
    """Placeholder; duplicate-content detection is disabled."""
    return ContentUniquenessReport()
