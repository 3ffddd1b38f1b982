"""Periodic re-analysis of a single page.

The monitor is a timer around fetch + analyze. It keeps no pipeline
state between runs; every iteration fetches, parses and analyzes afresh.
"""

import asyncio
import logging
from typing import Callable, Optional

from seo_signals.analyzer import PageAnalyzer
from seo_signals.crawler import PageFetcher
from seo_signals.exceptions import SignalExtractionError
from seo_signals.models import PageReport

logger = logging.getLogger(__name__)


class PageMonitor:
    """Re-analyzes a URL on a fixed interval."""

    def __init__(
        self,
        analyzer: Optional[PageAnalyzer] = None,
        fetcher: Optional[PageFetcher] = None,
        on_report: Optional[Callable[[PageReport], None]] = None,
    ):
        """Initialize the monitor.

        Args:
            analyzer: Analyzer used for every run
            fetcher: Fetcher used for every run
            on_report: Called with each successful report
        """
        self.analyzer = analyzer or PageAnalyzer()
        self.fetcher = fetcher or PageFetcher(user_agent=self.analyzer.config.user_agent)
        self.on_report = on_report
        self.runs = 0
        self.failures = 0

    async def run_once(self, url: str) -> Optional[PageReport]:
        """Fetch and analyze once; failures are logged and yield None."""
        self.runs += 1
        config = self.analyzer.config
        try:
            document = await asyncio.to_thread(
                self.fetcher.fetch_document,
                url,
                timeout=config.timeout,
                max_retries=config.max_retries,
            )
            report = await self.analyzer.analyze(document, url)
        except SignalExtractionError as e:
            self.failures += 1
            logger.error(f"Error during monitoring for {url}: {e.message}")
            return None
        except Exception:
            self.failures += 1
            logger.exception(f"Unexpected error during monitoring for {url}")
            return None

        logger.info(f"Real-time analysis for {url} complete")
        if self.on_report:
            self.on_report(report)
        return report

    async def run(self, url: str, interval: float, iterations: Optional[int] = None) -> None:
        """Analyze ``url`` every ``interval`` seconds.

        Args:
            url: Page to monitor
            interval: Seconds between the starts of consecutive runs
            iterations: Stop after this many runs (None runs until cancelled)
        """
        if interval <= 0:
            raise ValueError("interval must be positive")

        logger.info(f"Monitoring started for {url} every {interval} seconds")
        loop = asyncio.get_running_loop()
        count = 0
        while iterations is None or count < iterations:
            started = loop.time()
            await self.run_once(url)
            count += 1
            if iterations is not None and count >= iterations:
                break
            await asyncio.sleep(max(0.0, interval - (loop.time() - started)))
        logger.info(f"Monitoring stopped for {url} after {count} runs")
