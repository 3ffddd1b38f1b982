"""Report assembler - runs every signal analyzer over one page."""

import asyncio
import logging
from typing import Optional, Union
from urllib.parse import urlparse

import httpx
from bs4 import BeautifulSoup

from seo_signals.config import AnalysisThresholds, Config, default_thresholds
from seo_signals.document import Document, ensure_document
from seo_signals.exceptions import AnalysisTimeoutError, MalformedInputError
from seo_signals.links import LinkAnalyzer, collect_hrefs
from seo_signals.models import PageReport
from seo_signals.network import (
    BrokenLinkChecker,
    check_content_uniqueness,
    check_page_load_speed,
)
from seo_signals.structural import (
    analyze_canonical_tags,
    analyze_headings,
    analyze_meta_description,
    analyze_robots_meta_tag,
    analyze_schema_markup,
    analyze_social_tags,
    analyze_title,
    analyze_url,
    check_favicon,
    check_images,
    check_language_tag,
    check_mobile_friendly,
)
from seo_signals.text_analysis import TextAnalyzer

logger = logging.getLogger(__name__)

DocumentLike = Union[Document, BeautifulSoup]


def validate_url(url: str) -> str:
    """Reject anything that is not an absolute http(s) URL with a host."""
    if not isinstance(url, str) or not url:
        raise MalformedInputError("URL is required")
    try:
        parsed = urlparse(url)
    except ValueError as e:
        raise MalformedInputError(f"Unparseable URL {url!r}: {e}") from e
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise MalformedInputError(f"URL must be absolute http(s): {url!r}")
    return url


class PageAnalyzer:
    """Extracts every SEO signal from a parsed page."""

    def __init__(
        self,
        config: Optional[Config] = None,
        thresholds: Optional[AnalysisThresholds] = None,
        client: Optional[httpx.AsyncClient] = None,
    ):
        """Initialize the page analyzer.

        Args:
            config: Runtime configuration (probe limits, timeouts, strictness)
            thresholds: Analysis thresholds configuration
            client: Optional shared AsyncClient for link probes
        """
        self.config = config or Config()
        self.thresholds = thresholds or default_thresholds
        self.text_analyzer = TextAnalyzer(self.thresholds)
        self.link_checker = BrokenLinkChecker(
            max_concurrent=self.config.max_concurrent_probes,
            timeout=self.config.probe_timeout,
            user_agent=self.config.user_agent,
            client=client,
        )

    async def analyze(self, document: DocumentLike, url: str) -> PageReport:
        """Analyze one page.

        Args:
            document: Parsed page (Document or BeautifulSoup tree)
            url: Source URL of the page

        Returns:
            PageReport with every signal

        Raises:
            MalformedInputError: If the document or URL is unusable
            MalformedStructuredDataError: On bad JSON-LD in strict mode
            AnalysisTimeoutError: If ``analysis_timeout`` is exceeded
        """
        doc = ensure_document(document)
        validate_url(url)

        timeout = self.config.analysis_timeout
        if timeout is None:
            return await self._analyze(doc, url)
        try:
            return await asyncio.wait_for(self._analyze(doc, url), timeout=timeout)
        except asyncio.TimeoutError as e:
            raise AnalysisTimeoutError(
                f"Analysis of {url} exceeded {timeout}s"
            ) from e

    async def _analyze(self, doc: Document, url: str) -> PageReport:
        logger.info(f"Analyzing {url}")

        internal_links, external_links = LinkAnalyzer(url).analyze(doc)

        report = PageReport(
            url=url,
            title=analyze_title(doc),
            meta_description=analyze_meta_description(doc),
            headings=analyze_headings(doc),
            keyword_density=self.text_analyzer.keyword_density(doc),
            images=check_images(doc),
            internal_links=internal_links,
            external_links=external_links,
            url_structure=analyze_url(url, self.thresholds),
            content_length=self.text_analyzer.content_length(doc),
            mobile_friendliness=check_mobile_friendly(doc),
            page_load_speed=await check_page_load_speed(url),
            schema_markup=analyze_schema_markup(
                doc, strict=self.config.strict_structured_data
            ),
            canonical_tags=analyze_canonical_tags(doc),
            robots_meta_tag=analyze_robots_meta_tag(doc),
            readability=self.text_analyzer.readability(doc),
            social_tags=analyze_social_tags(doc),
            favicon=check_favicon(doc),
            broken_links=await self.link_checker.check(collect_hrefs(doc), base_url=url),
            content_uniqueness=await check_content_uniqueness(url),
            language_tag=check_language_tag(doc),
        )

        logger.info(
            f"Analyzed {url}: {len(internal_links.links)} internal, "
            f"{len(external_links.links)} external, "
            f"{len(report.broken_links.links)} broken links"
        )
        return report


async def analyze(
    document: DocumentLike,
    url: str,
    config: Optional[Config] = None,
    thresholds: Optional[AnalysisThresholds] = None,
) -> PageReport:
    """Analyze one page with a fresh PageAnalyzer."""
    return await PageAnalyzer(config=config, thresholds=thresholds).analyze(document, url)


def analyze_sync(
    document: DocumentLike,
    url: str,
    config: Optional[Config] = None,
    thresholds: Optional[AnalysisThresholds] = None,
) -> PageReport:
    """Blocking wrapper around analyze() for callers without an event loop."""
    return asyncio.run(analyze(document, url, config=config, thresholds=thresholds))
