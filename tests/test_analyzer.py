"""Tests for the page analyzer (report assembler)."""

import asyncio

import httpx
import pytest
from bs4 import BeautifulSoup

from seo_signals.analyzer import PageAnalyzer, analyze, analyze_sync, validate_url
from seo_signals.config import Config
from seo_signals.constants import REPORT_KEYS
from seo_signals.document import Document
from seo_signals.exceptions import (
    AnalysisTimeoutError,
    MalformedInputError,
    MalformedStructuredDataError,
)


PAGE_URL = "https://example.com/blog"


def build_page(word_count: int = 150) -> str:
    filler = " ".join(["content"] * (word_count - 5))
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
<title>Example Blog</title>
<meta name="description" content="All about examples.">
<meta name="viewport" content="width=device-width, initial-scale=1">
<link rel="canonical" href="https://example.com/blog">
<link rel="icon" href="/favicon.png">
<meta property="og:title" content="Example Blog">
<script type="application/ld+json">{{"@type": "Blog", "name": "Example"}}</script>
</head>
<body>
<h1>Hello</h1>
<p>{filler}.</p>
<img src="/hero.jpg">
<a href="https://example.com/working">good link</a>
<a href="https://example.com/broken">bad link</a>
</body>
</html>"""


def make_client(broken=()) -> httpx.AsyncClient:
    async def handler(request):
        if str(request.url) in broken:
            return httpx.Response(404)
        return httpx.Response(200)

    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


class TestValidateUrl:
    """Test cases for source URL validation."""

    @pytest.mark.parametrize("url", ["", "example.com", "ftp://example.com/x", "https://", None])
    def test_rejects(self, url):
        with pytest.raises(MalformedInputError):
            validate_url(url)

    def test_accepts(self):
        assert validate_url("http://example.com") == "http://example.com"


class TestPageAnalyzer:
    """Test suite for PageAnalyzer."""

    @pytest.mark.asyncio
    async def test_end_to_end(self):
        """Test a full report for a small page with one broken link."""
        async with make_client(broken={"https://example.com/broken"}) as client:
            analyzer = PageAnalyzer(client=client)
            report = await analyzer.analyze(Document.from_html(build_page()), PAGE_URL)

        assert report.language_tag.presence is True
        assert report.language_tag.content == "en"
        assert report.headings.get("h1") == ("Hello",)
        assert report.content_length.length < 300
        assert report.content_length.recommended is False
        assert report.broken_links.links == ("https://example.com/broken",)

        assert report.title.content == "Example Blog"
        assert report.meta_description.presence is True
        assert report.mobile_friendliness.is_responsive is True
        assert report.canonical_tags.content == "https://example.com/blog"
        assert report.favicon.content == "/favicon.png"
        assert report.robots_meta_tag.presence is False
        assert report.schema_markup.schemas == ({"@type": "Blog", "name": "Example"},)
        assert report.images.images[0].alt == "Missing alt attribute"
        assert len(report.internal_links.links) == 2
        assert report.external_links.links == ()
        assert report.keyword_density.entries[0].word == "content"
        assert report.url_structure.is_readable is True
        assert report.url_structure.has_keywords is True
        assert report.page_load_speed.speed_score == "N/A"

    @pytest.mark.asyncio
    async def test_report_keys(self):
        """Test the wire report has exactly the fixed signal keys, in order."""
        async with make_client() as client:
            report = await PageAnalyzer(client=client).analyze(
                Document.from_html(build_page()), PAGE_URL
            )
        data = report.to_dict()
        assert tuple(data) == REPORT_KEYS
        assert data["schemaMarkup"] == [{"@type": "Blog", "name": "Example"}]
        assert data["brokenLinks"] == []

    @pytest.mark.asyncio
    async def test_envelope(self):
        async with make_client() as client:
            report = await PageAnalyzer(client=client).analyze(
                Document.from_html(build_page()), PAGE_URL
            )
        envelope = report.to_envelope()
        assert envelope["success"] is True
        assert envelope["data"]["title"]["content"] == "Example Blog"
        assert envelope["timestamp"] == report.analyzed_at.isoformat()

    @pytest.mark.asyncio
    async def test_accepts_beautifulsoup(self):
        soup = BeautifulSoup("<html><body><h2>Sub</h2></body></html>", "lxml")
        async with make_client() as client:
            report = await PageAnalyzer(client=client).analyze(soup, PAGE_URL)
        assert report.headings.to_dict() == {"h2": ["Sub"]}

    @pytest.mark.asyncio
    async def test_empty_page(self):
        """Test a page with nothing in it still yields a complete report."""
        async with make_client() as client:
            report = await PageAnalyzer(client=client).analyze(
                Document.from_html("<html></html>"), PAGE_URL
            )
        data = report.to_dict()
        assert data["title"] == {"presence": False, "length": 0, "content": ""}
        assert data["keywordDensity"] == []
        assert data["readability"] == {"score": 0.0, "recommended": False}
        assert data["schemaMarkup"] == "No schema markup found"
        assert data["headings"] == {}

    @pytest.mark.asyncio
    async def test_malformed_document(self):
        with pytest.raises(MalformedInputError):
            await PageAnalyzer().analyze("<html></html>", PAGE_URL)

    @pytest.mark.asyncio
    async def test_malformed_url(self):
        with pytest.raises(MalformedInputError):
            await PageAnalyzer().analyze(Document.from_html("<html></html>"), "not a url")

    @pytest.mark.asyncio
    async def test_malformed_schema_isolated_by_default(self):
        html = '<html><head><script type="application/ld+json">{oops</script></head></html>'
        async with make_client() as client:
            report = await PageAnalyzer(client=client).analyze(Document.from_html(html), PAGE_URL)
        assert report.schema_markup.found is False
        assert len(report.schema_markup.errors) == 1

    @pytest.mark.asyncio
    async def test_unparseable_link_reported_broken(self):
        html = '<html><body><a href="http://[oops/">x</a><a href="/ok">ok</a></body></html>'
        async with make_client() as client:
            report = await PageAnalyzer(client=client).analyze(Document.from_html(html), PAGE_URL)
        assert report.broken_links.links == ("http://[oops/",)

    @pytest.mark.asyncio
    async def test_malformed_schema_strict_fails_analysis(self):
        html = '<html><head><script type="application/ld+json">{oops</script></head></html>'
        config = Config(strict_structured_data=True)
        async with make_client() as client:
            with pytest.raises(MalformedStructuredDataError):
                await PageAnalyzer(config=config, client=client).analyze(
                    Document.from_html(html), PAGE_URL
                )

    @pytest.mark.asyncio
    async def test_analysis_timeout(self):
        async def slow_handler(request):
            await asyncio.sleep(1)
            return httpx.Response(200)

        config = Config(analysis_timeout=0.05)
        async with httpx.AsyncClient(transport=httpx.MockTransport(slow_handler)) as client:
            with pytest.raises(AnalysisTimeoutError):
                await PageAnalyzer(config=config, client=client).analyze(
                    Document.from_html(build_page()), PAGE_URL
                )

    @pytest.mark.asyncio
    async def test_module_level_analyze(self):
        """Test the convenience coroutine on a page without links."""
        report = await analyze(Document.from_html("<html lang='fr'></html>"), PAGE_URL)
        assert report.language_tag.content == "fr"

    def test_analyze_sync(self):
        report = analyze_sync(Document.from_html("<html><title>T</title></html>"), PAGE_URL)
        assert report.title.presence is True
