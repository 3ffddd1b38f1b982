# tests/test_network.py
"""Tests for the network-dependent analyzers."""

import asyncio

import httpx
import pytest

from seo_signals.network import (
    BrokenLinkChecker,
    check_content_uniqueness,
    check_page_load_speed,
)


def make_client(statuses, delay: float = 0.0, tracker=None) -> httpx.AsyncClient:
    """AsyncClient answering each URL with a status code or raising an exception."""

    async def handler(request: httpx.Request) -> httpx.Response:
        if tracker is not None:
            tracker["current"] += 1
            tracker["peak"] = max(tracker["peak"], tracker["current"])
        try:
            if delay:
                await asyncio.sleep(delay)
            outcome = statuses.get(str(request.url), 404)
            if isinstance(outcome, type) and issubclass(outcome, Exception):
                raise outcome("probe failed", request=request)
            return httpx.Response(outcome, request=request)
        finally:
            if tracker is not None:
                tracker["current"] -= 1

    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


class TestBrokenLinkChecker:
    """Test suite for BrokenLinkChecker."""

    @pytest.mark.asyncio
    async def test_failing_links_reported(self):
        """Test only failing links are reported: A ok, B and C fail."""
        statuses = {
            "https://a.example/": 200,
            "https://b.example/": 500,
            "https://c.example/": httpx.ConnectError,
        }
        async with make_client(statuses) as client:
            checker = BrokenLinkChecker(client=client)
            report = await checker.check(
                ["https://a.example/", "https://b.example/", "https://c.example/"]
            )
        assert set(report.links) == {"https://b.example/", "https://c.example/"}

    @pytest.mark.asyncio
    async def test_result_set_independent_of_concurrency(self):
        """Test sequential and parallel probing find the same broken links."""
        statuses = {f"https://site.example/{i}": (200 if i % 3 else 404) for i in range(9)}
        hrefs = list(statuses)

        async with make_client(statuses, delay=0.005) as client:
            sequential = await BrokenLinkChecker(max_concurrent=1, client=client).check(hrefs)
            parallel = await BrokenLinkChecker(max_concurrent=5, client=client).check(hrefs)

        assert sequential.links == parallel.links
        assert sequential.links == (
            "https://site.example/0",
            "https://site.example/3",
            "https://site.example/6",
        )

    @pytest.mark.asyncio
    @pytest.mark.parametrize("limit", [1, 2, 4])
    async def test_concurrency_bounded(self, limit):
        """Test no more than max_concurrent probes are in flight."""
        tracker = {"current": 0, "peak": 0}
        statuses = {f"https://site.example/{i}": 200 for i in range(10)}

        async with make_client(statuses, delay=0.01, tracker=tracker) as client:
            await BrokenLinkChecker(max_concurrent=limit, client=client).check(list(statuses))

        assert 1 <= tracker["peak"] <= limit

    @pytest.mark.asyncio
    async def test_redirect_followed(self):
        async def handler(request):
            if request.url.path == "/old":
                return httpx.Response(301, headers={"Location": "https://site.example/new"})
            return httpx.Response(200)

        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            report = await BrokenLinkChecker(client=client).check(["https://site.example/old"])
        assert report.links == ()

    @pytest.mark.asyncio
    async def test_timeout_counts_as_broken(self):
        statuses = {"https://slow.example/": httpx.ReadTimeout}
        async with make_client(statuses) as client:
            report = await BrokenLinkChecker(client=client).check(["https://slow.example/"])
        assert report.links == ("https://slow.example/",)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("bad_href", ["http://[oops/", "https://[::1/x"])
    async def test_unparseable_href_counts_as_broken(self, bad_href):
        """Test an href urllib cannot split is reported instead of aborting the check."""
        statuses = {"https://ok.example/": 200}
        async with make_client(statuses) as client:
            report = await BrokenLinkChecker(client=client).check(
                [bad_href, "https://ok.example/"], base_url="https://example.com/"
            )
        assert report.links == (bad_href,)

    @pytest.mark.asyncio
    async def test_relative_links_resolved_against_page(self):
        """Test relative hrefs are probed at the page's URL but reported as written."""
        statuses = {
            "https://example.com/about": 200,
            "https://example.com/blog/missing": 404,
        }
        async with make_client(statuses) as client:
            report = await BrokenLinkChecker(client=client).check(
                ["/about", "missing"], base_url="https://example.com/blog/post"
            )
        assert report.links == ("missing",)

    @pytest.mark.asyncio
    async def test_duplicates_probed_once(self):
        calls = []

        async def handler(request):
            calls.append(str(request.url))
            return httpx.Response(404)

        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            report = await BrokenLinkChecker(client=client).check(
                ["https://x.example/", "https://x.example/"]
            )
        assert calls == ["https://x.example/"]
        assert report.links == ("https://x.example/",)

    @pytest.mark.asyncio
    async def test_no_links(self):
        report = await BrokenLinkChecker().check([])
        assert report.to_dict() == []

    def test_invalid_concurrency(self):
        with pytest.raises(ValueError):
            BrokenLinkChecker(max_concurrent=0)


class TestStubs:
    """Test cases for placeholder signals."""

    @pytest.mark.asyncio
    async def test_page_load_speed_stub(self):
        report = await check_page_load_speed("https://example.com")
        assert report.to_dict() == {"speedScore": "N/A", "recommendations": []}

    @pytest.mark.asyncio
    async def test_content_uniqueness_stub(self):
        report = await check_content_uniqueness("https://example.com")
        assert report.to_dict() == {
            "unique": "N/A",
            "message": "Uniqueness check not implemented",
        }
