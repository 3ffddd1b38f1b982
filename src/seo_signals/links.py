"""Internal/external classification of page anchors."""

from typing import List, Tuple
from urllib.parse import urlparse

from seo_signals.document import Document, element_attr, element_text
from seo_signals.exceptions import MalformedInputError
from seo_signals.models import LinkEntry, LinkReport

DEFAULT_PORTS = {"http": 80, "https": 443}


def get_origin(url: str) -> str:
    """Scheme, host and non-default port of an absolute URL.

    Raises:
        MalformedInputError: If the URL has no scheme or host
    """
    try:
        parsed = urlparse(url)
        port = parsed.port
    except ValueError as e:
        raise MalformedInputError(f"Unparseable URL {url!r}: {e}") from e

    if not parsed.scheme or not parsed.hostname:
        raise MalformedInputError(f"URL must be absolute with a host: {url!r}")

    scheme = parsed.scheme.lower()
    host = parsed.hostname
    if ":" in host:
        host = f"[{host}]"  # IPv6 literal
    if port is not None and port != DEFAULT_PORTS.get(scheme):
        return f"{scheme}://{host}:{port}"
    return f"{scheme}://{host}"


class LinkAnalyzer:
    """Splits anchors into internal and external links for one page."""

    def __init__(self, url: str):
        """Initialize the link analyzer.

        Args:
            url: Source URL of the page being analyzed
        """
        self.url = url
        self.origin = get_origin(url)

    def is_external(self, href: str) -> bool:
        """An href is external unless it is root-relative or mentions the origin.

        This is a plain substring test: "/x/example.com" is internal and so
        is any href carrying the origin in its query string.
        """
        return not href.startswith("/") and self.origin not in href

    def analyze(self, doc: Document) -> Tuple[LinkReport, LinkReport]:
        """Classify every anchor that has a non-empty href.

        Returns:
            Tuple of (internal LinkReport, external LinkReport)
        """
        internal: List[LinkEntry] = []
        external: List[LinkEntry] = []

        for anchor in doc.select("a"):
            href = element_attr(anchor, "href")
            if not href:
                continue
            external_link = self.is_external(href)
            entry = LinkEntry(
                href=href,
                text=element_text(anchor).strip(),
                is_external=external_link,
            )
            (external if external_link else internal).append(entry)

        return LinkReport(links=tuple(internal)), LinkReport(links=tuple(external))


def collect_hrefs(doc: Document) -> List[str]:
    """Every non-empty anchor href, in document order (duplicates kept)."""
    hrefs = []
    for anchor in doc.select("a"):
        href = element_attr(anchor, "href")
        if href:
            hrefs.append(href)
    return hrefs
