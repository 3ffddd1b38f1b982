# src/seo_signals/structural.py
"""Structural signals read directly from the document tree.

Each function is a pure read of the Document (or, for URL structure, the
source URL). Missing elements produce placeholders, never errors.
"""

import json
import logging
import re
from typing import Dict, List, Optional
from urllib.parse import urlparse

from seo_signals.config import AnalysisThresholds, default_thresholds
from seo_signals.constants import (
    HEADING_TAGS,
    JSON_LD_SELECTOR,
    MISSING_ALT_ATTRIBUTE,
    NO_CANONICAL_TAG,
    NO_FAVICON,
    NO_LANGUAGE_TAG,
    NO_META_DESCRIPTION,
    NO_ROBOTS_META_TAG,
    RESPONSIVE_VIEWPORT_TOKEN,
)
from seo_signals.document import Document, element_attr, element_text
from seo_signals.exceptions import MalformedStructuredDataError
from seo_signals.models import (
    HeadingsReport,
    ImageEntry,
    ImageReport,
    MetaDescriptionReport,
    MobileFriendlinessReport,
    OpenGraphTag,
    SchemaMarkupReport,
    SocialTagsReport,
    TagReport,
    TitleReport,
    TwitterCardTag,
    URLStructureReport,
)

logger = logging.getLogger(__name__)

_ALPHANUMERIC = re.compile(r"[a-zA-Z0-9]")


def analyze_title(doc: Document) -> TitleReport:
    """Text of every <title> element, untrimmed."""
    title = doc.text("title")
    return TitleReport(presence=len(title) > 0, length=len(title), content=title)


def analyze_meta_description(doc: Document) -> MetaDescriptionReport:
    description = doc.attr('meta[name="description"]', "content")
    return MetaDescriptionReport(
        presence=bool(description),
        length=len(description) if description else 0,
        content=description or NO_META_DESCRIPTION,
    )


def analyze_headings(doc: Document) -> HeadingsReport:
    """Group trimmed heading texts by level, keeping document order.

    Levels that never occur are left out of the mapping.
    """
    grouped: Dict[str, List[str]] = {}
    for element in doc.select(", ".join(HEADING_TAGS)):
        level = element.name.lower()
        grouped.setdefault(level, []).append(element_text(element).strip())
    return HeadingsReport(levels=tuple((level, tuple(texts)) for level, texts in grouped.items()))


def check_images(doc: Document) -> ImageReport:
    images = []
    for img in doc.select("img"):
        alt = element_attr(img, "alt")
        images.append(ImageEntry(src=element_attr(img, "src"), alt=alt or MISSING_ALT_ATTRIBUTE))
    return ImageReport(images=tuple(images))


def analyze_url(url: str, thresholds: Optional[AnalysisThresholds] = None) -> URLStructureReport:
    """Shape of the URL path.

    A path is readable when splitting it on "/" gives at most
    ``url_max_path_segments`` pieces, the empty piece before the leading
    slash included. Any alphanumeric character in the path counts as a
    keyword.
    """
    thresholds = thresholds or default_thresholds
    path = urlparse(url).path or "/"
    return URLStructureReport(
        is_readable=len(path.split("/")) <= thresholds.url_max_path_segments,
        has_keywords=bool(_ALPHANUMERIC.search(path)),
    )


def check_mobile_friendly(doc: Document) -> MobileFriendlinessReport:
    viewport = doc.attr('meta[name="viewport"]', "content")
    return MobileFriendlinessReport(
        has_viewport=bool(viewport),
        is_responsive=bool(viewport) and RESPONSIVE_VIEWPORT_TOKEN in viewport,
    )


def analyze_schema_markup(doc: Document, strict: bool = False) -> SchemaMarkupReport:
    """Parse every JSON-LD script block.

    Args:
        doc: Parsed page
        strict: Raise on the first malformed block instead of skipping it

    Returns:
        SchemaMarkupReport with parsed blocks and skipped-block errors

    Raises:
        MalformedStructuredDataError: In strict mode, for invalid JSON
    """
    schemas = []
    errors = []
    for index, script in enumerate(doc.select(JSON_LD_SELECTOR)):
        raw = element_text(script)
        try:
            schemas.append(json.loads(raw))
        except json.JSONDecodeError as e:
            message = f"JSON-LD block {index} is not valid JSON: {e}"
            if strict:
                raise MalformedStructuredDataError(message, block_index=index) from e
            logger.warning(message)
            errors.append(message)
    return SchemaMarkupReport(schemas=tuple(schemas), errors=tuple(errors))


def _tag_report(value: Optional[str], placeholder: str) -> TagReport:
    return TagReport(presence=bool(value), content=value or placeholder)


def analyze_canonical_tags(doc: Document) -> TagReport:
    return _tag_report(doc.attr('link[rel="canonical"]', "href"), NO_CANONICAL_TAG)


def analyze_robots_meta_tag(doc: Document) -> TagReport:
    return _tag_report(doc.attr('meta[name="robots"]', "content"), NO_ROBOTS_META_TAG)


def analyze_social_tags(doc: Document) -> SocialTagsReport:
    """Open Graph and Twitter Card meta tags, each in document order."""
    open_graph = tuple(
        OpenGraphTag(property=element_attr(tag, "property"), content=element_attr(tag, "content"))
        for tag in doc.select('meta[property^="og:"]')
    )
    twitter_card = tuple(
        TwitterCardTag(name=element_attr(tag, "name"), content=element_attr(tag, "content"))
        for tag in doc.select('meta[name^="twitter:"]')
    )
    return SocialTagsReport(open_graph=open_graph, twitter_card=twitter_card)


def check_favicon(doc: Document) -> TagReport:
    favicon = (
        doc.attr('link[rel="icon"]', "href")
        or doc.attr('link[rel="shortcut icon"]', "href")
    )
    return _tag_report(favicon, NO_FAVICON)


def check_language_tag(doc: Document) -> TagReport:
    return _tag_report(doc.attr("html", "lang"), NO_LANGUAGE_TAG)
