"""Data models for page signal reports.

Every report is a frozen dataclass built once per analysis. ``to_dict()``
returns the wire shape used by the CLI and the response envelope.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, Optional, Tuple

from seo_signals.constants import (
    NO_SCHEMA_MARKUP,
    SPEED_SCORE_UNAVAILABLE,
    UNIQUENESS_NOT_IMPLEMENTED,
    UNIQUENESS_UNAVAILABLE,
)


@dataclass(frozen=True)
class TitleReport:
    """The page <title>."""

    presence: bool = False
    length: int = 0
    content: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {"presence": self.presence, "length": self.length, "content": self.content}


@dataclass(frozen=True)
class MetaDescriptionReport:
    """The description meta tag; content holds a placeholder when absent."""

    presence: bool
    length: int
    content: str

    def to_dict(self) -> Dict[str, Any]:
        return {"presence": self.presence, "length": self.length, "content": self.content}


@dataclass(frozen=True)
class HeadingsReport:
    """Heading texts grouped by level (h1..h6), document order within a level.

    ``levels`` holds ``(level, texts)`` pairs in first-encounter order.
    """

    levels: Tuple[Tuple[str, Tuple[str, ...]], ...] = ()

    def get(self, level: str) -> Tuple[str, ...]:
        for name, texts in self.levels:
            if name == level:
                return texts
        return ()

    def to_dict(self) -> Dict[str, Any]:
        return {level: list(texts) for level, texts in self.levels}


@dataclass(frozen=True)
class KeywordDensityEntry:
    word: str
    density: float  # percentage of all tokens

    def to_dict(self) -> Dict[str, Any]:
        return {"word": self.word, "density": self.density}


@dataclass(frozen=True)
class KeywordDensityReport:
    entries: Tuple[KeywordDensityEntry, ...] = ()

    def to_dict(self) -> list:
        return [entry.to_dict() for entry in self.entries]


@dataclass(frozen=True)
class ImageEntry:
    src: Optional[str]
    alt: str

    def to_dict(self) -> Dict[str, Any]:
        return {"src": self.src, "alt": self.alt}


@dataclass(frozen=True)
class ImageReport:
    images: Tuple[ImageEntry, ...] = ()

    def to_dict(self) -> list:
        return [image.to_dict() for image in self.images]


@dataclass(frozen=True)
class LinkEntry:
    href: str
    text: str
    is_external: bool

    def to_dict(self) -> Dict[str, Any]:
        return {"href": self.href, "text": self.text, "isExternal": self.is_external}


@dataclass(frozen=True)
class LinkReport:
    links: Tuple[LinkEntry, ...] = ()

    @property
    def hrefs(self) -> Tuple[str, ...]:
        return tuple(link.href for link in self.links)

    def to_dict(self) -> list:
        return [link.to_dict() for link in self.links]


@dataclass(frozen=True)
class URLStructureReport:
    is_readable: bool
    has_keywords: bool

    def to_dict(self) -> Dict[str, Any]:
        return {"isReadable": self.is_readable, "hasKeywords": self.has_keywords}


@dataclass(frozen=True)
class ContentLengthReport:
    length: int  # whitespace-delimited words in the body text
    recommended: bool

    def to_dict(self) -> Dict[str, Any]:
        return {"length": self.length, "recommended": self.recommended}


@dataclass(frozen=True)
class MobileFriendlinessReport:
    has_viewport: bool
    is_responsive: bool

    def to_dict(self) -> Dict[str, Any]:
        return {"hasViewport": self.has_viewport, "isResponsive": self.is_responsive}


@dataclass(frozen=True)
class PageLoadSpeedReport:
    speed_score: str = SPEED_SCORE_UNAVAILABLE
    recommendations: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {"speedScore": self.speed_score, "recommendations": list(self.recommendations)}


@dataclass(frozen=True)
class SchemaMarkupReport:
    """Parsed JSON-LD blocks in document order.

    ``errors`` holds parse failures for blocks that were skipped. The wire
    shape is the sentinel string when no block parsed, so callers can tell
    "no schema tags" apart from an empty list.
    """

    schemas: Tuple[Any, ...] = ()
    errors: Tuple[str, ...] = ()

    @property
    def found(self) -> bool:
        return len(self.schemas) > 0

    def to_dict(self) -> Any:
        if not self.found:
            return NO_SCHEMA_MARKUP
        return list(self.schemas)


@dataclass(frozen=True)
class TagReport:
    """Presence/content pair shared by canonical, robots, favicon and language."""

    presence: bool
    content: str

    def to_dict(self) -> Dict[str, Any]:
        return {"presence": self.presence, "content": self.content}


@dataclass(frozen=True)
class ReadabilityReport:
    score: float  # average words per sentence, 2 decimal places
    recommended: bool

    def to_dict(self) -> Dict[str, Any]:
        return {"score": self.score, "recommended": self.recommended}


@dataclass(frozen=True)
class OpenGraphTag:
    property: str
    content: Optional[str]

    def to_dict(self) -> Dict[str, Any]:
        return {"property": self.property, "content": self.content}


@dataclass(frozen=True)
class TwitterCardTag:
    name: str
    content: Optional[str]

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "content": self.content}


@dataclass(frozen=True)
class SocialTagsReport:
    open_graph: Tuple[OpenGraphTag, ...] = ()
    twitter_card: Tuple[TwitterCardTag, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "openGraph": [tag.to_dict() for tag in self.open_graph],
            "twitterCard": [tag.to_dict() for tag in self.twitter_card],
        }


@dataclass(frozen=True)
class BrokenLinksReport:
    links: Tuple[str, ...] = ()

    def to_dict(self) -> list:
        return list(self.links)


@dataclass(frozen=True)
class ContentUniquenessReport:
    unique: str = UNIQUENESS_UNAVAILABLE
    message: str = UNIQUENESS_NOT_IMPLEMENTED

    def to_dict(self) -> Dict[str, Any]:
        return {"unique": self.unique, "message": self.message}


@dataclass(frozen=True)
class PageReport:
    """All signals extracted from one page."""

    url: str
    title: TitleReport
    meta_description: MetaDescriptionReport
    headings: HeadingsReport
    keyword_density: KeywordDensityReport
    images: ImageReport
    internal_links: LinkReport
    external_links: LinkReport
    url_structure: URLStructureReport
    content_length: ContentLengthReport
    mobile_friendliness: MobileFriendlinessReport
    page_load_speed: PageLoadSpeedReport
    schema_markup: SchemaMarkupReport
    canonical_tags: TagReport
    robots_meta_tag: TagReport
    readability: ReadabilityReport
    social_tags: SocialTagsReport
    favicon: TagReport
    broken_links: BrokenLinksReport
    content_uniqueness: ContentUniquenessReport
    language_tag: TagReport
    analyzed_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def to_dict(self) -> Dict[str, Any]:
        """Signal name -> wire-shaped sub-report, in report order."""
        return {
            "title": self.title.to_dict(),
            "metaDescription": self.meta_description.to_dict(),
            "headings": self.headings.to_dict(),
            "keywordDensity": self.keyword_density.to_dict(),
            "images": self.images.to_dict(),
            "internalLinks": self.internal_links.to_dict(),
            "externalLinks": self.external_links.to_dict(),
            "urlStructure": self.url_structure.to_dict(),
            "contentLength": self.content_length.to_dict(),
            "mobileFriendliness": self.mobile_friendliness.to_dict(),
            "pageLoadSpeed": self.page_load_speed.to_dict(),
            "schemaMarkup": self.schema_markup.to_dict(),
            "canonicalTags": self.canonical_tags.to_dict(),
            "robotsMetaTag": self.robots_meta_tag.to_dict(),
            "readability": self.readability.to_dict(),
            "socialTags": self.social_tags.to_dict(),
            "favicon": self.favicon.to_dict(),
            "brokenLinks": self.broken_links.to_dict(),
            "contentUniqueness": self.content_uniqueness.to_dict(),
            "languageTag": self.language_tag.to_dict(),
        }

    def to_envelope(self) -> Dict[str, Any]:
        """Report wrapped in the success envelope returned to API callers."""
        return {
            "success": True,
            "data": self.to_dict(),
            "timestamp": self.analyzed_at.isoformat(),
        }
