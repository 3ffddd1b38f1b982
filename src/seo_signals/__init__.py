"""Single-page SEO signal extraction."""

__version__ = "0.1.0"

from seo_signals.analyzer import PageAnalyzer, analyze, analyze_sync
from seo_signals.config import AnalysisThresholds, Config
from seo_signals.crawler import PageFetcher
from seo_signals.document import Document
from seo_signals.exceptions import (
    AnalysisTimeoutError,
    FetchError,
    MalformedInputError,
    MalformedStructuredDataError,
    SignalExtractionError,
)
from seo_signals.links import LinkAnalyzer
from seo_signals.models import (
    PageReport,
    TitleReport,
    MetaDescriptionReport,
    HeadingsReport,
    KeywordDensityEntry,
    KeywordDensityReport,
    ImageEntry,
    ImageReport,
    LinkEntry,
    LinkReport,
    URLStructureReport,
    ContentLengthReport,
    MobileFriendlinessReport,
    PageLoadSpeedReport,
    SchemaMarkupReport,
    TagReport,
    ReadabilityReport,
    SocialTagsReport,
    BrokenLinksReport,
    ContentUniquenessReport,
)
from seo_signals.monitor import PageMonitor
from seo_signals.network import BrokenLinkChecker
from seo_signals.text_analysis import TextAnalyzer

__all__ = [
    # Core
    "PageAnalyzer",
    "analyze",
    "analyze_sync",
    "Document",
    "TextAnalyzer",
    "LinkAnalyzer",
    "BrokenLinkChecker",
    "PageFetcher",
    "PageMonitor",
    # Config
    "AnalysisThresholds",
    "Config",
    # Errors
    "SignalExtractionError",
    "MalformedInputError",
    "MalformedStructuredDataError",
    "AnalysisTimeoutError",
    "FetchError",
    # Models
    "PageReport",
    "TitleReport",
    "MetaDescriptionReport",
    "HeadingsReport",
    "KeywordDensityEntry",
    "KeywordDensityReport",
    "ImageEntry",
    "ImageReport",
    "LinkEntry",
    "LinkReport",
    "URLStructureReport",
    "ContentLengthReport",
    "MobileFriendlinessReport",
    "PageLoadSpeedReport",
    "SchemaMarkupReport",
    "TagReport",
    "ReadabilityReport",
    "SocialTagsReport",
    "BrokenLinksReport",
    "ContentUniquenessReport",
]
