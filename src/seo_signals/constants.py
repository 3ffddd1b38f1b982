# src/seo_signals/constants.py
"""Centralized constants for signal extraction.

Placeholder strings and fixed report keys live here. For user-configurable
thresholds, see config.py and AnalysisThresholds.
"""

# =============================================================================
# Placeholders for absent elements
# =============================================================================

NO_META_DESCRIPTION = "No meta description"
MISSING_ALT_ATTRIBUTE = "Missing alt attribute"
NO_CANONICAL_TAG = "No canonical tag found"
NO_ROBOTS_META_TAG = "No robots meta tag found"
NO_FAVICON = "No favicon found"
NO_LANGUAGE_TAG = "No language tag found"
NO_SCHEMA_MARKUP = "No schema markup found"


# =============================================================================
# Stubbed signals
# =============================================================================

SPEED_SCORE_UNAVAILABLE = "N/A"
UNIQUENESS_UNAVAILABLE = "N/A"
UNIQUENESS_NOT_IMPLEMENTED = "Uniqueness check not implemented"


# =============================================================================
# Selectors
# =============================================================================

HEADING_TAGS = ("h1", "h2", "h3", "h4", "h5", "h6")
JSON_LD_SELECTOR = 'script[type="application/ld+json"]'
RESPONSIVE_VIEWPORT_TOKEN = "width=device-width"


# =============================================================================
# Report keys (wire names, in report order)
# =============================================================================

REPORT_KEYS = (
    "title",
    "metaDescription",
    "headings",
    "keywordDensity",
    "images",
    "internalLinks",
    "externalLinks",
    "urlStructure",
    "contentLength",
    "mobileFriendliness",
    "pageLoadSpeed",
    "schemaMarkup",
    "canonicalTags",
    "robotsMetaTag",
    "readability",
    "socialTags",
    "favicon",
    "brokenLinks",
    "contentUniqueness",
    "languageTag",
)


# =============================================================================
# Crawler Constants
# =============================================================================

# Default request timeout in seconds
DEFAULT_REQUEST_TIMEOUT_SECONDS = 30

# Default maximum retries for failed requests
DEFAULT_MAX_RETRIES = 3

# Base for exponential backoff calculation
EXPONENTIAL_BACKOFF_BASE = 2
