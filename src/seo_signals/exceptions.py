"""Exceptions raised by the signal-extraction pipeline."""

from typing import Optional


class SignalExtractionError(Exception):
    """Base class for pipeline failures that abort a whole analysis."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class MalformedInputError(SignalExtractionError):
    """Raised when the document handle or source URL cannot be used."""


class MalformedStructuredDataError(SignalExtractionError):
    """Raised when a JSON-LD block fails to parse in strict mode."""

    def __init__(self, message: str, block_index: Optional[int] = None):
        self.block_index = block_index
        super().__init__(message)


class AnalysisTimeoutError(SignalExtractionError):
    """Raised when an analysis exceeds its overall time budget."""


class FetchError(SignalExtractionError):
    """Raised when the target page cannot be fetched."""

    def __init__(self, message: str, url: str, status_code: Optional[int] = None):
        self.url = url
        self.status_code = status_code
        super().__init__(message)
