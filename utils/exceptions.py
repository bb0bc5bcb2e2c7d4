"""Custom exceptions for the font data extractor."""

from typing import Any, Optional


class FontExtractorError(Exception):
    """Base exception for all font extractor errors."""

    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message)
        self.details = details


class ConfigurationError(FontExtractorError):
    """Exception raised for invalid run configuration."""


class DocumentSourceError(FontExtractorError):
    """Exception raised when documents cannot be fetched."""


class ExtractionError(FontExtractorError):
    """Exception raised when a whole extraction run has to be aborted."""


class DocumentShapeError(FontExtractorError):
    """Exception raised when a document does not have the expected structure."""

    def __init__(self, kind: str):
        super().__init__(f"Document root must be an object, got {kind}")
