"""Exception hierarchy for HR record ingestion and storage."""
from __future__ import annotations


class HRRecordsError(Exception):
    """Base exception for all hr_records failures."""


class ConfigError(HRRecordsError):
    """Raised for invalid runtime configuration."""


class SourceReadError(HRRecordsError):
    """Raised when a source file cannot be read from disk."""


class DecodeError(HRRecordsError):
    """Raised by a format decoder for malformed content.

    Never escapes the decode boundary; RecordDecoder turns it into a
    DecodeResult error message.
    """


__all__ = ["ConfigError", "DecodeError", "HRRecordsError", "SourceReadError"]
