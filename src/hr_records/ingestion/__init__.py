"""Ingestion utilities."""
from .dates import format_display_date, format_input_date, parse_flexible_date
from .decoder import DecodeResult, RecordDecoder, SourceFormat, read_source
from .normalizer import RecordNormalizer

__all__ = [
    "DecodeResult",
    "RecordDecoder",
    "RecordNormalizer",
    "SourceFormat",
    "format_display_date",
    "format_input_date",
    "parse_flexible_date",
    "read_source",
]
