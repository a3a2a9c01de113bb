"""Spreadsheet/CSV/JSON/YAML decoding into canonical employee rows."""
from __future__ import annotations

import csv
import enum
import io
import json
import logging
import re
from dataclasses import dataclass, field
from datetime import date, datetime
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Tuple

from ..errors import DecodeError, SourceReadError
from .normalizer import RecordNormalizer

_LINE_BREAK = re.compile(r"\r?\n")


class SourceFormat(str, enum.Enum):
    SPREADSHEET = "spreadsheet"
    CSV = "csv"
    JSON = "json"
    YAML = "yaml"

    @classmethod
    def from_extension(cls, extension: Optional[str]) -> Optional["SourceFormat"]:
        token = str(extension or "").strip().lower().lstrip(".")
        return EXTENSION_FORMATS.get(token)

    @property
    def is_binary(self) -> bool:
        return self is SourceFormat.SPREADSHEET


EXTENSION_FORMATS: Dict[str, SourceFormat] = {
    "xlsx": SourceFormat.SPREADSHEET,
    "xls": SourceFormat.SPREADSHEET,
    "csv": SourceFormat.CSV,
    "json": SourceFormat.JSON,
    "yml": SourceFormat.YAML,
    "yaml": SourceFormat.YAML,
}


@dataclass(slots=True)
class DecodeResult:
    """Outcome of one decode call.

    ``records`` is always a fresh list. ``error`` carries a user-facing message
    for malformed content; ``unsupported`` marks an unknown extension token.
    """

    records: List[dict[str, Any]] = field(default_factory=list)
    source_format: Optional[SourceFormat] = None
    error: Optional[str] = None
    unsupported: bool = False

    @property
    def ok(self) -> bool:
        return self.error is None and not self.unsupported


class RecordDecoder:
    """Decodes raw file content by declared extension and normalizes the rows."""

    def __init__(
        self,
        normalizer: RecordNormalizer | None = None,
        encoding: str = "utf-8-sig",
        logger: logging.Logger | None = None,
    ) -> None:
        self.normalizer = normalizer or RecordNormalizer()
        self.encoding = encoding
        self.logger = logger or logging.getLogger(self.__class__.__name__)
        self._decoders: Dict[SourceFormat, Callable[[bytes | str], List[dict[str, Any]]]] = {
            SourceFormat.SPREADSHEET: self._decode_spreadsheet,
            SourceFormat.CSV: self._decode_csv,
            SourceFormat.JSON: self._decode_json,
            SourceFormat.YAML: self._decode_yaml,
        }

    def decode(self, content: bytes | str, extension: Optional[str]) -> DecodeResult:
        source_format = SourceFormat.from_extension(extension)
        if source_format is None:
            self.logger.warning("Unsupported source format", extra={"extension": extension})
            return DecodeResult(unsupported=True)

        try:
            rows = self._decoders[source_format](content)
        except Exception as exc:
            message = f"Failed to parse {source_format.value} data: {exc}"
            self.logger.error(message, extra={"source_format": source_format.value})
            return DecodeResult(source_format=source_format, error=message)

        records = self.normalizer.normalize_rows(rows)
        self.logger.info(
            "Decoded records",
            extra={"source_format": source_format.value, "count": len(records)},
        )
        return DecodeResult(records=records, source_format=source_format)

    def decode_file(self, file_path: str | Path) -> DecodeResult:
        content, extension = read_source(file_path)
        return self.decode(content, extension)

    # ---- per-format decoders ------------------------------------------
    def _decode_spreadsheet(self, content: bytes | str) -> List[dict[str, Any]]:
        if isinstance(content, str):
            raise DecodeError("spreadsheet content must be binary")
        try:
            from openpyxl import load_workbook
        except ImportError as exc:  # pragma: no cover - declared dependency
            raise RuntimeError(
                "openpyxl is required to read Excel files. Install it with 'pip install openpyxl'."
            ) from exc

        workbook = load_workbook(filename=io.BytesIO(content), read_only=True, data_only=True)
        try:
            if not workbook.worksheets:
                return []
            sheet = workbook.worksheets[0]
            rows: List[dict[str, Any]] = []
            header: List[str] = []
            for row_idx, row in enumerate(sheet.iter_rows(values_only=True), start=1):
                if row_idx == 1:
                    header = [_cell_text(cell) for cell in row]
                    continue
                cells = list(row) + [None] * max(0, len(header) - len(row))
                record = {header[idx]: _cell_text(cells[idx]) for idx in range(len(header)) if header[idx]}
                if any(value for value in record.values()):
                    rows.append(record)
            return rows
        finally:
            workbook.close()

    def _decode_csv(self, content: bytes | str) -> List[dict[str, Any]]:
        text = self._as_text(content)
        lines = _LINE_BREAK.split(text.strip())
        if len(lines) < 2:
            return []
        # One reader per line: an unbalanced quote must not swallow later rows.
        headers = [header.strip() for header in _split_csv_line(lines[0])]
        rows: List[dict[str, Any]] = []
        for line in lines[1:]:
            values = [value.strip() for value in _split_csv_line(line)]
            rows.append(
                {header: (values[idx] if idx < len(values) else "") for idx, header in enumerate(headers)}
            )
        return rows

    def _decode_json(self, content: bytes | str) -> List[dict[str, Any]]:
        payload = json.loads(self._as_text(content))
        return _rows_from_sequence(payload, "JSON")

    def _decode_yaml(self, content: bytes | str) -> List[dict[str, Any]]:
        try:
            import yaml
        except ImportError as exc:  # pragma: no cover - declared dependency
            raise RuntimeError("YAML support requires PyYAML. Install it with 'pip install pyyaml'.") from exc

        payload = yaml.safe_load(self._as_text(content))
        if payload is None:
            return []
        return _rows_from_sequence(payload, "YAML")

    def _as_text(self, content: bytes | str) -> str:
        if isinstance(content, bytes):
            return content.decode(self.encoding)
        return content


def _split_csv_line(line: str) -> List[str]:
    return next(csv.reader([line]), [])


def read_source(file_path: str | Path, encoding: str = "utf-8-sig") -> Tuple[bytes | str, str]:
    """Read a source file as bytes (spreadsheets) or text (everything else).

    Returns the content together with the lower-cased extension token.
    """
    path = Path(file_path)
    extension = path.suffix.lower().lstrip(".")
    source_format = SourceFormat.from_extension(extension)
    try:
        if source_format is not None and not source_format.is_binary:
            return path.read_text(encoding=encoding), extension
        return path.read_bytes(), extension
    except (OSError, UnicodeDecodeError) as exc:
        raise SourceReadError(f"Failed to read source file {path}: {exc}") from exc


def _rows_from_sequence(payload: Any, kind: str) -> List[dict[str, Any]]:
    if not isinstance(payload, list):
        raise DecodeError(f"expected a {kind} array of records, got {type(payload).__name__}")
    rows: List[dict[str, Any]] = []
    for index, item in enumerate(payload):
        if not isinstance(item, dict):
            raise DecodeError(f"{kind} item {index} is not an object of fields")
        rows.append({str(key): _cell_text(value) for key, value in item.items()})
    return rows


def _cell_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (list, dict)):
        return json.dumps(value, ensure_ascii=False)
    return str(value).strip()


def decode(content: bytes | str, extension: Optional[str]) -> DecodeResult:
    """Decode with a default RecordDecoder."""
    return RecordDecoder().decode(content, extension)


__all__ = [
    "DecodeResult",
    "EXTENSION_FORMATS",
    "RecordDecoder",
    "SourceFormat",
    "decode",
    "read_source",
]
