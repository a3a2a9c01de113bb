"""Import coordination: decode sources, validate, and replace the store content."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Sequence

from ..errors import SourceReadError
from ..ingestion.decoder import DecodeResult, RecordDecoder, SourceFormat, read_source
from ..models import ValidationResult, records_from_iterable
from ..store.employee_store import EmployeeStore
from ..validation.rules import EmployeeValidator

# Probed in priority order; the first non-empty file wins.
INITIAL_DATA_FILES: Sequence[str] = ("DB.xlsx", "DB.json", "DB.yml", "DB.csv")


@dataclass(slots=True)
class ImportReport:
    source: str
    source_format: Optional[SourceFormat] = None
    record_count: int = 0
    error: Optional[str] = None
    unsupported: bool = False
    applied: bool = False
    validation: List[ValidationResult] = field(default_factory=list)

    @property
    def warning_count(self) -> int:
        return sum(len(result.warnings) for result in self.validation)

    @property
    def invalid_count(self) -> int:
        return sum(1 for result in self.validation if not result.is_valid)


class ImportService:
    """Coordinates decoding, validation and store replacement."""

    def __init__(
        self,
        store: EmployeeStore,
        decoder: RecordDecoder | None = None,
        validator: EmployeeValidator | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self.store = store
        self.decoder = decoder or RecordDecoder()
        self.validator = validator or EmployeeValidator()
        self.logger = logger or logging.getLogger(self.__class__.__name__)

    def import_file(self, file_path: str | Path) -> ImportReport:
        """Import a user-chosen file, replacing the current employees.

        Raises:
            SourceReadError: If the file cannot be read.
        """
        content, extension = read_source(file_path)
        return self.import_content(content, extension, source=str(file_path))

    def import_content(self, content: bytes | str, extension: str, source: str = "<upload>") -> ImportReport:
        result = self.decoder.decode(content, extension)
        report = self._report_for(source, result)
        if not result.records:
            if result.ok:
                report.error = "The data file is empty or contains no records"
            self.logger.warning(
                "Import not applied",
                extra={"source": source, "error": report.error, "unsupported": report.unsupported},
            )
            return report

        self.store.restore(result.records)
        self.store.save_to_storage()
        report.applied = True
        self.logger.info("Imported employees", extra={"source": source, "count": report.record_count})
        return report

    def load_initial_data(self, data_dir: str | Path) -> Optional[ImportReport]:
        """Load the first pre-packaged data file found in ``data_dir``.

        Falls back to the persisted employees when no candidate yields records.
        Returns the report of the file that was applied, or None.
        """
        base = Path(data_dir)
        for name in INITIAL_DATA_FILES:
            path = base / name
            if not path.is_file():
                continue
            self.logger.info("Found database file", extra={"path": str(path)})
            try:
                report = self.import_file(path)
            except SourceReadError as exc:
                self.logger.warning("Could not read database file", extra={"path": str(path), "error": str(exc)})
                continue
            if report.applied:
                return report

        self.store.load_from_storage()
        return None

    def _report_for(self, source: str, result: DecodeResult) -> ImportReport:
        records = records_from_iterable(result.records)
        return ImportReport(
            source=source,
            source_format=result.source_format,
            record_count=len(result.records),
            error=result.error,
            unsupported=result.unsupported,
            validation=self.validator.validate_many(records),
        )


__all__ = ["INITIAL_DATA_FILES", "ImportReport", "ImportService"]
