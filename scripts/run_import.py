"""Command-line entry point for importing employee data files."""
from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Optional

from hr_records.config import Settings
from hr_records.errors import SourceReadError
from hr_records.export.template import write_template
from hr_records.observability.logger import configure_logging
from hr_records.observability.reporting import persist_report
from hr_records.orchestration.importer import ImportService
from hr_records.store.employee_store import EmployeeStore
from hr_records.store.local_storage import LocalStorage


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    settings = Settings.from_env()
    parser = argparse.ArgumentParser(description="HR employee data importer")
    parser.add_argument(
        "input_path",
        nargs="?",
        default=None,
        help="XLSX/CSV/JSON/YAML file to import; omit to probe the data directory",
    )
    parser.add_argument(
        "--data-dir",
        dest="data_dir",
        default=str(settings.data_dir),
        help="Directory probed for DB.xlsx, DB.json, DB.yml, DB.csv",
    )
    parser.add_argument(
        "--storage",
        dest="storage_path",
        default=str(settings.storage_path),
        help="SQLite file holding the persisted employee list",
    )
    parser.add_argument(
        "--log",
        dest="log_path",
        default=str(settings.log_path) if settings.log_path else None,
        help="Optional path for JSONL execution logs",
    )
    parser.add_argument(
        "--report-json",
        dest="report_json",
        default=None,
        help="Optional path to store the import summary as JSON",
    )
    parser.add_argument(
        "--template",
        dest="template_path",
        default=None,
        help="Also write the sample import template to this .xlsx path",
    )
    return parser.parse_args(argv)


def main(argv: Optional[list[str]] = None) -> int:
    args = parse_args(argv)
    configure_logging(args.log_path)
    logger = logging.getLogger("runner")

    store = EmployeeStore(LocalStorage(args.storage_path))
    service = ImportService(store, logger=logging.getLogger("importer"))

    if args.template_path:
        path = write_template(args.template_path)
        logger.info("Template written", extra={"path": str(path)})

    if args.input_path:
        input_path = Path(args.input_path)
        logger.info("Loading records", extra={"path": str(input_path)})
        try:
            report = service.import_file(input_path)
        except SourceReadError as exc:
            logger.error(str(exc))
            return 1
    else:
        report = service.load_initial_data(args.data_dir)
        if report is None:
            logger.warning("No data file found; using stored employees", extra={"count": len(store)})
            return 0

    logger.info(
        "Import finished",
        extra={
            "applied": report.applied,
            "records": report.record_count,
            "invalid": report.invalid_count,
            "warnings": report.warning_count,
        },
    )
    for validation in report.validation:
        if validation.errors or validation.warnings:
            logger.warning(validation.summary())

    if args.report_json:
        persist_report(report, args.report_json)

    if not report.applied:
        logger.error("Import was not applied: %s", report.error or "unsupported file type")
        return 1

    return 0


if __name__ == "__main__":  # pragma: no cover - CLI entry
    raise SystemExit(main())
