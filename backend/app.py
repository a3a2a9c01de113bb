"""Minimal backend API for the HR employee records manager.

Routes:
  - GET    /healthz                 (health)
  - GET    /api/employees           (list; query: q, nationality, status, job, schedule)
  - GET    /api/employees/<id>      (single employee)
  - POST   /api/employees           (create; body is a label-keyed record)
  - PUT    /api/employees/<id>      (update)
  - DELETE /api/employees/<id>      (delete)
  - GET    /api/employees/next-id   (suggested employee number)
  - GET    /api/statistics          (totals and average salary)
  - GET    /api/filters             (distinct nationality/job/schedule values)
  - GET    /api/template            (sample xlsx download)
  - POST   /api/upload              (base64 XLSX/CSV/JSON/YAML -> replace employees)
  - POST   /api/reset               (clear all employees)

Env: see hr_records.config.Settings.
"""
from __future__ import annotations

import base64
import binascii
import json
import logging
import threading
from dataclasses import asdict
from http import HTTPStatus
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from pathlib import Path
from typing import Any, Dict
from urllib.parse import parse_qs, unquote, urlsplit

from hr_records.config import Settings
from hr_records.export.template import TEMPLATE_FILENAME, template_bytes
from hr_records.ingestion.normalizer import RecordNormalizer
from hr_records.mapping.field_mapping import DEFAULT_MAPPING
from hr_records.models import EmployeeRecord
from hr_records.observability.logger import configure_logging
from hr_records.observability.reporting import report_to_dict, validation_to_dict
from hr_records.orchestration.importer import ImportService
from hr_records.store.employee_store import EMPLOYEE_NUMBER, EmployeeFilter, EmployeeStore
from hr_records.store.local_storage import LocalStorage
from hr_records.validation.rules import EmployeeValidator

XLSX_CONTENT_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"

logger = logging.getLogger("backend")


class HRServer(ThreadingHTTPServer):
    """HTTP server that owns the employee store and import service.

    Request threads share one store; ``lock`` serializes every
    check-then-mutate-then-save sequence against it.
    """

    def __init__(self, address: tuple[str, int], settings: Settings) -> None:
        super().__init__(address, Handler)
        self.settings = settings
        self.store = EmployeeStore(LocalStorage(settings.storage_path), storage_key=settings.storage_key)
        self.importer = ImportService(self.store)
        self.validator = EmployeeValidator()
        self.normalizer = RecordNormalizer()
        self.lock = threading.Lock()

    def load(self) -> None:
        report = self.importer.load_initial_data(self.settings.data_dir)
        if report is None:
            logger.info("Using stored employees", extra={"count": len(self.store)})


class Handler(BaseHTTPRequestHandler):
    server: HRServer

    def log_message(self, format: str, *args: Any) -> None:  # noqa: A002
        logger.info(format % args)

    def do_GET(self) -> None:  # noqa: N802
        route, query = self._route()
        if route == "/healthz":
            self._send_json({"ok": True})
            return
        if route == "/api/employees":
            self._list_employees(query)
            return
        if route == "/api/employees/next-id":
            self._send_json({"employee_number": self.server.store.generate_id()})
            return
        if route.startswith("/api/employees/"):
            self._get_employee(self._employee_id(route))
            return
        if route == "/api/statistics":
            self._send_json(asdict(self.server.store.statistics()))
            return
        if route == "/api/filters":
            self._filters()
            return
        if route == "/api/template":
            self._send_bytes(template_bytes(), XLSX_CONTENT_TYPE, filename=TEMPLATE_FILENAME)
            return
        if route == "/":
            self._send_json({"service": "hr-records-api", "ok": True})
            return
        self._send_error_json(HTTPStatus.NOT_FOUND, "Unsupported endpoint")

    def do_OPTIONS(self) -> None:  # noqa: N802
        self.send_response(HTTPStatus.NO_CONTENT)
        self._write_cors()
        self.end_headers()

    def do_POST(self) -> None:  # noqa: N802
        route, _ = self._route()
        if route == "/api/upload":
            self._upload()
            return
        if route == "/api/employees":
            self._save_employee(create=True)
            return
        if route == "/api/reset":
            with self.server.lock:
                self.server.store.clear()
            self._send_json({"status": "reset"})
            return
        self._send_error_json(HTTPStatus.NOT_FOUND, "Unsupported endpoint")

    def do_PUT(self) -> None:  # noqa: N802
        route, _ = self._route()
        if route.startswith("/api/employees/"):
            self._save_employee(create=False, employee_id=self._employee_id(route))
            return
        self._send_error_json(HTTPStatus.NOT_FOUND, "Unsupported endpoint")

    def do_DELETE(self) -> None:  # noqa: N802
        route, _ = self._route()
        if not route.startswith("/api/employees/"):
            self._send_error_json(HTTPStatus.NOT_FOUND, "Unsupported endpoint")
            return
        store = self.server.store
        with self.server.lock:
            deleted = store.delete_by_id(self._employee_id(route))
            if deleted:
                store.save_to_storage()
        if not deleted:
            self._send_error_json(HTTPStatus.NOT_FOUND, "Employee not found")
            return
        self._send_json({"status": "deleted"})

    # ---- handlers -----------------------------------------------------
    def _list_employees(self, query: Dict[str, str]) -> None:
        criteria = EmployeeFilter(
            search=query.get("q", ""),
            nationality=query.get("nationality", ""),
            status=query.get("status", ""),
            job=query.get("job", ""),
            schedule=query.get("schedule", ""),
        )
        employees = self.server.store.apply_filters(criteria)
        self._send_json({"count": len(employees), "employees": employees})

    def _get_employee(self, employee_id: str) -> None:
        employee = self.server.store.get_by_id(employee_id)
        if employee is None:
            self._send_error_json(HTTPStatus.NOT_FOUND, "Employee not found")
            return
        self._send_json(employee)

    def _filters(self) -> None:
        store = self.server.store
        self._send_json(
            {
                "nationality": store.filter_options(DEFAULT_MAPPING.label_for("nationality")),
                "job": store.filter_options(DEFAULT_MAPPING.label_for("job_title")),
                "schedule": store.filter_options(DEFAULT_MAPPING.label_for("work_schedule")),
            }
        )

    def _save_employee(self, create: bool, employee_id: str | None = None) -> None:
        data = self._read_json()
        if data is None:
            return
        if not isinstance(data, dict):
            self._send_error_json(HTTPStatus.BAD_REQUEST, "Expected a JSON object")
            return

        store = self.server.store
        row = self.server.normalizer.normalize_row(data)
        if employee_id is not None:
            row[EMPLOYEE_NUMBER] = employee_id
        record = EmployeeRecord.from_dict(row)
        employee = record.to_dict()
        with self.server.lock:
            existing = [emp.get(EMPLOYEE_NUMBER) for emp in store.employees] if create else None
            result = self.server.validator.validate(record, existing_ids=existing)
            taken = create and store.is_id_taken(record.employee_number)
            saved = False
            if result.is_valid:
                if create:
                    store.add(employee)
                    saved = True
                else:
                    saved = store.update(employee)
                if saved:
                    store.save_to_storage()

        if not result.is_valid:
            status = HTTPStatus.CONFLICT if taken else HTTPStatus.BAD_REQUEST
            self._send_json({"status": "invalid", **validation_to_dict(result)}, status=status)
            return
        if not saved:
            self._send_error_json(HTTPStatus.NOT_FOUND, "Employee not found")
            return
        self._send_json(
            {"status": "saved", "employee": employee, "warnings": result.warnings},
            status=HTTPStatus.CREATED if create else HTTPStatus.OK,
        )

    def _upload(self) -> None:
        data = self._read_json()
        if data is None:
            return

        filename = str(data.get("filename", "")).strip() if isinstance(data, dict) else ""
        content = data.get("content") if isinstance(data, dict) else None
        if not filename or not content:
            self._send_error_json(HTTPStatus.BAD_REQUEST, "Missing filename or content")
            return

        base64_data = str(content).split(",", 1)[-1]
        try:
            file_bytes = base64.b64decode(base64_data, validate=True)
        except (ValueError, binascii.Error) as exc:
            self._send_error_json(HTTPStatus.BAD_REQUEST, f"Invalid base64: {exc}")
            return

        with self.server.lock:
            report = self.server.importer.import_content(file_bytes, Path(filename).suffix, source=filename)
        if report.unsupported:
            self._send_error_json(HTTPStatus.BAD_REQUEST, f"Unsupported file type: {Path(filename).suffix}")
            return
        if not report.applied:
            self._send_json({"status": "rejected", **report_to_dict(report)}, status=HTTPStatus.UNPROCESSABLE_ENTITY)
            return
        self._send_json({"status": "imported", **report_to_dict(report)})

    # ---- utils --------------------------------------------------------
    def _route(self) -> tuple[str, Dict[str, str]]:
        parts = urlsplit(self.path)
        query = {key: values[-1] for key, values in parse_qs(parts.query).items()}
        return parts.path.rstrip("/") or "/", query

    @staticmethod
    def _employee_id(route: str) -> str:
        return unquote(route.rsplit("/", 1)[-1])

    def _read_json(self) -> Any:
        try:
            length = int(self.headers.get("Content-Length", 0))
            if length < 0:
                raise ValueError(length)
        except ValueError:
            self._send_error_json(HTTPStatus.BAD_REQUEST, "Invalid Content-Length")
            return None
        payload = self.rfile.read(length)
        try:
            return json.loads(payload.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError):
            self._send_error_json(HTTPStatus.BAD_REQUEST, "Invalid JSON")
            return None

    def _allowed_origin(self) -> str:
        allowed = self.server.settings.allowed_origins
        origin = self.headers.get("Origin")
        if not origin:
            return "*" if "*" in allowed else allowed[0]
        if "*" in allowed or origin in allowed:
            return origin
        # fallback: deny by echoing none (browsers will block)
        return "null"

    def _write_cors(self) -> None:
        self.send_header("Access-Control-Allow-Origin", self._allowed_origin())
        self.send_header("Vary", "Origin")
        self.send_header("Access-Control-Allow-Methods", "GET,POST,PUT,DELETE,OPTIONS")
        self.send_header("Access-Control-Allow-Headers", "Content-Type, Authorization")

    def _send_json(self, obj: Any, status: int = HTTPStatus.OK) -> None:
        body = json.dumps(obj, ensure_ascii=False).encode("utf-8")
        self.send_response(status)
        self._write_cors()
        self.send_header("Content-Type", "application/json; charset=utf-8")
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)

    def _send_error_json(self, status: int, message: str) -> None:
        self._send_json({"error": message}, status=status)

    def _send_bytes(self, body: bytes, content_type: str, filename: str) -> None:
        self.send_response(HTTPStatus.OK)
        self._write_cors()
        self.send_header("Content-Type", content_type)
        self.send_header("Content-Disposition", f'attachment; filename="{filename}"')
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)


def build_server(settings: Settings, host: str = "") -> HRServer:
    server = HRServer((host, settings.port), settings)
    server.load()
    return server


def main() -> int:
    settings = Settings.from_env()
    configure_logging(settings.log_path)
    httpd = build_server(settings)
    logger.info("Serving", extra={"port": settings.port})
    try:
        httpd.serve_forever()
    finally:
        httpd.server_close()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
