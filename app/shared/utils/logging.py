# 📄 File: app/shared/utils/logging.py

# 🧭 Purpose (Layman Explanation):
# Sets up the app's diary. Every line says which request it belongs to, and important moments
# like a plant being watered or a task being finished are written down in a searchable way.

# 🧪 Purpose (Technical Summary):
# Root logger configuration (JSON via python-json-logger, or plain text), request/correlation IDs
# carried in contextvars, a StructuredLogger wrapper whose keyword fields land in ``extra_fields``,
# HTTP request timing records and business event records.

# 🔗 Dependencies:
# - python-json-logger: JSON log formatting
# - logging, contextvars (stdlib)

# 🔄 Connected Modules / Calls From:
# app.main (lifespan), request logging and error handling middleware, plant care service,
# health endpoints

import logging
import socket
import sys
from contextlib import contextmanager
from contextvars import ContextVar
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional
from uuid import uuid4

from pythonjsonlogger.json import JsonFormatter

from app.shared.config.settings import get_settings

SERVICE_NAME = 'plant-care-api'

request_id_var: ContextVar[str] = ContextVar('request_id', default='')
correlation_id_var: ContextVar[str] = ContextVar('correlation_id', default='')

_HOSTNAME = socket.gethostname() or 'unknown'
_NOISY_LOGGERS = ('asyncio', 'aiosqlite', 'sqlalchemy.engine')
_PASSTHROUGH_KWARGS = ('exc_info', 'stack_info', 'stacklevel')

_configured = False
_structured_loggers: Dict[str, "StructuredLogger"] = {}


def _context_fields() -> Dict[str, str]:
    """Service metadata plus whichever request IDs are bound right now."""
    fields = {
        'timestamp': datetime.now(timezone.utc).isoformat(),
        'service': SERVICE_NAME,
        'hostname': _HOSTNAME,
    }
    if request_id_var.get():
        fields['request_id'] = request_id_var.get()
    if correlation_id_var.get():
        fields['correlation_id'] = correlation_id_var.get()
    return fields


class ContextualFormatter(logging.Formatter):
    """Plain-text formatter for local development (LOG_FORMAT=text)."""

    def format(self, record: logging.LogRecord) -> str:
        record.request_id = ''
        record.correlation_id = ''
        for key, value in _context_fields().items():
            setattr(record, key, value)
        return super().format(record)


class JSONFormatter(JsonFormatter):
    """
    One JSON object per line.

    Standard record attributes are renamed (``levelname`` -> ``level`` and so
    on), request context is added at the top level and the structured
    fields of a StructuredLogger call are nested under ``extra``.
    """

    def __init__(self):
        super().__init__(
            '%(levelname)s %(name)s %(message)s %(module)s %(funcName)s %(lineno)d',
            rename_fields={'levelname': 'level', 'name': 'logger', 'funcName': 'function', 'lineno': 'line'},
            json_ensure_ascii=False,
        )

    def add_fields(self, log_record, record, message_dict):
        super().add_fields(log_record, record, message_dict)
        log_record.update(_context_fields())

        extra_fields = log_record.pop('extra_fields', None)
        if extra_fields:
            log_record['extra'] = extra_fields


class PerformanceLogger:
    def __init__(self, logger: logging.Logger):
        self.logger = logger

    def log_request(
        self,
        method: str,
        path: str,
        status_code: int,
        duration_ms: float,
        extra: Optional[Dict] = None
    ):
        """One record per HTTP request; server errors are logged at WARNING."""
        fields = {
            'event_type': 'http_request',
            'method': method,
            'path': path,
            'status_code': status_code,
            'duration_ms': round(duration_ms, 2),
        }
        fields.update(extra or {})

        self.logger.log(
            logging.WARNING if status_code >= 500 else logging.INFO,
            f"HTTP {method} {path} - {status_code} - {duration_ms:.2f}ms",
            extra={'extra_fields': fields},
        )


class StructuredLogger:
    """
    Thin wrapper over ``logging.Logger``.

    ``extra`` and any keyword arguments other than the stdlib pass-through
    ones are collected into a single ``extra_fields`` dict on the record.
    """

    def __init__(self, name: str):
        self.logger = logging.getLogger(name)
        self.performance = PerformanceLogger(self.logger)

    def log(self, level: int, message: str, extra: Optional[Dict] = None, **kwargs):
        fields = dict(extra or {})
        log_kwargs: Dict[str, Any] = {}
        for key, value in kwargs.items():
            if key in _PASSTHROUGH_KWARGS:
                log_kwargs[key] = value
            else:
                fields[key] = value

        if fields:
            log_kwargs['extra'] = {'extra_fields': fields}
        self.logger.log(level, message, **log_kwargs)

    def debug(self, message: str, extra: Optional[Dict] = None, **kwargs):
        self.log(logging.DEBUG, message, extra, **kwargs)

    def info(self, message: str, extra: Optional[Dict] = None, **kwargs):
        self.log(logging.INFO, message, extra, **kwargs)

    def warning(self, message: str, extra: Optional[Dict] = None, **kwargs):
        self.log(logging.WARNING, message, extra, **kwargs)

    def error(self, message: str, extra: Optional[Dict] = None, **kwargs):
        self.log(logging.ERROR, message, extra, **kwargs)

    def log_business_event(
        self,
        event_type: str,
        description: str,
        entity_id: Any = None,
        entity_type: Optional[str] = None,
        extra: Optional[Dict] = None
    ):
        """Record a domain event such as ``plant_watered`` or ``task_completed``."""
        fields: Dict[str, Any] = {'event_type': 'business_event', 'business_event_type': event_type}
        fields.update(extra or {})
        if entity_id is not None:
            fields['entity_id'] = entity_id
        if entity_type:
            fields['entity_type'] = entity_type

        self.info(description, extra=fields)


def _build_handlers(log_file: Optional[str], enable_console: bool) -> List[logging.Handler]:
    handlers: List[logging.Handler] = []
    if enable_console:
        handlers.append(logging.StreamHandler(sys.stdout))
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file))
    return handlers


def setup_logging(
    log_level: Optional[str] = None,
    log_format: Optional[str] = None,
    log_file: Optional[str] = None,
    enable_console: bool = True
) -> logging.Logger:
    """
    Configure the root logger once per process.

    Arguments override LOG_LEVEL, LOG_FORMAT and LOG_FILE from settings.
    Repeated calls return the "startup" logger without touching handlers.
    """
    global _configured

    if not _configured:
        settings = get_settings()
        level = getattr(logging, (log_level or settings.LOG_LEVEL).upper(), logging.INFO)

        if (log_format or settings.LOG_FORMAT).lower() == 'json':
            formatter: logging.Formatter = JSONFormatter()
        else:
            formatter = ContextualFormatter('%(timestamp)s - %(name)s - %(levelname)s - %(message)s')

        root = logging.getLogger()
        root.setLevel(level)
        for handler in list(root.handlers):
            root.removeHandler(handler)

        for handler in _build_handlers(log_file or settings.LOG_FILE, enable_console):
            handler.setLevel(level)
            handler.setFormatter(formatter)
            root.addHandler(handler)

        for name in _NOISY_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)

        _configured = True

    return logging.getLogger("startup")


def get_logger(name: str) -> StructuredLogger:
    """Cached StructuredLogger for ``name`` (usually ``__name__``)."""
    if name not in _structured_loggers:
        _structured_loggers[name] = StructuredLogger(name)
    return _structured_loggers[name]


@contextmanager
def log_context(
    request_id: Optional[str] = None, correlation_id: Optional[str] = None
) -> Iterator[Dict[str, Optional[str]]]:
    """Bind request and correlation IDs to every record logged inside the block."""
    request_id = request_id or str(uuid4())
    tokens = (
        request_id_var.set(request_id),
        correlation_id_var.set(correlation_id or ''),
    )
    try:
        yield {'request_id': request_id, 'correlation_id': correlation_id}
    finally:
        request_id_var.reset(tokens[0])
        correlation_id_var.reset(tokens[1])


def log_startup_event(service_name: str, version: str, extra: Optional[Dict] = None):
    get_logger('startup').info(
        f"Service {service_name} starting up",
        extra={'event_type': 'service_startup', 'service_name': service_name, 'version': version, **(extra or {})},
    )


def log_shutdown_event(service_name: str, extra: Optional[Dict] = None):
    get_logger('shutdown').info(
        f"Service {service_name} shutting down",
        extra={'event_type': 'service_shutdown', 'service_name': service_name, **(extra or {})},
    )
