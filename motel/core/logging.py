"""
Logging Configuration and Utilities

The request id set by the middleware is attached to every
record. Services log through ``get_logger`` with ``extra=`` fields; the
scheduled jobs use structlog key/value events from ``get_job_logger``.
Both end up on the same stdlib handlers.
"""

import logging
import logging.handlers
import sys
from contextvars import ContextVar
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional

import structlog
from pythonjsonlogger import jsonlogger

from motel.config.settings import settings

# Set per request by RequestIDMiddleware
request_id: ContextVar[Optional[str]] = ContextVar('request_id', default=None)

SENSITIVE_KEYS = ('password', 'token', 'secret', 'api_key', 'authorization')
REDACTED = '[REDACTED]'


def _redact(values: Dict[str, Any]) -> None:
    for key in list(values.keys()):
        if any(marker in key.lower() for marker in SENSITIVE_KEYS):
            values[key] = REDACTED
        elif isinstance(values[key], dict):
            _redact(values[key])


def add_request_context(logger, method_name, event_dict):
    """structlog processor: request id and deployment labels"""
    req_id = request_id.get()
    if req_id:
        event_dict['request_id'] = req_id
    event_dict['timestamp'] = datetime.now(timezone.utc).isoformat()
    event_dict['service'] = 'motel-management'
    event_dict['environment'] = settings.ENVIRONMENT
    return event_dict


def redact_sensitive(logger, method_name, event_dict):
    _redact(event_dict)
    return event_dict


class RedactingFilter(logging.Filter):
    """Masks credential-looking attributes that arrived through ``extra``"""

    def filter(self, record: logging.LogRecord) -> bool:
        for key in list(vars(record)):
            if any(marker in key.lower() for marker in SENSITIVE_KEYS):
                setattr(record, key, REDACTED)
        return True


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """JSON lines with location and request context"""

    def add_fields(self, log_record, record, message_dict):
        super().add_fields(log_record, record, message_dict)

        log_record['level'] = record.levelname
        log_record['logger'] = record.name
        log_record['function'] = record.funcName
        log_record['line'] = record.lineno

        if request_id.get():
            log_record['request_id'] = request_id.get()

        if record.exc_info:
            log_record['exception'] = self.formatException(record.exc_info)


class LoggingConfig:
    """Centralized logging configuration"""

    @staticmethod
    def configure_structured_logging():
        processors = [
            add_request_context,
            redact_sensitive,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer() if settings.LOG_FORMAT == "json"
            else structlog.processors.KeyValueRenderer(key_order=['event']),
        ]

        structlog.configure(
            processors=processors,
            wrapper_class=structlog.stdlib.BoundLogger,
            logger_factory=structlog.stdlib.LoggerFactory(),
            context_class=dict,
            cache_logger_on_first_use=True,
        )

    @staticmethod
    def _formatter() -> logging.Formatter:
        if settings.LOG_FORMAT == "json":
            return CustomJsonFormatter('%(asctime)s %(name)s %(levelname)s %(message)s')
        return logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')

    @staticmethod
    def configure_standard_logging():
        level = getattr(logging, settings.LOG_LEVEL, logging.INFO)
        formatter = LoggingConfig._formatter()
        redacting = RedactingFilter()

        handlers = [logging.StreamHandler(sys.stdout)]
        if settings.LOG_FILE:
            log_path = Path(settings.LOG_FILE)
            log_path.parent.mkdir(parents=True, exist_ok=True)
            handlers.append(
                logging.handlers.TimedRotatingFileHandler(log_path, when='midnight', backupCount=14)
            )

        root_logger = logging.getLogger()
        root_logger.setLevel(level)
        root_logger.handlers.clear()
        for handler in handlers:
            handler.setLevel(level)
            handler.setFormatter(formatter)
            handler.addFilter(redacting)
            root_logger.addHandler(handler)

        LoggingConfig._configure_library_loggers()

    @staticmethod
    def _configure_library_loggers():
        logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
        logging.getLogger("sqlalchemy.engine").setLevel(
            logging.INFO if settings.LOG_SQL_QUERIES else logging.WARNING
        )
        logging.getLogger("httpx").setLevel(logging.WARNING)
        logging.getLogger("celery").setLevel(logging.INFO)


class LoggerAdapter:
    """Thin wrapper forwarding ``extra`` fields to a stdlib logger"""

    def __init__(self, logger: logging.Logger):
        self.logger = logger

    def _log(self, level: int, message: str, *args, **kwargs):
        self.logger.log(level, message, *args, **kwargs)

    def debug(self, message: str, *args, **kwargs):
        self._log(logging.DEBUG, message, *args, **kwargs)

    def info(self, message: str, *args, **kwargs):
        self._log(logging.INFO, message, *args, **kwargs)

    def warning(self, message: str, *args, **kwargs):
        self._log(logging.WARNING, message, *args, **kwargs)

    def error(self, message: str, *args, **kwargs):
        self._log(logging.ERROR, message, *args, **kwargs)

    def exception(self, message: str, *args, **kwargs):
        kwargs.setdefault('exc_info', True)
        self._log(logging.ERROR, message, *args, **kwargs)


def get_logger(name: Optional[str] = None) -> LoggerAdapter:
    """
    Get configured logger instance.

    Args:
        name: Logger name (defaults to the package logger)
    """
    return LoggerAdapter(logging.getLogger(name or 'motel'))


def get_job_logger(name: str, **initial_values):
    """structlog logger for scheduled jobs, pre-bound with ``initial_values``"""
    return structlog.get_logger(name).bind(**initial_values)


def setup_logging():
    """Initialize logging configuration"""
    LoggingConfig.configure_structured_logging()
    LoggingConfig.configure_standard_logging()

    get_logger(__name__).info("Logging system initialized", extra={
        'log_level': settings.LOG_LEVEL,
        'log_format': settings.LOG_FORMAT,
    })


# Initialize logging when module is imported
setup_logging()

__all__ = [
    'get_logger',
    'get_job_logger',
    'setup_logging',
    'LoggerAdapter',
    'LoggingConfig',
    'request_id',
]
