# ============================================================================
# src/medical_extraction/utils/logging.py
# ============================================================================
"""
Logging helpers for the extraction engine.

Modules log through ``logging.getLogger(__name__)`` and nothing is
configured on import. A host that wants the engine's own output calls
setup_logging(), which attaches handlers to the ``medical_extraction``
logger only and leaves the root logger to the host.
"""

import functools
import json
import logging
import sys
import time
from datetime import datetime, timezone
from pathlib import Path
from typing import List, Optional

PACKAGE_LOGGER = "medical_extraction"

TEXT_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

# Attributes hosts and the dispatcher attach with extra=
EXTRA_FIELDS = ('document_type', 'processor')


def _build_handlers(formatter: logging.Formatter, log_file: Optional[Path]) -> List[logging.Handler]:
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding='utf-8'))

    for handler in handlers:
        handler.setFormatter(formatter)
    return handlers


def setup_logging(
    level: str = "INFO",
    log_file: Optional[Path] = None,
    format_json: bool = False
) -> logging.Logger:
    """
    Attach handlers to the engine's package logger.

    Calling it again replaces the handlers from the previous call.

    Args:
        level: DEBUG, INFO, WARNING, ERROR or CRITICAL
        log_file: Also write records to this file
        format_json: One JSON object per record instead of plain text

    Returns:
        The configured package logger
    """
    formatter = JsonFormatter() if format_json else logging.Formatter(TEXT_FORMAT)

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()

    for handler in _build_handlers(formatter, log_file):
        package_logger.addHandler(handler)

    package_logger.setLevel(level.upper())
    package_logger.propagate = False
    return package_logger


def setup_logging_from_settings() -> logging.Logger:
    """setup_logging() driven by the LOG_* environment settings."""
    from ..config import logging_settings

    return setup_logging(
        level=logging_settings.LOG_LEVEL,
        log_file=logging_settings.LOG_FILE,
        format_json=logging_settings.LOG_FORMAT_JSON,
    )


class JsonFormatter(logging.Formatter):
    """Single-line JSON records."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            'timestamp': datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
            'location': f"{record.module}.{record.funcName}:{record.lineno}",
        }

        for key in EXTRA_FIELDS:
            value = getattr(record, key, None)
            if value is not None:
                payload[key] = value

        if record.exc_info:
            payload['exception'] = self.formatException(record.exc_info)

        return json.dumps(payload, default=str)


def log_performance(logger: logging.Logger, operation: str, level: int = logging.DEBUG):
    """
    Log how long the wrapped call took.

    A failing call is logged at ERROR with its elapsed time and the
    exception is re-raised unchanged.
    """
    def decorator(func):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            started = time.perf_counter()
            try:
                result = func(*args, **kwargs)
            except Exception as e:
                elapsed = time.perf_counter() - started
                logger.error(f"{operation} failed after {elapsed * 1000:.1f}ms: {e}")
                raise

            elapsed = time.perf_counter() - started
            logger.log(level, f"{operation} took {elapsed * 1000:.1f}ms")
            return result

        return wrapper
    return decorator
