"""
Logging configuration for the application.

``setup_logging`` configures the root logger with a console handler
and an optional file handler.  ``RequestLoggingMiddleware`` writes one
access line per HTTP request in the form
``METHOD path status content-length - elapsed ms``.
"""

import logging
import time
from pathlib import Path
from typing import Optional

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

access_logger = logging.getLogger("project_report_api.access")


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Attach console (and optional file) handlers to the root logger.

    Records are formatted with ``LOG_FORMAT`` and ``DATE_FORMAT``.  Does
    nothing when the root logger already has handlers, so repeated
    ``create_app()`` calls and test runners keep their own setup.

    Parameters
    ----------
    level : str
        Level name such as ``"DEBUG"``; unknown names fall back to INFO.
    logfile : Optional[str]
        Path of an extra log file (``LOG_FILE`` setting); skipped when empty.
    """
    logger = logging.getLogger()
    if logger.handlers:
        return

    numeric_level = getattr(logging, level.upper(), logging.INFO)
    logger.setLevel(numeric_level)

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if logfile:
        log_path = Path(logfile).resolve()
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log method, path, status, response size and latency of each request.

    A handler that raises is logged with status 500 before the exception
    propagates to the error handler.
    """

    async def dispatch(self, request: Request, call_next):
        start = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            self._log(request, 500, "-", start)
            raise
        self._log(request, response.status_code, response.headers.get("content-length", "-"), start)
        return response

    @staticmethod
    def _log(request: Request, status_code: int, length: str, start: float) -> None:
        access_logger.info(
            "%s %s %s %s - %.3f ms",
            request.method,
            request.url.path,
            status_code,
            length,
            (time.perf_counter() - start) * 1000,
        )
