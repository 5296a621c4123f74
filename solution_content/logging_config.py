"""
Centralized Logging Configuration

Standard library logging for the content engine and the backend, with
optional Logfire export.

Features:
- One console format for every module logger
- Logfire handler + spans when USE_LOGFIRE=true and LOGFIRE_TOKEN is set
- Timed spans around normalization requests
"""

import logging
import os
import sys
import time
from contextlib import contextmanager
from typing import Optional

import logfire

# ═══════════════════════════════════════════════════════════════
# Configuration
# ═══════════════════════════════════════════════════════════════
SERVICE_NAME = os.getenv("LOGFIRE_SERVICE_NAME", "solution-content")
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

EMOJI = {
    "start": "🚀",
    "success": "✅",
    "error": "❌",
    "warning": "⚠️",
    "info": "ℹ️",
    "debug": "🔍",
    "time": "⏱️",
}


def _env_bool(name: str, default: bool) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.lower() in ("true", "1", "yes", "on")


# ═══════════════════════════════════════════════════════════════
# Setup
# ═══════════════════════════════════════════════════════════════
_configured = False
_logfire_ready = False


def _configure_logfire(service_name: str) -> bool:
    token = os.environ.get("LOGFIRE_TOKEN", "")
    if not token:
        logging.getLogger(__name__).warning("USE_LOGFIRE is set but LOGFIRE_TOKEN is empty; Logfire disabled")
        return False

    logfire.configure(
        token=token,
        service_name=service_name,
        environment=os.environ.get("LOGFIRE_ENVIRONMENT", "production"),
        console=False,
    )
    return True


def setup_logging(
    service_name: Optional[str] = None,
    level: str = "INFO",
    use_logfire: Optional[bool] = None,
) -> None:
    """
    Configure root logging once per process.

    Args:
        service_name: Service name reported to Logfire
        level: Root log level name (DEBUG, INFO, ...)
        use_logfire: Export to Logfire; defaults to the USE_LOGFIRE env var
    """
    global _configured, _logfire_ready

    if _configured:
        return

    final_service_name = service_name or SERVICE_NAME
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]

    if use_logfire is None:
        use_logfire = _env_bool("USE_LOGFIRE", False)

    if use_logfire:
        _logfire_ready = _configure_logfire(final_service_name)
        if _logfire_ready:
            handlers.append(logfire.LogfireLoggingHandler())

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        handlers=handlers,
    )

    _configured = True
    logging.getLogger(final_service_name).info(f"{EMOJI['start']} Logging configured for {final_service_name}")


def logfire_enabled() -> bool:
    return _logfire_ready


# ═══════════════════════════════════════════════════════════════
# Logger Factory
# ═══════════════════════════════════════════════════════════════
class ContentLogger:
    """Module logger with emoji prefixes and timed spans."""

    def __init__(self, name: str):
        self.name = name
        self._logger = logging.getLogger(name)

    def info(self, message: str, *args, **kwargs):
        self._logger.info(message, *args, **kwargs)

    def debug(self, message: str, *args, **kwargs):
        self._logger.debug(message, *args, **kwargs)

    def warning(self, message: str, *args, **kwargs):
        self._logger.warning(f"{EMOJI['warning']} {message}", *args, **kwargs)

    def error(self, message: str, error: Optional[Exception] = None, **kwargs):
        """Log error with optional exception details."""
        if error is not None:
            message = f"{message} ({type(error).__name__}: {error})"
        self._logger.error(f"{EMOJI['error']} {message}", **kwargs)

    def success(self, message: str):
        self._logger.info(f"{EMOJI['success']} {message}")

    @contextmanager
    def span(self, operation: str, **attributes):
        """Time an operation; also opens a Logfire span when Logfire is configured."""
        start_time = time.time()
        try:
            if _logfire_ready:
                with logfire.span(f"{self.name}.{operation}", **attributes) as span:
                    yield span
            else:
                yield None
        except Exception as e:
            duration_ms = round((time.time() - start_time) * 1000, 2)
            self.error(f"{operation} failed after {duration_ms}ms", error=e)
            raise
        duration_ms = round((time.time() - start_time) * 1000, 2)
        self.debug(f"{EMOJI['time']} {operation} completed in {duration_ms}ms")


def get_logger(name: str) -> ContentLogger:
    """Get a ContentLogger instance for the given name."""
    return ContentLogger(name)
