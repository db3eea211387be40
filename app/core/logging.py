"""Structured JSON logging for the adapter process."""

import logging
import sys

from pythonjsonlogger.json import JsonFormatter

from app.core.config import settings

SECRET_MARKERS = ("KEY", "SECRET", "PASSWORD", "TOKEN")


class ContextFilter(logging.Filter):
    """Inject app name and environment into every log record."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.app_name = settings.APP_NAME
        record.environment = settings.ENVIRONMENT.value
        return True


def configure_logging() -> None:
    """Configure root logger once per process."""

    handler = logging.StreamHandler(sys.stdout)
    context_filter = ContextFilter()
    handler.addFilter(context_filter)
    handler.setFormatter(
        JsonFormatter(
            "%(asctime)s %(levelname)s %(name)s %(app_name)s %(environment)s %(message)s"
        )
    )

    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(settings.LOG_LEVEL)


def log_startup_config(keys: list[str]) -> None:
    """Log selected settings, redacting secret-like names."""

    config: dict[str, str] = {}
    for key in keys:
        if any(marker in key for marker in SECRET_MARKERS):
            config[key] = "<redacted>"
        else:
            config[key] = str(getattr(settings, key, "<unset>"))
    logging.getLogger(__name__).info(f"startup_config={config}")
