"""
Logging configuration for Cloud Run and local environments.

Detects the Cloud Run environment and configures logging to match:
- Cloud Run: google-cloud-logging with trace correlation
- Local/Test: JSON lines on stdout
"""

import json
import logging
import os
from datetime import UTC, datetime


class JsonFormatter(logging.Formatter):
    """
    JSON log formatter.

    Local logs are structured the same way Google Cloud Logging expects them.
    """

    def format(self, record: logging.LogRecord) -> str:
        log_object = {
            "timestamp": datetime.now(UTC).isoformat(),
            "severity": record.levelname,
            "name": record.name,
            "message": record.getMessage(),
        }

        if hasattr(record, "extra_fields") and isinstance(record.extra_fields, dict):
            log_object.update(record.extra_fields)

        if record.exc_info:
            log_object["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_object, default=str)


def setup_global_logging(level: str | None = None) -> None:
    """
    Configure global logging based on environment.

    When running in Cloud Run (K_SERVICE env var is set), google-cloud-logging
    handles the records. Otherwise a single stdout handler with JsonFormatter
    is installed on the root logger.

    Args:
        level: Log level name; defaults to LOG_LEVEL or INFO.
    """
    level = (level or os.getenv("LOG_LEVEL", "INFO")).upper()
    is_cloud_run = os.getenv("K_SERVICE") is not None

    if is_cloud_run:
        try:
            import google.cloud.logging

            client = google.cloud.logging.Client()
            client.setup_logging(log_level=logging.getLevelName(level))
            logging.info("Cloud Logging initialized for Cloud Run.")
        except Exception as e:
            logging.basicConfig(
                level=level,
                format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            )
            logging.warning(f"Cloud Logging setup failed, using basic config: {e}")
    else:
        handler = logging.StreamHandler()
        handler.setFormatter(JsonFormatter())

        root_logger = logging.getLogger()
        for existing in list(root_logger.handlers):
            if isinstance(existing.formatter, JsonFormatter):
                root_logger.removeHandler(existing)
        root_logger.addHandler(handler)
        root_logger.setLevel(level)

        # httpx logs every request at INFO; the client already does
        logging.getLogger("httpx").setLevel(logging.WARNING)
