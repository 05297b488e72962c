import json
import logging
import sys
from datetime import datetime, timezone

from siege_api.core.request_context import current_call

PACKAGE_LOGGER = "siege_api"

TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s [%(request_id)s %(call_path)s %(call_status)s] %(message)s"


class OutboundCallFilter(logging.Filter):
    """Copies the current outbound call onto each record."""

    def filter(self, record: logging.LogRecord) -> bool:
        call = current_call.get()
        record.request_id = call.request_id if call else "-"
        record.call_path = call.path if call else "-"
        record.call_status = call.status if call and call.status is not None else "-"
        return True


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "ts": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        request_id = getattr(record, "request_id", "-")
        if request_id != "-":
            payload["call"] = {
                "request_id": request_id,
                "path": getattr(record, "call_path", "-"),
                "status": getattr(record, "call_status", "-"),
            }
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=True)


def configure_logging(log_level: str = "INFO", log_format: str = "text") -> logging.Logger:
    """Send ``siege_api`` records to stdout; the root logger is left alone."""
    level = logging.getLevelName((log_level or "INFO").upper())
    if not isinstance(level, int):
        level = logging.INFO

    handler = logging.StreamHandler(sys.stdout)
    handler.addFilter(OutboundCallFilter())
    if (log_format or "").strip().lower() == "json":
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter(TEXT_FORMAT))

    logger = logging.getLogger(PACKAGE_LOGGER)
    for existing in list(logger.handlers):
        logger.removeHandler(existing)
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False

    # httpx logs every request line at INFO, query strings included
    logging.getLogger("httpx").setLevel(max(level, logging.WARNING))
    return logger
