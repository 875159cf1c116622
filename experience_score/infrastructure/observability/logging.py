"""Structured JSON logging for production observability"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict

from pythonjsonlogger.json import JsonFormatter

from experience_score.config import settings


class CustomJsonFormatter(JsonFormatter):
    """Custom JSON formatter with timestamp and service metadata"""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = settings.service_name


def setup_logging(level: str = "INFO") -> None:
    """Configure structured JSON logging"""
    logger = logging.getLogger()
    logger.setLevel(level)

    # Remove existing handlers
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    formatter = CustomJsonFormatter("%(timestamp)s %(level)s %(name)s %(message)s")
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def log_calculation(
    request_id: str,
    entry_count: int,
    valid_count: int,
    error_count: int,
    total_points: float,
    duration_ms: float,
) -> None:
    """Log structured calculation outcome"""
    logging.info(
        "Score calculated",
        extra={
            "request_id": request_id,
            "step": "score_complete",
            "entry_count": entry_count,
            "valid_count": valid_count,
            "error_count": error_count,
            "total_points": total_points,
            "duration_ms": duration_ms,
        },
    )
