"""JSON log lines for account operations: one line per dispatch or discarded input"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional
from pythonjsonlogger import jsonlogger

from bank_account.config import settings
from bank_account.domain.models import Transition


class AccountJsonFormatter(jsonlogger.JsonFormatter):
    """Stamps each line with UTC time, level and the configured service name"""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = settings.service_name


def setup_logging(level: str = "INFO") -> None:
    """Route every logger through a single stdout handler emitting account JSON lines"""
    logger = logging.getLogger()
    logger.setLevel(level)

    # Remove existing handlers
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    formatter = AccountJsonFormatter(
        "%(timestamp)s %(level)s %(name)s %(message)s"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def log_transition(request_id: Optional[str], operation: str, result: Transition) -> None:
    """Log one dispatched operation with the resulting balance and loan"""
    logging.info(
        "Operation applied" if result.changed else "Operation rejected",
        extra={
            "request_id": request_id,
            "operation": operation,
            "outcome": "applied" if result.changed else "rejected",
            "balance": result.state.balance,
            "loan_outstanding": result.state.loan_outstanding,
            "is_active": result.state.is_active,
            "notice": result.notice,
        },
    )


def log_discarded_input(request_id: Optional[str], field: str) -> None:
    """Log raw pending-amount text that was not a whole number and was not dispatched"""
    logging.info(
        "Discarded non-numeric input",
        extra={
            "request_id": request_id,
            "field": field,
            "outcome": "discarded",
        },
    )
