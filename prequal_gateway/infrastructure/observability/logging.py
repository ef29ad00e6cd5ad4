"""Structured JSON logging for production observability"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional
from pythonjsonlogger import jsonlogger

from prequal_gateway.config import settings
from prequal_gateway.domain.models import AmortizationResult, EligibilityDecision


class CustomJsonFormatter(jsonlogger.JsonFormatter):
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

    # JSON handler for stdout
    handler = logging.StreamHandler(sys.stdout)
    formatter = CustomJsonFormatter(
        "%(timestamp)s %(level)s %(name)s %(message)s"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def log_decision(
    request_id: str,
    loan_type: str,
    decision: EligibilityDecision,
    requested_amount: Optional[float],
    duration_ms: float,
) -> None:
    """Log structured eligibility outcome for analysis"""
    logging.info(
        "Eligibility check completed",
        extra={
            "request_id": request_id,
            "loan_type": loan_type,
            "step": "eligibility_complete",
            "outcome": "eligible" if decision.eligible else "ineligible",
            "approval_tier": decision.approval_tier.value,
            "approval_probability_percent": decision.approval_probability_percent,
            "max_eligible_amount": decision.max_eligible_amount,
            "requested_amount": requested_amount,
            "reason_count": len(decision.reasons),
            "duration_ms": duration_ms,
        },
    )


def log_amortization(request_id: str, result: AmortizationResult) -> None:
    """Log structured EMI calculation for analysis"""
    logging.info(
        "EMI calculation completed",
        extra={
            "request_id": request_id,
            "step": "emi_complete",
            "term_months": result.term_months,
            "annual_rate_percent": result.annual_rate_percent,
            "emi": result.emi,
        },
    )
