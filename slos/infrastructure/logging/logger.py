"""Structured logger for observability."""

import logging
from decimal import Decimal
from typing import Any

from slos.infrastructure.config.settings import settings

_logger = logging.getLogger("slos")
_logger.setLevel(settings.log_level.upper())

# Create console handler if not exists
if not _logger.handlers:
    handler = logging.StreamHandler()
    formatter = logging.Formatter(
        "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    handler.setFormatter(formatter)
    _logger.addHandler(handler)


def log_event(component: str, level: int = logging.INFO, **kwargs: Any) -> None:
    """
    Log a structured event.

    Args:
        component: Component name (e.g., 'payment', 'schedule')
        level: Log level (default: INFO)
        **kwargs: Additional structured fields to log
    """
    fields = {"component": component}
    fields.update(kwargs)

    # Format as key=value pairs for readability
    log_parts = [f"{k}={v!r}" for k, v in fields.items()]
    _logger.log(level, " | ".join(log_parts))


def log_payment_calculation(
    principal: Decimal,
    annual_percentage_rate: Decimal,
    term_in_periods: int,
    payment: Decimal,
    **kwargs: Any,
) -> None:
    """
    Log a completed payment calculation.

    Args:
        principal: Amount borrowed
        annual_percentage_rate: Yearly rate as a percentage
        term_in_periods: Number of monthly periods
        payment: Computed payment per period
        **kwargs: Additional fields
    """
    log_event(
        component="payment",
        payment_inputs={
            "principal": str(principal),
            "annual_percentage_rate": str(annual_percentage_rate),
            "term_in_periods": term_in_periods,
        },
        payment=str(payment),
        **kwargs,
    )


def log_term_rejected(term_in_periods: Any, param_name: str, **kwargs: Any) -> None:
    """Log a term that failed range validation."""
    log_event(
        component="validation",
        level=logging.WARNING,
        param_name=param_name,
        rejected_value=term_in_periods,
        **kwargs,
    )


logger = _logger
