"""Payment DTOs."""

from decimal import Decimal

from pydantic import ConfigDict

from slos.application.dtos.base import DTO


class PaymentPlan(DTO):
    """Payment plan DTO."""

    principal: Decimal
    annual_percentage_rate: Decimal
    term_in_periods: int
    payment: Decimal
    total_paid: Decimal
    total_interest: Decimal

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "principal": "12000",
                "annual_percentage_rate": "12",
                "term_in_periods": 300,
                "payment": "126.39",
                "total_paid": "37917.00",
                "total_interest": "25917.00",
            }
        },
    )


class ScheduledPayment(DTO):
    """One row of an amortization schedule."""

    period: int
    payment: Decimal
    principal: Decimal
    interest: Decimal
    balance: Decimal


class AmortizationSchedule(DTO):
    """Amortization schedule DTO."""

    payment: Decimal
    payments: list[ScheduledPayment]
    total_interest: Decimal
    total_principal: Decimal
    total_paid: Decimal
