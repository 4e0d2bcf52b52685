"""Amortization schedule computation."""

from dataclasses import dataclass
from decimal import Decimal, localcontext
from typing import Union

from slos.domain.services.payment_calculator import DECIMAL_PRECISION, compute_payment
from slos.domain.value_objects.apr import AnnualPercentageRate
from slos.domain.value_objects.money import DecimalLike, round_currency, to_decimal
from slos.domain.value_objects.term_in_periods import TermInPeriods


@dataclass(frozen=True)
class AmortizationPeriod:
    """One period of an amortization schedule."""

    period: int
    payment: Decimal
    principal: Decimal
    interest: Decimal
    balance: Decimal


@dataclass(frozen=True)
class AmortizationTable:
    """Regular payment of a loan and the periods that repay it."""

    payment: Decimal
    periods: list[AmortizationPeriod]


def amortization_schedule(
    principal: DecimalLike,
    annual_percentage_rate: Union[DecimalLike, AnnualPercentageRate],
    term_in_periods: Union[int, TermInPeriods],
) -> AmortizationTable:
    """
    Split each periodic payment into its interest and principal parts.

    The last period pays off whatever balance remains, so the schedule
    always ends at a zero balance. When rounding the payment up to cents
    retires the loan before the term ends, the schedule stops at the
    period that brings the balance to zero and has fewer rows than the term.

    Raises:
        OutOfRangeError: If term_in_periods is outside [1, 360]
    """
    term = TermInPeriods.of(term_in_periods)
    apr = AnnualPercentageRate.of(annual_percentage_rate)
    balance = to_decimal(principal)
    payment = compute_payment(balance, apr, term)

    periods: list[AmortizationPeriod] = []
    with localcontext() as ctx:
        ctx.prec = DECIMAL_PRECISION
        periodic_rate = apr.periodic_rate

        for period in range(1, term.periods + 1):
            interest = round_currency(balance * periodic_rate)
            principal_paid = payment - interest

            # Final payment adjustment
            if period == term.periods or principal_paid >= balance:
                principal_paid = balance
                actual_payment = interest + principal_paid
            else:
                actual_payment = payment

            balance -= principal_paid
            periods.append(
                AmortizationPeriod(
                    period=period,
                    payment=actual_payment,
                    principal=principal_paid,
                    interest=interest,
                    balance=round_currency(balance),
                )
            )
            if balance <= 0:
                break

    return AmortizationTable(payment=payment, periods=periods)
