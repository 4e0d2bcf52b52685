"""Periodic payment computation for amortizing loans.

Pure functions: Decimal in, Decimal out. No I/O.
"""

from decimal import Decimal, localcontext
from typing import Union

from slos.domain.value_objects.apr import AnnualPercentageRate
from slos.domain.value_objects.money import DecimalLike, round_currency, to_decimal
from slos.domain.value_objects.term_in_periods import TermInPeriods

DECIMAL_PRECISION = 28


def compute_payment(
    principal: DecimalLike,
    annual_percentage_rate: Union[DecimalLike, AnnualPercentageRate],
    term_in_periods: Union[int, TermInPeriods],
) -> Decimal:
    """
    Compute the fixed periodic payment of an amortizing loan.

    Args:
        principal: Amount borrowed
        annual_percentage_rate: Yearly rate as a percentage (12 means 12%)
        term_in_periods: Number of monthly periods, between 1 and 360

    Returns:
        Payment per period rounded to cents

    Raises:
        OutOfRangeError: If term_in_periods is outside [1, 360]
    """
    # Term is validated before any arithmetic
    term = TermInPeriods.of(term_in_periods)
    amount = to_decimal(principal)
    apr = AnnualPercentageRate.of(annual_percentage_rate)

    with localcontext() as ctx:
        ctx.prec = DECIMAL_PRECISION
        periodic_rate = apr.periodic_rate

        if periodic_rate == 0:
            payment = amount / term.periods
        else:
            # A = P * r / (1 - (1 + r)^-n)
            one = Decimal(1)
            discount = (one + periodic_rate) ** -term.periods
            payment = amount * periodic_rate / (one - discount)

        return round_currency(payment)
