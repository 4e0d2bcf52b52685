"""Loan terms value object."""

from dataclasses import dataclass
from decimal import Decimal
from typing import Union

from slos.domain.services.payment_calculator import compute_payment
from slos.domain.value_objects.apr import AnnualPercentageRate
from slos.domain.value_objects.money import to_decimal
from slos.domain.value_objects.term_in_periods import TermInPeriods


@dataclass(frozen=True)
class LoanTerms:
    """Principal and yearly rate of a loan, as supplied by the caller."""

    principal: Decimal
    annual_percentage_rate: Decimal  # As percentage (e.g., 1.79 for 1.79%)

    def __post_init__(self) -> None:
        """Normalize amounts to Decimal."""
        object.__setattr__(self, "principal", to_decimal(self.principal))
        object.__setattr__(
            self, "annual_percentage_rate", to_decimal(self.annual_percentage_rate)
        )

    @property
    def apr(self) -> AnnualPercentageRate:
        """Get the rate as an APR value object."""
        return AnnualPercentageRate(self.annual_percentage_rate)

    def compute_payment(self, term_in_periods: Union[int, TermInPeriods]) -> Decimal:
        """Compute the periodic payment for the given number of periods."""
        return compute_payment(self.principal, self.annual_percentage_rate, term_in_periods)
