"""Annual Percentage Rate value object."""

from dataclasses import dataclass
from decimal import Decimal

from slos.domain.value_objects.money import DecimalLike, to_decimal

PERIODS_PER_YEAR = 12


@dataclass(frozen=True)
class AnnualPercentageRate:
    """Annual Percentage Rate value object."""

    percentage: Decimal  # As percentage (e.g., 12 for 12%)

    def __post_init__(self) -> None:
        """Normalize the percentage to Decimal."""
        object.__setattr__(self, "percentage", to_decimal(self.percentage))

    @classmethod
    def of(cls, value: "DecimalLike | AnnualPercentageRate") -> "AnnualPercentageRate":
        """Build an APR from a raw percentage, passing APR instances through."""
        if isinstance(value, cls):
            return value
        return cls(percentage=value)

    @property
    def periodic_rate(self) -> Decimal:
        """Get monthly interest rate."""
        return self.percentage / 100 / PERIODS_PER_YEAR
