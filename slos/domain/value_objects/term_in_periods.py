"""Loan term in periods value object."""

from dataclasses import dataclass

from slos.domain.errors import OutOfRangeError

MIN_TERM_IN_PERIODS = 1
MAX_TERM_IN_PERIODS = 360


@dataclass(frozen=True)
class TermInPeriods:
    """Number of monthly periods over which a loan is repaid."""

    periods: int

    def __post_init__(self) -> None:
        """Validate loan term."""
        if isinstance(self.periods, bool) or not isinstance(self.periods, int):
            raise TypeError(
                f"termInPeriods must be an integer, got {type(self.periods).__name__}"
            )
        if not MIN_TERM_IN_PERIODS <= self.periods <= MAX_TERM_IN_PERIODS:
            raise OutOfRangeError(
                "termInPeriods",
                actual_value=self.periods,
                minimum=MIN_TERM_IN_PERIODS,
                maximum=MAX_TERM_IN_PERIODS,
            )

    @classmethod
    def of(cls, value: "int | TermInPeriods") -> "TermInPeriods":
        """Build a term from a raw period count, passing instances through."""
        if isinstance(value, cls):
            return value
        return cls(periods=value)
