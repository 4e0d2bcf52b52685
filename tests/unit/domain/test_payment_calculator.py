"""Unit tests for compute_payment."""

from decimal import Decimal, localcontext

import pytest

from slos.domain.errors import OutOfRangeError
from slos.domain.services.payment_calculator import compute_payment
from slos.domain.value_objects.apr import AnnualPercentageRate
from slos.domain.value_objects.term_in_periods import TermInPeriods

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1


class TestComputePayment:
    """Test cases for compute_payment."""

    def test_term_300_at_12_percent(self) -> None:
        """Test payment for 12000 at 12% over 300 months is 126.39."""
        actual = compute_payment(Decimal("12000"), Decimal("12"), 300)

        assert actual == Decimal("126.39")

    @pytest.mark.parametrize(
        "principal,annual_percentage_rate,term_in_periods,expected",
        [
            (Decimal("7499"), Decimal("1.79"), 113, Decimal("72.16")),
            (Decimal("8753"), Decimal("6.53"), 139, Decimal("89.92")),
        ],
    )
    def test_provided_loan_data(
        self,
        principal: Decimal,
        annual_percentage_rate: Decimal,
        term_in_periods: int,
        expected: Decimal,
    ) -> None:
        """Test payments for known loans."""
        actual = compute_payment(principal, annual_percentage_rate, term_in_periods)

        assert actual == expected

    @pytest.mark.parametrize(
        "term_in_periods", [0, -1, -73, INT_MIN, 361, 2039, INT_MAX]
    )
    def test_invalid_term_raises_out_of_range(self, term_in_periods: int) -> None:
        """Test that terms outside [1, 360] are rejected."""
        with pytest.raises(OutOfRangeError) as exc_info:
            compute_payment(Decimal("7499"), Decimal("1.79"), term_in_periods)

        assert exc_info.value.param_name == "termInPeriods"
        assert exc_info.value.message == (
            "Specified argument was out of the range of valid values."
        )
        assert exc_info.value.actual_value == term_in_periods

    def test_term_367_is_rejected(self) -> None:
        """Test that a 367 month term is rejected rather than computed."""
        with pytest.raises(OutOfRangeError):
            compute_payment(Decimal("61331"), Decimal("7.09"), 367)

    def test_out_of_range_is_a_value_error(self) -> None:
        """Test that callers catching ValueError also see range failures."""
        with pytest.raises(ValueError, match="out of the range of valid values"):
            compute_payment(Decimal("7499"), Decimal("1.79"), 0)

    @pytest.mark.parametrize("term_in_periods", [1, 12, 113, 359, 360])
    def test_result_has_two_decimal_places(self, term_in_periods: int) -> None:
        """Test that every valid term yields a result rounded to cents."""
        actual = compute_payment(Decimal("7499"), Decimal("1.79"), term_in_periods)

        assert actual.as_tuple().exponent == -2
        assert actual > 0

    def test_zero_rate_is_straight_line(self) -> None:
        """Test that a zero rate divides the principal evenly."""
        actual = compute_payment(Decimal("12000"), Decimal("0"), 300)

        assert actual == Decimal("40.00")

    def test_single_period_repays_principal_plus_interest(self) -> None:
        """Test that a one period loan repays principal plus one month of interest."""
        actual = compute_payment(Decimal("12000"), Decimal("12"), 1)

        assert actual == Decimal("12120.00")

    def test_longer_term_lowers_payment(self) -> None:
        """Test that a longer term gives a smaller payment."""
        short = compute_payment(Decimal("12000"), Decimal("12"), 60)
        long = compute_payment(Decimal("12000"), Decimal("12"), 300)

        assert long < short

    def test_is_idempotent(self) -> None:
        """Test that identical inputs give identical outputs."""
        first = compute_payment(Decimal("8753"), Decimal("6.53"), 139)
        second = compute_payment(Decimal("8753"), Decimal("6.53"), 139)

        assert first == second

    def test_accepts_int_and_float_inputs(self) -> None:
        """Test that plain numbers are converted without binary rounding artifacts."""
        actual = compute_payment(7499, 1.79, 113)

        assert actual == Decimal("72.16")

    def test_accepts_value_objects(self) -> None:
        """Test that APR and term value objects are accepted directly."""
        actual = compute_payment(
            Decimal("12000"),
            AnnualPercentageRate(Decimal("12")),
            TermInPeriods(300),
        )

        assert actual == Decimal("126.39")

    def test_ignores_caller_decimal_context(self) -> None:
        """Test that a low precision caller context does not change the result."""
        with localcontext() as ctx:
            ctx.prec = 4
            actual = compute_payment(Decimal("12000"), Decimal("12"), 300)

        assert actual == Decimal("126.39")
