"""Calculate payment plan use case."""

from collections.abc import Sequence
from decimal import Decimal
from typing import Optional, Union

from slos.application.dtos.payment import AmortizationSchedule, PaymentPlan, ScheduledPayment
from slos.domain.errors import OutOfRangeError
from slos.domain.services.amortization import amortization_schedule
from slos.domain.value_objects.loan_terms import LoanTerms
from slos.domain.value_objects.term_in_periods import TermInPeriods
from slos.infrastructure.config.settings import settings
from slos.infrastructure.logging.logger import log_event, log_payment_calculation, log_term_rejected


class CalculatePaymentPlan:
    """Use case for calculating loan payment plans."""

    def __init__(self, default_terms: Optional[Sequence[int]] = None) -> None:
        """
        Initialize use case.

        Args:
            default_terms: Terms compared by calculate_multiple_plans when none are
                given (default: configured settings.default_plan_terms)
        """
        if default_terms is None:
            default_terms = settings.default_plan_terms
        self._default_terms = list(default_terms)

    @property
    def default_terms(self) -> list[int]:
        """Get default comparison terms."""
        return list(self._default_terms)

    def calculate(
        self,
        loan_terms: LoanTerms,
        term_in_periods: Union[int, TermInPeriods],
    ) -> PaymentPlan:
        """
        Calculate a payment plan.

        Args:
            loan_terms: Principal and annual percentage rate
            term_in_periods: Number of monthly periods

        Returns:
            Payment plan with payment and totals

        Raises:
            OutOfRangeError: If term_in_periods is outside [1, 360]
        """
        try:
            term = TermInPeriods.of(term_in_periods)
        except OutOfRangeError as e:
            log_term_rejected(e.actual_value, e.param_name)
            raise

        payment = loan_terms.compute_payment(term)

        # Totals come from the rounded payment so total_paid == payment * term
        total_paid = payment * term.periods
        total_interest = total_paid - loan_terms.principal

        log_payment_calculation(
            principal=loan_terms.principal,
            annual_percentage_rate=loan_terms.annual_percentage_rate,
            term_in_periods=term.periods,
            payment=payment,
        )

        return PaymentPlan(
            principal=loan_terms.principal,
            annual_percentage_rate=loan_terms.annual_percentage_rate,
            term_in_periods=term.periods,
            payment=payment,
            total_paid=total_paid,
            total_interest=total_interest,
        )

    def calculate_multiple_plans(
        self,
        loan_terms: LoanTerms,
        terms: Optional[Sequence[int]] = None,
    ) -> list[PaymentPlan]:
        """
        Calculate payment plans for several terms.

        Args:
            loan_terms: Principal and annual percentage rate
            terms: Terms in periods (default: configured comparison terms)

        Returns:
            Plans for the valid terms, in the given order
        """
        if terms is None:
            terms = self._default_terms

        plans = []
        for term in terms:
            try:
                plans.append(self.calculate(loan_terms, term))
            except OutOfRangeError:
                # Skip invalid terms
                continue

        return plans

    def build_schedule(
        self,
        loan_terms: LoanTerms,
        term_in_periods: Union[int, TermInPeriods],
    ) -> AmortizationSchedule:
        """
        Build the amortization schedule of a loan.

        Raises:
            OutOfRangeError: If term_in_periods is outside [1, 360]
        """
        try:
            table = amortization_schedule(
                loan_terms.principal, loan_terms.apr, term_in_periods
            )
        except OutOfRangeError as e:
            log_term_rejected(e.actual_value, e.param_name)
            raise

        payments = [
            ScheduledPayment(
                period=p.period,
                payment=p.payment,
                principal=p.principal,
                interest=p.interest,
                balance=p.balance,
            )
            for p in table.periods
        ]
        total_interest = sum((p.interest for p in table.periods), Decimal("0"))
        total_principal = sum((p.principal for p in table.periods), Decimal("0"))

        log_event(
            component="schedule",
            periods_scheduled=len(payments),
            total_interest=str(total_interest),
        )

        return AmortizationSchedule(
            payment=table.payment,
            payments=payments,
            total_interest=total_interest,
            total_principal=total_principal,
            total_paid=total_interest + total_principal,
        )
