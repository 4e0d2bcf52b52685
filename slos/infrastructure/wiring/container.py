"""Dependency injection container."""

from slos.application.use_cases.calculate_payment_plan import CalculatePaymentPlan
from slos.infrastructure.config.settings import Settings, settings


class Container:
    """Dependency injection container."""

    def __init__(self, app_settings: Settings = settings) -> None:
        """Initialize container with dependencies."""
        self._settings = app_settings

        # Use cases
        self._calculate_payment_plan = CalculatePaymentPlan(
            default_terms=self._settings.default_plan_terms
        )

    @property
    def calculate_payment_plan(self) -> CalculatePaymentPlan:
        """Get calculate payment plan use case."""
        return self._calculate_payment_plan

    @property
    def settings(self) -> Settings:
        """Get application settings."""
        return self._settings


# Global container instance
container = Container()
