"""Domain errors."""

from typing import Any, Optional


class DomainError(Exception):
    """Base exception for all domain errors."""

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} - {self.details}"
        return self.message


class OutOfRangeError(DomainError, ValueError):
    """Raised when an argument falls outside its range of valid values."""

    DEFAULT_MESSAGE = "Specified argument was out of the range of valid values."

    def __init__(
        self,
        param_name: str,
        message: str = DEFAULT_MESSAGE,
        actual_value: Any = None,
        **details: Any,
    ) -> None:
        self.param_name = param_name
        self.actual_value = actual_value
        super().__init__(
            message,
            {"param_name": param_name, "actual_value": actual_value, **details},
        )
