"""
Domain-specific exceptions for the Fraud Monitoring API.

These exceptions represent business logic violations and are mapped
to appropriate HTTP status codes in the API layer.
"""

from typing import Any


class FraudMonitoringError(Exception):
    """Base exception for all fraud monitoring domain errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ValidationError(FraudMonitoringError):
    """
    Raised when input data fails validation.

    Examples:
    - Non-positive transaction amount
    - Non-positive scoring threshold
    - Required field missing

    HTTP Status: 400 Bad Request
    """

    pass


class NotFoundError(FraudMonitoringError):
    """
    Raised when a requested resource does not exist.

    Examples:
    - Transaction ID not found

    HTTP Status: 404 Not Found
    """

    pass


class ConflictError(FraudMonitoringError):
    """
    Raised when operation conflicts with current state.

    Examples:
    - Duplicate transaction_id
    - Unique constraint violation

    HTTP Status: 409 Conflict
    """

    pass


ERROR_STATUS_MAP = {
    ValidationError: 400,
    NotFoundError: 404,
    ConflictError: 409,
}


def get_status_code(error: Exception) -> int:
    """
    Get the HTTP status code for a given exception.

    Args:
        error: The exception instance

    Returns:
        HTTP status code (defaults to 500 for unknown errors)
    """
    return ERROR_STATUS_MAP.get(type(error), 500)
