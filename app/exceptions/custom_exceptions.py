"""
Custom exceptions for the application.
Provides specific exception types for the error taxonomy of the API.
"""
from typing import Optional, Any, Dict, List


class AppError(Exception):
    """Base application error."""

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)


class ValidationError(AppError):
    """Validation error (400)."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, status_code=400, details=details)


class NotFoundError(AppError):
    """Resource not found error (404)."""

    def __init__(self, resource: str, identifier: Optional[str] = None):
        message = f"{resource} not found"
        if identifier:
            message += f": {identifier}"
        super().__init__(message, status_code=404, details={"resource": resource, "identifier": identifier})


class DatabaseError(AppError):
    """Database operation error (500)."""

    def __init__(self, message: str = "Database operation failed", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, status_code=500, details=details)


class ServiceUnavailableError(AppError):
    """Record store unreachable (503)."""

    def __init__(
        self,
        message: str = "Database not connected",
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message, status_code=503, details=details)


def _is_missing(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str) and not value.strip():
        return True
    # A zero amount is treated as not filled in
    if isinstance(value, (int, float)) and not isinstance(value, bool) and value == 0:
        return True
    return False


# Validation helpers
def validate_required_fields(data: Dict[str, Any], required_fields: List[str]) -> None:
    """
    Validate that all required fields are present and non-empty in data.

    Args:
        data: Data dictionary to validate
        required_fields: List of required field names

    Raises:
        ValidationError: If any required field is missing or blank
    """
    missing = [field for field in required_fields if field not in data or _is_missing(data[field])]
    if missing:
        raise ValidationError(
            f"Missing required field: {missing[0]}",
            details={"missing_fields": missing}
        )
