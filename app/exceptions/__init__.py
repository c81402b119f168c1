"""
Custom exceptions package.
"""
from app.exceptions.custom_exceptions import (
    AppError,
    ValidationError,
    NotFoundError,
    DatabaseError,
    ServiceUnavailableError,
    validate_required_fields
)

__all__ = [
    "AppError",
    "ValidationError",
    "NotFoundError",
    "DatabaseError",
    "ServiceUnavailableError",
    "validate_required_fields"
]
